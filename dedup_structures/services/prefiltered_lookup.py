"""
Bloom-filter guarded membership lookup.

This module puts a BloomFilterSet in front of an expensive authoritative
membership check (a database query, a remote call) so that items the
filter has never seen are answered without calling the check.
"""

import logging
from typing import Callable

from dedup_structures.services.bloom_filter_set import BloomFilterSet, Item

logger = logging.getLogger(__name__)


class PrefilteredLookup:
    """
    Membership lookup that consults a Bloom filter first.

    A negative from the filter is final because the filter has no false
    negatives. A positive is confirmed with the authoritative check, which
    also tells us how often the filter produced a false positive.

    Attributes:
        bloom: Bloom filter recording every added item
        authoritative_check: Callable returning the true membership answer
        bloom_rejections: Lookups answered by the filter alone
        authoritative_checks: Lookups forwarded to the authoritative check
        false_positives: Forwarded lookups the authoritative check rejected
    """

    def __init__(self, bloom: BloomFilterSet, authoritative_check: Callable[[Item], bool]):
        """
        Initialize the lookup.

        Args:
            bloom: Filter that must contain every item the authoritative
                source holds
            authoritative_check: Exact membership test
        """
        self.bloom = bloom
        self.authoritative_check = authoritative_check
        self.bloom_rejections = 0
        self.authoritative_checks = 0
        self.false_positives = 0

    def add(self, item: Item) -> None:
        """Record item in the filter."""
        self.bloom.add(item)

    def contains(self, item: Item) -> bool:
        """
        Exact membership test.

        Args:
            item: Item to look up

        Returns:
            True if the authoritative source holds item
        """
        if not self.bloom.might_contain(item):
            self.bloom_rejections += 1
            return False

        self.authoritative_checks += 1
        found = bool(self.authoritative_check(item))
        if not found:
            self.false_positives += 1
            logger.debug(f"Bloom filter false positive for item: {item!r:.50}")
        return found

    def __contains__(self, item: Item) -> bool:
        return self.contains(item)

    def get_statistics(self) -> dict:
        """
        Get lookup statistics.

        Returns:
            Dictionary with rejection, check and false-positive counts and
            the observed false-positive rate among forwarded lookups
        """
        observed_rate = (
            self.false_positives / self.authoritative_checks
            if self.authoritative_checks else 0.0
        )
        return {
            'bloom_rejections': self.bloom_rejections,
            'authoritative_checks': self.authoritative_checks,
            'false_positives': self.false_positives,
            'observed_false_positive_rate': observed_rate
        }

    def reset_statistics(self) -> None:
        """Reset statistics counters."""
        self.bloom_rejections = 0
        self.authoritative_checks = 0
        self.false_positives = 0
