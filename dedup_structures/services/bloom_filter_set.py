"""
Bloom filter membership set.

This module implements a fixed-size probabilistic set with insertion and
membership test. It never reports a false negative and its false-positive
rate follows p = (1 - e^(-k*n/m))^k for m bits, k hash functions and n
distinct items.
"""

import logging
import math
from typing import Iterable, Iterator, Optional, Union

import mmh3
import numpy as np

from dedup_structures.models import BloomFilterConfig
from dedup_structures.utils.bloom_math import false_positive_rate

logger = logging.getLogger(__name__)

Item = Union[bytes, bytearray, memoryview, str]


class BloomFilterSet:
    """
    Bloom filter backed by a fixed, packed numpy bit array.

    Bits live eight to a byte in a uint8 array (bit i is bit i % 8 of
    byte i // 8), so the filter occupies ceil(size / 8) bytes.

    Bit positions come from 128-bit MurmurHash3 seeded with 0..k-1, so
    the same item always maps to the same bits in every process. Bits are
    only ever set, never cleared; there is no removal.

    Attributes:
        size: Number of bits (m)
        hash_count: Number of seeded hash functions (k)
        added_count: Number of add() calls, duplicates included
    """

    def __init__(self, size: int, hash_count: int):
        """
        Initialize an empty Bloom filter.

        Args:
            size: Number of bits
            hash_count: Number of hash functions

        Raises:
            ConfigurationError: If size or hash_count is not a positive integer
        """
        config = BloomFilterConfig(size=size, hash_count=hash_count)
        self.size = config.size
        self.hash_count = config.hash_count
        self.added_count = 0
        self._words = np.zeros((self.size + 7) // 8, dtype=np.uint8)

        logger.info(
            f"BloomFilterSet initialized with size={self.size} bits, "
            f"hash_count={self.hash_count}"
        )

    @classmethod
    def from_config(cls, config: BloomFilterConfig) -> 'BloomFilterSet':
        """Create a filter from a BloomFilterConfig."""
        return cls(size=config.size, hash_count=config.hash_count)

    def add(self, item: Item) -> None:
        """
        Insert item into the filter.

        Args:
            item: Bytes to insert; str is UTF-8 encoded

        Raises:
            TypeError: If item is neither bytes-like nor str
        """
        for index in self._indices(item):
            self._words[index >> 3] |= np.uint8(1 << (index & 7))
        self.added_count += 1

    def update(self, items: Iterable[Item]) -> None:
        """Insert every item in items."""
        for item in items:
            self.add(item)

    def might_contain(self, item: Item) -> bool:
        """
        Test whether item may have been added.

        Args:
            item: Bytes to test; str is UTF-8 encoded

        Returns:
            False if item was definitely never added, True if it probably was

        Examples:
            >>> bloom = BloomFilterSet(size=100, hash_count=2)
            >>> bloom.add(b"a")
            >>> bloom.might_contain(b"a")
            True
        """
        for index in self._indices(item):
            if not self._words[index >> 3] & (1 << (index & 7)):
                return False
        return True

    def __contains__(self, item: Item) -> bool:
        return self.might_contain(item)

    def bit_count(self) -> int:
        """
        Get the number of set bits.

        Returns:
            Count of bits equal to 1
        """
        return int(np.count_nonzero(np.unpackbits(self._words)))

    def estimated_false_positive_rate(self, item_count: Optional[int] = None) -> float:
        """
        Predicted false-positive rate for a given number of distinct items.

        Args:
            item_count: Distinct items inserted (default: number of add() calls)

        Returns:
            Predicted false-positive probability
        """
        if item_count is None:
            item_count = self.added_count
        return false_positive_rate(self.size, self.hash_count, item_count)

    def approximate_item_count(self) -> float:
        """
        Estimate the number of distinct items from the fill ratio.

        Uses n = -(m / k) * ln(1 - X / m) where X is the set bit count.

        Returns:
            Estimated distinct item count, or infinity if every bit is set
        """
        set_bits = self.bit_count()
        if set_bits == self.size:
            return math.inf
        return -(self.size / self.hash_count) * math.log(1.0 - set_bits / self.size)

    def bits(self) -> np.ndarray:
        """Return a read-only copy of the bits as a boolean array of length size."""
        unpacked = np.unpackbits(self._words, count=self.size, bitorder='little')
        unpacked = unpacked.astype(np.bool_)
        unpacked.flags.writeable = False
        return unpacked

    @property
    def nbytes(self) -> int:
        """Bytes used by the bit array."""
        return self._words.nbytes

    def _indices(self, item: Item) -> Iterator[int]:
        """Yield the hash_count bit positions for item."""
        data = self._to_bytes(item)
        for seed in range(self.hash_count):
            yield mmh3.hash128(data, seed, signed=False) % self.size

    @staticmethod
    def _to_bytes(item: Item) -> bytes:
        if isinstance(item, str):
            return item.encode('utf-8')
        if isinstance(item, (bytes, bytearray, memoryview)):
            return bytes(item)
        raise TypeError(f"item must be bytes or str, got {type(item).__name__}")
