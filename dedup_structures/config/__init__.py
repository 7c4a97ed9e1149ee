"""
Configuration module for the deduplication structures.

Provides environment variable loading for window and filter parameters.
"""

from .settings import Settings, get_settings, reset_settings

__all__ = ['Settings', 'get_settings', 'reset_settings']
