"""Common utility functions for disjointset."""

from disjointset.utils.timestamps import get_iso_timestamp

__all__ = ["get_iso_timestamp"]
