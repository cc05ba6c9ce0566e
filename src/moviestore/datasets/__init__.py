"""
Datasets package public API.

Re-export the catalog generator so callers can write:
    from moviestore.datasets import make_catalog, SUPPORTED_DISTS
"""

from .generators import make_catalog, SUPPORTED_DISTS

__all__ = ["make_catalog", "SUPPORTED_DISTS"]
