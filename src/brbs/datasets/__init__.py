"""Fixture datasets that seed the catalogs."""

from .loader import Dataset, DatasetError, load_dataset, seed_store

__all__ = ["Dataset", "DatasetError", "load_dataset", "seed_store"]
