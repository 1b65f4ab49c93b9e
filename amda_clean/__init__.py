"""Clean up a zipped export of per-artist media folders into a publishable archive."""

from .classify import ArtistBucket, classify_tree
from .config import CatalogConfig, load_config
from .pipeline import RunSummary, run

__all__ = ["ArtistBucket", "CatalogConfig", "RunSummary", "classify_tree", "load_config", "run"]
