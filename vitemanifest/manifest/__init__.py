"""Manifest data structures, loading and graph resolution."""

from .index import ManifestIndex, load_manifest
from .models import Chunk
from .resolver import resolve_closure

__all__ = [
    "Chunk",
    "ManifestIndex",
    "load_manifest",
    "resolve_closure",
]
