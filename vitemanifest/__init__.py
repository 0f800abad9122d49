"""Resolve Vite build manifests into preload, stylesheet and script tags."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as load_pkg_version
from pathlib import Path
import tomllib

from .errors import EntryNotFound, ManifestError, ManifestMalformed, ManifestUnreadable, NotAnEntryPoint
from .manifest import Chunk, ManifestIndex, load_manifest, resolve_closure
from .preload import PreloadType, PreloadTypeRegistry
from .tags import Tags, emit_tags
from .vite import ViteManifest

__all__ = [
    "__version__",
    "Chunk",
    "EntryNotFound",
    "ManifestError",
    "ManifestIndex",
    "ManifestMalformed",
    "ManifestUnreadable",
    "NotAnEntryPoint",
    "PreloadType",
    "PreloadTypeRegistry",
    "Tags",
    "ViteManifest",
    "emit_tags",
    "load_manifest",
    "resolve_closure",
]


def _read_local_project_version() -> str:
    """Read the project version from pyproject.toml when the package is uninstalled."""
    pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return "0.0.0"
    return data.get("project", {}).get("version", "0.0.0")


try:
    __version__ = load_pkg_version("vitemanifest")
except PackageNotFoundError:
    __version__ = _read_local_project_version()
