"""Facade tying the manifest index, preload registry and tag emission together."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import EntryNotFound, ManifestError
from .manifest import Chunk, ManifestIndex, load_manifest, resolve_closure
from .preload import PreloadTypeRegistry
from .tags import Tags, dev_tags, emit_tags

logger = logging.getLogger(__name__)


class ViteManifest:
    """Resolve entry points against Vite's manifest of published files.

    In production mode the manifest at ``manifest_path`` is read once, here,
    and used to generate preload links for all dependencies plus CSS and JS
    tags for the requested entries. In development mode the manifest is
    never read; Vite's dev server injects CSS and JS itself.

    ``base_path`` is the public prefix assets are served from (for example
    ``/dist/``) and should match Vite's ``base`` option, or point at a CDN.
    It is concatenated as-is, so it should end with ``/``.
    """

    def __init__(
        self,
        dev: bool,
        manifest_path: str | Path,
        base_path: str,
        *,
        preload_types: PreloadTypeRegistry | None = None,
    ) -> None:
        self._dev = dev
        self._manifest_path = Path(manifest_path)
        self._base_path = base_path
        self._preload_types = preload_types if preload_types is not None else PreloadTypeRegistry()
        if dev:
            self._index = ManifestIndex()
        else:
            self._index = load_manifest(self._manifest_path)
            logger.debug("Using Vite manifest %s (base path %s)", self._manifest_path, base_path)

    @property
    def dev(self) -> bool:
        return self._dev

    @property
    def base_path(self) -> str:
        return self._base_path

    @property
    def manifest_path(self) -> Path:
        return self._manifest_path

    @property
    def index(self) -> ManifestIndex:
        return self._index

    @property
    def preload_types(self) -> PreloadTypeRegistry:
        return self._preload_types

    def preload(self, ext: str, mime_type: str, preload_as: str) -> None:
        """Preload assets with extension ``ext`` (no leading dot) using the given type."""
        self._preload_types.register(ext, mime_type, preload_as)

    def preload_images(self) -> None:
        self._preload_types.register_images()

    def preload_fonts(self) -> None:
        self._preload_types.register_fonts()

    def resolve(self, *entries: str) -> Tags:
        """Create preload, CSS and JS tags for the given entry point(s)."""
        if self._dev:
            return dev_tags(entries, self._base_path)
        return emit_tags(resolve_closure(entries, self._index), self._preload_types, self._base_path)

    def closure(self, *entries: str) -> dict[str, Chunk]:
        """Return the chunks loaded by the given entries, in emission order."""
        if self._dev:
            raise ManifestError("No manifest is loaded in development mode.")
        return resolve_closure(entries, self._index)

    def url_for(self, name: str) -> str:
        """Return the public URL of a published chunk or, in dev mode, of its source."""
        if self._dev:
            return self._base_path + name
        chunk = self._index.get(name)
        if chunk is None:
            raise EntryNotFound(name)
        return self._base_path + chunk.file
