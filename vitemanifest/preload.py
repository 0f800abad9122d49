"""Registry of asset extensions that receive ``<link rel="preload">`` tags."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping


@dataclass(frozen=True, slots=True)
class PreloadType:
    """MIME type and ``as`` attribute used when preloading an asset."""

    mime_type: str
    preload_as: str


IMAGE_PRELOAD_TYPES: dict[str, PreloadType] = {
    "apng": PreloadType("image/apng", "image"),
    "avif": PreloadType("image/avif", "image"),
    "bmp": PreloadType("image/bmp", "image"),
    "cur": PreloadType("image/x-icon", "image"),
    "gif": PreloadType("image/gif", "image"),
    "ico": PreloadType("image/x-icon", "image"),
    "jpeg": PreloadType("image/jpeg", "image"),
    "jpg": PreloadType("image/jpeg", "image"),
    "png": PreloadType("image/png", "image"),
    "svg": PreloadType("image/svg+xml", "image"),
    "tif": PreloadType("image/tiff", "image"),
    "tiff": PreloadType("image/tiff", "image"),
    "webp": PreloadType("image/webp", "image"),
}

FONT_PRELOAD_TYPES: dict[str, PreloadType] = {
    "ttf": PreloadType("font/ttf", "font"),
    "otf": PreloadType("font/otf", "font"),
    "woff": PreloadType("font/woff", "font"),
    "woff2": PreloadType("font/woff2", "font"),
}


class PreloadTypeRegistry(Mapping[str, PreloadType]):
    """Extension-keyed preload rules, configured before tags are emitted.

    Extensions are stored without the leading dot and matched exactly.
    Registering an extension again replaces the previous rule.
    """

    def __init__(self, types: Mapping[str, PreloadType] | None = None) -> None:
        self._types: dict[str, PreloadType] = dict(types or {})

    def register(self, ext: str, mime_type: str, preload_as: str) -> None:
        self._types[ext] = PreloadType(mime_type, preload_as)

    def register_images(self) -> None:
        """Register all common web image formats."""
        self._types.update(IMAGE_PRELOAD_TYPES)

    def register_fonts(self) -> None:
        """Register common web font formats."""
        self._types.update(FONT_PRELOAD_TYPES)

    def for_asset(self, asset: str) -> PreloadType | None:
        """Return the rule matching the text after the asset's last dot."""
        return self._types.get(asset.rpartition(".")[2])

    def __getitem__(self, ext: str) -> PreloadType:
        return self._types[ext]

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)
