"""Emit preload, stylesheet and script tags for a resolved set of chunks."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from html import escape
from typing import Iterable, Mapping

from .manifest.models import Chunk
from .preload import PreloadTypeRegistry

VITE_CLIENT = "@vite/client"


@dataclass(frozen=True, slots=True)
class Tags:
    """HTML blocks to embed in a page.

    ``preload`` and ``css`` belong in ``<head>``; ``js`` goes before the
    closing ``</body>``.
    """

    preload: str = ""
    css: str = ""
    js: str = ""

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def modulepreload_link(url: str) -> str:
    return f'<link rel="modulepreload" href="{escape(url)}" />'


def preload_link(url: str, *, preload_as: str, mime_type: str) -> str:
    return f'<link rel="preload" as="{escape(preload_as)}" type="{escape(mime_type)}" href="{escape(url)}" />'


def stylesheet_link(url: str) -> str:
    return f'<link rel="stylesheet" href="{escape(url)}" />'


def module_script(url: str) -> str:
    return f'<script type="module" src="{escape(url)}"></script>'


def preload_tags(chunks: Iterable[Chunk], registry: PreloadTypeRegistry, base_path: str) -> list[str]:
    """Module preloads for JS chunks plus preloads for registered asset types."""
    tags: list[str] = []
    for chunk in chunks:
        if chunk.is_script:
            tags.append(modulepreload_link(base_path + chunk.file))
        for asset in chunk.assets:
            rule = registry.for_asset(asset)
            if rule is None:
                continue
            tags.append(preload_link(base_path + asset, preload_as=rule.preload_as, mime_type=rule.mime_type))
    return tags


def style_tags(chunks: Iterable[Chunk], base_path: str) -> list[str]:
    """Stylesheet links; a CSS entry links its own file instead of its imports."""
    tags: list[str] = []
    for chunk in chunks:
        if chunk.is_entry and chunk.is_stylesheet:
            tags.append(stylesheet_link(base_path + chunk.file))
            continue
        tags.extend(stylesheet_link(base_path + css) for css in chunk.css)
    return tags


def script_tags(chunks: Iterable[Chunk], base_path: str) -> list[str]:
    # Dynamic entries are loaded at runtime by the application itself.
    return [
        module_script(base_path + chunk.file)
        for chunk in chunks
        if chunk.is_entry and not chunk.is_dynamic_entry and chunk.is_script
    ]


def emit_tags(closure: Mapping[str, Chunk], registry: PreloadTypeRegistry, base_path: str) -> Tags:
    """Build all three tag blocks from a resolved closure, in closure order."""
    chunks = list(closure.values())
    return Tags(
        preload="\n".join(preload_tags(chunks, registry, base_path)),
        css="\n".join(style_tags(chunks, base_path)),
        js="\n".join(script_tags(chunks, base_path)),
    )


def dev_tags(entries: Iterable[str], base_path: str) -> Tags:
    """Tags for the Vite dev server, which injects CSS and handles preloading."""
    scripts = [module_script(base_path + VITE_CLIENT)]
    scripts.extend(module_script(base_path + entry) for entry in entries)
    return Tags(js="\n".join(scripts))
