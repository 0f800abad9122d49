"""Jinja2 helpers exposing manifest tags to templates."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from .tags import Tags
from .vite import ViteManifest


def make_tags_global(manifest: ViteManifest) -> Callable[..., Tags]:
    """Return a ``vite_tags(*entries)`` callable whose output survives autoescaping."""

    def vite_tags(*entries: str) -> Tags:
        tags = manifest.resolve(*entries)
        return Tags(
            preload=Markup(tags.preload),
            css=Markup(tags.css),
            js=Markup(tags.js),
        )

    return vite_tags


def install_globals(environment: Environment, manifest: ViteManifest) -> Environment:
    """Register ``vite_tags`` and ``vite_url`` on an existing environment.

    Typical layout::

        {% set assets = vite_tags("main.js") %}
        <head>{{ assets.preload }}{{ assets.css }}</head>
        <body>...{{ assets.js }}</body>
    """
    environment.globals["vite_tags"] = make_tags_global(manifest)
    environment.globals["vite_url"] = manifest.url_for
    return environment


def create_environment(templates_dir: Path, manifest: ViteManifest) -> Environment:
    environment = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    return install_globals(environment, manifest)
