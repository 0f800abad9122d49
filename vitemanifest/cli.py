"""CLI entrypoints for inspecting Vite manifests."""

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from .config import ViteConfig, build_manifest, load_config
from .errors import ManifestError
from .tags import Tags
from .vite import ViteManifest

console = Console()
app = typer.Typer(help="Resolve Vite manifests into HTML tags.")


class TagSection(str, Enum):
    """Blocks of a Tags value that can be printed on their own."""

    PRELOAD = "preload"
    CSS = "css"
    JS = "js"


ConfigPathOption = Annotated[
    str,
    typer.Option("--config", "-c", help="Path to vite.yml or the directory containing it."),
]
DevFlag = Annotated[
    bool,
    typer.Option("--dev", help="Emit dev-server tags regardless of the configured mode."),
]
ManifestOption = Annotated[
    str | None,
    typer.Option("--manifest", "-m", help="Override the configured manifest.json path."),
]
BaseOption = Annotated[
    str | None,
    typer.Option("--base", "-b", help="Override the configured public base path."),
]


@app.command()
def tags(
    entries: Annotated[
        list[str],
        typer.Argument(..., help="Entry point chunk names, e.g. 'main.js'."),
    ],
    config_path: ConfigPathOption = ".",
    dev: DevFlag = False,
    manifest_path: ManifestOption = None,
    base_path: BaseOption = None,
    section: Annotated[
        TagSection | None,
        typer.Option("--section", "-s", help="Print a single block without headings."),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Emit machine-readable JSON instead of HTML blocks."),
    ] = False,
) -> None:
    """Print preload, CSS and JS tags for one or more entry points."""
    manifest = _load(config_path, dev=dev, manifest_path=manifest_path, base_path=base_path)
    try:
        result = manifest.resolve(*entries)
    except ManifestError as exc:
        console.print(f"[bold red]Cannot resolve entries[/]: {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if json_output:
        console.print_json(data=result.to_dict())
        return
    if section is not None:
        _print_block(getattr(result, section.value))
        return
    _print_tags(result)


@app.command()
def url(
    name: Annotated[str, typer.Argument(..., help="Chunk name to look up.")],
    config_path: ConfigPathOption = ".",
    dev: DevFlag = False,
    manifest_path: ManifestOption = None,
    base_path: BaseOption = None,
) -> None:
    """Print the public URL of a published chunk."""
    manifest = _load(config_path, dev=dev, manifest_path=manifest_path, base_path=base_path)
    try:
        resolved = manifest.url_for(name)
    except ManifestError as exc:
        console.print(f"[bold red]Unknown chunk[/]: {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    _print_block(resolved)


@app.command()
def entries(
    config_path: ConfigPathOption = ".",
    manifest_path: ManifestOption = None,
) -> None:
    """List the entry points recorded in the manifest."""
    manifest = _load(config_path, dev=False, manifest_path=manifest_path, base_path=None)
    if manifest.dev:
        console.print("[bold yellow]Development mode[/]: no manifest is loaded.")
        return

    found = manifest.index.entries()
    if not found:
        console.print(f"[bold yellow]No entry points[/] in {_display_path(manifest.manifest_path)}")
        return

    console.print(
        f"[bold green]Entry points[/]: {len(found)} of {len(manifest.index)} chunk(s) "
        f"in {_display_path(manifest.manifest_path)}"
    )
    for name, chunk in found.items():
        suffix = " (dynamic)" if chunk.is_dynamic_entry else ""
        console.print(f"- {escape(name)} -> {escape(chunk.file)}{suffix}", soft_wrap=True)


def _print_tags(result: Tags) -> None:
    for label, block in (("Preload", result.preload), ("CSS", result.css), ("JS", result.js)):
        if not block:
            console.print(f"[bold yellow]{label}[/]: none")
            continue
        console.print(f"[bold green]{label}[/]:")
        _print_block(block)


def _print_block(text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def _display_path(path: Path) -> str:
    try:
        return path.relative_to(Path.cwd()).as_posix()
    except ValueError:
        return path.as_posix()


def _load(
    config_path: str,
    *,
    dev: bool,
    manifest_path: str | None,
    base_path: str | None,
) -> ViteManifest:
    config = _load_config(config_path)
    try:
        if dev:
            config.dev = True
        if manifest_path:
            config.manifest_path = Path(manifest_path).resolve()
        if base_path is not None:
            config.base_path = base_path
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        return build_manifest(config)
    except ManifestError as exc:
        console.print(f"[bold red]Manifest error[/]: {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


def _load_config(path: str) -> ViteConfig:
    try:
        return load_config(path)
    except FileNotFoundError as exc:
        raise typer.BadParameter(f"Config file not found: {path}") from exc
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
