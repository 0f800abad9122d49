from __future__ import annotations

import re
from pathlib import Path

from typer.testing import CliRunner

from vitemanifest.cli import app

FIXTURE_MANIFEST = Path(__file__).resolve().parent / "fixtures" / "manifest.json"


def _write_config(path: Path, *, extra: str = "") -> None:
    path.write_text(
        f"manifest_path: {FIXTURE_MANIFEST.as_posix()}\nbase_path: /dist/\n{extra}",
        encoding="utf-8",
    )


def test_tags_prints_all_blocks() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        _write_config(Path("vite.yml"), extra="preload_images: true\n")

        result = runner.invoke(app, ["tags", "main.js"])

        assert result.exit_code == 0, result.output
        assert '<link rel="modulepreload" href="/dist/assets/main.4889e940.js" />' in result.output
        assert 'type="image/png"' in result.output
        assert '<link rel="stylesheet" href="/dist/assets/main.b82dbe22.css" />' in result.output
        assert '<script type="module" src="/dist/assets/main.4889e940.js"></script>' in result.output


def test_tags_section_prints_single_block() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        _write_config(Path("vite.yml"))

        result = runner.invoke(app, ["tags", "main.js", "views/foo.js", "--section", "js"])

        assert result.exit_code == 0, result.output
        assert result.output.strip() == '<script type="module" src="/dist/assets/main.4889e940.js"></script>'


def test_tags_json_output() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        _write_config(Path("vite.yml"))

        result = runner.invoke(app, ["tags", "main.js", "--json"])

        assert result.exit_code == 0, result.output
        assert '"preload"' in result.output
        assert '"css"' in result.output
        assert "shared.83069a53.js" in result.output


def test_tags_dev_flag_overrides_config() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        _write_config(Path("vite.yml"))

        result = runner.invoke(app, ["tags", "src/main.ts", "--dev", "--section", "js"])

        assert result.exit_code == 0, result.output
        assert "/dist/@vite/client" in result.output
        assert "/dist/src/main.ts" in result.output


def test_tags_unknown_entry_exits_with_error() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        _write_config(Path("vite.yml"))

        result = runner.invoke(app, ["tags", "missing.js"])

        assert result.exit_code == 1
        assert re.search(r"Entry\s+not\s+found\s+in\s+manifest", result.output)


def test_tags_non_entry_exits_with_error() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        _write_config(Path("vite.yml"))

        result = runner.invoke(app, ["tags", "_shared.83069a53.js"])

        assert result.exit_code == 1
        assert re.search(r"not\s+an\s+entry\s+point", result.output)


def test_missing_manifest_exits_with_error() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(app, ["url", "main.js"])

        assert result.exit_code == 1
        assert re.search(r"Manifest\s+file\s+not\s+found", result.output)


def test_url_with_manifest_and_base_overrides() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(
            app,
            ["url", "views/foo.js", "--manifest", str(FIXTURE_MANIFEST), "--base", "https://cdn.example.com/"],
        )

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "https://cdn.example.com/assets/foo.869aea0d.js"


def test_url_unknown_name_exits_with_error() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        _write_config(Path("vite.yml"))

        result = runner.invoke(app, ["url", "nope.js"])

        assert result.exit_code == 1
        assert "nope.js" in result.output


def test_entries_lists_entry_points() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        _write_config(Path("vite.yml"))

        result = runner.invoke(app, ["entries"])

        assert result.exit_code == 0, result.output
        assert "main.js -> assets/main.4889e940.js" in result.output
        assert "views/foo.js -> assets/foo.869aea0d.js (dynamic)" in result.output
        assert "_shared" not in result.output


def test_missing_config_file_is_bad_parameter() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(app, ["entries", "--config", "absent.yml"])

        assert result.exit_code == 2
