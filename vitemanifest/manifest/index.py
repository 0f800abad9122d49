"""Read-only index of manifest chunks and the loader that builds it."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Iterator, Mapping

from pydantic import ValidationError

from ..errors import ManifestMalformed, ManifestUnreadable
from .models import Chunk

logger = logging.getLogger(__name__)


class ManifestIndex(Mapping[str, Chunk]):
    """Mapping of chunk names to chunk records, fixed at construction."""

    def __init__(self, chunks: Mapping[str, Chunk] | None = None) -> None:
        self._chunks: dict[str, Chunk] = dict(chunks or {})

    @classmethod
    def from_data(cls, data: Mapping[str, Any], *, source: Path | None = None) -> "ManifestIndex":
        """Validate raw manifest records (already deserialized) into chunks."""
        chunks: dict[str, Chunk] = {}
        for name, record in data.items():
            if not isinstance(record, Mapping):
                raise ManifestMalformed(
                    f"Manifest record for '{name}' must be an object.",
                    path=source,
                )
            try:
                chunks[name] = Chunk.model_validate(record)
            except ValidationError as exc:
                raise ManifestMalformed(
                    f"Manifest record for '{name}' is invalid: {exc}",
                    path=source,
                ) from exc
        return cls(chunks)

    def __getitem__(self, name: str) -> Chunk:
        return self._chunks[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._chunks)

    def __len__(self) -> int:
        return len(self._chunks)

    def entries(self) -> dict[str, Chunk]:
        """Return entry chunks in manifest order."""
        return {name: chunk for name, chunk in self._chunks.items() if chunk.is_entry}


def load_manifest(path: str | Path) -> ManifestIndex:
    """Read and validate a Vite ``manifest.json`` file."""
    manifest_path = Path(path)
    try:
        readable = manifest_path.is_file() and os.access(manifest_path, os.R_OK)
    except OSError as exc:
        raise ManifestUnreadable(manifest_path) from exc
    if not readable:
        raise ManifestUnreadable(manifest_path)

    try:
        with manifest_path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except OSError as exc:
        raise ManifestUnreadable(manifest_path) from exc
    except json.JSONDecodeError as exc:
        raise ManifestMalformed(
            f"Manifest file {manifest_path} is not valid JSON: {exc}",
            path=manifest_path,
        ) from exc

    if not isinstance(data, dict):
        raise ManifestMalformed(
            f"Manifest file {manifest_path} does not define an object root.",
            path=manifest_path,
        )

    index = ManifestIndex.from_data(data, source=manifest_path)
    logger.debug("Loaded %d chunk(s) from %s", len(index), manifest_path)
    return index
