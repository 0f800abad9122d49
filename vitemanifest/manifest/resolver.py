"""Walk the static-import graph recorded in a manifest."""

from __future__ import annotations

from collections import deque
from typing import Mapping, Sequence

from ..errors import EntryNotFound, ManifestMalformed, NotAnEntryPoint
from .models import Chunk


def resolve_closure(entries: Sequence[str], index: Mapping[str, Chunk]) -> dict[str, Chunk]:
    """Collect the requested entries and every chunk they import statically.

    The result preserves discovery order: each entry is followed by its own
    static imports (breadth-first) before the next requested entry is
    visited. A chunk reached a second time keeps its first position.
    """
    closure: dict[str, Chunk] = {}

    for entry in entries:
        chunk = index.get(entry)
        if chunk is None:
            raise EntryNotFound(entry)
        if not chunk.is_entry:
            raise NotAnEntryPoint(entry)

        closure.setdefault(entry, chunk)

        pending: deque[tuple[str, str]] = deque((name, entry) for name in chunk.imports)
        while pending:
            name, importer = pending.popleft()
            if name in closure:
                continue
            imported = index.get(name)
            if imported is None:
                raise ManifestMalformed(f"Chunk '{importer}' imports unknown chunk '{name}'.")
            closure[name] = imported
            pending.extend((child, name) for child in imported.imports)

    return closure
