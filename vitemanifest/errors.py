"""Exceptions raised while loading and resolving Vite manifests."""

from __future__ import annotations

from pathlib import Path


class ManifestError(RuntimeError):
    """Base class for manifest loading and resolution failures."""


class ManifestUnreadable(ManifestError):
    """Raised when the manifest file is missing or cannot be read."""

    def __init__(self, path: Path) -> None:
        try:
            exists = path.exists()
        except OSError:
            exists = True
        if exists:
            message = f"Manifest file is not readable: {path}"
        else:
            message = f"Manifest file not found: {path}"
        super().__init__(message)
        self.path = path


class ManifestMalformed(ManifestError):
    """Raised when manifest content violates the expected structure."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class EntryNotFound(ManifestError):
    """Raised when a requested name has no record in the manifest."""

    def __init__(self, entry: str) -> None:
        super().__init__(f"Entry not found in manifest: {entry}")
        self.entry = entry


class NotAnEntryPoint(ManifestError):
    """Raised when a requested chunk exists but is not flagged as an entry."""

    def __init__(self, entry: str) -> None:
        super().__init__(f"Chunk is not an entry point: {entry}")
        self.entry = entry
