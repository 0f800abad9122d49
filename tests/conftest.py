from __future__ import annotations

from pathlib import Path

import pytest

from vitemanifest import ManifestIndex, ViteManifest, load_manifest

FIXTURES = Path(__file__).resolve().parent / "fixtures"
MANIFEST_PATH = FIXTURES / "manifest.json"


@pytest.fixture
def manifest_path() -> Path:
    return MANIFEST_PATH


@pytest.fixture
def index() -> ManifestIndex:
    return load_manifest(MANIFEST_PATH)


@pytest.fixture
def production() -> ViteManifest:
    return ViteManifest(dev=False, manifest_path=MANIFEST_PATH, base_path="/dist/")


@pytest.fixture
def development() -> ViteManifest:
    return ViteManifest(dev=True, manifest_path=MANIFEST_PATH, base_path="/dist/")
