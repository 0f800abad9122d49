from __future__ import annotations

from vitemanifest import PreloadType, PreloadTypeRegistry
from vitemanifest.preload import FONT_PRELOAD_TYPES, IMAGE_PRELOAD_TYPES


def test_registry_starts_empty() -> None:
    registry = PreloadTypeRegistry()

    assert len(registry) == 0
    assert registry.for_asset("assets/logo.png") is None


def test_register_adds_rule_for_extension() -> None:
    registry = PreloadTypeRegistry()
    registry.register("json", "application/json", "fetch")

    assert registry["json"] == PreloadType("application/json", "fetch")
    assert registry.for_asset("assets/data.1f2e.json") == PreloadType("application/json", "fetch")


def test_register_replaces_existing_rule() -> None:
    registry = PreloadTypeRegistry()
    registry.register_images()
    registry.register("svg", "image/svg+xml", "fetch")

    assert registry["svg"].preload_as == "fetch"
    assert registry["png"].preload_as == "image"


def test_bulk_registrations_cover_images_and_fonts() -> None:
    registry = PreloadTypeRegistry()
    registry.register_images()
    registry.register_fonts()

    assert set(registry) == set(IMAGE_PRELOAD_TYPES) | set(FONT_PRELOAD_TYPES)
    assert registry["ico"] == PreloadType("image/x-icon", "image")
    assert registry["jpg"] == registry["jpeg"]
    assert registry["woff2"] == PreloadType("font/woff2", "font")


def test_extension_uses_text_after_last_dot() -> None:
    registry = PreloadTypeRegistry()
    registry.register_fonts()

    assert registry.for_asset("assets/inter.v4.woff2") == PreloadType("font/woff2", "font")
    assert registry.for_asset("assets/inter.v4.woff2.map") is None
    assert registry.for_asset("assets/INTER.WOFF2") is None
