from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .preload import PreloadTypeRegistry
from .vite import ViteManifest

CONFIG_FILENAME = "vite.yml"


class PreloadTypeConfig(BaseModel):
    """Preload rule declared for a single file extension."""

    model_config = ConfigDict(populate_by_name=True)

    type: str = Field(..., description="MIME type emitted in the preload tag.")
    as_: str = Field(..., alias="as", description="Value of the preload tag's 'as' attribute.")


class ViteConfig(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    dev: bool = Field(
        default=False,
        description="Emit dev-server tags instead of reading the manifest.",
    )
    manifest_path: Path = Field(default=Path("dist/.vite/manifest.json"))
    base_path: str = Field(
        default="/dist/",
        description="Public prefix (path or CDN URL) for published assets; should match Vite's 'base'.",
    )
    preload_images: bool = Field(default=False, description="Preload common web image formats.")
    preload_fonts: bool = Field(default=False, description="Preload common web font formats.")
    preload_types: dict[str, PreloadTypeConfig] = Field(
        default_factory=dict,
        description="Additional preload rules keyed by file extension.",
    )

    @field_validator("manifest_path", mode="before")
    def _ensure_path(cls, value: Any) -> Path:
        return Path(value)

    @field_validator("base_path")
    def _ensure_trailing_slash(cls, value: str) -> str:
        text = value.strip()
        if not text.endswith("/"):
            text = f"{text}/"
        return text

    @field_validator("preload_types")
    def _normalize_extensions(cls, value: dict[str, PreloadTypeConfig]) -> dict[str, PreloadTypeConfig]:
        return {ext.strip().lstrip("."): rule for ext, rule in value.items()}

    def build_registry(self) -> PreloadTypeRegistry:
        registry = PreloadTypeRegistry()
        if self.preload_images:
            registry.register_images()
        if self.preload_fonts:
            registry.register_fonts()
        # Explicit rules override the bundled image and font sets.
        for ext, rule in self.preload_types.items():
            registry.register(ext, rule.type, rule.as_)
        return registry


def load_config(path: str | Path) -> ViteConfig:
    """Load configuration and resolve the manifest path based on the config location.

    ``path`` may point to a file (e.g., ``/app/vite.yml``) or a directory
    containing that file. A directory without a config file yields the
    defaults, anchored to that directory.
    """
    candidate = Path(path)
    data: dict[str, Any] = {}
    base_dir: Path
    if candidate.is_dir():
        config_file = candidate / CONFIG_FILENAME
        if config_file.exists():
            with config_file.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
        base_dir = candidate.resolve()
    else:
        if not candidate.exists():
            raise FileNotFoundError(candidate)
        with candidate.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
        base_dir = candidate.parent.resolve()

    if not isinstance(data, dict):
        raise ValueError(f"Configuration {candidate} should define a mapping.")

    cfg = ViteConfig(**data)
    if not cfg.manifest_path.is_absolute():
        cfg.manifest_path = (base_dir / cfg.manifest_path).resolve()
    return cfg


def build_manifest(config: ViteConfig) -> ViteManifest:
    """Construct the facade described by ``config``."""
    return ViteManifest(
        dev=config.dev,
        manifest_path=config.manifest_path,
        base_path=config.base_path,
        preload_types=config.build_registry(),
    )
