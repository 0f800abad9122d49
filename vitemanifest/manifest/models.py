"""Pydantic models describing Vite manifest records."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class Chunk(BaseModel):
    """One published module as recorded in Vite's ``manifest.json``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    source_path: Optional[str] = Field(
        default=None,
        alias="src",
        description="Path to the source file, relative to Vite's root.",
    )
    name: Optional[str] = Field(
        default=None,
        description="Logical Rollup chunk name; only defined for entry chunks.",
    )
    is_entry: bool = Field(default=False, alias="isEntry")
    is_dynamic_entry: bool = Field(default=False, alias="isDynamicEntry")
    file: str = Field(..., description="Published file, relative to Vite's build.outDir.")
    css: tuple[str, ...] = Field(default=(), description="Published CSS imported by this chunk.")
    assets: tuple[str, ...] = Field(default=(), description="Published non-JS/CSS assets.")
    imports: tuple[str, ...] = Field(default=(), description="Chunk names imported statically.")
    dynamic_imports: tuple[str, ...] = Field(
        default=(),
        alias="dynamicImports",
        description="Chunk names imported dynamically; never traversed.",
    )

    @field_validator("css", "assets", "imports", "dynamic_imports", "is_entry", "is_dynamic_entry", mode="before")
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    @property
    def is_script(self) -> bool:
        return self.file.endswith(".js")

    @property
    def is_stylesheet(self) -> bool:
        return self.file.endswith(".css")
