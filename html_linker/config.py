"""
Configuration Management

``LinkerOptions`` holds the options of a single pipeline run.
``LinkerSettings`` loads defaults for those options (and logging) from
environment variables and ``.env``.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_OUT_DIR = "out"


def _string_filled(value: Any) -> bool:
    return isinstance(value, str) and len(value.strip()) > 0


class LinkerOptions(BaseModel):
    """
    Options of one pipeline run.

    Directory options are resolved against ``root_dir``; blank or
    non-string values count as unset.
    """

    model_config = ConfigDict(frozen=True)

    html_from_dir: Optional[str] = None
    js_from_dir: Optional[str] = None
    css_from_dir: Optional[str] = None
    out_dir: str = DEFAULT_OUT_DIR
    root_dir: Path = Field(default_factory=Path.cwd)

    @field_validator("html_from_dir", "js_from_dir", "css_from_dir", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Optional[str]:
        return value if _string_filled(value) else None

    @field_validator("out_dir", mode="before")
    @classmethod
    def _default_out_dir(cls, value: Any) -> str:
        return value if _string_filled(value) else DEFAULT_OUT_DIR

    @property
    def html_dir(self) -> Optional[Path]:
        return self.root_dir / self.html_from_dir if self.html_from_dir else None

    @property
    def js_dir(self) -> Optional[Path]:
        return self.root_dir / self.js_from_dir if self.js_from_dir else None

    @property
    def css_dir(self) -> Optional[Path]:
        return self.root_dir / self.css_from_dir if self.css_from_dir else None

    @property
    def out_path(self) -> Path:
        return self.root_dir / self.out_dir


class LinkerSettings(BaseSettings):
    """
    Process settings

    All settings can be overridden via ``HTML_LINKER_*`` environment variables
    """

    model_config = SettingsConfigDict(
        env_prefix="HTML_LINKER_",
        env_file=".env",
        extra="ignore",
    )

    # Pipeline defaults
    html_from_dir: Optional[str] = None
    js_from_dir: Optional[str] = None
    css_from_dir: Optional[str] = None
    out_dir: str = DEFAULT_OUT_DIR

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_json: bool = False

    def to_options(self, root_dir: Optional[Path] = None, **overrides: Any) -> LinkerOptions:
        """Build run options from these settings; ``None`` overrides are ignored."""
        values = {
            "html_from_dir": self.html_from_dir,
            "js_from_dir": self.js_from_dir,
            "css_from_dir": self.css_from_dir,
            "out_dir": self.out_dir,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        if root_dir is not None:
            values["root_dir"] = root_dir
        return LinkerOptions(**values)


@lru_cache()
def get_settings() -> LinkerSettings:
    """
    Get cached settings instance
    """
    return LinkerSettings()
