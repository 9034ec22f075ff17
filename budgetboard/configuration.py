"""Mini README: Runtime configuration for Budget Board.

Structure:
    * BudgetboardSettings - Pydantic settings model read from the environment.
    * get_settings - cached accessor shared by the CLI and the web app.

Usage:
    Variables use the ``BUDGETBOARD_`` prefix (for example
    ``BUDGETBOARD_DATA_DIRECTORY``) and may also live in a ``.env`` file.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings

from .storage.store import STORAGE_KEY


class BudgetboardSettings(BaseSettings):
    """Runtime configuration for the budget dashboard."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    data_directory: Path = Field(
        Path("data"),
        description="Directory holding the persisted budget storage file.",
    )
    storage_file: str = Field(
        "budget_storage.json",
        description="File name of the key-value store inside the data directory.",
    )
    storage_key: str = Field(
        STORAGE_KEY,
        description="Key under which the serialised budget is stored.",
        min_length=1,
    )
    export_directory: Optional[Path] = Field(
        None,
        description="Where CLI exports are written. Defaults to the data directory.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level name, e.g. DEBUG or WARNING.",
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the dashboard to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the dashboard listens on.",
        ge=1,
        le=65535,
    )

    class Config:
        env_prefix = "BUDGETBOARD_"
        env_file = ".env"
        case_sensitive = False

    @validator("data_directory", pre=True)
    def _expand_path(cls, value: str | Path) -> Path:
        """Expand user directories and make sure the data directory exists."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def storage_path(self) -> Path:
        return self.data_directory / self.storage_file

    @property
    def resolved_export_directory(self) -> Path:
        return (self.export_directory or self.data_directory).expanduser()


@lru_cache()
def get_settings() -> BudgetboardSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return BudgetboardSettings()
