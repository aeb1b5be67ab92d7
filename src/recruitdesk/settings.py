"""Pydantic-based settings loaded from YAML with env-var overrides."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import field_validator
from pydantic_settings import BaseSettings

from recruitdesk.models import SORT_DIRECTIONS, SORT_KEYS, SortState


_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


class AppSettings(BaseSettings):
    """Application configuration with YAML + env var support.

    Env vars are prefixed with ``RECRUITDESK_``.
    Example: ``RECRUITDESK_PROGRAM_ID=nau-data-science``
    """

    model_config = {"env_prefix": "RECRUITDESK_"}

    # --- program ---
    program_id: str = "demo-program-id"

    # --- candidate data ---
    data_file: str = ""  # JSON export; empty means use the demo provider
    demo_count: int = 24
    demo_seed: int = 42

    # --- view defaults ---
    default_sort_key: str = "match_score"
    default_sort_direction: str = "desc"

    # --- dashboard ---
    max_metrics: int = 12

    # --- paths ---
    state_dir: str = ".state"
    export_dir: str = "exports"

    @field_validator("default_sort_key")
    @classmethod
    def _check_sort_key(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in SORT_KEYS:
            raise ValueError(f"default_sort_key must be one of {', '.join(SORT_KEYS)}")
        return v

    @field_validator("default_sort_direction")
    @classmethod
    def _check_direction(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in SORT_DIRECTIONS:
            raise ValueError("default_sort_direction must be 'asc' or 'desc'")
        return v

    @property
    def default_sort(self) -> SortState:
        return SortState(self.default_sort_key, self.default_sort_direction)

    @property
    def preferences_db(self) -> Path:
        return Path(self.state_dir) / "preferences.db"

    # ---- factory ----

    @classmethod
    def from_yaml(cls, path: str | Path | None = None) -> "AppSettings":
        """Load settings from a YAML file, then overlay env vars.

        Env vars (``RECRUITDESK_*``) take priority over YAML values.
        """
        import os

        if path is None:
            path = _PROJECT_ROOT / "settings.yaml"
        path = Path(path)
        raw: dict[str, Any] = {}
        if path.exists():
            with open(path) as fh:
                raw = yaml.safe_load(fh) or {}

        # Let env vars override YAML: remove YAML keys that have an env override
        prefix = cls.model_config["env_prefix"]
        for key in list(raw.keys()):
            env_key = f"{prefix}{key.upper()}"
            if env_key in os.environ:
                del raw[key]

        return cls(**raw)
