"""Run configuration (canonical runner definition)."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ib_common.config.env import (
    parse_bool_env,
    parse_float_env,
    parse_int_env,
    parse_path_env,
)

DEFAULT_CYCLE_COUNT = 1
DEFAULT_SAMPLE_INTERVAL = 100_000
DEFAULT_WINDOW_SECONDS = 1.0


class RunConfig(BaseModel):
    """Settings for one benchmark invocation."""

    model_config = ConfigDict(frozen=True)

    cycle_count: int = Field(default=DEFAULT_CYCLE_COUNT, ge=1, description="Number of timed cycles to run")
    window_seconds: float = Field(
        default=DEFAULT_WINDOW_SECONDS,
        gt=0,
        description="Length of each counting window in seconds",
    )
    sample_interval: int = Field(
        default=DEFAULT_SAMPLE_INTERVAL,
        gt=0,
        description="Record a progress sample every N iterations",
    )
    alignment_pause: bool = Field(default=True, description="Pause before a cycle that would start on a multiple-of-8 second")

    # Output layout
    base_dir: Path = Field(default_factory=Path.cwd, description="Directory under which log folders are created")
    detail_dir_name: str = Field(default="CycleLogDetail", description="Folder holding one detail log per cycle")
    summary_dir_name: str = Field(default="CycleLog", description="Folder holding the append-only summary log")
    summary_file_name: str = Field(default="Iteration.txt", description="File name of the summary log")

    @model_validator(mode="after")
    def validate_layout(self) -> "RunConfig":
        names = {
            "detail_dir_name": self.detail_dir_name,
            "summary_dir_name": self.summary_dir_name,
            "summary_file_name": self.summary_file_name,
        }
        for field_name, value in names.items():
            if not value or not value.strip():
                raise ValueError(f"RunConfig: '{field_name}' must be non-empty")
            if "/" in value or "\\" in value:
                raise ValueError(f"RunConfig: '{field_name}' must be a single path component")
        return self

    @property
    def detail_dir(self) -> Path:
        return self.base_dir / self.detail_dir_name

    @property
    def summary_dir(self) -> Path:
        return self.base_dir / self.summary_dir_name

    @property
    def summary_log_path(self) -> Path:
        return self.summary_dir / self.summary_file_name

    @classmethod
    def from_env(cls, **overrides: Any) -> "RunConfig":
        """Build a config from ``IB_*`` environment variables.

        Explicit keyword overrides win over the environment; ``None`` values
        in ``overrides`` are ignored so CLI options can be passed through
        unconditionally.
        """
        values: dict[str, Any] = {}
        window = parse_float_env(os.environ.get("IB_WINDOW_SECONDS"))
        if window is not None:
            values["window_seconds"] = window
        interval = parse_int_env(os.environ.get("IB_SAMPLE_INTERVAL"))
        if interval is not None:
            values["sample_interval"] = interval
        pause = parse_bool_env(os.environ.get("IB_ALIGNMENT_PAUSE"))
        if pause is not None:
            values["alignment_pause"] = pause
        base_dir = parse_path_env(os.environ.get("IB_BASE_DIR"))
        if base_dir is not None:
            values["base_dir"] = base_dir
        values.update({key: val for key, val in overrides.items() if val is not None})
        return cls(**values)
