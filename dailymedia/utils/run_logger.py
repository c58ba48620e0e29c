"""Utilities for keeping per-run selection logs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .files import ensure_dir, write_json


@dataclass(slots=True)
class StepLogPaths:
    """Convenience container with derived log file paths."""

    input_path: Path
    output_path: Path


class RunLogger:
    """Persists step inputs and outputs under ``<base_dir>/<run_id>``.

    Constructed without a ``base_dir`` the logger is disabled and every call is a
    no-op, so selection stays free of file system side effects by default.
    """

    def __init__(self, base_dir: str | Path | None = None) -> None:
        self._base_dir = ensure_dir(base_dir) if base_dir else None

    @property
    def enabled(self) -> bool:
        return self._base_dir is not None

    def step_paths(self, run_id: str, step_name: str) -> StepLogPaths:
        """Return the paths used for logging a specific step."""
        if self._base_dir is None:
            raise RuntimeError("RunLogger has no base directory configured.")
        run_root = self._base_dir / run_id
        return StepLogPaths(
            input_path=run_root / f"{step_name}-input.json",
            output_path=run_root / f"{step_name}-output.json",
        )

    def log_input(self, run_id: str, step_name: str, payload: Any) -> None:
        """Persist the arguments a step was called with."""
        if self.enabled:
            write_json(self.step_paths(run_id, step_name).input_path, payload)

    def log_output(self, run_id: str, step_name: str, payload: Any) -> None:
        """Persist the structured result of a step."""
        if self.enabled:
            write_json(self.step_paths(run_id, step_name).output_path, payload)
