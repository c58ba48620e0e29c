"""Selector abstractions shared by the concrete daily media choices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from ..config import MediaConfig
from ..utils.run_logger import RunLogger


class Selector(Protocol):
    """A deterministic choice derived from a calendar date."""

    name: str

    def select(self, *args: Any, **kwargs: Any) -> Any:
        ...


@dataclass(slots=True)
class BaseSelector:
    """Convenience base for selectors needing config and logging support."""

    name: str
    run_id: str
    config: MediaConfig
    logger: RunLogger

    def log_input(self, payload: Any) -> None:
        """Persist the arguments of the selection."""
        self.logger.log_input(self.run_id, self.name, payload)

    def log_output(self, payload: Any) -> None:
        """Persist the selection result."""
        self.logger.log_output(self.run_id, self.name, payload)
