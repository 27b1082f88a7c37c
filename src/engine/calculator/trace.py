"""Step observers for the calculation engine.

The engine reports each intermediate stage through an ``on_step`` callable
``(step_name, values) -> None``. The default is a no-op.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

StepObserver = Callable[[str, dict[str, Any]], None]


def noop_observer(step: str, values: dict[str, Any]) -> None:
    pass


def logging_observer(logger: logging.Logger, level: int = logging.DEBUG) -> StepObserver:
    """Build an observer that writes every step to a logger."""

    def _observe(step: str, values: dict[str, Any]) -> None:
        if logger.isEnabledFor(level):
            formatted = ", ".join(f"{k}={_fmt(v)}" for k, v in values.items())
            logger.log(level, "%s: %s", step, formatted)

    return _observe


@dataclass
class RecordingObserver:
    """Observer that keeps every step in memory.

    Example:
        >>> recorder = RecordingObserver()
        >>> calc_trading_plan(..., on_step=recorder)
        >>> recorder.last("cost")["total_commission"]
    """

    steps: list[tuple[str, dict[str, Any]]] = field(default_factory=list)

    def __call__(self, step: str, values: dict[str, Any]) -> None:
        self.steps.append((step, dict(values)))

    def names(self) -> list[str]:
        return [name for name, _ in self.steps]

    def last(self, step: str) -> dict[str, Any] | None:
        for name, values in reversed(self.steps):
            if name == step:
                return values
        return None

    def count(self, step: str) -> int:
        return sum(1 for name, _ in self.steps if name == step)


def _fmt(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.6f}"
    return str(value)
