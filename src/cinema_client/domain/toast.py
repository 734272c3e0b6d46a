"""Transient notification shown to the user."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ToastSeverity(str, Enum):
    INFO = "info"
    ERROR = "error"
    SUCCESS = "success"


@dataclass(frozen=True, slots=True)
class ToastMessage:
    """Snapshot of the toast channel."""

    text: str = ""
    severity: ToastSeverity = ToastSeverity.INFO
    visible: bool = False
    auto_hide_after_ms: int = 4000

    def __post_init__(self) -> None:
        if self.auto_hide_after_ms < 0:
            raise ValueError("auto_hide_after_ms must be non-negative")


__all__ = ["ToastMessage", "ToastSeverity"]
