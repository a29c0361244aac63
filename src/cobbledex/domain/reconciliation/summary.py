"""Completion counts over merged entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cobbledex.domain.model import MergedEntry


@dataclass(frozen=True, slots=True)
class ProgressSummary:
    captured: int
    total: int

    @property
    def missing(self) -> int:
        return self.total - self.captured

    @property
    def ratio(self) -> float:
        if self.total == 0:
            return 0.0
        return self.captured / self.total


def summarize(entries: Iterable[MergedEntry]) -> ProgressSummary:
    captured = 0
    total = 0
    for entry in entries:
        total += 1
        if entry.captured:
            captured += 1
    return ProgressSummary(captured=captured, total=total)
