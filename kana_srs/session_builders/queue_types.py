"""
Typed queue state shared by the session builder and the study controller.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from kana_srs.sm2.item_state import LearningItem


@dataclass
class StudyQueue:
    """
    Session-scoped queue of items still to present.

    total_size is fixed when the session starts; completed counts
    submitted reviews.
    """
    items: list[LearningItem] = field(default_factory=list)
    total_size: int = 0
    completed: int = 0
    correct: int = 0

    @classmethod
    def start(cls, items: list[LearningItem]) -> "StudyQueue":
        return cls(items=list(items), total_size=len(items))

    @property
    def current(self) -> Optional[LearningItem]:
        """Head of the queue, or None when the session is finished."""
        return self.items[0] if self.items else None

    @property
    def remaining(self) -> int:
        return len(self.items)

    @property
    def is_finished(self) -> bool:
        return not self.items

    @property
    def accuracy(self) -> float:
        """Share of this session's reviews that passed (0 when none)."""
        if self.completed == 0:
            return 0.0
        return self.correct / self.completed

    def advance(self, is_correct: bool = False) -> Optional[LearningItem]:
        """
        Drop the head after a submitted review and return the new head.
        """
        if self.items:
            self.items.pop(0)
            self.completed += 1
            if is_correct:
                self.correct += 1
        return self.current
