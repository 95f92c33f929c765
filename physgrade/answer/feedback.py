"""
Feedback assembly.

Evaluators collect their messages through a FeedbackBuilder, one per
validation call, so every item gets a fresh identifier and a normalized
shape before it reaches the result.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .result import FeedbackItem, FeedbackKind, FeedbackTarget


class FeedbackBuilder:
    """Ordered collection of feedback items for one result."""

    def __init__(self) -> None:
        self._items: list[FeedbackItem] = []

    def add(
        self,
        kind: FeedbackKind,
        target: FeedbackTarget,
        message: str,
        suggestion: Optional[str] = None,
    ) -> FeedbackItem:
        item = FeedbackItem(kind=kind, target=target, message=message, suggestion=suggestion)
        self._items.append(item)
        return item

    def success(self, target: FeedbackTarget, message: str, suggestion: Optional[str] = None) -> FeedbackItem:
        return self.add(FeedbackKind.SUCCESS, target, message, suggestion)

    def error(self, target: FeedbackTarget, message: str, suggestion: Optional[str] = None) -> FeedbackItem:
        return self.add(FeedbackKind.ERROR, target, message, suggestion)

    def warning(self, target: FeedbackTarget, message: str, suggestion: Optional[str] = None) -> FeedbackItem:
        return self.add(FeedbackKind.WARNING, target, message, suggestion)

    def hint(self, target: FeedbackTarget, message: str, suggestion: Optional[str] = None) -> FeedbackItem:
        return self.add(FeedbackKind.HINT, target, message, suggestion)

    def info(self, target: FeedbackTarget, message: str, suggestion: Optional[str] = None) -> FeedbackItem:
        return self.add(FeedbackKind.INFO, target, message, suggestion)

    def extend(self, items: Iterable[FeedbackItem]) -> None:
        """Append items produced elsewhere (sub-step results)."""
        self._items.extend(items)

    @property
    def items(self) -> list[FeedbackItem]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)


def format_number(value: float) -> str:
    """Compact display form: 49 -> '49', 0.5 -> '0.5', 1e-07 -> '1e-07'."""
    return f"{value:g}"


def format_quantity(value: float, unit: str | None) -> str:
    """Number followed by its unit, if any."""
    text = format_number(value)
    return f"{text} {unit}" if unit else text
