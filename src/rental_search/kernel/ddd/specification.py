"""Specification pattern – composable boolean rules over candidates."""

from __future__ import annotations

import abc
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


class BaseSpecification(abc.ABC, Generic[T]):
    """Abstract base for specifications.

    Subclass and implement ``is_satisfied_by``; combine with ``&``::

        class IsVacant(BaseSpecification[Room]):
            def is_satisfied_by(self, candidate: Room) -> bool:
                return candidate.status is RoomStatus.VACANT

        spec = IsVacant() & PriceAtMost(3_000_000)
    """

    @abc.abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    def and_(self, other: "BaseSpecification[T]") -> "AllOf[T]":
        return AllOf([self, other])

    def __and__(self, other: "BaseSpecification[T]") -> "AllOf[T]":
        return self.and_(other)

    def select(self, candidates: Iterable[T]) -> list[T]:
        """Return a new list of the candidates that satisfy this rule, in order."""
        return [c for c in candidates if self.is_satisfied_by(c)]


class AllOf(BaseSpecification[T]):
    """Conjunction of any number of specifications.

    Nested ``AllOf`` operands are flattened; an empty conjunction is
    satisfied by every candidate.
    """

    def __init__(self, specs: Iterable[BaseSpecification[T]]) -> None:
        flat: list[BaseSpecification[T]] = []
        for spec in specs:
            if isinstance(spec, AllOf):
                flat.extend(spec.specs)
            else:
                flat.append(spec)
        self.specs: tuple[BaseSpecification[T], ...] = tuple(flat)

    def is_satisfied_by(self, candidate: T) -> bool:
        return all(spec.is_satisfied_by(candidate) for spec in self.specs)

    def __len__(self) -> int:
        return len(self.specs)

    def __repr__(self) -> str:
        return f"AllOf({list(self.specs)!r})"


__all__ = ["AllOf", "BaseSpecification"]
