"""Application search – match highlighting.

Splits a string around the first case-insensitive occurrence of the query.
Joining the segment texts always gives back the input unchanged.
"""
from __future__ import annotations

from dataclasses import dataclass

from rental_search.application.search.query import normalize_query
from rental_search.kernel.types import Room

__all__ = ["HighlightSegment", "highlight_room", "highlight_text"]


@dataclass(frozen=True)
class HighlightSegment:
    text: str
    highlighted: bool = False


def _fold(text: str) -> str:
    """Lower-case *text* keeping one output character per input character."""
    folded = text.lower()
    if len(folded) == len(text):
        return folded
    # Some characters expand on lower() (e.g. "İ"); keep those as-is so
    # indices into the folded text stay valid in the original.
    return "".join(ch.lower() if len(ch.lower()) == 1 else ch for ch in text)


def highlight_text(text: str, query: str | None) -> list[HighlightSegment]:
    """Return ``[prefix?, match, suffix?]`` segments for the first match.

    The highlighted slice keeps the casing of *text*, not of *query*. No
    query or no match gives a single plain segment.
    """
    q = normalize_query(query)
    if not q:
        return [HighlightSegment(text)]

    index = _fold(text).find(q)
    if index == -1:
        return [HighlightSegment(text)]

    end = index + len(q)
    segments: list[HighlightSegment] = []
    if index > 0:
        segments.append(HighlightSegment(text[:index]))
    segments.append(HighlightSegment(text[index:end], highlighted=True))
    if end < len(text):
        segments.append(HighlightSegment(text[end:]))
    return segments


def highlight_room(room: Room, query: str | None) -> dict[str, list[HighlightSegment]]:
    """Segments for each matchable field of *room*, keyed by field name."""
    return {
        "room_code": highlight_text(room.room_code or "", query),
        "room_name": highlight_text(room.room_name or "", query),
        "tenant_name": highlight_text(room.tenant_name, query),
    }
