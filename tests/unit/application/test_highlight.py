"""Unit tests for match highlighting."""
from __future__ import annotations

from rental_search.application.search import HighlightSegment, highlight_room, highlight_text
from rental_search.testing.generators import RoomBuilder


def _joined(segments: list[HighlightSegment]) -> str:
    return "".join(s.text for s in segments)


class TestHighlightText:
    def test_no_match_single_plain_segment(self):
        assert highlight_text("Hello World", "xyz") == [HighlightSegment("Hello World", False)]

    def test_empty_query_single_plain_segment(self):
        assert highlight_text("Hello World", "") == [HighlightSegment("Hello World", False)]

    def test_whitespace_query_single_plain_segment(self):
        assert highlight_text("Hello World", "   ") == [HighlightSegment("Hello World", False)]

    def test_preserves_source_casing(self):
        assert highlight_text("Hello World", "world") == [
            HighlightSegment("Hello ", False),
            HighlightSegment("World", True),
        ]

    def test_match_at_start_has_no_prefix(self):
        result = highlight_text("Hello World", "Hello")
        assert result[0] == HighlightSegment("Hello", True)
        assert result[1] == HighlightSegment(" World", False)

    def test_match_in_middle_has_three_segments(self):
        result = highlight_text("Deluxe Room A101", "room")
        assert [s.highlighted for s in result] == [False, True, False]
        assert result[1].text == "Room"

    def test_only_first_occurrence(self):
        result = highlight_text("abcabc", "b")
        assert [s.text for s in result] == ["a", "b", "cabc"]
        assert sum(s.highlighted for s in result) == 1

    def test_query_is_trimmed_before_slicing(self):
        result = highlight_text("Room A101", " a101 ")
        assert result == [HighlightSegment("Room ", False), HighlightSegment("A101", True)]

    def test_whole_text_match(self):
        assert highlight_text("A101", "a101") == [HighlightSegment("A101", True)]

    def test_empty_text(self):
        assert highlight_text("", "a") == [HighlightSegment("", False)]

    def test_expanding_lowercase_characters_keep_coverage(self):
        text = "İstanbul suite"
        result = highlight_text(text, "suite")
        assert _joined(result) == text
        assert result[-1] == HighlightSegment("suite", True)


class TestHighlightRoom:
    def test_segments_per_field(self):
        room = RoomBuilder().with_tenant("Tran Thi B")(room_code="B201", room_name="Premium Room B201")
        fields = highlight_room(room, "b2")
        assert fields["room_code"][0] == HighlightSegment("B2", True)
        assert [s.text for s in fields["room_name"]] == ["Premium Room ", "B2", "01"]
        assert fields["tenant_name"] == [HighlightSegment("Tran Thi B", False)]

    def test_room_without_tenant(self):
        fields = highlight_room(RoomBuilder()(), "a")
        assert fields["tenant_name"] == [HighlightSegment("", False)]
