"""Completion markers: the delimiter pair a producer wraps a finished artifact in."""

from __future__ import annotations

from dataclasses import dataclass

from ..agent.presets import CODE_END, CODE_START, RECIPE_END, RECIPE_START


@dataclass(frozen=True)
class CompletionMarker:
    start: str
    end: str

    def span(self, text: str) -> tuple[int, int] | None:
        """Bounds of the first start marker and the end marker following it."""
        begin = text.find(self.start)
        if begin < 0:
            return None
        end = text.find(self.end, begin + len(self.start))
        if end < 0:
            return None
        return begin, end + len(self.end)

    def contains(self, text: str) -> bool:
        return self.span(text) is not None

    def extract(self, text: str) -> str | None:
        """The artifact, markers included."""
        bounds = self.span(text)
        if bounds is None:
            return None
        return text[bounds[0]:bounds[1]]


RECIPE_MARKER = CompletionMarker(RECIPE_START, RECIPE_END)
CODE_MARKER = CompletionMarker(CODE_START, CODE_END)
