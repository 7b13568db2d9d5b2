"""Suggestion providers for Tab completion.

A provider maps the text typed so far to one completion candidate. The
editor calls it repeatedly with the same partial text while the user keeps
pressing Tab, so a provider may cycle through its candidates.
"""

from __future__ import annotations

import re
from typing import Iterable, Protocol, runtime_checkable

_WORD_BOUNDARY_RE = re.compile(r"[\s\-_./:]")


@runtime_checkable
class SuggestionProvider(Protocol):
    """Interface for completion sources."""

    def suggest(self, partial: str) -> str:
        """Return a completion for *partial* (may be empty)."""
        ...


def subsequence_score(query: str, text: str) -> float | None:
    """Score how well *query* matches *text* as an in-order subsequence.

    Returns ``None`` when the characters of *query* do not all appear in
    *text* in order. Lower score = better match: consecutive runs and hits
    at word boundaries are rewarded, gaps are penalised.
    """
    if not query:
        return 0.0
    if len(query) > len(text):
        return None

    query_index = 0
    score = 0.0
    last_match_index = -1
    consecutive_matches = 0

    for i, ch in enumerate(text):
        if query_index >= len(query):
            break
        if ch != query[query_index]:
            continue

        if last_match_index == i - 1:
            consecutive_matches += 1
            score -= consecutive_matches * 5
        else:
            consecutive_matches = 0
            if last_match_index >= 0:
                score += (i - last_match_index - 1) * 2

        if i == 0 or _WORD_BOUNDARY_RE.match(text[i - 1]):
            score -= 10

        score += i * 0.1
        last_match_index = i
        query_index += 1

    if query_index < len(query):
        return None
    return score


class CandidateSuggestionProvider:
    """Completes against a fixed list of candidate strings.

    Candidates starting with the partial text are offered first, in
    registration order. If none do, candidates containing the partial text
    as a subsequence are offered, best match first. Calling ``suggest``
    again with the same partial moves to the next match, wrapping around.
    When nothing matches, the partial text is returned unchanged.
    """

    def __init__(self, candidates: Iterable[str] = (), *, case_sensitive: bool = False) -> None:
        self._candidates: list[str] = []
        self._case_sensitive = case_sensitive
        self._last_partial: str | None = None
        self._index: int = -1
        for candidate in candidates:
            self.add(candidate)

    @property
    def candidates(self) -> list[str]:
        return list(self._candidates)

    def add(self, candidate: str) -> None:
        """Register an extra candidate; duplicates are ignored."""
        if candidate and candidate not in self._candidates:
            self._candidates.append(candidate)
            self._last_partial = None

    def matches(self, partial: str) -> list[str]:
        """All candidates that complete *partial*, in offer order."""
        needle = self._normalize(partial)

        prefixed = [c for c in self._candidates if self._normalize(c).startswith(needle)]
        if prefixed:
            return prefixed

        scored: list[tuple[float, int, str]] = []
        for position, candidate in enumerate(self._candidates):
            score = subsequence_score(needle, self._normalize(candidate))
            if score is not None:
                scored.append((score, position, candidate))
        scored.sort()
        return [candidate for _, _, candidate in scored]

    def suggest(self, partial: str) -> str:
        found = self.matches(partial)
        if not found:
            self._last_partial = None
            return partial

        if partial == self._last_partial:
            self._index = (self._index + 1) % len(found)
        else:
            self._last_partial = partial
            self._index = 0
        return found[self._index]

    def _normalize(self, text: str) -> str:
        return text if self._case_sensitive else text.lower()
