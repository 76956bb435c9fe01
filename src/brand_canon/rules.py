"""Placement, case and stopword rules for matched aliases.

A matched alias is rejected when:
  stopword                      → always (too generic to imply a brand)
  uppercase alias ("happy")     → raw title must start with the exact-case
                                  form ("HAPPY"), "Happy Baby" fails
  front-only first token        → alias must open the title
  front-or-second alias         → alias must be the 1st or 2nd word

Placement checks run against the diacritic-folded raw title and are
case-insensitive. Only the uppercase rule looks at case.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from .text import fold, normalize

if TYPE_CHECKING:
    from .config import Settings

_ALIAS_SPLIT_RE = re.compile(r"[\W_]+")


def is_separate_term(text: str, term: str) -> bool:
    """True when ``term`` occurs in ``text`` as a whole word, case-insensitively.

    Prevents partial-word hits such as "gum" inside "sugar gummies".
    Diacritics are not folded here; fold ``text`` first if needed.
    """
    if not term:
        return False
    escaped = re.escape(term)
    at_edges = re.fullmatch(
        rf"(?:{escaped}\s.*|.*\s{escaped}\s.*|.*\s{escaped})",
        text,
        re.IGNORECASE | re.DOTALL,
    )
    if at_edges:
        return True
    return re.search(rf"\b{escaped}\b", text, re.IGNORECASE) is not None


def first_token(alias: str) -> str:
    parts = [p for p in _ALIAS_SPLIT_RE.split(alias) if p]
    return parts[0] if parts else alias


class RuleGate:
    """Pluggable placement policy; sets are tuned per catalog."""

    def __init__(
        self,
        stopwords: Iterable[str] = (),
        front_only: Iterable[str] = (),
        front_or_second: Iterable[str] = (),
        uppercase_aliases: Mapping[str, str] | None = None,
    ) -> None:
        self.stopwords = frozenset(normalize(w) for w in stopwords)
        self.front_only = frozenset(normalize(w) for w in front_only)
        self.front_or_second = frozenset(normalize(w) for w in front_or_second)
        self.uppercase_aliases = {
            normalize(token): prefix for token, prefix in (uppercase_aliases or {}).items()
        }

    @classmethod
    def from_settings(cls, settings: Settings) -> RuleGate:
        return cls(
            stopwords=settings.stopwords,
            front_only=settings.front_only,
            front_or_second=settings.front_or_second,
            uppercase_aliases=settings.uppercase_aliases,
        )

    @classmethod
    def permissive(cls) -> RuleGate:
        """Gate with no restrictions at all."""
        return cls()

    def passes(self, raw_title: str | None, alias: str) -> bool:
        """Check whether ``alias`` may count as a brand mention in ``raw_title``."""
        norm_alias = normalize(alias)
        if not norm_alias:
            return False

        if norm_alias in self.stopwords:
            return False

        head = first_token(norm_alias)
        raw = str(raw_title or "")

        prefix = self.uppercase_aliases.get(head)
        if prefix is not None:
            if not re.match(rf"{re.escape(prefix)}(?:\b|[-_])", raw):
                return False

        folded = fold(raw)

        if head in self.front_only:
            return re.match(rf"{re.escape(head)}(?:\b|[-_])", folded, re.IGNORECASE) is not None

        if norm_alias in self.front_or_second:
            escaped = re.escape(norm_alias)
            return re.match(
                rf"(?:{escaped}\b|[^\s-]+[\s-]+{escaped}\b)", folded, re.IGNORECASE
            ) is not None

        return True
