"""Title → brand matching: n-gram scan over tokens, then deterministic ranking.

Every window of 1..``max_ngram_tokens`` tokens is joined three ways
(space, hyphen, underscore) and looked up in the alias index. A hit only
counts when the joined phrase is a whole word in the folded title and the
rule gate accepts it.

Candidate ordering (best first):
  1. earliest start token
  2. longest span
  3. normalized canonical, ascending
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .canonical import BrandIndex
from .rules import RuleGate, is_separate_term
from .schemas import MatchResult
from .text import fold, normalize, tokenize

logger = logging.getLogger(__name__)

MAX_NGRAM_TOKENS = 4

_JOINERS = (" ", "-", "_")


@dataclass(frozen=True)
class Candidate:
    canonical: str
    start_idx: int
    span_len: int

    def beats(self, other: Candidate) -> bool:
        if self.start_idx != other.start_idx:
            return self.start_idx < other.start_idx
        return self.span_len > other.span_len


def scan(
    raw_title: str | None,
    index: BrandIndex,
    gate: RuleGate | None = None,
    max_ngram_tokens: int = MAX_NGRAM_TOKENS,
) -> dict[str, Candidate]:
    """Best-positioned candidate per canonical found in ``raw_title``."""
    gate = gate or RuleGate.permissive()
    title = str(raw_title or "")
    tokens = tokenize(title)
    folded = fold(title)
    lookup = index.alias_to_canonical
    candidates: dict[str, Candidate] = {}

    for i in range(len(tokens)):
        for length in range(1, min(max_ngram_tokens, len(tokens) - i) + 1):
            span = tokens[i:i + length]
            for joiner in _JOINERS:
                variant = joiner.join(span)
                canonical = lookup.get(variant)
                if canonical is None:
                    continue
                if not is_separate_term(folded, variant):
                    continue
                if not gate.passes(title, variant):
                    continue

                found = Candidate(canonical, i, length)
                prev = candidates.get(canonical)
                if prev is None or found.beats(prev):
                    candidates[canonical] = found
                # the other joins describe the same span
                break

    return candidates


def rank(candidates: dict[str, Candidate]) -> list[str]:
    """Order canonicals best first; see module docstring."""
    ordered = sorted(
        candidates.values(),
        key=lambda c: (c.start_idx, -c.span_len, normalize(c.canonical)),
    )
    return [c.canonical for c in ordered]


def match_title(
    raw_title: str | None,
    index: BrandIndex,
    gate: RuleGate | None = None,
    max_ngram_tokens: int = MAX_NGRAM_TOKENS,
) -> MatchResult:
    """Tokenize → scan → rank a single title."""
    ordered = rank(scan(raw_title, index, gate, max_ngram_tokens))
    title = str(raw_title or "")
    logger.debug("%s -> %s", title, ",".join(ordered))
    return MatchResult(title=title, ordered_canonicals=ordered)
