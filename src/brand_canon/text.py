"""Text folding, normalization and tokenization for brand matching.

Every comparison between two strings in this package goes through
``normalize`` so that alias lookups, canonical selection and sort keys
agree with each other:

- Diacritics folded to base Latin letters (Babē → Babe, tablečių → tableciu)
- Lowercase
- Whitespace runs collapsed to one space, ends trimmed
"""

from __future__ import annotations

import re
import unicodedata

# ---------------------------------------------------------------------------
# Diacritic folding
# ---------------------------------------------------------------------------

# Letters that NFD does not decompose into base + combining mark.
_LATIN_LIGATURES: dict[str, str] = {
    "ß": "ss", "ẞ": "SS",
    "æ": "ae", "Æ": "AE",
    "œ": "oe", "Œ": "OE",
    "ø": "o", "Ø": "O",
    "ł": "l", "Ł": "L",
    "đ": "d", "Đ": "D",
    "ð": "d", "Ð": "D",
    "þ": "th", "Þ": "Th",
    "ħ": "h", "Ħ": "H",
    "ı": "i",
    "ĸ": "k",
    "ŀ": "l", "Ŀ": "L",
    "ŉ": "'n",
    "ŋ": "n", "Ŋ": "N",
    "ŧ": "t", "Ŧ": "T",
    "ſ": "s",
}

_LIGATURE_TABLE = str.maketrans(_LATIN_LIGATURES)

# Combining diacritical marks (plus half marks and marks for symbols).
# Other combining marks, such as the kana voicing marks, are kept.
_COMBINING_MARK_RE = re.compile("[\u0300-\u036f\ufe20-\ufe2f\u20d0-\u20ff]")


def fold(text: str | None) -> str:
    """Remove diacritics but keep case and spacing.

    ``fold("Babē Lip Care")`` → ``"Babe Lip Care"``
    """
    if not text:
        return ""
    text = str(text).translate(_LIGATURE_TABLE)
    decomposed = unicodedata.normalize("NFD", text)
    stripped = _COMBINING_MARK_RE.sub("", decomposed)
    return unicodedata.normalize("NFC", stripped)


def normalize(text: str | None) -> str:
    """Normalize text: fold → lowercase → collapse whitespace → trim."""
    return " ".join(fold(text).lower().split())


# ---------------------------------------------------------------------------
# Tokenization
# ---------------------------------------------------------------------------

_DELIMITER_RE = re.compile(r"[-_]")
_EDGE_PUNCT_RE = re.compile(r"^[\W_]+|[\W_]+$")


def tokenize(title: str | None) -> list[str]:
    """Split a raw title into match-ready tokens.

    Hyphens and underscores count as spaces. Punctuation is trimmed from
    token edges only, so inner punctuation survives ("ginkgo&ginseng").

    ``tokenize("ULTRA-CLEAN Beauty: Gel")`` → ``["ultra", "clean", "beauty", "gel"]``
    """
    norm = _DELIMITER_RE.sub(" ", normalize(title))
    tokens = []
    for raw in norm.split(" "):
        token = _EDGE_PUNCT_RE.sub("", raw)
        if token:
            tokens.append(token)
    return tokens
