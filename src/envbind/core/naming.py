"""Environment variable name derivation."""

import re
from typing import List, Optional

# An acronym ends where a capitalised word starts; digits stay attached to
# the word they follow.
_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z0-9]+|[A-Z]+[0-9]*|[0-9]+")


def split_words(identifier: str) -> List[str]:
    """Split an identifier on underscores and case boundaries.

    ``MultiWordVar`` -> ``["Multi", "Word", "Var"]``,
    ``MultiWordACRWithAutoSplit`` -> ``["Multi", "Word", "ACR", "With", "Auto", "Split"]``.
    """
    words: List[str] = []
    for part in identifier.split("_"):
        words.extend(_WORD_RE.findall(part))
    return words


def derive_segment(identifier: str, alt_name: Optional[str] = None) -> str:
    if alt_name:
        return alt_name.upper()
    return "_".join(split_words(identifier)).upper()


def join_key(prefix: str, segment: str) -> str:
    if not prefix:
        return segment
    return f"{prefix}_{segment}"
