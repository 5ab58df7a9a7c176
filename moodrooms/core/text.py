"""Tokenizing and fuzzy word similarity"""

import string
from typing import List

# Pairs scoring at or below this are noise
MATCH_THRESHOLD = 0.8
CONTAINMENT_SIMILARITY = 0.8

# Inner apostrophes and hyphens are part of words ("can't", "laid-back")
_STRIP_CHARS = string.punctuation + "‘’“”…—–"


def tokenize(text: str) -> List[str]:
    """Lowercase, split on whitespace runs and trim punctuation off each token."""
    if not text:
        return []
    tokens = []
    for raw in text.lower().split():
        token = raw.strip(_STRIP_CHARS)
        if token:
            tokens.append(token)
    return tokens


def normalize(text: str) -> str:
    return " ".join(tokenize(text))


def levenshtein(a: str, b: str) -> int:
    if a == b:
        return 0
    if len(a) > len(b):
        a, b = b, a
    if not a:
        return len(b)

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        current = [i]
        for j, cb in enumerate(b, 1):
            cost = 0 if ca == cb else 1
            current.append(min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost))
        previous = current
    return previous[-1]


def similarity(a: str, b: str) -> float:
    """Score two words in [0, 1].

    Equal words score 1.0, a word containing the other scores 0.8, anything
    else is one minus the edit distance over the longer length.
    """
    shorter, longer = (a, b) if len(a) <= len(b) else (b, a)
    if shorter == longer:
        return 1.0
    if not shorter:
        return 0.0
    if shorter in longer:
        return CONTAINMENT_SIMILARITY
    return 1.0 - levenshtein(shorter, longer) / len(longer)


def is_match(a: str, b: str) -> bool:
    return similarity(a, b) > MATCH_THRESHOLD
