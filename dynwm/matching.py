"""Filtering of menu items against the typed input."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Callable, Iterable

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _fold(text: str) -> str:
    return text.translate(_ASCII_LOWER)


@dataclass(eq=False)
class Item:
    """One selectable line of the menu; ``out`` marks items already printed."""

    text: str
    out: bool = False


def cistrstr(haystack: str, needle: str) -> int | None:
    """Return the index of ``needle`` in ``haystack`` ignoring ASCII case, or None."""
    if not needle:
        return 0
    index = _fold(haystack).find(_fold(needle))
    return None if index < 0 else index


def _strstr(haystack: str, needle: str) -> int | None:
    index = haystack.find(needle)
    return None if index < 0 else index


def tokenize(text: str) -> list[str]:
    """Split the input into the space-separated tokens that are matched individually."""
    return [token for token in text.split(" ") if token]


def match(items: Iterable[Item], text: str, case_insensitive: bool = False) -> list[Item]:
    """Return the items containing every token of ``text``.

    Exact matches come first, then items starting with the first token, then
    the remaining substring matches; each group keeps the input order.
    """
    tokens = tokenize(text)
    find: Callable[[str, str], int | None] = cistrstr if case_insensitive else _strstr
    fold: Callable[[str], str] = _fold if case_insensitive else (lambda s: s)
    exact: list[Item] = []
    prefix: list[Item] = []
    substring: list[Item] = []
    first = fold(tokens[0]) if tokens else ""
    whole = fold(text)
    for item in items:
        if not all(find(item.text, token) is not None for token in tokens):
            continue
        candidate = fold(item.text)
        if not tokens or candidate == whole:
            exact.append(item)
        elif candidate.startswith(first):
            prefix.append(item)
        else:
            substring.append(item)
    return exact + prefix + substring