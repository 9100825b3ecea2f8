"""Token post-processing helpers."""

from __future__ import annotations

from collections.abc import Sequence

_SIGNS = ("+", "-")


def merge_scientific_notation_tokens(tokens: Sequence[str]) -> list[str]:
    """Join ``<digits>e``, ``+``/``-``, ``<digits>`` triples into one token.

    >>> merge_scientific_notation_tokens(["1e", "-", "3", "x"])
    ['1e-3', 'x']
    """
    merged: list[str] = []
    i = 0
    while i < len(tokens):
        if i + 2 < len(tokens):
            lhs, sign, rhs = tokens[i], tokens[i + 1], tokens[i + 2]
            if _is_scientific_lhs(lhs) and sign in _SIGNS and _is_ascii_digits(rhs):
                merged.append(f"{lhs}{sign}{rhs}")
                i += 3
                continue
        merged.append(tokens[i])
        i += 1
    return merged


def _is_scientific_lhs(token: str) -> bool:
    return len(token) >= 2 and token[-1] in "eE" and _is_ascii_digits(token[:-1])


def _is_ascii_digits(s: str) -> bool:
    return bool(s) and all("0" <= c <= "9" for c in s)
