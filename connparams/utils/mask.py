"""Redact a value from diagnostic text."""

import itertools

MASK = "***"


def _safe_replacement(secret: str, replacement: str) -> str:
    """Return replacement, or a run of a character absent from secret when they share characters."""
    if replacement and not set(replacement) & set(secret):
        return replacement
    for code in itertools.chain(map(ord, "#?~"), itertools.count(0x2022)):
        char = chr(code)
        if char not in secret:
            return char * max(len(replacement), 1)


def mask(text: str, secret: str, replacement: str = MASK) -> str:
    """Return text with every occurrence of secret replaced; empty secrets leave text unchanged.

    The result never contains secret, even when secret is part of replacement.
    """
    if not secret:
        return text
    return text.replace(secret, _safe_replacement(secret, replacement))
