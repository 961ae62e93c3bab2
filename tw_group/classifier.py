from __future__ import annotations

from typing import Tuple

from .categories import CATEGORY_TABLE, Category


def split_variant(token: str) -> Tuple[str | None, str]:
    """Split `hover:bg-blue-600` into ('hover', 'bg-blue-600').

    Only the first colon outside square brackets counts, so arbitrary
    values like `bg-[url(a:b)]` stay whole. Returns (None, token) when
    there is no variant prefix.
    """
    depth = 0
    for i, ch in enumerate(token):
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth = max(depth - 1, 0)
        elif ch == ":" and depth == 0 and i > 0:
            return token[:i], token[i + 1:]
    return None, token


def _bare(token: str) -> str:
    # important modifier and negative values do not change the category
    if token.startswith("!"):
        token = token[1:]
    if token.startswith("-"):
        token = token[1:]
    return token


def classify(token: str) -> Category:
    variant, _ = split_variant(token)
    if variant is not None:
        subject, want_variant = variant, True
    else:
        subject, want_variant = _bare(token), False
    for rule in CATEGORY_TABLE:
        for matcher in rule.matchers:
            if matcher.variant is want_variant and matcher.matches(subject):
                return rule.name
    return Category.OTHER
