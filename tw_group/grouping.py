from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Tuple

from .categories import Category
from .classifier import classify


WS_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class Group:
    category: Category
    tokens: Tuple[str, ...]


# categories in first-occurrence order; never contains an empty group
Grouping = Tuple[Group, ...]


def tokenize(class_string: str) -> List[str]:
    return [t for t in WS_RE.split(class_string) if t]


def group(class_string: str) -> Grouping:
    """Bucket tokens by category.

    Precedence in the category table decides which bucket a token joins;
    the bucket's position is where its category was first seen.
    """
    order: List[Category] = []
    buckets: Dict[Category, List[str]] = {}
    for token in tokenize(class_string):
        cat = classify(token)
        if cat not in buckets:
            buckets[cat] = []
            order.append(cat)
        buckets[cat].append(token)
    return tuple(Group(cat, tuple(buckets[cat])) for cat in order)


def grouping_to_dict(grouping: Grouping) -> Dict[str, List[str]]:
    return {g.category.value: list(g.tokens) for g in grouping}


def flatten(grouping: Grouping) -> List[str]:
    return [t for g in grouping for t in g.tokens]
