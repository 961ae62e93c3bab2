from __future__ import annotations

import logging

from .grouping import group, tokenize
from .options import RenderOptions

log = logging.getLogger(__name__)

TOO_FEW_TOKENS = "too-few-tokens"
MULTILINE = "multiline"
SINGLE_CATEGORY = "single-category"


def gate_reason(class_string: str, opts: RenderOptions) -> str | None:
    """Why the string must be left alone, or None when it should be regrouped."""
    if len(tokenize(class_string)) < opts.min_tokens:
        return TOO_FEW_TOKENS
    # already spread over lines -> assume it was grouped before
    if "\n" in class_string:
        return MULTILINE
    if len(group(class_string)) <= 1:
        return SINGLE_CATEGORY
    return None


def should_group(class_string: str, opts: RenderOptions) -> bool:
    reason = gate_reason(class_string, opts)
    if reason is not None:
        log.debug("skip %r: %s", class_string, reason)
    return reason is None
