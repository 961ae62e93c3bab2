from __future__ import annotations

import logging
from dataclasses import dataclass

from .gate import gate_reason
from .grouping import Grouping, group
from .options import DEFAULT_OPTIONS, RenderOptions
from .render import render

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormatResult:
    text: str
    changed: bool
    reason: str | None = None  # why nothing changed
    grouping: Grouping = ()


def format_classes(class_string: str, opts: RenderOptions = DEFAULT_OPTIONS) -> FormatResult:
    """Gate, group and render; returns the input untouched when the gate says no."""
    opts.validate()
    reason = gate_reason(class_string, opts)
    if reason is not None:
        log.debug("unchanged (%s): %r", reason, class_string)
        return FormatResult(text=class_string, changed=False, reason=reason)
    grouping = group(class_string)
    text = render(grouping, opts)
    log.debug("grouped %d tokens into %d categories", sum(len(g.tokens) for g in grouping), len(grouping))
    return FormatResult(text=text, changed=True, grouping=grouping)


def format_class_string(class_string: str, opts: RenderOptions = DEFAULT_OPTIONS) -> str:
    return format_classes(class_string, opts).text
