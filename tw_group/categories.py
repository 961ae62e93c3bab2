"""
Category table for Tailwind utility classes.

The table is traversed from index 0 and the first rule with a matching
matcher wins. `other` has no matchers and is always last; it is what
`classify()` returns when nothing else claims a token.

Two kinds of matcher exist:
 - utility matchers look at a plain token (`mt-4`, `rounded-lg`)
 - variant matchers look at the prefix before the first top-level colon
   (`hover` in `hover:bg-blue-600`)
A variant token is only ever tested against variant matchers, so the
suffix after the colon never decides its category.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple


class Category(str, Enum):
    SIZE = "size"
    LAYOUT = "layout"
    SPACING = "spacing"
    BORDER = "border"
    BACKGROUND = "background"
    TEXT = "text"
    EFFECTS = "effects"
    STATES = "states"
    RESPONSIVE = "responsive"
    OTHER = "other"


@dataclass(frozen=True)
class Matcher:
    pattern: re.Pattern
    variant: bool = False

    def matches(self, subject: str) -> bool:
        return self.pattern.fullmatch(subject) is not None


@dataclass(frozen=True)
class CategoryRule:
    name: Category
    label: str
    matchers: Tuple[Matcher, ...]
    priority: int


def stems(*names: str, bare: bool = False) -> Matcher:
    """Stem followed by `-suffix`; with bare=True the stem alone matches too."""
    alt = "|".join(re.escape(n) for n in sorted(names, key=len, reverse=True))
    suffix = r"(?:-.+)?" if bare else r"-.+"
    return Matcher(re.compile(rf"(?:{alt}){suffix}"))


def words(*names: str) -> Matcher:
    alt = "|".join(re.escape(n) for n in sorted(names, key=len, reverse=True))
    return Matcher(re.compile(rf"(?:{alt})"))


def variants(*names: str, pattern: str | None = None) -> Matcher:
    alts = [re.escape(n) for n in sorted(names, key=len, reverse=True)]
    if pattern:
        alts.append(pattern)
    return Matcher(re.compile(rf"(?:{'|'.join(alts)})"), variant=True)


_BREAKPOINTS = ("sm", "md", "lg", "xl", "2xl")

# (category, label, matchers) in precedence order
_RULES = [
    (Category.SIZE, "Size", (
        stems("w", "h", "min-w", "max-w", "min-h", "max-h", "size"),
    )),
    (Category.LAYOUT, "Layout", (
        stems("flex", "grid", "inline", "block", "table", "flow-root", "contents", "hidden",
              "container", "isolate", "visible", "invisible", "collapse", bare=True),
        words("static", "fixed", "absolute", "relative", "sticky", "isolation-auto",
              "grow", "shrink"),
        stems("top", "right", "bottom", "left", "inset", "start", "end", "z", "float", "clear",
              "isolation", "order", "basis", "grow", "shrink", "columns", "box", "aspect", "object"),
        stems("place", "items", "justify", "content", "self", "auto-cols", "auto-rows",
              "cols", "rows", "col", "row", "gap", "flow"),
        stems("overflow", "overscroll"),
    )),
    (Category.SPACING, "Spacing", (
        stems("m", "mx", "my", "mt", "mr", "mb", "ml", "ms", "me",
              "p", "px", "py", "pt", "pr", "pb", "pl", "ps", "pe", "space"),
    )),
    (Category.BORDER, "Border", (
        stems("border", "divide", "ring", "rounded", "outline", bare=True),
    )),
    (Category.BACKGROUND, "Background", (
        stems("bg", "from", "via", "to", "gradient-to", "backdrop"),
    )),
    (Category.TEXT, "Text", (
        stems("text", "font", "tracking", "leading", "decoration", "underline-offset",
              "whitespace", "break", "placeholder", "indent", "align", "list", "hyphens",
              "line-clamp", "caret", "accent"),
        words("underline", "overline", "line-through", "no-underline", "uppercase",
              "lowercase", "capitalize", "normal-case", "truncate", "italic", "not-italic",
              "antialiased", "subpixel-antialiased", "text-ellipsis", "text-clip",
              "ordinal", "slashed-zero", "lining-nums", "oldstyle-nums",
              "proportional-nums", "tabular-nums", "normal-nums"),
        variants("selection", "placeholder", "file", "marker", "first-letter", "first-line"),
    )),
    (Category.EFFECTS, "Effects", (
        stems("shadow", "opacity", "mix-blend", "bg-blend", "filter", "blur", "brightness",
              "contrast", "grayscale", "hue-rotate", "invert", "saturate", "sepia",
              "drop-shadow", "transition", "transform", bare=True),
        stems("duration", "ease", "delay", "animate", "scale", "rotate", "translate",
              "skew", "origin", "appearance", "cursor", "select", "pointer-events",
              "will-change", "touch", "snap", "scroll"),
        stems("resize", bare=True),
    )),
    (Category.STATES, "States", (
        variants("hover", "focus", "focus-within", "focus-visible", "active", "visited",
                 "target", "disabled", "enabled", "checked", "indeterminate", "required",
                 "invalid", "valid", "read-only", "open", "first", "last", "only", "odd",
                 "even", "empty", "before", "after", "dark", "motion-safe",
                 "motion-reduce", "print", "group", "peer",
                 pattern=r"(?:group|peer)-[\w\-\[\]/=.]+"),
    )),
    (Category.RESPONSIVE, "Responsive", (
        variants(*_BREAKPOINTS, *(f"max-{bp}" for bp in _BREAKPOINTS),
                 pattern=r"(?:min|max)-\[[^\]]+\]"),
    )),
    (Category.OTHER, "Other", ()),
]

CATEGORY_TABLE: Tuple[CategoryRule, ...] = tuple(
    CategoryRule(name=name, label=label, matchers=tuple(matchers), priority=i)
    for i, (name, label, matchers) in enumerate(_RULES)
)

_BY_NAME = {rule.name: rule for rule in CATEGORY_TABLE}


def rule_for(category: Category) -> CategoryRule:
    return _BY_NAME[Category(category)]


def label_for(category: Category) -> str:
    return rule_for(category).label


def check_table(table: Iterable[CategoryRule] = CATEGORY_TABLE) -> None:
    """Raise ValueError when a table breaks the ordering/catch-all invariants."""
    rules = list(table)
    names = [r.name for r in rules]
    if len(names) != len(set(names)):
        raise ValueError("duplicate category names")
    if not rules or rules[-1].name is not Category.OTHER:
        raise ValueError("other must be the last rule")
    for i, r in enumerate(rules):
        if r.priority != i:
            raise ValueError(f"priority of {r.name.value} is not its index")
        if (r.name is Category.OTHER) != (not r.matchers):
            raise ValueError(f"only other may (and must) have an empty matcher list: {r.name.value}")
