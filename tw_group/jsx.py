"""
Lint-and-fix front end for JSX/TSX sources.

Two shapes are picked up (regex scan, no JS parser):

  className="mt-4 flex ..."          -> className={clsx(// Layout "flex", ...)}
  className={clsx("mt-4 flex ...")}  -> className={clsx(// Layout "flex", ...)}

A clsx call with more than one string argument is already grouped and is
never matched, so fixing twice is a no-op.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .errors import ConfigError
from .formatter import format_classes
from .options import DEFAULT_OPTIONS, OutputFormat, RenderOptions

log = logging.getLogger(__name__)

ATTR_MESSAGE = "Tailwind classes should be grouped by category"
CALL_MESSAGE = "Tailwind classes in clsx should be grouped by category"

DEFAULT_ATTRIBUTES = ("className", "class")

_DQ = r'"(?P<dq>(?:[^"\\\n]|\\.)*)"'
_SQ = r"'(?P<sq>(?:[^'\\\n]|\\.)*)'"


@dataclass(frozen=True)
class ClassLiteral:
    kind: str  # "attribute" | "call"
    start: int  # span that gets replaced
    end: int
    value: str


@dataclass(frozen=True)
class Finding:
    line: int
    column: int
    message: str
    start: int
    end: int
    replacement: str


def _names_alt(names: Iterable[str]) -> str:
    return "|".join(re.escape(n) for n in names)


def _attr_re(attributes: Iterable[str]) -> re.Pattern:
    # JSX attribute strings may span lines and have no escapes
    return re.compile(
        rf"(?<=\s)(?:{_names_alt(attributes)})\s*=\s*"
        r"(?P<lit>\"(?P<dq>[^\"]*)\"|'(?P<sq>[^']*)')"
    )


def _call_re(attributes: Iterable[str], callee: str) -> re.Pattern:
    return re.compile(
        rf"(?<=\s)(?:{_names_alt(attributes)})\s*=\s*\{{\s*"
        rf"(?P<call>{re.escape(callee)}\(\s*(?:{_DQ}|{_SQ})\s*\))\s*\}}"
    )


_TAG_OPEN = re.compile(r"<[A-Za-z][\w.:-]*\s")


def _tag_start(source: str, pos: int) -> int:
    """Offset of the `<` of the opening tag that holds pos, or -1.

    Walks back over earlier attributes; `{...}` expressions are skipped, a
    `>` or `;` outside braces means pos is not inside a tag.
    """
    depth = 0
    for i in range(pos - 1, -1, -1):
        ch = source[i]
        if ch == "}":
            depth += 1
        elif ch == "{":
            if depth == 0:
                return -1
            depth -= 1
        elif depth:
            continue
        elif ch in ">;":
            return -1
        elif ch == "<":
            return i if _TAG_OPEN.match(source, i) else -1
    return -1


def _inside_js_string(source: str, pos: int) -> bool:
    # odd quote count before pos on its line, or odd backticks before pos in the file
    line_start = source.rfind("\n", 0, pos) + 1
    head = re.sub(r"\\.", "", source[line_start:pos])
    if head.count("'") % 2 or head.count('"') % 2:
        return True
    return re.sub(r"\\.", "", source[:pos]).count("`") % 2 == 1


def _in_jsx_tag(source: str, pos: int) -> bool:
    start = _tag_start(source, pos)
    return start >= 0 and not _inside_js_string(source, start)


def _unescape(value: str) -> str:
    return re.sub(r"\\(.)", r"\1", value)


def find_class_literals(
    source: str,
    attributes: Iterable[str] = DEFAULT_ATTRIBUTES,
    callee: str = "clsx",
) -> List[ClassLiteral]:
    """Class strings of JSX attributes, in source order.

    Only attributes inside an opening tag count; `el.className = "..."` and
    markup inside JS strings are left alone.
    """
    attributes = tuple(attributes)
    found: List[ClassLiteral] = []
    for m in _attr_re(attributes).finditer(source):
        if not _in_jsx_tag(source, m.start()):
            continue
        value = m.group("dq") if m.group("dq") is not None else m.group("sq")
        found.append(ClassLiteral("attribute", m.start("lit"), m.end("lit"), value))
    for m in _call_re(attributes, callee).finditer(source):
        if not _in_jsx_tag(source, m.start()):
            continue
        raw = m.group("dq") if m.group("dq") is not None else m.group("sq")
        found.append(ClassLiteral("call", m.start("call"), m.end("call"), _unescape(raw)))
    found.sort(key=lambda lit: lit.start)
    return found


def _line_indent(source: str, pos: int) -> str:
    line_start = source.rfind("\n", 0, pos) + 1
    line = source[line_start:pos]
    return line[: len(line) - len(line.lstrip())]


def _position(source: str, pos: int) -> Tuple[int, int]:
    line = source.count("\n", 0, pos) + 1
    column = pos - (source.rfind("\n", 0, pos) + 1) + 1
    return line, column


def _wrap(kind: str, rendered: str, fmt: OutputFormat) -> str:
    if fmt is OutputFormat.ARRAY:
        rendered = rendered + '.join(" ")'
    return "{" + rendered + "}" if kind == "attribute" else rendered


def lint_source(
    source: str,
    opts: RenderOptions = DEFAULT_OPTIONS,
    attributes: Iterable[str] = DEFAULT_ATTRIBUTES,
) -> List[Finding]:
    opts.validate()
    if opts.format not in (OutputFormat.CLSX, OutputFormat.ARRAY):
        raise ConfigError(f"format {opts.format.value!r} cannot be spliced into JSX (use clsx or array)")
    findings: List[Finding] = []
    for lit in find_class_literals(source, attributes, opts.callee):
        local = opts.with_(base_indent=_line_indent(source, lit.start))
        result = format_classes(lit.value, local)
        if not result.changed:
            continue
        line, column = _position(source, lit.start)
        message = ATTR_MESSAGE if lit.kind == "attribute" else CALL_MESSAGE
        findings.append(Finding(
            line=line,
            column=column,
            message=message,
            start=lit.start,
            end=lit.end,
            replacement=_wrap(lit.kind, result.text, opts.format),
        ))
    return findings


def fix_source(
    source: str,
    opts: RenderOptions = DEFAULT_OPTIONS,
    attributes: Iterable[str] = DEFAULT_ATTRIBUTES,
) -> Tuple[str, int]:
    findings = lint_source(source, opts, attributes)
    text = source
    # back to front keeps earlier offsets valid
    for f in sorted(findings, key=lambda f: f.start, reverse=True):
        text = text[:f.start] + f.replacement + text[f.end:]
    if findings:
        log.debug("rewrote %d class attributes", len(findings))
    return text, len(findings)
