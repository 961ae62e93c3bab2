"""
Serializers for a Grouping.

  clsx      clsx(  // Label  "tok tok",  ...  )
  array     [  // Label  "tok tok",  ...  ]
  template  `  // Label  tok tok  ...  `
  mapping   {"layout": ["flex"], ...}   (json, no comments)

All renderers are pure: same grouping + options -> same bytes.
"""
from __future__ import annotations

import json
from typing import Callable, Dict, List

from .categories import label_for
from .errors import ConfigError
from .grouping import Grouping, grouping_to_dict
from .options import OutputFormat, RenderOptions


def quote(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def template_text(value: str) -> str:
    return value.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


def comment(label: str) -> str:
    return f"// {label}"


def _block(open_: str, close: str, body: List[str], opts: RenderOptions) -> str:
    if not body:
        return open_ + close
    inner = opts.base_indent + opts.indent
    lines = [open_]
    lines.extend(inner + line for line in body)
    lines.append(opts.base_indent + close)
    return "\n".join(lines)


def _quoted_items(grouping: Grouping, opts: RenderOptions) -> List[str]:
    body: List[str] = []
    for i, g in enumerate(grouping):
        if opts.include_comments:
            body.append(comment(label_for(g.category)))
        sep = "," if i < len(grouping) - 1 else ""
        body.append(quote(" ".join(g.tokens)) + sep)
    return body


def render_clsx(grouping: Grouping, opts: RenderOptions) -> str:
    return _block(f"{opts.callee}(", ")", _quoted_items(grouping, opts), opts)


def render_array(grouping: Grouping, opts: RenderOptions) -> str:
    return _block("[", "]", _quoted_items(grouping, opts), opts)


def render_template(grouping: Grouping, opts: RenderOptions) -> str:
    body: List[str] = []
    for g in grouping:
        if opts.include_comments:
            body.append(comment(label_for(g.category)))
        body.append(template_text(" ".join(g.tokens)))
    return _block("`", "`", body, opts)


def render_mapping(grouping: Grouping, opts: RenderOptions) -> str:
    text = json.dumps(grouping_to_dict(grouping), indent=opts.indent, ensure_ascii=False)
    return ("\n" + opts.base_indent).join(text.split("\n"))


RENDERERS: Dict[OutputFormat, Callable[[Grouping, RenderOptions], str]] = {
    OutputFormat.CLSX: render_clsx,
    OutputFormat.ARRAY: render_array,
    OutputFormat.TEMPLATE: render_template,
    OutputFormat.MAPPING: render_mapping,
}


def render(grouping: Grouping, opts: RenderOptions) -> str:
    renderer = RENDERERS.get(opts.format)
    if renderer is None:
        raise ConfigError(f"unsupported format {opts.format!r}")
    return renderer(grouping, opts)
