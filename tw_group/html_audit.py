from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from bs4 import BeautifulSoup

from .gate import gate_reason
from .grouping import group, grouping_to_dict
from .options import DEFAULT_OPTIONS, RenderOptions

log = logging.getLogger(__name__)

REPORT_NAME = "class-groups.json"


def audit_html(html: str, opts: RenderOptions = DEFAULT_OPTIONS) -> List[Dict[str, Any]]:
    """Report elements whose class list would be regrouped. Read-only."""
    # keep class as the raw attribute text so newlines survive for the gate
    soup = BeautifulSoup(html, "html.parser", multi_valued_attributes=None)
    out: List[Dict[str, Any]] = []
    for index, tag in enumerate(soup.find_all(True)):
        class_string = tag.get("class")
        if not class_string or not class_string.strip():
            continue
        if gate_reason(class_string, opts) is not None:
            continue
        out.append({
            "tag": tag.name,
            "index": index,
            "classes": class_string,
            "groups": grouping_to_dict(group(class_string)),
        })
    return out


def find_html_files(root: Path) -> List[Path]:
    return sorted(root.glob("**/*.html"))


def write_audit_report(root: Path, opts: RenderOptions = DEFAULT_OPTIONS) -> Path:
    files = []
    for html_path in find_html_files(root):
        text = html_path.read_text(encoding="utf-8", errors="ignore")
        elements = audit_html(text, opts)
        log.debug("%s: %d elements to group", html_path, len(elements))
        if elements:
            files.append({"file": html_path.relative_to(root).as_posix(), "elements": elements})
    report = {"min_tokens": opts.min_tokens, "files": files}
    out = root / REPORT_NAME
    out.write_text(json.dumps(report, ensure_ascii=False, indent=2), encoding="utf-8")
    return out
