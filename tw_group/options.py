from __future__ import annotations

import os
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Mapping

from .errors import ConfigError


class OutputFormat(str, Enum):
    CLSX = "clsx"
    ARRAY = "array"
    TEMPLATE = "template"
    MAPPING = "mapping"

    @classmethod
    def parse(cls, value: Any) -> "OutputFormat":
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower() if value is not None else ""
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(f.value for f in cls)
            raise ConfigError(f"unsupported format {value!r} (choose from {choices})") from None


_ALIASES = {"object": "mapping", "raw": "mapping", "json": "mapping", "templateliteral": "template"}


@dataclass(frozen=True)
class RenderOptions:
    """
    Output shape and gate threshold.

    indent      - added in front of every line nested inside the call/array/template
    base_indent - prefixed to every line after the first (hosts pass the
                  indentation of the line they splice into)
    """

    format: OutputFormat = OutputFormat.CLSX
    min_tokens: int = 4
    include_comments: bool = True
    indent: str = "  "
    base_indent: str = ""
    callee: str = "clsx"

    def validate(self) -> None:
        if not isinstance(self.format, OutputFormat):
            raise ConfigError(f"format must be an OutputFormat, got {self.format!r}")
        if isinstance(self.min_tokens, bool) or not isinstance(self.min_tokens, int):
            raise ConfigError(f"min_tokens must be an integer, got {self.min_tokens!r}")
        if self.min_tokens < 1:
            raise ConfigError(f"min_tokens must be >= 1, got {self.min_tokens}")
        if not isinstance(self.indent, str) or not isinstance(self.base_indent, str):
            raise ConfigError("indent and base_indent must be strings")
        if self.indent.strip() or self.base_indent.strip():
            raise ConfigError("indent and base_indent may only contain whitespace")
        if not isinstance(self.callee, str) or not self.callee.isidentifier():
            raise ConfigError(f"callee must be an identifier, got {self.callee!r}")

    @classmethod
    def create(cls, **kwargs: Any) -> "RenderOptions":
        if "format" in kwargs:
            kwargs["format"] = OutputFormat.parse(kwargs["format"])
        opts = cls(**kwargs)
        opts.validate()
        return opts

    def with_(self, **changes: Any) -> "RenderOptions":
        if "format" in changes:
            changes["format"] = OutputFormat.parse(changes["format"])
        opts = replace(self, **changes)
        opts.validate()
        return opts


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def _parse_bool(name: str, raw: str) -> bool:
    key = raw.strip().lower()
    if key not in ("true", "false"):
        raise ConfigError(f"{name} must be true or false, got {raw!r}")
    return key == "true"


def options_from_env(environ: Mapping[str, str] | None = None, **overrides: Any) -> RenderOptions:
    """Build options from TW_GROUP_* variables; keyword overrides (CLI flags) win.

    Callers load `.env` first (python-dotenv) so it lands in os.environ.
    Overrides that are None are ignored.
    """
    env = os.environ if environ is None else environ
    values: dict[str, Any] = {
        "format": env.get("TW_GROUP_FORMAT", "clsx"),
        "min_tokens": _parse_int("TW_GROUP_MIN_TOKENS", env.get("TW_GROUP_MIN_TOKENS", "4")),
        "include_comments": _parse_bool("TW_GROUP_INCLUDE_COMMENTS", env.get("TW_GROUP_INCLUDE_COMMENTS", "true")),
        "indent": env.get("TW_GROUP_INDENT", "  "),
        "callee": env.get("TW_GROUP_CALLEE", "clsx"),
    }
    values.update({k: v for k, v in overrides.items() if v is not None})
    return RenderOptions.create(**values)


DEFAULT_OPTIONS = RenderOptions()
