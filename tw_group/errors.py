from __future__ import annotations


class ConfigError(ValueError):
    """Invalid render options (unknown format, bad min_tokens, unsplicable format)."""
