from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class SelectorKitConfig:
    json_indent: int | None = None
    json_sort_keys: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> SelectorKitConfig:
        """Build a config from ``SELECTORKIT_*`` environment variables."""
        indent = os.environ.get("SELECTORKIT_JSON_INDENT", "")
        sort_keys = os.environ.get("SELECTORKIT_JSON_SORT_KEYS", "")
        return cls(
            json_indent=int(indent) if indent else None,
            json_sort_keys=sort_keys.lower() in ("1", "true", "yes"),
            log_level=os.environ.get("SELECTORKIT_LOG_LEVEL", "WARNING").upper(),
        )
