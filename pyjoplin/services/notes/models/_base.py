from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict


def _env_extra_mode(default: str = "ignore") -> str:
    """
    Determine the extra-mode from environment vars.

    PYJOPLIN_EXTRA: allow|forbid|ignore
    Convenience booleans: "true/1/on" -> forbid (strict), "false/0/off" -> allow
    """
    raw = (os.getenv("PYJOPLIN_EXTRA") or default).strip().lower()

    if raw in {"allow", "forbid", "ignore"}:
        return raw

    if raw in {"1", "true", "yes", "on", "strict"}:
        return "forbid"
    if raw in {"0", "false", "no", "off", "lenient"}:
        return "allow"

    return default


_EXTRA = _env_extra_mode()


class JoplinModel(BaseModel):
    """
    Project-wide base model.

    Unknown fields are ignored by default; switch at runtime by setting an
    env var before import:
      export PYJOPLIN_EXTRA=allow   # or forbid/ignore
    """

    model_config = ConfigDict(extra=_EXTRA)


__all__ = ["JoplinModel", "_env_extra_mode"]
