"""Base utilities for configuration dataclasses."""

from __future__ import annotations

import json
from dataclasses import asdict, fields
from typing import Any, Dict, Iterable

from optim.foundation.exceptions import ConfigurationError


class _SerializableConfig:
    """Mixin to serialize dataclass configs."""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)


def _reject_unknown(cfg: Dict[str, Any], allowed: Iterable[str], name: str) -> None:
    """Fail on keys that the config dataclass does not declare."""
    unknown = sorted(set(cfg) - set(allowed))
    if unknown:
        raise ConfigurationError(
            f"{name} configuration has unknown fields: {', '.join(unknown)}",
            suggestion=f"Known fields: {', '.join(sorted(allowed))}",
        )


def _field_names(cls) -> tuple[str, ...]:
    return tuple(f.name for f in fields(cls))
