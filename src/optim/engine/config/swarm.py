"""Particle swarm configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from optim.engine.algorithm.pswarm.mover import (
    DEFAULT_COGNITION,
    DEFAULT_INERTIA,
    DEFAULT_SEED,
    DEFAULT_SOCIAL,
)
from optim.foundation.exceptions import ConfigurationError

from .base import _SerializableConfig, _field_names, _reject_unknown


@dataclass(frozen=True)
class SwarmConfigData(_SerializableConfig):
    pop_size: int = 30
    cognition: float = DEFAULT_COGNITION
    social: float = DEFAULT_SOCIAL
    inertia: float = DEFAULT_INERTIA
    vmax: float = 0.0
    velocity_fraction: float = 0.1
    seed: int = DEFAULT_SEED
    step: float = 0.0
    evaluator: str = "serial"
    cache: bool = False
    continue_on_error: bool = False

    def __post_init__(self) -> None:
        if self.pop_size < 1:
            raise ConfigurationError(f"pop_size must be at least 1, got {self.pop_size}.")
        if self.vmax < 0:
            raise ConfigurationError(f"vmax must be non-negative, got {self.vmax}.")
        if self.step < 0:
            raise ConfigurationError(f"step must be non-negative, got {self.step}.")
        if self.velocity_fraction < 0:
            raise ConfigurationError(f"velocity_fraction must be non-negative, got {self.velocity_fraction}.")

    @classmethod
    def from_dict(cls, cfg: Mapping[str, Any]) -> "SwarmConfigData":
        data = dict(cfg)
        _reject_unknown(data, _field_names(cls), "Swarm")
        return cls(**data)


class SwarmConfig:
    """Declarative configuration holder for particle swarm settings."""

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    def pop_size(self, value: int) -> "SwarmConfig":
        self._cfg["pop_size"] = int(value)
        return self

    def cognition(self, value: float) -> "SwarmConfig":
        self._cfg["cognition"] = float(value)
        return self

    def social(self, value: float) -> "SwarmConfig":
        self._cfg["social"] = float(value)
        return self

    def inertia(self, value: float) -> "SwarmConfig":
        self._cfg["inertia"] = float(value)
        return self

    def vmax(self, value: float) -> "SwarmConfig":
        self._cfg["vmax"] = float(value)
        return self

    def velocity_fraction(self, value: float) -> "SwarmConfig":
        self._cfg["velocity_fraction"] = float(value)
        return self

    def seed(self, value: int) -> "SwarmConfig":
        self._cfg["seed"] = int(value)
        return self

    def step(self, value: float) -> "SwarmConfig":
        self._cfg["step"] = float(value)
        return self

    def evaluator(self, name: str) -> "SwarmConfig":
        self._cfg["evaluator"] = str(name)
        return self

    def cache(self, enabled: bool = True) -> "SwarmConfig":
        self._cfg["cache"] = bool(enabled)
        return self

    def continue_on_error(self, enabled: bool = True) -> "SwarmConfig":
        self._cfg["continue_on_error"] = bool(enabled)
        return self

    def update(self, overrides: Mapping[str, Any]) -> "SwarmConfig":
        _reject_unknown(dict(overrides), _field_names(SwarmConfigData), "Swarm")
        self._cfg.update(overrides)
        return self

    def fixed(self) -> SwarmConfigData:
        return SwarmConfigData.from_dict(self._cfg)


__all__ = ["SwarmConfig", "SwarmConfigData"]
