"""Pipeline valuation configuration.

PipelineConfig is an immutable record supplied once per computation. Use
``DEFAULT_PIPELINE_CONFIG.with_overrides(...)`` to change a subset of fields;
nested groups accept either a record or a dict of the fields to replace.
"""

import math
from typing import Any

import attrs
from attrs import define, field


@define(frozen=True, slots=True)
class TerritoryWeights:
    """Share of revenue earned domestically vs internationally (sum to 1)."""

    domestic: float = 0.7
    international: float = 0.3


@define(frozen=True, slots=True)
class LagMonths:
    """Typical collection lag per territory, in months."""

    domestic: int = 4
    international: int = 6


@define(frozen=True, slots=True)
class DecayBounds:
    """Decay constant starting point and clamp range."""

    base_k: float = 0.12
    min_k: float = 0.06
    max_k: float = 0.25


@define(frozen=True, slots=True)
class RightTypeWeights:
    """Share of pipeline value per right type (sum to 1)."""

    performance: float = 0.6
    mechanical: float = 0.3
    sync: float = 0.1


_NESTED_GROUPS = {
    "territory_weights": TerritoryWeights,
    "lag_months": LagMonths,
    "decay": DecayBounds,
    "right_type_weights": RightTypeWeights,
}


@define(frozen=True, slots=True, kw_only=True)
class PipelineConfig:
    """Recognized options for pipeline valuation.

    Weights are not renormalized by the engine; see validate_pipeline_config.
    """

    platform_fee: float = 0.30
    publishing_share_factor: float = 0.25
    territory_weights: TerritoryWeights = field(factory=TerritoryWeights)
    lag_months: LagMonths = field(factory=LagMonths)
    decay: DecayBounds = field(factory=DecayBounds)
    right_type_weights: RightTypeWeights = field(factory=RightTypeWeights)

    def with_overrides(self, **overrides: Any) -> "PipelineConfig":
        """Return a copy with the given fields replaced.

        Raises:
            TypeError: For option names the config does not recognize.
        """
        changes: dict[str, Any] = {}
        for name, value in overrides.items():
            group_cls = _NESTED_GROUPS.get(name)
            if group_cls is not None and isinstance(value, dict):
                changes[name] = attrs.evolve(getattr(self, name), **value)
            else:
                changes[name] = value
        return attrs.evolve(self, **changes)


DEFAULT_PIPELINE_CONFIG = PipelineConfig()


def _sums_to_one(*values: float) -> bool:
    return math.isclose(sum(values), 1.0, abs_tol=1e-9)


def validate_pipeline_config(config: PipelineConfig) -> list[str]:
    """List the problems with a config; an empty list means it is well formed.

    The engine never calls this itself and computes with whatever it is given.
    """
    problems = []

    if not 0.0 <= config.platform_fee <= 1.0:
        problems.append(f"platform_fee must be within [0, 1], got {config.platform_fee}")
    if not 0.0 <= config.publishing_share_factor <= 1.0:
        problems.append(
            "publishing_share_factor must be within [0, 1], "
            f"got {config.publishing_share_factor}"
        )

    territory = config.territory_weights
    if not _sums_to_one(territory.domestic, territory.international):
        problems.append(
            "territory_weights must sum to 1, "
            f"got {territory.domestic + territory.international}"
        )

    lag = config.lag_months
    if lag.domestic < 0 or lag.international < 0:
        problems.append(
            f"lag_months must be non-negative, got {lag.domestic}/{lag.international}"
        )

    decay = config.decay
    if not decay.min_k <= decay.base_k <= decay.max_k:
        problems.append(
            "decay bounds must satisfy min_k <= base_k <= max_k, "
            f"got {decay.min_k}/{decay.base_k}/{decay.max_k}"
        )

    weights = config.right_type_weights
    if not _sums_to_one(weights.performance, weights.mechanical, weights.sync):
        problems.append(
            "right_type_weights must sum to 1, "
            f"got {weights.performance + weights.mechanical + weights.sync}"
        )

    return problems
