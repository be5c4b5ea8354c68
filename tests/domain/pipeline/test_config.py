"""Tests for pipeline valuation configuration."""

import attrs
import pytest

from royaltyscope.domain.pipeline import (
    DEFAULT_PIPELINE_CONFIG,
    DecayBounds,
    PipelineConfig,
    TerritoryWeights,
    validate_pipeline_config,
)


class TestPipelineConfig:
    """Test defaults and overrides."""

    def test_defaults(self):
        config = PipelineConfig()

        assert config.platform_fee == 0.30
        assert config.publishing_share_factor == 0.25
        assert config.territory_weights == TerritoryWeights(0.7, 0.3)
        assert config.lag_months.domestic == 4
        assert config.lag_months.international == 6
        assert config.decay == DecayBounds(0.12, 0.06, 0.25)
        assert config.right_type_weights.performance == 0.6

    def test_override_top_level(self):
        config = DEFAULT_PIPELINE_CONFIG.with_overrides(platform_fee=0.15)

        assert config.platform_fee == 0.15
        assert DEFAULT_PIPELINE_CONFIG.platform_fee == 0.30

    def test_override_nested_partial(self):
        """Nested dicts replace only the fields they name."""
        config = DEFAULT_PIPELINE_CONFIG.with_overrides(decay={"max_k": 0.3})

        assert config.decay.max_k == 0.3
        assert config.decay.base_k == 0.12
        assert config.decay.min_k == 0.06

    def test_override_nested_record(self):
        weights = TerritoryWeights(domestic=0.5, international=0.5)
        config = DEFAULT_PIPELINE_CONFIG.with_overrides(territory_weights=weights)
        assert config.territory_weights is weights

    def test_unknown_option_rejected(self):
        with pytest.raises(TypeError):
            DEFAULT_PIPELINE_CONFIG.with_overrides(exchange_rate=1.1)

    def test_unknown_nested_option_rejected(self):
        with pytest.raises(TypeError):
            DEFAULT_PIPELINE_CONFIG.with_overrides(decay={"half_life": 3})

    def test_frozen(self):
        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            DEFAULT_PIPELINE_CONFIG.platform_fee = 0.5  # type: ignore[misc]


class TestValidatePipelineConfig:
    """Test config problem reporting."""

    def test_default_is_valid(self):
        assert validate_pipeline_config(DEFAULT_PIPELINE_CONFIG) == []

    def test_fee_out_of_range(self):
        config = DEFAULT_PIPELINE_CONFIG.with_overrides(platform_fee=1.5)
        problems = validate_pipeline_config(config)

        assert len(problems) == 1
        assert "platform_fee" in problems[0]

    def test_weights_must_sum_to_one(self):
        config = DEFAULT_PIPELINE_CONFIG.with_overrides(
            territory_weights={"domestic": 0.9},
            right_type_weights={"sync": 0.5},
        )
        problems = validate_pipeline_config(config)

        assert any("territory_weights" in p for p in problems)
        assert any("right_type_weights" in p for p in problems)

    def test_decay_bounds_ordering(self):
        config = DEFAULT_PIPELINE_CONFIG.with_overrides(decay={"base_k": 0.5})
        problems = validate_pipeline_config(config)
        assert any("decay" in p for p in problems)

    def test_negative_lag(self):
        config = DEFAULT_PIPELINE_CONFIG.with_overrides(lag_months={"domestic": -1})
        problems = validate_pipeline_config(config)
        assert any("lag_months" in p for p in problems)
