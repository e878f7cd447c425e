"""Tests for productshot.core.config: engine configuration.

Tests cover:
- Default values for the scoring constants and length budget.
- Environment variable overrides via the PRODUCTSHOT_ prefix.
- Production and development profiles.
- Pydantic validation constraints and immutability.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from productshot.core.config import EngineConfig, QualityLevel


class TestConfigDefaults:
    """Verify that EngineConfig provides the documented defaults."""

    def test_default_quality_level(self):
        """Default quality level should be enterprise."""
        cfg = EngineConfig(_env_file=None)
        assert cfg.quality_level == QualityLevel.ENTERPRISE

    def test_default_layers_enabled(self):
        """Every constraint layer and validation should be on by default."""
        cfg = EngineConfig(_env_file=None)
        assert cfg.strict_mode is True
        assert cfg.use_enhanced_constraints is True
        assert cfg.use_intelligent_placement is True
        assert cfg.validation_enabled is True

    def test_default_length_budget(self):
        """Default budget is 12000 characters with a 100 character reserve."""
        cfg = EngineConfig(_env_file=None)
        assert cfg.max_prompt_length == 12000
        assert cfg.truncation_reserve == 100

    def test_default_scoring_constants(self):
        """Scoring constants should match the documented formula."""
        cfg = EngineConfig(_env_file=None)
        assert cfg.issue_penalty == 25
        assert cfg.missing_absolute_penalty == 20
        assert cfg.warning_penalty == 5
        assert cfg.compliance_bonus == 5
        assert cfg.production_threshold == 70
        assert cfg.max_production_warnings == 3

    def test_default_placement_thresholds(self):
        """Override at 0.7, stronger warning below 0.6."""
        cfg = EngineConfig(_env_file=None)
        assert cfg.placement_override_confidence == 0.7
        assert cfg.placement_warning_confidence == 0.6


class TestConfigEnvironment:
    """Verify PRODUCTSHOT_* environment overrides."""

    def test_env_overrides_threshold(self, monkeypatch):
        """PRODUCTSHOT_PRODUCTION_THRESHOLD should override the default."""
        monkeypatch.setenv("PRODUCTSHOT_PRODUCTION_THRESHOLD", "85")
        cfg = EngineConfig(_env_file=None)
        assert cfg.production_threshold == 85

    def test_env_overrides_quality_level(self, monkeypatch):
        """Quality level is parsed from its string value."""
        monkeypatch.setenv("PRODUCTSHOT_QUALITY_LEVEL", "standard")
        cfg = EngineConfig(_env_file=None)
        assert cfg.quality_level == QualityLevel.STANDARD

    def test_env_prefix_is_case_insensitive(self, monkeypatch):
        """Lower-case variable names are accepted."""
        monkeypatch.setenv("productshot_max_prompt_length", "6000")
        cfg = EngineConfig(_env_file=None)
        assert cfg.max_prompt_length == 6000


class TestConfigProfiles:
    """Verify the named production and development profiles."""

    def test_production_profile(self, production_config: EngineConfig):
        """Production enables everything at enterprise level."""
        assert production_config.quality_level == QualityLevel.ENTERPRISE
        assert production_config.strict_mode is True
        assert production_config.use_enhanced_constraints is True
        assert production_config.validation_enabled is True

    def test_development_profile(self, development_config: EngineConfig):
        """Development drops the enhanced constraints and validation."""
        assert development_config.quality_level == QualityLevel.STANDARD
        assert development_config.strict_mode is False
        assert development_config.use_enhanced_constraints is False
        assert development_config.validation_enabled is False
        assert development_config.max_prompt_length == 4000

    def test_profile_overrides(self):
        """Keyword overrides win over profile values."""
        cfg = EngineConfig.production(_env_file=None, max_prompt_length=2000, strict_mode=False)
        assert cfg.max_prompt_length == 2000
        assert cfg.strict_mode is False
        assert cfg.use_enhanced_constraints is True


class TestConfigValidation:
    """Verify pydantic constraints on configuration values."""

    def test_max_length_lower_bound(self):
        """A budget below 500 characters is rejected."""
        with pytest.raises(PydanticValidationError):
            EngineConfig(_env_file=None, max_prompt_length=100)

    def test_threshold_upper_bound(self):
        """Threshold cannot exceed 100."""
        with pytest.raises(PydanticValidationError):
            EngineConfig(_env_file=None, production_threshold=101)

    def test_confidence_range(self):
        """Confidence thresholds must be within [0, 1]."""
        with pytest.raises(PydanticValidationError):
            EngineConfig(_env_file=None, placement_override_confidence=1.5)

    def test_config_is_frozen(self):
        """Configuration cannot be mutated after creation."""
        cfg = EngineConfig(_env_file=None)
        with pytest.raises(PydanticValidationError):
            cfg.max_prompt_length = 5000

    def test_model_copy_derives_variant(self):
        """model_copy(update=...) derives a per-call variant."""
        cfg = EngineConfig(_env_file=None)
        variant = cfg.model_copy(update={"strict_mode": False})
        assert variant.strict_mode is False
        assert cfg.strict_mode is True
