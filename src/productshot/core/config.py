"""Configuration management for the Productshot prompt engine.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the PRODUCTSHOT_ prefix,
allowing the scoring thresholds and length budget to be tuned without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (PRODUCTSHOT_* prefix)
2. .env file in the project root
3. Default values defined in EngineConfig

Example .env file:
    PRODUCTSHOT_QUALITY_LEVEL=enterprise
    PRODUCTSHOT_MAX_PROMPT_LENGTH=12000
    PRODUCTSHOT_PRODUCTION_THRESHOLD=70

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.
Synthesis functions use it when no explicit configuration is passed.

Usage Example
-------------
    from productshot.core.config import EngineConfig, config

    # Access configuration values
    print(config.max_prompt_length)

    # Named profiles
    dev = EngineConfig.development()
    prod = EngineConfig.production()

Scoring Constants
-----------------
The quality score starts at 100 and is adjusted by:
- issue_penalty per structural validation issue
- missing_absolute_penalty when no absolute-severity constraint was emitted
- warning_penalty per warning
- compliance_bonus per critical production concern addressed

The result is clamped to [0, 100].
"""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class QualityLevel(str, Enum):
    """Production quality level for prompt synthesis."""

    ENTERPRISE = "enterprise"
    COMMERCIAL = "commercial"
    STANDARD = "standard"


class EngineConfig(BaseSettings):
    """Main configuration for the prompt synthesis engine.

    Attributes
    ----------
    Engine Behaviour:
        quality_level : QualityLevel
            Quality level written into the quality checklist
        strict_mode : bool
            Force strict specification adherence regardless of user settings
        use_enhanced_constraints : bool
            Emit the full categorized constraint blocks
        use_intelligent_placement : bool
            Run the placement analyzer and append its enforcement block
        validation_enabled : bool
            Validate the assembled prompt structurally

    Length Budget:
        max_prompt_length : int
            Hard character budget for the assembled prompt
        truncation_reserve : int
            Characters reserved for the truncation notice

    Scoring:
        issue_penalty, missing_absolute_penalty, warning_penalty,
        compliance_bonus, production_threshold, max_production_warnings

    Placement Confidence:
        placement_override_confidence : float
            Confidence at or above which the analyzer overrides the classifier
        placement_warning_confidence : float
            Confidence below which the stronger "verify manually" warning is used

    Notes
    -----
    - Configuration is immutable after initialization
    - Use model_copy(update=...) to derive a variant for a single call
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PRODUCTSHOT_",
        case_sensitive=False,
        frozen=True,
    )

    quality_level: QualityLevel = Field(
        default=QualityLevel.ENTERPRISE,
        description="Quality level (enterprise, commercial, standard)",
    )
    strict_mode: bool = Field(
        default=True,
        description="Force strict specification adherence",
    )
    use_enhanced_constraints: bool = Field(
        default=True,
        description="Emit the full categorized constraint blocks",
    )
    use_intelligent_placement: bool = Field(
        default=True,
        description="Run confidence-scored placement detection",
    )
    validation_enabled: bool = Field(
        default=True,
        description="Structurally validate the assembled prompt",
    )

    # Length budget
    max_prompt_length: int = Field(default=12000, ge=500, le=32000)
    truncation_reserve: int = Field(default=100, ge=40, le=400)

    # Scoring
    issue_penalty: int = Field(default=25, ge=0, le=100)
    missing_absolute_penalty: int = Field(default=20, ge=0, le=100)
    warning_penalty: int = Field(default=5, ge=0, le=100)
    compliance_bonus: int = Field(default=5, ge=0, le=100)
    production_threshold: int = Field(default=70, ge=0, le=100)
    max_production_warnings: int = Field(default=3, ge=0)

    # Placement confidence contract
    placement_override_confidence: float = Field(default=0.7, ge=0.0, le=1.0)
    placement_warning_confidence: float = Field(default=0.6, ge=0.0, le=1.0)

    @classmethod
    def production(cls, **overrides) -> "EngineConfig":
        """Enterprise profile: every constraint layer and validation enabled."""
        values = {
            "quality_level": QualityLevel.ENTERPRISE,
            "strict_mode": True,
            "use_enhanced_constraints": True,
            "use_intelligent_placement": True,
            "validation_enabled": True,
        }
        values.update(overrides)
        return cls(**values)

    @classmethod
    def development(cls, **overrides) -> "EngineConfig":
        """Lightweight profile for previews: compact constraints, no validation."""
        values = {
            "quality_level": QualityLevel.STANDARD,
            "strict_mode": False,
            "use_enhanced_constraints": False,
            "use_intelligent_placement": True,
            "max_prompt_length": 4000,
            "validation_enabled": False,
        }
        values.update(overrides)
        return cls(**values)


# Global configuration instance
# Loads values from environment variables (PRODUCTSHOT_* prefix) and .env file.
config = EngineConfig()
