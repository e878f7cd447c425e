"""Productshot - prompt synthesis and validation for product photography."""

__version__ = "0.3.0"

from productshot.core.config import EngineConfig, config
from productshot.core.engine import (
    ContextSelection,
    generate_custom_prompt,
    generate_development_prompt,
    generate_production_prompt,
    generate_quick_prompt,
    generate_two_step_prompt,
    synthesize_prompt,
)
from productshot.core.models import (
    ConfigurationSettings,
    ContextPreset,
    Dimensions,
    ProductSpecification,
    PromptAssemblyResult,
)
from productshot.core.validation import InvalidInputError, validate_production_prompt

__all__ = [
    "EngineConfig",
    "config",
    "ContextSelection",
    "ConfigurationSettings",
    "ContextPreset",
    "Dimensions",
    "ProductSpecification",
    "PromptAssemblyResult",
    "InvalidInputError",
    "synthesize_prompt",
    "generate_production_prompt",
    "generate_development_prompt",
    "generate_custom_prompt",
    "generate_quick_prompt",
    "generate_two_step_prompt",
    "validate_production_prompt",
]
