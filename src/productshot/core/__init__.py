"""Core prompt synthesis and validation.

This package contains the deterministic pipeline that turns a product
description and rendering preferences into a multi-section image-generation
prompt, together with the scorer that decides whether the prompt is fit to
send to a generation provider.

Architecture Overview
---------------------
The core package is layered leaf-first:

1. **Configuration Layer** (config.py):
   - Environment-based configuration using Pydantic Settings
   - All settings prefixed with PRODUCTSHOT_ in .env files
   - Production and development profiles

2. **Data Layer** (models.py):
   - Immutable Pydantic models for inputs, derived intelligence and results

3. **Rule Tables** (classifier.py, standards.py, placement.py):
   - Keyword classification of category, placement and materials
   - Per-context photography standards and format specifications
   - Confidence-scored placement re-detection

4. **Text Generation** (constraints.py, prompt_builder.py):
   - Severity-tagged constraint blocks
   - Fixed-order section assembly under a length budget

5. **Validation & Orchestration** (validation.py, engine.py):
   - Structural validation, quality score, production readiness
   - Synthesis entry points

Usage Example
-------------
    from productshot.core import ProductSpecification, synthesize_prompt

    spec = ProductSpecification(
        name="Executive Chair",
        product_type="executive office chair",
        materials="black leather, chrome base",
    )
    result = synthesize_prompt(spec, preset="catalog")
    print(result.quality_score, result.production_ready)
"""

from productshot.core.classifier import classify_product
from productshot.core.config import EngineConfig, QualityLevel, config
from productshot.core.constraints import build_constraint_blocks, validate_constraint_coverage
from productshot.core.engine import (
    ENGINE_VERSION,
    ContextSelection,
    generate_custom_prompt,
    generate_development_prompt,
    generate_production_prompt,
    generate_quick_prompt,
    generate_two_step_prompt,
    optimize_settings,
    synthesize_prompt,
)
from productshot.core.models import (
    ConfigurationSettings,
    ContextPreset,
    Dimensions,
    PlacementType,
    ProductSpecification,
    PromptAssemblyResult,
)
from productshot.core.placement import analyze_placement
from productshot.core.standards import get_context_standards, get_format_specification
from productshot.core.validation import (
    InvalidInputError,
    ValidationError,
    validate_production_prompt,
    validate_prompt,
)

__all__ = [
    "ENGINE_VERSION",
    "EngineConfig",
    "QualityLevel",
    "config",
    "ConfigurationSettings",
    "ContextPreset",
    "ContextSelection",
    "Dimensions",
    "PlacementType",
    "ProductSpecification",
    "PromptAssemblyResult",
    "InvalidInputError",
    "ValidationError",
    "analyze_placement",
    "build_constraint_blocks",
    "classify_product",
    "get_context_standards",
    "get_format_specification",
    "optimize_settings",
    "synthesize_prompt",
    "generate_custom_prompt",
    "generate_development_prompt",
    "generate_production_prompt",
    "generate_quick_prompt",
    "generate_two_step_prompt",
    "validate_constraint_coverage",
    "validate_production_prompt",
    "validate_prompt",
]
