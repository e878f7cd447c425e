"""Prompt synthesis engine.

This module wires the pipeline together: input validation, classification,
placement analysis, settings optimization, section assembly, constraint
blocks, structural validation and scoring.  Every entry point is a plain
function over immutable inputs; two calls with identical arguments return
identical results.

Pipeline
--------
1. Reject blank product name/type (:class:`InvalidInputError`)
2. Classify the product
3. Merge per-context optimal settings under the caller's explicit choices
4. Re-detect placement with a confidence score and override the classifier
   when confident enough, otherwise keep it and warn
5. Assemble the core sections, constraint blocks and placement enforcement
   block under the length budget
6. Validate, score and decide production readiness

Usage Example
-------------
    from productshot import ProductSpecification, generate_production_prompt

    spec = ProductSpecification(
        name="Floating Shelf",
        product_type="wall mounted shelf",
        materials="solid walnut",
    )
    result = generate_production_prompt(spec, "lifestyle")
    if result.production_ready:
        send(result.prompt, result.format_spec.aspect_ratio)
"""

import logging
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .classifier import classify_product
from .config import EngineConfig, QualityLevel, config
from .constraints import (
    applied_constraint_labels,
    build_constraint_blocks,
    constraint_stats,
    render_constraints,
)
from .models import (
    ConfigurationSettings,
    ContextPreset,
    CriticalIssuesAddressed,
    PlacementAnalysis,
    ProductIntelligence,
    ProductSpecification,
    PromptAssemblyResult,
    QualityTier,
)
from .placement import analyze_placement, build_placement_constraints
from .prompt_builder import QUALITY_MARKER, assemble_prompt, build_core_sections
from .standards import (
    coerce_preset,
    get_context_standards,
    get_format_specification,
    optimal_settings,
)
from .validation import (
    assess_production_readiness,
    calculate_quality_score,
    validate_prompt,
    validate_specification,
)

logger = logging.getLogger(__name__)

ENGINE_VERSION = "3.0.0"

NOT_READY_WARNING = "Prompt may not meet production quality standards"

QUALITY_LEVELS: dict[QualityTier, QualityLevel] = {
    QualityTier.HIGH: QualityLevel.ENTERPRISE,
    QualityTier.MEDIUM: QualityLevel.COMMERCIAL,
    QualityTier.LOW: QualityLevel.STANDARD,
}


class ContextSelection(BaseModel):
    """Context choice from the two-step workflow.

    Attributes:
        context_type: catalog, lifestyle, hero, detail or social-media
        social_format: square or story; only used for social-media
    """

    model_config = ConfigDict(frozen=True)

    context_type: str = Field(..., description="Selected context type")
    social_format: str | None = Field(default=None, description="square or story")


def preset_from_selection(selection: ContextSelection) -> ContextPreset:
    context_type = selection.context_type.strip().lower()
    if context_type in ("social-media", "social_media", "social"):
        if (selection.social_format or "").strip().lower() == "story":
            return ContextPreset.SOCIAL_STORY
        return ContextPreset.SOCIAL_SQUARE
    return coerce_preset(context_type)


def quality_level_for(tier: QualityTier | str) -> QualityLevel:
    """Map a settings quality tier to an engine quality level."""
    try:
        return QUALITY_LEVELS[QualityTier(tier)]
    except ValueError:
        return QualityLevel.COMMERCIAL


def optimize_settings(
    settings: ConfigurationSettings,
    preset: ContextPreset,
    engine_config: EngineConfig | None = None,
) -> ConfigurationSettings:
    """Merge the preset's optimal settings under the caller's settings.

    Only fields the caller did not set explicitly take the optimal value;
    explicit choices such as approved props are kept.  Strict mode is on
    when either the caller or the engine configuration asks for it.
    """
    cfg = engine_config or config
    update: dict[str, Any] = {
        field: value
        for field, value in optimal_settings(preset).items()
        if field not in settings.model_fields_set
    }
    update["context_preset"] = preset
    update["strict_mode"] = settings.strict_mode or cfg.strict_mode
    return settings.model_copy(update=update)


def _resolve_placement(
    intel: ProductIntelligence,
    analysis: PlacementAnalysis,
    cfg: EngineConfig,
    warnings: list[str],
    optimizations: list[str],
) -> ProductIntelligence:
    percent = round(analysis.confidence * 100)
    if analysis.confidence >= cfg.placement_override_confidence:
        optimizations.append("Intelligent Placement Detection")
        if analysis.detected_placement != intel.placement_type:
            logger.info(
                f"Placement override: {intel.placement_type.value} -> "
                f"{analysis.detected_placement.value} ({percent}%)"
            )
            return intel.model_copy(update={"placement_type": analysis.detected_placement})
        return intel

    if analysis.confidence >= cfg.placement_warning_confidence:
        warnings.append(
            f"Low placement confidence ({percent}%) - keeping classified placement "
            f"{intel.placement_type.label}"
        )
    else:
        warnings.append(f"Low placement confidence ({percent}%) - verify placement manually")
    logger.warning(f"Low placement confidence ({percent}%) for {intel.placement_type.value}")
    return intel


def synthesize_prompt(
    spec: ProductSpecification,
    settings: ConfigurationSettings | None = None,
    preset: ContextPreset | str | None = None,
    reference_images: Sequence[str] | str | int | None = None,
    engine_config: EngineConfig | None = None,
) -> PromptAssemblyResult:
    """Synthesize a production prompt for one product.

    Args:
        spec: Product specification
        settings: Rendering preferences (defaults when omitted)
        preset: Context preset; overrides ``settings.context_preset`` when
            given.  Unknown values fall back to catalog.
        reference_images: Count or descriptors of reference images; only
            presence and count matter
        engine_config: Engine configuration (the global ``config`` when
            omitted)

    Returns:
        PromptAssemblyResult with prompt, score, readiness and metadata

    Raises:
        InvalidInputError: If the product name or type is blank
    """
    validate_specification(spec)
    cfg = engine_config or config
    settings = settings or ConfigurationSettings()
    context = coerce_preset(preset if preset is not None else settings.context_preset)

    warnings: list[str] = []
    recommendations: list[str] = []
    optimizations: list[str] = []

    logger.info(f"Synthesizing {context.value} prompt for '{spec.name}' ({spec.product_type})")

    intel = classify_product(spec)
    optimizations.append("Product Intelligence Analysis")

    optimized = optimize_settings(settings, context, cfg)
    if optimized != settings:
        optimizations.append("Settings Optimization")

    analysis = None
    if cfg.use_intelligent_placement:
        analysis = analyze_placement(spec, intel.category, strict=optimized.strict_mode)
        intel = _resolve_placement(intel, analysis, cfg, warnings, optimizations)
        recommendations.extend(analysis.recommendations)

    standards = get_context_standards(context)
    format_spec = get_format_specification(context)
    sections = build_core_sections(
        spec,
        context,
        optimized,
        intel,
        standards,
        format_spec,
        cfg.quality_level,
        reference_images,
    )
    optimizations.append("Core Prompt Synthesis")

    blocks = []
    if cfg.use_enhanced_constraints:
        blocks = build_constraint_blocks(intel, context, optimized, spec)
        sections.append(render_constraints(blocks))
        optimizations.append("Enhanced Constraint System")

    if analysis is not None:
        sections.append(
            build_placement_constraints(
                analysis, spec, placement=intel.placement_type, strict=optimized.strict_mode
            )
        )
        optimizations.append("Intelligent Placement Constraints")

    prompt, truncated = assemble_prompt(sections, cfg.max_prompt_length, cfg.truncation_reserve)
    if truncated:
        optimizations.append("Length Budget Truncation")

    validation = None
    if cfg.validation_enabled:
        validation = validate_prompt(prompt, cfg.max_prompt_length)
        optimizations.append("Prompt Validation")
        if not validation.is_valid:
            warnings.extend(validation.issues)
            recommendations.extend(validation.optimization_suggestions)

    stats = constraint_stats(blocks)
    critical = CriticalIssuesAddressed(
        product_integrity="SPECIFICATION ADHERENCE" in prompt,
        context_adherence="CONTEXT-SPECIFIC" in prompt,
        format_compliance=f"Aspect Ratio: {format_spec.aspect_ratio}" in prompt,
        quality_assurance=QUALITY_MARKER in prompt,
        process_alignment="USER CONFIGURATION" in prompt,
    )

    score = calculate_quality_score(validation, stats, critical, warnings, cfg)
    ready = assess_production_readiness(validation, stats, warnings, score, cfg)

    if not ready:
        warnings.append(NOT_READY_WARNING)
        recommendations.append("Review and address all warnings before production use")
    if score < 85:
        recommendations.append("Consider enabling all optimization features for higher quality")
    if score > 95:
        recommendations.append("Excellent quality - ready for enterprise production deployment")

    logger.info(
        f"Prompt ready={ready} score={score} length={len(prompt)} "
        f"placement={intel.placement_type.value} truncated={truncated}"
    )

    return PromptAssemblyResult(
        prompt=prompt,
        prompt_length=len(prompt),
        quality_score=score,
        production_ready=ready,
        warnings=tuple(warnings),
        recommendations=tuple(recommendations),
        optimizations_applied=tuple(optimizations),
        engine_version=ENGINE_VERSION,
        quality_level=cfg.quality_level,
        context_preset=context,
        product_intelligence=intel,
        placement_analysis=analysis,
        constraint_stats=stats,
        validation=validation,
        critical_issues_addressed=critical,
        format_spec=format_spec,
        applied_constraints=applied_constraint_labels(context, intel),
        truncated=truncated,
    )


def generate_production_prompt(
    spec: ProductSpecification,
    preset: ContextPreset | str | None = None,
    settings: ConfigurationSettings | None = None,
    reference_images: Sequence[str] | str | int | None = None,
) -> PromptAssemblyResult:
    """Synthesize with the enterprise production profile."""
    return synthesize_prompt(
        spec, settings, preset, reference_images, engine_config=EngineConfig.production()
    )


def generate_development_prompt(
    spec: ProductSpecification,
    preset: ContextPreset | str | None = None,
    settings: ConfigurationSettings | None = None,
    reference_images: Sequence[str] | str | int | None = None,
) -> PromptAssemblyResult:
    """Synthesize with the lightweight development profile."""
    return synthesize_prompt(
        spec, settings, preset, reference_images, engine_config=EngineConfig.development()
    )


def generate_custom_prompt(
    spec: ProductSpecification,
    preset: ContextPreset | str | None = None,
    settings: ConfigurationSettings | None = None,
    reference_images: Sequence[str] | str | int | None = None,
    **overrides: Any,
) -> PromptAssemblyResult:
    """Synthesize with the production profile plus configuration overrides.

    When ``quality_level`` is not overridden it follows the settings'
    quality tier.
    """
    settings = settings or ConfigurationSettings()
    overrides.setdefault("quality_level", quality_level_for(settings.quality))
    return synthesize_prompt(
        spec,
        settings,
        preset,
        reference_images,
        engine_config=EngineConfig.production(**overrides),
    )


def generate_quick_prompt(
    name: str,
    product_type: str,
    materials: str = "",
    preset: ContextPreset | str = ContextPreset.CATALOG,
) -> str:
    """Return only the prompt text for a minimal product description."""
    spec = ProductSpecification(name=name, product_type=product_type, materials=materials)
    settings = ConfigurationSettings(
        lighting="studio_softbox",
        quality=QualityTier.HIGH,
        strict_mode=True,
    )
    return generate_production_prompt(spec, preset, settings).prompt


def generate_two_step_prompt(
    spec: ProductSpecification,
    selection: ContextSelection,
    **settings_overrides: Any,
) -> PromptAssemblyResult:
    """Synthesize from a two-step workflow context selection.

    Args:
        spec: Product specification
        selection: Context type (and social format) chosen by the user
        **settings_overrides: ConfigurationSettings fields to override

    Returns:
        Production result tagged with "2-Step Workflow Integration"
    """
    preset = preset_from_selection(selection)
    values: dict[str, Any] = {
        "context_preset": preset,
        "background_style": {
            ContextPreset.CATALOG: "plain",
            ContextPreset.LIFESTYLE: "lifestyle",
        }.get(preset, "minimal"),
        "product_position": "center",
        "lighting": "studio_softbox" if preset == ContextPreset.CATALOG else "soft_daylight",
        "strict_mode": True,
        "quality": QualityTier.HIGH,
        "props": ("plant",) if preset == ContextPreset.LIFESTYLE else (),
    }
    values.update(settings_overrides)
    result = generate_production_prompt(spec, preset, ConfigurationSettings(**values))

    # Only the flag is forced; quality_score and production_ready stay those of
    # the production synthesis above and are not recomputed.
    critical = result.critical_issues_addressed.model_copy(update={"process_alignment": True})
    return result.model_copy(
        update={
            "optimizations_applied": (
                *result.optimizations_applied,
                "2-Step Workflow Integration",
            ),
            "critical_issues_addressed": critical,
        }
    )
