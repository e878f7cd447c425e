"""Validation and scoring for assembled prompts.

Three layers:

- input validation (:func:`validate_specification`) is the only place that
  raises; it rejects a specification without a name or product type before
  classification starts
- structural validation (:func:`validate_prompt`) reports length and marker
  problems as data
- scoring (:func:`calculate_quality_score`,
  :func:`assess_production_readiness`) turns validation results, constraint
  statistics, warnings and addressed concerns into a clamped 0-100 score and
  a readiness verdict

:func:`validate_production_prompt` audits an arbitrary prompt text, for
example one edited by hand after synthesis.
"""

import logging
import re

from .config import EngineConfig, config
from .models import (
    ComplianceDetails,
    ConstraintStats,
    ContextPreset,
    CriticalIssuesAddressed,
    ProductionValidationReport,
    ProductSpecification,
    PromptValidation,
)
from .prompt_builder import (
    CONSTRAINTS_MARKER,
    HUMAN_MARKER,
    PLACEMENT_MARKER,
    QUALITY_MARKER,
)
from .standards import coerce_preset

logger = logging.getLogger(__name__)

# Warnings matching this pattern block production readiness
BLOCKING_WARNING = re.compile(r"critical|placement confidence", re.IGNORECASE)

REQUIRED_MARKERS = (
    (QUALITY_MARKER, "Missing quality assurance section"),
    (CONSTRAINTS_MARKER, "Missing constraints section"),
    (HUMAN_MARKER, "Missing human element prohibition"),
    (PLACEMENT_MARKER, "Missing placement specification"),
)

MARKER_SUGGESTIONS = {
    QUALITY_MARKER: "Add explicit quality requirements for better results",
    CONSTRAINTS_MARKER: "Add constraint section to prevent unwanted elements",
    HUMAN_MARKER: "Add explicit human element prohibition",
    PLACEMENT_MARKER: "Add placement instructions for the product",
}


class ValidationError(Exception):
    """User-friendly validation error.

    This exception is raised when caller input fails validation.
    The message is intended to be displayed directly to the user.
    """

    pass


class InvalidInputError(ValidationError):
    """A mandatory product field is missing or blank."""

    pass


def validate_specification(spec: ProductSpecification) -> None:
    """Reject specifications that cannot be classified.

    Args:
        spec: Product specification to check

    Raises:
        InvalidInputError: If the product name or product type is blank
    """
    if not spec.name or not spec.name.strip():
        raise InvalidInputError("Product name is required")
    if not spec.product_type or not spec.product_type.strip():
        raise InvalidInputError("Product type is required")


def validate_prompt(text: str, max_length: int) -> PromptValidation:
    """Check an assembled prompt for length and required markers.

    Never raises; problems are returned as ``issues``.
    """
    issues = []
    suggestions = []

    if len(text) > max_length:
        issues.append(f"Prompt exceeds maximum length ({len(text)} > {max_length} characters)")
        suggestions.append("Reduce detail level or disable optional constraint layers")

    for marker, issue in REQUIRED_MARKERS:
        if marker not in text:
            issues.append(issue)
            suggestions.append(MARKER_SUGGESTIONS[marker])

    return PromptValidation(
        is_valid=not issues,
        length=len(text),
        max_length=max_length,
        issues=tuple(issues),
        optimization_suggestions=tuple(suggestions),
    )


def calculate_quality_score(
    validation: PromptValidation | None,
    stats: ConstraintStats,
    critical: CriticalIssuesAddressed,
    warnings: list[str] | tuple[str, ...],
    engine_config: EngineConfig | None = None,
) -> int:
    """Compute the 0-100 quality score.

    Starts at 100, subtracts ``issue_penalty`` per validation issue,
    ``missing_absolute_penalty`` when no absolute constraint was emitted and
    ``warning_penalty`` per warning, adds ``compliance_bonus`` per addressed
    concern, then clamps.
    """
    cfg = engine_config or config
    score = 100
    if validation is not None:
        score -= cfg.issue_penalty * len(validation.issues)
    if stats.absolute_constraints == 0:
        score -= cfg.missing_absolute_penalty
    score -= cfg.warning_penalty * len(warnings)
    score += cfg.compliance_bonus * critical.count()
    return max(0, min(100, score))


def has_blocking_warning(warnings: list[str] | tuple[str, ...]) -> bool:
    return any(BLOCKING_WARNING.search(warning) for warning in warnings)


def assess_production_readiness(
    validation: PromptValidation | None,
    stats: ConstraintStats,
    warnings: list[str] | tuple[str, ...],
    score: int,
    engine_config: EngineConfig | None = None,
) -> bool:
    """Decide whether a prompt is fit to send to a generation provider."""
    cfg = engine_config or config
    if score < cfg.production_threshold:
        return False
    if validation is not None and not validation.is_valid:
        return False
    if stats.absolute_constraints == 0:
        return False
    if has_blocking_warning(warnings):
        return False
    return len(warnings) <= cfg.max_production_warnings


# ---------------------------------------------------------------------------
# Standalone production audit
# ---------------------------------------------------------------------------


def check_product_integrity(text: str) -> bool:
    return (
        "SPECIFICATION ADHERENCE" in text
        and "zero creative interpretation" in text
        and "EXACTLY as provided" in text
    )


def check_context_adherence(text: str, preset: ContextPreset | None) -> bool:
    if "CONTEXT-SPECIFIC" not in text:
        return False
    if preset is None:
        return True
    return preset.value in text.lower()


def check_format_compliance(text: str) -> bool:
    return "aspect ratio" in text.lower() and "EXACTLY" in text


def check_constraint_enforcement(text: str) -> bool:
    return all(
        marker in text for marker in ("ZERO TOLERANCE", "ABSOLUTELY PROHIBITED", "GENERATION FAILURE")
    )


def check_quality_standards(text: str) -> bool:
    return QUALITY_MARKER in text and "Professional" in text and "commercial photography" in text


def compliance_report(details: ComplianceDetails, text: str, max_length: int) -> tuple[str, ...]:
    entries = (
        (details.product_integrity, "Product integrity preservation system validated",
         "Missing product integrity preservation constraints"),
        (details.context_adherence, "Context adherence enforcement validated",
         "Missing context adherence enforcement system"),
        (details.format_compliance, "Format and dimension compliance validated",
         "Missing format and dimension enforcement"),
        (details.constraint_enforcement, "Constraint enforcement system validated",
         "Insufficient constraint enforcement detected"),
        (details.quality_assurance, "Quality assurance standards validated",
         "Missing quality assurance requirements"),
    )
    report = [f"✅ {ok}" if passed else f"❌ {failed}" for passed, ok, failed in entries]
    if len(text) > max_length:
        report.append(f"⚠️ Prompt length exceeds recommended maximum ({max_length} chars)")
    else:
        report.append("✅ Prompt length within optimal range")
    return tuple(report)


def validate_production_prompt(
    text: str,
    preset: ContextPreset | str | None = None,
    engine_config: EngineConfig | None = None,
) -> ProductionValidationReport:
    """Audit an arbitrary prompt for production use.

    Checks five compliance areas (product integrity, context adherence,
    format compliance, constraint enforcement, quality assurance standards)
    on top of the structural validation.

    Args:
        text: Prompt text to audit
        preset: Optional context preset the prompt should target
        engine_config: Configuration supplying the length budget

    Returns:
        ProductionValidationReport; ready when the prompt is valid, has no
        issues, scores at least 80 and passes at least 4 of 5 areas
    """
    cfg = engine_config or config
    resolved = coerce_preset(preset) if preset is not None else None
    validation = validate_prompt(text, cfg.max_prompt_length)
    issues = list(validation.issues)
    recommendations = list(validation.optimization_suggestions)

    details = ComplianceDetails(
        product_integrity=check_product_integrity(text),
        context_adherence=check_context_adherence(text, resolved),
        format_compliance=check_format_compliance(text),
        constraint_enforcement=check_constraint_enforcement(text),
        quality_assurance=check_quality_standards(text),
    )
    compliant = details.count()

    score = 100
    score -= 10 * len(issues)
    score -= 15 if len(text) > cfg.max_prompt_length else 0
    score -= 0 if validation.is_valid else 20
    score += 5 * compliant
    score -= 10 * (5 - compliant)
    score = max(0, min(100, score))

    if not details.product_integrity:
        recommendations.append("Add absolute product preservation constraints")
    if not details.context_adherence:
        recommendations.append("Strengthen context differentiation requirements")
    if not details.format_compliance:
        recommendations.append("Include explicit format and dimension enforcement")

    ready = validation.is_valid and not issues and score >= 80 and compliant >= 4
    logger.debug(f"Production audit: score={score}, compliant={compliant}/5, ready={ready}")

    return ProductionValidationReport(
        is_production_ready=ready,
        issues=tuple(issues),
        recommendations=tuple(recommendations),
        quality_score=score,
        details=details,
        compliance_report=compliance_report(details, text, cfg.max_prompt_length),
    )
