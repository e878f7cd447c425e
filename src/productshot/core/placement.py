"""Confidence-scored placement detection.

The classifier resolves placement from the product type alone.  The analyzer
in this module re-detects it from every free-text field of the
specification and attaches a confidence in ``[0, 1]`` so the engine can
decide whether to override the classifier.

Scoring
-------
For each placement type:

- keyword strength: ``0.55`` per primary keyword, ``0.2`` per secondary
  keyword, ``-0.25`` per negative keyword; the classifier's own keyword in
  the product type counts as one more primary hit for its placement
- category prior: when any placement has keyword support, ``+0.1`` for
  supported placements the category allows and ``-0.2`` for placements it
  does not; with no keyword support at all, the category's typical
  placement starts at ``0.7``
- dimensional plausibility: small items (largest side <= 50cm) favour
  tabletop, tall items (height >= 40cm) favour floor-standing and anything
  over a metre rules tabletop out

Scores are clamped to ``[0, 1]``.  Ties resolve in table order (wall,
floor, tabletop, ceiling, built-in).  With no positive score the analyzer
returns the classifier's own placement with confidence ``0``.

A detected placement only replaces the classifier's when the product type
itself supports it or it outscores the classifier's placement by at least
``0.2``.  On its own, a single keyword found outside the product type
scores ``0.65``, below the override threshold.
"""

import logging

from .classifier import determine_placement, match_placement
from .models import (
    EnforcementLevel,
    FurnitureCategory,
    PlacementAnalysis,
    PlacementType,
    ProductSpecification,
)

logger = logging.getLogger(__name__)

PRIMARY_WEIGHT = 0.55
SECONDARY_WEIGHT = 0.2
NEGATIVE_WEIGHT = 0.25
SUPPORTED_PRIOR = 0.1
DISALLOWED_PENALTY = 0.2
OVERRIDE_MARGIN = 0.2
TYPICAL_PRIOR = 0.7
DIMENSION_BONUS = 0.2
SMALL_ITEM_CM = 50.0
TALL_ITEM_CM = 40.0
LARGE_ITEM_CM = 100.0

# (primary, secondary, negative); dict order is the tie-break order
PLACEMENT_KEYWORDS: dict[PlacementType, tuple[tuple[str, ...], tuple[str, ...], tuple[str, ...]]] = {
    PlacementType.WALL_MOUNTED: (
        (
            "wall mount", "wall mounted", "wall-mounted", "wall desk", "wall table",
            "wall shelf", "wall cabinet", "wall unit", "floating desk", "floating shelf",
            "floating table", "cantilever", "bracket mounted", "wall bracket",
            "wall hanging", "mounted", "wall supported", "wall fixed",
        ),
        (
            "floating", "suspended", "bracket", "cleat", "wall hardware", "no legs",
            "legless", "wall installation", "mounting system", "wall attachment",
            "wall secured", "space saving",
        ),
        (
            "floor standing", "floor mounted", "legs", "feet", "pedestals",
            "floor support", "standing", "floor contact", "four legs", "table legs",
            "desk legs", "base", "stand",
        ),
    ),
    PlacementType.FLOOR_STANDING: (
        (
            "floor standing", "floor mounted", "standing desk", "standing table", "legs",
            "four legs", "table legs", "desk legs", "chair legs", "feet", "base",
            "pedestal", "floor supported", "floor contact",
        ),
        (
            "standing", "supported", "stable base", "floor base", "leg assembly",
            "foot assembly", "floor installation", "freestanding", "free standing",
        ),
        (
            "wall mount", "wall mounted", "floating", "bracket", "hanging", "suspended",
            "wall installation", "no legs", "legless",
        ),
    ),
    PlacementType.TABLETOP: (
        (
            "tabletop", "table top", "desktop", "desk top", "surface mount",
            "surface mounted", "countertop", "counter top", "small", "compact",
            "portable",
        ),
        (
            "surface", "top mounted", "lightweight", "moveable", "accent piece",
            "decorative", "personal", "small scale",
        ),
        (
            "large", "heavy", "floor standing", "wall mounted", "permanent", "built-in",
            "installation required",
        ),
    ),
    PlacementType.CEILING_MOUNTED: (
        (
            "ceiling mount", "ceiling mounted", "ceiling hung", "pendant", "hanging",
            "suspended", "ceiling installation", "overhead", "ceiling bracket",
            "ceiling supported",
        ),
        (
            "above", "ceiling hardware", "suspension system", "pendant style",
            "drop down",
        ),
        ("floor", "wall", "table", "standing", "supported", "base", "legs", "feet", "mounted below"),
    ),
    PlacementType.BUILT_IN: (
        (
            "built in", "built-in", "integrated", "custom built", "fitted", "bespoke",
            "permanent installation", "architectural", "fixed", "permanent",
        ),
        (
            "custom", "integrated design", "architectural element", "fitted furniture",
            "permanent fixture", "non-moveable", "structural",
        ),
        ("portable", "moveable", "freestanding", "detachable", "removable", "standalone", "separate"),
    ),
}

# Placements each category can plausibly take
CATEGORY_PLACEMENT_RULES: dict[FurnitureCategory, tuple[PlacementType, ...]] = {
    FurnitureCategory.SEATING: (PlacementType.FLOOR_STANDING, PlacementType.WALL_MOUNTED),
    FurnitureCategory.TABLES: (
        PlacementType.FLOOR_STANDING,
        PlacementType.WALL_MOUNTED,
        PlacementType.TABLETOP,
    ),
    FurnitureCategory.STORAGE: (
        PlacementType.FLOOR_STANDING,
        PlacementType.WALL_MOUNTED,
        PlacementType.BUILT_IN,
        PlacementType.CEILING_MOUNTED,
    ),
    FurnitureCategory.WORKSTATIONS: (
        PlacementType.FLOOR_STANDING,
        PlacementType.WALL_MOUNTED,
        PlacementType.BUILT_IN,
    ),
    FurnitureCategory.LIGHTING: (
        PlacementType.CEILING_MOUNTED,
        PlacementType.WALL_MOUNTED,
        PlacementType.FLOOR_STANDING,
        PlacementType.TABLETOP,
    ),
    FurnitureCategory.DECOR: (
        PlacementType.TABLETOP,
        PlacementType.WALL_MOUNTED,
        PlacementType.FLOOR_STANDING,
    ),
    FurnitureCategory.TEXTILES: (PlacementType.FLOOR_STANDING, PlacementType.WALL_MOUNTED),
    FurnitureCategory.OUTDOOR: (PlacementType.FLOOR_STANDING, PlacementType.BUILT_IN),
    FurnitureCategory.UNKNOWN: tuple(PlacementType),
}

TYPICAL_PLACEMENT: dict[FurnitureCategory, PlacementType] = {
    FurnitureCategory.SEATING: PlacementType.FLOOR_STANDING,
    FurnitureCategory.TABLES: PlacementType.FLOOR_STANDING,
    FurnitureCategory.STORAGE: PlacementType.FLOOR_STANDING,
    FurnitureCategory.WORKSTATIONS: PlacementType.FLOOR_STANDING,
    FurnitureCategory.LIGHTING: PlacementType.FLOOR_STANDING,
    FurnitureCategory.DECOR: PlacementType.TABLETOP,
    FurnitureCategory.TEXTILES: PlacementType.FLOOR_STANDING,
    FurnitureCategory.OUTDOOR: PlacementType.FLOOR_STANDING,
}

ENFORCEMENT_PREFIX: dict[EnforcementLevel, str] = {
    EnforcementLevel.ABSOLUTE: "🚨 ZERO TOLERANCE",
    EnforcementLevel.HIGH: "⚠️ STRICT ENFORCEMENT",
    EnforcementLevel.MEDIUM: "📋 STANDARD ENFORCEMENT",
    EnforcementLevel.LOW: "💡 GUIDANCE",
}

PLACEMENT_REQUIREMENTS: dict[PlacementType, tuple[str, ...]] = {
    PlacementType.WALL_MOUNTED: (
        "Product MUST be attached to the wall with an appropriate mounting system",
        "ABSOLUTELY NO floor contact, not even partial or suggested contact",
        "Show realistic mounting hardware (brackets, cleats, cantilever system)",
        "Position at a height appropriate for the furniture type",
        "No legs, supports, pedestals, or floor-based stability systems",
    ),
    PlacementType.FLOOR_STANDING: (
        "ALL support points MUST make proper contact with the floor surface",
        "Show stable, level positioning with realistic weight distribution",
        "Maintain realistic clearances from walls (typically 5-15cm)",
        "No floating, suspended, or partially supported appearance",
    ),
    PlacementType.TABLETOP: (
        "Product MUST rest on a proportionally suitable supporting surface",
        "Show stable placement with full surface contact and no overhang",
        "Keep a realistic height relationship between product and surface",
    ),
    PlacementType.CEILING_MOUNTED: (
        "Product MUST hang from a visible ceiling attachment point",
        "Show a suspension system suitable for the product weight",
        "Maintain proper hanging height with no wall or floor contact",
    ),
    PlacementType.BUILT_IN: (
        "Product MUST appear integrated into the architectural space",
        "Show seamless, gap-free connection with walls, floor, or ceiling",
        "Display custom fitting and permanent installation quality",
    ),
}

DESK_REQUIREMENTS = (
    "Desk surface height typically 72-76cm from floor",
    "Show a wall mounting system capable of supporting desk weight",
    "Display appropriate clearance beneath the desk (minimum 5-10cm)",
)


def analysis_text(spec: ProductSpecification) -> str:
    return " ".join(
        (spec.name, spec.product_type, spec.materials, spec.additional_specs or "")
    ).lower()


def _keyword_hits(text: str, keywords: tuple[str, ...]) -> list[str]:
    return [keyword for keyword in keywords if keyword in text]


def _type_backed(product_type: str, placement: PlacementType) -> bool:
    classified, keyword = match_placement(product_type)
    if keyword is not None and classified == placement:
        return True
    primary, secondary, _ = PLACEMENT_KEYWORDS[placement]
    return bool(_keyword_hits(product_type.lower(), primary + secondary))


def _dimension_adjustment(spec: ProductSpecification, placement: PlacementType) -> float:
    if spec.dimensions is None:
        return 0.0
    largest = spec.dimensions.largest_cm()
    height = spec.dimensions.height_cm()
    adjustment = 0.0
    if placement == PlacementType.TABLETOP and largest is not None:
        if largest <= SMALL_ITEM_CM:
            adjustment += DIMENSION_BONUS
        elif largest > LARGE_ITEM_CM:
            adjustment -= DIMENSION_BONUS
    if placement == PlacementType.FLOOR_STANDING and height is not None and height >= TALL_ITEM_CM:
        adjustment += DIMENSION_BONUS / 2
    return adjustment


def validate_placement_for_category(
    placement: PlacementType, category: FurnitureCategory
) -> bool:
    return placement in CATEGORY_PLACEMENT_RULES.get(category, tuple(PlacementType))


def determine_enforcement_level(
    confidence: float, validation_passed: bool, placement: PlacementType, strict: bool
) -> EnforcementLevel:
    """Map confidence and category validation to an enforcement level."""
    if placement == PlacementType.WALL_MOUNTED and strict:
        return EnforcementLevel.ABSOLUTE
    if confidence >= 0.8 and validation_passed:
        return EnforcementLevel.HIGH
    if confidence >= 0.5 or not validation_passed:
        return EnforcementLevel.MEDIUM
    return EnforcementLevel.LOW


def placement_recommendations(
    placement: PlacementType,
    confidence: float,
    validation_passed: bool,
    conflicting: tuple[str, ...],
) -> tuple[str, ...]:
    recommendations = []
    if confidence < 0.7:
        recommendations.append(
            "Low confidence in placement detection - consider manual verification"
        )
    if not validation_passed:
        recommendations.append(
            "Placement type may not be appropriate for detected furniture category"
        )
    if conflicting:
        recommendations.append(f"Conflicting placement indicators found: {', '.join(conflicting)}")
    if placement == PlacementType.WALL_MOUNTED:
        recommendations.append("CRITICAL: Ensure zero floor contact in generated images")
        recommendations.append("Verify mounting hardware is visible and appropriate")
    elif placement == PlacementType.FLOOR_STANDING:
        recommendations.append("Ensure all support points make proper floor contact")
        recommendations.append("Verify realistic clearances from walls")
    return tuple(recommendations)


def score_placements(
    spec: ProductSpecification, category: FurnitureCategory
) -> dict[PlacementType, tuple[float, tuple[str, ...], tuple[str, ...]]]:
    """Score every placement type.

    Returns:
        Mapping of placement to ``(score, supporting, conflicting)`` in
        tie-break order
    """
    text = analysis_text(spec)
    allowed = CATEGORY_PLACEMENT_RULES.get(category, tuple(PlacementType))
    classified, type_keyword = match_placement(spec.product_type)

    raw = {}
    for placement, (primary, secondary, negative) in PLACEMENT_KEYWORDS.items():
        primary_hits = _keyword_hits(text, primary)
        secondary_hits = [k for k in _keyword_hits(text, secondary) if k not in primary_hits]
        negative_hits = _keyword_hits(text, negative)
        strength = (
            PRIMARY_WEIGHT * len(primary_hits)
            + SECONDARY_WEIGHT * len(secondary_hits)
            - NEGATIVE_WEIGHT * len(negative_hits)
        )
        if type_keyword is not None and placement == classified:
            # the classifier's match on the product type is one more primary hit
            strength += PRIMARY_WEIGHT
            if type_keyword not in primary_hits:
                primary_hits.append(type_keyword)
                secondary_hits = [k for k in secondary_hits if k != type_keyword]
        raw[placement] = (
            strength,
            tuple(primary_hits + secondary_hits),
            tuple(negative_hits),
        )

    keyword_evidence = any(supporting for _, supporting, _ in raw.values())
    typical = TYPICAL_PLACEMENT.get(category)

    scores = {}
    for placement, (strength, supporting, conflicting) in raw.items():
        score = strength
        if keyword_evidence:
            if placement not in allowed:
                score -= DISALLOWED_PENALTY
            elif supporting:
                score += SUPPORTED_PRIOR
        elif placement == typical:
            score = TYPICAL_PRIOR - NEGATIVE_WEIGHT * len(conflicting)
        score += _dimension_adjustment(spec, placement)
        scores[placement] = (round(min(1.0, max(0.0, score)), 4), supporting, conflicting)
    return scores


def analyze_placement(
    spec: ProductSpecification,
    category: FurnitureCategory,
    strict: bool = True,
) -> PlacementAnalysis:
    """Detect the placement of a product with a confidence score.

    Args:
        spec: Product specification; name, type, materials and additional
            specs are all scanned
        category: Category resolved by the classifier
        strict: Whether strict enforcement applies (wall-mounted products
            are then always enforced at ABSOLUTE level)

    Returns:
        PlacementAnalysis; never raises
    """
    scores = score_placements(spec, category)
    # max() keeps the first maximal entry, so dict order is the tie-break
    detected = max(scores, key=lambda placement: scores[placement][0])
    confidence, supporting, conflicting = scores[detected]

    classified = determine_placement(spec.product_type)
    if detected != classified and not _type_backed(spec.product_type, detected):
        lead = round(confidence - scores[classified][0], 4)
        if lead < OVERRIDE_MARGIN:
            logger.debug(
                f"Keeping {classified.value} for '{spec.name}': {detected.value} "
                f"leads by {lead:.2f} without support in the product type"
            )
            detected = classified
            confidence, supporting, conflicting = scores[classified]

    if confidence <= 0.0:
        detected = determine_placement(spec.product_type)
        confidence, supporting, conflicting = 0.0, (), ()

    validation_passed = validate_placement_for_category(detected, category)
    analysis = PlacementAnalysis(
        detected_placement=detected,
        confidence=confidence,
        supporting_keywords=supporting,
        conflicting_keywords=conflicting,
        validation_passed=validation_passed,
        recommendations=placement_recommendations(
            detected, confidence, validation_passed, conflicting
        ),
        enforcement_level=determine_enforcement_level(
            confidence, validation_passed, detected, strict
        ),
    )
    logger.debug(
        f"Placement analysis for '{spec.name}': {detected.value} "
        f"({confidence:.0%}, level={analysis.enforcement_level.value})"
    )
    return analysis


def build_placement_constraints(
    analysis: PlacementAnalysis,
    spec: ProductSpecification,
    placement: PlacementType | None = None,
    strict: bool = True,
) -> str:
    """Render the placement enforcement block for the prompt.

    Args:
        analysis: Result of :func:`analyze_placement`
        spec: Product specification (the type decides desk extras)
        placement: Final placement when the engine kept the classifier's
            value instead of the detected one
        strict: Strict enforcement flag used when the level is recomputed
            for a kept placement

    Returns:
        Enforcement block text
    """
    final = placement or analysis.detected_placement
    level = analysis.enforcement_level
    if final != analysis.detected_placement:
        level = determine_enforcement_level(
            analysis.confidence,
            analysis.validation_passed,
            final,
            strict,
        )

    evidence = ", ".join(analysis.supporting_keywords) or "category defaults"
    lines = [
        f"🏗️ INTELLIGENT PLACEMENT ENFORCEMENT - {level.value} LEVEL",
        f"DETECTED PLACEMENT: {final.label.upper()}",
        f"CONFIDENCE: {round(analysis.confidence * 100)}%",
        f"SUPPORTING EVIDENCE: {evidence}",
        "",
        f"{ENFORCEMENT_PREFIX[level]} PLACEMENT REQUIREMENTS:",
    ]
    lines.extend(f"• {requirement}" for requirement in PLACEMENT_REQUIREMENTS[final])

    product_type = spec.product_type.lower()
    if final == PlacementType.WALL_MOUNTED and (
        "desk" in product_type or "workstation" in product_type
    ):
        lines.extend(f"• {requirement}" for requirement in DESK_REQUIREMENTS)

    if level == EnforcementLevel.ABSOLUTE and final == PlacementType.WALL_MOUNTED:
        lines.append(
            "Any floor contact for wall-mounted furniture constitutes IMMEDIATE GENERATION FAILURE."
        )

    if analysis.recommendations:
        lines.append("")
        lines.append("📝 PLACEMENT RECOMMENDATIONS:")
        lines.extend(f"• {recommendation}" for recommendation in analysis.recommendations)

    if analysis.conflicting_keywords:
        lines.append("")
        lines.append(
            f"⚠️ CONFLICTING PLACEMENT INDICATORS: {', '.join(analysis.conflicting_keywords)}"
        )
        lines.append(
            f"OVERRIDE INSTRUCTION: Ignore conflicting indicators and follow placement: "
            f"{final.label.upper()}"
        )
    return "\n".join(lines)
