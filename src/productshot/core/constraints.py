"""Categorized constraint blocks.

The builder turns classification results and settings into an ordered list
of :class:`ConstraintBlock` records:

1. human-element exclusion (absolute)
2. irrelevant-object exclusion gated by the approved props (critical)
3. artifact prevention (high)
4. placement enforcement for the resolved placement type
5. specification adherence (absolute in strict mode)
6. context-specific rules for the preset (high)
7. validation requirements (medium)

Everything here is template text over module-level tables; nothing can fail.
The marker counts in :class:`ConstraintStats` are substring counts over the
rendered text and feed the quality score, so the marker words in the titles
(``ABSOLUTE``, ``CRITICAL``, ``PLACEMENT``, ``CONTEXT``, ``MATERIAL``) are part
of the scoring contract.
"""

import logging
import re

from .models import (
    ConfigurationSettings,
    ConstraintBlock,
    ConstraintCategory,
    ConstraintCoverage,
    ConstraintSection,
    ConstraintStats,
    ContextPreset,
    MaterialType,
    PlacementType,
    ProductIntelligence,
    ProductSpecification,
    Severity,
)

logger = logging.getLogger(__name__)

HUMAN_SECTIONS = (
    ConstraintSection(
        heading="PRIMARY HUMAN PROHIBITIONS",
        statements=(
            "NO humans, people, or persons of any age, gender, or ethnicity",
            "NO human faces, heads, or facial features",
            "NO hands, arms, legs, feet, or any other body parts",
            "NO human shadows, silhouettes, or partial human forms",
        ),
    ),
    ConstraintSection(
        heading="EXTENDED HUMAN ELEMENT PROHIBITIONS",
        statements=(
            "NO clothing, garments, shoes, or footwear",
            "NO jewelry, watches, glasses, bags, or personal accessories",
        ),
    ),
    ConstraintSection(
        heading="HUMAN ACTIVITY PROHIBITIONS",
        statements=(
            "NO staging that implies recent or imminent human use",
            "NO items arranged as if a person were present",
        ),
    ),
    ConstraintSection(
        heading="HUMAN REPRESENTATION PROHIBITIONS",
        statements=(
            "NO mannequins, dolls, or humanoid figures",
            "NO portraits or human-themed artwork",
        ),
    ),
)

# (heading, ((items, match words), ...)); statements render as "NO {items}"
OBJECT_GROUPS: tuple[tuple[str, tuple[tuple[str, tuple[str, ...]], ...]], ...] = (
    (
        "DINING & KITCHEN ITEM PROHIBITIONS",
        (
            ("cups, mugs, or drinking glasses", ("cup", "mug", "glass")),
            ("plates, bowls, or serving ware", ("plate", "bowl", "tray")),
            ("food, drinks, or consumables", ("food", "fruit", "drink", "coffee")),
        ),
    ),
    (
        "PERSONAL ITEM PROHIBITIONS",
        (
            ("books, magazines, or reading materials", ("book", "magazine")),
            ("phones, laptops, or electronic devices", ("phone", "laptop", "tablet", "computer")),
            ("stationery, pens, or office supplies", ("pen", "notebook", "stationery")),
            ("toys, games, or recreational objects", ("toy", "game")),
        ),
    ),
    (
        "DECORATIVE OBJECT PROHIBITIONS",
        (
            ("vases or decorative containers", ("vase", "bowl")),
            ("candles or candle holders", ("candle",)),
            ("picture frames or artwork", ("frame", "artwork", "art", "picture")),
            ("sculptures, figurines, clocks, or mirrors", ("sculpture", "figurine", "clock", "mirror")),
        ),
    ),
    (
        "TEXTILE & SOFT FURNISHING PROHIBITIONS",
        (
            ("throw pillows or cushions", ("pillow", "cushion")),
            ("blankets or throws", ("blanket", "throw")),
            ("rugs or carpets", ("rug", "carpet")),
        ),
    ),
    (
        "PLANT & ORGANIC PROHIBITIONS",
        (
            ("plants, flowers, or greenery", ("plant", "flower", "greenery")),
            ("potted plants or planters", ("plant", "planter")),
            ("branches or floral arrangements", ("branch", "floral", "flower")),
        ),
    ),
    (
        "LIGHTING FIXTURE PROHIBITIONS",
        (
            ("table lamps or floor lamps", ("lamp",)),
            ("pendant lights or chandeliers", ("pendant", "chandelier")),
            ("string lights or decorative lighting", ("string light", "fairy light")),
        ),
    ),
)

ARTIFACT_SECTIONS = (
    ConstraintSection(
        heading="RENDERING ARTIFACT PROHIBITIONS",
        statements=(
            "NO cartoon-like, illustrated, or non-photorealistic rendering",
            "NO 3D render appearance or computer-generated look",
            "NO unrealistic lighting, impossible shadows, or physics violations",
        ),
    ),
    ConstraintSection(
        heading="PHOTOGRAPHIC TECHNICAL PROHIBITIONS",
        statements=(
            "NO motion blur, camera shake, or focus errors",
            "NO lens distortion, chromatic aberration, or vignetting",
            "NO blown highlights, crushed shadows, noise, or compression artifacts",
        ),
    ),
    ConstraintSection(
        heading="COMPOSITION ARTIFACT PROHIBITIONS",
        statements=(
            "NO multiple instances or duplications of the same product",
            "NO impossible perspectives, cloned elements, or depth errors",
        ),
    ),
    ConstraintSection(
        heading="DIGITAL PROCESSING PROHIBITIONS",
        statements=(
            "NO filters, HDR over-processing, or sharpening halos",
            "NO color grading that makes materials look unrealistic",
        ),
    ),
)

BASE_MATERIAL_ARTIFACTS = (
    "NO surface texture errors or material inconsistencies",
    "NO scale inconsistencies or proportion distortions",
)

MATERIAL_ARTIFACTS: dict[MaterialType, str] = {
    MaterialType.WOOD: "NO plastic-looking wood or repeating, printed grain patterns",
    MaterialType.METAL: "NO warped reflections or unrealistic metallic sheen",
    MaterialType.FABRIC: "NO flat, textureless upholstery or painted-on weave",
    MaterialType.LEATHER: "NO vinyl-looking leather or missing grain and stitching",
    MaterialType.GLASS: "NO opaque glass, impossible refraction, or harsh hotspots",
    MaterialType.PLASTIC: "NO cheap-looking glare or molded seams that are not specified",
    MaterialType.STONE: "NO repeating veining or printed-looking stone texture",
    MaterialType.CERAMIC: "NO uneven glaze or unrealistic ceramic gloss",
}

PLACEMENT_SECTIONS: dict[PlacementType, tuple[ConstraintSection, ...]] = {
    PlacementType.WALL_MOUNTED: (
        ConstraintSection(
            heading="WALL-MOUNTED ABSOLUTE PROHIBITIONS",
            statements=(
                "ABSOLUTELY NO floor contact: zero floor contact, not even partial or implied",
                "NO legs, feet, pedestals, or supports reaching the ground",
                "NO free-standing installation when wall mounting is specified",
                "NO floating appearance without a visible mounting system",
            ),
        ),
        ConstraintSection(
            heading="WALL-MOUNTED REQUIREMENTS",
            prohibitive=False,
            statements=(
                "MUST show visible mounting hardware (brackets, cleats, or cantilever system)",
                "MUST show the wall attachment point and wall surface interaction",
                "MUST maintain clearance beneath the product (minimum 5cm)",
                "MUST appear securely mounted with weight properly supported",
            ),
        ),
    ),
    PlacementType.FLOOR_STANDING: (
        ConstraintSection(
            heading="FLOOR-STANDING PROHIBITIONS",
            statements=(
                "NO floating or suspended appearance",
                "NO incomplete floor contact or unstable positioning",
                "NO wall mounting or tabletop placement",
            ),
        ),
        ConstraintSection(
            heading="FLOOR-STANDING REQUIREMENTS",
            prohibitive=False,
            statements=(
                "ALL support points MUST make full contact with the floor",
                "MUST show stable, level positioning and realistic weight distribution",
                "MUST maintain realistic clearance from walls (typically 5-15cm)",
            ),
        ),
    ),
    PlacementType.TABLETOP: (
        ConstraintSection(
            heading="TABLETOP PROHIBITIONS",
            statements=(
                "NO floor placement for tabletop products",
                "NO unstable, precarious, or overhanging positioning",
            ),
        ),
        ConstraintSection(
            heading="TABLETOP REQUIREMENTS",
            prohibitive=False,
            statements=(
                "MUST rest on an appropriately sized supporting surface",
                "MUST show a realistic size relationship to that surface",
            ),
        ),
    ),
    PlacementType.CEILING_MOUNTED: (
        ConstraintSection(
            heading="CEILING-MOUNTED PROHIBITIONS",
            statements=(
                "NO floor, wall, or tabletop contact",
                "NO invisible suspension without mounting hardware",
            ),
        ),
        ConstraintSection(
            heading="CEILING-MOUNTED REQUIREMENTS",
            prohibitive=False,
            statements=(
                "MUST show the ceiling attachment point and suspension hardware",
                "MUST maintain proper hanging height and clearances",
            ),
        ),
    ),
    PlacementType.BUILT_IN: (
        ConstraintSection(
            heading="BUILT-IN PROHIBITIONS",
            statements=(
                "NO free-standing or movable appearance",
                "NO gaps or separation from the surrounding architecture",
            ),
        ),
        ConstraintSection(
            heading="BUILT-IN REQUIREMENTS",
            prohibitive=False,
            statements=(
                "MUST appear seamlessly integrated into walls, floor, or ceiling",
                "MUST show custom fitting and permanent installation quality",
            ),
        ),
    ),
}

PLACEMENT_VALIDATION: dict[PlacementType, str] = {
    PlacementType.WALL_MOUNTED: (
        "CRITICAL: wall-mounted furniture MUST appear professionally installed on a wall "
        "with NO connection to the floor. Any floor contact invalidates the generation."
    ),
    PlacementType.FLOOR_STANDING: (
        "CRITICAL: floor-standing furniture MUST show complete support through floor contact."
    ),
    PlacementType.TABLETOP: (
        "CRITICAL: tabletop products MUST rest on a suitable surface with stable positioning."
    ),
    PlacementType.CEILING_MOUNTED: (
        "CRITICAL: ceiling-mounted products MUST hang from visible hardware with no other contact."
    ),
    PlacementType.BUILT_IN: (
        "CRITICAL: built-in furniture MUST read as a permanent part of the architecture."
    ),
}

DESIGN_MODIFICATION_PROHIBITIONS = ConstraintSection(
    heading="DESIGN MODIFICATION PROHIBITIONS",
    statements=(
        "NO changes to product design, style, or proportions",
        "NO alternative colors, material substitutions, or finish changes",
        "NO hardware changes, feature additions, or removals",
    ),
)

CONTEXTUAL_DEVIATION_PROHIBITIONS = ConstraintSection(
    heading="CONTEXTUAL DEVIATION PROHIBITIONS",
    statements=(
        "NO context changes from the selected preset",
        "NO style mixing between context types or format violations",
    ),
)

CONTEXT_SECTIONS: dict[ContextPreset, tuple[tuple[str, ...], tuple[str, ...]]] = {
    ContextPreset.CATALOG: (
        (
            "NO environmental elements, rooms, or architectural context",
            "NO lifestyle props or contextual staging elements",
            "NO background textures, patterns, or visual interest",
            "NO environmental lighting (studio lighting only)",
        ),
        (
            "Clean seamless studio background only",
            "Product isolation with no competing elements",
            "Commercial catalog presentation standards",
        ),
    ),
    ContextPreset.LIFESTYLE: (
        (
            "NO unrealistic, over-styled, or magazine-perfect staging",
            "NO competing furniture that overshadows the product",
            "NO cluttered environments or inappropriate scale",
        ),
        (
            "Realistic, achievable interior environment",
            "Natural product integration with appropriate architectural context",
        ),
    ),
    ContextPreset.HERO: (
        (
            "NO text or graphics embedded in the image",
            "NO busy backgrounds that compete with text readability",
        ),
        (
            "Wide banner composition suitable for website headers",
            "Premium presentation with dramatic, controlled lighting",
        ),
    ),
    ContextPreset.SOCIAL_SQUARE: (
        (
            "NO aspect ratio deviation from a perfect 1:1 square",
            "NO overly complex backgrounds that fail on small screens",
        ),
        (
            "Mobile-optimized brightness and contrast",
            "Feed-friendly centered composition",
        ),
    ),
    ContextPreset.SOCIAL_STORY: (
        (
            "NO aspect ratio deviation from the 9:16 vertical format",
            "NO product placement that interferes with the story interface",
        ),
        (
            "Product in the upper two-thirds of the frame",
            "Bottom area kept calm for story interface elements",
        ),
    ),
    ContextPreset.DETAIL: (
        (
            "NO wide shots that lose material and construction detail",
            "NO environmental distractions that pull focus from craftsmanship",
        ),
        (
            "Close framing on joinery, texture, and finish",
            "Lighting that reveals surface texture and material quality",
        ),
    ),
}

VALIDATION_SECTIONS = (
    ConstraintSection(
        heading="IMMEDIATE DISQUALIFICATION CRITERIA",
        statements=(
            "Human elements of any kind",
            "Objects not explicitly approved",
            "Non-photorealistic rendering artifacts",
            "Placement violations for the detected furniture type",
            "Specification deviations or creative liberties",
            "Text, labels, or written content of any kind",
        ),
    ),
    ConstraintSection(
        heading="PRODUCTION QUALITY CHECKLIST",
        prohibitive=False,
        statements=(
            "Professional commercial photography quality achieved",
            "All constraint categories fully satisfied",
            "Context preset, background, and lighting requirements met",
        ),
    ),
)

COVERAGE_CATEGORIES: tuple[tuple[str, tuple[str, str]], ...] = (
    ("human element prohibition", ("human", "prohibition")),
    ("irrelevant object prevention", ("irrelevant", "object")),
    ("artifact prevention", ("artifact", "prevention")),
    ("placement enforcement", ("placement", "enforcement")),
    ("specification adherence", ("specification", "adherence")),
)

# Substrings counted over the rendered constraint text
STAT_MARKERS = {
    "total_constraints": "⛔",
    "absolute_constraints": "ABSOLUTE",
    "critical_constraints": "CRITICAL",
    "placement_specific": "PLACEMENT",
    "context_specific": "CONTEXT",
    "material_specific": "MATERIAL",
}


def format_props(props: tuple[str, ...]) -> str:
    return ", ".join(props) if props else "NONE"


def _approved_match(words: tuple[str, ...], props: tuple[str, ...]) -> str | None:
    # whole words only, optionally plural: "pen" must not approve "pendant"
    for prop in props:
        text = prop.lower()
        if any(re.search(rf"\b{re.escape(word)}(?:e?s)?\b", text) for word in words):
            return prop
    return None


def build_human_element_block() -> ConstraintBlock:
    return ConstraintBlock(
        category=ConstraintCategory.HUMAN_ELEMENTS,
        severity=Severity.ABSOLUTE,
        title="ABSOLUTE HUMAN ELEMENT PROHIBITION - ZERO TOLERANCE",
        sections=HUMAN_SECTIONS,
        validation=(
            "The image must be completely devoid of any human presence, suggestion, or "
            "representation. Any hint of human elements is an immediate GENERATION FAILURE."
        ),
    )


def build_irrelevant_object_block(props: tuple[str, ...]) -> ConstraintBlock:
    """Object exclusion gated by the approved props allow-list.

    Statements covering an approved prop are narrowed to everything except
    that prop, so the block never forbids what it approves.
    """
    sections = []
    for heading, items in OBJECT_GROUPS:
        statements = []
        for description, words in items:
            approved = _approved_match(words, props)
            if approved:
                statements.append(f"NO {description} other than the approved {approved}")
            else:
                statements.append(f"NO {description}")
        sections.append(ConstraintSection(heading=heading, statements=tuple(statements)))

    preamble = [
        f"APPROVED PROPS FOR THIS GENERATION: {format_props(props)}",
        "Only items explicitly listed as approved props may appear in the scene.",
    ]
    if len(props) == 1:
        preamble.append(f"{props[0]} is the sole approved item.")
    elif props:
        preamble.append(f"{format_props(props)} are the sole approved items.")
    preamble.append("All other objects enumerated below are ABSOLUTELY PROHIBITED.")

    return ConstraintBlock(
        category=ConstraintCategory.IRRELEVANT_OBJECTS,
        severity=Severity.CRITICAL,
        title="IRRELEVANT OBJECT ELIMINATION - SYSTEMATIC PREVENTION",
        preamble=tuple(preamble),
        sections=tuple(sections),
        validation="Every object in the scene must serve the product presentation.",
    )


def build_artifact_block(intel: ProductIntelligence) -> ConstraintBlock:
    profile = intel.material_profile
    material_statements = list(BASE_MATERIAL_ARTIFACTS)
    for material in (profile.primary, *profile.secondary):
        statement = MATERIAL_ARTIFACTS.get(material)
        if statement and statement not in material_statements:
            material_statements.append(statement)

    sections = (
        *ARTIFACT_SECTIONS[:2],
        ConstraintSection(
            heading="SURFACE & MATERIAL ARTIFACT PROHIBITIONS",
            statements=tuple(material_statements),
        ),
        *ARTIFACT_SECTIONS[2:],
    )
    return ConstraintBlock(
        category=ConstraintCategory.ARTIFACTS,
        severity=Severity.HIGH,
        title="PHOTOGRAPHIC ARTIFACT PREVENTION - TECHNICAL QUALITY CONTROL",
        sections=sections,
        validation=(
            "The image must look captured with professional equipment by an experienced "
            "commercial photographer. Any digital artifact is a GENERATION FAILURE."
        ),
    )


def build_placement_block(intel: ProductIntelligence) -> ConstraintBlock:
    placement = intel.placement_type
    if placement in (PlacementType.WALL_MOUNTED, PlacementType.CEILING_MOUNTED):
        severity = Severity.ABSOLUTE
    else:
        severity = Severity.CRITICAL
    return ConstraintBlock(
        category=ConstraintCategory.PLACEMENT,
        severity=severity,
        title="PLACEMENT ENFORCEMENT - INTELLIGENT POSITIONING CONTROL",
        preamble=(
            f"DETECTED FURNITURE TYPE: {intel.category.value.upper()}",
            f"REQUIRED PLACEMENT: {placement.label.upper()}",
        ),
        sections=PLACEMENT_SECTIONS[placement],
        validation=PLACEMENT_VALIDATION[placement],
    )


def build_adherence_block(
    spec: ProductSpecification, settings: ConfigurationSettings
) -> ConstraintBlock:
    """Specification adherence quoting the caller's own values."""
    if spec.dimensions is not None and not spec.dimensions.is_empty():
        dimension_rule = f"NO changes to specified dimensions: {spec.dimensions.describe()}"
    else:
        dimension_rule = "NO changes to standard proportions for this product type"

    violations = ConstraintSection(
        heading="SPECIFICATION VIOLATION PROHIBITIONS",
        statements=(
            f'NO deviation from stated materials: "{spec.materials or "as shown"}"',
            f'NO ignoring of product type requirements: "{spec.product_type}"',
            dimension_rule,
            f'NO modifications to additional specifications: "{spec.additional_specs or "None specified"}"',
        ),
    )

    required = [
        f'Background MUST be: "{settings.background_style}"',
        f'Product position MUST be: "{settings.product_position}"',
        f'Lighting MUST be: "{settings.lighting.replace("_", " ")}"',
        f"Props limited to: {format_props(settings.props)}",
    ]
    if settings.reserved_text_zone:
        required.append(f'Text zone MUST be reserved: "{settings.reserved_text_zone}"')
    if settings.strict_mode:
        required.append(
            "STRICT MODE: ZERO TOLERANCE for any deviation, with zero creative interpretation"
        )
    setting_rules = ConstraintSection(
        heading="SETTING OVERRIDE REQUIREMENTS",
        statements=tuple(required),
        prohibitive=False,
    )

    return ConstraintBlock(
        category=ConstraintCategory.SPECIFICATION_ADHERENCE,
        severity=Severity.ABSOLUTE if settings.strict_mode else Severity.CRITICAL,
        title="SPECIFICATION ADHERENCE ENFORCEMENT - ZERO CREATIVE LIBERTIES",
        sections=(
            DESIGN_MODIFICATION_PROHIBITIONS,
            violations,
            setting_rules,
            CONTEXTUAL_DEVIATION_PROHIBITIONS,
        ),
        validation=(
            "The image must match ALL user specifications with zero creative interpretation. "
            "Any deviation is a GENERATION FAILURE."
        ),
    )


def build_context_block(
    preset: ContextPreset, settings: ConfigurationSettings
) -> ConstraintBlock:
    prohibitions, requirements = CONTEXT_SECTIONS[preset]
    prohibitions = list(prohibitions)
    requirements = list(requirements)

    zone = settings.reserved_text_zone
    if zone:
        prohibitions.append(f"NO elements in the reserved {zone} text zone")
        if preset == ContextPreset.HERO:
            requirements.append(f'Reserve the "{zone}" text zone as clean negative space')
    elif preset == ContextPreset.HERO:
        requirements.append("Strategic negative space for text overlay")

    return ConstraintBlock(
        category=ConstraintCategory.CONTEXT,
        severity=Severity.HIGH,
        title=f"CONTEXT-SPECIFIC ENFORCEMENT: {preset.label}",
        sections=(
            ConstraintSection(
                heading=f"{preset.label} PROHIBITIONS", statements=tuple(prohibitions)
            ),
            ConstraintSection(
                heading=f"{preset.label} REQUIREMENTS",
                statements=tuple(requirements),
                prohibitive=False,
            ),
        ),
    )


def build_validation_block() -> ConstraintBlock:
    return ConstraintBlock(
        category=ConstraintCategory.VALIDATION,
        severity=Severity.MEDIUM,
        title="COMPREHENSIVE VALIDATION REQUIREMENTS",
        sections=VALIDATION_SECTIONS,
        validation="Only images that pass ALL requirements may be accepted; otherwise regenerate.",
    )


def build_constraint_blocks(
    intel: ProductIntelligence,
    preset: ContextPreset,
    settings: ConfigurationSettings,
    spec: ProductSpecification,
) -> list[ConstraintBlock]:
    """Build the ordered constraint blocks for one synthesis call.

    Args:
        intel: Classification with the final placement already resolved
        preset: Context preset
        settings: Optimized configuration settings
        spec: Product specification quoted by the adherence block

    Returns:
        Blocks in fixed order, each tagged with a severity
    """
    blocks = [
        build_human_element_block(),
        build_irrelevant_object_block(settings.props),
        build_artifact_block(intel),
        build_placement_block(intel),
        build_adherence_block(spec, settings),
        build_context_block(preset, settings),
        build_validation_block(),
    ]
    logger.debug(
        f"Built {len(blocks)} constraint blocks "
        f"({sum(block.statement_count for block in blocks)} statements)"
    )
    return blocks


def render_constraints(blocks: list[ConstraintBlock]) -> str:
    return "\n\n".join(block.render() for block in blocks)


def constraint_stats(blocks: list[ConstraintBlock]) -> ConstraintStats:
    """Count severity markers in the rendered blocks.

    The marker counts keep the substring-based semantics the score depends
    on; the ``*_blocks`` fields count the structured severities.
    """
    if not blocks:
        return ConstraintStats()
    text = render_constraints(blocks)
    counts = {field: text.count(marker) for field, marker in STAT_MARKERS.items()}
    severities = [block.severity for block in blocks]
    return ConstraintStats(
        **counts,
        absolute_blocks=severities.count(Severity.ABSOLUTE),
        critical_blocks=severities.count(Severity.CRITICAL),
        high_blocks=severities.count(Severity.HIGH),
        medium_blocks=severities.count(Severity.MEDIUM),
        statement_count=sum(block.statement_count for block in blocks),
    )


def validate_constraint_coverage(text: str) -> ConstraintCoverage:
    """Check that the five core constraint categories are present in a text.

    Each category is worth 20 points; coverage is comprehensive at 80.
    """
    lowered = text.lower()
    missing = []
    score = 0
    for name, words in COVERAGE_CATEGORIES:
        if all(word in lowered for word in words):
            score += 20
        else:
            missing.append(name)
    return ConstraintCoverage(
        is_comprehensive=score >= 80,
        missing_categories=tuple(missing),
        coverage_score=score,
    )


def applied_constraint_labels(
    preset: ContextPreset, intel: ProductIntelligence
) -> tuple[str, ...]:
    """Short labels of the universal constraints applied, for result metadata."""
    labels = ["No humans", "No text/labels", "Professional quality", "Accurate scaling"]
    if intel.placement_type == PlacementType.WALL_MOUNTED:
        labels.append("Proper wall mounting")
    elif intel.placement_type == PlacementType.CEILING_MOUNTED:
        labels.append("Visible ceiling suspension")
    if preset == ContextPreset.HERO:
        labels.append("Text zone preservation")
    elif preset == ContextPreset.CATALOG:
        labels.append("Product isolation")
    return tuple(labels)
