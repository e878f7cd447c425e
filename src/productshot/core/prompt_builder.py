"""Prompt assembly for product photography generation.

The assembler composes the final instruction text from fixed sections in a
fixed order:

1. specification header (``📸 PROFESSIONAL ... FURNITURE PHOTOGRAPHY``)
2. placement instructions (``INTELLIGENT PLACEMENT & SCALE``)
3. material instructions (``MATERIAL INTELLIGENCE``)
4. photography standards summary (``PHOTOGRAPHY STANDARDS``)
5. lighting specification (``LIGHTING SPECIFICATION``)
6. settings integration (``USER CONFIGURATION``)
7. multimodal reference guidance, only when reference images are indicated
8. quality-assurance checklist (``QUALITY ASSURANCE REQUIREMENTS``)
9. universal constraints (``🚫 ABSOLUTE CONSTRAINTS - ZERO TOLERANCE``)

The engine appends the categorized constraint blocks and the placement
enforcement block after these.  Structural validation looks for marker
phrases from several of these sections, so the order is part of the
contract: if the length budget cuts the tail, later markers disappear and
the prompt is reported as invalid.

Length Budget
-------------
:func:`assemble_prompt` joins sections with blank lines.  If the result is
longer than ``max_length`` the tail is cut and :data:`TRUNCATION_NOTICE` is
appended; the returned text is never longer than ``max_length``.
"""

import logging
from collections.abc import Sequence

from .config import QualityLevel
from .models import (
    ConfigurationSettings,
    ContextPreset,
    FormatSpecification,
    LightingProfile,
    MaterialProfile,
    MaterialType,
    PlacementType,
    ProductIntelligence,
    ProductSpecification,
    ReflectanceLevel,
    TextureComplexity,
)
from .standards import ContextStandards

logger = logging.getLogger(__name__)

QUALITY_MARKER = "QUALITY ASSURANCE"
CONSTRAINTS_MARKER = "CONSTRAINTS"
HUMAN_MARKER = "NO humans"
PLACEMENT_MARKER = "PLACEMENT TYPE"
TRUNCATION_NOTICE = "\n\n[Prompt optimized for length - full constraints apply]"

SECTION_SEPARATOR = "\n\n"

PLACEMENT_GUIDANCE: dict[PlacementType, tuple[str, ...]] = {
    PlacementType.WALL_MOUNTED: (
        "CRITICAL: Show proper wall mounting - NO floor contact",
        "Display mounting hardware and wall attachment system",
        "Maintain appropriate clearance beneath the piece",
    ),
    PlacementType.FLOOR_STANDING: (
        "Show stable floor contact with all support points",
        "Maintain appropriate clearance from walls for access",
    ),
    PlacementType.CEILING_MOUNTED: (
        "Show ceiling attachment point and suspension system",
        "Display appropriate hanging height and clearances",
    ),
    PlacementType.TABLETOP: (
        "Show placement on an appropriate surface with stability",
        "Ensure proportional relationship to the supporting surface",
    ),
    PlacementType.BUILT_IN: (
        "Show seamless integration with the surrounding architecture",
        "Display custom fitting without visible gaps",
    ),
}

MATERIAL_GUIDANCE: dict[MaterialType, tuple[str, ...]] = {
    MaterialType.WOOD: (
        "Show natural wood grain patterns and authentic color undertones",
        "Emphasize surface texture and finish quality",
    ),
    MaterialType.METAL: (
        "Display metal surface quality and finish consistency",
        "Show appropriate reflections without distracting hotspots",
    ),
    MaterialType.FABRIC: (
        "Reveal fabric weave pattern and texture detail",
        "Use directional lighting to emphasize textile characteristics",
    ),
    MaterialType.LEATHER: (
        "Show leather grain texture and natural characteristics",
        "Display surface quality and finish authenticity",
    ),
    MaterialType.GLASS: (
        "Control reflections and transparency for clarity",
        "Show glass quality without distracting glare patterns",
    ),
    MaterialType.STONE: ("Show natural veining and stone surface depth",),
    MaterialType.CERAMIC: ("Show glaze quality and consistent ceramic finish",),
}

UNIVERSAL_CONSTRAINTS = (
    "NO humans, body parts, or human silhouettes",
    "NO text, labels, price tags, model numbers, or watermarks",
    "NO logos unless they are integral parts of the actual product",
    "NO duplicate or multiple instances of the same product",
    "NO unrealistic scaling or proportional distortions",
    "NO amateur photography aesthetics or over-saturated colors",
)

CONTEXT_CONSTRAINTS: dict[ContextPreset, tuple[str, ...]] = {
    ContextPreset.CATALOG: (
        "NO environmental elements or lifestyle props",
        "NO competing visual elements in the frame",
    ),
    ContextPreset.LIFESTYLE: (
        "NO unrealistic or overly staged environmental setups",
        "NO competing furniture that distracts from the main product",
    ),
    ContextPreset.HERO: ("NO text or graphics in the image itself",),
    ContextPreset.DETAIL: (
        "NO wide-angle shots or distant perspectives",
        "NO loss of material detail or texture clarity",
    ),
}


def _bullets(lines: Sequence[str]) -> str:
    return "\n".join(f"• {line}" for line in lines)


def build_specification_header(
    spec: ProductSpecification, preset: ContextPreset, intel: ProductIntelligence
) -> str:
    lines = [
        f"Product: {spec.name}",
        f"Type: {spec.product_type} (Category: {intel.category.value})",
        f"Materials: {spec.materials or 'not specified'}",
    ]
    if spec.dimensions is not None and not spec.dimensions.is_empty():
        lines.append(f"Dimensions: {spec.dimensions.describe()}")
    if spec.additional_specs:
        lines.append(f"Additional Details: {spec.additional_specs}")
    lines.append("Reproduce the product EXACTLY as provided, without redesign")
    return (
        f"📸 PROFESSIONAL {preset.label} FURNITURE PHOTOGRAPHY\n\n"
        f"PRODUCT SPECIFICATION:\n{_bullets(lines)}"
    )


def build_placement_instructions(intel: ProductIntelligence) -> str:
    guidance = intel.scale_guidance
    lines = [
        f"{PLACEMENT_MARKER}: {intel.placement_type.label} positioning",
        f"Scale Elements: {', '.join(guidance.proportional_elements)}",
        guidance.dimensional_context,
    ]
    if guidance.human_reference:
        lines.append("Convey human scale through architecture and proportions only")
    lines.extend(PLACEMENT_GUIDANCE[intel.placement_type])
    return f"INTELLIGENT PLACEMENT & SCALE:\n{_bullets(lines)}"


def build_material_instructions(profile: MaterialProfile) -> str:
    lines = [
        f"Primary Material: {profile.primary.value} with {profile.reflectance_level.value} finish"
    ]
    if profile.secondary:
        lines.append(
            f"Secondary Materials: {', '.join(material.value for material in profile.secondary)}"
        )
    lines.append(f"Texture Complexity: {profile.texture_complexity.value} detail level required")
    lines.append(f"Lighting Intensity: {profile.required_lighting.value} lighting approach")
    lines.extend(MATERIAL_GUIDANCE.get(profile.primary, ()))
    return f"MATERIAL INTELLIGENCE:\n{_bullets(lines)}"


def build_photography_standards(
    standards: ContextStandards, format_spec: FormatSpecification
) -> str:
    composition = standards.composition
    lines = [
        f"Context: {standards.description}",
        f"Composition: {composition.framing}",
        f"Product Placement: {composition.product_placement}",
        f"Negative Space: {composition.negative_space}",
        f"Visual Hierarchy: {composition.visual_hierarchy}",
    ]
    if composition.text_overlay_space:
        lines.append(f"Text Overlay: {composition.text_overlay_space}")
    lines.extend(
        [
            f"Aspect Ratio: {format_spec.aspect_ratio} EXACTLY "
            f"({format_spec.dimensions}, {format_spec.description})",
            f"Focus: {', '.join(standards.technical.focus_points)}",
            f"Depth of Field: {standards.technical.depth_of_field}",
            f"Exposure: {standards.technical.exposure_guidance}",
        ]
    )
    return f"PHOTOGRAPHY STANDARDS:\n{_bullets(lines)}"


def build_lighting_specification(lighting: LightingProfile) -> str:
    lines = [
        f"Primary Angle: {lighting.primary_angle}° from camera axis",
        f"Fill Ratio: {round(lighting.fill_ratio * 100)}% of key light intensity",
        f"Shadow Style: {lighting.shadow_style.value} shadows",
        f"Color Temperature: {lighting.color_temperature}",
    ]
    if lighting.special_requirements:
        lines.append(f"Special Requirements: {', '.join(lighting.special_requirements)}")
    return f"LIGHTING SPECIFICATION:\n{_bullets(lines)}"


def build_settings_integration(settings: ConfigurationSettings) -> str:
    lines = [
        f"Background Style: {settings.background_style}",
        f"Product Position: {settings.product_position}",
        f"Lighting Preference: {settings.lighting.replace('_', ' ')}",
        f"Quality Level: {settings.quality.value}",
    ]
    if settings.variations > 1:
        lines.append(f"Variations: {settings.variations} distinct compositions of the same product")
    if settings.reserved_text_zone:
        lines.append(
            f"Reserved Text Zone: Keep {settings.reserved_text_zone} area clear for text overlay"
        )
    if settings.props:
        lines.append(f"Approved Props: {', '.join(settings.props)}")
    if settings.strict_mode:
        lines.append("Strict Mode: Exact product fidelity required - no creative liberties")
    return f"USER CONFIGURATION:\n{_bullets(lines)}"


def normalize_reference_images(
    reference_images: Sequence[str] | str | int | None,
) -> tuple[str, ...] | int | None:
    """Return a count unchanged and descriptors as a tuple.

    A bare string is a single descriptor, not a sequence of characters.
    """
    if reference_images is None or isinstance(reference_images, int):
        return reference_images
    if isinstance(reference_images, str):
        return (reference_images,)
    return tuple(reference_images)


def reference_image_count(reference_images: Sequence[str] | str | int | None) -> int:
    reference_images = normalize_reference_images(reference_images)
    if reference_images is None:
        return 0
    if isinstance(reference_images, int):
        return max(0, reference_images)
    return len(reference_images)


def build_multimodal_guidance(reference_images: Sequence[str] | str | int | None) -> str:
    """Reference-image guidance, or an empty string when there are none."""
    reference_images = normalize_reference_images(reference_images)
    count = reference_image_count(reference_images)
    if count == 0:
        return ""
    lines = [
        f"Use the {count} provided reference image{'s' if count > 1 else ''} to understand:",
        "  - Exact product shape, proportions, and design details",
        "  - Accurate material colors, textures, and finishes",
        "  - Authentic hardware, joints, and construction elements",
        "",
        "• CRITICAL: Maintain complete visual consistency with reference images",
        "• Match colors, materials, and proportions exactly as shown",
    ]
    if not isinstance(reference_images, int):
        descriptors = [d.strip() for d in reference_images if d and d.strip()]
        if descriptors:
            lines.append(f"• Reference views: {', '.join(descriptors)}")
    return "MULTIMODAL REFERENCE ANALYSIS:\n• " + "\n".join(lines)


def build_quality_assurance(
    standards: ContextStandards, profile: MaterialProfile, quality_level: QualityLevel
) -> str:
    quality = standards.quality
    checklist = [
        "Sharp focus across all critical product areas",
        "Accurate color reproduction matching real-world appearance",
        "Clean composition without distracting elements",
        "Professional lighting that enhances product appeal",
        "Realistic scale and proportions appropriate for product type",
    ]
    if profile.texture_complexity != TextureComplexity.SIMPLE:
        checklist.append("Visible material texture and surface detail")
    if profile.reflectance_level != ReflectanceLevel.MATTE:
        checklist.append("Controlled reflections that enhance rather than distract")

    lines = [
        f"Production Level: {quality_level.value} commercial photography",
        f"Resolution Quality: {quality.sharpness_level} grade",
        f"Noise Level: {quality.noise_level}",
        f"Color Accuracy: {quality.color_accuracy} precision",
        f"Dynamic Range: {quality.dynamic_range}",
    ]
    return (
        f"{QUALITY_MARKER} REQUIREMENTS:\n{_bullets(lines)}\n\n"
        "• PROFESSIONAL STANDARDS CHECKLIST:\n"
        + "\n".join(f"  ✓ {item}" for item in checklist)
    )


def build_absolute_constraints(
    preset: ContextPreset, intel: ProductIntelligence, settings: ConfigurationSettings
) -> str:
    """Compact universal constraint list, always emitted."""
    lines = list(UNIVERSAL_CONSTRAINTS)
    if intel.placement_type == PlacementType.WALL_MOUNTED:
        lines.append("ABSOLUTELY NO floor contact for wall-mounted furniture")
        lines.append("NO legs, supports, or bases touching the ground")
    if preset == ContextPreset.HERO and settings.reserved_text_zone:
        lines.append(f"KEEP {settings.reserved_text_zone} zone completely clear for text")
    lines.extend(CONTEXT_CONSTRAINTS.get(preset, ()))
    if intel.material_profile.reflectance_level in (ReflectanceLevel.GLOSS, ReflectanceLevel.MIRROR):
        lines.append("NO harsh reflections or loss of surface detail due to glare")

    text = f"🚫 ABSOLUTE {CONSTRAINTS_MARKER} - ZERO TOLERANCE:\n{_bullets(lines)}"
    if settings.strict_mode:
        text += (
            "\n\n• STRICT MODE ACTIVE - EXACT FIDELITY REQUIRED:\n"
            "  - Zero creative interpretation of product design\n"
            "  - Exact color matching to specified materials\n"
            "  - Precise dimensional relationships as specified"
        )
    return text


def build_core_sections(
    spec: ProductSpecification,
    preset: ContextPreset,
    settings: ConfigurationSettings,
    intel: ProductIntelligence,
    standards: ContextStandards,
    format_spec: FormatSpecification,
    quality_level: QualityLevel,
    reference_images: Sequence[str] | str | int | None = None,
) -> list[str]:
    """Build the core sections in their fixed order.

    Returns:
        Section texts; the multimodal section is omitted when no reference
        images are indicated
    """
    sections = [
        build_specification_header(spec, preset, intel),
        build_placement_instructions(intel),
        build_material_instructions(intel.material_profile),
        build_photography_standards(standards, format_spec),
        build_lighting_specification(intel.lighting_profile),
        build_settings_integration(settings),
        build_multimodal_guidance(reference_images),
        build_quality_assurance(standards, intel.material_profile, quality_level),
        build_absolute_constraints(preset, intel, settings),
    ]
    return [section for section in sections if section]


def assemble_prompt(
    sections: Sequence[str], max_length: int, reserve: int = 100
) -> tuple[str, bool]:
    """Join sections and apply the length budget.

    Args:
        sections: Section texts in order; blank sections are skipped
        max_length: Maximum prompt length in characters
        reserve: Characters reserved for the truncation notice

    Returns:
        Tuple of (prompt, truncated)
    """
    combined = SECTION_SEPARATOR.join(section for section in sections if section.strip())
    if len(combined) <= max_length:
        return combined, False

    keep = max(0, max_length - max(reserve, len(TRUNCATION_NOTICE)))
    logger.warning(
        f"Prompt length {len(combined)} exceeds budget {max_length}, truncating to {keep} chars"
    )
    return combined[:keep].rstrip() + TRUNCATION_NOTICE, True
