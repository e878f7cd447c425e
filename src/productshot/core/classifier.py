"""Product classification from free-text specifications.

The classifier turns a :class:`ProductSpecification` into a
:class:`ProductIntelligence` record using ordered keyword tables.  It never
fails: text that matches nothing resolves to safe defaults (category
``unknown``, placement ``floor-standing``, primary material ``composite``).

Keyword Resolution
------------------
- **Category**: ordered substring matching over the product type; the first
  category whose keyword set matches wins.
- **Placement**: ordered substring matching over the product type.
- **Materials**: every material vocabulary is scanned; the first detected
  material is primary, the rest are secondary in detection order.

All tables are module-level tuples built once at import.
"""

import logging

from .models import (
    Dimensions,
    FurnitureCategory,
    LightingIntensity,
    LightingProfile,
    MaterialProfile,
    MaterialType,
    PlacementType,
    ProductIntelligence,
    ProductSpecification,
    ReflectanceLevel,
    ScaleGuidance,
    ShadowStyle,
    TextureComplexity,
    ViewingDistance,
)

logger = logging.getLogger(__name__)

# Order matters: the first matching entry wins.
CATEGORY_KEYWORDS: tuple[tuple[FurnitureCategory, tuple[str, ...]], ...] = (
    (FurnitureCategory.SEATING, ("chair", "sofa", "stool", "bench", "seat")),
    (FurnitureCategory.TABLES, ("desk", "table", "workstation", "counter", "surface")),
    (
        FurnitureCategory.STORAGE,
        ("cabinet", "shelf", "drawer", "storage", "closet", "wardrobe"),
    ),
    (FurnitureCategory.WORKSTATIONS, ("workstation", "office", "work")),
    (FurnitureCategory.LIGHTING, ("lamp", "light", "fixture")),
    (FurnitureCategory.OUTDOOR, ("outdoor", "patio", "garden")),
    (FurnitureCategory.TEXTILES, ("rug", "curtain", "pillow", "textile", "fabric")),
)

PLACEMENT_KEYWORDS: tuple[tuple[PlacementType, tuple[str, ...]], ...] = (
    (PlacementType.WALL_MOUNTED, ("wall", "mounted", "hanging")),
    (PlacementType.CEILING_MOUNTED, ("ceiling", "pendant", "suspended")),
    (PlacementType.TABLETOP, ("tabletop", "desktop")),
    (PlacementType.BUILT_IN, ("built", "integrated", "custom")),
)

MATERIAL_VOCABULARY: tuple[tuple[MaterialType, tuple[str, ...]], ...] = (
    (MaterialType.WOOD, ("wood", "oak", "pine", "walnut", "maple", "cherry", "teak")),
    (
        MaterialType.METAL,
        ("metal", "steel", "aluminum", "aluminium", "brass", "iron", "chrome"),
    ),
    (
        MaterialType.FABRIC,
        ("fabric", "cotton", "linen", "wool", "polyester", "textile", "velvet"),
    ),
    (MaterialType.LEATHER, ("leather", "hide")),
    (MaterialType.GLASS, ("glass", "crystal")),
    (MaterialType.PLASTIC, ("plastic", "acrylic", "polymer")),
    (MaterialType.STONE, ("stone", "marble", "granite", "concrete")),
    (MaterialType.CERAMIC, ("ceramic", "porcelain")),
)

# (angle, fill ratio, shadow style) keyed by required lighting intensity
LIGHTING_TABLE: dict[LightingIntensity, tuple[int, float, ShadowStyle]] = {
    LightingIntensity.SOFT: (45, 0.6, ShadowStyle.SOFT),
    LightingIntensity.BALANCED: (30, 0.4, ShadowStyle.MINIMAL),
    LightingIntensity.DRAMATIC: (60, 0.2, ShadowStyle.DRAMATIC),
    LightingIntensity.TECHNICAL: (90, 0.3, ShadowStyle.TECHNICAL),
}

COLOR_TEMPERATURES: dict[MaterialType, str] = {
    MaterialType.WOOD: "3000K",
    MaterialType.METAL: "5600K",
}
DEFAULT_COLOR_TEMPERATURE = "5000K"

PROPORTIONAL_ELEMENTS: dict[FurnitureCategory, tuple[str, ...]] = {
    FurnitureCategory.SEATING: ("floor contact", "seat height 45-50cm", "backrest proportion"),
    FurnitureCategory.TABLES: ("floor contact", "surface height 70-75cm", "leg spacing"),
    FurnitureCategory.WORKSTATIONS: (
        "floor or wall reference",
        "working height 72-76cm",
        "ergonomic proportions",
    ),
    FurnitureCategory.STORAGE: (
        "floor or wall contact",
        "human reach zones",
        "door/drawer proportions",
    ),
    FurnitureCategory.LIGHTING: ("mounting height", "shade proportions", "human scale reference"),
}
DEFAULT_PROPORTIONAL_ELEMENTS = ("realistic scale", "appropriate proportions")

HUMAN_REFERENCE_CATEGORIES = frozenset(
    {FurnitureCategory.SEATING, FurnitureCategory.TABLES, FurnitureCategory.WORKSTATIONS}
)


def categorize_product(product_type: str) -> FurnitureCategory:
    """Resolve the furniture category from the product type string."""
    text = product_type.lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return category
    return FurnitureCategory.UNKNOWN


def match_placement(product_type: str) -> tuple[PlacementType, str | None]:
    """Resolve the placement and the keyword that decided it.

    The keyword is None when nothing matched and the floor-standing default
    applies.
    """
    text = product_type.lower()
    for placement, keywords in PLACEMENT_KEYWORDS:
        for keyword in keywords:
            if keyword in text:
                return placement, keyword
    return PlacementType.FLOOR_STANDING, None


def determine_placement(product_type: str) -> PlacementType:
    """Resolve the placement type from the product type string."""
    return match_placement(product_type)[0]


def detect_materials(materials: str) -> list[MaterialType]:
    """Return every known material mentioned, in vocabulary order."""
    text = materials.lower()
    return [
        material
        for material, keywords in MATERIAL_VOCABULARY
        if any(keyword in text for keyword in keywords)
    ]


def determine_reflectance(material: MaterialType, description: str) -> ReflectanceLevel:
    """Infer surface reflectance from descriptor words and the primary material."""
    text = description.lower()
    if any(word in text for word in ("glossy", "polished", "shiny")) or material == MaterialType.GLASS:
        return ReflectanceLevel.GLOSS
    if any(word in text for word in ("satin", "semi")) or material == MaterialType.METAL:
        return ReflectanceLevel.SATIN
    if any(word in text for word in ("mirror", "reflective")):
        return ReflectanceLevel.MIRROR
    return ReflectanceLevel.MATTE


def determine_lighting_intensity(
    material: MaterialType, reflectance: ReflectanceLevel
) -> LightingIntensity:
    if material == MaterialType.GLASS or reflectance == ReflectanceLevel.MIRROR:
        return LightingIntensity.TECHNICAL
    if material == MaterialType.METAL or reflectance == ReflectanceLevel.GLOSS:
        return LightingIntensity.DRAMATIC
    if material in (MaterialType.FABRIC, MaterialType.LEATHER):
        return LightingIntensity.SOFT
    return LightingIntensity.BALANCED


def analyze_materials(materials: str) -> MaterialProfile:
    """Build the material profile for a free-text materials description."""
    detected = detect_materials(materials)
    primary = detected[0] if detected else MaterialType.COMPOSITE
    secondary = tuple(detected[1:])

    if len(secondary) > 1:
        complexity = TextureComplexity.COMPLEX
    elif len(secondary) == 1:
        complexity = TextureComplexity.MODERATE
    else:
        complexity = TextureComplexity.SIMPLE

    reflectance = determine_reflectance(primary, materials)
    return MaterialProfile(
        primary=primary,
        secondary=secondary,
        texture_complexity=complexity,
        reflectance_level=reflectance,
        required_lighting=determine_lighting_intensity(primary, reflectance),
    )


def describe_dimensions(dimensions: Dimensions | None) -> str:
    if dimensions is None or dimensions.is_empty():
        return "Standard furniture proportions apply"
    return f"Product dimensions: {dimensions.describe()}"


def calculate_scale_guidance(
    spec: ProductSpecification, category: FurnitureCategory
) -> ScaleGuidance:
    if category in (FurnitureCategory.LIGHTING, FurnitureCategory.DECOR):
        distance = ViewingDistance.CLOSE
    elif category == FurnitureCategory.OUTDOOR:
        distance = ViewingDistance.DISTANT
    else:
        distance = ViewingDistance.MEDIUM

    return ScaleGuidance(
        human_reference=category in HUMAN_REFERENCE_CATEGORIES,
        proportional_elements=PROPORTIONAL_ELEMENTS.get(category, DEFAULT_PROPORTIONAL_ELEMENTS),
        dimensional_context=describe_dimensions(spec.dimensions),
        viewing_distance=distance,
    )


def special_lighting_requirements(
    profile: MaterialProfile, category: FurnitureCategory
) -> tuple[str, ...]:
    requirements: list[str] = []

    if profile.reflectance_level in (ReflectanceLevel.GLOSS, ReflectanceLevel.MIRROR):
        requirements.append("Polarized lighting to reduce glare")
        requirements.append("Multiple light sources to prevent hotspots")

    if profile.primary in (MaterialType.FABRIC, MaterialType.LEATHER):
        requirements.append("Directional lighting to show texture")
        requirements.append("Avoid flat lighting that eliminates texture")

    if category == FurnitureCategory.LIGHTING:
        requirements.append("Show luminaire in both on and off states if applicable")
        requirements.append("Demonstrate light quality and distribution")

    return tuple(requirements)


def determine_lighting(profile: MaterialProfile, category: FurnitureCategory) -> LightingProfile:
    angle, fill, shadow = LIGHTING_TABLE[profile.required_lighting]
    return LightingProfile(
        primary_angle=angle,
        fill_ratio=fill,
        shadow_style=shadow,
        color_temperature=COLOR_TEMPERATURES.get(profile.primary, DEFAULT_COLOR_TEMPERATURE),
        special_requirements=special_lighting_requirements(profile, category),
    )


def classify_product(spec: ProductSpecification) -> ProductIntelligence:
    """Classify a product specification.

    Args:
        spec: Product specification to classify

    Returns:
        ProductIntelligence with category, placement, material profile,
        scale guidance and lighting profile
    """
    category = categorize_product(spec.product_type)
    placement = determine_placement(spec.product_type)
    material_profile = analyze_materials(spec.materials)

    logger.debug(
        f"Classified '{spec.name}': category={category.value}, "
        f"placement={placement.value}, primary={material_profile.primary.value}"
    )

    return ProductIntelligence(
        category=category,
        placement_type=placement,
        material_profile=material_profile,
        scale_guidance=calculate_scale_guidance(spec, category),
        lighting_profile=determine_lighting(material_profile, category),
    )
