"""Pydantic data models for prompt synthesis.

Every record in this module is immutable (``frozen=True``) and list-valued
fields are stored as tuples, so a record can be shared freely between calls
without defensive copying.  Nothing here outlives a single synthesis call.

Models
------
ProductSpecification
    Caller-supplied product description (name, type, materials, dimensions).
ConfigurationSettings
    Caller-supplied rendering preferences (context preset, background,
    lighting, strict mode, approved props, ...).
ProductIntelligence
    Derived classification record produced by the classifier.
PlacementAnalysis
    Confidence-scored placement detection.
ConstraintBlock
    One categorized, severity-tagged block of prohibitions and requirements.
PromptAssemblyResult
    The final prompt plus score, readiness flag and echoed metadata.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .config import QualityLevel


class ContextPreset(str, Enum):
    """Intended output use-case for the generated image."""

    CATALOG = "catalog"
    LIFESTYLE = "lifestyle"
    HERO = "hero"
    SOCIAL_SQUARE = "social-square"
    SOCIAL_STORY = "social-story"
    DETAIL = "detail"

    @property
    def label(self) -> str:
        return self.value.upper()


class FurnitureCategory(str, Enum):
    SEATING = "seating"
    TABLES = "tables"
    STORAGE = "storage"
    WORKSTATIONS = "workstations"
    LIGHTING = "lighting"
    DECOR = "decor"
    TEXTILES = "textiles"
    OUTDOOR = "outdoor"
    UNKNOWN = "unknown"


class PlacementType(str, Enum):
    """Physical mounting/support mode of a furniture item."""

    FLOOR_STANDING = "floor-standing"
    WALL_MOUNTED = "wall-mounted"
    CEILING_MOUNTED = "ceiling-mounted"
    TABLETOP = "tabletop"
    BUILT_IN = "built-in"

    @property
    def label(self) -> str:
        return self.value.replace("-", " ")


class MaterialType(str, Enum):
    WOOD = "wood"
    METAL = "metal"
    FABRIC = "fabric"
    LEATHER = "leather"
    GLASS = "glass"
    PLASTIC = "plastic"
    STONE = "stone"
    CERAMIC = "ceramic"
    COMPOSITE = "composite"


class TextureComplexity(str, Enum):
    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"


class ReflectanceLevel(str, Enum):
    MATTE = "matte"
    SATIN = "satin"
    GLOSS = "gloss"
    MIRROR = "mirror"


class LightingIntensity(str, Enum):
    SOFT = "soft"
    BALANCED = "balanced"
    DRAMATIC = "dramatic"
    TECHNICAL = "technical"


class ShadowStyle(str, Enum):
    MINIMAL = "minimal"
    SOFT = "soft"
    DRAMATIC = "dramatic"
    TECHNICAL = "technical"


class ViewingDistance(str, Enum):
    CLOSE = "close"
    MEDIUM = "medium"
    DISTANT = "distant"


class QualityTier(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Severity(str, Enum):
    """Severity tag carried by every constraint block."""

    ABSOLUTE = "absolute"
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"


class ConstraintCategory(str, Enum):
    HUMAN_ELEMENTS = "human-elements"
    IRRELEVANT_OBJECTS = "irrelevant-objects"
    ARTIFACTS = "artifacts"
    PLACEMENT = "placement"
    SPECIFICATION_ADHERENCE = "specification-adherence"
    CONTEXT = "context"
    VALIDATION = "validation"


class EnforcementLevel(str, Enum):
    ABSOLUTE = "ABSOLUTE"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Caller inputs
# ---------------------------------------------------------------------------


class Dimensions(_Frozen):
    """Optional physical dimensions of the product."""

    width: float | None = Field(default=None, gt=0)
    height: float | None = Field(default=None, gt=0)
    depth: float | None = Field(default=None, gt=0)
    unit: str = Field(default="cm", description="Unit of all three dimensions")

    def is_empty(self) -> bool:
        return self.width is None and self.height is None and self.depth is None

    def describe(self) -> str:
        """Render as ``W×H×Dunit`` with ``?`` for missing values."""
        parts = [_format_number(v) for v in (self.width, self.height, self.depth)]
        return f"{'×'.join(parts)}{self.unit}"

    def largest_cm(self) -> float | None:
        """Largest known dimension converted to centimetres."""
        known = [v for v in (self.width, self.height, self.depth) if v is not None]
        if not known:
            return None
        return max(known) * _UNIT_TO_CM.get(self.unit.lower(), 1.0)

    def height_cm(self) -> float | None:
        if self.height is None:
            return None
        return self.height * _UNIT_TO_CM.get(self.unit.lower(), 1.0)


_UNIT_TO_CM = {"mm": 0.1, "cm": 1.0, "m": 100.0, "in": 2.54, "inch": 2.54, "ft": 30.48}


def _format_number(value: float | None) -> str:
    if value is None:
        return "?"
    return f"{value:g}"


class ProductSpecification(_Frozen):
    """Structured product description supplied per request.

    Attributes:
        name: Product name (mandatory, non-blank).
        product_type: Free-text category hint, e.g. ``"wall mounted desk"``
            (mandatory, non-blank).
        materials: Free-text material description.
        dimensions: Optional physical dimensions.
        additional_specs: Optional free-text notes.
    """

    name: str = Field(..., description="Product name")
    product_type: str = Field(..., description="Free-text product type")
    materials: str = Field(default="", description="Free-text materials")
    dimensions: Dimensions | None = Field(default=None)
    additional_specs: str | None = Field(default=None)


class ConfigurationSettings(_Frozen):
    """Rendering preferences supplied per request.

    Attributes:
        context_preset: Output use-case.
        background_style: Background style (plain, minimal, lifestyle, gradient).
        product_position: Product position in frame (left, right, center).
        lighting: Lighting preference (soft_daylight, studio_softbox, warm_ambient).
        strict_mode: Adds zero-tolerance specification-adherence language.
        quality: Quality tier.
        variations: Number of image variations requested (1-4).
        props: Approved props allow-list.
        reserved_text_zone: Area kept clear for text overlay (left, right, top, bottom).
    """

    context_preset: ContextPreset = ContextPreset.CATALOG
    background_style: str = "minimal"
    product_position: str = "center"
    lighting: str = "soft_daylight"
    strict_mode: bool = True
    quality: QualityTier = QualityTier.MEDIUM
    variations: int = Field(default=1, ge=1, le=4)
    props: tuple[str, ...] = ()
    reserved_text_zone: str | None = None


# ---------------------------------------------------------------------------
# Derived intelligence
# ---------------------------------------------------------------------------


class MaterialProfile(_Frozen):
    primary: MaterialType = MaterialType.COMPOSITE
    secondary: tuple[MaterialType, ...] = ()
    texture_complexity: TextureComplexity = TextureComplexity.SIMPLE
    reflectance_level: ReflectanceLevel = ReflectanceLevel.MATTE
    required_lighting: LightingIntensity = LightingIntensity.BALANCED


class ScaleGuidance(_Frozen):
    human_reference: bool
    proportional_elements: tuple[str, ...]
    dimensional_context: str
    viewing_distance: ViewingDistance


class LightingProfile(_Frozen):
    primary_angle: int = Field(..., description="Degrees from camera axis")
    fill_ratio: float = Field(..., ge=0.0, le=1.0)
    shadow_style: ShadowStyle
    color_temperature: str
    special_requirements: tuple[str, ...] = ()


class ProductIntelligence(_Frozen):
    """Classification record computed fresh for every call."""

    category: FurnitureCategory
    placement_type: PlacementType
    material_profile: MaterialProfile
    scale_guidance: ScaleGuidance
    lighting_profile: LightingProfile


class PlacementAnalysis(_Frozen):
    """Confidence-scored placement detection."""

    detected_placement: PlacementType
    confidence: float = Field(..., ge=0.0, le=1.0)
    supporting_keywords: tuple[str, ...] = ()
    conflicting_keywords: tuple[str, ...] = ()
    validation_passed: bool = True
    recommendations: tuple[str, ...] = ()
    enforcement_level: EnforcementLevel = EnforcementLevel.LOW


# ---------------------------------------------------------------------------
# Constraints
# ---------------------------------------------------------------------------


class ConstraintSection(_Frozen):
    """A headed list of prohibitions (⛔) or requirements (✅)."""

    heading: str
    statements: tuple[str, ...]
    prohibitive: bool = True


class ConstraintBlock(_Frozen):
    category: ConstraintCategory
    severity: Severity
    title: str
    sections: tuple[ConstraintSection, ...] = ()
    preamble: tuple[str, ...] = ()
    validation: str = ""

    @property
    def statement_count(self) -> int:
        return sum(len(section.statements) for section in self.sections)

    def render(self) -> str:
        """Render the block as prompt text."""
        lines = [f"🚫 {self.title} [{self.severity.value.upper()}]"]
        lines.extend(self.preamble)
        for section in self.sections:
            marker = "⛔" if section.prohibitive else "✅"
            lines.append("")
            lines.append(f"{marker} {section.heading}:")
            lines.extend(f"• {statement}" for statement in section.statements)
        if self.validation:
            lines.append("")
            lines.append(f"VALIDATION REQUIREMENT: {self.validation}")
        return "\n".join(lines)


class ConstraintStats(_Frozen):
    """Constraint coverage counters.

    The marker counts are substring counts over the rendered constraint
    text and drive the quality score.  The ``*_blocks`` counters are the
    structured equivalent taken from the block severities.
    """

    total_constraints: int = 0
    absolute_constraints: int = 0
    critical_constraints: int = 0
    placement_specific: int = 0
    context_specific: int = 0
    material_specific: int = 0
    absolute_blocks: int = 0
    critical_blocks: int = 0
    high_blocks: int = 0
    medium_blocks: int = 0
    statement_count: int = 0


class ConstraintCoverage(_Frozen):
    is_comprehensive: bool
    missing_categories: tuple[str, ...]
    coverage_score: int


# ---------------------------------------------------------------------------
# Validation and results
# ---------------------------------------------------------------------------


class PromptValidation(_Frozen):
    is_valid: bool
    length: int
    max_length: int
    issues: tuple[str, ...] = ()
    optimization_suggestions: tuple[str, ...] = ()


class CriticalIssuesAddressed(_Frozen):
    product_integrity: bool = False
    context_adherence: bool = False
    format_compliance: bool = False
    quality_assurance: bool = False
    process_alignment: bool = False

    def count(self) -> int:
        return sum(1 for flag in self.model_dump().values() if flag)


class FormatSpecification(_Frozen):
    aspect_ratio: str
    dimensions: str
    description: str


class ComplianceDetails(_Frozen):
    product_integrity: bool
    context_adherence: bool
    format_compliance: bool
    constraint_enforcement: bool
    quality_assurance: bool

    def count(self) -> int:
        return sum(1 for flag in self.model_dump().values() if flag)


class ProductionValidationReport(_Frozen):
    """Result of validating an arbitrary prompt for production use."""

    is_production_ready: bool
    issues: tuple[str, ...]
    recommendations: tuple[str, ...]
    quality_score: int = Field(..., ge=0, le=100)
    details: ComplianceDetails
    compliance_report: tuple[str, ...]


class PromptAssemblyResult(_Frozen):
    """Final output of a synthesis call."""

    prompt: str
    prompt_length: int
    quality_score: int = Field(..., ge=0, le=100)
    production_ready: bool
    warnings: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()
    optimizations_applied: tuple[str, ...] = ()

    engine_version: str
    quality_level: QualityLevel
    context_preset: ContextPreset
    product_intelligence: ProductIntelligence
    placement_analysis: PlacementAnalysis | None = None
    constraint_stats: ConstraintStats
    validation: PromptValidation | None = None
    critical_issues_addressed: CriticalIssuesAddressed
    format_spec: FormatSpecification
    applied_constraints: tuple[str, ...] = ()
    truncated: bool = False
