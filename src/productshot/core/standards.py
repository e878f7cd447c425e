"""Context photography standards registry.

Static, enum-keyed lookup tables describing how each output context
(catalog shot, lifestyle scene, hero banner, social formats, detail shot)
should be photographed.  All tables are read-only mappings built once at
import; lookups are O(1) and an unknown preset falls back to the catalog
entry.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict

from .models import ContextPreset, FormatSpecification


class CompositionRules(BaseModel):
    model_config = ConfigDict(frozen=True)

    framing: str
    product_placement: str
    negative_space: str
    visual_hierarchy: str
    text_overlay_space: str | None = None


class TechnicalSpecs(BaseModel):
    model_config = ConfigDict(frozen=True)

    resolution: str
    aspect_ratio: str
    focus_points: tuple[str, ...]
    depth_of_field: str
    color_space: str
    exposure_guidance: str


class QualityRequirements(BaseModel):
    model_config = ConfigDict(frozen=True)

    sharpness_level: str
    noise_level: str
    color_accuracy: str
    dynamic_range: str


class OutputOptimization(BaseModel):
    model_config = ConfigDict(frozen=True)

    primary_usage: str
    platform_requirements: tuple[str, ...]
    scalability_needs: tuple[str, ...]
    delivery_format: str


class ContextStandards(BaseModel):
    """Photography rules for one context preset."""

    model_config = ConfigDict(frozen=True)

    description: str
    composition: CompositionRules
    technical: TechnicalSpecs
    quality: QualityRequirements
    output: OutputOptimization


_STANDARDS = {
    ContextPreset.CATALOG: ContextStandards(
        description="Clean commercial catalog shot on neutral background",
        composition=CompositionRules(
            framing="Clean product isolation with 10-15% padding",
            product_placement="Centered with optimal viewing angle",
            negative_space="Minimal, neutral background only",
            visual_hierarchy="Product as sole focus, zero distractions",
        ),
        technical=TechnicalSpecs(
            resolution="High resolution for catalog printing",
            aspect_ratio="1:1 square format",
            focus_points=("Entire product sharp", "Edge to edge clarity"),
            depth_of_field="Extended DOF (f/8-f/11 equivalent)",
            color_space="sRGB with accurate color reproduction",
            exposure_guidance="Bright, even exposure with detail retention",
        ),
        quality=QualityRequirements(
            sharpness_level="catalog",
            noise_level="ultra_low",
            color_accuracy="critical",
            dynamic_range="standard",
        ),
        output=OutputOptimization(
            primary_usage="E-commerce catalog and product listings",
            platform_requirements=("Online catalogs", "Print materials", "Product databases"),
            scalability_needs=("Thumbnail generation", "Zoom functionality", "Print scaling"),
            delivery_format="High-resolution with clean background for masking",
        ),
    ),
    ContextPreset.LIFESTYLE: ContextStandards(
        description="Realistic lifestyle scene in appropriate interior environment",
        composition=CompositionRules(
            framing="Environmental context with natural product integration",
            product_placement="Naturally positioned within realistic setting",
            negative_space="Contextual elements that enhance product story",
            visual_hierarchy="Product prominent but environmentally integrated",
        ),
        technical=TechnicalSpecs(
            resolution="Marketing-grade high resolution",
            aspect_ratio="3:2 landscape format",
            focus_points=("Product sharp", "Context appropriately blurred"),
            depth_of_field="Selective focus (f/4-f/5.6 equivalent)",
            color_space="sRGB with lifestyle color grading",
            exposure_guidance="Natural lighting balance with architectural context",
        ),
        quality=QualityRequirements(
            sharpness_level="commercial",
            noise_level="low",
            color_accuracy="high",
            dynamic_range="extended",
        ),
        output=OutputOptimization(
            primary_usage="Marketing materials and website headers",
            platform_requirements=("Website banners", "Social media", "Marketing campaigns"),
            scalability_needs=("Responsive web display", "Social media formats"),
            delivery_format="Optimized for web and print marketing",
        ),
    ),
    ContextPreset.HERO: ContextStandards(
        description="Dramatic hero presentation for premium marketing applications",
        composition=CompositionRules(
            framing="Dramatic presentation optimized for banner placement",
            product_placement="Positioned for maximum visual impact",
            negative_space="Strategic space for text overlay integration",
            visual_hierarchy="Premium brand presentation with clear focal hierarchy",
            text_overlay_space="Designated zones for marketing text",
        ),
        technical=TechnicalSpecs(
            resolution="Ultra-high resolution for large format display",
            aspect_ratio="16:9 banner format",
            focus_points=("Product hero sharp", "Background contextually appropriate"),
            depth_of_field="Dramatic selective focus (f/2.8-f/4 equivalent)",
            color_space="sRGB with hero-grade color treatment",
            exposure_guidance="Dramatic lighting with strong visual impact",
        ),
        quality=QualityRequirements(
            sharpness_level="hero",
            noise_level="ultra_low",
            color_accuracy="critical",
            dynamic_range="extended",
        ),
        output=OutputOptimization(
            primary_usage="Website headers and premium marketing",
            platform_requirements=("Website headers", "Premium marketing", "Trade show displays"),
            scalability_needs=("Large format display", "High DPI screens", "Print scaling"),
            delivery_format="Multiple resolutions with text overlay zones",
        ),
    ),
    ContextPreset.SOCIAL_SQUARE: ContextStandards(
        description="Social media square post with engagement appeal",
        composition=CompositionRules(
            framing="Social media optimized with thumb-stopping appeal",
            product_placement="Feed-friendly centered composition",
            negative_space="Clean, social-media appropriate background",
            visual_hierarchy="Mobile-optimized visual impact",
        ),
        technical=TechnicalSpecs(
            resolution="Social media optimized (1080x1080 minimum)",
            aspect_ratio="1:1 square format",
            focus_points=("Product sharp for mobile viewing", "Background complementary"),
            depth_of_field="Social media appropriate (f/4-f/8 equivalent)",
            color_space="sRGB optimized for mobile screens",
            exposure_guidance="Bright, engaging exposure for social media",
        ),
        quality=QualityRequirements(
            sharpness_level="commercial",
            noise_level="low",
            color_accuracy="high",
            dynamic_range="compressed",
        ),
        output=OutputOptimization(
            primary_usage="Social feed posts and social media marketing",
            platform_requirements=("Instagram feed", "Facebook posts", "Social media advertising"),
            scalability_needs=("Mobile optimization", "Fast loading"),
            delivery_format="Social media ready with mobile optimization",
        ),
    ),
    ContextPreset.SOCIAL_STORY: ContextStandards(
        description="Vertical mobile story format with immediate visual impact",
        composition=CompositionRules(
            framing="Vertical mobile-first composition",
            product_placement="Upper two-thirds positioning for mobile viewing",
            negative_space="Bottom third kept calm for story interface elements",
            visual_hierarchy="Quick visual impact for story consumption",
        ),
        technical=TechnicalSpecs(
            resolution="Mobile story optimized (1080x1920)",
            aspect_ratio="9:16 vertical format",
            focus_points=("Product prominent in vertical frame",),
            depth_of_field="Mobile appropriate focus (f/4-f/6.3 equivalent)",
            color_space="sRGB for mobile consumption",
            exposure_guidance="Mobile-optimized bright, punchy exposure",
        ),
        quality=QualityRequirements(
            sharpness_level="commercial",
            noise_level="low",
            color_accuracy="high",
            dynamic_range="compressed",
        ),
        output=OutputOptimization(
            primary_usage="Stories and vertical content",
            platform_requirements=("Instagram Stories", "Facebook Stories", "TikTok"),
            scalability_needs=("Mobile optimization", "Vertical format scaling"),
            delivery_format="Vertical mobile-first with engagement optimization",
        ),
    ),
    ContextPreset.DETAIL: ContextStandards(
        description="Close-up craftsmanship showcase highlighting quality and materials",
        composition=CompositionRules(
            framing="Macro detail focus highlighting craftsmanship",
            product_placement="Close-up positioning to show construction quality",
            negative_space="Minimal, focused on material and construction details",
            visual_hierarchy="Material texture and quality indicators as focus",
        ),
        technical=TechnicalSpecs(
            resolution="Detail-capture high resolution",
            aspect_ratio="1:1 square detail format",
            focus_points=("Sharp material details", "Construction quality visible"),
            depth_of_field="Macro-style focus (f/8-f/16 equivalent)",
            color_space="sRGB with detail enhancement",
            exposure_guidance="Detail-optimized lighting to show texture and materials",
        ),
        quality=QualityRequirements(
            sharpness_level="detail",
            noise_level="ultra_low",
            color_accuracy="critical",
            dynamic_range="extended",
        ),
        output=OutputOptimization(
            primary_usage="Quality demonstration and material showcase",
            platform_requirements=("Product detail pages", "Material portfolios"),
            scalability_needs=("High zoom capability", "Detail preservation"),
            delivery_format="High resolution with material detail preservation",
        ),
    ),
}

CONTEXT_STANDARDS: MappingProxyType[ContextPreset, ContextStandards] = MappingProxyType(_STANDARDS)

FORMAT_SPECIFICATIONS: MappingProxyType[ContextPreset, FormatSpecification] = MappingProxyType(
    {
        ContextPreset.CATALOG: FormatSpecification(
            aspect_ratio="1:1", dimensions="1024×1024px", description="Perfect square catalog format"
        ),
        ContextPreset.SOCIAL_SQUARE: FormatSpecification(
            aspect_ratio="1:1", dimensions="1024×1024px", description="Square social post format"
        ),
        ContextPreset.SOCIAL_STORY: FormatSpecification(
            aspect_ratio="9:16",
            dimensions="1080×1920px",
            description="Vertical story format",
        ),
        ContextPreset.LIFESTYLE: FormatSpecification(
            aspect_ratio="3:2", dimensions="1536×1024px", description="Landscape lifestyle format"
        ),
        ContextPreset.HERO: FormatSpecification(
            aspect_ratio="16:9", dimensions="1920×1080px", description="Wide banner hero format"
        ),
        ContextPreset.DETAIL: FormatSpecification(
            aspect_ratio="1:1", dimensions="1024×1024px", description="Square detail shot format"
        ),
    }
)

# Recommended setting overrides per context.  Applied only to fields the
# caller did not set explicitly.
_BASE_OPTIMAL: dict[str, Any] = {
    "lighting": "studio_softbox",
    "background_style": "minimal",
    "props": (),
}

OPTIMAL_SETTINGS: MappingProxyType[ContextPreset, MappingProxyType[str, Any]] = MappingProxyType(
    {
        ContextPreset.CATALOG: MappingProxyType(
            {**_BASE_OPTIMAL, "product_position": "center", "background_style": "plain"}
        ),
        ContextPreset.LIFESTYLE: MappingProxyType(
            {
                **_BASE_OPTIMAL,
                "background_style": "lifestyle",
                "lighting": "soft_daylight",
                "props": ("plant",),
            }
        ),
        ContextPreset.HERO: MappingProxyType(
            {
                **_BASE_OPTIMAL,
                "product_position": "left",
                "reserved_text_zone": "right",
                "background_style": "gradient",
            }
        ),
        ContextPreset.SOCIAL_SQUARE: MappingProxyType(
            {**_BASE_OPTIMAL, "product_position": "center", "lighting": "soft_daylight"}
        ),
        ContextPreset.SOCIAL_STORY: MappingProxyType(
            {**_BASE_OPTIMAL, "product_position": "center", "reserved_text_zone": "bottom"}
        ),
        ContextPreset.DETAIL: MappingProxyType(dict(_BASE_OPTIMAL)),
    }
)


def coerce_preset(preset: ContextPreset | str | None) -> ContextPreset:
    """Resolve a preset value, falling back to catalog for anything unknown."""
    if isinstance(preset, ContextPreset):
        return preset
    try:
        return ContextPreset(str(preset).strip().lower().replace("_", "-"))
    except ValueError:
        return ContextPreset.CATALOG


def get_context_standards(preset: ContextPreset | str | None) -> ContextStandards:
    return CONTEXT_STANDARDS[coerce_preset(preset)]


def get_format_specification(preset: ContextPreset | str | None) -> FormatSpecification:
    return FORMAT_SPECIFICATIONS[coerce_preset(preset)]


def optimal_settings(preset: ContextPreset | str | None) -> MappingProxyType[str, Any]:
    return OPTIMAL_SETTINGS[coerce_preset(preset)]
