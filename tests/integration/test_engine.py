"""Integration tests for end-to-end prompt synthesis.

These tests run the full pipeline (classification, placement analysis,
settings optimization, assembly, constraints, validation and scoring) and
check the observable contract of PromptAssemblyResult.
"""

import pytest

from productshot.core.config import EngineConfig, QualityLevel
from productshot.core.engine import (
    ENGINE_VERSION,
    NOT_READY_WARNING,
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
    FurnitureCategory,
    PlacementType,
    ProductSpecification,
)
from productshot.core.prompt_builder import TRUNCATION_NOTICE
from productshot.core.validation import InvalidInputError

SPECS = [
    ProductSpecification(name="Walnut Wall Shelf", product_type="wall mounted shelf", materials="solid walnut"),
    ProductSpecification(
        name="Executive Chair",
        product_type="executive office chair",
        materials="black leather, chrome base",
    ),
    ProductSpecification(name="Pendant", product_type="pendant light", materials="brass, opal glass"),
    ProductSpecification(name="?", product_type="?"),
    ProductSpecification(
        name="Lounge Set",
        product_type="outdoor sofa set",
        materials="teak, polyester, steel, glass, stone",
        dimensions=Dimensions(width=2.4, height=0.8, depth=0.9, unit="m"),
        additional_specs="Weatherproof cushions included",
    ),
]


@pytest.fixture
def cfg() -> EngineConfig:
    """Create a default engine configuration.

    Returns:
        EngineConfig without .env loading
    """
    return EngineConfig(_env_file=None)


class TestWallMountedShelfScenario:
    """Wall mounted walnut shelf in a lifestyle scene."""

    def test_placement_and_constraints(self, wall_shelf_spec, cfg):
        """Placement is wall-mounted with floor-contact and hardware constraints."""
        result = synthesize_prompt(wall_shelf_spec, preset="lifestyle", engine_config=cfg)
        assert result.product_intelligence.placement_type == PlacementType.WALL_MOUNTED
        assert result.placement_analysis.detected_placement == PlacementType.WALL_MOUNTED
        assert "ABSOLUTELY NO floor contact" in result.prompt
        assert "zero floor contact" in result.prompt
        assert "MUST show visible mounting hardware" in result.prompt

    def test_production_ready(self, wall_shelf_spec, cfg):
        """The confident wall-mounted shelf is production ready."""
        result = synthesize_prompt(wall_shelf_spec, preset="lifestyle", engine_config=cfg)
        assert result.production_ready
        assert result.warnings == ()
        assert "Intelligent Placement Detection" in result.optimizations_applied
        assert result.format_spec.aspect_ratio == "3:2"
        assert "Proper wall mounting" in result.applied_constraints


class TestExecutiveChairScenario:
    """Leather executive chair as a catalog shot."""

    def test_category_and_catalog_rules(self, cfg):
        """Seating in catalog keeps every staging prohibition and approves no props."""
        spec = ProductSpecification(
            name="Executive Chair",
            product_type="executive office chair",
            materials="black leather, chrome base",
        )
        result = synthesize_prompt(spec, preset=ContextPreset.CATALOG, engine_config=cfg)
        assert result.product_intelligence.category == FurnitureCategory.SEATING
        assert result.context_preset == ContextPreset.CATALOG
        assert "APPROVED PROPS FOR THIS GENERATION: NONE" in result.prompt
        assert "NO environmental elements or lifestyle props" in result.prompt
        assert "other than the approved" not in result.prompt

    def test_floor_standing_detection(self, executive_chair_spec, cfg):
        """The chrome base supports a confident floor-standing placement."""
        result = synthesize_prompt(executive_chair_spec, preset="catalog", engine_config=cfg)
        assert result.product_intelligence.placement_type == PlacementType.FLOOR_STANDING
        assert result.placement_analysis.confidence >= cfg.placement_override_confidence
        assert result.production_ready


class TestApprovedPropsScenario:
    """Strict mode with a single approved plant."""

    def test_plant_is_sole_approved_item(self, wall_desk_spec, plant_settings, cfg):
        """The object block names plant as the sole approved item."""
        result = synthesize_prompt(wall_desk_spec, plant_settings, engine_config=cfg)
        assert "APPROVED PROPS FOR THIS GENERATION: plant" in result.prompt
        assert "plant is the sole approved item." in result.prompt
        assert "All other objects enumerated below are ABSOLUTELY PROHIBITED." in result.prompt
        assert "• NO cups, mugs, or drinking glasses\n" in result.prompt
        assert "NO plants, flowers, or greenery other than the approved plant" in result.prompt

    def test_strict_language(self, wall_desk_spec, plant_settings, cfg):
        """Strict mode adds zero-tolerance adherence language."""
        result = synthesize_prompt(wall_desk_spec, plant_settings, engine_config=cfg)
        assert "STRICT MODE ACTIVE - EXACT FIDELITY REQUIRED" in result.prompt
        assert "STRICT MODE: ZERO TOLERANCE" in result.prompt


class TestInputErrors:
    """Only malformed input is rejected."""

    @pytest.mark.parametrize("name,product_type", [("", "chair"), ("Chair", "  ")])
    def test_blank_fields_rejected(self, name, product_type, cfg):
        """Blank name or type raises InvalidInputError before classification."""
        spec = ProductSpecification(name=name, product_type=product_type)
        with pytest.raises(InvalidInputError):
            synthesize_prompt(spec, engine_config=cfg)

    def test_unknown_preset_falls_back(self, wall_shelf_spec, cfg):
        """An unknown preset string is treated as catalog."""
        result = synthesize_prompt(wall_shelf_spec, preset="billboard", engine_config=cfg)
        assert result.context_preset == ContextPreset.CATALOG


class TestProperties:
    """Properties that hold for every input."""

    @pytest.mark.parametrize("spec", SPECS)
    @pytest.mark.parametrize("preset", list(ContextPreset))
    def test_score_and_readiness(self, spec, preset, cfg):
        """Score is in [0, 100] and readiness implies its preconditions."""
        result = synthesize_prompt(spec, preset=preset, engine_config=cfg)
        assert isinstance(result.quality_score, int)
        assert 0 <= result.quality_score <= 100
        if result.production_ready:
            assert result.quality_score >= cfg.production_threshold
            assert result.constraint_stats.absolute_constraints > 0
            assert result.validation.is_valid
        else:
            assert NOT_READY_WARNING in result.warnings

    @pytest.mark.parametrize("spec", SPECS)
    @pytest.mark.parametrize("max_length", [500, 1500, 4000, 9000])
    def test_length_budget(self, spec, max_length):
        """The prompt never exceeds the budget and truncation is marked."""
        cfg = EngineConfig(_env_file=None, max_prompt_length=max_length)
        result = synthesize_prompt(spec, preset="hero", reference_images=2, engine_config=cfg)
        assert len(result.prompt) <= max_length
        assert result.prompt_length == len(result.prompt)
        if result.truncated:
            assert result.prompt.endswith(TRUNCATION_NOTICE)
            assert "Length Budget Truncation" in result.optimizations_applied

    def test_small_budget_is_invalid(self, wall_shelf_spec):
        """Cutting away required markers fails structural validation."""
        cfg = EngineConfig(_env_file=None, max_prompt_length=500)
        result = synthesize_prompt(wall_shelf_spec, engine_config=cfg)
        assert result.truncated
        assert not result.validation.is_valid
        assert not result.production_ready

    @pytest.mark.parametrize("spec", SPECS)
    def test_deterministic(self, spec, cfg):
        """Identical inputs give identical results."""
        settings = ConfigurationSettings(props=("plant",), strict_mode=False)
        first = synthesize_prompt(spec, settings, "lifestyle", ["front"], cfg)
        second = synthesize_prompt(spec, settings, "lifestyle", ["front"], cfg)
        assert first == second
        assert first.model_dump_json() == second.model_dump_json()

    @pytest.mark.parametrize(
        "product_type",
        [
            "wall shelf",
            "mounted cabinet",
            "wall desk",
            "mounted mirror",
            "wall unit",
            "wall cabinet with base",
            "hanging bookshelf",
        ],
    )
    def test_wall_keywords_give_wall_mounted(self, product_type, cfg):
        """Types mentioning wall or mounted end up wall-mounted."""
        spec = ProductSpecification(name="Item", product_type=product_type)
        result = synthesize_prompt(spec, engine_config=cfg)
        assert result.product_intelligence.placement_type == PlacementType.WALL_MOUNTED


class TestPlacementConfidenceContract:
    """Override and warning behaviour around the confidence thresholds."""

    def test_low_confidence_keeps_classifier(self, cfg):
        """Below 0.6 the classifier placement is kept with a blocking warning."""
        spec = ProductSpecification(name="Widget", product_type="gadget")
        result = synthesize_prompt(spec, engine_config=cfg)
        assert result.placement_analysis.confidence == 0.0
        assert result.product_intelligence.placement_type == PlacementType.FLOOR_STANDING
        assert "Low placement confidence (0%) - verify placement manually" in result.warnings
        assert not result.production_ready

    def test_middle_band_keeps_classifier(self, cfg):
        """Between 0.6 and 0.7 the classifier placement is kept with a warning."""
        spec = ProductSpecification(
            name="Shelf", product_type="bookshelf", materials="oak", additional_specs="hanging rail"
        )
        result = synthesize_prompt(spec, engine_config=cfg)
        assert result.placement_analysis.detected_placement == PlacementType.CEILING_MOUNTED
        assert result.placement_analysis.confidence == pytest.approx(0.65)
        assert result.product_intelligence.placement_type == PlacementType.FLOOR_STANDING
        assert any(
            warning.startswith("Low placement confidence (65%) - keeping classified placement")
            for warning in result.warnings
        )
        assert "Intelligent Placement Detection" not in result.optimizations_applied
        assert not result.production_ready

    def test_confident_override(self, cfg):
        """A confident analysis replaces the classifier's placement."""
        spec = ProductSpecification(
            name="Crystal Chandelier",
            product_type="chandelier",
            materials="brass, crystal",
            additional_specs="ceiling mounted pendant",
        )
        result = synthesize_prompt(spec, engine_config=cfg)
        assert "Intelligent Placement Detection" in result.optimizations_applied
        assert result.placement_analysis.detected_placement == PlacementType.CEILING_MOUNTED
        assert result.product_intelligence.placement_type == PlacementType.CEILING_MOUNTED

    def test_analysis_disabled(self, wall_shelf_spec):
        """Without intelligent placement there is no analysis or enforcement block."""
        cfg = EngineConfig(_env_file=None, use_intelligent_placement=False)
        result = synthesize_prompt(wall_shelf_spec, engine_config=cfg)
        assert result.placement_analysis is None
        assert "INTELLIGENT PLACEMENT ENFORCEMENT" not in result.prompt
        assert result.product_intelligence.placement_type == PlacementType.WALL_MOUNTED


class TestEntryPoints:
    """Tests for the convenience entry points."""

    def test_production_prompt(self, executive_chair_spec):
        """The production profile tags enterprise quality and the engine version."""
        result = generate_production_prompt(executive_chair_spec, "detail")
        assert result.quality_level == QualityLevel.ENTERPRISE
        assert result.engine_version == ENGINE_VERSION
        assert "Enhanced Constraint System" in result.optimizations_applied

    def test_development_prompt(self, executive_chair_spec):
        """The development profile skips enhanced constraints and is never ready."""
        result = generate_development_prompt(executive_chair_spec, "catalog")
        assert result.validation is None
        assert result.constraint_stats.absolute_constraints == 0
        assert not result.production_ready
        assert len(result.prompt) <= 4000

    def test_custom_prompt(self, executive_chair_spec):
        """Custom overrides apply and quality follows the settings tier."""
        settings = ConfigurationSettings(quality="low")
        result = generate_custom_prompt(
            executive_chair_spec, "catalog", settings, use_enhanced_constraints=False
        )
        assert result.quality_level == QualityLevel.STANDARD
        assert "Enhanced Constraint System" not in result.optimizations_applied

    def test_quick_prompt(self):
        """The quick entry point returns only prompt text."""
        prompt = generate_quick_prompt("Side Table", "side table", "oak")
        assert isinstance(prompt, str)
        assert prompt.startswith("📸 PROFESSIONAL CATALOG FURNITURE PHOTOGRAPHY")

    def test_two_step_prompt(self, wall_shelf_spec):
        """Two-step selections tag the workflow and process alignment."""
        selection = ContextSelection(context_type="social-media", social_format="story")
        result = generate_two_step_prompt(wall_shelf_spec, selection)
        assert result.context_preset == ContextPreset.SOCIAL_STORY
        assert result.format_spec.aspect_ratio == "9:16"
        assert result.optimizations_applied[-1] == "2-Step Workflow Integration"
        assert result.critical_issues_addressed.process_alignment is True

    def test_two_step_keeps_production_score(self, wall_shelf_spec):
        """Forcing process alignment leaves the production score untouched."""
        selection = ContextSelection(context_type="catalog")
        two_step = generate_two_step_prompt(wall_shelf_spec, selection)
        settings = ConfigurationSettings(
            context_preset=ContextPreset.CATALOG,
            background_style="plain",
            product_position="center",
            lighting="studio_softbox",
            strict_mode=True,
            quality="high",
            props=(),
        )
        production = generate_production_prompt(wall_shelf_spec, "catalog", settings)
        assert two_step.quality_score == production.quality_score
        assert two_step.production_ready == production.production_ready
        assert two_step.prompt == production.prompt

    def test_two_step_overrides(self, wall_shelf_spec):
        """Settings overrides reach the synthesized prompt."""
        selection = ContextSelection(context_type="lifestyle")
        result = generate_two_step_prompt(wall_shelf_spec, selection, props=("rug",))
        assert "rug is the sole approved item." in result.prompt
