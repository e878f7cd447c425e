"""Unit tests for the pydantic data models."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from productshot.core.models import (
    ComplianceDetails,
    ConfigurationSettings,
    ConstraintBlock,
    ConstraintCategory,
    ConstraintSection,
    ContextPreset,
    CriticalIssuesAddressed,
    Dimensions,
    PlacementType,
    ProductSpecification,
    QualityTier,
    Severity,
)


class TestDimensions:
    """Tests for Dimensions."""

    def test_describe_all_values(self):
        """Known values render as W×H×D with the unit."""
        dims = Dimensions(width=120, height=75, depth=60.5)
        assert dims.describe() == "120×75×60.5cm"

    def test_describe_missing_values(self):
        """Missing values render as question marks."""
        dims = Dimensions(width=80, unit="in")
        assert dims.describe() == "80×?×?in"

    def test_is_empty(self):
        """A dimensions record without values is empty."""
        assert Dimensions().is_empty()
        assert not Dimensions(height=10).is_empty()

    def test_largest_cm_converts_units(self):
        """Largest dimension is converted to centimetres."""
        assert Dimensions(width=1.2, height=0.5, unit="m").largest_cm() == pytest.approx(120.0)
        assert Dimensions(width=10, unit="in").largest_cm() == pytest.approx(25.4)

    def test_largest_cm_without_values(self):
        """No values gives None."""
        assert Dimensions().largest_cm() is None

    def test_rejects_non_positive(self):
        """Dimensions must be positive."""
        with pytest.raises(PydanticValidationError):
            Dimensions(width=0)


class TestProductSpecification:
    """Tests for ProductSpecification."""

    def test_defaults(self):
        """Optional fields default to empty values."""
        spec = ProductSpecification(name="Stool", product_type="bar stool")
        assert spec.materials == ""
        assert spec.dimensions is None
        assert spec.additional_specs is None

    def test_is_frozen(self):
        """Specifications are immutable."""
        spec = ProductSpecification(name="Stool", product_type="bar stool")
        with pytest.raises(PydanticValidationError):
            spec.name = "Chair"

    def test_requires_name_and_type(self):
        """Name and product type are mandatory fields."""
        with pytest.raises(PydanticValidationError):
            ProductSpecification(name="Stool")


class TestConfigurationSettings:
    """Tests for ConfigurationSettings."""

    def test_defaults(self):
        """Defaults describe a strict catalog shot without props."""
        settings = ConfigurationSettings()
        assert settings.context_preset == ContextPreset.CATALOG
        assert settings.strict_mode is True
        assert settings.quality == QualityTier.MEDIUM
        assert settings.props == ()
        assert settings.reserved_text_zone is None

    def test_props_stored_as_tuple(self):
        """List props are coerced to an immutable tuple."""
        settings = ConfigurationSettings(props=["plant", "book"])
        assert settings.props == ("plant", "book")

    def test_variations_range(self):
        """Variations must be between 1 and 4."""
        with pytest.raises(PydanticValidationError):
            ConfigurationSettings(variations=5)

    def test_explicit_fields_tracked(self):
        """Only explicitly set fields appear in model_fields_set."""
        settings = ConfigurationSettings(lighting="warm_ambient")
        assert settings.model_fields_set == {"lighting"}


class TestEnumLabels:
    """Tests for enum display labels."""

    def test_placement_label(self):
        """Placement labels replace hyphens with spaces."""
        assert PlacementType.WALL_MOUNTED.label == "wall mounted"

    def test_preset_label(self):
        """Preset labels are upper case."""
        assert ContextPreset.SOCIAL_STORY.label == "SOCIAL-STORY"


class TestConstraintBlock:
    """Tests for ConstraintBlock rendering."""

    def test_render_layout(self):
        """Blocks render title, markers, bullets and validation."""
        block = ConstraintBlock(
            category=ConstraintCategory.HUMAN_ELEMENTS,
            severity=Severity.ABSOLUTE,
            title="NO PEOPLE",
            preamble=("Read carefully.",),
            sections=(
                ConstraintSection(heading="BANNED", statements=("NO faces",)),
                ConstraintSection(heading="REQUIRED", statements=("Empty room",), prohibitive=False),
            ),
            validation="Nobody in frame.",
        )
        text = block.render()
        assert text.splitlines()[0] == "🚫 NO PEOPLE [ABSOLUTE]"
        assert "Read carefully." in text
        assert "⛔ BANNED:\n• NO faces" in text
        assert "✅ REQUIRED:\n• Empty room" in text
        assert text.endswith("VALIDATION REQUIREMENT: Nobody in frame.")

    def test_statement_count(self):
        """statement_count sums every section."""
        block = ConstraintBlock(
            category=ConstraintCategory.ARTIFACTS,
            severity=Severity.HIGH,
            title="T",
            sections=(
                ConstraintSection(heading="A", statements=("1", "2")),
                ConstraintSection(heading="B", statements=("3",)),
            ),
        )
        assert block.statement_count == 3


class TestFlagCounts:
    """Tests for the boolean flag records."""

    def test_critical_issues_count(self):
        """count() returns the number of true flags."""
        flags = CriticalIssuesAddressed(product_integrity=True, format_compliance=True)
        assert flags.count() == 2

    def test_compliance_details_count(self):
        """count() returns the number of compliant areas."""
        details = ComplianceDetails(
            product_integrity=True,
            context_adherence=True,
            format_compliance=True,
            constraint_enforcement=False,
            quality_assurance=True,
        )
        assert details.count() == 4
