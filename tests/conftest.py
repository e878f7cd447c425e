"""Shared pytest fixtures for Productshot tests."""

import os

import pytest

from productshot.core.config import EngineConfig
from productshot.core.models import (
    ConfigurationSettings,
    ContextPreset,
    Dimensions,
    ProductSpecification,
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep PRODUCTSHOT_* variables from the developer shell out of tests.

    Args:
        monkeypatch: pytest monkeypatch fixture
    """
    for key in list(os.environ):
        if key.upper().startswith("PRODUCTSHOT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def production_config() -> EngineConfig:
    """Create the enterprise production configuration.

    Returns:
        EngineConfig with every constraint layer enabled
    """
    return EngineConfig.production(_env_file=None)


@pytest.fixture
def development_config() -> EngineConfig:
    """Create the lightweight development configuration.

    Returns:
        EngineConfig with compact constraints and no validation
    """
    return EngineConfig.development(_env_file=None)


@pytest.fixture
def wall_shelf_spec() -> ProductSpecification:
    """Wall-mounted walnut shelf.

    Returns:
        ProductSpecification for a wall-mounted product
    """
    return ProductSpecification(
        name="Walnut Wall Shelf",
        product_type="wall mounted shelf",
        materials="solid walnut",
    )


@pytest.fixture
def executive_chair_spec() -> ProductSpecification:
    """Leather executive chair with a chrome base.

    Returns:
        ProductSpecification for a floor-standing seating product
    """
    return ProductSpecification(
        name="Executive Chair",
        product_type="executive office chair",
        materials="black leather, chrome base",
        dimensions=Dimensions(width=68, height=120, depth=70),
    )


@pytest.fixture
def wall_desk_spec() -> ProductSpecification:
    """Floating oak desk.

    Returns:
        ProductSpecification for a wall-mounted desk
    """
    return ProductSpecification(
        name="Floating Desk",
        product_type="wall mounted desk",
        materials="oak veneer, powder coated steel brackets",
        additional_specs="Folds flat against the wall when not in use",
    )


@pytest.fixture
def catalog_settings() -> ConfigurationSettings:
    """Default catalog settings.

    Returns:
        ConfigurationSettings for a catalog shot with no props
    """
    return ConfigurationSettings(context_preset=ContextPreset.CATALOG)


@pytest.fixture
def plant_settings() -> ConfigurationSettings:
    """Strict lifestyle settings approving a single plant.

    Returns:
        ConfigurationSettings with props=("plant",) and strict mode
    """
    return ConfigurationSettings(
        context_preset=ContextPreset.LIFESTYLE,
        strict_mode=True,
        props=("plant",),
    )
