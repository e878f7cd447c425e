"""Unit tests for generation strategy planning and execution."""

import pytest

from productshot.core.config import EngineConfig
from productshot.core.engine import synthesize_prompt
from productshot.workflows.base import GenerationProvider, ProviderRegistry, QuotaDecision
from productshot.workflows.generation import (
    BlockedPlan,
    FallbackStrategy,
    PrimaryStrategy,
    execute_plan,
    plan_generation,
)


class RecordingProvider(GenerationProvider):
    """Provider that records calls and optionally fails."""

    name = "Recording"
    supports_reference_images = True

    def __init__(self, fail_with_references=False, fail_always=False):
        self.fail_with_references = fail_with_references
        self.fail_always = fail_always
        self.calls = []

    def generate(self, prompt, aspect_ratio, reference_images=None):
        self.calls.append((aspect_ratio, reference_images))
        if self.fail_always or (self.fail_with_references and reference_images):
            raise RuntimeError("provider unavailable")
        return [f"image-{len(self.calls)}"]


@pytest.fixture
def chair_result(executive_chair_spec):
    """Synthesize the executive chair catalog prompt.

    Args:
        executive_chair_spec: Chair specification from conftest

    Returns:
        PromptAssemblyResult
    """
    return synthesize_prompt(
        executive_chair_spec, preset="catalog", engine_config=EngineConfig(_env_file=None)
    )


@pytest.fixture
def draft_result(executive_chair_spec):
    """Synthesize a development-profile prompt, which is never production ready.

    Args:
        executive_chair_spec: Chair specification from conftest

    Returns:
        PromptAssemblyResult
    """
    return synthesize_prompt(
        executive_chair_spec, preset="catalog", engine_config=EngineConfig.development(_env_file=None)
    )


class TestPlanGeneration:
    """Tests for plan_generation."""

    def test_primary_with_references(self, chair_result):
        """References produce a primary plan carrying them."""
        plan = plan_generation(chair_result, ["front.jpg"])
        assert plan == PrimaryStrategy(reference_images=("front.jpg",))

    def test_single_reference_string(self, chair_result):
        """A bare string is one reference image."""
        plan = plan_generation(chair_result, "front.jpg")
        assert plan == PrimaryStrategy(reference_images=("front.jpg",))

    def test_text_only_primary(self, chair_result):
        """No references is a text-only primary plan."""
        plan = plan_generation(chair_result)
        assert isinstance(plan, PrimaryStrategy)
        assert plan.reference_images == ()

    def test_quota_denied(self, chair_result):
        """A denied quota blocks generation with its reason."""
        plan = plan_generation(chair_result, quota=QuotaDecision(allowed=False, reason="Limit"))
        assert plan == BlockedPlan(reason="Limit")

    def test_quota_denied_without_reason(self, chair_result):
        """A denied quota without a reason gets a default one."""
        plan = plan_generation(chair_result, quota=QuotaDecision(allowed=False))
        assert isinstance(plan, BlockedPlan)
        assert plan.reason == "Usage quota exceeded"

    def test_readiness_required(self, draft_result):
        """Unready prompts are blocked when readiness is required."""
        assert not draft_result.production_ready
        plan = plan_generation(draft_result, require_production_ready=True)
        assert isinstance(plan, BlockedPlan)

    def test_provider_without_reference_support(self, chair_result):
        """References go text-only when the provider cannot take them."""
        plan = plan_generation(chair_result, ["front.jpg"], supports_reference_images=False)
        assert isinstance(plan, FallbackStrategy)


class TestExecutePlan:
    """Tests for execute_plan."""

    def test_primary_success(self, chair_result):
        """A successful primary attempt is recorded as the strategy used."""
        provider = RecordingProvider()
        plan = PrimaryStrategy(reference_images=("front.jpg",))
        outcome = execute_plan(provider, plan, chair_result)
        assert outcome.succeeded
        assert outcome.strategy_used == plan
        assert outcome.images == ("image-1",)
        assert provider.calls == [("1:1", ["front.jpg"])]

    def test_fallback_after_reference_failure(self, chair_result):
        """A failed reference attempt falls back to text-only generation."""
        provider = RecordingProvider(fail_with_references=True)
        outcome = execute_plan(provider, PrimaryStrategy(reference_images=("a",)), chair_result)
        assert outcome.succeeded
        assert isinstance(outcome.strategy_used, FallbackStrategy)
        assert "provider unavailable" in outcome.strategy_used.reason
        assert [attempt.succeeded for attempt in outcome.attempts] == [False, True]
        assert provider.calls[1] == ("1:1", None)

    def test_text_only_failure_is_returned(self, chair_result):
        """A failing text-only attempt is a failed outcome, not an exception."""
        provider = RecordingProvider(fail_always=True)
        outcome = execute_plan(provider, PrimaryStrategy(), chair_result)
        assert not outcome.succeeded
        assert outcome.strategy_used is None
        assert outcome.error == "provider unavailable"
        assert len(outcome.attempts) == 1

    def test_blocked_plan_skips_provider(self, chair_result):
        """Blocked plans never call the provider."""
        provider = RecordingProvider()
        outcome = execute_plan(provider, BlockedPlan(reason="Limit"), chair_result)
        assert not outcome.succeeded
        assert outcome.error == "Limit"
        assert provider.calls == []


class TestProviderRegistry:
    """Tests for ProviderRegistry."""

    def test_register_and_instantiate(self):
        """Registered providers can be listed and instantiated."""
        registry = ProviderRegistry()
        registry.register(RecordingProvider)
        assert registry.list_available() == ["Recording"]
        assert isinstance(registry.instantiate("Recording", fail_always=True), RecordingProvider)

    def test_unknown_provider(self):
        """Unknown names give None."""
        registry = ProviderRegistry()
        assert registry.instantiate("Missing") is None
        assert registry.get_provider_info("Missing") is None

    def test_provider_info(self):
        """Provider info exposes the class attributes."""
        registry = ProviderRegistry()
        registry.register(RecordingProvider)
        info = registry.get_provider_info("Recording")
        assert info["supports_reference_images"] is True
        assert info["version"] == "0.1.0"
