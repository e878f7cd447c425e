"""Generation strategy planning and execution.

Reference-image generation with a text-only fallback is expressed as data:
:func:`plan_generation` returns a tagged plan and :func:`execute_plan`
returns an outcome recording which strategy actually ran.  Provider
failures never escape :func:`execute_plan`.

Plans
-----
BlockedPlan
    Generation must not run (quota denied, or readiness was required and
    the prompt is not production ready).
PrimaryStrategy
    Generate with the given reference images (empty for text-only prompts).
FallbackStrategy
    Generate from the prompt alone, with the reason the primary strategy
    was not used.
"""

import logging
from collections.abc import Sequence
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict

from productshot.core.models import PromptAssemblyResult
from productshot.core.prompt_builder import normalize_reference_images
from productshot.workflows.base import GenerationProvider, QuotaDecision

logger = logging.getLogger(__name__)


class PrimaryStrategy(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["primary"] = "primary"
    reference_images: tuple[str, ...] = ()


class FallbackStrategy(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["fallback"] = "fallback"
    reason: str


class BlockedPlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["blocked"] = "blocked"
    reason: str


GenerationStrategy = Union[PrimaryStrategy, FallbackStrategy]
GenerationPlan = Union[PrimaryStrategy, FallbackStrategy, BlockedPlan]


class GenerationAttempt(BaseModel):
    model_config = ConfigDict(frozen=True)

    strategy: GenerationStrategy
    succeeded: bool
    error: str | None = None


class GenerationOutcome(BaseModel):
    """Result of executing a plan."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    plan: GenerationPlan
    strategy_used: GenerationStrategy | None = None
    images: tuple[Any, ...] = ()
    attempts: tuple[GenerationAttempt, ...] = ()
    succeeded: bool = False
    error: str | None = None


def plan_generation(
    result: PromptAssemblyResult,
    reference_images: Sequence[str] | str | None = None,
    quota: QuotaDecision | None = None,
    require_production_ready: bool = False,
    supports_reference_images: bool = True,
) -> GenerationPlan:
    """Choose how to generate images for a synthesized prompt.

    Args:
        result: Synthesis result
        reference_images: Reference image descriptors supplied by the caller
        quota: Decision of the caller's usage gate; None means not checked
        require_production_ready: Block prompts that are not production ready
        supports_reference_images: Whether the target provider accepts
            reference images

    Returns:
        BlockedPlan, PrimaryStrategy or FallbackStrategy
    """
    if quota is not None and not quota.allowed:
        return BlockedPlan(reason=quota.reason or "Usage quota exceeded")
    if require_production_ready and not result.production_ready:
        return BlockedPlan(reason="Prompt is not production ready")

    references = normalize_reference_images(reference_images) or ()
    if references and not supports_reference_images:
        return FallbackStrategy(reason="Provider does not accept reference images")
    return PrimaryStrategy(reference_images=references)


def _attempt(
    provider: GenerationProvider,
    strategy: GenerationStrategy,
    result: PromptAssemblyResult,
) -> tuple[GenerationAttempt, list[Any]]:
    references = None
    if isinstance(strategy, PrimaryStrategy) and strategy.reference_images:
        references = list(strategy.reference_images)
    try:
        images = provider.generate(result.prompt, result.format_spec.aspect_ratio, references)
    except Exception as e:
        logger.error(f"Provider '{provider.name}' failed ({strategy.kind}): {e}", exc_info=True)
        return GenerationAttempt(strategy=strategy, succeeded=False, error=str(e)), []
    return GenerationAttempt(strategy=strategy, succeeded=True), list(images)


def execute_plan(
    provider: GenerationProvider,
    plan: GenerationPlan,
    result: PromptAssemblyResult,
) -> GenerationOutcome:
    """Run a generation plan against a provider.

    A failed reference-image attempt is followed by one text-only fallback
    attempt.  A failure of the text-only attempt is returned as a failed
    outcome.
    """
    if isinstance(plan, BlockedPlan):
        logger.info(f"Generation blocked: {plan.reason}")
        return GenerationOutcome(plan=plan, error=plan.reason)

    attempts = []
    attempt, images = _attempt(provider, plan, result)
    attempts.append(attempt)
    strategy = plan

    if not attempt.succeeded and isinstance(plan, PrimaryStrategy) and plan.reference_images:
        strategy = FallbackStrategy(reason=f"Reference image generation failed: {attempt.error}")
        logger.warning(f"Falling back to text-only generation: {attempt.error}")
        attempt, images = _attempt(provider, strategy, result)
        attempts.append(attempt)

    return GenerationOutcome(
        plan=plan,
        strategy_used=strategy if attempt.succeeded else None,
        images=tuple(images),
        attempts=tuple(attempts),
        succeeded=attempt.succeeded,
        error=attempt.error,
    )
