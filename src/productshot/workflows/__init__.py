"""Generation strategy boundary.

Shapes for the external generation providers and usage gate, plus the
explicit strategy selection (reference images first, text-only fallback)
used when sending a synthesized prompt to a provider.
"""

from productshot.workflows.base import (
    GenerationProvider,
    QuotaDecision,
    provider_registry,
)
from productshot.workflows.generation import (
    BlockedPlan,
    FallbackStrategy,
    GenerationOutcome,
    PrimaryStrategy,
    execute_plan,
    plan_generation,
)

__all__ = [
    "GenerationProvider",
    "QuotaDecision",
    "provider_registry",
    "BlockedPlan",
    "FallbackStrategy",
    "GenerationOutcome",
    "PrimaryStrategy",
    "execute_plan",
    "plan_generation",
]
