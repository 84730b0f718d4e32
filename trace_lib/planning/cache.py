"""Memoized checkpoint plans.

A plan depends only on the template geometry and the two lengths, so it is
built once per layout and reused for every ink event. Keys carry the
template's strokes, so two scalings of one glyph never share a plan, and
round the lengths to four decimals.
"""

from __future__ import annotations

import logging

from ..domain.template import StrokeTemplate, TemplateStroke
from .plan import CheckpointPlan, make_plan

logger = logging.getLogger(__name__)

PlanKey = tuple[str, tuple[TemplateStroke, ...], float, float]


def plan_key(template: StrokeTemplate, checkpoint_length: float, spacing: float) -> PlanKey:
    """Cache key for a template + configuration pair."""
    return (template.key, template.strokes, round(checkpoint_length, 4), round(spacing, 4))


class PlanCache:
    """Dictionary-backed cache of CheckpointPlan objects.

    Example:
        >>> cache = PlanCache()
        >>> plan = cache.get(template, 6.0, 6.0)
        >>> cache.get(template, 6.0, 6.0) is plan
        True
    """

    def __init__(self):
        self._plans: dict[PlanKey, CheckpointPlan] = {}

    def __len__(self) -> int:
        return len(self._plans)

    def get(self, template: StrokeTemplate, checkpoint_length: float, spacing: float) -> CheckpointPlan:
        """Return the cached plan, building it on first use."""
        key = plan_key(template, checkpoint_length, spacing)
        plan = self._plans.get(key)
        if plan is None:
            plan = make_plan(template, checkpoint_length, spacing)
            self._plans[key] = plan
            logger.debug("Plan cache miss for %r at %.4f/%.4f (%d cached)",
                         template.key, checkpoint_length, spacing, len(self._plans))
        return plan

    def clear(self) -> None:
        self._plans.clear()
