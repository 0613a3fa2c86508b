"""Holds the latest profile and recomputes today's plan whenever it changes.

Single writer: the caller serializes profile updates. Readers get whichever
outcome was stored last; outcomes are replaced wholesale, never patched.
"""

from __future__ import annotations

import logging

from fitpath.plan import engine
from fitpath.plan.models import PlanOutcome, PlanState, TodayPlan, UserProfile

logger = logging.getLogger(__name__)


class PlanService:
    def __init__(self) -> None:
        self._profile: UserProfile | None = None
        self._outcome: PlanOutcome | None = None

    @property
    def profile(self) -> UserProfile | None:
        return self._profile

    @property
    def outcome(self) -> PlanOutcome | None:
        return self._outcome

    @property
    def plan(self) -> TodayPlan | None:
        return self._outcome.plan if self._outcome is not None else None

    def update_profile(self, profile: UserProfile) -> PlanOutcome | None:
        """Store `profile` and recompute the plan.

        A profile that is not plan-ready (still onboarding) clears the plan
        and returns None rather than a failure.
        """
        self._profile = profile
        if not profile.is_ready_for_plan():
            logger.info("Profile not ready for a plan; clearing current plan")
            self._outcome = None
            return None

        self._outcome = engine.generate(profile)
        logger.info("Profile updated; plan %s", "generated" if self._outcome.ok else "rejected")
        return self._outcome

    def state(self) -> PlanState:
        outcome = self._outcome
        return PlanState(
            profile=self._profile,
            plan=outcome.plan if outcome is not None else None,
            error=outcome.error if outcome is not None else None,
        )

    def clear(self) -> None:
        self._profile = None
        self._outcome = None


_service = PlanService()


def get_plan_service() -> PlanService:
    return _service
