"""Fitness registry models."""

from records_desk.models.fitness.membership import (
    Member,
    MembershipPlan,
    PlanTerms,
    parse_plan,
    plan_terms,
)

__all__ = ["Member", "MembershipPlan", "PlanTerms", "parse_plan", "plan_terms"]
