"""Membership model for the fitness registry.

A member's plan is a plain tag; everything that varies by plan (label,
fee, perks) comes from :func:`plan_terms`.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class MembershipPlan(str, Enum):
    BASIC = "BASIC"
    PREMIUM = "PREMIUM"
    FAMILY = "FAMILY"


@dataclass(frozen=True)
class PlanTerms:
    """Fee and perks attached to a membership plan."""

    label: str
    monthly_fee: Decimal
    perks: tuple[str, ...]


_FEES = {
    MembershipPlan.BASIC: Decimal("29.99"),
    MembershipPlan.PREMIUM: Decimal("32.00"),
    MembershipPlan.FAMILY: Decimal("329.99"),
}

_PERKS = {
    MembershipPlan.BASIC: ("Gym Access", "Locker"),
    MembershipPlan.PREMIUM: ("Gym Access", "Unlimited Group Classes", "Premium Permissions"),
    MembershipPlan.FAMILY: ("Full Gym Access", "Kid Classes", "Family Pool"),
}


def plan_terms(plan: MembershipPlan, family_size: int = 1) -> PlanTerms:
    """Return the terms for a plan.

    Parameters
    ----------
    plan : MembershipPlan
        Membership plan.
    family_size : int
        Number of people covered; only shown in the Family label.

    Returns
    -------
    PlanTerms
        Label, monthly fee and perks.
    """
    if plan is MembershipPlan.FAMILY:
        label = f"Family ({family_size} members)"
    else:
        label = plan.value.capitalize()
    return PlanTerms(label=label, monthly_fee=_FEES[plan], perks=_PERKS[plan])


def parse_plan(text: str) -> MembershipPlan:
    """Parse a plan name such as ``"premium"``.

    Raises
    ------
    ValueError
        If the name is not a known plan.
    """
    try:
        return MembershipPlan(text.strip().upper())
    except ValueError:
        names = "/".join(p.value.lower() for p in MembershipPlan)
        raise ValueError(f"Invalid plan {text!r}, expected one of {names}") from None


@dataclass(frozen=True)
class Member:
    """Fitness club member."""

    member_id: str
    name: str
    plan: MembershipPlan
    family_size: int = 1

    def __post_init__(self) -> None:
        if self.family_size < 1:
            raise ValueError(f"family_size must be at least 1, got {self.family_size}")

    @property
    def terms(self) -> PlanTerms:
        return plan_terms(self.plan, self.family_size)
