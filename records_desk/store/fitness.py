"""Fitness membership registry."""

import logging
from dataclasses import dataclass, field, replace

from records_desk.exceptions import DuplicateEntityError, MemberNotFoundError
from records_desk.models.fitness import Member, MembershipPlan

logger = logging.getLogger(__name__)

# Listing order used by the console menu
PLAN_ORDER = (MembershipPlan.FAMILY, MembershipPlan.PREMIUM, MembershipPlan.BASIC)


@dataclass
class MemberRegistry:
    """In-memory store of members keyed by membership id."""

    members: dict[str, Member] = field(default_factory=dict)

    def add(self, member: Member) -> None:
        """Add a member to the registry."""
        if member.member_id in self.members:
            raise DuplicateEntityError(f"Membership ID {member.member_id} already exists")
        self.members[member.member_id] = member
        logger.info("Added member %s %s (%s)", member.member_id, member.name, member.terms.label)

    def exists(self, member_id: str) -> bool:
        return member_id in self.members

    def get(self, member_id: str) -> Member:
        member = self.members.get(member_id)
        if member is None:
            raise MemberNotFoundError(f"Member {member_id} not found")
        return member

    def by_plan(self, plan: MembershipPlan) -> list[Member]:
        """Members on one plan, in the order they were added."""
        return [m for m in self.members.values() if m.plan is plan]

    def all(self) -> dict[MembershipPlan, list[Member]]:
        """Every member grouped by plan (Family, Premium, Basic)."""
        return {plan: self.by_plan(plan) for plan in PLAN_ORDER}

    def update(
        self,
        member_id: str,
        new_name: str | None = None,
        new_plan: MembershipPlan | None = None,
        family_size: int | None = None,
    ) -> Member:
        """Change a member's name and/or plan.

        A member moving onto the Family plan keeps its family size if it
        already had one, otherwise ``family_size`` (default 1) is used.
        """
        member = self.get(member_id)
        plan = new_plan or member.plan
        if plan is MembershipPlan.FAMILY:
            if family_size is None:
                family_size = member.family_size if member.plan is MembershipPlan.FAMILY else 1
        else:
            family_size = 1

        updated = replace(
            member,
            name=new_name.strip() if new_name and new_name.strip() else member.name,
            plan=plan,
            family_size=family_size,
        )
        self.members[member_id] = updated
        logger.info("Updated member %s: %s (%s)", member_id, updated.name, updated.terms.label)
        return updated

    def remove(self, member_id: str) -> Member:
        member = self.get(member_id)
        del self.members[member_id]
        logger.info("Deleted member %s", member_id)
        return member

    def summary(self) -> dict[str, int]:
        """Return member counts per plan."""
        return {plan.value.lower(): len(self.by_plan(plan)) for plan in PLAN_ORDER}
