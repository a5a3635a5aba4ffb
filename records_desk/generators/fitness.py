"""Demo fitness member generator."""

from __future__ import annotations

import random
from typing import Iterator

from records_desk.generators.base import BaseGenerator
from records_desk.models.fitness import Member, MembershipPlan


class MemberGenerator(BaseGenerator):
    """Generate synthetic fitness members."""

    PLANS = list(MembershipPlan)
    PLAN_WEIGHTS = [0.55, 0.30, 0.15]

    def generate(self) -> Member:
        """Generate a single member."""
        plan = random.choices(self.PLANS, weights=self.PLAN_WEIGHTS, k=1)[0]
        family_size = random.randint(2, 6) if plan is MembershipPlan.FAMILY else 1
        return Member(
            member_id=f"M{self.fake.unique.random_number(digits=5, fix_len=True)}",
            name=self.fake.name(),
            plan=plan,
            family_size=family_size,
        )

    def generate_batch(self, count: int) -> Iterator[Member]:
        """Generate multiple members with distinct ids."""
        for _ in range(count):
            yield self.generate()
