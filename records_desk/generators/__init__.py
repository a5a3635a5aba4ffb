"""Demo data generators."""

from records_desk.generators.banking import LedgerSeeder
from records_desk.generators.fitness import MemberGenerator

__all__ = ["LedgerSeeder", "MemberGenerator"]
