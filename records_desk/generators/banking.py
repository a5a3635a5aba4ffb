"""Demo ledger generator."""

from __future__ import annotations

import logging
import random
from decimal import Decimal

from records_desk.generators.base import BaseGenerator
from records_desk.money import CENT
from records_desk.store.banking import Bank

logger = logging.getLogger(__name__)


class LedgerSeeder(BaseGenerator):
    """Populate a :class:`Bank` with plausible accounts and activity.

    Everything goes through the public ``Bank`` operations, so seeded
    ledgers satisfy the same invariants as hand-entered ones.
    """

    # Activity mix: deposit, withdraw, transfer
    ACTIVITY_WEIGHTS = [0.45, 0.30, 0.25]
    DEPOSIT_NOTES = ["Salary", "Cash deposit", "Refund", "Gift", ""]
    WITHDRAW_NOTES = ["ATM", "Rent", "Groceries", "Utilities", ""]

    def populate(self, bank: Bank, num_accounts: int, activity_per_account: int = 3) -> list[int]:
        """Create accounts and random activity.

        Parameters
        ----------
        bank : Bank
            Ledger to populate.
        num_accounts : int
            Number of accounts to open.
        activity_per_account : int
            Average number of deposits/withdrawals/transfers per account.

        Returns
        -------
        list[int]
            Numbers of the accounts created.
        """
        created = [
            bank.create_account(self.fake.name(), self._amount(0, 5000))
            for _ in range(num_accounts)
        ]

        for _ in range(num_accounts * activity_per_account):
            action = random.choices(["deposit", "withdraw", "transfer"], weights=self.ACTIVITY_WEIGHTS, k=1)[0]
            account_number = random.choice(created)
            balance = bank.get_account(account_number).balance

            if action == "deposit":
                bank.deposit(account_number, self._amount(1, 1500), random.choice(self.DEPOSIT_NOTES))
            elif balance < Decimal("1.00"):
                continue
            elif action == "withdraw":
                bank.withdraw(account_number, self._fraction_of(balance), random.choice(self.WITHDRAW_NOTES))
            elif len(created) > 1:
                target = random.choice([n for n in created if n != account_number])
                bank.transfer(account_number, target, self._fraction_of(balance))

        logger.info("Seeded %d demo accounts", len(created))
        return created

    def _amount(self, low: int, high: int) -> Decimal:
        return Decimal(str(round(random.uniform(low, high), 2))).quantize(CENT)

    def _fraction_of(self, balance: Decimal) -> Decimal:
        """Random amount between one cent and half the balance."""
        share = Decimal(str(round(random.uniform(0.05, 0.5), 4)))
        return max(CENT, (balance * share).quantize(CENT))
