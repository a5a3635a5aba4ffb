"""Transaction model for the bank ledger."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from records_desk.models.banking.enums import Direction, TransactionKind


@dataclass(frozen=True)
class Transaction:
    """One entry of an account's audit log.

    ``balance_after`` is the account balance at the moment the entry was
    appended. Entries are never mutated or removed.
    """

    kind: TransactionKind
    amount: Decimal
    balance_after: Decimal
    note: str = ""
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def signed_amount(self) -> Decimal:
        """Amount with the sign of its effect on the balance."""
        direction = self.kind.direction
        if direction is Direction.CREDIT:
            return self.amount
        if direction is Direction.DEBIT:
            return -self.amount
        return Decimal("0.00")
