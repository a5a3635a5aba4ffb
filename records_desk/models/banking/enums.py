"""Enumeration types for the bank ledger."""

from enum import Enum


class Direction(str, Enum):
    CREDIT = "CREDIT"
    DEBIT = "DEBIT"


class TransactionKind(str, Enum):
    CREATE = "CREATE"
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"
    TRANSFER_OUT = "TRANSFER_OUT"
    TRANSFER_IN = "TRANSFER_IN"
    ACCOUNT_UPDATE = "ACCOUNT_UPDATE"

    @property
    def direction(self) -> Direction | None:
        """Effect on the balance, or None for metadata-only entries."""
        return _DIRECTIONS.get(self)


_DIRECTIONS = {
    TransactionKind.CREATE: Direction.CREDIT,
    TransactionKind.DEPOSIT: Direction.CREDIT,
    TransactionKind.TRANSFER_IN: Direction.CREDIT,
    TransactionKind.WITHDRAW: Direction.DEBIT,
    TransactionKind.TRANSFER_OUT: Direction.DEBIT,
}
