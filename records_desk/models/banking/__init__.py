"""Bank ledger models."""

from records_desk.models.banking.account import Account
from records_desk.models.banking.enums import Direction, TransactionKind
from records_desk.models.banking.transaction import Transaction

__all__ = [
    "Account",
    "Direction",
    "Transaction",
    "TransactionKind",
]
