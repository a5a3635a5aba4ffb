"""In-memory stores for the bank ledger and the fitness registry."""

from records_desk.store.banking import AccountDetails, Bank, TransferReceipt
from records_desk.store.fitness import MemberRegistry

__all__ = ["AccountDetails", "Bank", "MemberRegistry", "TransferReceipt"]
