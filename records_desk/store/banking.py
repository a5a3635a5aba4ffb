"""Bank ledger: account registry, transfers and read-only reporting."""

import logging
import threading
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from records_desk.exceptions import (
    AccountNotFoundError,
    ConfirmationRequiredError,
    InsufficientFundsError,
    NoChangeError,
    RecordsDeskError,
    SelfTransferError,
)
from records_desk.models.banking import Account, Transaction, TransactionKind
from records_desk.money import ZERO, MoneyLike, to_money, to_positive_money

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransferReceipt:
    """Both legs of a completed transfer."""

    from_account: int
    to_account: int
    amount: Decimal
    debit: Transaction
    credit: Transaction


@dataclass(frozen=True)
class AccountDetails:
    """Read-only summary of one account.

    ``created`` is the ``CREATE`` entry, if the log has one.
    ``last_activity`` is the final entry, or None when nothing has happened
    since the account was opened.
    """

    account_number: int
    owner_name: str
    balance: Decimal
    transaction_count: int
    created: Transaction | None
    last_activity: Transaction | None


@dataclass
class Bank:
    """In-memory ledger owning every account and the account number counter.

    Account numbers start at ``first_account_number`` and are never reused,
    even after an account is deleted. All mutators run under one lock so a
    transfer is observed either fully applied or not at all.
    """

    first_account_number: int = 1001
    _accounts: dict[int, Account] = field(default_factory=dict, init=False, repr=False)
    _next_account_number: int = field(default=0, init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._next_account_number = self.first_account_number

    @property
    def accounts(self) -> Mapping[int, Account]:
        """Read-only view of the registry keyed by account number."""
        return MappingProxyType(self._accounts)

    @property
    def next_account_number(self) -> int:
        return self._next_account_number

    # Lifecycle
    def create_account(self, owner: str, initial_deposit: MoneyLike = ZERO) -> int:
        """Open an account and return its number.

        Raises
        ------
        InvalidAmountError
            If the initial deposit is negative or not a number.
        """
        opening = to_money(initial_deposit)
        with self._lock:
            account_number = self._next_account_number
            account = Account(account_number, owner, opening)
            account.record(TransactionKind.CREATE, opening, "Initial Deposit")
            self._accounts[account_number] = account
            self._next_account_number += 1

        logger.info("Created account %d for %r with %s", account_number, owner, opening)
        return account_number

    def delete_account(self, account_number: int, force: bool = False) -> Account:
        """Remove an account and its history.

        A funded account is only removed when ``force`` is set.

        Raises
        ------
        AccountNotFoundError
            If the account does not exist.
        ConfirmationRequiredError
            If the balance is non-zero and ``force`` is False.
        """
        with self._lock:
            account = self._require(account_number)
            if account.balance != ZERO and not force:
                logger.warning(
                    "Refused to delete account %d holding %s without confirmation",
                    account_number, account.balance,
                )
                raise ConfirmationRequiredError(
                    f"Account {account_number} holds {account.balance}; "
                    "withdraw all funds or confirm a force delete"
                )
            del self._accounts[account_number]

        logger.info(
            "Deleted account %d (%s), discarded balance %s",
            account_number, account.owner_name, account.balance,
        )
        return account

    def account_exists(self, account_number: int) -> bool:
        return account_number in self._accounts

    def update_account(self, account_number: int, new_name: str | None = None) -> Account:
        """Rename an account owner.

        Raises
        ------
        AccountNotFoundError
            If the account does not exist.
        NoChangeError
            If the new name is missing, blank or the same as the current one.
        """
        with self._lock:
            account = self._require(account_number)
            old_name = account.owner_name
            if not account.update_name(new_name):
                raise NoChangeError(f"Account {account_number}: nothing to update")

        logger.info("Account %d owner renamed %r -> %r", account_number, old_name, account.owner_name)
        return account

    # Single-account balance changes
    def deposit(self, account_number: int, amount: MoneyLike, note: str = "") -> Transaction:
        """Deposit into an account.

        Raises
        ------
        AccountNotFoundError
            If the account does not exist.
        InvalidAmountError
            If the amount is not strictly positive.
        """
        with self._lock:
            transaction = self._require(account_number).deposit(amount, note)
        logger.debug("Account %d: deposit %s", account_number, transaction.amount)
        return transaction

    def withdraw(self, account_number: int, amount: MoneyLike, note: str = "") -> Transaction:
        """Withdraw from an account.

        Raises
        ------
        AccountNotFoundError
            If the account does not exist.
        InvalidAmountError
            If the amount is not strictly positive.
        InsufficientFundsError
            If the amount exceeds the balance.
        """
        with self._lock:
            account = self._require(account_number)
            transaction = account.debit(amount, note)
            if transaction is None:
                raise InsufficientFundsError(
                    f"Account {account_number} balance {account.balance} "
                    f"does not cover {to_money(amount)}"
                )
        logger.debug("Account %d: withdraw %s", account_number, transaction.amount)
        return transaction

    # Transfers
    def transfer(self, from_account: int, to_account: int, amount: MoneyLike) -> TransferReceipt:
        """Move funds between two accounts as one unit.

        Checks run before anything is touched: distinct accounts, both
        accounts exist, positive amount, sufficient sender balance.

        Raises
        ------
        SelfTransferError
            If both account numbers are the same.
        AccountNotFoundError
            If either account does not exist.
        InvalidAmountError
            If the amount is not strictly positive.
        InsufficientFundsError
            If the sender balance does not cover the amount.
        """
        with self._lock:
            try:
                sender, receiver, value = self._validate_transfer(from_account, to_account, amount)
            except RecordsDeskError as exc:
                logger.warning("Transfer %s -> %s refused: %s", from_account, to_account, exc)
                raise

            debit = sender.debit(value, f"Transfer to account {to_account}", TransactionKind.TRANSFER_OUT)
            if debit is None:
                raise InsufficientFundsError(
                    f"Account {from_account} could not release {value}; transfer not applied"
                )
            credit = receiver.deposit(value, f"Transfer from account {from_account}", TransactionKind.TRANSFER_IN)

        logger.info(
            "Transferred %s from account %d to %d",
            value, from_account, to_account,
            extra={"extra": {"from_account": from_account, "to_account": to_account, "amount": value}},
        )
        return TransferReceipt(from_account, to_account, value, debit, credit)

    def _validate_transfer(
        self, from_account: int, to_account: int, amount: MoneyLike
    ) -> tuple[Account, Account, Decimal]:
        if from_account == to_account:
            raise SelfTransferError(f"Cannot transfer from account {from_account} to itself")
        sender = self._require(from_account, role="Sender account")
        receiver = self._require(to_account, role="Receiver account")
        value = to_positive_money(amount)
        if value > sender.balance:
            raise InsufficientFundsError(
                f"Insufficient funds: sender balance {sender.balance}, transfer amount {value}"
            )
        return sender, receiver, value

    # Reporting
    def get_account(self, account_number: int) -> Account:
        """Look up an account.

        Raises
        ------
        AccountNotFoundError
            If the account does not exist.
        """
        return self._require(account_number)

    def list_accounts(self) -> list[Account]:
        """All accounts sorted by account number."""
        with self._lock:
            return [self._accounts[n] for n in sorted(self._accounts)]

    def get_history(self, account_number: int) -> tuple[Transaction, ...]:
        with self._lock:
            return self._require(account_number).history

    def account_details(self, account_number: int) -> AccountDetails:
        with self._lock:
            account = self._require(account_number)
            owner_name, balance, history = account.owner_name, account.balance, account.history
        created = next((t for t in history if t.kind is TransactionKind.CREATE), None)
        last_activity = history[-1] if history and history[-1] is not created else None
        return AccountDetails(
            account_number=account_number,
            owner_name=owner_name,
            balance=balance,
            transaction_count=len(history),
            created=created,
            last_activity=last_activity,
        )

    def total_holdings(self) -> Decimal:
        with self._lock:
            return sum((a.balance for a in self._accounts.values()), ZERO)

    def summary(self) -> dict[str, int | Decimal]:
        """Return summary counts and totals for the ledger."""
        with self._lock:
            return {
                "accounts": len(self._accounts),
                "transactions": sum(len(a.history) for a in self._accounts.values()),
                "total_holdings": self.total_holdings(),
                "next_account_number": self._next_account_number,
            }

    def _require(self, account_number: int, role: str = "Account") -> Account:
        account = self._accounts.get(account_number)
        if account is None:
            raise AccountNotFoundError(f"{role} {account_number} not found")
        return account
