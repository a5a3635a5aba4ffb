"""Account model for the bank ledger."""

import logging
from decimal import Decimal

from records_desk.exceptions import InvalidAmountError
from records_desk.models.banking.enums import Direction, TransactionKind
from records_desk.models.banking.transaction import Transaction
from records_desk.money import ZERO, MoneyLike, to_money, to_positive_money

logger = logging.getLogger(__name__)


class Account:
    """Bank account owning a balance and an append-only transaction log.

    ``deposit`` and ``withdraw`` are the only ways to change the balance.
    Accounts are created through :meth:`records_desk.store.banking.Bank.create_account`,
    which also records the opening ``CREATE`` entry.
    """

    def __init__(self, account_number: int, owner_name: str, opening_balance: MoneyLike = ZERO) -> None:
        balance = to_money(opening_balance)
        if balance < ZERO:
            raise InvalidAmountError(f"Opening balance cannot be negative, got {balance}")
        self._account_number = account_number
        self.owner_name = owner_name
        self._balance = balance
        self._history: list[Transaction] = []

    def __repr__(self) -> str:
        return (
            f"Account(account_number={self._account_number}, "
            f"owner_name={self.owner_name!r}, balance={self._balance})"
        )

    @property
    def account_number(self) -> int:
        return self._account_number

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def history(self) -> tuple[Transaction, ...]:
        """Chronological snapshot of the transaction log."""
        return tuple(self._history)

    def record(self, kind: TransactionKind, amount: Decimal, note: str = "") -> Transaction:
        """Append a log entry stamped with the current balance."""
        transaction = Transaction(kind=kind, amount=amount, balance_after=self._balance, note=note)
        self._history.append(transaction)
        return transaction

    def deposit(
        self,
        amount: MoneyLike,
        note: str = "",
        kind: TransactionKind = TransactionKind.DEPOSIT,
    ) -> Transaction:
        """Add funds and log the entry.

        Raises
        ------
        InvalidAmountError
            If the amount is not strictly positive.
        """
        if kind.direction is not Direction.CREDIT or kind is TransactionKind.CREATE:
            raise ValueError(f"{kind.value} is not a deposit kind")
        value = to_positive_money(amount)
        self._balance += value
        return self.record(kind, value, note)

    def debit(
        self,
        amount: MoneyLike,
        note: str = "",
        kind: TransactionKind = TransactionKind.WITHDRAW,
    ) -> Transaction | None:
        """Remove funds if the balance covers them.

        Returns the appended entry, or None (account untouched) when
        ``amount`` exceeds the balance.

        Raises
        ------
        InvalidAmountError
            If the amount is not strictly positive.
        """
        if kind.direction is not Direction.DEBIT:
            raise ValueError(f"{kind.value} is not a withdrawal kind")
        value = to_positive_money(amount)
        if value > self._balance:
            logger.debug(
                "Account %d: refused %s of %s (balance %s)",
                self._account_number, kind.value, value, self._balance,
            )
            return None
        self._balance -= value
        return self.record(kind, value, note)

    def withdraw(
        self,
        amount: MoneyLike,
        note: str = "",
        kind: TransactionKind = TransactionKind.WITHDRAW,
    ) -> bool:
        """Like :meth:`debit`, reporting only whether the funds were removed."""
        return self.debit(amount, note, kind) is not None

    def update_name(self, new_name: str | None) -> bool:
        """Rename the owner. Returns False when there is nothing to change."""
        if new_name is None:
            return False
        new_name = new_name.strip()
        if not new_name or new_name == self.owner_name:
            return False
        old_name = self.owner_name
        self.owner_name = new_name
        self.record(
            TransactionKind.ACCOUNT_UPDATE,
            Decimal("0.00"),
            f"Name changed from '{old_name}' to '{new_name}'",
        )
        return True

    def total_credits(self) -> Decimal:
        return sum(
            (t.amount for t in self._history if t.kind.direction is Direction.CREDIT),
            Decimal("0.00"),
        )

    def total_debits(self) -> Decimal:
        return sum(
            (t.amount for t in self._history if t.kind.direction is Direction.DEBIT),
            Decimal("0.00"),
        )

    def replayed_balance(self) -> Decimal:
        """Balance reconstructed from the log alone."""
        return sum((t.signed_amount for t in self._history), ZERO)
