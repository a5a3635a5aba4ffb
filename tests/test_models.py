"""Tests for domain models."""

import dataclasses
from decimal import Decimal

import pytest

from records_desk.exceptions import InvalidAmountError
from records_desk.models.banking import Account, Direction, Transaction, TransactionKind
from records_desk.models.fitness import Member, MembershipPlan, parse_plan, plan_terms


@pytest.fixture
def account() -> Account:
    """Account 1001 opened with 100.00 and its CREATE entry."""
    acc = Account(1001, "Alice", Decimal("100.00"))
    acc.record(TransactionKind.CREATE, Decimal("100.00"), "Initial Deposit")
    return acc


class TestTransactionKind:
    """Tests for TransactionKind directions."""

    def test_credit_kinds(self) -> None:
        for kind in (TransactionKind.CREATE, TransactionKind.DEPOSIT, TransactionKind.TRANSFER_IN):
            assert kind.direction is Direction.CREDIT

    def test_debit_kinds(self) -> None:
        for kind in (TransactionKind.WITHDRAW, TransactionKind.TRANSFER_OUT):
            assert kind.direction is Direction.DEBIT

    def test_account_update_has_no_direction(self) -> None:
        assert TransactionKind.ACCOUNT_UPDATE.direction is None


class TestTransaction:
    """Tests for Transaction model."""

    def test_transaction_is_immutable(self) -> None:
        tx = Transaction(TransactionKind.DEPOSIT, Decimal("5.00"), Decimal("5.00"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            tx.amount = Decimal("6.00")  # type: ignore[misc]

    def test_defaults(self) -> None:
        tx = Transaction(TransactionKind.DEPOSIT, Decimal("5.00"), Decimal("5.00"))
        assert tx.note == ""
        assert tx.timestamp is not None

    def test_signed_amount(self) -> None:
        assert Transaction(TransactionKind.DEPOSIT, Decimal("5.00"), Decimal("5.00")).signed_amount == Decimal("5.00")
        assert Transaction(TransactionKind.WITHDRAW, Decimal("5.00"), Decimal("0.00")).signed_amount == Decimal("-5.00")
        assert Transaction(TransactionKind.ACCOUNT_UPDATE, Decimal("0.00"), Decimal("0.00")).signed_amount == 0


class TestAccount:
    """Tests for Account balance mutators."""

    def test_creation(self, account: Account) -> None:
        assert account.account_number == 1001
        assert account.owner_name == "Alice"
        assert account.balance == Decimal("100.00")
        assert [t.kind for t in account.history] == [TransactionKind.CREATE]

    def test_negative_opening_balance_rejected(self) -> None:
        with pytest.raises(InvalidAmountError):
            Account(1001, "Alice", Decimal("-1"))

    def test_account_number_is_read_only(self, account: Account) -> None:
        with pytest.raises(AttributeError):
            account.account_number = 2000  # type: ignore[misc]

    def test_history_is_a_snapshot(self, account: Account) -> None:
        history = account.history
        account.deposit(Decimal("1"))
        assert len(history) == 1
        assert len(account.history) == 2

    def test_deposit(self, account: Account) -> None:
        tx = account.deposit(Decimal("50"), "Salary")

        assert account.balance == Decimal("150.00")
        assert tx.kind is TransactionKind.DEPOSIT
        assert tx.amount == Decimal("50.00")
        assert tx.balance_after == Decimal("150.00")
        assert tx.note == "Salary"
        assert account.history[-1] is tx

    @pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-10")])
    def test_deposit_rejects_non_positive(self, account: Account, amount: Decimal) -> None:
        with pytest.raises(InvalidAmountError):
            account.deposit(amount)
        assert account.balance == Decimal("100.00")
        assert len(account.history) == 1

    def test_deposit_rejects_debit_kind(self, account: Account) -> None:
        with pytest.raises(ValueError):
            account.deposit(Decimal("1"), kind=TransactionKind.WITHDRAW)

    def test_withdraw(self, account: Account) -> None:
        assert account.withdraw(Decimal("30"), "ATM") is True

        assert account.balance == Decimal("70.00")
        last = account.history[-1]
        assert last.kind is TransactionKind.WITHDRAW
        assert last.amount == Decimal("30.00")
        assert last.balance_after == Decimal("70.00")

    def test_withdraw_entire_balance(self, account: Account) -> None:
        assert account.withdraw(Decimal("100")) is True
        assert account.balance == Decimal("0.00")

    def test_withdraw_more_than_balance_fails(self, account: Account) -> None:
        assert account.withdraw(Decimal("100.01")) is False
        assert account.balance == Decimal("100.00")
        assert len(account.history) == 1

    def test_withdraw_rejects_non_positive(self, account: Account) -> None:
        with pytest.raises(InvalidAmountError):
            account.withdraw(Decimal("0"))

    def test_withdraw_rejects_credit_kind(self, account: Account) -> None:
        with pytest.raises(ValueError):
            account.withdraw(Decimal("1"), kind=TransactionKind.TRANSFER_IN)

    def test_debit_returns_appended_entry(self, account: Account) -> None:
        tx = account.debit(Decimal("40"), "Rent", TransactionKind.TRANSFER_OUT)

        assert tx is not None
        assert tx is account.history[-1]
        assert tx.kind is TransactionKind.TRANSFER_OUT
        assert tx.balance_after == Decimal("60.00")

    def test_debit_refused_returns_none(self, account: Account) -> None:
        assert account.debit(Decimal("100.01")) is None
        assert len(account.history) == 1

    def test_update_name(self, account: Account) -> None:
        assert account.update_name("Alicia") is True

        assert account.owner_name == "Alicia"
        last = account.history[-1]
        assert last.kind is TransactionKind.ACCOUNT_UPDATE
        assert last.amount == Decimal("0.00")
        assert last.balance_after == Decimal("100.00")
        assert last.note == "Name changed from 'Alice' to 'Alicia'"

    @pytest.mark.parametrize("name", [None, "", "   ", "Alice"])
    def test_update_name_no_change(self, account: Account, name: str | None) -> None:
        assert account.update_name(name) is False
        assert account.owner_name == "Alice"
        assert len(account.history) == 1

    def test_replayed_balance_matches(self, account: Account) -> None:
        account.deposit(Decimal("50"))
        account.withdraw(Decimal("30"))
        account.update_name("Alicia")
        account.withdraw(Decimal("500"))  # refused

        assert account.total_credits() == Decimal("150.00")
        assert account.total_debits() == Decimal("30.00")
        assert account.replayed_balance() == account.balance == Decimal("120.00")

    def test_replayed_balance_counts_transfer_legs(self, account: Account) -> None:
        account.deposit(Decimal("25"), kind=TransactionKind.TRANSFER_IN)
        account.debit(Decimal("60"), kind=TransactionKind.TRANSFER_OUT)

        assert sum(t.signed_amount for t in account.history) == Decimal("65.00")
        assert account.replayed_balance() == account.balance == Decimal("65.00")

    def test_many_small_deposits_do_not_drift(self) -> None:
        acc = Account(1, "Drift", 0)
        for _ in range(1000):
            acc.deposit(0.1)
        assert acc.balance == Decimal("100.00")


class TestMembershipPlans:
    """Tests for plan_terms and parse_plan."""

    def test_basic_terms(self) -> None:
        terms = plan_terms(MembershipPlan.BASIC)
        assert terms.label == "Basic"
        assert terms.monthly_fee == Decimal("29.99")
        assert terms.perks == ("Gym Access", "Locker")

    def test_premium_terms(self) -> None:
        terms = plan_terms(MembershipPlan.PREMIUM)
        assert terms.label == "Premium"
        assert terms.monthly_fee == Decimal("32.00")
        assert "Unlimited Group Classes" in terms.perks

    def test_family_terms_include_size(self) -> None:
        terms = plan_terms(MembershipPlan.FAMILY, family_size=4)
        assert terms.label == "Family (4 members)"
        assert terms.monthly_fee == Decimal("329.99")
        assert terms.perks == ("Full Gym Access", "Kid Classes", "Family Pool")

    @pytest.mark.parametrize("text, plan", [("basic", MembershipPlan.BASIC), (" Premium ", MembershipPlan.PREMIUM), ("FAMILY", MembershipPlan.FAMILY)])
    def test_parse_plan(self, text: str, plan: MembershipPlan) -> None:
        assert parse_plan(text) is plan

    def test_parse_plan_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid plan"):
            parse_plan("gold")


class TestMember:
    """Tests for Member model."""

    def test_terms_follow_plan(self) -> None:
        member = Member("M1", "Dana", MembershipPlan.FAMILY, family_size=3)
        assert member.terms.label == "Family (3 members)"

    def test_default_family_size(self) -> None:
        assert Member("M2", "Eve", MembershipPlan.BASIC).family_size == 1

    def test_invalid_family_size(self) -> None:
        with pytest.raises(ValueError):
            Member("M3", "Fay", MembershipPlan.FAMILY, family_size=0)
