"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest

from records_desk.store import Bank, MemberRegistry


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def bank() -> Bank:
    """Create a fresh, empty bank for each test."""
    return Bank()


@pytest.fixture
def funded_bank() -> Bank:
    """Bank with account 1001 (Alice, 100.00) and 1002 (Bob, 0.00)."""
    bank = Bank()
    bank.create_account("Alice", Decimal("100.00"))
    bank.create_account("Bob", Decimal("0.00"))
    return bank


@pytest.fixture
def registry() -> MemberRegistry:
    """Create a fresh member registry for each test."""
    return MemberRegistry()
