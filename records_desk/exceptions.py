"""Custom exception hierarchy for records-desk."""

from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    DUPLICATE = "DUPLICATE"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    SELF_TRANSFER = "SELF_TRANSFER"
    NEEDS_CONFIRMATION = "NEEDS_CONFIRMATION"
    NO_CHANGE = "NO_CHANGE"
    CONFIGURATION = "CONFIGURATION"


class RecordsDeskError(Exception):
    """Base exception for all records-desk errors."""

    kind: ErrorKind


class EntityNotFoundError(RecordsDeskError):
    """Raised when a referenced entity does not exist."""

    kind = ErrorKind.NOT_FOUND


class AccountNotFoundError(EntityNotFoundError):
    """Raised when an account number is not registered with the bank."""


class MemberNotFoundError(EntityNotFoundError):
    """Raised when a membership id is not registered."""


class DuplicateEntityError(RecordsDeskError):
    """Raised when an entity id is already taken."""

    kind = ErrorKind.DUPLICATE


class LedgerOperationError(RecordsDeskError):
    """Raised when the ledger refuses an operation. State is left unchanged."""


class InsufficientFundsError(LedgerOperationError):
    """Raised when a withdrawal or transfer exceeds the available balance."""

    kind = ErrorKind.INSUFFICIENT_FUNDS


class InvalidAmountError(LedgerOperationError):
    """Raised when an amount is zero, negative or not a number."""

    kind = ErrorKind.INVALID_AMOUNT


class SelfTransferError(LedgerOperationError):
    """Raised when source and destination of a transfer are the same account."""

    kind = ErrorKind.SELF_TRANSFER


class ConfirmationRequiredError(LedgerOperationError):
    """Raised when deleting a funded account without force."""

    kind = ErrorKind.NEEDS_CONFIRMATION


class NoChangeError(LedgerOperationError):
    """Raised when an update would not change anything."""

    kind = ErrorKind.NO_CHANGE


class ConfigurationError(RecordsDeskError):
    """Raised when configuration is invalid or missing."""

    kind = ErrorKind.CONFIGURATION
