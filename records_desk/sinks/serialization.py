"""Shared serialization utilities for console and log output."""

from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from records_desk.models.banking import Account


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if isinstance(obj, Account):
        return account_to_dict(obj)
    elif is_dataclass(obj):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert dataclass to dict with proper serialization."""
    result = {}
    for key, value in asdict(obj).items():
        result[key] = serialize_value(value)
    return result


def account_to_dict(account: Account, include_history: bool = True) -> dict:
    """Convert an account, optionally with its full log, to a dict."""
    result: dict[str, Any] = {
        "account_number": account.account_number,
        "owner_name": account.owner_name,
        "balance": serialize_value(account.balance),
    }
    if include_history:
        result["history"] = [dataclass_to_dict(t) for t in account.history]
    return result


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
