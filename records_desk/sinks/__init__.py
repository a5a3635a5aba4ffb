"""Output helpers for rendering records."""

from records_desk.sinks.serialization import account_to_dict, serialize_value, to_dict

__all__ = ["account_to_dict", "serialize_value", "to_dict"]
