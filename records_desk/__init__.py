"""In-memory record keeping: a bank ledger and a fitness membership registry."""

__version__ = "0.1.0"
