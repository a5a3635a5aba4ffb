"""Plain-text rendering of ledger and registry reports.

Every function here only reads its arguments and returns a string; the
caller decides where to print it.
"""

import json
from decimal import Decimal

from records_desk.models.banking import Account, Transaction
from records_desk.models.fitness import Member
from records_desk.money import format_money
from records_desk.sinks.serialization import account_to_dict, dataclass_to_dict
from records_desk.store.banking import AccountDetails

RULE = "=" * 50


def format_account(account: Account, symbol: str = "$") -> str:
    """Short account card: number, owner and balance."""
    return "\n".join([
        "--- Account Info ---",
        f"Account Number: {account.account_number}",
        f"Owner: {account.owner_name}",
        f"Balance: {format_money(account.balance, symbol)}",
    ])


def format_all_accounts(accounts: list[Account], symbol: str = "$") -> str:
    """One line per account; ``accounts`` is expected sorted by number."""
    if not accounts:
        return "No accounts exist."
    lines = ["--- All Accounts ---", f"Total Accounts: {len(accounts)}", RULE]
    for account in accounts:
        lines.append(
            f"AccNo: {account.account_number} | Name: {account.owner_name} | "
            f"Balance: {format_money(account.balance, symbol)}"
        )
    lines.append(RULE)
    return "\n".join(lines)


def format_transaction(index: int, transaction: Transaction, symbol: str = "$") -> str:
    return (
        f"{index}. {transaction.kind.value:<15} | "
        f"Amount: {format_money(transaction.amount, symbol)} | "
        f"Balance: {format_money(transaction.balance_after, symbol)} | "
        f"{transaction.timestamp:%Y-%m-%d %H:%M:%S} | {transaction.note}"
    )


def format_history(account: Account, symbol: str = "$") -> str:
    """Full chronological log of an account."""
    header = f"--- Transaction History for Account {account.account_number} ({account.owner_name}) ---"
    history = account.history
    if not history:
        return f"{header}\nNo transactions yet."
    lines = [header]
    lines.extend(format_transaction(i, t, symbol) for i, t in enumerate(history, start=1))
    lines.append(f"Total Transactions: {len(history)}")
    return "\n".join(lines)


def format_account_details(details: AccountDetails, symbol: str = "$") -> str:
    """Detailed view derived from the log; missing facts are reported as such."""
    if details.created is not None:
        created = (
            f"{details.created.timestamp:%Y-%m-%d %H:%M:%S} with initial deposit of "
            f"{format_money(details.created.amount, symbol)}"
        )
    else:
        created = "Not recorded"

    if details.last_activity is not None:
        last = details.last_activity
        last_line = f"{last.kind.value} of {format_money(last.amount, symbol)}"
        if last.note:
            last_line += f" ({last.note})"
    else:
        last_line = "No activity since account creation"

    return "\n".join([
        "=== Account Details ===",
        f"Account Number: {details.account_number}",
        f"Owner Name: {details.owner_name}",
        f"Current Balance: {format_money(details.balance, symbol)}",
        f"Number of Transactions: {details.transaction_count}",
        f"Account Created: {created}",
        f"Last Transaction: {last_line}",
    ])


def format_account_details_json(details: AccountDetails) -> str:
    return json.dumps(dataclass_to_dict(details), indent=2, ensure_ascii=False)


def format_account_json(account: Account) -> str:
    """Account with its full history as JSON."""
    return json.dumps(account_to_dict(account), indent=2, ensure_ascii=False)


def format_transfer_status(
    title: str,
    from_account: int,
    from_balance: Decimal | None,
    to_account: int,
    to_balance: Decimal | None,
    symbol: str = "$",
) -> str:
    """Balances of both transfer parties; None marks a missing account."""

    def _line(label: str, number: int, balance: Decimal | None) -> str:
        shown = "Account not found" if balance is None else f"Balance: {format_money(balance, symbol)}"
        return f"{label} Account {number}: {shown}"

    return "\n".join([
        f"--- {title} ---",
        _line("Sender", from_account, from_balance),
        _line("Receiver", to_account, to_balance),
    ])


def format_member(member: Member, symbol: str = "$") -> str:
    terms = member.terms
    return "\n".join([
        f"{member.name} ({member.member_id})",
        f"Type: {terms.label}",
        f"Fee: {format_money(terms.monthly_fee, symbol)}",
        f"Perks: {', '.join(terms.perks)}",
    ])


def format_member_group(title: str, members: list[Member], symbol: str = "$") -> str:
    if not members:
        return f"--- {title} ---\nNone"
    blocks = [f"--- {title} ---"]
    blocks.extend(format_member(m, symbol) for m in members)
    return "\n\n".join(blocks)
