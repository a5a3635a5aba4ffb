"""Console menus for the bank ledger and the fitness registry.

Usage::

    records-desk --seed 42 bank --demo 5
    DEMO_RECORDS=8 records-desk fitness
"""

from __future__ import annotations

import argparse
import logging
import sys
from decimal import Decimal
from typing import TextIO

from records_desk.config import AppConfig
from records_desk.exceptions import (
    ConfigurationError,
    ConfirmationRequiredError,
    RecordsDeskError,
)
from records_desk.generators import LedgerSeeder, MemberGenerator
from records_desk.logging import setup_logging
from records_desk.models.fitness import Member, MembershipPlan, parse_plan
from records_desk.money import ZERO, to_money
from records_desk.sinks import console
from records_desk.store import Bank, MemberRegistry

logger = logging.getLogger(__name__)

BANK_MENU = """
========================================
          BANK MANAGEMENT SYSTEM
========================================
1. Create New Account
2. Deposit Money
3. Withdraw Money
4. Transfer Between Accounts
5. View Account Details
6. Update Account Information
7. Show All Accounts
8. Show Transaction History
9. Delete Account
10. Check Account Exists
0. Exit"""

FITNESS_MENU = """
--- MENU ---
1. Add Member
2. Show Basic Members
3. Show Premium Members
4. Show Family Members
5. Show All Members
6. Update Member
7. Delete Member
0. Exit"""


class Menu:
    """Line-oriented prompt/response loop over injectable streams."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout

    def say(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def ask(self, prompt: str) -> str | None:
        """Prompt for one line; None at end of input."""
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.strip()

    def ask_int(self, prompt: str) -> int | None:
        answer = self.ask(prompt)
        if not answer:
            return None
        try:
            return int(answer)
        except ValueError:
            self.say(f"Invalid number: {answer!r}")
            return None

    def ask_money(self, prompt: str) -> Decimal | None:
        answer = self.ask(prompt)
        if answer is None:
            return None
        try:
            return to_money(answer)
        except RecordsDeskError:
            self.say(f"Invalid amount: {answer!r}")
            return None

    def confirm(self, prompt: str) -> bool:
        answer = self.ask(f"{prompt} (yes/no): ")
        return answer is not None and answer.lower() == "yes"


class BankMenu(Menu):
    """Interactive front end for :class:`Bank`."""

    def __init__(
        self,
        bank: Bank,
        stdin: TextIO,
        stdout: TextIO,
        symbol: str = "$",
        as_json: bool = False,
    ) -> None:
        super().__init__(stdin, stdout)
        self.bank = bank
        self.symbol = symbol
        self.as_json = as_json
        self._actions = {
            "1": self.create_account,
            "2": self.deposit,
            "3": self.withdraw,
            "4": self.transfer,
            "5": self.view_details,
            "6": self.update_account,
            "7": self.show_all,
            "8": self.show_history,
            "9": self.delete_account,
            "10": self.check_exists,
        }

    def run(self) -> None:
        while True:
            self.say(BANK_MENU)
            choice = self.ask("Choose option: ")
            if choice is None or choice == "0":
                break
            action = self._actions.get(choice)
            if action is None:
                self.say("Invalid option.")
                continue
            try:
                action()
            except RecordsDeskError as exc:
                self.say(f"Error: {exc}")
        self.say("\nThank you for using Bank Management System!")

    def create_account(self) -> None:
        name = self.ask("Enter owner name: ")
        if not name:
            self.say("Owner name cannot be empty!")
            return
        deposit = self.ask_money("Enter initial deposit: ")
        if deposit is None:
            return
        if deposit < ZERO:
            self.say("Initial deposit cannot be negative!")
            return
        if deposit == ZERO and not self.confirm("Create account with zero balance?"):
            self.say("Account creation cancelled.")
            return
        account_number = self.bank.create_account(name, deposit)
        self.say(f"Account created! Account Number = {account_number}")

    def deposit(self) -> None:
        account_number = self.ask_int("Account Number: ")
        amount = self.ask_money("Amount: ")
        if account_number is None or amount is None:
            return
        if amount <= ZERO:
            self.say("Deposit amount must be positive!")
            return
        note = self.ask("Note: ") or ""
        self.bank.deposit(account_number, amount, note)
        self.say("Deposit successful!")
        self.say(console.format_account(self.bank.get_account(account_number), self.symbol))

    def withdraw(self) -> None:
        account_number = self.ask_int("Account Number: ")
        amount = self.ask_money("Amount: ")
        if account_number is None or amount is None:
            return
        if amount <= ZERO:
            self.say("Withdrawal amount must be positive!")
            return
        note = self.ask("Note: ") or ""
        self.bank.withdraw(account_number, amount, note)
        self.say("Withdraw successful!")
        self.say(console.format_account(self.bank.get_account(account_number), self.symbol))

    def transfer(self) -> None:
        source = self.ask_int("From Account: ")
        target = self.ask_int("To Account: ")
        amount = self.ask_money("Amount: ")
        if source is None or target is None or amount is None:
            return
        self.say(self._transfer_status("Before Transfer", source, target))
        self.say(f"Transfer Amount: {self.symbol}{amount:,.2f}")
        try:
            self.bank.transfer(source, target, amount)
        except RecordsDeskError as exc:
            self.say(f"Error: {exc}")
            self.say("Transfer failed.")
            return
        self.say(self._transfer_status("After Transfer", source, target))
        self.say("Transfer completed successfully!")

    def _transfer_status(self, title: str, source: int, target: int) -> str:
        def balance(number: int) -> Decimal | None:
            return self.bank.get_account(number).balance if self.bank.account_exists(number) else None

        return console.format_transfer_status(
            title, source, balance(source), target, balance(target), self.symbol
        )

    def view_details(self) -> None:
        account_number = self.ask_int("Enter account number: ")
        if account_number is None:
            return
        details = self.bank.account_details(account_number)
        if self.as_json:
            self.say(console.format_account_details_json(details))
        else:
            self.say(console.format_account_details(details, self.symbol))

    def update_account(self) -> None:
        account_number = self.ask_int("Enter account number to update: ")
        if account_number is None:
            return
        account = self.bank.get_account(account_number)
        self.say(f"Current owner: {account.owner_name}")
        name = self.ask("Enter new owner name: ")
        if not name:
            self.say("No changes made.")
            return
        self.bank.update_account(account_number, name)
        self.say("Account updated successfully!")

    def show_all(self) -> None:
        self.say(console.format_all_accounts(self.bank.list_accounts(), self.symbol))

    def show_history(self) -> None:
        account_number = self.ask_int("Enter account number: ")
        if account_number is None:
            return
        account = self.bank.get_account(account_number)
        if self.as_json:
            self.say(console.format_account_json(account))
        else:
            self.say(console.format_history(account, self.symbol))

    def delete_account(self) -> None:
        account_number = self.ask_int("Enter account number: ")
        if account_number is None:
            return
        try:
            account = self.bank.delete_account(account_number)
        except ConfirmationRequiredError:
            balance = self.bank.get_account(account_number).balance
            self.say(f"Warning: Account has {self.symbol}{balance:,.2f} balance! Withdraw all funds before deletion.")
            if not self.confirm("Do you want to force delete?"):
                self.say("Deletion cancelled.")
                return
            account = self.bank.delete_account(account_number, force=True)
        self.say(f"Account {account.account_number} ({account.owner_name}) deleted successfully.")

    def check_exists(self) -> None:
        account_number = self.ask_int("Enter account number: ")
        if account_number is None:
            return
        if self.bank.account_exists(account_number):
            account = self.bank.get_account(account_number)
            self.say(f"Account {account_number} exists.")
            self.say(f"Owner: {account.owner_name}, Balance: {self.symbol}{account.balance:,.2f}")
        else:
            self.say(f"Account {account_number} does not exist.")


class FitnessMenu(Menu):
    """Interactive front end for :class:`MemberRegistry`."""

    def __init__(
        self,
        registry: MemberRegistry,
        stdin: TextIO,
        stdout: TextIO,
        symbol: str = "$",
        default_family_size: int = 1,
    ) -> None:
        super().__init__(stdin, stdout)
        self.registry = registry
        self.symbol = symbol
        self.default_family_size = default_family_size

    def run(self) -> None:
        while True:
            self.say(FITNESS_MENU)
            choice = self.ask("Choose: ")
            if choice is None or choice == "0":
                break
            try:
                self._dispatch(choice)
            except (RecordsDeskError, ValueError) as exc:
                self.say(f"Error: {exc}")
        self.say("Program ended.")

    def _dispatch(self, choice: str) -> None:
        if choice == "1":
            self.add_member()
        elif choice == "2":
            self.show_plan(MembershipPlan.BASIC)
        elif choice == "3":
            self.show_plan(MembershipPlan.PREMIUM)
        elif choice == "4":
            self.show_plan(MembershipPlan.FAMILY)
        elif choice == "5":
            for plan in self.registry.all():
                self.show_plan(plan)
        elif choice == "6":
            self.update_member()
        elif choice == "7":
            member_id = self.ask("Enter ID to delete: ") or ""
            self.registry.remove(member_id)
            self.say("Member deleted successfully.")
        else:
            self.say("Invalid option.")

    def add_member(self) -> None:
        member_id = self.ask("Enter membership ID: ") or ""
        if not member_id:
            self.say("Membership ID cannot be empty!")
            return
        if self.registry.exists(member_id):
            self.say("Membership ID already exists!")
            return
        name = self.ask("Enter name: ") or ""
        plan = parse_plan(self.ask("Type (premium/basic/family): ") or "")
        family_size = 1
        if plan is MembershipPlan.FAMILY:
            family_size = self.ask_int("Enter number of family members: ") or self.default_family_size
        member = Member(member_id=member_id, name=name, plan=plan, family_size=family_size)
        self.registry.add(member)
        self.say(f"Added: {member.member_id} {member.name} ({member.terms.label})")

    def show_plan(self, plan: MembershipPlan) -> None:
        title = f"{plan.value.capitalize()} Members"
        self.say(console.format_member_group(title, self.registry.by_plan(plan), self.symbol))

    def update_member(self) -> None:
        member_id = self.ask("Enter membership ID to update: ") or ""
        self.registry.get(member_id)
        new_name = self.ask("Enter new name (or press Enter to keep current): ") or None
        plan_text = self.ask("Enter new membership type (premium/basic/family) OR press Enter to keep current: ")
        new_plan = parse_plan(plan_text) if plan_text else None
        self.registry.update(member_id, new_name=new_name, new_plan=new_plan)
        self.say("Member updated successfully!")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="records-desk", description="In-memory record keeping menus")
    parser.add_argument("--log-level", default=None, help="Log level (default: LOG_LEVEL or INFO)")
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default=None,
        help="Log format (default: LOG_FORMAT or standard)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for demo data")
    sub = parser.add_subparsers(dest="command", required=True)

    bank = sub.add_parser("bank", help="Bank account ledger")
    bank.add_argument("--demo", type=int, default=None, help="Number of demo accounts to seed")
    bank.add_argument("--json", action="store_true", help="Print details and history as JSON")

    fitness = sub.add_parser("fitness", help="Fitness membership registry")
    fitness.add_argument("--demo", type=int, default=None, help="Number of demo members to seed")
    return parser


def main(argv: list[str] | None = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Run a menu; returns the process exit code."""
    args = build_parser().parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    try:
        config = AppConfig.from_env()
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    setup_logging(args.log_level or config.log_level, args.log_format or config.log_format)
    seed = args.seed if args.seed is not None else config.seed
    demo = args.demo if args.demo is not None else config.demo_records
    symbol = config.ledger.currency_symbol

    if args.command == "bank":
        bank = Bank(first_account_number=config.ledger.first_account_number)
        if demo:
            LedgerSeeder(seed=seed, locale=config.locale).populate(bank, demo)
        BankMenu(bank, stdin, stdout, symbol, as_json=args.json).run()
        logger.info("Bank session ended: %s", bank.summary())
    else:
        registry = MemberRegistry()
        if demo:
            for member in MemberGenerator(seed=seed, locale=config.locale).generate_batch(demo):
                registry.add(member)
        FitnessMenu(registry, stdin, stdout, symbol, config.fitness.default_family_size).run()
        logger.info("Fitness session ended: %s", registry.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
