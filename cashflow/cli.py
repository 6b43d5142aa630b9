"""
Console front end for the cash flow simplifier.

Reads a transaction count and then one ``from to amount`` line per
transaction, re-prompting on malformed lines, and prints the reduced set
of payments.
"""
import argparse
import logging
import sys
from typing import List, Optional, TextIO
from cashflow.core.config import settings
from cashflow.core.logging import setup_logging
from cashflow.core.utils import compute_net_balances, simplify_debts, net_balance_table
from cashflow.schemas.transactions import DebtRecord

logger = logging.getLogger(__name__)


class InvalidLine(ValueError):
    pass


def _prompt(text: str, stdin: TextIO, stdout: TextIO) -> str:
    stdout.write(text)
    stdout.flush()
    line = stdin.readline()
    if not line:
        raise EOFError("input ended early")
    return line.strip()


def parse_transaction(line: str) -> DebtRecord:
    parts = line.split()
    if len(parts) != 3:
        raise InvalidLine("Invalid input. Try again.")

    from_user, to_user, raw_amount = parts
    try:
        if "_" in raw_amount:
            raise ValueError(raw_amount)
        amount = int(raw_amount)
    except ValueError:
        raise InvalidLine("Amount must be an integer.")

    if amount < 0:
        raise InvalidLine("Amount must not be negative.")
    if amount > settings.AMOUNT_LIMIT:
        raise InvalidLine(f"Amount must be at most {settings.AMOUNT_LIMIT}.")

    return DebtRecord(from_user=from_user, to_user=to_user, amount=amount)


def read_count(stdin: TextIO, stdout: TextIO) -> int:
    while True:
        raw = _prompt("Enter number of transactions: ", stdin, stdout)
        try:
            count = int(raw)
        except ValueError:
            print("Count must be an integer.", file=stdout)
            continue
        if count < 0:
            print("Count must not be negative.", file=stdout)
            continue
        if count > settings.MAX_TRANSACTIONS:
            print(f"Count must be at most {settings.MAX_TRANSACTIONS}.", file=stdout)
            continue
        return count


def read_transactions(count: int, stdin: TextIO, stdout: TextIO) -> List[DebtRecord]:
    records: List[DebtRecord] = []
    print("Enter each transaction in format: from to amount", file=stdout)

    # a rejected line re-prompts for the same index
    while len(records) < count:
        line = _prompt(f"Transaction {len(records) + 1}: ", stdin, stdout)
        try:
            records.append(parse_transaction(line))
        except InvalidLine as e:
            logger.debug("Rejected line %r: %s", line, e)
            print(str(e), file=stdout)

    return records


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="cashflow",
        description="Reduce a list of debts to a small set of settling payments.",
    )
    p.add_argument(
        "--balances",
        action="store_true",
        help="print each participant's net balance before the payments",
    )
    p.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        help="logging level (default: %(default)s)",
    )
    return p


def main(
    argv: Optional[List[str]] = None,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
    stderr: TextIO = sys.stderr,
) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        count = read_count(stdin, stdout)
        records = read_transactions(count, stdin, stdout)
    except EOFError as e:
        print(f"\nerror: {e}", file=stderr)
        return 1

    try:
        net = compute_net_balances(records)
        settlements = simplify_debts(net)
    except ValueError as e:
        print(f"error: {e}", file=stderr)
        return 1

    if args.balances:
        print("\nNet balances:", file=stdout)
        for entry in net_balance_table(net):
            print(f"  {entry.name}: {entry.balance}", file=stdout)

    print("\nOptimized Transactions to Settle All Debts:", file=stdout)
    if not settlements:
        print("No payments needed.", file=stdout)
    for s in settlements:
        print(s, file=stdout)

    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
