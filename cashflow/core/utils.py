import heapq
import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple
from cashflow.core.config import settings
from cashflow.schemas.balances import NetBalance
from cashflow.schemas.transactions import DebtRecord, SettlementRecord

logger = logging.getLogger(__name__)


class AmountOverflowError(ValueError):
    pass


class UnbalancedLedgerError(ValueError):
    pass


def _check_limit(label: str, value: int, limit: int):
    if abs(value) > limit:
        raise AmountOverflowError(f"{label} out of range: {value} (limit {limit})")


def compute_net_balances(
    records: Iterable[DebtRecord],
    limit: Optional[int] = None,
) -> Dict[str, int]:
    """
    Collapse debt records into one signed balance per participant.

        net[name] = received - paid

    Every name seen as payer or payee gets an entry, including ones that
    end up at zero. Raises AmountOverflowError if an amount or any running
    balance leaves [-limit, limit].
    """
    if limit is None:
        limit = settings.AMOUNT_LIMIT

    net: Dict[str, int] = defaultdict(int)

    for record in records:
        _check_limit(f"{record.from_user}->{record.to_user} amount", record.amount, limit)

        net[record.from_user] -= record.amount
        net[record.to_user] += record.amount

        _check_limit(f"balance of {record.from_user!r}", net[record.from_user], limit)
        _check_limit(f"balance of {record.to_user!r}", net[record.to_user], limit)

    return dict(net)


def validate_balance_sum(net_map: Dict[str, int]) -> None:
    total = sum(net_map.values())
    if total != 0:
        raise UnbalancedLedgerError(f"Balances not zero-sum: total={total}")


def simplify_debts(net_map: Dict[str, int]) -> List[SettlementRecord]:
    """
    Greedy extreme-pairing: repeatedly settle the largest creditor against
    the largest debtor until both pools are empty.

    Equal balances are served in name order.
    """
    validate_balance_sum(net_map)

    # heapq is a min-heap: creditors are keyed on the negated balance
    creditors: List[Tuple[int, str]] = []
    debtors: List[Tuple[int, str]] = []

    for name, bal in net_map.items():
        if bal > 0:
            creditors.append((-bal, name))
        elif bal < 0:
            debtors.append((bal, name))

    heapq.heapify(creditors)
    heapq.heapify(debtors)

    transfers: List[SettlementRecord] = []

    while creditors and debtors:
        neg_credit, creditor = heapq.heappop(creditors)
        debt, debtor = heapq.heappop(debtors)

        credit = -neg_credit
        settled = min(credit, -debt)

        transfer = SettlementRecord(from_user=debtor, to_user=creditor, amount=settled)
        transfers.append(transfer)
        logger.debug("Matched %s (%d) with %s (%d): %s", creditor, credit, debtor, debt, transfer)

        credit -= settled
        debt += settled

        if credit > 0:
            heapq.heappush(creditors, (-credit, creditor))
        if debt < 0:
            heapq.heappush(debtors, (debt, debtor))

    logger.info(
        "Settled %d participants with %d payments",
        sum(1 for bal in net_map.values() if bal != 0),
        len(transfers),
    )

    return transfers


def minimize_cash_flow(
    records: Iterable[DebtRecord],
    limit: Optional[int] = None,
) -> List[SettlementRecord]:
    return simplify_debts(compute_net_balances(records, limit))


def net_balance_table(net_map: Dict[str, int]) -> List[NetBalance]:
    return [NetBalance(name=name, balance=bal) for name, bal in sorted(net_map.items())]


def is_settled(net_map: Dict[str, int]) -> bool:
    """
    A ledger is settled when every participant's balance is zero.
    """
    return all(bal == 0 for bal in net_map.values())
