import logging
from fastapi import HTTPException
from cashflow.core.config import settings
from cashflow.core.utils import compute_net_balances, simplify_debts, is_settled
from cashflow.schemas.balances import BalancesOut, CashFlowOut
from cashflow.schemas.transactions import TransactionBatch

logger = logging.getLogger(__name__)


def _check_batch_size(data: TransactionBatch):
    if len(data.transactions) > settings.MAX_TRANSACTIONS:
        raise HTTPException(
            413, f"Too many transactions: {len(data.transactions)} (max {settings.MAX_TRANSACTIONS})"
        )


def _net_or_422(data: TransactionBatch) -> dict[str, int]:
    try:
        return compute_net_balances(data.transactions)
    except ValueError as e:
        logger.warning("Rejected transaction batch: %s", e)
        raise HTTPException(422, str(e))


async def compute_balances(data: TransactionBatch):
    _check_batch_size(data)
    net = _net_or_422(data)
    return BalancesOut(net=net, settled=is_settled(net))


async def compute_settlements(data: TransactionBatch):
    _check_batch_size(data)
    net = _net_or_422(data)

    try:
        settlements = simplify_debts(net)
    except ValueError as e:
        logger.error("Matching failed on netted balances: %s", e)
        raise HTTPException(422, str(e))

    logger.info("Reduced %d transactions to %d payments", len(data.transactions), len(settlements))

    return CashFlowOut(net=net, settlements=settlements, count=len(settlements))
