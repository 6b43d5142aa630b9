from fastapi import APIRouter
from cashflow.schemas.balances import BalancesOut, CashFlowOut
from cashflow.schemas.transactions import TransactionBatch
from cashflow.services.settlement_service import compute_balances, compute_settlements

router = APIRouter()


@router.post("/balances", response_model=BalancesOut)
async def net_balances(data: TransactionBatch):
    return await compute_balances(data)


@router.post("/minimize", response_model=CashFlowOut)
async def minimize(data: TransactionBatch):
    return await compute_settlements(data)
