from pydantic import BaseModel
from cashflow.schemas.transactions import SettlementRecord

class NetBalance(BaseModel):
    name: str
    balance: int

class BalancesOut(BaseModel):
    net: dict[str, int]
    settled: bool

class CashFlowOut(BaseModel):
    net: dict[str, int]
    settlements: list[SettlementRecord]
    count: int
