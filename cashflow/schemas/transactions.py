from pydantic import BaseModel, Field, computed_field

class DebtRecord(BaseModel):
    from_user: str = Field(alias="from", min_length=1)
    to_user: str = Field(alias="to", min_length=1)
    amount: int = Field(ge=0, strict=True)

    class Config:
        frozen = True
        populate_by_name = True

class SettlementRecord(DebtRecord):
    amount: int = Field(gt=0, strict=True)

    @computed_field
    @property
    def description(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return f"{self.from_user} pays {self.amount} to {self.to_user}"

class TransactionBatch(BaseModel):
    transactions: list[DebtRecord]
