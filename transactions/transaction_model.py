from __future__ import annotations

from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TransactionFields(BaseModel):
    description: str = Field(min_length=2)
    amount: float = Field(gt=0)
    date: datetime
    category: str

    @field_validator("date")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        # Naive timestamps are stored as UTC so ordering stays total
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class TransactionCreate(TransactionFields):
    pass


class TransactionUpdate(TransactionFields):
    """Full replace of every editable field."""


class Transaction(BaseModel):
    id: str
    description: str
    amount: float
    date: datetime
    category: str


class TransactionPage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    transactions: List[Transaction]
    has_more: bool = Field(alias="hasMore")
    total_transactions: int = Field(alias="totalTransactions")
