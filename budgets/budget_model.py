from __future__ import annotations

from pydantic import BaseModel, Field


class BudgetSet(BaseModel):
    category: str
    amount: float = Field(gt=0)


class Budget(BaseModel):
    id: str
    category: str
    amount: float


class BudgetComparison(BaseModel):
    category: str
    budget: float
    actual: float
