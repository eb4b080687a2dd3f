from __future__ import annotations

from fastapi import APIRouter, Depends, status
from typing import List

from budgets.budget_model import Budget, BudgetSet
from budgets.budget_repo import BudgetRepo
from settings.db import get_db
from surrealdb import AsyncSurreal


router = APIRouter(prefix="/budgets", tags=["budgets"])


def get_budget_repo(db: AsyncSurreal = Depends(get_db)) -> BudgetRepo:
    return BudgetRepo(db)


@router.get("", response_model=List[Budget])
async def list_budgets(repo: BudgetRepo = Depends(get_budget_repo)) -> List[Budget]:
    budgets = await repo.list()
    return sorted(budgets, key=lambda b: b.category)


@router.post("", response_model=Budget, status_code=status.HTTP_201_CREATED)
async def upsert_budget(body: BudgetSet, repo: BudgetRepo = Depends(get_budget_repo)) -> Budget:
    return await repo.set_budget(body.category, body.amount)
