from __future__ import annotations

import logging
from typing import List

from surrealdb import AsyncSurreal

from budgets.budget_model import Budget
from db.errors import StoreUnavailable
from db.records import normalize_record, rows


logger = logging.getLogger(__name__)

TABLE = "budget"

# One statement, matched on category: at most one budget per category
UPSERT_QUERY = f"UPSERT {TABLE} SET category = $category, amount = $amount WHERE category = $category RETURN AFTER;"
LIST_QUERY = f"SELECT * FROM {TABLE};"


class BudgetRepo:
    def __init__(self, db: AsyncSurreal):
        self.db = db

    async def set_budget(self, category: str, amount: float) -> Budget:
        try:
            result = rows(await self.db.query(UPSERT_QUERY, {"category": category, "amount": amount}))
        except Exception as exc:
            logger.exception("Error upserting budget for category '%s': %s", category, exc)
            raise StoreUnavailable("Error upserting budget") from exc
        if not result:
            raise StoreUnavailable(f"Upsert for category '{category}' returned no record")
        logger.info("Budget for '%s' set to %.2f", category, amount)
        return Budget(**normalize_record(result[0]))

    async def list(self) -> List[Budget]:
        try:
            records = rows(await self.db.query(LIST_QUERY))
        except Exception as exc:
            logger.exception("Error listing budgets: %s", exc)
            raise StoreUnavailable("Error listing budgets") from exc
        return [Budget(**normalize_record(r)) for r in records]
