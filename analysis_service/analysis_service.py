from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import Depends
from surrealdb import AsyncSurreal

from analysis_service import aggregator
from analysis_service.formatting import format_amount, relative_time
from budgets.budget_model import BudgetComparison
from budgets.budget_repo import BudgetRepo
from categories.categories import color_for, icon_for
from settings.config import settings
from settings.db import get_db
from transactions.transaction_repo import TransactionRepo


logger = logging.getLogger(__name__)


class AnalysisService():
  """
  Chart datasets for the dashboard.
  Every call re-reads the full transaction set so results always reflect
  the latest mutations.
  """

  def __init__(self, transactions: TransactionRepo, budgets: BudgetRepo, tz: str = "UTC", currency_symbol: str = "₹") -> None:
    self.transactions = transactions
    self.budgets = budgets
    self.tz = tz
    self.currency_symbol = currency_symbol

  async def summary(self, recent: int = 3, now: Optional[datetime] = None) -> Dict[str, Any]:
    txns = await self.transactions.list_all()
    total = aggregator.total_expenses(txns)
    recent_rows = [
      {
        **t.model_dump(),
        "icon": icon_for(t.category),
        "color": color_for(t.category),
        "relativeTime": relative_time(t.date, now=now, tz=self.tz),
      }
      for t in aggregator.most_recent(txns, recent)
    ]
    logger.info("Summary over %d transactions", len(txns))
    return {
      "totalExpenses": total,
      "totalExpensesDisplay": format_amount(total, self.currency_symbol),
      "byCategory": aggregator.by_category(txns),
      "recentTransactions": recent_rows,
    }

  async def monthly(self) -> List[Dict[str, Any]]:
    txns = await self.transactions.list_all()
    return [{"name": month, "expenses": spend} for month, spend in aggregator.by_month(txns, tz=self.tz).items()]

  async def daily(self, month: str) -> List[Dict[str, Any]]:
    txns = await self.transactions.list_all()
    return [{"day": day, "expenses": spend} for day, spend in aggregator.by_day(txns, month, tz=self.tz).items()]

  async def category_breakdown(self) -> List[Dict[str, Any]]:
    txns = await self.transactions.list_all()
    return [
      {"name": category, "value": spend, "color": color_for(category)}
      for category, spend in aggregator.by_category(txns).items()
    ]

  async def budget_vs_actual(self) -> List[BudgetComparison]:
    txns = await self.transactions.list_all()
    budgets = await self.budgets.list()
    return aggregator.budget_vs_actual(txns, budgets)


def get_analysis_service(db: AsyncSurreal = Depends(get_db)) -> AnalysisService:
  return AnalysisService(
    TransactionRepo(db),
    BudgetRepo(db),
    tz=settings.DISPLAY_TIMEZONE,
    currency_symbol=settings.CURRENCY_SYMBOL,
  )
