"""
Pure aggregations over a fully fetched list of transactions.

Every function sorts its input by (date, id) before grouping, so the same
set of transactions gives the same result whatever order it arrives in.
Month grouping uses the month NAME only: January 2024 and January 2025
land in the same bucket.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Union

import pandas as pd

from budgets.budget_model import Budget, BudgetComparison
from transactions.pagination import PageRequest, as_utc, paginate
from transactions.transaction_model import Transaction


TransactionLike = Union[Transaction, Mapping[str, Any]]
BudgetLike = Union[Budget, Mapping[str, Any]]

COLUMNS = ["id", "description", "amount", "date", "category"]

MONTH_NAMES = [
  "January", "February", "March", "April", "May", "June",
  "July", "August", "September", "October", "November", "December",
]


def _as_dict(record: Any) -> Dict[str, Any]:
  if isinstance(record, Mapping):
    return dict(record)
  return record.model_dump()


def transactions_to_dataframe(transactions: Iterable[TransactionLike], tz: str = "UTC") -> pd.DataFrame:
  """
  Build a typed frame with the local month/day columns the group-bys need.
  ``tz`` is the IANA zone of the consumer; naive dates are read as UTC.
  """
  records = [_as_dict(t) for t in transactions]
  for r in records:
    r["date"] = as_utc(r["date"])
  df = pd.DataFrame(records, columns=COLUMNS)

  if df.empty:
    return pd.DataFrame(columns=COLUMNS + ["month_num", "month", "day"]).astype({
      "id": "string",
      "description": "string",
      "amount": "float64",
      "date": "datetime64[ns, UTC]",
      "category": "string",
      "month_num": "int64",
      "month": "string",
      "day": "int64",
    })

  df["id"] = df["id"].astype("string")
  df["category"] = df["category"].astype("string")
  df["amount"] = pd.to_numeric(df["amount"], errors="coerce").fillna(0.0).astype("float64")
  df["date"] = pd.to_datetime(df["date"], utc=True)

  local = df["date"].dt.tz_convert(tz)
  df["month_num"] = local.dt.month.astype("int64")
  df["month"] = df["month_num"].map(lambda m: MONTH_NAMES[m - 1]).astype("string")
  df["day"] = local.dt.day.astype("int64")

  return df.sort_values(by=["date", "id"], kind="mergesort").reset_index(drop=True)


def total_expenses(transactions: Iterable[TransactionLike]) -> float:
  df = transactions_to_dataframe(transactions)
  return float(df["amount"].sum()) if not df.empty else 0.0


def by_category(transactions: Iterable[TransactionLike]) -> Dict[str, float]:
  df = transactions_to_dataframe(transactions)
  if df.empty:
    return {}
  grp = df.groupby("category", sort=True)["amount"].sum()
  return {str(category): float(spend) for category, spend in grp.items()}


def by_month(transactions: Iterable[TransactionLike], tz: str = "UTC") -> Dict[str, float]:
  """Spend per month name, January first."""
  df = transactions_to_dataframe(transactions, tz=tz)
  if df.empty:
    return {}
  grp = df.groupby("month_num", sort=True)["amount"].sum()
  return {MONTH_NAMES[int(m) - 1]: float(spend) for m, spend in grp.items()}


def by_day(transactions: Iterable[TransactionLike], month: str, tz: str = "UTC") -> Dict[int, float]:
  """Spend per day-of-month within ``month`` (a month name), ascending by day."""
  df = transactions_to_dataframe(transactions, tz=tz)
  if df.empty:
    return {}
  in_month = df[df["month"] == month]
  grp = in_month.groupby("day", sort=True)["amount"].sum()
  return {int(day): float(spend) for day, spend in grp.items()}


def budget_vs_actual(transactions: Iterable[TransactionLike], budgets: Iterable[BudgetLike]) -> List[BudgetComparison]:
  # Transactions in categories without a budget do not appear here
  actual = by_category(transactions)
  comparisons: List[BudgetComparison] = []
  for b in budgets:
    budget = _as_dict(b)
    comparisons.append(BudgetComparison(
      category=budget["category"],
      budget=float(budget["amount"]),
      actual=actual.get(budget["category"], 0.0),
    ))
  return comparisons


def most_recent(transactions: Iterable[TransactionLike], n: int) -> List[TransactionLike]:
  if n <= 0:
    return []
  window, _, _ = paginate(list(transactions), PageRequest(page=1, limit=n))
  return window
