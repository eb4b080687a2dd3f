from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from typing import Any, Dict, List

from analysis_service.analysis_service import get_analysis_service, AnalysisService
from budgets.budget_model import BudgetComparison
from settings.config import settings


router = APIRouter(prefix="/analysis", tags=["analysis"])


@router.get("/summary")
async def summary(
  recent: int = Query(default=settings.RECENT_TRANSACTIONS, ge=0, le=100),
  service: AnalysisService = Depends(get_analysis_service),
) -> Dict[str, Any]:
  return await service.summary(recent=recent)


@router.get("/monthly")
async def monthly(service: AnalysisService = Depends(get_analysis_service)) -> List[Dict[str, Any]]:
  return await service.monthly()


@router.get("/daily")
async def daily(month: str = Query(..., min_length=3), service: AnalysisService = Depends(get_analysis_service)) -> List[Dict[str, Any]]:
  # month is a name such as "January", as returned by /analysis/monthly
  return await service.daily(month)


@router.get("/categories")
async def category_breakdown(service: AnalysisService = Depends(get_analysis_service)) -> List[Dict[str, Any]]:
  return await service.category_breakdown()


@router.get("/budget-vs-actual", response_model=List[BudgetComparison])
async def budget_vs_actual(service: AnalysisService = Depends(get_analysis_service)) -> List[BudgetComparison]:
  return await service.budget_vs_actual()
