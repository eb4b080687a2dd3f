from __future__ import annotations

from fastapi import APIRouter
from typing import Dict, List

from categories.categories import describe_categories


router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("")
async def list_categories() -> List[Dict[str, str]]:
    return describe_categories()
