from __future__ import annotations

from typing import Dict

from fastapi import APIRouter, Depends, status
from surrealdb import AsyncSurreal

from settings.db import get_db
from transactions.pagination import DEFAULT_PAGE, FETCH_ALL, PageRequest
from transactions.transaction_model import Transaction, TransactionCreate, TransactionPage, TransactionUpdate
from transactions.transaction_repo import TransactionRepo


router = APIRouter(prefix="/transactions", tags=["transactions"])


def get_transaction_repo(db: AsyncSurreal = Depends(get_db)) -> TransactionRepo:
    return TransactionRepo(db)


@router.post("", response_model=Transaction, status_code=status.HTTP_201_CREATED)
async def create_transaction(body: TransactionCreate, repo: TransactionRepo = Depends(get_transaction_repo)) -> Transaction:
    return await repo.insert(body)


@router.get("", response_model=TransactionPage)
async def list_transactions(
    page: int = DEFAULT_PAGE,
    limit: int = FETCH_ALL,
    repo: TransactionRepo = Depends(get_transaction_repo),
) -> TransactionPage:
    # limit=0 (the default) returns every transaction
    transactions, more, total = await repo.list(PageRequest(page=page, limit=limit))
    return TransactionPage(transactions=transactions, has_more=more, total_transactions=total)


@router.put("/{transaction_id}")
async def update_transaction(
    transaction_id: str,
    body: TransactionUpdate,
    repo: TransactionRepo = Depends(get_transaction_repo),
) -> Dict[str, str]:
    await repo.update(transaction_id, body)
    return {"message": "Transaction updated successfully"}


@router.delete("/{transaction_id}")
async def delete_transaction(transaction_id: str, repo: TransactionRepo = Depends(get_transaction_repo)) -> Dict[str, str]:
    await repo.delete(transaction_id)
    return {"message": "Transaction deleted successfully"}
