from datetime import datetime, timedelta

import pytest
import pytest_asyncio

from db.errors import NotFound, StoreUnavailable
from transactions.pagination import PageRequest
from transactions.transaction_model import TransactionCreate, TransactionUpdate
from transactions.transaction_repo import TransactionRepo


def _body(i: int) -> TransactionCreate:
    # 15 records spread over January and February 2024
    return TransactionCreate(
        description=f"expense {i}",
        amount=10 + i,
        date=datetime(2024, 1, 10, 12) + timedelta(days=3 * i),
        category="Groceries",
    )


@pytest_asyncio.fixture
async def repo(fake_db):
    yield TransactionRepo(fake_db)


@pytest.mark.asyncio
async def test_insert_assigns_bare_id(repo: TransactionRepo):
    created = await repo.insert(_body(0))
    assert created.id
    assert ":" not in created.id
    assert created.description == "expense 0"
    assert created.date.tzinfo is not None


@pytest.mark.asyncio
async def test_paginated_listing_scenario(repo: TransactionRepo):
    for i in range(15):
        await repo.insert(_body(i))

    first, more, total = await repo.list(PageRequest(page=1, limit=10))
    assert len(first) == 10
    assert more is True
    assert total == 15
    assert [t.description for t in first] == [f"expense {i}" for i in range(14, 4, -1)]

    second, more, total = await repo.list(PageRequest(page=2, limit=10))
    assert len(second) == 5
    assert more is False
    assert total == 15
    assert [t.description for t in second] == [f"expense {i}" for i in range(4, -1, -1)]

    assert {t.id for t in first}.isdisjoint({t.id for t in second})


@pytest.mark.asyncio
async def test_fetch_all(repo: TransactionRepo):
    for i in range(3):
        await repo.insert(_body(i))
    everything, more, total = await repo.list(PageRequest())
    assert [t.description for t in everything] == ["expense 2", "expense 1", "expense 0"]
    assert more is False
    assert total == 3


@pytest.mark.asyncio
async def test_page_past_the_end_is_empty(repo: TransactionRepo):
    await repo.insert(_body(0))
    window, more, total = await repo.list(PageRequest(page=5, limit=10))
    assert window == []
    assert more is False
    assert total == 1


@pytest.mark.asyncio
async def test_update_replaces_fields(repo: TransactionRepo):
    created = await repo.insert(_body(0))
    change = TransactionUpdate(description="rent", amount=900, date=datetime(2024, 2, 1), category="Rent")
    updated = await repo.update(created.id, change)
    assert updated.id == created.id
    assert updated.category == "Rent"
    assert updated.amount == 900

    listed = await repo.list_all()
    assert listed[0].description == "rent"


@pytest.mark.asyncio
async def test_update_unknown_id(repo: TransactionRepo):
    change = TransactionUpdate(description="rent", amount=900, date=datetime(2024, 2, 1), category="Rent")
    with pytest.raises(NotFound):
        await repo.update("missing", change)


@pytest.mark.asyncio
async def test_delete_twice(repo: TransactionRepo):
    created = await repo.insert(_body(0))
    await repo.delete(created.id)
    with pytest.raises(NotFound):
        await repo.delete(created.id)
    assert await repo.list_all() == []


@pytest.mark.asyncio
async def test_store_failure_is_wrapped(repo: TransactionRepo, monkeypatch):
    async def raise_error(query, vars=None):
        raise RuntimeError("connection reset")

    monkeypatch.setattr(repo.db, "query", raise_error)
    with pytest.raises(StoreUnavailable):
        await repo.list(PageRequest(page=1, limit=10))
