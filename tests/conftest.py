import uuid
from typing import Any, Dict, List

import httpx
import pytest_asyncio

from budgets import budget_repo
from transactions import transaction_repo


# --- Test utilities: Fake in-memory SurrealDB ---
class FakeAsyncSurreal:
    """Understands exactly the statements the repos issue."""

    def __init__(self) -> None:
        self._tables: Dict[str, Dict[str, Dict[str, Any]]] = {
            transaction_repo.TABLE: {},
            budget_repo.TABLE: {},
        }

    def _table(self, name: str) -> Dict[str, Dict[str, Any]]:
        return self._tables.setdefault(name, {})

    def _newest_first(self) -> List[Dict[str, Any]]:
        records = self._table(transaction_repo.TABLE).values()
        return [
            {**r}
            for r in sorted(records, key=lambda r: (r["date"], r["id"]), reverse=True)
        ]

    async def create(self, table: str, payload: dict):
        key = uuid.uuid4().hex
        # Simulate SurrealDB id like "transaction:<key>"
        record = {**payload, "id": f"{table}:{key}"}
        self._table(table)[key] = record
        return {**record}

    async def query(self, query: str, vars: dict | None = None):
        vars = vars or {}
        q = query.strip()
        transactions = self._table(transaction_repo.TABLE)
        budgets = self._table(budget_repo.TABLE)

        if q == transaction_repo.COUNT_QUERY:
            return [{"total": len(transactions)}] if transactions else []

        if q == transaction_repo.LIST_ALL_QUERY:
            return self._newest_first()

        if q == transaction_repo.LIST_PAGE_QUERY:
            start, limit = vars["start"], vars["limit"]
            return self._newest_first()[start:start + limit]

        if q == transaction_repo.UPDATE_QUERY:
            current = transactions.get(vars["id"])
            if current is None:
                return []
            current.update(vars["fields"])
            return [{**current}]

        if q == transaction_repo.DELETE_QUERY:
            removed = transactions.pop(vars["id"], None)
            return [removed] if removed else []

        if q == budget_repo.UPSERT_QUERY:
            for rec in budgets.values():
                if rec["category"] == vars["category"]:
                    rec["amount"] = vars["amount"]
                    return [{**rec}]
            key = uuid.uuid4().hex
            rec = {"id": f"{budget_repo.TABLE}:{key}", "category": vars["category"], "amount": vars["amount"]}
            budgets[key] = rec
            return [{**rec}]

        if q == budget_repo.LIST_QUERY:
            return [{**r} for r in budgets.values()]

        raise AssertionError(f"FakeAsyncSurreal got an unexpected query: {query}")

    def count(self, table: str) -> int:
        return len(self._table(table))


@pytest_asyncio.fixture
async def fake_db():
    # Provide a fresh fake DB per test function
    db = FakeAsyncSurreal()
    yield db


@pytest_asyncio.fixture
async def client(fake_db):
    from main import app
    from settings.db import get_db

    async def override_get_db():
        return fake_db

    app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
