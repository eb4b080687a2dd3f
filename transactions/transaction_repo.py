from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

from surrealdb import AsyncSurreal

from db.errors import NotFound, StoreUnavailable
from db.records import normalize_record, rows, to_iso
from transactions.pagination import PageRequest, has_more
from transactions.transaction_model import Transaction, TransactionCreate, TransactionUpdate


logger = logging.getLogger(__name__)

TABLE = "transaction"

COUNT_QUERY = f"SELECT count() AS total FROM {TABLE} GROUP ALL;"
LIST_ALL_QUERY = f"SELECT * FROM {TABLE} ORDER BY date DESC, id DESC;"
LIST_PAGE_QUERY = f"SELECT * FROM {TABLE} ORDER BY date DESC, id DESC LIMIT $limit START $start;"
UPDATE_QUERY = f"UPDATE {TABLE} MERGE $fields WHERE id = type::thing('{TABLE}', $id) RETURN AFTER;"
DELETE_QUERY = f"DELETE {TABLE} WHERE id = type::thing('{TABLE}', $id) RETURN BEFORE;"


class TransactionRepo:
    def __init__(self, db: AsyncSurreal):
        self.db = db

    async def insert(self, body: TransactionCreate) -> Transaction:
        payload = self._to_document(body.model_dump())
        try:
            record = await self.db.create(TABLE, payload)
        except Exception as exc:
            logger.exception("Error inserting transaction: %s", exc)
            raise StoreUnavailable("Error inserting transaction") from exc
        if isinstance(record, list):
            record = record[0]
        created = self._to_model(record)
        logger.info("Inserted transaction %s", created.id)
        return created

    async def list(self, request: PageRequest) -> Tuple[List[Transaction], bool, int]:
        """Return ``(transactions, has_more, total)`` newest first."""
        try:
            if request.fetch_all:
                records = rows(await self.db.query(LIST_ALL_QUERY))
                total = len(records)
            else:
                records = rows(await self.db.query(LIST_PAGE_QUERY, {"limit": request.limit, "start": request.offset}))
                counted = rows(await self.db.query(COUNT_QUERY))
                total = int(counted[0]["total"]) if counted else 0
        except Exception as exc:
            logger.exception("Error listing transactions (page=%s, limit=%s): %s", request.page, request.limit, exc)
            raise StoreUnavailable("Error listing transactions") from exc
        return [self._to_model(r) for r in records], has_more(request, total), total

    async def list_all(self) -> List[Transaction]:
        transactions, _, _ = await self.list(PageRequest())
        return transactions

    async def update(self, transaction_id: str, body: TransactionUpdate) -> Transaction:
        fields = self._to_document(body.model_dump())
        try:
            updated = rows(await self.db.query(UPDATE_QUERY, {"id": transaction_id, "fields": fields}))
        except Exception as exc:
            logger.exception("Error updating transaction %s: %s", transaction_id, exc)
            raise StoreUnavailable("Error updating transaction") from exc
        if not updated:
            raise NotFound("Transaction", transaction_id)
        logger.info("Updated transaction %s", transaction_id)
        return self._to_model(updated[0])

    async def delete(self, transaction_id: str) -> None:
        try:
            deleted = rows(await self.db.query(DELETE_QUERY, {"id": transaction_id}))
        except Exception as exc:
            logger.exception("Error deleting transaction %s: %s", transaction_id, exc)
            raise StoreUnavailable("Error deleting transaction") from exc
        if not deleted:
            raise NotFound("Transaction", transaction_id)
        logger.info("Deleted transaction %s", transaction_id)

    def _to_document(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        return {**fields, "date": to_iso(fields["date"])}

    def _to_model(self, record: Dict[str, Any]) -> Transaction:
        return Transaction(**normalize_record(record))
