from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base class for failures raised by the SurrealDB-backed stores."""


class NotFound(StoreError):
    """No record matched the id of an update or delete."""

    def __init__(self, resource: str, record_id: str) -> None:
        super().__init__(f"{resource} {record_id} not found")
        self.resource = resource
        self.record_id = record_id


class StoreUnavailable(StoreError):
    """Connection, transport or query failure in the backing store."""


class ValidationFailure(StoreError):
    """A request the stores refuse to run, e.g. a negative page size."""


async def _not_found_handler(request: Request, exc: NotFound) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": f"{exc.resource} not found"},
    )


async def _validation_handler(request: Request, exc: ValidationFailure) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"error": str(exc)},
    )


async def _store_unavailable_handler(request: Request, exc: StoreError) -> JSONResponse:
    # Underlying driver errors are logged by the repo that raised them
    logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Unable to connect to database"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotFound, _not_found_handler)
    app.add_exception_handler(ValidationFailure, _validation_handler)
    app.add_exception_handler(StoreError, _store_unavailable_handler)
