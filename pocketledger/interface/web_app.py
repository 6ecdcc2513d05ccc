"""Mini README: FastAPI application serving the transaction API.

Structure:
    * TransactionPayload - request schema; every field optional so missing
      values are reported by the gateway with its fixed message.
    * create_application - application factory wiring routes, CORS and the
      error handlers for ``ValidationError`` (400) and ``StoreError`` (500).

Routes:
    GET    /                          plain-text liveness string
    GET    /api/health                store connectivity and settings presence
    GET    /api/transactions          every transaction, newest date first
    POST   /api/transactions          create one transaction
    DELETE /api/transactions/{id}     delete by identifier (204 either way)
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, ConfigDict

from ..configuration import TrackerSettings, get_settings
from ..errors import StoreError, ValidationError
from ..gateway import TransactionGateway
from ..logging_utils import configure_root_logger, get_logger, level_for_environment
from ..store import TransactionStore, build_store

LOGGER = get_logger(__name__)

LIVENESS_MESSAGE = "Pocket Ledger API is running"


class TransactionPayload(BaseModel):
    """Body accepted by ``POST /api/transactions``."""

    model_config = ConfigDict(extra="ignore")

    type: Optional[Any] = None
    amount: Optional[Any] = None
    description: Optional[Any] = None
    date: Optional[Any] = None


def _payload_fields(body: Any) -> Dict[str, Any]:
    """Read the known fields from an arbitrary JSON body."""

    if not isinstance(body, dict):
        return {}
    return TransactionPayload.model_validate(body).model_dump()


def create_application(
    settings: Optional[TrackerSettings] = None,
    store: Optional[TransactionStore] = None,
) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = settings or get_settings()
    configure_root_logger(level_for_environment(settings.environment))
    for missing in settings.missing_store_settings():
        LOGGER.warning("Store setting '%s' is not configured", missing)

    store = store or build_store(settings)
    gateway = TransactionGateway(store, settings)

    app = FastAPI(title="Pocket Ledger", version="1.0.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.gateway = gateway

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, error: ValidationError) -> JSONResponse:
        return JSONResponse({"error": error.message}, status_code=400)

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, error: StoreError) -> JSONResponse:
        LOGGER.error("%s %s failed: %s", request.method, request.url.path, error.message)
        return JSONResponse({"error": error.message}, status_code=500)

    @app.get("/", response_class=PlainTextResponse)
    def liveness() -> str:
        return LIVENESS_MESSAGE

    @app.get("/api/health")
    def health() -> JSONResponse:
        """Report store connectivity without exposing configuration values."""

        report = gateway.health_check()
        status_code = 200 if report.store_connected else 500
        return JSONResponse(report.as_dict(), status_code=status_code)

    @app.get("/api/transactions")
    def list_transactions() -> List[Dict[str, Any]]:
        transactions = gateway.list_transactions()
        LOGGER.debug("Returning %s transactions", len(transactions))
        return transactions

    @app.post("/api/transactions", status_code=201)
    async def create_transaction(request: Request) -> Dict[str, Any]:
        """Validate and insert one transaction; malformed bodies count as empty."""

        try:
            body = await request.json()
        except ValueError:
            body = None
        fields = _payload_fields(body)
        created = await run_in_threadpool(gateway.create_transaction, fields)
        LOGGER.info("Created transaction %s", created.get("id"))
        return created

    @app.delete("/api/transactions/{transaction_id}", status_code=204)
    def delete_transaction(transaction_id: str) -> Response:
        gateway.delete_transaction(transaction_id)
        return Response(status_code=204)

    return app
