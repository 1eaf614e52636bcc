"""FastAPI adapter – orders and payments API routers.

Route signatures are resolved by FastAPI at import time, so this module
keeps real (non-deferred) annotations.
"""
import json
from typing import TYPE_CHECKING, Any, Awaitable, Callable

from orderpay.kernel.errors import FailureKind
from orderpay.kernel.types import Outcome, is_failure_of_kind
from orderpay.observability.logging import get_logger

if TYPE_CHECKING:
    from orderpay.application.orders import ListOrdersService, PlaceOrderService
    from orderpay.application.payments import ListOrderPaymentsService

_log = get_logger(__name__)

BAD_REQUEST_BODY = {"message": "Bad Request"}
INTERNAL_SERVER_ERROR_BODY = {"message": "Internal Server Error"}


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'orderpay[fastapi]' to use the FastAPI adapter"
        ) from exc


RequestHandler = Callable[[Any], Awaitable[Outcome[Any]]]


async def _read_json(request: Any) -> Any:
    raw = await request.body()
    return json.loads(raw or b"null")


async def _respond(
    request: Any,
    build: Callable[[Any], Outcome[Any]],
    handle: RequestHandler,
    *,
    success_status: int,
    route: str,
) -> Any:
    """Parse, validate and handle one request; map the outcome onto a status code.

    ``InvalidArgumentsError`` (including an unparsable body) is a 400, any
    other failure is a 500.
    """
    from fastapi.responses import JSONResponse  # type: ignore[import-untyped]

    try:
        body = await _read_json(request)
    except ValueError as exc:
        _log.warning("api.bad_request", route=route, error=str(exc))
        return JSONResponse(status_code=400, content=BAD_REQUEST_BODY)

    built = build(body)
    result = built if built.is_failure() else await handle(built.value)

    if result.is_success():
        _log.info("api.success", route=route)
        return JSONResponse(status_code=success_status, content=result.value)
    if is_failure_of_kind(result, FailureKind.INVALID_ARGUMENTS):
        _log.warning("api.bad_request", route=route, outcome=result)
        return JSONResponse(status_code=400, content=BAD_REQUEST_BODY)
    _log.error("api.failure", route=route, outcome=result)
    return JSONResponse(status_code=500, content=INTERNAL_SERVER_ERROR_BODY)


def OrdersRouter(
    place_order_service: "PlaceOrderService",
    list_orders_service: "ListOrdersService",
    path: str = "/orders",
    tags: list[str] | None = None,
) -> Any:
    """Return the orders router.

    ``POST {path}`` places an order (202 Accepted with the order data);
    ``POST {path}/list`` lists orders (200 with ``{"orders": [...]}``).
    """
    _require_fastapi()
    from fastapi import APIRouter, Request  # type: ignore[import-untyped]

    from orderpay.application.orders import IncomingListOrdersRequest, IncomingPlaceOrderRequest

    router = APIRouter(tags=tags or ["orders"])

    @router.post(path)
    async def place_order(request: Request) -> Any:
        return await _respond(
            request,
            IncomingPlaceOrderRequest.validate_and_build,
            place_order_service.place_order,
            success_status=202,
            route="place_order",
        )

    @router.post(f"{path}/list")
    async def list_orders(request: Request) -> Any:
        return await _respond(
            request,
            IncomingListOrdersRequest.validate_and_build,
            list_orders_service.list_orders,
            success_status=200,
            route="list_orders",
        )

    return router


def PaymentsRouter(
    list_order_payments_service: "ListOrderPaymentsService",
    path: str = "/payments",
    tags: list[str] | None = None,
) -> Any:
    """Return the payments router: ``POST {path}/list`` → ``{"orderPayments": [...]}``."""
    _require_fastapi()
    from fastapi import APIRouter, Request  # type: ignore[import-untyped]

    from orderpay.application.payments import IncomingListOrderPaymentsRequest

    router = APIRouter(tags=tags or ["payments"])

    @router.post(f"{path}/list")
    async def list_order_payments(request: Request) -> Any:
        return await _respond(
            request,
            IncomingListOrderPaymentsRequest.validate_and_build,
            list_order_payments_service.list_order_payments,
            success_status=200,
            route="list_order_payments",
        )

    return router


__all__ = ["OrdersRouter", "PaymentsRouter"]
