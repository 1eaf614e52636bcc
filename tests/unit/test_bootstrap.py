"""Unit tests for component wiring."""

from __future__ import annotations

import asyncio
from typing import Any, Callable

from orderpay.application.payments import GatewayStatus
from orderpay.bootstrap import Components, build_components, load_settings
from orderpay.config.settings import ServiceSettings
from orderpay.testing.fakes import InMemoryDocumentStore, ScriptedPaymentGateway


class TestLoadSettings:
    def test_overrides(self, monkeypatch: Any) -> None:
        monkeypatch.setenv("ORDERPAY_ORDERS_TABLE_NAME", "orders-env")
        settings = load_settings(max_payment_retries=1)
        assert settings.orders_table_name == "orders-env"
        assert settings.max_payment_retries == 1


class TestBuildComponents:
    def test_table_names_flow_from_settings(
        self,
        clock: Any,
        stock_allocated_envelope: Callable[..., dict[str, Any]],
        sqs_record: Callable[[str, Any], dict[str, Any]],
    ) -> None:
        settings = ServiceSettings(payments_table_name="pay-t", event_store_table_name="events-t")
        store = InMemoryDocumentStore()
        components = build_components(
            settings, store, gateway=ScriptedPaymentGateway(GatewayStatus.SDK_PAYMENT_ACCEPTED), clock=clock
        )
        assert isinstance(components, Components)

        batch = {"Records": [sqs_record("m1", stock_allocated_envelope())]}
        response = asyncio.run(components.process_order_payment_worker.process_order_payments(batch))
        assert response.batch_item_failures == []
        assert len(store.items("pay-t")) == 1
        assert len(store.items("events-t")) == 1

    def test_retry_cap_flows_from_settings(
        self, clock: Any, order_data: dict[str, Any], stock_allocated_envelope: Callable[..., dict[str, Any]]
    ) -> None:
        from orderpay.application.payments import IncomingOrderStockAllocatedEvent, payment_key

        store = InMemoryDocumentStore()
        store.seed(
            "payments",
            {
                **payment_key("ORDER0001"),
                **order_data,
                "createdAt": "2025-12-31T08:00:00.000Z",
                "updatedAt": "2025-12-31T08:00:00.000Z",
                "paymentId": "PAY001",
                "paymentStatus": "PAYMENT_FAILED",
                "paymentRetries": 1,
            },
        )
        gateway = ScriptedPaymentGateway(GatewayStatus.SDK_PAYMENT_ACCEPTED)
        components = build_components(ServiceSettings(max_payment_retries=1), store, gateway=gateway, clock=clock)
        event = IncomingOrderStockAllocatedEvent.validate_and_build(stock_allocated_envelope()).value
        asyncio.run(components.process_order_payment_service.process_order_payment(event))
        assert gateway.requests == []
        assert store.items("payments")[0]["paymentStatus"] == "PAYMENT_REJECTED"

    def test_list_limits_flow_from_settings(self, clock: Any) -> None:
        from orderpay.application.orders import IncomingListOrdersRequest
        from orderpay.kernel.errors import FailureKind

        settings = ServiceSettings(default_list_limit=5, max_list_limit=20)
        components = build_components(settings, InMemoryDocumentStore(), clock=clock)
        request = IncomingListOrdersRequest.validate_and_build({"limit": 21}).value
        result = asyncio.run(components.list_orders_service.list_orders(request))
        assert result.kind is FailureKind.INVALID_ARGUMENTS
        request = IncomingListOrdersRequest.validate_and_build({"limit": 20}).value
        assert asyncio.run(components.list_orders_service.list_orders(request)).value == {"orders": []}
