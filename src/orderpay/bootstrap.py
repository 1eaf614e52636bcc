"""Wiring – build every component from :class:`ServiceSettings`.

Components never read the environment themselves; this module is the only
place where settings are turned into constructor arguments.
"""
from __future__ import annotations

import dataclasses

from orderpay.adapters.gateway import SimulatedPaymentGateway
from orderpay.application.events import EventRecorder
from orderpay.application.listing import ItemLister
from orderpay.application.orders import ORDER_FIELDS, ListOrdersService, PlaceOrderService, order_key
from orderpay.application.payments import (
    PAYMENT_FIELDS,
    ListOrderPaymentsService,
    OrderPaymentRecorder,
    PaymentGateway,
    ProcessOrderPaymentService,
    ProcessOrderPaymentWorker,
    SubmitOrderPaymentClient,
    payment_key,
)
from orderpay.config.settings import DotenvSettingsLoader, EnvSettingsLoader, ServiceSettings, SettingsFactory
from orderpay.config.settings.loaders import SettingsLoader
from orderpay.kernel.store import DocumentStore
from orderpay.kernel.time import Clock


def load_settings(env_file: str | None = None, **overrides: object) -> ServiceSettings:
    """Load ``ORDERPAY_*`` settings from the environment (and *env_file* when given)."""
    loaders: list[SettingsLoader] = [DotenvSettingsLoader(env_file) if env_file else EnvSettingsLoader()]
    return SettingsFactory.create(ServiceSettings, loaders, dict(overrides) or None)


@dataclasses.dataclass(frozen=True)
class Components:
    settings: ServiceSettings
    event_recorder: EventRecorder
    payment_recorder: OrderPaymentRecorder
    place_order_service: PlaceOrderService
    list_orders_service: ListOrdersService
    list_order_payments_service: ListOrderPaymentsService
    process_order_payment_service: ProcessOrderPaymentService
    process_order_payment_worker: ProcessOrderPaymentWorker


def build_components(
    settings: ServiceSettings,
    store: DocumentStore,
    gateway: PaymentGateway | None = None,
    clock: Clock | None = None,
) -> Components:
    event_recorder = EventRecorder(store, settings.event_store_table_name)
    payment_recorder = OrderPaymentRecorder(store, settings.payments_table_name)

    orders_lister = ItemLister(
        store,
        settings.orders_table_name,
        key_for=order_key,
        index_name=settings.list_index_name,
        index_partition="ORDERS#ORDER",
        fields=ORDER_FIELDS,
        default_limit=settings.default_list_limit,
        max_limit=settings.max_list_limit,
    )
    payments_lister = ItemLister(
        store,
        settings.payments_table_name,
        key_for=payment_key,
        index_name=settings.list_index_name,
        index_partition="PAYMENTS#PAYMENT",
        fields=PAYMENT_FIELDS,
        default_limit=settings.default_list_limit,
        max_limit=settings.max_list_limit,
    )

    process_service = ProcessOrderPaymentService(
        payment_recorder,
        SubmitOrderPaymentClient(gateway or SimulatedPaymentGateway()),
        event_recorder,
        max_payment_retries=settings.max_payment_retries,
        clock=clock,
    )
    return Components(
        settings=settings,
        event_recorder=event_recorder,
        payment_recorder=payment_recorder,
        place_order_service=PlaceOrderService(event_recorder, clock=clock),
        list_orders_service=ListOrdersService(orders_lister),
        list_order_payments_service=ListOrderPaymentsService(payments_lister),
        process_order_payment_service=process_service,
        process_order_payment_worker=ProcessOrderPaymentWorker(process_service),
    )


def build_dynamodb_store(settings: ServiceSettings) -> DocumentStore:
    """Return the DynamoDB store configured from *settings* (requires 'dynamodb' extra at call time)."""
    from orderpay.adapters.dynamodb import DynamoDbConfig, DynamoDbDocumentStore

    return DynamoDbDocumentStore(
        DynamoDbConfig(region_name=settings.aws_region, endpoint_url=settings.dynamodb_endpoint_url)
    )


__all__ = ["Components", "build_components", "build_dynamodb_store", "load_settings"]
