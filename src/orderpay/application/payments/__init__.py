"""Payments – payment record, commands, recorder, gateway client and services."""
from orderpay.application.payments.commands import (
    GetOrderPaymentCommand,
    IncomingListOrderPaymentsRequest,
    ListOrderPaymentsCommand,
    RecordOrderPaymentCommand,
    SubmitOrderPaymentCommand,
)
from orderpay.application.payments.events import (
    IncomingOrderStockAllocatedEvent,
    OrderPaymentAcceptedEvent,
    OrderPaymentRejectedEvent,
)
from orderpay.application.payments.gateway import (
    GatewayRequest,
    GatewayResponse,
    GatewayStatus,
    PaymentGateway,
    SubmitOrderPaymentClient,
    SubmittedPayment,
)
from orderpay.application.payments.model import (
    PAYMENT_FIELDS,
    NewOrderPaymentFields,
    OrderPaymentData,
    PaymentStatus,
    missing_payment_id,
    payment_key,
)
from orderpay.application.payments.recorder import OrderPaymentRecorder
from orderpay.application.payments.services import ListOrderPaymentsService, ProcessOrderPaymentService
from orderpay.application.payments.worker import ProcessOrderPaymentWorker

__all__ = [
    "GatewayRequest",
    "GatewayResponse",
    "GatewayStatus",
    "GetOrderPaymentCommand",
    "IncomingListOrderPaymentsRequest",
    "IncomingOrderStockAllocatedEvent",
    "ListOrderPaymentsCommand",
    "ListOrderPaymentsService",
    "NewOrderPaymentFields",
    "OrderPaymentAcceptedEvent",
    "OrderPaymentData",
    "OrderPaymentRecorder",
    "OrderPaymentRejectedEvent",
    "PAYMENT_FIELDS",
    "PaymentGateway",
    "PaymentStatus",
    "ProcessOrderPaymentService",
    "ProcessOrderPaymentWorker",
    "RecordOrderPaymentCommand",
    "SubmitOrderPaymentClient",
    "SubmitOrderPaymentCommand",
    "SubmittedPayment",
    "missing_payment_id",
    "payment_key",
]
