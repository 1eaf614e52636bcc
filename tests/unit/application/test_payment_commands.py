"""Unit tests for the payment command objects."""

from __future__ import annotations

from typing import Any

import pytest

from orderpay.application.payments import (
    GetOrderPaymentCommand,
    NewOrderPaymentFields,
    OrderPaymentData,
    PaymentStatus,
    RecordOrderPaymentCommand,
    SubmitOrderPaymentCommand,
)
from orderpay.kernel.errors import FailureKind

NOW = "2026-01-01T12:00:00.000Z"
EARLIER = "2025-12-31T08:00:00.000Z"


def _existing(order_data: dict[str, Any], status: str, retries: int, payment_id: str = "PAY001") -> dict[str, Any]:
    return {
        **order_data,
        "createdAt": EARLIER,
        "updatedAt": EARLIER,
        "paymentId": payment_id,
        "paymentStatus": status,
        "paymentRetries": retries,
    }


def _new_fields(order_data: dict[str, Any], status: str, payment_id: str | None = "PAY002") -> dict[str, Any]:
    fields = {**order_data, "paymentStatus": status}
    if payment_id is not None:
        fields["paymentId"] = payment_id
    return fields


# ---------------------------------------------------------------------------
# GetOrderPaymentCommand
# ---------------------------------------------------------------------------


class TestGetOrderPaymentCommand:
    def test_valid(self) -> None:
        result = GetOrderPaymentCommand.validate_and_build({"orderId": "ORDER0001"})
        assert result.is_success()
        assert result.value.command_data.order_id == "ORDER0001"
        assert result.value.options == {}

    @pytest.mark.parametrize("command_input", [None, {}, {"orderId": ""}, {"orderId": None}, {"orderId": 1234}])
    def test_invalid(self, command_input: Any) -> None:
        result = GetOrderPaymentCommand.validate_and_build(command_input)
        assert result.is_failure()
        assert result.kind is FailureKind.INVALID_ARGUMENTS
        assert result.transient is False


# ---------------------------------------------------------------------------
# SubmitOrderPaymentCommand
# ---------------------------------------------------------------------------


class TestSubmitOrderPaymentCommand:
    def test_valid_without_existing_status(self, order_data: dict[str, Any]) -> None:
        result = SubmitOrderPaymentCommand.validate_and_build(order_data)
        assert result.is_success()
        assert result.value.command_data.dump() == order_data

    def test_failed_existing_status_is_allowed(self, order_data: dict[str, Any]) -> None:
        result = SubmitOrderPaymentCommand.validate_and_build({**order_data, "existingPaymentStatus": "PAYMENT_FAILED"})
        assert result.is_success()

    @pytest.mark.parametrize(
        ("status", "kind"),
        [
            ("PAYMENT_ACCEPTED", FailureKind.PAYMENT_ALREADY_ACCEPTED),
            ("PAYMENT_REJECTED", FailureKind.PAYMENT_ALREADY_REJECTED),
        ],
    )
    def test_terminal_existing_status_fails(self, order_data: dict[str, Any], status: str, kind: FailureKind) -> None:
        result = SubmitOrderPaymentCommand.validate_and_build({**order_data, "existingPaymentStatus": status})
        assert result.is_failure()
        assert result.kind is kind
        assert result.transient is False

    def test_unknown_existing_status_is_invalid(self, order_data: dict[str, Any]) -> None:
        result = SubmitOrderPaymentCommand.validate_and_build({**order_data, "existingPaymentStatus": "PAID"})
        assert result.is_failure()
        assert result.kind is FailureKind.INVALID_ARGUMENTS


# ---------------------------------------------------------------------------
# RecordOrderPaymentCommand
# ---------------------------------------------------------------------------


class TestRecordOrderPaymentCommand:
    def test_fresh_record(self, order_data: dict[str, Any], clock: Any) -> None:
        result = RecordOrderPaymentCommand.validate_and_build(
            {"newOrderPaymentFields": _new_fields(order_data, "PAYMENT_ACCEPTED")}, clock=clock
        )
        assert result.is_success()
        assert result.value.command_data.dump() == {
            **order_data,
            "createdAt": NOW,
            "updatedAt": NOW,
            "paymentId": "PAY002",
            "paymentStatus": "PAYMENT_ACCEPTED",
            "paymentRetries": 0,
        }

    def test_missing_payment_id_gets_sentinel(self, order_data: dict[str, Any], clock: Any) -> None:
        result = RecordOrderPaymentCommand.validate_and_build(
            {"newOrderPaymentFields": _new_fields(order_data, "PAYMENT_FAILED", payment_id=None)}, clock=clock
        )
        assert result.value.command_data.payment_id == "ERROR:ORDER_ID:ORDER0001"

    def test_none_existing_counts_as_absent(self, order_data: dict[str, Any], clock: Any) -> None:
        result = RecordOrderPaymentCommand.validate_and_build(
            {
                "existingOrderPaymentData": None,
                "newOrderPaymentFields": _new_fields(order_data, "PAYMENT_FAILED"),
            },
            clock=clock,
        )
        assert result.value.command_data.payment_retries == 0

    def test_retry_increments_and_keeps_created_at(self, order_data: dict[str, Any], clock: Any) -> None:
        result = RecordOrderPaymentCommand.validate_and_build(
            {
                "existingOrderPaymentData": _existing(order_data, "PAYMENT_FAILED", 2),
                "newOrderPaymentFields": _new_fields(order_data, "PAYMENT_ACCEPTED"),
            },
            clock=clock,
        )
        data = result.value.command_data
        assert data.payment_retries == 3
        assert data.created_at == EARLIER
        assert data.updated_at == NOW
        assert data.payment_status is PaymentStatus.PAYMENT_ACCEPTED
        assert data.payment_id == "PAY002"

    @pytest.mark.parametrize(
        ("status", "kind"),
        [
            ("PAYMENT_ACCEPTED", FailureKind.PAYMENT_ALREADY_ACCEPTED),
            ("PAYMENT_REJECTED", FailureKind.PAYMENT_ALREADY_REJECTED),
        ],
    )
    def test_terminal_existing_fails(self, order_data: dict[str, Any], status: str, kind: FailureKind) -> None:
        result = RecordOrderPaymentCommand.validate_and_build(
            {
                "existingOrderPaymentData": _existing(order_data, status, 0),
                "newOrderPaymentFields": _new_fields(order_data, "PAYMENT_FAILED"),
            }
        )
        assert result.is_failure()
        assert result.kind is kind
        assert result.transient is False

    def test_mismatched_order_ids_are_invalid(self, order_data: dict[str, Any]) -> None:
        result = RecordOrderPaymentCommand.validate_and_build(
            {
                "existingOrderPaymentData": _existing({**order_data, "orderId": "ORDER0002"}, "PAYMENT_FAILED", 1),
                "newOrderPaymentFields": _new_fields(order_data, "PAYMENT_ACCEPTED"),
            }
        )
        assert result.is_failure()
        assert result.kind is FailureKind.INVALID_ARGUMENTS

    @pytest.mark.parametrize(
        "command_input",
        [
            None,
            {},
            {"newOrderPaymentFields": None},
            {"newOrderPaymentFields": {"orderId": "ORDER0001", "paymentStatus": "PAYMENT_ACCEPTED"}},
        ],
    )
    def test_invalid_input(self, command_input: Any) -> None:
        result = RecordOrderPaymentCommand.validate_and_build(command_input)
        assert result.is_failure()
        assert result.kind is FailureKind.INVALID_ARGUMENTS
        assert result.transient is False

    def test_corrupt_existing_record_is_invalid(self, order_data: dict[str, Any]) -> None:
        corrupt = _existing(order_data, "PAYMENT_FAILED", -1)
        result = RecordOrderPaymentCommand.validate_and_build(
            {"existingOrderPaymentData": corrupt, "newOrderPaymentFields": _new_fields(order_data, "PAYMENT_FAILED")}
        )
        assert result.kind is FailureKind.INVALID_ARGUMENTS

    def test_compute_next_record_directly(self, order_data: dict[str, Any]) -> None:
        existing = OrderPaymentData.model_validate(_existing(order_data, "PAYMENT_FAILED", 0))
        new_fields = NewOrderPaymentFields.model_validate(_new_fields(order_data, "PAYMENT_FAILED", payment_id=None))
        result = RecordOrderPaymentCommand.compute_next_record(existing, new_fields, now=NOW)
        assert result.value.payment_retries == 1
        assert result.value.payment_id == "ERROR:ORDER_ID:ORDER0001"
