"""Testing fakes – in-memory implementations for tests."""
from orderpay.testing.fakes.clock import FakeClock
from orderpay.testing.fakes.gateway import ScriptedPaymentGateway
from orderpay.testing.fakes.store import InMemoryDocumentStore

__all__ = ["FakeClock", "InMemoryDocumentStore", "ScriptedPaymentGateway"]
