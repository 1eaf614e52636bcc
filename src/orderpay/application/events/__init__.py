"""Application events – event model and idempotent recorder."""
from orderpay.application.events.model import Event, EventName, OrderEventData
from orderpay.application.events.recorder import EventRecorder, event_key

__all__ = ["Event", "EventName", "EventRecorder", "OrderEventData", "event_key"]
