"""Kernel time."""
from orderpay.kernel.time.clock import Clock, FrozenClock, SystemClock, iso_timestamp

__all__ = ["Clock", "FrozenClock", "SystemClock", "iso_timestamp"]
