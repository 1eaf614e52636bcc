"""FastAPI adapter – orders and payments routers."""
from orderpay.adapters.fastapi.routers import OrdersRouter, PaymentsRouter

__all__ = ["OrdersRouter", "PaymentsRouter"]
