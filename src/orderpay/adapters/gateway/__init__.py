"""Gateway adapter – simulated payment provider."""
from orderpay.adapters.gateway.simulated import SimulatedPaymentGateway, generate_payment_id

__all__ = ["SimulatedPaymentGateway", "generate_payment_id"]
