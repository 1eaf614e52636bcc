"""orderpay – idempotent order placement and payment processing.

Layers::

    kernel          Outcome model, errors, clock, document store port
    application     commands, recorders, services, batch consumer
    adapters        DynamoDB store, simulated gateway, FastAPI routers
    config          ServiceSettings and its loaders
    observability   structlog configuration
    testing         in-memory fakes
"""

__version__ = "0.1.0"
