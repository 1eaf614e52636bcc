"""Batch – queue batch consumer."""
from orderpay.application.batch.consumer import BatchConsumer, BatchItemFailure, BatchResponse, RecordHandler

__all__ = ["BatchConsumer", "BatchItemFailure", "BatchResponse", "RecordHandler"]
