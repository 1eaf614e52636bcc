"""DynamoDB adapter – document store over aiobotocore."""
from orderpay.adapters.dynamodb.store import DynamoDbConfig, DynamoDbDocumentStore

__all__ = ["DynamoDbConfig", "DynamoDbDocumentStore"]
