"""
Infrastructure layer - external service integrations.

- storage: Object storage clients (boto3 S3 and in-memory)

These wrappers translate SDK calls and errors into the core's
ObjectClient protocol and StorageError.
"""
