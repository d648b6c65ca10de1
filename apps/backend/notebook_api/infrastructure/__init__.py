"""
Infrastructure layer: adapters for AWS (Cognito, Verified Permissions,
DynamoDB) and their in-memory counterparts for tests and local dev.
"""
