"""User data lookup service for AWS Lambda behind API Gateway."""
