"""Dependency injection for IAM bounded context.

Composes infrastructure resources (database sessions, audit ingestion,
settings) with IAM-specific components (repositories, services) and the
request authentication pipeline.
"""
