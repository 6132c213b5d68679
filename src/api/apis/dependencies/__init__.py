"""Dependency injection for APIs bounded context."""
