"""Database infrastructure: async engines, request sessions and the ORM base."""
