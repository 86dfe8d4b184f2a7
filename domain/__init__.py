"""
Domain layer - TheMealDB payload schemas, public recipe schemas, and mappers.
"""

from domain import schemas, mappers

__all__ = ["schemas", "mappers"]
