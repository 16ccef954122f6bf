"""sqlbrick configuration models."""
from sqlbrick.schema.profile import BuilderProfile

__all__ = ["BuilderProfile"]
