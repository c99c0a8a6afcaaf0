"""SQLAlchemy declarative base and model imports for Alembic."""
from app.db.session import Base

# Import all models so Alembic can see them
from app.models.course import Course  # noqa: F401
from app.models.user import User  # noqa: F401

__all__ = ["Base", "User", "Course"]
