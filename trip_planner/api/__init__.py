"""HTTP API for the trip planner."""
from .routes import router

__all__ = ["router"]
