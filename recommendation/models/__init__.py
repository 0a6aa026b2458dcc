# Export all recommendation models for easy imports
from .base import Base
from .career import RecCareer

__all__ = [
    "Base",
    "RecCareer",
]
