"""Model exports.

Import from here: `from src.app.models import Issue`
"""

from src.app.models.issue import Issue

__all__ = [
    "Issue",
]
