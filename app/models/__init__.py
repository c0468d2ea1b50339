"""MongoDB document builders.

Documents are plain dicts; each module builds new documents for one
collection and implements the in-memory mutations applied before a write.
"""

from app.models import post, profile, user

__all__ = ["post", "profile", "user"]
