"""User document."""

from typing import Any, Dict

from app.utils.helpers import gravatar_url, utcnow

# Never sent back to clients
PRIVATE_FIELDS = ("password",)

# Projection used whenever a user is loaded on behalf of a request
PUBLIC_PROJECTION = {field: 0 for field in PRIVATE_FIELDS}


def new_user(name: str, email: str, password_hash: str) -> Dict[str, Any]:
    """Build a user document ready for insertion."""
    return {
        "name": name,
        "email": email,
        "avatar": gravatar_url(email),
        "password": password_hash,
        "date": utcnow(),
    }
