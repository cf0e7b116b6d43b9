"""DTOs for the authenticated caller."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity resolved from a bearer token. Every row access is scoped to ``id``."""

    id: str
    email: str = ""
