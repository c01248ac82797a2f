"""GraphQL Context - per-request registrar handle and authenticated user.

Invariants:
    - The bearer token is read from the Authorization header once per request
    - A missing, malformed, or expired token yields current_user=None (never an error)
    - The Registrar comes from app.state; no module-level state
"""

from fastapi import Request
from strawberry.fastapi import BaseContext

from campus.models.credential import CurrentUser
from campus.services.registrar import Registrar


class CampusContext(BaseContext):
    """Context object handed to every resolver as info.context."""

    def __init__(self, registrar: Registrar, current_user: CurrentUser | None):
        super().__init__()
        self.registrar = registrar
        self.current_user = current_user


async def get_context(request: Request) -> CampusContext:
    registrar: Registrar = request.app.state.registrar
    current_user = registrar.current_user(request.headers.get("Authorization"))
    return CampusContext(registrar, current_user)
