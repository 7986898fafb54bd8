# certificate_registry/guards.py

from typing import TYPE_CHECKING, Optional

from .errors import Err, ErrorCode

if TYPE_CHECKING:
    from .contract import RegistryState


def require_admin(caller: str, state: "RegistryState") -> Optional[Err]:
    """Returns None if the caller is the current admin, otherwise a NOT_ADMIN failure."""
    if caller != state.admin:
        return Err(ErrorCode.NOT_ADMIN)
    return None


def require_owner(caller: str, owner: str) -> Optional[Err]:
    if caller != owner:
        return Err(ErrorCode.UNAUTHORIZED)
    return None
