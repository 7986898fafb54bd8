# certificate_registry/allocator.py

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .contract import RegistryState


def allocate(state: "RegistryState") -> int:
    """Returns the id the next minted certificate will receive."""
    return state.next_id


def advance(state: "RegistryState") -> None:
    # Only called once the new certificate has been stored.
    state.next_id += 1
