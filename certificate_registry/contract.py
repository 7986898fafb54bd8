# certificate_registry/contract.py

import logging
from dataclasses import dataclass, field
from typing import Optional

from . import allocator
from .errors import Err, ErrorCode, Ok, Result
from .guards import require_admin, require_owner
from .store import Certificate, CertificateStore, check_metadata

logger = logging.getLogger(__name__)


@dataclass
class RegistryState:
    """Everything the registry persists: certificates, the id counter and the admin."""

    admin: str
    next_id: int = 0
    store: CertificateStore = field(default_factory=CertificateStore)


class CertificateRegistry:
    """
    Registry of non-fungible certificates.
    The admin mints certificates for recipients; holders may transfer the ones they own.
    Every mutating call takes the authenticated caller explicitly and returns an
    Ok/Err result. All checks run before any write, so a failed call changes nothing.
    """

    def __init__(self, admin: str) -> None:
        self.state = RegistryState(admin=admin)

    def mint(self, caller: str, recipient: str, course: str, grade: str) -> Result:
        """
        Mints a new certificate owned by `recipient`.
        Args:
            caller: The identity invoking the call. Must be the current admin.
            recipient: The identity that will own the certificate.
            course: Course name. Non-empty ASCII, at most COURSE_MAX_LENGTH characters.
            grade: Grade awarded. ASCII, at most GRADE_MAX_LENGTH characters, may be empty.
        Returns:
            Ok(id) with the newly assigned id, or Err(NOT_ADMIN), Err(INVALID_COURSE) or Err(INVALID_GRADE).
        """
        denied = require_admin(caller, self.state)
        if denied is not None:
            logger.warning(f"Rejected mint by {caller}: {denied.name}")
            return denied

        invalid = check_metadata(course, grade)
        if invalid is not None:
            logger.warning(f"Rejected mint for {recipient}: {invalid.name}")
            return invalid

        cert_id = allocator.allocate(self.state)
        inserted = self.state.store.insert(cert_id, course, grade, recipient)
        if not inserted.is_ok:
            logger.error(f"Certificate id {cert_id} already present; counter out of sync")
            return inserted
        allocator.advance(self.state)

        logger.info(f"Minted certificate {cert_id} ({course!r}, {grade!r}) for {recipient}")
        return Ok(cert_id)

    def transfer(self, caller: str, sender: str, recipient: str, cert_id: int) -> Result:
        """
        Moves certificate `cert_id` from `sender` to `recipient`.
        The caller must be the sender, and the sender must be the current owner.
        """
        owner = self.state.store.get_owner(cert_id)
        if owner is None:
            logger.warning(f"Rejected transfer of {cert_id}: {ErrorCode.NOT_FOUND.name}")
            return Err(ErrorCode.NOT_FOUND)

        denied = require_owner(caller, sender) or require_owner(sender, owner)
        if denied is not None:
            logger.warning(f"Rejected transfer of {cert_id} by {caller}: {denied.name}")
            return denied

        updated = self.state.store.set_owner(cert_id, recipient)
        if not updated.is_ok:
            return updated

        logger.info(f"Transferred certificate {cert_id} from {sender} to {recipient}")
        return Ok(True)

    def set_admin(self, caller: str, new_admin: str) -> Result:
        denied = require_admin(caller, self.state)
        if denied is not None:
            logger.warning(f"Rejected admin change by {caller}: {denied.name}")
            return denied

        previous = self.state.admin
        self.state.admin = new_admin
        logger.info(f"Admin changed from {previous} to {new_admin}")
        return Ok(True)

    # Read-only queries. Unknown ids give None, never an error.

    def get_certificate(self, cert_id: int) -> Optional[Certificate]:
        return self.state.store.get(cert_id)

    def get_owner(self, cert_id: int) -> Optional[str]:
        return self.state.store.get_owner(cert_id)

    def get_admin(self) -> str:
        return self.state.admin

    def total_certificates(self) -> int:
        return self.state.next_id

    def get_last_token_id(self) -> Optional[int]:
        """Id of the most recently minted certificate, or None before the first mint."""
        if self.state.next_id == 0:
            return None
        return self.state.next_id - 1
