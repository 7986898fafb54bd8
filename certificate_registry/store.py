# certificate_registry/store.py

from typing import Annotated, Dict, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from .errors import Err, ErrorCode, Ok, Result

COURSE_MAX_LENGTH = 128
GRADE_MAX_LENGTH = 32


def _check_ascii(value: str) -> str:
    if not value.isascii():
        raise ValueError("must be ASCII")
    return value


AsciiText = Annotated[str, AfterValidator(_check_ascii)]


def _is_bounded_ascii(value: str, max_length: int) -> bool:
    return isinstance(value, str) and len(value) <= max_length and value.isascii()


def check_metadata(course: str, grade: str) -> Optional[Err]:
    """
    Returns None if course and grade fit the stored format, otherwise the failure to report.
    Course must be non-empty; grade may be empty.
    """
    if not course or not _is_bounded_ascii(course, COURSE_MAX_LENGTH):
        return Err(ErrorCode.INVALID_COURSE)
    if not _is_bounded_ascii(grade, GRADE_MAX_LENGTH):
        return Err(ErrorCode.INVALID_GRADE)
    return None


class CertificateMetadata(BaseModel):
    """Course and grade written once at mint time."""

    model_config = ConfigDict(frozen=True)

    course: AsciiText = Field(min_length=1, max_length=COURSE_MAX_LENGTH)
    grade: AsciiText = Field(max_length=GRADE_MAX_LENGTH)


class Certificate(BaseModel):
    """
    Read view of a stored certificate.
    Built fresh on every lookup, so callers cannot mutate the store through it.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    course: str
    grade: str
    owner: str


class CertificateStore:
    """
    Holds certificate metadata and current ownership, keyed by id.
    Metadata and owners live in separate maps: only the owner map is ever rewritten.
    """

    def __init__(self) -> None:
        self._metadata: Dict[int, CertificateMetadata] = {}
        self._owners: Dict[int, str] = {}

    def __contains__(self, cert_id: int) -> bool:
        return cert_id in self._metadata

    def insert(self, cert_id: int, course: str, grade: str, owner: str) -> Result:
        if cert_id in self._metadata:
            return Err(ErrorCode.DUPLICATE_ID)
        self._metadata[cert_id] = CertificateMetadata(course=course, grade=grade)
        self._owners[cert_id] = owner
        return Ok(cert_id)

    def get(self, cert_id: int) -> Optional[Certificate]:
        metadata = self._metadata.get(cert_id)
        if metadata is None:
            return None
        return Certificate(
            id=cert_id,
            course=metadata.course,
            grade=metadata.grade,
            owner=self._owners[cert_id],
        )

    def get_owner(self, cert_id: int) -> Optional[str]:
        return self._owners.get(cert_id)

    def set_owner(self, cert_id: int, new_owner: str) -> Result:
        if cert_id not in self._owners:
            return Err(ErrorCode.NOT_FOUND)
        self._owners[cert_id] = new_owner
        return Ok(True)

    def count(self) -> int:
        return len(self._metadata)
