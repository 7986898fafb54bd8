"""
Tests for the certificate store, id allocator and access guards.
"""

from __future__ import annotations

import pydantic
import pytest

from certificate_registry import allocator
from certificate_registry.contract import RegistryState
from certificate_registry.errors import Err, ErrorCode, Ok
from certificate_registry.guards import require_admin, require_owner
from certificate_registry.store import (
    COURSE_MAX_LENGTH,
    GRADE_MAX_LENGTH,
    Certificate,
    CertificateMetadata,
    CertificateStore,
    check_metadata,
)


# ─── CertificateStore ─────────────────────────────────────────────


def test_insert_and_get() -> None:
    store = CertificateStore()
    assert store.insert(0, "Bitcoin 101", "A+", "alice") == Ok(0)

    assert store.get(0) == Certificate(id=0, course="Bitcoin 101", grade="A+", owner="alice")
    assert store.get_owner(0) == "alice"
    assert 0 in store
    assert store.count() == 1


def test_insert_duplicate_id_is_rejected_and_keeps_original() -> None:
    store = CertificateStore()
    store.insert(0, "Bitcoin 101", "A+", "alice")

    assert store.insert(0, "Other", "F", "mallory") == Err(ErrorCode.DUPLICATE_ID)
    assert store.get(0).course == "Bitcoin 101"
    assert store.get_owner(0) == "alice"
    assert store.count() == 1


def test_missing_id_is_absent_not_an_error() -> None:
    store = CertificateStore()
    assert store.get(5) is None
    assert store.get_owner(5) is None
    assert 5 not in store


def test_set_owner_changes_only_owner() -> None:
    store = CertificateStore()
    store.insert(0, "Bitcoin 101", "A+", "alice")

    assert store.set_owner(0, "bob") == Ok(True)
    certificate = store.get(0)
    assert certificate.owner == "bob"
    assert (certificate.course, certificate.grade) == ("Bitcoin 101", "A+")


def test_set_owner_unknown_id() -> None:
    store = CertificateStore()
    assert store.set_owner(3, "bob") == Err(ErrorCode.NOT_FOUND)
    assert store.count() == 0


def test_returned_certificate_is_read_only() -> None:
    store = CertificateStore()
    store.insert(0, "Bitcoin 101", "A+", "alice")

    certificate = store.get(0)
    with pytest.raises(pydantic.ValidationError):
        certificate.owner = "mallory"
    assert store.get_owner(0) == "alice"


# ─── Allocator ────────────────────────────────────────────────────


def test_allocate_does_not_advance() -> None:
    state = RegistryState(admin="admin")
    assert allocator.allocate(state) == 0
    assert allocator.allocate(state) == 0

    allocator.advance(state)
    allocator.advance(state)
    assert allocator.allocate(state) == 2


# ─── Guards ───────────────────────────────────────────────────────


def test_require_admin() -> None:
    state = RegistryState(admin="admin")
    assert require_admin("admin", state) is None
    assert require_admin("someone", state) == Err(ErrorCode.NOT_ADMIN)


def test_require_owner() -> None:
    assert require_owner("alice", "alice") is None
    assert require_owner("bob", "alice") == Err(ErrorCode.UNAUTHORIZED)


# ─── Metadata checks ──────────────────────────────────────────────


def test_check_metadata() -> None:
    assert check_metadata("Bitcoin 101", "A+") is None
    assert check_metadata("Bitcoin 101", "") is None
    assert check_metadata("", "A+") == Err(ErrorCode.INVALID_COURSE)
    assert check_metadata("x" * (COURSE_MAX_LENGTH + 1), "A") == Err(ErrorCode.INVALID_COURSE)
    assert check_metadata("Économie", "A") == Err(ErrorCode.INVALID_COURSE)
    assert check_metadata("Bitcoin 101", "B" * (GRADE_MAX_LENGTH + 1)) == Err(ErrorCode.INVALID_GRADE)
    assert check_metadata("Bitcoin 101", "É") == Err(ErrorCode.INVALID_GRADE)


@pytest.mark.parametrize(
    "course, grade",
    [("", "A"), ("x" * (COURSE_MAX_LENGTH + 1), "A"), ("Bitcoin 101", "É")],
)
def test_metadata_model_rejects_out_of_bounds(course: str, grade: str) -> None:
    with pytest.raises(pydantic.ValidationError):
        CertificateMetadata(course=course, grade=grade)
