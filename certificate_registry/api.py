# certificate_registry/api.py

import logging
import threading
from typing import Annotated, Optional

from algosdk import encoding
from fastapi import Depends, FastAPI, Header, HTTPException, Path, Request
from pydantic import AfterValidator, BaseModel, Field

from .config import configure_logging, load_settings
from .contract import CertificateRegistry
from .deploy_config import deploy
from .errors import ErrorCode, Result
from .store import COURSE_MAX_LENGTH, GRADE_MAX_LENGTH, AsciiText

logger = logging.getLogger(__name__)

HTTP_STATUS = {
    ErrorCode.INVALID_COURSE: 400,
    ErrorCode.INVALID_GRADE: 400,
    ErrorCode.NOT_ADMIN: 401,
    ErrorCode.UNAUTHORIZED: 403,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.DUPLICATE_ID: 409,
}


def _check_address(value: str) -> str:
    if not encoding.is_valid_address(value):
        raise ValueError("not a valid Algorand address")
    return value


Address = Annotated[str, AfterValidator(_check_address)]


# ------------------- Pydantic Models -------------------
class MintPayload(BaseModel):
    recipient: Address
    # Empty course is let through: the registry answers it with INVALID_COURSE.
    course: AsciiText = Field(max_length=COURSE_MAX_LENGTH)
    grade: AsciiText = Field(default="", max_length=GRADE_MAX_LENGTH)


class TransferPayload(BaseModel):
    id: int = Field(ge=0)
    sender: Address
    recipient: Address


class SetAdminPayload(BaseModel):
    new_admin: Address


# ------------------- Dependencies -------------------
def caller_identity(x_caller: str = Header(...)) -> str:
    """The host-authenticated identity making the call."""
    if not encoding.is_valid_address(x_caller):
        raise HTTPException(status_code=422, detail="X-Caller is not a valid Algorand address")
    return x_caller


def get_registry(request: Request) -> CertificateRegistry:
    return request.app.state.registry


def _respond(result: Result) -> dict:
    if not result.is_ok:
        raise HTTPException(
            status_code=HTTP_STATUS[result.code],
            detail={"code": int(result.code), "error": result.name},
        )
    return {"ok": result.value}


def create_app(registry: Optional[CertificateRegistry] = None) -> FastAPI:
    """
    Builds the HTTP front end for a registry.
    Without an explicit registry one is deployed from environment settings.
    """
    if registry is None:
        settings = load_settings()
        configure_logging(settings)
        registry = deploy(settings=settings)

    app = FastAPI(
        title="Certificate Registry API",
        description="Mint, transfer and query non-fungible course certificates.",
        version="1.0.0",
    )
    app.state.registry = registry
    # The core expects one call at a time.
    lock = threading.Lock()

    # ------------------- API Routes -------------------
    @app.post("/mint", tags=["Certificates"])
    def mint(
        payload: MintPayload,
        caller: str = Depends(caller_identity),
        registry: CertificateRegistry = Depends(get_registry),
    ):
        with lock:
            result = registry.mint(caller, payload.recipient, payload.course, payload.grade)
        return _respond(result)

    @app.post("/transfer", tags=["Certificates"])
    def transfer(
        payload: TransferPayload,
        caller: str = Depends(caller_identity),
        registry: CertificateRegistry = Depends(get_registry),
    ):
        with lock:
            result = registry.transfer(caller, payload.sender, payload.recipient, payload.id)
        return _respond(result)

    @app.post("/set-admin", tags=["Administration"])
    def set_admin(
        payload: SetAdminPayload,
        caller: str = Depends(caller_identity),
        registry: CertificateRegistry = Depends(get_registry),
    ):
        with lock:
            result = registry.set_admin(caller, payload.new_admin)
        return _respond(result)

    @app.get("/certificates/{cert_id}", tags=["Queries"])
    def get_certificate(
        cert_id: int = Path(ge=0),
        registry: CertificateRegistry = Depends(get_registry),
    ):
        with lock:
            certificate = registry.get_certificate(cert_id)
        return {"ok": certificate.model_dump() if certificate is not None else None}

    @app.get("/certificates/{cert_id}/owner", tags=["Queries"])
    def get_owner(
        cert_id: int = Path(ge=0),
        registry: CertificateRegistry = Depends(get_registry),
    ):
        with lock:
            return {"ok": registry.get_owner(cert_id)}

    @app.get("/admin", tags=["Queries"])
    def get_admin(registry: CertificateRegistry = Depends(get_registry)):
        with lock:
            return {"ok": registry.get_admin()}

    @app.get("/total-certificates", tags=["Queries"])
    def total_certificates(registry: CertificateRegistry = Depends(get_registry)):
        with lock:
            return {"ok": registry.total_certificates()}

    @app.get("/last-token-id", tags=["Queries"])
    def last_token_id(registry: CertificateRegistry = Depends(get_registry)):
        with lock:
            return {"ok": registry.get_last_token_id()}

    logger.info(f"Registry API ready, admin: {registry.get_admin()}")
    return app
