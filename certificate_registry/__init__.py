from .contract import CertificateRegistry, RegistryState
from .errors import Err, ErrorCode, Ok, RegistryError, Result
from .store import Certificate, CertificateMetadata, CertificateStore

__all__ = [
    "Certificate",
    "CertificateMetadata",
    "CertificateRegistry",
    "CertificateStore",
    "Err",
    "ErrorCode",
    "Ok",
    "RegistryError",
    "RegistryState",
    "Result",
]
