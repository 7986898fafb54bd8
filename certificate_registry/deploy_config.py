# certificate_registry/deploy_config.py

import logging
from typing import Optional

from .config import Settings, load_settings
from .contract import CertificateRegistry

logger = logging.getLogger(__name__)


def deploy(admin: Optional[str] = None, settings: Optional[Settings] = None) -> CertificateRegistry:
    """
    Creates a fresh CertificateRegistry with the deployer as admin.
    Args:
        admin: Explicit admin identity. Skips reading the environment when given.
        settings: Pre-loaded settings; loaded from the environment if omitted.
    Returns:
        The new registry, with no certificates and the id counter at 0.
    """
    if admin is None:
        settings = settings or load_settings()
        admin = settings.deployer_address

    logger.info(f"Using deployer account: {admin}")
    registry = CertificateRegistry(admin=admin)
    logger.info(f"Registry deployed, total certificates: {registry.total_certificates()}")
    return registry


def main():
    """Deploys a registry from environment settings and serves its HTTP API."""
    import uvicorn

    # Imported here: the API module itself deploys through this one.
    from .api import create_app
    from .config import configure_logging

    settings = load_settings()
    configure_logging(settings)
    registry = deploy(settings=settings)
    uvicorn.run(create_app(registry), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
