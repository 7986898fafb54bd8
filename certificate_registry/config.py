# certificate_registry/config.py

import logging
import os
from dataclasses import dataclass
from typing import Optional

from algosdk import account, mnemonic
from dotenv import load_dotenv


class ConfigurationError(Exception):
    pass


@dataclass(frozen=True)
class Settings:
    deployer_address: str
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000


def _deployer_from_env() -> Optional[str]:
    deployer_mnemonic = os.getenv("DEPLOYER")
    if deployer_mnemonic and deployer_mnemonic.strip():
        try:
            private_key = mnemonic.to_private_key(deployer_mnemonic.strip())
        except Exception as e:
            raise ConfigurationError(f"DEPLOYER is not a valid mnemonic: {e}") from e
        return account.address_from_private_key(private_key)

    address = os.getenv("DEPLOYER_ADDRESS")
    if address and address.strip():
        return address.strip()
    return None


def _port_from_env() -> int:
    raw = os.getenv("REGISTRY_PORT", "8000")
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"REGISTRY_PORT is not a number: {raw!r}") from e


def load_settings() -> Settings:
    """
    Reads settings from the environment (and a .env file, if present).
    DEPLOYER (a 25-word mnemonic) wins over DEPLOYER_ADDRESS.
    """
    load_dotenv()

    deployer_address = _deployer_from_env()
    if not deployer_address:
        raise ConfigurationError("DEPLOYER mnemonic or DEPLOYER_ADDRESS not found in environment variables")

    return Settings(
        deployer_address=deployer_address,
        log_level=os.getenv("REGISTRY_LOG_LEVEL", "INFO").upper(),
        host=os.getenv("REGISTRY_HOST", "127.0.0.1"),
        port=_port_from_env(),
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
