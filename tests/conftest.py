from __future__ import annotations

import pytest
from algosdk import account

from certificate_registry import CertificateRegistry


@pytest.fixture
def accounts() -> dict[str, str]:
    """Fresh Algorand addresses: a deployer plus five wallets."""
    names = ["deployer", "wallet_1", "wallet_2", "wallet_3", "wallet_4", "wallet_5"]
    return {name: account.generate_account()[1] for name in names}


@pytest.fixture
def admin(accounts: dict[str, str]) -> str:
    return accounts["deployer"]


@pytest.fixture
def registry(admin: str) -> CertificateRegistry:
    return CertificateRegistry(admin=admin)
