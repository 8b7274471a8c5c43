"""Shared pytest fixtures for deploy-config tests."""

from pathlib import Path
from typing import Dict

import pytest

from deploy_config.registry import NetworkRegistry, default_registry
from deploy_config.types import NetworkProfile, OptimizerProfile, VerificationSettings


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def networks_json(fixtures_dir: Path) -> Path:
    """Return path to the sample network definitions file."""
    return fixtures_dir / "networks.json"


@pytest.fixture
def sample_env_file(fixtures_dir: Path) -> Path:
    """Return path to the sample dotenv file."""
    return fixtures_dir / "sample.env"


@pytest.fixture
def full_env() -> Dict[str, str]:
    """Environment with every credential the built-in networks reference."""
    return {
        "CYGNUS_DEPLOYER": "0x" + "11" * 32,
        "RPC_URL_MAINNET": "https://eth-mainnet.example.com/v2/key-mainnet",
        "RPC_URL_ARBITRUM": "https://arb-mainnet.example.com/v2/key-arbitrum",
        "RPC_URL_POLYGON": "https://polygon-mainnet.example.com/v2/key-polygon",
        "RPC_URL_POLYGON_TESTNET": "https://polygon-mumbai.example.com/v2/key-mumbai",
        "RPC_URL_OPTIMISM": "https://opt-mainnet.example.com/v2/key-optimism",
        "RPC_URL_OPTIMISM_GOERLI": "https://opt-goerli.example.com/v2/key-goerli",
        "RPC_URL_ZKEVM": "https://zkevm.example.com/v2/key-zkevm",
        "ETHERSCAN_KEY_MAINNET": "etherscan-mainnet",
        "ETHERSCAN_KEY_OPTIMISM": "etherscan-optimism",
        "ETHERSCAN_KEY_ARBITRUM": "etherscan-arbitrum",
        "ETHERSCAN_KEY_POLYGON": "etherscan-polygon",
        "ETHERSCAN_KEY_ZKEVM": "etherscan-zkevm",
    }


@pytest.fixture
def builtin_registry() -> NetworkRegistry:
    """Fresh registry holding the built-in networks."""
    return default_registry()


@pytest.fixture
def strict_profile() -> NetworkProfile:
    """Credentialed network with an RPC placeholder and verification."""
    return NetworkProfile(
        name="testchain",
        chain_id=424242,
        rpc_url="https://rpc.testchain.example/${TESTCHAIN_RPC_KEY}",
        accounts=("DEPLOYER_KEY", "OPERATOR_KEY"),
        verification=VerificationSettings(
            api_key_ref="TESTSCAN_KEY",
            api_url="https://api.testscan.example/api",
            browser_url="https://testscan.example",
            explorer_name="testchain",
        ),
    )


@pytest.fixture
def lenient_profile() -> NetworkProfile:
    """Public network that tolerates missing credentials."""
    return NetworkProfile(
        name="publicchain",
        chain_id=515151,
        rpc_url="https://rpc.publicchain.example",
        accounts=("DEPLOYER_KEY",),
        verification=VerificationSettings(
            api_key_ref="PUBLICSCAN_KEY",
            api_url="https://api.publicscan.example/api",
            browser_url="https://publicscan.example",
        ),
        credentials_required=False,
    )


@pytest.fixture
def small_optimizer() -> OptimizerProfile:
    """Plain optimizer profile without a custom step sequence."""
    return OptimizerProfile(enabled=True, runs=200, passes=frozenset({"peephole", "cse"}))
