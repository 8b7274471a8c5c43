"""
deploy-config: Python library for resolving multi-network smart contract build and deployment configuration
"""

from importlib.metadata import PackageNotFoundError, version

from .env import load_env
from .exceptions import (
    ChainIdMismatchError,
    ConfigurationError,
    DefinitionError,
    DuplicateChainIdError,
    DuplicateNetworkError,
    InvalidChainIdError,
    InvalidCompilerSettingError,
    InvalidCompilerVersionError,
    InvalidOptimizerError,
    InvalidTimeoutError,
    InvalidUrlError,
    MissingCredentialError,
    UnknownNetworkError,
)
from .parsers import parse_network_definitions, parse_optimizer_settings, to_solc_settings
from .registry import NetworkRegistry, default_registry
from .resolver import ConfigResolver, default_optimizer_profile, load_resolver, resolve
from .rpc import verify_chain_id
from .types import (
    NetworkProfile,
    OptimizerProfile,
    ResolvedConfig,
    ResolvedNetwork,
    ResolvedVerification,
    VerificationSettings,
)

try:
    __version__ = version("deploy-config")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "ConfigResolver",
    "NetworkRegistry",
    "default_registry",
    "default_optimizer_profile",
    "load_resolver",
    "resolve",
    "load_env",
    "parse_network_definitions",
    "parse_optimizer_settings",
    "to_solc_settings",
    "verify_chain_id",
    "NetworkProfile",
    "VerificationSettings",
    "OptimizerProfile",
    "ResolvedConfig",
    "ResolvedNetwork",
    "ResolvedVerification",
    "ConfigurationError",
    "UnknownNetworkError",
    "DuplicateNetworkError",
    "DuplicateChainIdError",
    "MissingCredentialError",
    "InvalidUrlError",
    "InvalidChainIdError",
    "InvalidOptimizerError",
    "InvalidCompilerVersionError",
    "InvalidCompilerSettingError",
    "InvalidTimeoutError",
    "DefinitionError",
    "ChainIdMismatchError",
]
