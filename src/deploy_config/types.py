"""Data types and dataclasses for deploy-config library."""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple


@dataclass(frozen=True)
class VerificationSettings:
    """Block explorer verification endpoints for a network."""

    api_key_ref: str  # Env var holding the explorer API key
    api_url: str
    browser_url: str
    explorer_name: Optional[str] = None  # e.g., "arbitrumOne"


@dataclass(frozen=True)
class NetworkProfile:
    """Static description of one target chain."""

    # Required fields
    name: str  # e.g., "arbitrum"
    chain_id: int  # e.g., 42161
    rpc_url: str  # URL template, may contain ${VAR} placeholders

    # Optional fields
    accounts: Tuple[str, ...] = ()  # Env var names of deployer keys
    verification: Optional[VerificationSettings] = None
    credentials_required: bool = True
    timeout_ms: Optional[int] = None


@dataclass(frozen=True)
class OptimizerProfile:
    """Compiler optimizer toggles, applied to every network."""

    enabled: bool = True
    runs: int = 200
    passes: FrozenSet[str] = frozenset()
    custom_step_sequence: Optional[str] = None


@dataclass(frozen=True)
class ResolvedVerification:
    """Verification settings with the API key materialized."""

    api_url: str
    browser_url: str
    api_key: Optional[str] = field(default=None, repr=False)
    explorer_name: Optional[str] = None

    def address_url(self, address: str) -> str:
        """Explorer page for an address."""
        return f"{self.browser_url.rstrip('/')}/address/{address}"

    def tx_url(self, tx_hash: str) -> str:
        """Explorer page for a transaction."""
        return f"{self.browser_url.rstrip('/')}/tx/{tx_hash}"


@dataclass(frozen=True)
class ResolvedNetwork:
    """A network profile with its credentials materialized."""

    name: str
    chain_id: int
    rpc_url: str = field(repr=False)  # May embed a provider key
    accounts: Tuple[str, ...] = field(default=(), repr=False)
    verification: Optional[ResolvedVerification] = None
    timeout_ms: Optional[int] = None


@dataclass(frozen=True)
class ResolvedConfig:
    """Immutable configuration for exactly one target network."""

    profile: ResolvedNetwork
    optimizer: OptimizerProfile
    compiler_version: str  # e.g., "0.8.17"
    via_ir: bool = True
    bytecode_hash: str = "none"

    @property
    def network(self) -> str:
        return self.profile.name

    @property
    def chain_id(self) -> int:
        return self.profile.chain_id

    @property
    def accounts(self) -> Tuple[str, ...]:
        return self.profile.accounts
