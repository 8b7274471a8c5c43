"""Network registry for deploy-config library."""

import logging
import threading
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional

from .constants import NETWORK_CONFIG
from .exceptions import DuplicateChainIdError, DuplicateNetworkError, UnknownNetworkError
from .types import NetworkProfile, VerificationSettings
from .validation import validate_chain_id

logger = logging.getLogger(__name__)


class NetworkRegistry:
    """Insertion-ordered mapping of network name to NetworkProfile."""

    def __init__(self) -> None:
        self._profiles: Dict[str, NetworkProfile] = {}
        self._chain_owners: Dict[int, str] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_profiles(cls, profiles: Iterable[NetworkProfile]) -> "NetworkRegistry":
        """
        Build a registry from profiles, registering them in order.

        Raises:
            DuplicateNetworkError: If two profiles share a name
            DuplicateChainIdError: If two profiles share a chain ID
        """
        registry = cls()
        for profile in profiles:
            registry.register_network(profile)
        return registry

    def register_network(self, profile: NetworkProfile) -> None:
        """
        Add a network profile to the registry.

        Args:
            profile: Fully specified network profile

        Raises:
            DuplicateNetworkError: If profile.name is already registered
            DuplicateChainIdError: If profile.chain_id belongs to another network
            InvalidChainIdError: If profile.chain_id is not a positive integer
        """
        validate_chain_id(profile.chain_id, profile.name)

        with self._lock:
            if profile.name in self._profiles:
                raise DuplicateNetworkError(f"Network '{profile.name}' is already registered")

            owner = self._chain_owners.get(profile.chain_id)
            if owner is not None:
                raise DuplicateChainIdError(
                    f"Chain ID {profile.chain_id} of network '{profile.name}' "
                    f"is already registered by network '{owner}'"
                )

            self._profiles[profile.name] = profile
            self._chain_owners[profile.chain_id] = profile.name

        logger.debug("Registered network %s (chain %d)", profile.name, profile.chain_id)

    def has_network(self, network: str) -> bool:
        """
        Check if a network is registered.

        Args:
            network: Network name to check

        Returns:
            True if network is registered, False otherwise
        """
        return network in self._profiles

    def get(self, network: str) -> NetworkProfile:
        """
        Look up a network profile by name.

        Raises:
            UnknownNetworkError: If network is not registered
        """
        try:
            return self._profiles[network]
        except KeyError:
            raise UnknownNetworkError(f"Network '{network}' is not registered") from None

    def network_for_chain(self, chain_id: int) -> Optional[str]:
        """Return the name of the network owning chain_id, or None."""
        return self._chain_owners.get(chain_id)

    def list_networks(self) -> Iterator[str]:
        """
        Iterate over registered network names in registration order.

        Each call starts a fresh iteration over a snapshot of the names, so
        repeated calls yield the same sequence absent new registrations.
        """
        with self._lock:
            names = tuple(self._profiles)
        yield from names

    def __contains__(self, network: object) -> bool:
        return network in self._profiles

    def __len__(self) -> int:
        return len(self._profiles)

    def __iter__(self) -> Iterator[str]:
        return self.list_networks()


def profile_from_config(name: str, config: Mapping[str, Any]) -> NetworkProfile:
    """
    Build a NetworkProfile from a NETWORK_CONFIG-style entry.

    Args:
        name: Network name
        config: Dictionary with chain_id, rpc_url and optional accounts,
            verification, credentials_required, timeout_ms

    Returns:
        NetworkProfile
    """
    verification = config.get("verification")
    return NetworkProfile(
        name=name,
        chain_id=config["chain_id"],
        rpc_url=config["rpc_url"],
        accounts=tuple(config.get("accounts", ())),
        verification=VerificationSettings(**verification) if verification else None,
        credentials_required=config.get("credentials_required", True),
        timeout_ms=config.get("timeout_ms"),
    )


def default_registry() -> NetworkRegistry:
    """
    Build a new registry holding the built-in networks.

    Returns:
        NetworkRegistry populated from NETWORK_CONFIG, in table order
    """
    return NetworkRegistry.from_profiles(
        profile_from_config(name, config) for name, config in NETWORK_CONFIG.items()
    )
