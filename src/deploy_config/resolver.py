"""Configuration resolution for deploy-config library."""

import logging
import re
from pathlib import Path
from typing import List, Mapping, Optional, Union

from .constants import (
    DEFAULT_BYTECODE_HASH,
    DEFAULT_COMPILER_VERSION,
    DEFAULT_NETWORK,
    DEFAULT_OPTIMIZER_RUNS,
    DEFAULT_OPTIMIZER_STEPS,
    DEFAULT_VIA_IR,
    KNOWN_OPTIMIZER_PASSES,
)
from .exceptions import InvalidCompilerSettingError, InvalidUrlError, MissingCredentialError
from .parsers import parse_compiler_definitions, parse_network_definitions
from .registry import NetworkRegistry, default_registry
from .types import (
    NetworkProfile,
    OptimizerProfile,
    ResolvedConfig,
    ResolvedNetwork,
    ResolvedVerification,
)
from .validation import validate_chain_id, validate_optimizer, validate_timeout, validate_url
from .versions import normalize_compiler_version

logger = logging.getLogger(__name__)

# ${VAR_NAME} placeholders in URL templates
_PLACEHOLDER_RE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

BYTECODE_HASH_OPTIONS = ("none", "ipfs", "bzzr1")


def default_optimizer_profile() -> OptimizerProfile:
    """Optimizer profile used when none is supplied: every pass on, custom steps."""
    return OptimizerProfile(
        enabled=True,
        runs=DEFAULT_OPTIMIZER_RUNS,
        passes=KNOWN_OPTIMIZER_PASSES,
        custom_step_sequence=DEFAULT_OPTIMIZER_STEPS,
    )


def _lookup(env: Mapping[str, str], key: str) -> Optional[str]:
    # Empty values count as missing
    value = env.get(key)
    return value if value else None


def substitute_placeholders(
    template: str, env: Mapping[str, str], network: Optional[str] = None
) -> str:
    """
    Replace ${VAR} placeholders in a template with values from env.

    Args:
        template: String possibly containing ${VAR} placeholders
        env: Environment mapping
        network: Network name reported in errors

    Returns:
        Template with every placeholder substituted

    Raises:
        MissingCredentialError: For the first placeholder with no value in env
        InvalidUrlError: If template is not a string
    """
    if not isinstance(template, str):
        raise InvalidUrlError(f"rpc_url must be a string, got {template!r}", field="rpc_url")

    def replace(match: "re.Match[str]") -> str:
        key = match.group(1)
        value = _lookup(env, key)
        if value is None:
            raise MissingCredentialError(key, network)
        return value

    return _PLACEHOLDER_RE.sub(replace, template)


class ConfigResolver:
    """Resolves registered networks into immutable ResolvedConfig objects."""

    def __init__(
        self,
        registry: NetworkRegistry,
        optimizer: Optional[OptimizerProfile] = None,
        compiler_version: str = DEFAULT_COMPILER_VERSION,
        via_ir: bool = DEFAULT_VIA_IR,
        bytecode_hash: str = DEFAULT_BYTECODE_HASH,
        default_network: str = DEFAULT_NETWORK,
    ):
        """
        Initialize the resolver.

        Args:
            registry: Registry to resolve network names against
            optimizer: Optimizer profile merged into every result
                       (defaults to default_optimizer_profile())
            compiler_version: solc release version (e.g., "0.8.17")
            via_ir: Compile through the IR pipeline
            bytecode_hash: Metadata hash appended to bytecode ("none", "ipfs", "bzzr1")
            default_network: Network resolved when resolve() is given no name

        Raises:
            InvalidOptimizerError: If optimizer settings are malformed
            InvalidCompilerVersionError: If compiler_version is not a release
            InvalidCompilerSettingError: If via_ir is not a bool or bytecode_hash
                is not a known option
        """
        if optimizer is None:
            optimizer = default_optimizer_profile()

        if bytecode_hash not in BYTECODE_HASH_OPTIONS:
            raise InvalidCompilerSettingError(
                f"bytecode_hash must be one of {', '.join(BYTECODE_HASH_OPTIONS)}, "
                f"got '{bytecode_hash}'"
            )
        if not isinstance(via_ir, bool):
            raise InvalidCompilerSettingError(f"via_ir must be a bool, got {via_ir!r}")

        self._registry = registry
        self._optimizer = validate_optimizer(optimizer)
        self._compiler_version = normalize_compiler_version(compiler_version)
        self._via_ir = via_ir
        self._bytecode_hash = bytecode_hash
        self._default_network = default_network

    @property
    def registry(self) -> NetworkRegistry:
        return self._registry

    @property
    def optimizer(self) -> OptimizerProfile:
        return self._optimizer

    @property
    def compiler_version(self) -> str:
        return self._compiler_version

    @property
    def default_network(self) -> str:
        return self._default_network

    def resolve(self, network_name: Optional[str], env: Mapping[str, str]) -> ResolvedConfig:
        """
        Resolve a network into a validated, immutable configuration.

        No network I/O happens here. Either every field resolves or an error
        is raised; nothing is partially constructed.

        Args:
            network_name: Registered network name, or None for the resolver's
                default network
            env: Source of credential values, keyed by env var name

        Returns:
            ResolvedConfig for network_name

        Raises:
            UnknownNetworkError: If network_name is not registered
            MissingCredentialError: If a required credential is absent from env
            InvalidUrlError: If the RPC or explorer URLs are malformed
            InvalidChainIdError: If the chain ID is not a positive integer
        """
        if network_name is None:
            network_name = self._default_network
        profile = self._registry.get(network_name)

        accounts = self._resolve_accounts(profile, env)
        verification = self._resolve_verification(profile, env)

        rpc_url = substitute_placeholders(profile.rpc_url, env, profile.name)
        validate_url(rpc_url, field="rpc_url")

        chain_id = validate_chain_id(profile.chain_id, profile.name)
        timeout_ms = validate_timeout(profile.timeout_ms, profile.name)

        logger.debug(
            "Resolved network %s (chain %d, %d account(s))",
            profile.name,
            chain_id,
            len(accounts),
        )

        return ResolvedConfig(
            profile=ResolvedNetwork(
                name=profile.name,
                chain_id=chain_id,
                rpc_url=rpc_url,
                accounts=tuple(accounts),
                verification=verification,
                timeout_ms=timeout_ms,
            ),
            optimizer=self._optimizer,
            compiler_version=self._compiler_version,
            via_ir=self._via_ir,
            bytecode_hash=self._bytecode_hash,
        )

    def _credential(
        self, profile: NetworkProfile, key: str, env: Mapping[str, str]
    ) -> Optional[str]:
        value = _lookup(env, key)
        if value is None:
            if profile.credentials_required:
                raise MissingCredentialError(key, profile.name)
            logger.warning(
                "Credential %s not set; omitting it for network %s", key, profile.name
            )
        return value

    def _resolve_accounts(self, profile: NetworkProfile, env: Mapping[str, str]) -> List[str]:
        accounts = []
        for ref in profile.accounts:
            value = self._credential(profile, ref, env)
            if value is not None:
                accounts.append(value)
        return accounts

    def _resolve_verification(
        self, profile: NetworkProfile, env: Mapping[str, str]
    ) -> Optional[ResolvedVerification]:
        settings = profile.verification
        if settings is None:
            return None

        api_key = self._credential(profile, settings.api_key_ref, env)
        validate_url(settings.api_url, field="verification.api_url")
        validate_url(settings.browser_url, field="verification.browser_url")

        return ResolvedVerification(
            api_url=settings.api_url,
            browser_url=settings.browser_url,
            api_key=api_key,
            explorer_name=settings.explorer_name,
        )


def load_resolver(definitions_path: Union[Path, str]) -> ConfigResolver:
    """
    Build a resolver from a definitions file.

    The file's "networks" block populates a new registry and its optional
    "solidity" block supplies the compiler and optimizer settings.

    Args:
        definitions_path: Path to a networks.json definitions file

    Returns:
        ConfigResolver over the file's networks

    Raises:
        DefinitionError: If the file is malformed
        DuplicateNetworkError, DuplicateChainIdError: If entries collide
    """
    registry = NetworkRegistry.from_profiles(parse_network_definitions(definitions_path))
    compiler_settings = parse_compiler_definitions(definitions_path)

    logger.debug("Loaded %d network(s) from %s", len(registry), definitions_path)
    return ConfigResolver(registry, **compiler_settings)


def resolve(
    network_name: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
    registry: Optional[NetworkRegistry] = None,
    optimizer: Optional[OptimizerProfile] = None,
    compiler_version: str = DEFAULT_COMPILER_VERSION,
) -> ResolvedConfig:
    """
    Resolve a network using a one-off resolver.

    Args:
        network_name: Network name (e.g., "arbitrum"); defaults to "localhost"
        env: Source of credential values (defaults to an empty mapping)
        registry: Registry to use (defaults to the built-in networks)
        optimizer: Optimizer profile (defaults to default_optimizer_profile())
        compiler_version: solc release version

    Returns:
        ResolvedConfig for network_name
    """
    if registry is None:
        registry = default_registry()
    if env is None:
        env = {}

    resolver = ConfigResolver(registry, optimizer=optimizer, compiler_version=compiler_version)
    return resolver.resolve(network_name, env)
