"""Definition file parsers for deploy-config library."""

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

from .constants import (
    DEFAULT_BYTECODE_HASH,
    DEFAULT_COMPILER_VERSION,
    DEFAULT_VIA_IR,
    KNOWN_OPTIMIZER_PASSES,
    LEGACY_OPTIMIZER_PASSES,
    MINIMAL_OPTIMIZER_PASSES,
    YUL_OPTIMIZER_PASSES,
)
from .exceptions import DefinitionError, InvalidOptimizerError, InvalidTimeoutError
from .types import NetworkProfile, OptimizerProfile, ResolvedConfig, VerificationSettings
from .validation import validate_timeout

# solc/hardhat defaults when no optimizer block is given
_DEFAULT_RUNS = 200


def parse_network_definitions(file_path: Union[Path, str]) -> List[NetworkProfile]:
    """
    Parse a network definitions JSON file.

    Expected layout mirrors a hardhat "networks" block, with env var names in
    place of secrets:

        {
          "networks": {
            "arbitrum": {
              "url": "${RPC_URL_ARBITRUM}",
              "chainId": 42161,
              "accounts": ["DEPLOYER_KEY"],
              "credentialsRequired": true,
              "timeout": 20000,
              "verification": {
                "apiKey": "ARBISCAN_KEY",
                "apiURL": "https://api.arbiscan.io/api",
                "browserURL": "https://arbiscan.io",
                "network": "arbitrumOne"
              }
            }
          }
        }

    Args:
        file_path: Path to the definitions file

    Returns:
        List of NetworkProfile in file order

    Raises:
        DefinitionError: If the file or an entry is malformed
    """
    data = _load_definitions_file(file_path)
    if not isinstance(data.get("networks"), dict):
        raise DefinitionError(f"Missing 'networks' object in {file_path}")

    return [parse_network_entry(name, entry) for name, entry in data["networks"].items()]


def parse_compiler_definitions(file_path: Union[Path, str]) -> Dict[str, Any]:
    """
    Parse the optional "solidity" block of a definitions file.

    Args:
        file_path: Path to the definitions file

    Returns:
        ConfigResolver keyword arguments (see parse_compiler_settings);
        defaults when the file has no "solidity" block
    """
    data = _load_definitions_file(file_path)
    solidity = data.get("solidity", {})
    if not isinstance(solidity, Mapping):
        raise DefinitionError(f"'solidity' must be an object in {file_path}")
    return parse_compiler_settings(solidity)


def _load_definitions_file(file_path: Union[Path, str]) -> Dict[str, Any]:
    with open(file_path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise DefinitionError(f"Invalid JSON in definitions file {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise DefinitionError(f"Definitions file {file_path} must contain a JSON object")
    return data


def parse_network_entry(name: str, entry: Mapping[str, Any]) -> NetworkProfile:
    """
    Parse one hardhat-shaped network entry.

    Args:
        name: Network name
        entry: Entry with required url/chainId and optional accounts,
            credentialsRequired, timeout, verification

    Returns:
        NetworkProfile

    Raises:
        DefinitionError: If required fields are missing or mistyped
    """
    if not isinstance(entry, Mapping):
        raise DefinitionError(f"Network '{name}' must be an object")

    # Extract required fields
    for required in ("url", "chainId"):
        if required not in entry:
            raise DefinitionError(f"Network '{name}' is missing '{required}'")

    accounts = entry.get("accounts", [])
    if not isinstance(accounts, list) or not all(isinstance(a, str) for a in accounts):
        raise DefinitionError(f"Network '{name}': 'accounts' must be a list of env var names")

    credentials_required = entry.get("credentialsRequired", True)
    if not isinstance(credentials_required, bool):
        raise DefinitionError(f"Network '{name}': 'credentialsRequired' must be a bool")

    # Extract optional fields if present
    verification = None
    if "verification" in entry:
        verification = _parse_verification(name, entry["verification"])

    try:
        timeout_ms = validate_timeout(entry.get("timeout"), name)
    except InvalidTimeoutError as e:
        raise DefinitionError(str(e)) from e

    return NetworkProfile(
        name=name,
        chain_id=entry["chainId"],
        rpc_url=entry["url"],
        accounts=tuple(accounts),
        verification=verification,
        credentials_required=credentials_required,
        timeout_ms=timeout_ms,
    )


def _parse_verification(name: str, data: Any) -> VerificationSettings:
    if not isinstance(data, Mapping):
        raise DefinitionError(f"Network '{name}': 'verification' must be an object")

    for required in ("apiKey", "apiURL", "browserURL"):
        if required not in data:
            raise DefinitionError(f"Network '{name}': verification is missing '{required}'")

    return VerificationSettings(
        api_key_ref=data["apiKey"],
        api_url=data["apiURL"],
        browser_url=data["browserURL"],
        explorer_name=data.get("network"),
    )


def parse_optimizer_settings(data: Mapping[str, Any]) -> OptimizerProfile:
    """
    Parse a solc/hardhat "optimizer" settings block.

    Like solc, parsing starts from the standard pass set (every pass when
    enabled, the minimal set when disabled) and "details" only overrides the
    toggles it names.

    Args:
        data: Mapping with optional enabled, runs, details, details.yulDetails

    Returns:
        OptimizerProfile (not yet range-checked, see validate_optimizer)

    Raises:
        InvalidOptimizerError: If the block or its details are malformed
    """
    if not isinstance(data, Mapping):
        raise InvalidOptimizerError("optimizer settings must be an object")

    enabled = data.get("enabled", False)
    runs = data.get("runs", _DEFAULT_RUNS)

    passes = set(KNOWN_OPTIMIZER_PASSES if enabled else MINIMAL_OPTIMIZER_PASSES)
    steps = None

    details = data.get("details")
    if details is None:
        return OptimizerProfile(enabled=enabled, runs=runs, passes=frozenset(passes))

    if not isinstance(details, Mapping):
        raise InvalidOptimizerError("optimizer 'details' must be an object")

    for key, value in details.items():
        if key == "yulDetails":
            steps = _apply_yul_details(value, passes)
            continue
        if key not in LEGACY_OPTIMIZER_PASSES:
            raise InvalidOptimizerError(f"Unknown optimizer detail '{key}'")
        _apply_toggle(key, value, passes)

    return OptimizerProfile(
        enabled=enabled,
        runs=runs,
        passes=frozenset(passes),
        custom_step_sequence=steps,
    )


def _apply_toggle(key: str, value: Any, passes: set) -> None:
    if not isinstance(value, bool):
        raise InvalidOptimizerError(f"Optimizer detail '{key}' must be a bool")
    if value:
        passes.add(key)
    else:
        passes.discard(key)


def _apply_yul_details(data: Any, passes: set) -> Any:
    if not isinstance(data, Mapping):
        raise InvalidOptimizerError("optimizer 'yulDetails' must be an object")

    steps = None
    for key, value in data.items():
        if key == "optimizerSteps":
            steps = value
        elif key in YUL_OPTIMIZER_PASSES:
            _apply_toggle(key, value, passes)
        else:
            raise InvalidOptimizerError(f"Unknown yulDetails option '{key}'")
    return steps


def parse_compiler_settings(data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Parse a hardhat-style compiler entry into ConfigResolver keyword arguments.

    Args:
        data: Mapping like {"version": "0.8.17", "settings": {"viaIR": true,
              "optimizer": {...}, "metadata": {"bytecodeHash": "none"}}}

    Returns:
        Dictionary with compiler_version, via_ir, bytecode_hash, optimizer

    Raises:
        DefinitionError: If settings, metadata or optimizer are not objects,
            or viaIR is not a bool
        InvalidOptimizerError: If the optimizer details are malformed
    """
    settings = data.get("settings", {})
    if not isinstance(settings, Mapping):
        raise DefinitionError("Compiler 'settings' must be an object")

    metadata = settings.get("metadata", {})
    if not isinstance(metadata, Mapping):
        raise DefinitionError("Compiler 'metadata' must be an object")

    optimizer = settings.get("optimizer", {})
    if not isinstance(optimizer, Mapping):
        raise DefinitionError("Compiler 'optimizer' must be an object")

    via_ir = settings.get("viaIR", DEFAULT_VIA_IR)
    if not isinstance(via_ir, bool):
        raise DefinitionError(f"Compiler 'viaIR' must be a bool, got {via_ir!r}")

    return {
        "compiler_version": data.get("version", DEFAULT_COMPILER_VERSION),
        "via_ir": via_ir,
        "bytecode_hash": metadata.get("bytecodeHash", DEFAULT_BYTECODE_HASH),
        "optimizer": parse_optimizer_settings(optimizer),
    }


def to_solc_settings(config: ResolvedConfig) -> Dict[str, Any]:
    """
    Render the compiler part of a resolved config as solc standard-JSON settings.

    A disabled optimizer is rendered without details.

    Args:
        config: Resolved configuration

    Returns:
        Dictionary suitable for the "settings" key of solc standard JSON input
    """
    optimizer = config.optimizer
    optimizer_settings: Dict[str, Any] = {
        "enabled": optimizer.enabled,
        "runs": optimizer.runs,
    }

    if optimizer.enabled:
        details: Dict[str, Any] = {
            name: name in optimizer.passes for name in LEGACY_OPTIMIZER_PASSES
        }
        yul_details: Dict[str, Any] = {
            name: name in optimizer.passes for name in YUL_OPTIMIZER_PASSES
        }
        if optimizer.custom_step_sequence is not None:
            yul_details["optimizerSteps"] = optimizer.custom_step_sequence
        details["yulDetails"] = yul_details
        optimizer_settings["details"] = details

    return {
        "viaIR": config.via_ir,
        "optimizer": optimizer_settings,
        "metadata": {"bytecodeHash": config.bytecode_hash},
    }
