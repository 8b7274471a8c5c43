"""Field validation helpers for deploy-config library."""

from typing import Any, Optional
from urllib.parse import urlparse

from .constants import ALLOWED_URL_SCHEMES, KNOWN_OPTIMIZER_PASSES, MAX_OPTIMIZER_RUNS
from .exceptions import (
    InvalidChainIdError,
    InvalidOptimizerError,
    InvalidTimeoutError,
    InvalidUrlError,
)
from .types import OptimizerProfile


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid numeric setting
    return isinstance(value, int) and not isinstance(value, bool)


def validate_url(url: Any, field: str = "rpc_url") -> str:
    """
    Check that a value is a well-formed endpoint URL.

    Args:
        url: Candidate URL
        field: Name of the field being validated (used in the error)

    Returns:
        The URL unchanged

    Raises:
        InvalidUrlError: If the URL is empty, has an unsupported scheme,
            lacks a host, or contains whitespace
    """
    if not isinstance(url, str) or not url:
        raise InvalidUrlError(f"{field} must be a non-empty string", field=field)

    if any(ch.isspace() for ch in url):
        raise InvalidUrlError(f"{field} must not contain whitespace: {url!r}", field=field)

    try:
        parsed = urlparse(url)
        # Accessing .port validates the port component
        parsed.port
    except ValueError as e:
        raise InvalidUrlError(f"{field} is not a valid URL: {e}", field=field) from e

    if parsed.scheme not in ALLOWED_URL_SCHEMES:
        raise InvalidUrlError(
            f"{field} must use one of {sorted(ALLOWED_URL_SCHEMES)}, got '{parsed.scheme}'",
            field=field,
        )

    if not parsed.hostname:
        raise InvalidUrlError(f"{field} must have a hostname", field=field)

    return url


def validate_chain_id(chain_id: Any, network: Optional[str] = None) -> int:
    """
    Check that a chain ID is a positive integer.

    Raises:
        InvalidChainIdError: If chain_id is not an int or is < 1
    """
    where = f" for network '{network}'" if network else ""
    if not _is_int(chain_id):
        raise InvalidChainIdError(f"chain_id{where} must be an integer, got {chain_id!r}")
    if chain_id < 1:
        raise InvalidChainIdError(f"chain_id{where} must be positive, got {chain_id}")
    return chain_id


def validate_timeout(timeout_ms: Any, network: Optional[str] = None) -> Optional[int]:
    """
    Check that an optional RPC timeout is a non-negative integer.

    Raises:
        InvalidTimeoutError: If timeout_ms is not None and not an int >= 0
    """
    if timeout_ms is None:
        return None
    if not _is_int(timeout_ms) or timeout_ms < 0:
        where = f" for network '{network}'" if network else ""
        raise InvalidTimeoutError(
            f"timeout_ms{where} must be a non-negative integer, got {timeout_ms!r}"
        )
    return timeout_ms


def validate_step_sequence(sequence: str) -> str:
    """
    Check the shape of a Yul optimizer step sequence.

    Only the shape is checked: letters, square brackets that nest and
    balance, and at most one ':' separating the main and cleanup sequences.
    Step abbreviations themselves are left to the compiler.

    Raises:
        InvalidOptimizerError: If the sequence is malformed
    """
    if not isinstance(sequence, str) or not sequence.strip():
        raise InvalidOptimizerError("custom_step_sequence must be a non-empty string")

    if sequence.count(":") > 1:
        raise InvalidOptimizerError("custom_step_sequence may contain at most one ':'")

    depth = 0
    for position, ch in enumerate(sequence):
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
            if depth < 0:
                raise InvalidOptimizerError(
                    f"Unbalanced ']' at position {position} in custom_step_sequence"
                )
        elif ch == ":":
            if depth != 0:
                raise InvalidOptimizerError("':' is not allowed inside brackets")
        elif not (ch.isalpha() or ch.isspace()):
            raise InvalidOptimizerError(
                f"Unexpected character {ch!r} at position {position} in custom_step_sequence"
            )

    if depth != 0:
        raise InvalidOptimizerError("Unbalanced '[' in custom_step_sequence")

    return sequence


def validate_optimizer(optimizer: OptimizerProfile) -> OptimizerProfile:
    """
    Validate an optimizer profile.

    Passes and the step sequence are validated even when the optimizer is
    disabled.

    Raises:
        InvalidOptimizerError: If any field is out of range or malformed
    """
    if not isinstance(optimizer.enabled, bool):
        raise InvalidOptimizerError(f"enabled must be a bool, got {optimizer.enabled!r}")

    if not _is_int(optimizer.runs):
        raise InvalidOptimizerError(f"runs must be an integer, got {optimizer.runs!r}")
    if not 0 <= optimizer.runs <= MAX_OPTIMIZER_RUNS:
        raise InvalidOptimizerError(
            f"runs must be between 0 and {MAX_OPTIMIZER_RUNS}, got {optimizer.runs}"
        )

    if not isinstance(optimizer.passes, frozenset):
        raise InvalidOptimizerError("passes must be a frozenset of pass names")
    unknown = sorted(str(p) for p in optimizer.passes if p not in KNOWN_OPTIMIZER_PASSES)
    if unknown:
        raise InvalidOptimizerError(f"Unknown optimizer passes: {', '.join(unknown)}")

    if optimizer.custom_step_sequence is not None:
        validate_step_sequence(optimizer.custom_step_sequence)

    return optimizer
