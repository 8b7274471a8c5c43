"""Optional RPC checks for deploy-config library."""

import logging
from urllib.parse import urlparse

import requests

from .exceptions import ChainIdMismatchError, InvalidUrlError
from .types import ResolvedConfig

logger = logging.getLogger(__name__)

# Schemes fetch_chain_id can POST to
_HTTP_SCHEMES = ("http", "https")


def fetch_chain_id(rpc_url: str, timeout: float = 30) -> int:
    """
    Ask an RPC endpoint for its chain ID.

    Only http(s) endpoints can be queried. A ws(s) URL is valid in a resolved
    config but is rejected here.

    Args:
        rpc_url: RPC endpoint URL
        timeout: Request timeout in seconds

    Returns:
        Chain ID reported by the endpoint

    Raises:
        InvalidUrlError: If rpc_url is not an http(s) URL
        KeyError: If RPC response is missing required fields
        ValueError: If RPC returns an error
        RuntimeError: If network error occurs
    """
    scheme = urlparse(rpc_url).scheme
    if scheme not in _HTTP_SCHEMES:
        raise InvalidUrlError(
            f"Cannot query chain ID over '{scheme}'; only http and https endpoints are supported",
            field="rpc_url",
        )

    try:
        response = requests.post(
            rpc_url,
            json={
                "jsonrpc": "2.0",
                "method": "eth_chainId",
                "params": [],
                "id": 1,
            },
            timeout=timeout,
        )

        # Check for HTTP errors
        if response.status_code != 200:
            raise RuntimeError(f"RPC request failed with status {response.status_code}")

        result = response.json()

        # Check for RPC errors
        if "error" in result:
            raise ValueError(f"RPC error: {result['error']}")

        return int(result["result"], 16)

    except requests.RequestException as e:
        raise RuntimeError(f"Network error during RPC call: {e}") from e


def verify_chain_id(config: ResolvedConfig, timeout: float = 30) -> int:
    """
    Check that a resolved network's endpoint serves the configured chain.

    This performs network I/O and is never called during resolution.

    Args:
        config: Resolved configuration
        timeout: Request timeout in seconds

    Returns:
        The confirmed chain ID

    Raises:
        ChainIdMismatchError: If the endpoint reports a different chain ID
        InvalidUrlError: If the RPC endpoint is a websocket URL
        RuntimeError, ValueError, KeyError: As raised by fetch_chain_id
    """
    reported = fetch_chain_id(config.profile.rpc_url, timeout=timeout)
    if reported != config.chain_id:
        raise ChainIdMismatchError(
            f"Network '{config.network}' is configured for chain {config.chain_id} "
            f"but its RPC endpoint reports chain {reported}"
        )

    logger.debug("Confirmed chain %d for network %s", reported, config.network)
    return reported
