"""Custom exception classes for deploy-config library."""

from typing import Optional


class ConfigurationError(Exception):
    """Base exception for configuration resolution errors."""

    pass


class UnknownNetworkError(ConfigurationError, ValueError):
    """Raised when requested network is not registered."""

    pass


class DuplicateNetworkError(ConfigurationError, ValueError):
    """Raised when a network name is registered twice."""

    pass


class DuplicateChainIdError(ConfigurationError, ValueError):
    """Raised when a chain ID is already owned by a different network."""

    pass


class MissingCredentialError(ConfigurationError, LookupError):
    """Raised when a referenced credential is absent from the environment."""

    def __init__(self, key: str, network: Optional[str] = None):
        self.key = key
        self.network = network
        if network is None:
            message = f"Missing credential '{key}'"
        else:
            message = f"Missing credential '{key}' required by network '{network}'"
        super().__init__(message)


class InvalidUrlError(ConfigurationError, ValueError):
    """Raised when a URL field is not a well-formed URL."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class InvalidChainIdError(ConfigurationError, ValueError):
    """Raised when a chain ID is not a positive integer."""

    pass


class InvalidOptimizerError(ConfigurationError, ValueError):
    """Raised when optimizer settings are out of range or malformed."""

    pass


class InvalidCompilerVersionError(ConfigurationError, ValueError):
    """Raised when a compiler version string is not a release version."""

    pass


class InvalidCompilerSettingError(ConfigurationError, ValueError):
    """Raised when a compiler setting such as viaIR or bytecodeHash is invalid."""

    pass


class InvalidTimeoutError(ConfigurationError, ValueError):
    """Raised when an RPC timeout is not a non-negative integer."""

    pass


class DefinitionError(ConfigurationError, ValueError):
    """Raised when a network definition file entry is malformed."""

    pass


class ChainIdMismatchError(ConfigurationError):
    """Raised when an RPC endpoint reports a different chain than configured."""

    pass
