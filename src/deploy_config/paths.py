"""Path management utilities for deploy-config library."""

from pathlib import Path
from typing import Optional, Union


def get_default_config_dir() -> Path:
    """
    Get default configuration directory (current project root).

    Returns:
        Path to the current working directory
    """
    return Path.cwd()


def get_default_env_file() -> Path:
    """
    Get default dotenv file location.

    Returns:
        Path to ./.env
    """
    return get_default_config_dir() / ".env"


def get_config_paths(config_root: Optional[Union[Path, str]] = None) -> tuple[Path, Path]:
    """
    Get configuration file paths.

    Args:
        config_root: Custom configuration directory (defaults to the current directory)

    Returns:
        Tuple of (networks_path, env_path)
    """
    if config_root is None:
        config_root = get_default_config_dir()
    else:
        config_root = Path(config_root).absolute()

    networks_path = config_root / "networks.json"
    env_path = config_root / ".env"

    return (networks_path, env_path)
