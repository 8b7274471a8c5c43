"""Environment snapshot helpers for deploy-config library."""

import logging
import os
from pathlib import Path
from typing import Dict, Optional, Union

from dotenv import dotenv_values

from .paths import get_default_env_file

logger = logging.getLogger(__name__)


def load_env(
    env_file: Optional[Union[Path, str]] = None,
    include_os_environ: bool = True,
    override: bool = False,
) -> Dict[str, str]:
    """
    Build an environment mapping for ConfigResolver.resolve.

    Values from the dotenv file are combined with the process environment.
    As with python-dotenv's load_dotenv, variables already set in the process
    environment win unless override is true. os.environ itself is never
    modified.

    Args:
        env_file: Path to a dotenv file (defaults to ./.env); a missing file
                  contributes nothing
        include_os_environ: Include the process environment
        override: Let dotenv values replace process environment values

    Returns:
        Dictionary mapping variable name -> value
    """
    if env_file is None:
        env_file = get_default_env_file()

    env_path = Path(env_file)
    file_values: Dict[str, str] = {}
    if env_path.is_file():
        # Keys declared without a value come back as None
        file_values = {k: v for k, v in dotenv_values(env_path).items() if v is not None}
        logger.debug("Loaded %d variable(s) from %s", len(file_values), env_path)
    else:
        logger.debug("No dotenv file at %s", env_path)

    if not include_os_environ:
        return file_values

    if override:
        return {**os.environ, **file_values}
    return {**file_values, **os.environ}
