################################################################################
# File Name: secrets_loader.py
# Purpose/Description: .env loading and ${VAR:default} placeholder resolution
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 VIN Scout Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-02-09    | Ralph Agent   | .env parsing delegated to python-dotenv
# 2026-02-12    | Ralph Agent   | loadEnvFile returns loaded names as a list
# ================================================================================
################################################################################

"""
Environment-backed configuration values.

vinscout_config.json may reference environment variables with
${VAR} or ${VAR:default}. Variables come from the process environment,
topped up from a .env file (python-dotenv) that never overrides what is
already set. Values are never logged, only variable names.

Usage:
    from common.secrets_loader import loadConfigWithSecrets

    config = loadConfigWithSecrets('src/vinscout_config.json', '.env')
"""

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = '.env'

# ${NAME} or ${NAME:default}; the default may itself contain ':' (URLs)
PLACEHOLDER_PATTERN = re.compile(r'\$\{(?P<name>[^}:]+)(?::(?P<default>[^}]*))?\}')


def loadEnvFile(envPath: Optional[str] = None) -> List[str]:
    """
    Copy variables from a .env file into os.environ.

    Variables already in the environment win. A missing or unreadable
    file is not an error.

    Args:
        envPath: Path to the .env file (default: ./.env)

    Returns:
        Names of the variables that were added
    """
    envFile = Path(envPath or DEFAULT_ENV_FILE)
    if not envFile.is_file():
        logger.debug(f"No .env file at {envFile}")
        return []

    try:
        values = dotenv_values(envFile, encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read {envFile}: {e}")
        return []

    # dotenv reports a bare KEY line as None
    bare = [key for key, value in values.items() if value is None]
    if bare:
        logger.warning(f"Ignoring .env entries without a value: {', '.join(bare)}")

    added = [
        key for key, value in values.items()
        if value is not None and key not in os.environ
    ]
    for key in added:
        os.environ[key] = values[key]

    logger.info(f"Loaded {len(added)} variables from {envFile}")
    return added


def resolveSecrets(config: Any) -> Any:
    """
    Replace placeholders in every string of a JSON-like structure.

    Unset variables without a default are left as the literal placeholder.

    Args:
        config: dict, list, str or scalar

    Returns:
        A new structure with placeholders resolved; non-strings unchanged
    """
    if isinstance(config, str):
        return PLACEHOLDER_PATTERN.sub(_substitute, config)
    if isinstance(config, dict):
        return {key: resolveSecrets(value) for key, value in config.items()}
    if isinstance(config, list):
        return [resolveSecrets(item) for item in config]
    return config


def _substitute(match: re.Match) -> str:
    name = match.group('name')
    value = os.environ.get(name, match.group('default'))
    if value is None:
        logger.warning(f"{name} is not set and has no default")
        return match.group(0)
    return value


def loadConfigWithSecrets(
    configPath: str,
    envPath: Optional[str] = None
) -> Dict[str, Any]:
    """
    Load the .env file, read the JSON config and resolve its placeholders.

    Args:
        configPath: Path to the configuration JSON file
        envPath: Path to the .env file (default: ./.env)

    Returns:
        Parsed configuration with placeholders resolved

    Raises:
        FileNotFoundError: If the config file doesn't exist
        json.JSONDecodeError: If the config file is not valid JSON
    """
    loadEnvFile(envPath)

    configFile = Path(configPath)
    if not configFile.is_file():
        raise FileNotFoundError(f"Configuration file not found: {configPath}")

    logger.info(f"Reading configuration from {configFile}")
    return resolveSecrets(json.loads(configFile.read_text(encoding='utf-8')))
