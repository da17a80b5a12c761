#!/usr/bin/env python3
################################################################################
# File Name: validate_config.py
# Purpose/Description: Validate VIN Scout configuration before running
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 VIN Scout Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-02-11    | Ralph Agent   | Checks VIN Scout config, history store and deps
# ================================================================================
################################################################################

"""
Configuration validation script.

Checks that dependencies are installed, the configuration loads and
validates, and the configured history store can be opened.

Usage:
    python validate_config.py
    python validate_config.py --config path/to/vinscout_config.json
    python validate_config.py --verbose
"""

import argparse
import importlib
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# Add src to path
srcPath = Path(__file__).parent / 'src'
if str(srcPath) not in sys.path:
    sys.path.insert(0, str(srcPath))

DEFAULT_CONFIG = str(srcPath / 'vinscout_config.json')

REQUIRED_PACKAGES = [
    ('python-dotenv', 'dotenv'),
    ('pydantic', 'pydantic'),
]


def printHeader(message: str) -> None:
    """Print a section header."""
    print()
    print("=" * 60)
    print(f"  {message}")
    print("=" * 60)


def printStatus(label: str, status: bool, details: str = "") -> None:
    """Print a status line with check mark or X."""
    icon = "[OK]" if status else "[X]"
    detail = f" - {details}" if details else ""
    print(f"  {icon} {label}{detail}")


def validateDependencies(verbose: bool = False) -> bool:
    """Check that third-party runtime packages import."""
    printHeader("Dependencies")

    allInstalled = True
    for packageName, importName in REQUIRED_PACKAGES:
        try:
            module = importlib.import_module(importName)
        except ImportError:
            printStatus(packageName, False, "not installed")
            allInstalled = False
            continue
        version = getattr(module, 'VERSION', getattr(module, '__version__', ''))
        printStatus(packageName, True, str(version) if verbose and version else "")

    if not allInstalled:
        print()
        print("  To fix: pip install -e .")

    return allInstalled


def validateConfig(
    configPath: str,
    envPath: Optional[str] = None,
    verbose: bool = False
) -> Optional[Dict[str, Any]]:
    """
    Load and validate the configuration file.

    Returns:
        Validated configuration, or None if it failed
    """
    from vinscout.config import VinScoutConfigError, loadVinScoutConfig

    printHeader("Configuration File")

    try:
        config = loadVinScoutConfig(configPath, envPath)
    except VinScoutConfigError as e:
        printStatus("Configuration valid", False, str(e))
        for label, fields in (('Missing', e.missingFields), ('Invalid', e.invalidFields)):
            if fields:
                print()
                print(f"  {label} fields:")
                for field in fields:
                    print(f"    - {field}")
        return None

    printStatus("Configuration valid", True, configPath)
    printStatus("API endpoint", True, config['vinDecoder']['apiBaseUrl'])
    printStatus("History storage", True, config['history']['storage'])

    if verbose:
        print()
        print("  Configuration sections:")
        for key in config.keys():
            print(f"    - {key}")

    return config


def validateHistoryStore(config: Dict[str, Any], verbose: bool = False) -> bool:
    """Open the configured history store and read it once."""
    from vinscout.history import HistoryStoreError, createHistoryStoreFromConfig

    printHeader("History Store")

    try:
        store = createHistoryStoreFromConfig(config)
        entries = store.load()
    except (HistoryStoreError, ValueError) as e:
        printStatus("History store readable", False, str(e))
        return False

    printStatus("History store readable", True, f"{len(entries)} entries")
    if verbose:
        for vehicle in entries:
            print(f"    - {vehicle.vin}")
    return True


def main() -> int:
    """Run all validations."""
    parser = argparse.ArgumentParser(description='Validate VIN Scout configuration')
    parser.add_argument('--config', '-c', default=DEFAULT_CONFIG,
                        help='Path to configuration file')
    parser.add_argument('--env-file', '-e', default=None,
                        help='Path to environment file (default: .env)')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Show detailed output')
    args = parser.parse_args()

    print()
    print("VIN Scout Configuration Validation")
    print("==================================")

    results = [('Dependencies', validateDependencies(args.verbose))]

    # The loader needs pydantic and dotenv importable
    if results[0][1]:
        config = validateConfig(args.config, args.env_file, args.verbose)
        results.append(('Configuration', config is not None))
        if config is not None:
            results.append(('History Store', validateHistoryStore(config, args.verbose)))

    printHeader("Summary")

    allPassed = True
    for name, passed in results:
        printStatus(name, passed)
        if not passed:
            allPassed = False

    print()
    if allPassed:
        print("All validations passed! Ready to run.")
        return 0
    else:
        print("Some validations failed. Please fix the issues above.")
        return 1


if __name__ == '__main__':
    sys.exit(main())
