################################################################################
# File Name: main.py
# Purpose/Description: Command-line entry point for VIN lookups
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 VIN Scout Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-02-11    | Ralph Agent   | Reworked as VIN lookup CLI with history output
# 2026-02-12    | Ralph Agent   | Blank VIN argument rejected as a usage error
# ================================================================================
################################################################################

"""
VIN Scout command-line entry point.

Looks up one VIN, prints the decoded vehicle and optionally the lookup
history.

Usage:
    python src/main.py --help
    python src/main.py 5YJ3E1EA7NF306255
    python src/main.py 1HGCM82633A004352 --history
    python src/main.py --clear-history --config path/to/config.json

Exit codes:
    0: Success
    1: Configuration error
    2: Lookup error (invalid VIN, network, API or decoding failure)
    3: Unexpected error
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, TextIO

# Resolve project paths relative to this script (not CWD)
srcPath = Path(__file__).resolve().parent
projectRoot = srcPath.parent
if str(srcPath) not in sys.path:
    sys.path.insert(0, str(srcPath))

DEFAULT_CONFIG = str(srcPath / 'vinscout_config.json')
DEFAULT_ENV = str(projectRoot / '.env')

from common.error_handler import handleError
from common.logging_config import getLogger, setupLogging
from vinscout.config import VinScoutConfigError, loadVinScoutConfig
from vinscout.session import VinScoutSession, createSessionFromConfig
from vinscout.vehicle import (
    ApiError,
    DecodingError,
    InvalidCharactersError,
    InvalidCheckDigitError,
    InvalidLengthError,
    LookupTimeoutError,
    NetworkIssueError,
    Vehicle,
    VinLookupError,
)

# Exit codes
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 1
EXIT_LOOKUP_ERROR = 2
EXIT_UNKNOWN_ERROR = 3


def parseArgs(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description='Identify a vehicle from its 17-character VIN',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python main.py 5YJ3E1EA7NF306255              Look up a VIN
  python main.py 1HGCM82633A004352 --history    Look up and show history
  python main.py --clear-history                Empty the stored history
  python main.py BADVIN --verbose               Run with debug logging
        '''
    )

    parser.add_argument(
        'vin',
        nargs='?',
        help='Vehicle Identification Number to look up'
    )

    parser.add_argument(
        '--history',
        action='store_true',
        help='Show the lookup history after the lookup'
    )

    parser.add_argument(
        '--clear-history',
        action='store_true',
        help='Clear the lookup history before anything else'
    )

    parser.add_argument(
        '--config', '-c',
        default=DEFAULT_CONFIG,
        help='Path to configuration file (default: src/vinscout_config.json)'
    )

    parser.add_argument(
        '--env-file', '-e',
        default=DEFAULT_ENV,
        help='Path to environment file (default: .env)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose (debug) logging'
    )

    parser.add_argument(
        '--version',
        action='version',
        version='%(prog)s 1.0.0'
    )

    args = parser.parse_args(argv)
    args.vin = args.vin.strip() if args.vin else None
    if not args.vin and not args.history and not args.clear_history:
        parser.error('a VIN is required unless --history or --clear-history is given')
    return args


def configureLogging(config: dict, verbose: bool = False) -> None:
    """
    Configure logging from the logging section of the configuration.

    Args:
        config: Validated configuration dictionary
        verbose: Force DEBUG level
    """
    logConfig = config.get('logging', {})
    setupLogging(
        level='DEBUG' if verbose else logConfig.get('level', 'INFO'),
        logFile=logConfig.get('file'),
        enablePIIMasking=logConfig.get('maskPII', True),
        maskVinSerials=logConfig.get('maskVinSerials', False)
    )


def getErrorTip(error: VinLookupError, vin: str) -> str:
    """
    Get a follow-up hint for a lookup error.

    Args:
        error: Classified lookup error
        vin: VIN as submitted

    Returns:
        One-line hint for the user
    """
    if isinstance(error, InvalidLengthError):
        return f"Tip: A VIN must be exactly 17 characters. Yours had {len(vin)}."
    if isinstance(error, InvalidCharactersError):
        return "Tip: VINs use only uppercase A-Z (excluding I, O, Q) and digits 0-9."
    if isinstance(error, InvalidCheckDigitError):
        return "Tip: The 9th character is a check digit. A typo elsewhere often causes this."
    if isinstance(error, LookupTimeoutError):
        return "Tip: Check your internet connection."
    if isinstance(error, ApiError):
        return f"API said: {error.text}"
    if isinstance(error, NetworkIssueError):
        return f"Network detail: {error.detail}"
    if isinstance(error, DecodingError):
        return f"Decode detail: {error.detail}"
    return "Tip: Try again later."


def formatHistoryLine(index: int, vehicle: Vehicle) -> str:
    """Format one history entry, e.g. '1. 2022 TESLA Model 3 - 5YJ3E1EA4NF306255'."""
    year = vehicle.year or '????'
    make = vehicle.make or 'Unknown'
    model = vehicle.model or 'Unknown'
    return f"{index}. {year} {make} {model} - {vehicle.vin}"


def printHistory(session: VinScoutSession, out: TextIO) -> None:
    """Print the lookup history, newest first."""
    print("Lookup History:", file=out)
    vehicles = session.recentVehicles()
    if not vehicles:
        print("  (empty)", file=out)
        return
    for index, vehicle in enumerate(vehicles, start=1):
        print(f"  {formatHistoryLine(index, vehicle)}", file=out)


def runLookup(
    session: VinScoutSession,
    vin: Optional[str],
    showHistory: bool = False,
    clearHistory: bool = False,
    out: TextIO = sys.stdout
) -> int:
    """
    Run the requested lookup and history actions.

    Args:
        session: Session to run against
        vin: VIN to look up, or None for history-only runs
        showHistory: Print history after the lookup
        clearHistory: Clear history before the lookup
        out: Stream for user-facing output

    Returns:
        Exit code
    """
    exitCode = EXIT_SUCCESS

    if clearHistory:
        session.clearHistory()
        print("History cleared.", file=out)

    if vin and vin.strip():
        outcome = session.decode(vin)
        print(f"Looking up VIN: {outcome.vin}", file=out)
        print("", file=out)

        if outcome.success:
            print("Success!", file=out)
            print(outcome.vehicle.describe(), file=out)
        else:
            print(f"Error: {outcome.errorMessage}", file=out)
            print(f"   {getErrorTip(outcome.error, outcome.vin)}", file=out)
            exitCode = EXIT_LOOKUP_ERROR

    if showHistory:
        print("", file=out)
        printHistory(session, out)

    return exitCode


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    args = parseArgs(argv)

    # Console logging until the configuration says otherwise
    setupLogging(level='DEBUG' if args.verbose else 'WARNING')
    logger = getLogger(__name__)

    try:
        config = loadVinScoutConfig(args.config, args.env_file)
        configureLogging(config, verbose=args.verbose)

        session = createSessionFromConfig(config)

        return runLookup(
            session,
            args.vin,
            showHistory=args.history,
            clearHistory=args.clear_history
        )

    except VinScoutConfigError as e:
        logger.error(f"Configuration error: {e}")
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return EXIT_LOOKUP_ERROR

    except Exception as e:
        handleError(e, context={'vin': args.vin}, reraise=False)
        print(f"Unexpected error: {e}", file=sys.stderr)
        return EXIT_UNKNOWN_ERROR


if __name__ == '__main__':
    sys.exit(main())
