################################################################################
# File Name: conftest.py
# Purpose/Description: Pytest fixtures and configuration
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 VIN Scout Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-02-11    | Ralph Agent   | VIN Scout fixtures: fake transport, NHTSA bodies
# ================================================================================
################################################################################

"""
Pytest configuration and shared fixtures.

Fixtures defined here are available to all test files automatically.

Usage:
    def test_something(fakeTransport, teslaResponseBody):
        fakeTransport.respondWith(teslaResponseBody)
"""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Generator

import pytest

# Add src to path for imports
srcPath = Path(__file__).parent.parent / 'src'
if str(srcPath) not in sys.path:
    sys.path.insert(0, str(srcPath))

from tests.test_utils import VALID_HONDA_VIN, FakeTransport, createTestConfig
from vinscout.vehicle.types import Vehicle


# ================================================================================
# Transport Fixtures
# ================================================================================

@pytest.fixture
def fakeTransport() -> FakeTransport:
    """Provide an unscripted fake transport."""
    return FakeTransport()


# ================================================================================
# NHTSA Response Fixtures
# ================================================================================

@pytest.fixture
def teslaResult() -> Dict[str, Any]:
    """
    Provide the flat NHTSA result for a 2022 Tesla Model 3.

    Returns:
        Result object as returned by DecodeVinValues
    """
    return {
        'ABS': '',
        'BodyClass': 'Sedan/Saloon',
        'DisplacementL': '',
        'DriveType': 'Rear-Wheel Drive',
        'EngineCylinders': '',
        'EngineModel': 'Electric',
        'ErrorCode': '0',
        'ErrorText': '0 - VIN decoded clean. Check Digit (9th position) is correct',
        'FuelTypePrimary': 'Electric',
        'Make': 'TESLA',
        'Manufacturer': 'TESLA, INC.',
        'Model': 'Model 3',
        'ModelYear': '2022',
        'PlantCountry': 'UNITED STATES (USA)',
        'Trim': 'Standard Range Plus',
        'VehicleType': 'PASSENGER CAR',
        'VIN': '5YJ3E1EA4NF306255',
    }


@pytest.fixture
def teslaResponseBody(teslaResult: Dict[str, Any]) -> Dict[str, Any]:
    """Provide the full DecodeVinValues body for the Tesla result."""
    return {
        'Count': 1,
        'Message': 'Results returned successfully',
        'SearchCriteria': 'VIN:5YJ3E1EA4NF306255',
        'Results': [teslaResult],
    }


@pytest.fixture
def errorResponseBody() -> Dict[str, Any]:
    """Provide a DecodeVinValues body whose result carries error code 11."""
    return {
        'Count': 1,
        'Message': 'Results returned successfully',
        'SearchCriteria': 'VIN:ZZZZZZZZZZZZZZZZ',
        'Results': [
            {
                'ErrorCode': '11',
                'ErrorText': (
                    '11 - Incorrect Model Year (Decoded Year is inconsistent '
                    'with the model year in the VIN)'
                ),
                'Make': '',
                'Manufacturer': '',
                'Model': '',
                'ModelYear': '',
                'VIN': 'ZZZZZZZZZZZZZZZZ',
                'BodyClass': '',
                'DriveType': '',
                'EngineCylinders': '',
                'DisplacementL': '',
                'FuelTypePrimary': '',
                'EngineModel': '',
                'PlantCountry': '',
                'Trim': '',
                'VehicleType': '',
            }
        ],
    }


# ================================================================================
# Vehicle Fixtures
# ================================================================================

@pytest.fixture
def sampleVehicle() -> Vehicle:
    """Provide a fully populated vehicle."""
    return Vehicle(
        vin=VALID_HONDA_VIN,
        year='2003',
        make='HONDA',
        model='Accord',
        trim='EX-V6',
        bodyClass='Coupe',
        driveType='FWD/Front-Wheel Drive',
        doors='2',
        engineHorsepower='240',
        engineConfiguration='V-Shaped',
        engineCylinders='6',
        engineDisplacementL='3.0',
        engineModel='J30A4',
        fuelType='Gasoline',
        valveTrainDesign='Single Overhead Cam (SOHC)',
        isTurbocharged=False,
        transmissionStyle='Automatic',
        transmissionSpeeds='5',
    )


# ================================================================================
# Configuration Fixtures
# ================================================================================

@pytest.fixture
def sampleConfig() -> Dict[str, Any]:
    """
    Provide sample configuration for tests.

    Returns:
        Dictionary with test configuration values
    """
    return createTestConfig()


@pytest.fixture
def tempConfigFile(tmp_path: Path, sampleConfig: Dict[str, Any]) -> Path:
    """
    Create temporary config file for testing.

    Returns:
        Path to temporary config file
    """
    configFile = tmp_path / 'vinscout_config.json'
    configFile.write_text(json.dumps(sampleConfig), encoding='utf-8')
    return configFile


# ================================================================================
# Environment Fixtures
# ================================================================================

TEST_ENV_VARS = [
    'VINSCOUT_API_BASE_URL',
    'VINSCOUT_HISTORY_STORAGE',
    'VINSCOUT_DB_PATH',
    'VINSCOUT_LOG_LEVEL',
    'TEST_VAR',
]


@pytest.fixture
def cleanEnv() -> Generator[None, None, None]:
    """
    Ensure clean environment with no test variables.

    Removes test variables before test, restores after.
    """
    saved = {var: os.environ.pop(var, None) for var in TEST_ENV_VARS}

    yield

    for var in TEST_ENV_VARS:
        os.environ.pop(var, None)
        if saved[var] is not None:
            os.environ[var] = saved[var]


# ================================================================================
# Logging Fixtures
# ================================================================================

@pytest.fixture(autouse=True)
def restoreRootLogging() -> Generator[None, None, None]:
    """Drop handlers installed by setupLogging() and restore the root level."""
    rootLogger = logging.getLogger()
    savedLevel = rootLogger.level

    yield

    # Exact type match leaves pytest's own capture handlers alone
    for handler in list(rootLogger.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            rootLogger.removeHandler(handler)
            handler.close()
    rootLogger.setLevel(savedLevel)


# ================================================================================
# Pytest Configuration
# ================================================================================

def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
