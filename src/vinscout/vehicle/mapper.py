################################################################################
# File Name: mapper.py
# Purpose/Description: Maps raw NHTSA results to Vehicle records
# Author: Ralph Agent
# Creation Date: 2026-02-09
# Copyright: (c) 2026 VIN Scout Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-02-09    | Ralph Agent  | Initial creation
# ================================================================================
################################################################################

"""
Result mapping module.

The vPIC API answers HTTP 200 even for VINs it cannot resolve; the real
outcome is embedded in ErrorCode / ErrorText. This module reads those
fields and copies the attribute fields into a clean Vehicle.

Usage:
    from vinscout.vehicle.mapper import hasError, primaryErrorText, toVehicle

    if hasError(result):
        raise ApiError(primaryErrorText(result) or 'unknown')
    vehicle = toVehicle(vin, result)
"""

from typing import Optional

from .types import NhtsaResult, Vehicle

# Error codes that still carry a usable decode ("6" = VIN corrected)
ACCEPTABLE_ERROR_CODES = frozenset({'0', '6'})


def hasError(result: NhtsaResult) -> bool:
    """
    Return True when the result signals a genuine error.

    ErrorCode may be a comma-separated list such as "6,11". Any code other
    than "0" or "6" is fatal. Absent or blank ErrorCode means no error.
    """
    if not result.errorCode:
        return False

    codes = [c.strip() for c in result.errorCode.split(',')]
    return any(code and code not in ACCEPTABLE_ERROR_CODES for code in codes)


def primaryErrorText(result: NhtsaResult) -> Optional[str]:
    """
    Return the first ';'-separated segment of ErrorText, trimmed.

    Returns None when ErrorText is absent or has no non-blank segment.
    """
    if not result.errorText:
        return None

    for segment in result.errorText.split(';'):
        segment = segment.strip()
        if segment:
            return segment

    return None


def toVehicle(vin: str, result: NhtsaResult) -> Vehicle:
    """
    Map a raw result to a Vehicle.

    Args:
        vin: The VIN the caller requested (the API's echoed VIN is ignored)
        result: Raw result from the API

    Returns:
        Vehicle with blank attributes mapped to None
    """
    return Vehicle(
        vin=vin.upper(),
        year=_nonEmpty(result.modelYear),
        make=_nonEmpty(result.make),
        model=_nonEmpty(result.model),
        trim=_nonEmpty(result.trim),
        series=_nonEmpty(result.series),
        bodyClass=_nonEmpty(result.bodyClass),
        driveType=_nonEmpty(result.driveType),
        doors=_nonEmpty(result.doors),
        engineHorsepower=_nonEmpty(result.engineHp),
        engineConfiguration=_nonEmpty(result.engineConfiguration),
        engineCylinders=_nonEmpty(result.engineCylinders),
        engineDisplacementL=_nonEmpty(result.displacementL),
        engineModel=_nonEmpty(result.engineModel),
        fuelType=_nonEmpty(result.fuelTypePrimary),
        valveTrainDesign=_nonEmpty(result.valveTrainDesign),
        isTurbocharged=(result.turbo or '').strip().lower() == 'yes',
        transmissionStyle=_nonEmpty(result.transmissionStyle),
        transmissionSpeeds=_nonEmpty(result.transmissionSpeeds),
    )


def _nonEmpty(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None
