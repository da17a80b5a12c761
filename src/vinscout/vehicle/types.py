################################################################################
# File Name: types.py
# Purpose/Description: Vehicle record, NHTSA wire models and HTTP exchange types
# Author: Ralph Agent
# Creation Date: 2026-02-09
# Copyright: (c) 2026 VIN Scout Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-02-09    | Ralph Agent  | Initial creation
# 2026-02-11    | Ralph Agent  | Added describe() for CLI output
# ================================================================================
################################################################################

"""
Vehicle types module.

Contains the records that flow through a lookup:
- Vehicle: canonical decoded-vehicle record (immutable)
- NhtsaResult / NhtsaResponse: wire shape of the vPIC DecodeVinValues endpoint
- HttpRequest / HttpResponse: one request/response exchange with a transport
"""

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

# ================================================================================
# Vehicle
# ================================================================================

@dataclass(frozen=True)
class Vehicle:
    """
    A decoded vehicle.

    Optional string attributes are either None or non-empty. The vin is
    always stored uppercase.

    Attributes:
        vin: Vehicle Identification Number (uppercase)
        year: Model year, e.g. "2022"
        make: Manufacturer brand, e.g. "TESLA"
        model: Model name, e.g. "Model 3"
        trim: Trim level
        series: Series designation
        bodyClass: Body class, e.g. "Sedan/Saloon"
        driveType: Drive type, e.g. "Rear-Wheel Drive"
        doors: Number of doors
        engineHorsepower: Engine brake horsepower, e.g. "240"
        engineConfiguration: Engine configuration, e.g. "V-Shaped"
        engineCylinders: Cylinder count, e.g. "6"
        engineDisplacementL: Displacement in litres, e.g. "2.998832712"
        engineModel: Engine model code, e.g. "J30A4"
        fuelType: Primary fuel type, e.g. "Gasoline"
        valveTrainDesign: Valve train design, e.g. "Single Overhead Cam (SOHC)"
        isTurbocharged: True if the API reports a turbo
        transmissionStyle: Transmission style, e.g. "Automatic"
        transmissionSpeeds: Transmission speed count, e.g. "5"
    """
    vin: str
    year: Optional[str] = None
    make: Optional[str] = None
    model: Optional[str] = None
    trim: Optional[str] = None
    series: Optional[str] = None
    bodyClass: Optional[str] = None
    driveType: Optional[str] = None
    doors: Optional[str] = None
    engineHorsepower: Optional[str] = None
    engineConfiguration: Optional[str] = None
    engineCylinders: Optional[str] = None
    engineDisplacementL: Optional[str] = None
    engineModel: Optional[str] = None
    fuelType: Optional[str] = None
    valveTrainDesign: Optional[str] = None
    isTurbocharged: bool = False
    transmissionStyle: Optional[str] = None
    transmissionSpeeds: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.vin or not self.vin.strip():
            raise ValueError("Vehicle vin must be a non-empty string")
        if self.vin != self.vin.upper():
            object.__setattr__(self, 'vin', self.vin.upper())

    def toDict(self) -> dict[str, Any]:
        """Convert vehicle to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def fromDict(cls, data: dict[str, Any]) -> 'Vehicle':
        """
        Build a vehicle from a dictionary produced by toDict().

        Unknown keys are ignored so older or newer stored records still load.

        Raises:
            ValueError: If the dictionary has no usable 'vin'
        """
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        if not isinstance(values.get('vin'), str):
            raise ValueError("Stored vehicle record has no 'vin'")
        values['isTurbocharged'] = bool(values.get('isTurbocharged', False))
        return cls(**values)

    def getVehicleSummary(self) -> str:
        """Get a human-readable vehicle summary."""
        parts = [p for p in (self.year, self.make, self.model) if p]
        if parts:
            return ' '.join(parts)
        return f"Vehicle (VIN: {self.vin})"

    def describe(self) -> str:
        """Multi-line description grouped into sections."""
        lines = ["-- Vehicle ------------------"]
        lines.append(f"  VIN             : {self.vin}")
        _addLine(lines, "Year", self.year)
        _addLine(lines, "Make", self.make)
        _addLine(lines, "Model", self.model)
        _addLine(lines, "Trim", self.trim)
        _addLine(lines, "Series", self.series)
        lines.append("  -- Body & Drive ------------")
        _addLine(lines, "Body Class", self.bodyClass)
        _addLine(lines, "Drive Type", self.driveType)
        _addLine(lines, "Doors", self.doors)
        lines.append("  -- Engine ------------------")
        _addLine(lines, "Horsepower", self.engineHorsepower, " hp")
        _addLine(lines, "Configuration", self.engineConfiguration)
        _addLine(lines, "Cylinders", self.engineCylinders)
        _addLine(lines, "Displacement", self.engineDisplacementL, "L")
        _addLine(lines, "Engine Model", self.engineModel)
        _addLine(lines, "Valve Train", self.valveTrainDesign)
        if self.isTurbocharged:
            _addLine(lines, "Turbo", "Yes")
        _addLine(lines, "Fuel Type", self.fuelType)
        _addLine(lines, "Transmission", self.transmissionStyle)
        _addLine(lines, "Speeds", self.transmissionSpeeds)
        lines.append("-----------------------------")
        return '\n'.join(lines)


def _addLine(lines: list[str], label: str, value: Optional[str], suffix: str = '') -> None:
    if value is not None:
        lines.append(f"  {label:<16}: {value}{suffix}")


# ================================================================================
# NHTSA vPIC Wire Models
# ================================================================================

class NhtsaResult(BaseModel):
    """
    One flat result object from the DecodeVinValues endpoint.

    Every attribute is string-typed on the wire, even when numeric.
    ErrorCode "0" means success, "6" means the VIN was corrected
    (acceptable), any other code is a genuine error.
    """
    model_config = ConfigDict(extra='ignore', populate_by_name=True, frozen=True)

    errorCode: Optional[str] = Field(default=None, alias='ErrorCode')
    errorText: Optional[str] = Field(default=None, alias='ErrorText')
    vin: Optional[str] = Field(default=None, alias='VIN')
    modelYear: Optional[str] = Field(default=None, alias='ModelYear')
    make: Optional[str] = Field(default=None, alias='Make')
    model: Optional[str] = Field(default=None, alias='Model')
    trim: Optional[str] = Field(default=None, alias='Trim')
    series: Optional[str] = Field(default=None, alias='Series')
    bodyClass: Optional[str] = Field(default=None, alias='BodyClass')
    driveType: Optional[str] = Field(default=None, alias='DriveType')
    doors: Optional[str] = Field(default=None, alias='Doors')
    engineHp: Optional[str] = Field(default=None, alias='EngineHP')
    engineConfiguration: Optional[str] = Field(default=None, alias='EngineConfiguration')
    engineCylinders: Optional[str] = Field(default=None, alias='EngineCylinders')
    displacementL: Optional[str] = Field(default=None, alias='DisplacementL')
    engineModel: Optional[str] = Field(default=None, alias='EngineModel')
    fuelTypePrimary: Optional[str] = Field(default=None, alias='FuelTypePrimary')
    valveTrainDesign: Optional[str] = Field(default=None, alias='ValveTrainDesign')
    turbo: Optional[str] = Field(default=None, alias='Turbo')
    transmissionStyle: Optional[str] = Field(default=None, alias='TransmissionStyle')
    transmissionSpeeds: Optional[str] = Field(default=None, alias='TransmissionSpeeds')


class NhtsaResponse(BaseModel):
    """Top-level DecodeVinValues response: a Results list and the search criteria."""
    model_config = ConfigDict(extra='ignore', populate_by_name=True, frozen=True)

    results: list[NhtsaResult] = Field(alias='Results')
    searchCriteria: Optional[str] = Field(default=None, alias='SearchCriteria')


# ================================================================================
# HTTP Exchange Types
# ================================================================================

@dataclass(frozen=True)
class HttpRequest:
    """
    A fully formed HTTP GET request handed to a transport.

    Attributes:
        url: Absolute request URL
        headers: Request headers
        timeoutSeconds: Upper bound for the whole exchange
    """
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    timeoutSeconds: float = 15.0


@dataclass(frozen=True)
class HttpResponse:
    """
    Raw response returned by a transport.

    Attributes:
        body: Response body bytes
        statusCode: HTTP status code
    """
    body: bytes
    statusCode: int

    @property
    def isSuccess(self) -> bool:
        return 200 <= self.statusCode <= 299
