################################################################################
# File Name: test_result_mapper.py
# Purpose/Description: Tests for NHTSA result error detection and mapping
# Author: Ralph Agent
# Creation Date: 2026-02-11
# Copyright: (c) 2026 VIN Scout Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-02-11    | Ralph Agent  | Initial implementation
# ================================================================================
################################################################################

"""
Tests for the vinscout.vehicle.mapper module and the NHTSA wire models.

Run with:
    pytest tests/test_result_mapper.py -v
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

srcPath = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(srcPath))

from vinscout.vehicle.mapper import hasError, primaryErrorText, toVehicle
from vinscout.vehicle.types import NhtsaResponse, NhtsaResult


class TestWireModels:
    """Tests for decoding the DecodeVinValues body."""

    def test_decode_teslaBody_hasOneResult(self, teslaResponseBody: Dict[str, Any]):
        """
        Given: The Tesla response body
        When: Parsed as NhtsaResponse
        Then: One result and the search criteria are captured
        """
        response = NhtsaResponse.model_validate_json(json.dumps(teslaResponseBody))

        assert len(response.results) == 1
        assert response.searchCriteria == 'VIN:5YJ3E1EA4NF306255'

    def test_decode_extraFields_areIgnored(self, teslaResult: Dict[str, Any]):
        """
        Given: A result with fields the model does not declare (ABS, PlantCountry)
        When: Parsed
        Then: Parsing succeeds and declared fields are populated
        """
        result = NhtsaResult.model_validate(teslaResult)

        assert result.make == 'TESLA'
        assert result.modelYear == '2022'

    def test_decode_missingSearchCriteria_isNone(self):
        """
        Given: A body without SearchCriteria
        When: Parsed
        Then: searchCriteria is None
        """
        response = NhtsaResponse.model_validate({'Results': []})

        assert response.searchCriteria is None


class TestHasError:
    """Tests for hasError()."""

    @pytest.mark.parametrize('code', ['0', '6', '0,6', ' 6 ', '6, 0'])
    def test_hasError_acceptableCodes_returnsFalse(self, code: str):
        """
        Given: ErrorCode made only of "0" and "6"
        When: hasError() is called
        Then: Returns False
        """
        assert hasError(NhtsaResult(errorCode=code)) is False

    @pytest.mark.parametrize('code', ['11', '1', '6,11', '0, 14', '5'])
    def test_hasError_genuineErrorCodes_returnsTrue(self, code: str):
        """
        Given: ErrorCode containing any code other than "0" or "6"
        When: hasError() is called
        Then: Returns True
        """
        assert hasError(NhtsaResult(errorCode=code)) is True

    @pytest.mark.parametrize('code', [None, ''])
    def test_hasError_absentOrEmpty_returnsFalse(self, code):
        """
        Given: ErrorCode absent or empty
        When: hasError() is called
        Then: Returns False
        """
        assert hasError(NhtsaResult(errorCode=code)) is False

    def test_hasError_errorFixture_returnsTrue(self, errorResponseBody: Dict[str, Any]):
        """
        Given: The error-code-11 response body
        When: hasError() is called on its result
        Then: Returns True
        """
        response = NhtsaResponse.model_validate(errorResponseBody)

        assert hasError(response.results[0]) is True


class TestPrimaryErrorText:
    """Tests for primaryErrorText()."""

    def test_primaryErrorText_noSemicolon_returnsWholeString(self):
        """
        Given: ErrorText "11 - Incorrect Model Year"
        When: primaryErrorText() is called
        Then: Returns the full string
        """
        result = NhtsaResult(errorText='11 - Incorrect Model Year')

        assert primaryErrorText(result) == '11 - Incorrect Model Year'

    def test_primaryErrorText_multipleSegments_returnsFirstTrimmed(self):
        """
        Given: ErrorText with several ';'-separated segments
        When: primaryErrorText() is called
        Then: Returns the first segment trimmed
        """
        result = NhtsaResult(
            errorText='  1 - Check Digit (9th position) does not calculate properly ; 5 - VIN has errors'
        )

        assert primaryErrorText(result) == '1 - Check Digit (9th position) does not calculate properly'

    @pytest.mark.parametrize('text', [None, '', '   ', ' ; '])
    def test_primaryErrorText_absentOrBlank_returnsNone(self, text):
        """
        Given: ErrorText absent, empty or blank
        When: primaryErrorText() is called
        Then: Returns None
        """
        assert primaryErrorText(NhtsaResult(errorText=text)) is None


class TestToVehicle:
    """Tests for toVehicle()."""

    def test_toVehicle_teslaResult_mapsAttributes(self, teslaResult: Dict[str, Any]):
        """
        Given: The Tesla result
        When: toVehicle() is called
        Then: Attributes are copied under their Vehicle names
        """
        vehicle = toVehicle('5YJ3E1EA4NF306255', NhtsaResult.model_validate(teslaResult))

        assert vehicle.year == '2022'
        assert vehicle.make == 'TESLA'
        assert vehicle.model == 'Model 3'
        assert vehicle.trim == 'Standard Range Plus'
        assert vehicle.bodyClass == 'Sedan/Saloon'
        assert vehicle.driveType == 'Rear-Wheel Drive'
        assert vehicle.fuelType == 'Electric'
        assert vehicle.engineModel == 'Electric'

    def test_toVehicle_emptyStrings_becomeNone(self, teslaResult: Dict[str, Any]):
        """
        Given: A result with EngineCylinders "" and DisplacementL ""
        When: toVehicle() is called
        Then: Those attributes are None, not empty strings
        """
        vehicle = toVehicle('5YJ3E1EA4NF306255', NhtsaResult.model_validate(teslaResult))

        assert vehicle.engineCylinders is None
        assert vehicle.engineDisplacementL is None

    def test_toVehicle_whitespaceOnly_becomesNone(self):
        """
        Given: A result whose Series is whitespace only
        When: toVehicle() is called
        Then: series is None and padded values are trimmed
        """
        result = NhtsaResult(series='   ', make='  HONDA ')

        vehicle = toVehicle('1HGCM82633A004352', result)

        assert vehicle.series is None
        assert vehicle.make == 'HONDA'

    def test_toVehicle_usesRequestedVinUppercased(self):
        """
        Given: A result echoing a different VIN
        When: toVehicle() is called with a lowercase requested VIN
        Then: Vehicle vin is the uppercased requested VIN
        """
        result = NhtsaResult(vin='ZZZZZZZZZZZZZZZZZ')

        vehicle = toVehicle('1hgcm82633a004352', result)

        assert vehicle.vin == '1HGCM82633A004352'

    @pytest.mark.parametrize('turbo,expected', [
        ('Yes', True),
        ('YES', True),
        ('yes', True),
        (' Yes ', True),
        ('No', False),
        ('', False),
        (None, False),
    ])
    def test_toVehicle_turbo_isYesCaseInsensitive(self, turbo, expected: bool):
        """
        Given: Various Turbo values
        When: toVehicle() is called
        Then: isTurbocharged is True only for "yes" in any case
        """
        vehicle = toVehicle('1HGCM82633A004352', NhtsaResult(turbo=turbo))

        assert vehicle.isTurbocharged is expected

    def test_toVehicle_fieldNameTranslation(self):
        """
        Given: A result using the wire names EngineHP and TransmissionSpeeds
        When: toVehicle() is called
        Then: Values land on engineHorsepower and transmissionSpeeds
        """
        result = NhtsaResult.model_validate({
            'EngineHP': '240',
            'EngineConfiguration': 'V-Shaped',
            'ValveTrainDesign': 'Single Overhead Cam (SOHC)',
            'TransmissionStyle': 'Automatic',
            'TransmissionSpeeds': '5',
            'Doors': '2',
        })

        vehicle = toVehicle('1HGCM82633A004352', result)

        assert vehicle.engineHorsepower == '240'
        assert vehicle.engineConfiguration == 'V-Shaped'
        assert vehicle.valveTrainDesign == 'Single Overhead Cam (SOHC)'
        assert vehicle.transmissionStyle == 'Automatic'
        assert vehicle.transmissionSpeeds == '5'
        assert vehicle.doors == '2'
