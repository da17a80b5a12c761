################################################################################
# File Name: validator.py
# Purpose/Description: Local VIN validation with ISO 3779 check digit
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
VIN validation module.

Rejects bad VINs before any network call. Checks run in order and stop at
the first failure:
1. Length must be exactly 17            -> InvalidLengthError
2. Characters must be A-H, J-N, P, R-Z, 0-9 (uppercase, no I/O/Q)
                                        -> InvalidCharactersError
3. Position 9 must equal the ISO 3779 check digit
                                        -> InvalidCheckDigitError

Check digit algorithm:
    Transliterate each character to an integer, multiply by the positional
    weight, sum, take modulo 11. A remainder of 10 is written 'X'.
    Position 9 has weight 0 because it holds the check digit itself.

Note that '00000000000000000' is valid: the weighted sum is 0 and the
check digit character is '0'.

Usage:
    from vinscout.vehicle import validate, isValidVin

    validate('1M8GDM9AXKP042788')   # raises VinValidationError on failure
"""

from .exceptions import InvalidCharactersError, InvalidCheckDigitError, InvalidLengthError

# ================================================================================
# Constants
# ================================================================================

VIN_LENGTH = 17

# Index of the check digit (position 9, 1-indexed)
CHECK_DIGIT_INDEX = 8

VALID_VIN_CHARACTERS = frozenset('ABCDEFGHJKLMNPRSTUVWXYZ0123456789')

# ISO 3779 transliteration table. I, O and Q never appear in a VIN.
# The gaps (H=8 -> J=1, N=5 -> P=7, P=7 -> R=9) are part of the standard.
TRANSLITERATION = {
    'A': 1, 'B': 2, 'C': 3, 'D': 4, 'E': 5, 'F': 6, 'G': 7, 'H': 8,
    'J': 1, 'K': 2, 'L': 3, 'M': 4, 'N': 5,
    'P': 7,
    'R': 9,
    'S': 2, 'T': 3, 'U': 4, 'V': 5, 'W': 6, 'X': 7, 'Y': 8, 'Z': 9,
    '0': 0, '1': 1, '2': 2, '3': 3, '4': 4,
    '5': 5, '6': 6, '7': 7, '8': 8, '9': 9,
}

# Positional weights for positions 1-17
POSITION_WEIGHTS = (8, 7, 6, 5, 4, 3, 2, 10, 0, 9, 8, 7, 6, 5, 4, 3, 2)


# ================================================================================
# Public API
# ================================================================================

def validate(vin: str) -> None:
    """
    Validate a VIN.

    Args:
        vin: Candidate VIN. Must already be uppercase; lowercase is rejected.

    Raises:
        InvalidLengthError: VIN is not 17 characters
        InvalidCharactersError: VIN has a character outside the VIN alphabet
        InvalidCheckDigitError: Position 9 does not match the computed digit
    """
    if len(vin) != VIN_LENGTH:
        raise InvalidLengthError(len(vin))

    if not all(c in VALID_VIN_CHARACTERS for c in vin):
        raise InvalidCharactersError()

    expected = computeCheckDigit(vin)
    actual = vin[CHECK_DIGIT_INDEX]
    if expected != actual:
        raise InvalidCheckDigitError(expected=expected, actual=actual)


def isValidVin(vin: str) -> bool:
    """Return True if validate() accepts the VIN."""
    try:
        validate(vin)
    except (InvalidLengthError, InvalidCharactersError, InvalidCheckDigitError):
        return False
    return True


def computeCheckDigit(vin: str) -> str:
    """
    Compute the ISO 3779 check digit for a 17-character VIN.

    Args:
        vin: 17-character VIN; the character at position 9 is ignored

    Returns:
        '0'-'9' or 'X'

    Raises:
        InvalidLengthError: VIN is not 17 characters
        InvalidCharactersError: A character has no transliteration value
    """
    if len(vin) != VIN_LENGTH:
        raise InvalidLengthError(len(vin))

    total = 0
    for char, weight in zip(vin, POSITION_WEIGHTS):
        value = TRANSLITERATION.get(char)
        if value is None:
            raise InvalidCharactersError()
        total += value * weight

    remainder = total % 11
    return 'X' if remainder == 10 else str(remainder)
