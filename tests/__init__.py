################################################################################
# File Name: __init__.py
# Purpose/Description: Test package initialization
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 VIN Scout Project. All rights reserved.
################################################################################

"""
Test package for VIN Scout.

Run tests with:
    pytest tests/
    pytest tests/ -m "not integration"
"""
