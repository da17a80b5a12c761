################################################################################
# File Name: __init__.py
# Purpose/Description: VIN Scout package initialization
# Author: Ralph Agent
# Creation Date: 2026-02-09
# Copyright: (c) 2026 VIN Scout Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-02-09    | Ralph Agent  | Initial package creation
# 2026-02-10    | Ralph Agent  | Added history, config and session
# ================================================================================
################################################################################
"""
VIN Scout Package.

Identifies a vehicle from its 17-character VIN:
- vehicle/: VIN validation, NHTSA lookup pipeline, result mapping, transport
- history/: Bounded, deduplicated history of decoded vehicles
- config/: Configuration loading and validation
- session: Application context composing lookup and history

Usage:
    from vinscout.config import loadVinScoutConfig
    from vinscout.session import createSessionFromConfig

    session = createSessionFromConfig(loadVinScoutConfig('vinscout_config.json'))
    outcome = session.decode('1HGCM82633A004352')
"""

__version__ = '1.0.0'
