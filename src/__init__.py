################################################################################
# File Name: __init__.py
# Purpose/Description: Application source root
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 VIN Scout Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-02-10    | Ralph Agent   | Source root for common/ and vinscout/
# ================================================================================
################################################################################

"""
Application source root.

- common/: Shared utilities (config validation, secrets, logging, errors)
- vinscout/: VIN validation, lookup, history and session

Entry point: main.py
"""

__version__ = '1.0.0'
