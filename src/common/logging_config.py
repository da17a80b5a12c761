################################################################################
# File Name: logging_config.py
# Purpose/Description: Logging setup, PII masking and context logging
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 VIN Scout Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-02-09    | Ralph Agent   | Added VIN serial masking to the PII filter
# 2026-02-12    | Ralph Agent   | Dropped StructuredFormatter, handlers share one filter
# ================================================================================
################################################################################

"""
Logging configuration module.

Console and optional file logging with a PII filter that can also hide
VIN production serials. logWithContext appends key=value context.

Usage:
    from common.logging_config import setupLogging, getLogger

    setupLogging(level='INFO')
    logger = getLogger(__name__)
    logWithContext(logger, 'info', "Lookup completed", vin=vin)
"""

import logging
import re
import sys
from pathlib import Path
from typing import Any

# Default log format
DEFAULT_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s | %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# PII patterns for masking
PII_PATTERNS = {
    'email': re.compile(r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b'),
    'phone': re.compile(r'\b\d{3}[-.]\d{3}[-.]\d{4}\b'),
}

# VIN-shaped token: 11 leading characters kept, 6 serial characters masked
VIN_SERIAL_PATTERN = re.compile(r'\b([A-HJ-NPR-Z0-9]{11})[A-HJ-NPR-Z0-9]{6}\b')


class PIIMaskingFilter(logging.Filter):
    """
    Logging filter that masks PII in log messages.

    Detects and masks:
    - Email addresses
    - Phone numbers
    - VIN production serials (positions 12-17), when enabled
    """

    def __init__(self, maskVinSerials: bool = False):
        super().__init__()
        self.maskVinSerials = maskVinSerials

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Filter and mask PII in log record.

        Args:
            record: Log record to filter

        Returns:
            True (always allows record, but modifies it)
        """
        if hasattr(record, 'msg') and isinstance(record.msg, str):
            record.msg = self._maskPII(record.msg)

        return True

    def _maskPII(self, message: str) -> str:
        for name, pattern in PII_PATTERNS.items():
            message = pattern.sub(f'[{name.upper()}_MASKED]', message)

        if self.maskVinSerials:
            message = maskVinSerial(message)

        return message


def maskVinSerial(text: str) -> str:
    """
    Mask the production serial of every VIN-shaped token in text.

    Args:
        text: Text that may contain VINs

    Returns:
        Text with positions 12-17 of each VIN replaced by '*'
    """
    return VIN_SERIAL_PATTERN.sub(lambda m: m.group(1) + '*' * 6, text)


def setupLogging(
    level: str = 'INFO',
    logFormat: str | None = None,
    logFile: str | None = None,
    enablePIIMasking: bool = True,
    maskVinSerials: bool = False
) -> logging.Logger:
    """
    Configure application logging.

    Replaces any handlers on the root logger with a stdout handler and,
    when logFile is given, a UTF-8 file handler. Both share one format
    and one PII filter.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        logFormat: Custom format string
        logFile: Optional file path for log output
        enablePIIMasking: Whether to mask PII in logs
        maskVinSerials: Whether the PII filter also masks VIN serials

    Returns:
        Root logger instance
    """
    rootLogger = logging.getLogger()
    rootLogger.setLevel(getattr(logging, level.upper(), logging.INFO))
    rootLogger.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if logFile:
        Path(logFile).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(logFile, encoding='utf-8'))

    formatter = logging.Formatter(fmt=logFormat or DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
    piiFilter = PIIMaskingFilter(maskVinSerials=maskVinSerials) if enablePIIMasking else None

    for handler in handlers:
        handler.setFormatter(formatter)
        if piiFilter is not None:
            handler.addFilter(piiFilter)
        rootLogger.addHandler(handler)

    rootLogger.info(f"Logging configured | level={level}")

    return rootLogger


def getLogger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def logWithContext(
    logger: logging.Logger,
    level: str,
    message: str,
    **context: Any
) -> None:
    """
    Log a message with structured context.

    Args:
        logger: Logger instance
        level: Log level
        message: Log message
        **context: Additional context fields
    """
    logFunc = getattr(logger, level.lower(), logger.info)

    if context:
        contextStr = ' | ' + ' '.join(f'{k}={v}' for k, v in context.items())
        logFunc(message + contextStr)
    else:
        logFunc(message)
