"""
Flagbind Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .parser import Args, ParseError, ParseErrorKind, ParseOutcome

logger = logging.getLogger("flagbind")


__all__ = [
    "Args",
    "ParseError",
    "ParseErrorKind",
    "ParseOutcome",
]
