"""Utility modules for Stylemark.

Provides:
- text: escape_xml for markup-safe text
- logger: get_logger and log_diagnostic for logging
"""

from stylemark.utils.logger import get_logger, log_diagnostic
from stylemark.utils.text import escape_xml

__all__ = [
    "escape_xml",
    "get_logger",
    "log_diagnostic",
]
