"""
IPO Syndicate Module
Recovers the underwriting syndicate (banks and their roles) from prospectus text

The package only creates loggers. Applications call configure_logging() once
at startup to get colored console output and, optionally, a log file.
"""

from .pdf_extraction import SyndicateExtractionEngine, extract_syndicate
from .pdf_extraction.utils.logging_config import configure_logging

__version__ = "0.3.0"

__all__ = [
    'SyndicateExtractionEngine',
    'configure_logging',
    'extract_syndicate',
]
