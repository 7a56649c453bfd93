"""
Extractors Package
-----------------
Contains the classifiers and extractors that turn prospectus text into
syndicate appointments.
"""

from .base_extractor import BaseExtractor
from .bank_classifier import BankNameClassifier
from .role_classifier import RoleClassifier
from .appointment_extractor import AppointmentExtractor, ParseState
from .section_locator import SectionLocator, LocatorResult
from .fallback_extractor import FallbackBankExtractor

__all__ = [
    'BaseExtractor',
    'BankNameClassifier',
    'RoleClassifier',
    'AppointmentExtractor',
    'ParseState',
    'SectionLocator',
    'LocatorResult',
    'FallbackBankExtractor'
]
