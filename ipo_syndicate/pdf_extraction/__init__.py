"""
PDF Extraction Package
----------------------
A modular package for extracting the underwriting syndicate from IPO prospectuses.
"""

from .core import SyndicateExtractionEngine, extract_syndicate
from .exceptions import SyndicateExtractionError, InputError, MalformedDocumentError
from .extractors.bank_classifier import BankNameClassifier
from .extractors.role_classifier import RoleClassifier
from .extractors.section_locator import SectionLocator
from .extractors.appointment_extractor import AppointmentExtractor
from .models import ExtractionResult, RoleToken, SyndicateAppointment
from .text_source import PDFTextExtractor
from .utils.text_processing import TextProcessor

__all__ = [
    'SyndicateExtractionEngine',
    'extract_syndicate',
    'SyndicateExtractionError',
    'InputError',
    'MalformedDocumentError',
    'BankNameClassifier',
    'RoleClassifier',
    'SectionLocator',
    'AppointmentExtractor',
    'ExtractionResult',
    'RoleToken',
    'SyndicateAppointment',
    'PDFTextExtractor',
    'TextProcessor'
]
