"""
Core Extraction Engine
--------------------
Orchestrates syndicate extraction: PDF text, section location, appointment
parsing and the optional known-bank fallback.
"""

import logging
from typing import Iterable, Optional

from .. import settings
from .extractors.appointment_extractor import AppointmentExtractor
from .extractors.bank_classifier import BankNameClassifier
from .extractors.fallback_extractor import FallbackBankExtractor
from .extractors.role_classifier import RoleClassifier
from .extractors.section_locator import SectionLocator
from .models import ExtractionResult
from .text_source import PDFTextExtractor
from .utils.pattern_registry import RuleSet, default_rules
from .utils.text_processing import TextProcessor


class SyndicateExtractionEngine:
    """Orchestrates the syndicate extraction process."""

    def __init__(self, text_extractor=None, rules: Optional[RuleSet] = None,
                 use_fallback: bool = settings.USE_KNOWN_BANK_FALLBACK,
                 raw_text_limit: int = settings.RAW_SECTION_TEXT_LIMIT):
        """
        Initialize the extraction engine.

        Args:
            text_extractor: Object with an extract_text(bytes) method returning
                page texts, defaults to PyMuPDF
            rules: Compiled rule tables, defaults to the shared rule set
            use_fallback: Scan the whole document for known banks when the
                section parse finds none
            raw_text_limit: Maximum length of the section text kept in results
        """
        self.logger = logging.getLogger(__name__)
        self.text_extractor = text_extractor or PDFTextExtractor()
        self.rules = rules or default_rules()
        self.text_processor = TextProcessor()
        self.role_classifier = RoleClassifier(rules=self.rules, text_processor=self.text_processor)
        self.use_fallback = use_fallback
        self.raw_text_limit = raw_text_limit

    def extract_syndicate(self, data: bytes, issuer_name: Optional[str] = None) -> ExtractionResult:
        """
        Extract the syndicate from PDF bytes.

        Args:
            data: Raw PDF bytes
            issuer_name: Name of the listing applicant, excluded from the banks

        Returns:
            ExtractionResult for the document

        Raises:
            MalformedDocumentError: If the bytes cannot be parsed into text
        """
        pages = self.text_extractor.extract_text(data)
        return self.extract_from_pages(pages, issuer_name=issuer_name)

    def extract_from_pages(self, pages: Iterable[str], issuer_name: Optional[str] = None) -> ExtractionResult:
        """
        Extract the syndicate from already extracted page texts.

        Args:
            pages: Page texts in reading order
            issuer_name: Name of the listing applicant, excluded from the banks

        Returns:
            ExtractionResult for the document
        """
        text = self.text_processor.join_pages(pages)
        bank_classifier = BankNameClassifier(
            rules=self.rules, issuer_name=issuer_name, text_processor=self.text_processor
        )
        extractor = AppointmentExtractor(
            bank_classifier=bank_classifier,
            role_classifier=self.role_classifier,
            rules=self.rules,
            text_processor=self.text_processor
        )
        locator = SectionLocator(
            rules=self.rules,
            role_classifier=self.role_classifier,
            extractor=extractor,
            text_processor=self.text_processor
        )

        located = locator.locate(text)
        if not located.section_found:
            self.logger.warning(f"Syndicate section not found ({len(located.candidates)} title matches)")
            diagnostic = located.candidate.context_window if located.candidate else None
            return ExtractionResult(
                section_found=False,
                raw_section_text=self._cap(diagnostic)
            )

        section_text = located.candidate.section_text
        # The locator already parsed the winning section
        appointments = list(located.candidate.appointments)

        if not appointments and self.use_fallback:
            self.logger.info("No appointments in section, scanning document for known banks")
            appointments = FallbackBankExtractor(
                bank_classifier=bank_classifier,
                rules=self.rules,
                text_processor=self.text_processor
            ).extract(text)

        if appointments:
            leads = ', '.join(a.bank.normalized_name for a in appointments if a.is_lead)
            self.logger.info(f"Extracted {len(appointments)} syndicate banks (lead: {leads or 'none'})")
        else:
            self.logger.warning("Syndicate section found but no banks extracted")

        return ExtractionResult(
            section_found=True,
            appointments=tuple(appointments),
            raw_section_text=self._cap(section_text)
        )

    def _cap(self, text: Optional[str]) -> Optional[str]:
        if text is None:
            return None
        return text[:self.raw_text_limit]


def extract_syndicate(data: bytes, issuer_name: Optional[str] = None) -> ExtractionResult:
    """Extract the syndicate from PDF bytes with a default engine."""
    return SyndicateExtractionEngine().extract_syndicate(data, issuer_name=issuer_name)
