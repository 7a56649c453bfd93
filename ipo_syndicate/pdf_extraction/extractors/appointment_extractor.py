import logging
import re
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ... import settings
from ..models import BankCandidate, RoleMatch, SyndicateAppointment, assign_leads
from ..utils.pattern_registry import RuleSet, default_rules
from ..utils.text_processing import TextProcessor
from .bank_classifier import BankNameClassifier
from .base_extractor import BaseExtractor
from .role_classifier import RoleClassifier

logger = logging.getLogger(__name__)

# A heading cut mid-phrase by a line break ends on one of these
OPEN_HEADING_TAIL = re.compile(r'(?:,|&|\band|\bJoint|\bGlobal|\bOverall|\bSole|\bLead)$', re.IGNORECASE)


class ParseState(Enum):
    AWAITING_HEADING = 'awaiting_heading'
    HEADING_FOUND = 'heading_found'
    COLLECTING_BANKS = 'collecting_banks'


class AppointmentExtractor(BaseExtractor):
    """
    Pairs role headings with the bank names listed beneath them.

    Works on both the two-column tab layout ("Sole Sponsor<TAB>Bank Limited")
    and the line-break layout where headings and banks sit on their own lines.
    """

    def __init__(self, bank_classifier: Optional[BankNameClassifier] = None,
                 role_classifier: Optional[RoleClassifier] = None,
                 rules: Optional[RuleSet] = None,
                 text_processor: Optional[TextProcessor] = None,
                 max_skipped: int = settings.MAX_SKIPPED_LINES):
        """
        Initialize the appointment extractor.

        Args:
            bank_classifier: Classifier deciding which cells are bank names
            role_classifier: Classifier deciding which cells are role headings
            rules: Compiled rule tables, defaults to the shared rule set
            text_processor: Text processor instance
            max_skipped: Unrecognized cells tolerated before the current heading is dropped
        """
        self.rules = rules or default_rules()
        self.text_processor = text_processor or TextProcessor()
        self.bank_classifier = bank_classifier or BankNameClassifier(rules=self.rules)
        self.role_classifier = role_classifier or RoleClassifier(rules=self.rules)
        self.max_skipped = max_skipped

    def extract(self, text: str) -> List[SyndicateAppointment]:
        """
        Extract merged, lead-flagged appointments from a section text.

        Args:
            text: The section text, title included

        Returns:
            Appointments sorted by seniority, first-seen order within a rank
        """
        cells = self.preprocess(text)
        appointments: Dict[str, SyndicateAppointment] = {}

        state = ParseState.AWAITING_HEADING
        current: Optional[RoleMatch] = None
        skipped = 0

        for cell in cells:
            if self._is_stop_marker(cell):
                logger.debug(f"End of syndicate listing at '{cell}'")
                break

            heading = self.role_classifier.classify(cell)
            if heading:
                current, state, skipped = heading, ParseState.HEADING_FOUND, 0
                continue

            split = self.split_inline(cell)
            if split:
                current, bank = split
                self._emit(appointments, bank, current)
                state, skipped = ParseState.COLLECTING_BANKS, 0
                continue

            bank = self.bank_classifier.classify(cell)
            if bank:
                if state is ParseState.AWAITING_HEADING:
                    logger.debug(f"Ignoring bank without a heading: {bank.raw_name}")
                    continue
                self._emit(appointments, bank, current)
                state, skipped = ParseState.COLLECTING_BANKS, 0
                continue

            if state is not ParseState.AWAITING_HEADING:
                skipped += 1
                if skipped > self.max_skipped:
                    state, current, skipped = ParseState.AWAITING_HEADING, None, 0

        return assign_leads(list(appointments.values()))

    def _emit(self, appointments: Dict[str, SyndicateAppointment], bank: BankCandidate, heading: RoleMatch) -> None:
        existing = appointments.get(bank.key)
        if existing:
            existing.merge(heading.roles, heading.raw_role)
            return
        appointments[bank.key] = SyndicateAppointment(
            bank=bank,
            roles=set(heading.roles),
            raw_role_texts=[heading.raw_role]
        )
        logger.debug(f"Found {bank.normalized_name} as {heading.raw_role}")

    def split_inline(self, cell: str) -> Optional[Tuple[RoleMatch, BankCandidate]]:
        """
        Split a cell that lost the tab between a heading and a bank name.

        "Sole Sponsor CICC Limited" becomes the "Sole Sponsor" heading and the
        "CICC Limited" bank. The longest heading prefix wins. Prefixes missing
        from the heading table are classified by keywords when they end on a
        role word.
        """
        words = cell.split()
        for cut in range(len(words) - 1, 0, -1):
            tail = ' '.join(words[cut:])
            if not tail[0].isupper():
                continue
            prefix = ' '.join(words[:cut])
            heading = self.role_classifier.classify_strict(prefix)
            if not heading and self.rules.role_shape.search(words[cut - 1]):
                heading = self.role_classifier.classify(prefix)
            if not heading:
                continue
            bank = self.bank_classifier.classify(tail)
            if bank:
                return heading, bank
        return None

    def preprocess(self, text: str) -> List[str]:
        """
        Turn raw section text into a flat list of cells.

        Drops page furniture and running headers, splits tab-delimited rows and
        rejoins headings and bank names that were wrapped over two lines.
        """
        cells = []
        for line in self.text_processor.split_lines(text):
            for cell in self.text_processor.split_cells(line):
                if self._is_furniture(cell):
                    continue
                cells.append(cell)
        return self._join_bank_names(self._join_headings(cells))

    def _is_furniture(self, cell: str) -> bool:
        if any(pattern.match(cell) for pattern in self.rules.page_furniture):
            return True
        return self.rules.section_title.fullmatch(cell) is not None

    def _is_stop_marker(self, cell: str) -> bool:
        return any(pattern.match(cell) for pattern in self.rules.extractor_stop_markers)

    def _join_headings(self, cells: List[str]) -> List[str]:
        joined = []
        index = 0
        while index < len(cells):
            cell = cells[index]
            while index + 1 < len(cells) and self._continues_heading(cell, cells[index + 1]):
                cell = f"{cell} {cells[index + 1]}"
                index += 1
            joined.append(cell)
            index += 1
        return joined

    def _continues_heading(self, cell: str, following: str) -> bool:
        open_tail = OPEN_HEADING_TAIL.search(cell) is not None
        if not open_tail:
            # "and Joint Lead Managers" style second lines
            if not following[0].islower() or not self.rules.role_shape.search(following):
                return False
            if not self.rules.role_shape.search(cell):
                return False
        if self._is_stop_marker(following):
            return False
        if self.bank_classifier.classify(cell) or self.bank_classifier.classify(following):
            return False
        return self.role_classifier.classify(f"{cell} {following}") is not None

    def _join_bank_names(self, cells: List[str]) -> List[str]:
        joined = []
        index = 0
        while index < len(cells):
            cell = cells[index]
            consumed = self._wrapped_bank_length(cells, index)
            if consumed:
                cell = ' '.join(cells[index:index + consumed + 1])
                index += consumed
            joined.append(cell)
            index += 1
        return joined

    def _wrapped_bank_length(self, cells: List[str], index: int) -> int:
        # Number of continuation cells that complete the bank name starting at index
        cell = cells[index]
        if not cell[0].isupper():
            return 0
        if self.role_classifier.classify(cell) or self.bank_classifier.classify(cell):
            return 0

        # Three-line names are only joined behind a recognized bank start
        max_offset = 2 if any(pattern.match(cell) for pattern in self.rules.wrapped_bank_start) else 1
        parts = [cell]
        for offset in range(1, max_offset + 1):
            if index + offset >= len(cells):
                break
            following = cells[index + offset]
            if not any(pattern.match(following) for pattern in self.rules.bank_continuation):
                break
            if self.bank_classifier.classify(following):
                break
            parts.append(following)
            if self.bank_classifier.classify(' '.join(parts)):
                return offset
        return 0
