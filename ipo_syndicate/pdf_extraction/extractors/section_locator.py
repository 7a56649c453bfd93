import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from ... import settings
from ..models import SectionCandidate
from ..utils.pattern_registry import RuleSet, default_rules
from ..utils.text_processing import TextProcessor
from .appointment_extractor import AppointmentExtractor
from .role_classifier import RoleClassifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocatorResult:
    candidate: Optional[SectionCandidate]
    section_found: bool
    candidates: Tuple[SectionCandidate, ...] = ()


class SectionLocator:
    """
    Finds the authoritative "Parties Involved" section of a prospectus.

    The title shows up in the table of contents, in cross references and in
    running headers as well as at the real section, so every occurrence is
    scored and the one whose trial parse yields the most appointments wins.
    """

    def __init__(self, rules: Optional[RuleSet] = None,
                 role_classifier: Optional[RoleClassifier] = None,
                 extractor: Optional[AppointmentExtractor] = None,
                 text_processor: Optional[TextProcessor] = None,
                 window: int = settings.SECTION_WINDOW_CHARS,
                 toc_scan: int = settings.TOC_LEADER_SCAN_CHARS,
                 min_body: int = settings.MIN_SECTION_BODY_CHARS,
                 min_end_offset: int = settings.MIN_SECTION_END_OFFSET,
                 max_section: int = settings.MAX_SECTION_CHARS):
        self.rules = rules or default_rules()
        self.text_processor = text_processor or TextProcessor()
        self.role_classifier = role_classifier or RoleClassifier(rules=self.rules)
        self.extractor = extractor or AppointmentExtractor(rules=self.rules, role_classifier=self.role_classifier)
        self.window = window
        self.toc_scan = toc_scan
        self.min_body = min_body
        self.min_end_offset = min_end_offset
        self.max_section = max_section

    def locate(self, text: str) -> LocatorResult:
        """
        Locate the syndicate section in a joined document text.

        Args:
            text: Full document text

        Returns:
            LocatorResult with the winning candidate (or the best diagnostic
            window when nothing qualifies) and every candidate considered
        """
        matches = list(self.rules.section_title.finditer(text or ''))
        if not matches:
            logger.info("No section title found in document")
            return LocatorResult(candidate=None, section_found=False)

        next_starts = [match.start() for match in matches[1:]] + [len(text)]
        candidates = [
            self._inspect(text, match, next_start)
            for match, next_start in zip(matches, next_starts)
        ]

        winner = None
        for candidate in candidates:
            if candidate.is_toc or not candidate.is_authoritative:
                continue
            if winner is None or candidate.bank_count > winner.bank_count:
                winner = candidate

        if winner:
            logger.debug(
                f"Section at offset {winner.start_offset} chosen from {len(candidates)} "
                f"candidates ({winner.bank_count} appointments in trial parse)"
            )
            return LocatorResult(candidate=winner, section_found=True, candidates=tuple(candidates))

        # Best diagnostic window: non-index entries first, then the most role words, earliest on ties
        fallback = max(candidates, key=lambda c: (not c.is_toc, c.role_hits))
        logger.info(f"{len(candidates)} title matches, none authoritative")
        return LocatorResult(candidate=fallback, section_found=False, candidates=tuple(candidates))

    def _inspect(self, text: str, match, next_title: int) -> SectionCandidate:
        start = match.start()
        candidate = SectionCandidate(
            start_offset=start,
            matched_phrase=match.group(0),
            context_window=text[start:start + self.window]
        )

        if self._has_toc_leader(text, match.end()):
            is_toc, is_authoritative = True, False
        else:
            is_authoritative = self._is_authoritative(candidate.context_window)
            # A short body only marks an index entry when no role heading follows
            is_toc = not is_authoritative and self._is_short_body(text, match.end(), next_title)
        section_text = self._section_text(text, start)
        appointments = tuple(self.extractor.extract(section_text)) if is_authoritative else ()

        return replace(
            candidate,
            section_text=section_text,
            is_toc=is_toc,
            is_authoritative=is_authoritative,
            role_hits=len(self.rules.role_shape.findall(candidate.context_window)),
            appointments=appointments
        )

    def _has_toc_leader(self, text: str, title_end: int) -> bool:
        return self.rules.toc_leader.search(text, title_end, title_end + self.toc_scan) is not None

    def _is_short_body(self, text: str, title_end: int, next_title: int) -> bool:
        body_end = min(next_title, title_end + self.window)
        for pattern in self.rules.section_end_markers:
            marker = pattern.search(text, title_end, body_end)
            if marker:
                body_end = marker.start()
        return len(text[title_end:body_end].strip()) < self.min_body

    def _is_authoritative(self, window: str) -> bool:
        if self.rules.tab_after_heading.search(window):
            return True

        # The title line itself is skipped
        for line in self.text_processor.split_lines(window)[1:]:
            for cell in self.text_processor.split_cells(line):
                if self.role_classifier.classify(cell) or self.extractor.split_inline(cell):
                    return True
        return False

    def _section_text(self, text: str, start: int) -> str:
        limit = min(len(text), start + self.max_section)
        end = limit
        for pattern in self.rules.section_end_markers:
            marker = pattern.search(text, start + self.min_end_offset + 1, limit)
            if marker and marker.start() < end:
                end = marker.start()
        return text[start:end]

