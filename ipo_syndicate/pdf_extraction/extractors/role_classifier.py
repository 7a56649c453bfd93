import logging
from typing import Iterable, Optional

from ... import settings
from ..models import RoleMatch, RoleToken, best_priority
from ..utils.pattern_registry import RuleSet, default_rules
from ..utils.text_processing import TextProcessor

logger = logging.getLogger(__name__)


class RoleClassifier:
    """Maps role heading lines onto the syndicate role taxonomy."""

    def __init__(self, rules: Optional[RuleSet] = None, text_processor: Optional[TextProcessor] = None,
                 max_heading_length: int = settings.MAX_HEADING_LENGTH):
        self.rules = rules or default_rules()
        self.text_processor = text_processor or TextProcessor()
        self.max_heading_length = max_heading_length

    def classify(self, line: str) -> Optional[RoleMatch]:
        """
        Classify a suspected heading line.

        The ordered heading table is tried first. Lines that miss the table
        but still mention a syndicate function fall back to keyword
        classification rather than being dropped.

        Args:
            line: The line to classify

        Returns:
            RoleMatch with roles, priority and the raw heading, or None
        """
        match = self.classify_strict(line)
        if match:
            return match
        return self._classify_keywords(line)

    def classify_strict(self, line: str) -> Optional[RoleMatch]:
        """Classify a line using only the heading table."""
        heading = self.text_processor.normalize_heading(line)
        if not heading or len(heading) > self.max_heading_length:
            return None

        for pattern, roles in self.rules.role_headings:
            if pattern.match(heading):
                return self._build(roles, line)
        return None

    def _classify_keywords(self, line: str) -> Optional[RoleMatch]:
        heading = self.text_processor.normalize_heading(line)
        if not heading or len(heading) > self.max_heading_length:
            return None
        if not self.rules.role_shape.search(heading):
            return None
        if not self._looks_like_heading(heading):
            return None

        roles = set()
        for pattern, token in self.rules.role_keywords:
            if pattern.search(heading):
                roles.add(token)

        lower = heading.lower()
        # A bare "Manager(s)" is a lead manager unless it only qualifies a bookrunner role
        if 'manager' in lower and RoleToken.LEAD_MANAGER not in roles and RoleToken.OTHER not in roles:
            if RoleToken.BOOKRUNNER not in roles:
                roles.add(RoleToken.LEAD_MANAGER)

        if not roles:
            return None
        logger.debug(f"Heading '{heading}' classified by keywords as {sorted(r.value for r in roles)}")
        return self._build(roles, line)

    def _looks_like_heading(self, heading: str) -> bool:
        if self.rules.heading_bank_words.search(heading):
            return False
        if self.rules.heading_exclusion.search(heading):
            return False
        if heading.endswith('.') or heading.endswith(';'):
            return False
        if any(char.isdigit() for char in heading):
            return False
        return heading[0].isupper() and len(heading.split()) <= 20

    def _build(self, roles: Iterable[RoleToken], line: str) -> RoleMatch:
        roles = frozenset(roles)
        return RoleMatch(
            roles=roles,
            priority=self.priority_of(roles),
            raw_role=self.text_processor.clean_line(line)
        )

    @staticmethod
    def priority_of(roles: Iterable[RoleToken]) -> int:
        """Lowest (most senior) priority among roles."""
        return best_priority(roles)
