import logging
from typing import Dict, List, Optional

from ..models import RoleToken, SyndicateAppointment, assign_leads
from ..utils.pattern_registry import RuleSet, default_rules
from ..utils.text_processing import TextProcessor
from .bank_classifier import BankNameClassifier
from .base_extractor import BaseExtractor

logger = logging.getLogger(__name__)

FALLBACK_ROLE_TEXT = "Fallback extraction"


class FallbackBankExtractor(BaseExtractor):
    """
    Scans a whole document for well-known bank entities.

    Used when a section was found but its layout defeated the heading parser,
    typically two-column pages whose columns were interleaved by the PDF text
    layer. Roles are taken from role words on the same line as the bank.
    """

    def __init__(self, bank_classifier: Optional[BankNameClassifier] = None,
                 rules: Optional[RuleSet] = None,
                 text_processor: Optional[TextProcessor] = None):
        self.rules = rules or default_rules()
        self.text_processor = text_processor or TextProcessor()
        self.bank_classifier = bank_classifier or BankNameClassifier(rules=self.rules)

    def extract(self, text: str) -> List[SyndicateAppointment]:
        appointments: Dict[str, SyndicateAppointment] = {}

        for line in self.text_processor.split_lines(text):
            line = self.text_processor.clean_line(line)
            if not line:
                continue

            for pattern in self.rules.known_bank_patterns:
                for match in pattern.finditer(line):
                    # Lazy patterns can run across prose
                    bank = self.bank_classifier.classify(match.group(0))
                    if not bank:
                        logger.debug(f"Rejected known-bank hit: {match.group(0)}")
                        continue
                    roles = self._line_roles(line)

                    if bank.key in appointments:
                        appointments[bank.key].merge(roles, FALLBACK_ROLE_TEXT)
                    else:
                        appointments[bank.key] = SyndicateAppointment(
                            bank=bank,
                            roles=set(roles),
                            raw_role_texts=[FALLBACK_ROLE_TEXT]
                        )

        if appointments:
            logger.info(f"Known-bank scan found {len(appointments)} banks")
        return assign_leads(list(appointments.values()))

    def _line_roles(self, line: str) -> set:
        roles = {token for pattern, token in self.rules.role_keywords if pattern.search(line)}
        return roles or {RoleToken.OTHER}
