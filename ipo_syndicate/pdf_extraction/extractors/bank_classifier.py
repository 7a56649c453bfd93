import logging
from typing import Optional

from ... import settings
from ..models import BankCandidate
from ..utils.pattern_registry import RuleSet, default_rules
from ..utils.text_processing import TextProcessor

logger = logging.getLogger(__name__)

LEGAL_WORDS = {'limited', 'ltd', 'co', 'company', 'corporation', 'corp', 'plc', 'llc', 'inc'}


class BankNameClassifier:
    """Decides whether a line names a financial institution and canonicalizes it."""

    def __init__(self, rules: Optional[RuleSet] = None, issuer_name: Optional[str] = None,
                 text_processor: Optional[TextProcessor] = None,
                 min_length: int = settings.MIN_BANK_NAME_LENGTH,
                 max_length: int = settings.MAX_BANK_NAME_LENGTH):
        """
        Initialize the bank name classifier.

        Args:
            rules: Compiled rule tables, defaults to the shared rule set
            issuer_name: Name of the listing applicant, never accepted as a bank
            text_processor: Text processor instance for line cleanup
            min_length: Shortest accepted bank name
            max_length: Longest accepted bank name
        """
        self.rules = rules or default_rules()
        self.text_processor = text_processor or TextProcessor()
        self.issuer_name = issuer_name
        self.min_length = min_length
        self.max_length = max_length
        self._issuer_keys = self._name_keys(issuer_name) if issuer_name else set()

    def classify(self, line: str) -> Optional[BankCandidate]:
        """
        Classify a trimmed line.

        Args:
            line: The line to check

        Returns:
            A BankCandidate if the line names a bank, None otherwise
        """
        name = self.clean_line(line)
        if not self._passes_rules(name):
            return None
        return BankCandidate(raw_name=name, normalized_name=self.normalize(name))

    def is_bank_name(self, line: str) -> bool:
        return self.classify(line) is not None

    def clean_line(self, line: str) -> str:
        """
        Strip layout debris around a bank name.

        Removes leading role and location prefixes left by merged lines,
        ", or HSBC" style nicknames and a dangling " (" that introduced a
        Chinese name.
        """
        name = self.text_processor.clean_line(line)
        name = self.rules.role_prefix.sub('', name)
        # Twice for nested prefixes like "Central Hong Kong"
        name = self.rules.location_prefix.sub('', name)
        name = self.rules.location_prefix.sub('', name)

        match = self.rules.nickname_suffix.match(name)
        if match:
            name = match.group(1)
        if name.endswith('('):
            name = name[:-1]
        return name.strip().rstrip(',').strip()

    def _passes_rules(self, name: str) -> bool:
        if not name:
            return False

        for pattern in self.rules.boilerplate:
            if pattern.search(name):
                return False
        if self.rules.street_words.search(name) and 'limited' not in name.lower():
            return False

        if len(name) < self.min_length or len(name) > self.max_length:
            return False

        if self.is_issuer_name(name):
            logger.debug(f"Rejected issuer's own name: {name}")
            return False

        if not self.rules.entity_suffix.search(name):
            return False
        if not self.rules.bank_start.match(name):
            return False

        # A role word ahead of the first bank word means a heading fused onto the name
        bank_word = self.rules.heading_bank_words.search(name)
        leading = name[:bank_word.start()] if bank_word else name
        if self.rules.role_shape.search(leading):
            return False

        for pattern in self.rules.noise_entities:
            if pattern.search(name):
                return False

        upper = name.upper()
        if any(keyword in upper for keyword in self.rules.company_keywords):
            if not any(word in upper for word in self.rules.company_exceptions):
                return False

        return True

    def is_issuer_name(self, name: str) -> bool:
        """Check whether a name is the issuer itself, ignoring case, punctuation and legal suffix."""
        if not self._issuer_keys:
            return False
        return bool(self._name_keys(name) & self._issuer_keys)

    def _name_keys(self, name: str) -> set:
        full = self.text_processor.canonical_key(name)
        bare = self.text_processor.canonical_key(self._strip_qualifiers(name))

        # Suffix words dropped from the key catch upper-case spellings like "CO., LTD."
        words = full.split()
        while words and words[-1] in LEGAL_WORDS:
            words.pop()
        return {key for key in (full, bare, ' '.join(words)) if key}

    def _strip_qualifiers(self, name: str) -> str:
        cleaned = self.text_processor.clean_line(name)
        for pattern in self.rules.jurisdiction_qualifiers:
            cleaned = pattern.sub(' ', cleaned)
        cleaned = self.text_processor.clean_line(cleaned)

        # Repeat until stable so "X Securities Co., Ltd." loses both suffixes
        while True:
            stripped = self.rules.legal_suffix.sub('', cleaned).strip()
            if stripped == cleaned:
                break
            cleaned = stripped
        return self.rules.leading_article.sub('', cleaned).strip()

    def normalize(self, name: str) -> str:
        """
        Canonicalize a bank name.

        Jurisdiction qualifiers and legal suffixes are stripped, then the alias
        table is consulted (longest variation first). Names without an alias
        keep their cleaned form. normalize(normalize(x)) == normalize(x).

        Args:
            name: The bank name to normalize

        Returns:
            Canonical short name
        """
        collapsed = self.text_processor.clean_line(name)
        cleaned = self._strip_qualifiers(collapsed)
        if not cleaned:
            return collapsed

        for pattern, canonical in self.rules.bank_aliases:
            if pattern.search(cleaned):
                return canonical
        return cleaned
