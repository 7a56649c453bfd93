import re
from typing import Iterable, List

CONTROL_CHARS = re.compile(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]')
DASHES = re.compile(r'[\-‐‑‒–—―]')


class TextProcessor:
    """Utility class for text processing operations."""

    def join_pages(self, pages: Iterable[str]) -> str:
        """
        Join page texts into one document string.

        Args:
            pages: Page texts in reading order

        Returns:
            The pages separated by newlines, with line endings normalized
        """
        text = '\n'.join(page or '' for page in pages)
        return text.replace('\r\n', '\n').replace('\r', '\n')

    def strip_control_chars(self, text: str) -> str:
        """Remove PDF extraction artifacts such as \\u0002 while keeping tabs and newlines."""
        if not text:
            return ""
        return CONTROL_CHARS.sub('', text)

    def clean_line(self, line: str) -> str:
        """
        Clean a single line: drop control characters, collapse spaces and tabs.

        Args:
            line: The raw line

        Returns:
            Cleaned line
        """
        if not line:
            return ""
        line = self.strip_control_chars(line)
        return re.sub(r'\s+', ' ', line).strip()

    def normalize_heading(self, line: str) -> str:
        """
        Normalize a suspected role heading for table lookup.

        Dashes become spaces, parenthetical notes such as "(in alphabetical order)"
        are dropped and split spellings ("Co-ordinator", "Book Runner") are joined.
        """
        text = self.clean_line(line)
        text = re.sub(r'\([^)]*\)', ' ', text)
        text = DASHES.sub(' ', text)
        text = re.sub(r'\bco\s+ordinator', 'coordinator', text, flags=re.IGNORECASE)
        text = re.sub(r'\bbook\s+runner', 'bookrunner', text, flags=re.IGNORECASE)
        text = text.rstrip(':').strip()
        return re.sub(r'\s+', ' ', text)

    def split_cells(self, line: str) -> List[str]:
        """Split a tab-delimited row into non-empty, cleaned cells."""
        return [cell for cell in (self.clean_line(part) for part in line.split('\t')) if cell]

    def split_lines(self, text: str) -> List[str]:
        """Split text into raw lines, keeping tabs intact."""
        if not text:
            return []
        return self.strip_control_chars(text).split('\n')

    def canonical_key(self, text: str) -> str:
        """Lowercase, punctuation-free form used for loose name comparison."""
        text = re.sub(r'[^\w\s]', ' ', (text or '').lower())
        return re.sub(r'\s+', ' ', text).strip()
