from abc import ABC, abstractmethod
from typing import List

from ..models import SyndicateAppointment


class BaseExtractor(ABC):
    """Base class for extractors that turn text into syndicate appointments."""

    @abstractmethod
    def extract(self, text: str) -> List[SyndicateAppointment]:
        """
        Extract appointments from text.

        Args:
            text: The text to extract appointments from

        Returns:
            Merged, lead-flagged appointments
        """
        pass
