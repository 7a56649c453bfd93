"""
Data Model
----------
Records produced while extracting the underwriting syndicate of a prospectus.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, FrozenSet, Iterable, List, Optional, Tuple

DocumentText = Tuple[str, ...]


class RoleToken(Enum):
    """Syndicate role taxonomy. Lower priority is more senior."""

    SPONSOR = 'sponsor'
    COORDINATOR = 'coordinator'
    BOOKRUNNER = 'bookrunner'
    LEAD_MANAGER = 'leadManager'
    OTHER = 'other'

    @property
    def priority(self) -> int:
        return _ROLE_PRIORITY[self]


_ROLE_PRIORITY = {
    RoleToken.SPONSOR: 1,
    RoleToken.COORDINATOR: 2,
    RoleToken.BOOKRUNNER: 3,
    RoleToken.LEAD_MANAGER: 4,
    RoleToken.OTHER: 5,
}

NO_ROLE_PRIORITY = 99


def best_priority(roles: Iterable[RoleToken]) -> int:
    """Minimum priority among roles, or NO_ROLE_PRIORITY when empty."""
    return min((role.priority for role in roles), default=NO_ROLE_PRIORITY)


def sort_roles(roles: Iterable[RoleToken]) -> List[RoleToken]:
    return sorted(set(roles), key=lambda role: role.priority)


@dataclass(frozen=True)
class RoleMatch:
    roles: FrozenSet[RoleToken]
    priority: int
    raw_role: str


@dataclass(frozen=True)
class BankCandidate:
    raw_name: str
    normalized_name: str

    @property
    def key(self) -> str:
        return self.normalized_name.lower()


@dataclass(frozen=True)
class SectionCandidate:
    """One occurrence of the section title and what was learned about it."""

    start_offset: int
    matched_phrase: str
    context_window: str
    section_text: str = ""
    is_toc: bool = False
    is_authoritative: bool = False
    role_hits: int = 0
    # Trial parse of section_text, reused once the candidate wins
    appointments: Tuple["SyndicateAppointment", ...] = field(default=(), compare=False, repr=False)

    @property
    def bank_count(self) -> int:
        return len(self.appointments)


@dataclass
class SyndicateAppointment:
    bank: BankCandidate
    roles: set = field(default_factory=set)
    raw_role_texts: List[str] = field(default_factory=list)
    is_lead: bool = False

    @property
    def priority(self) -> int:
        return best_priority(self.roles)

    def merge(self, roles: Iterable[RoleToken], raw_role: str) -> None:
        """Fold a repeated mention of the same bank into this record."""
        self.roles.update(roles)
        if raw_role and raw_role not in self.raw_role_texts:
            self.raw_role_texts.append(raw_role)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'bank': self.bank.raw_name,
            'normalizedBank': self.bank.normalized_name,
            'roles': [role.value for role in sort_roles(self.roles)],
            'isLead': self.is_lead,
            'rawRole': '; '.join(self.raw_role_texts),
        }


@dataclass(frozen=True)
class ExtractionResult:
    section_found: bool
    appointments: Tuple[SyndicateAppointment, ...] = ()
    raw_section_text: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'sectionFound': self.section_found,
            'appointments': [appointment.to_dict() for appointment in self.appointments],
            'rawSectionText': self.raw_section_text,
        }


def assign_leads(appointments: List[SyndicateAppointment]) -> List[SyndicateAppointment]:
    """
    Flag lead appointments and order the list by seniority.

    An appointment is lead when its best role priority equals the best
    priority present in the whole set. Appointments without roles are never
    lead. The sort is stable, so first-seen order breaks ties.
    """
    top = min((appointment.priority for appointment in appointments), default=NO_ROLE_PRIORITY)
    for appointment in appointments:
        appointment.is_lead = top != NO_ROLE_PRIORITY and appointment.priority == top
    return sorted(appointments, key=lambda appointment: appointment.priority)
