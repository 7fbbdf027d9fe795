"""Filter marketplace lawyers down to those who can take a classified case.

A lawyer's ``authorized_courts`` lists the court levels they may plead
before. Everyone may handle first-instance work; appellate work also
accepts Supreme Court lawyers, while the Supreme Court and the Council of
State each require their own authorization.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from ..knowledge import CourtLevel, LawyerType, LegalCategory

_ACCEPTED_AUTHORIZATIONS: dict[CourtLevel, frozenset[CourtLevel]] = {
    CourtLevel.FIRST_INSTANCE: frozenset(CourtLevel),
    CourtLevel.APPEAL: frozenset({CourtLevel.APPEAL, CourtLevel.SUPREME_COURT}),
    CourtLevel.SUPREME_COURT: frozenset({CourtLevel.SUPREME_COURT}),
    CourtLevel.COUNCIL_OF_STATE: frozenset({CourtLevel.COUNCIL_OF_STATE}),
}


@dataclass
class LawyerCandidate:
    id: str
    specialties: list[LegalCategory] = field(default_factory=list)
    authorized_courts: list[CourtLevel] = field(default_factory=list)
    rating: float = 0.0
    is_available: bool = True
    status: str = "active"


def court_level_for_lawyer_type(lawyer_type: LawyerType | str) -> CourtLevel:
    lawyer_type = LawyerType(lawyer_type)
    if lawyer_type == LawyerType.REGULAR:
        return CourtLevel.FIRST_INSTANCE
    return CourtLevel(lawyer_type.value)


def authorized_court_levels(court_level: CourtLevel | str) -> frozenset[CourtLevel]:
    """Authorizations that satisfy a case heard at ``court_level``."""
    return _ACCEPTED_AUTHORIZATIONS[CourtLevel(court_level)]


def is_authorized(
    authorized_courts: Iterable[CourtLevel | str], court_level: CourtLevel | str
) -> bool:
    held = {CourtLevel(c) for c in authorized_courts} or {CourtLevel.FIRST_INSTANCE}
    return bool(held & authorized_court_levels(court_level))


def match_lawyers(
    lawyers: Iterable[LawyerCandidate],
    category: LegalCategory | str | None = None,
    lawyer_type: LawyerType | str | None = None,
) -> list[LawyerCandidate]:
    court_level = (
        court_level_for_lawyer_type(lawyer_type) if lawyer_type is not None else None
    )
    wanted = LegalCategory(category) if category is not None else None

    matched = []
    for lawyer in lawyers:
        if lawyer.status != "active" or not lawyer.is_available:
            continue
        if court_level is not None and not is_authorized(lawyer.authorized_courts, court_level):
            continue
        if wanted is not None and wanted not in lawyer.specialties:
            continue
        matched.append(lawyer)

    matched.sort(key=lambda lawyer: lawyer.rating, reverse=True)
    return matched
