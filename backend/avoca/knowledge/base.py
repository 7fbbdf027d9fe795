from dataclasses import dataclass
from enum import Enum


class LegalCategory(str, Enum):
    CRIMINAL = "criminal"
    FAMILY = "family"
    CIVIL = "civil"
    COMMERCIAL = "commercial"
    ADMINISTRATIVE = "administrative"
    LABOR = "labor"
    IMMIGRATION = "immigration"


class CourtLevel(str, Enum):
    FIRST_INSTANCE = "first_instance"
    APPEAL = "appeal"
    SUPREME_COURT = "supreme_court"
    COUNCIL_OF_STATE = "council_of_state"


class LawyerType(str, Enum):
    """Court tier a lawyer is authorized to plead before."""

    REGULAR = "regular"
    APPEAL = "appeal"
    SUPREME_COURT = "supreme_court"
    COUNCIL_OF_STATE = "council_of_state"


@dataclass(frozen=True)
class KeywordSet:
    label: str
    keywords: tuple[str, ...]  # English and Arabic, matched as substrings

    def score(self, lowered_text: str) -> int:
        """Number of distinct keywords present in already lower-cased text."""
        return sum(1 for kw in self.keywords if kw.lower() in lowered_text)


@dataclass(frozen=True)
class QuestionPair:
    en: str
    ar: str

    def as_list(self) -> list[str]:
        return [self.en, self.ar]
