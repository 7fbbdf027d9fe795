from types import MappingProxyType

from . import categories, court_levels
from .base import CourtLevel, KeywordSet, LawyerType, LegalCategory, QuestionPair

CATEGORY_KEYWORDS = MappingProxyType({
    LegalCategory.CRIMINAL: categories.CRIMINAL,
    LegalCategory.FAMILY: categories.FAMILY,
    LegalCategory.CIVIL: categories.CIVIL,
    LegalCategory.COMMERCIAL: categories.COMMERCIAL,
    LegalCategory.ADMINISTRATIVE: categories.ADMINISTRATIVE,
    LegalCategory.LABOR: categories.LABOR,
    LegalCategory.IMMIGRATION: categories.IMMIGRATION,
})

COURT_LEVEL_KEYWORDS = MappingProxyType({
    CourtLevel.APPEAL: court_levels.APPEAL,
    CourtLevel.SUPREME_COURT: court_levels.SUPREME_COURT,
    CourtLevel.COUNCIL_OF_STATE: court_levels.COUNCIL_OF_STATE,
})

# Checked in this order; the first level with any match wins.
COURT_LEVEL_PRIORITY = (
    CourtLevel.SUPREME_COURT,
    CourtLevel.COUNCIL_OF_STATE,
    CourtLevel.APPEAL,
)

__all__ = [
    "CATEGORY_KEYWORDS",
    "COURT_LEVEL_KEYWORDS",
    "COURT_LEVEL_PRIORITY",
    "CourtLevel",
    "KeywordSet",
    "LawyerType",
    "LegalCategory",
    "QuestionPair",
]
