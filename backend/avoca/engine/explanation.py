from __future__ import annotations

from ..knowledge import CourtLevel, LawyerType, LegalCategory
from ..knowledge.labels import CATEGORY_NAMES, COURT_NAMES, LAWYER_NAMES

DISCLAIMER = (
    "**Important:** This is only a preliminary classification to help you "
    "find the right legal professional. A qualified lawyer will provide a "
    "detailed assessment of your case."
)


def generate_explanation(
    category: LegalCategory,
    court_level: CourtLevel,
    lawyer_type: LawyerType,
) -> str:
    summary = (
        "Based on your description, this appears to be a "
        f"**{CATEGORY_NAMES[LegalCategory(category)]}** matter that may "
        "require proceedings at the "
        f"**{COURT_NAMES[CourtLevel(court_level)]}**. "
        f"You will need to consult with {LAWYER_NAMES[LawyerType(lawyer_type)]}."
    )
    return f"{summary}\n\n{DISCLAIMER}"
