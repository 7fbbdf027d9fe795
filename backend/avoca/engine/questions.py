from __future__ import annotations

from ..knowledge import CourtLevel, LegalCategory, QuestionPair
from ..knowledge import labels

DEFAULT_LIMIT = 3
DEFAULT_SHORT_MESSAGE_LENGTH = 50


def generate_follow_up_questions(
    category: LegalCategory,
    court_level: CourtLevel,
    text: str,
    *,
    limit: int = DEFAULT_LIMIT,
    short_message_length: int = DEFAULT_SHORT_MESSAGE_LENGTH,
    keep_pairs: bool = False,
) -> list[str]:
    """Clarifying questions for a classified message, English then Arabic.

    Every question is emitted as two list elements. The result holds at
    most ``limit`` elements; with ``keep_pairs`` the cut is made on whole
    pairs so no English question is returned without its translation.
    """
    pairs = _select_questions(category, court_level, text, short_message_length)
    if keep_pairs:
        return [q for pair in pairs[: limit // 2] for q in pair.as_list()]
    flat = [q for pair in pairs for q in pair.as_list()]
    return flat[:limit]


def _select_questions(
    category: LegalCategory,
    court_level: CourtLevel,
    text: str,
    short_message_length: int,
) -> list[QuestionPair]:
    lowered = text.lower()
    selected: list[QuestionPair] = []

    # Short first-instance messages may really be about an earlier decision.
    if court_level == CourtLevel.FIRST_INSTANCE and len(text) < short_message_length:
        selected.append(labels.NEW_CASE_OR_APPEAL)

    if category == LegalCategory.CRIMINAL:
        if "charge" not in lowered:
            selected.append(labels.FORMALLY_CHARGED)
    elif category == LegalCategory.FAMILY:
        if "child" not in lowered:
            selected.append(labels.CHILDREN_INVOLVED)
    elif category == LegalCategory.ADMINISTRATIVE:
        selected.append(labels.GOVERNMENT_BODY)
    elif category == LegalCategory.LABOR:
        selected.append(labels.EMPLOYMENT_STATUS)

    if court_level in (CourtLevel.APPEAL, CourtLevel.SUPREME_COURT):
        selected.append(labels.PREVIOUS_JUDGMENT)

    return selected
