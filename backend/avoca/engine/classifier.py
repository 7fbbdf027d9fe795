from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping

from ..config import Settings, settings
from ..errors import EmptyMessageError
from ..knowledge import (
    CATEGORY_KEYWORDS,
    COURT_LEVEL_KEYWORDS,
    COURT_LEVEL_PRIORITY,
    CourtLevel,
    LawyerType,
    LegalCategory,
)
from .explanation import generate_explanation
from .questions import generate_follow_up_questions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassificationResult:
    category: LegalCategory
    court_level: CourtLevel
    required_lawyer_type: LawyerType
    follow_up_questions: tuple[str, ...]
    explanation: str


def classify_category(text: str) -> LegalCategory:
    """Category whose keyword list has the most distinct hits.

    Ties go to the category declared first; no hits at all means civil.
    """
    lowered = text.lower()
    max_score = 0
    detected = LegalCategory.CIVIL

    for category, keyword_set in CATEGORY_KEYWORDS.items():
        score = keyword_set.score(lowered)
        if score > max_score:
            max_score = score
            detected = category

    return detected


def detect_court_level(text: str) -> CourtLevel:
    lowered = text.lower()
    for level in COURT_LEVEL_PRIORITY:
        if COURT_LEVEL_KEYWORDS[level].score(lowered) > 0:
            return level
    return CourtLevel.FIRST_INSTANCE


def determine_required_lawyer_type(
    court_level: CourtLevel | str, category: LegalCategory | str
) -> LawyerType:
    # Administrative cases before the Council of State need its lawyers.
    if category == LegalCategory.ADMINISTRATIVE and court_level == CourtLevel.COUNCIL_OF_STATE:
        return LawyerType.COUNCIL_OF_STATE

    if court_level == CourtLevel.SUPREME_COURT:
        return LawyerType.SUPREME_COURT
    if court_level == CourtLevel.COUNCIL_OF_STATE:
        return LawyerType.COUNCIL_OF_STATE
    if court_level == CourtLevel.APPEAL:
        return LawyerType.APPEAL
    return LawyerType.REGULAR


class CaseClassifier:
    def __init__(self, config: Settings | None = None) -> None:
        self.config = config or settings

    def classify(
        self,
        message: str | None,
        history: Iterable[Mapping[str, str]] | None = None,
    ) -> ClassificationResult:
        if not message or not message.strip():
            raise EmptyMessageError()

        detection_text = self._detection_text(message, history)

        category = classify_category(detection_text)
        court_level = detect_court_level(detection_text)
        lawyer_type = determine_required_lawyer_type(court_level, category)
        questions = generate_follow_up_questions(
            category,
            court_level,
            message,
            limit=self.config.max_follow_up_questions,
            short_message_length=self.config.short_message_length,
            keep_pairs=self.config.keep_question_pairs,
        )
        explanation = generate_explanation(category, court_level, lawyer_type)

        logger.info(
            "Classified case: category=%s court_level=%s lawyer_type=%s questions=%d",
            category.value,
            court_level.value,
            lawyer_type.value,
            len(questions),
        )
        return ClassificationResult(
            category=category,
            court_level=court_level,
            required_lawyer_type=lawyer_type,
            follow_up_questions=tuple(questions),
            explanation=explanation,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _detection_text(
        self, message: str, history: Iterable[Mapping[str, str]] | None
    ) -> str:
        if not self.config.use_conversation_history or not history:
            return message

        earlier = [
            turn.get("content", "")
            for turn in history
            if turn.get("role") == "user" and turn.get("content")
        ]
        logger.debug("Including %d earlier user turns in detection", len(earlier))
        return "\n".join([*earlier, message])


classifier = CaseClassifier()
