from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .knowledge import CourtLevel, LawyerType, LegalCategory


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ConversationTurn(CamelModel):
    role: Literal["user", "ai"]
    content: str


class ClassificationRequest(CamelModel):
    # Left optional so a missing message is reported as 400, not a parse error.
    user_message: Optional[str] = None
    conversation_history: Optional[list[ConversationTurn]] = None

    @field_validator("conversation_history", mode="before")
    @classmethod
    def drop_unusable_turns(cls, value: Any) -> Optional[list]:
        # History never blocks classification; malformed turns are skipped.
        if not isinstance(value, list):
            return None
        turns = []
        for turn in value:
            try:
                turns.append(ConversationTurn.model_validate(turn))
            except ValidationError:
                continue
        return turns


class ClassificationResponse(CamelModel):
    category: LegalCategory
    court_level: CourtLevel
    required_lawyer_type: LawyerType
    follow_up_questions: list[str]
    explanation: str


class ErrorResponse(BaseModel):
    error: str


class LawyerCandidateModel(CamelModel):
    id: str
    specialties: list[LegalCategory] = Field(default_factory=list)
    authorized_courts: list[CourtLevel] = Field(default_factory=list)
    rating: float = 0.0
    is_available: bool = True
    status: str = "active"


class LawyerMatchRequest(CamelModel):
    category: Optional[LegalCategory] = None
    required_lawyer_type: Optional[LawyerType] = None
    lawyers: list[LawyerCandidateModel]


class LawyerMatchResponse(CamelModel):
    lawyers: list[LawyerCandidateModel]


class HealthResponse(BaseModel):
    status: str
    app: str
    version: str
