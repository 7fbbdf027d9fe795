import logging

from fastapi import APIRouter, Request

from ..engine.classifier import classifier
from ..errors import ClassificationFailedError, EmptyMessageError
from ..schemas import ClassificationRequest, ClassificationResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/classify", tags=["classification"])


@router.post(
    "",
    response_model=ClassificationResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def classify_case(request: Request):
    # Malformed bodies answer with {"error": ...}, not a 422 validation payload.
    try:
        body = await request.json()
        if body is not None and _message_missing(body):
            raise EmptyMessageError()
        req = ClassificationRequest.model_validate(body)
        result = classifier.classify(
            req.user_message,
            [turn.model_dump() for turn in req.conversation_history or []],
        )
    except EmptyMessageError:
        raise
    except Exception as exc:
        logger.exception("Case classification failed")
        raise ClassificationFailedError() from exc

    return ClassificationResponse(
        category=result.category,
        court_level=result.court_level,
        required_lawyer_type=result.required_lawyer_type,
        follow_up_questions=list(result.follow_up_questions),
        explanation=result.explanation,
    )


def _message_missing(body) -> bool:
    # Non-object bodies carry no message; empty containers are not "missing".
    if not isinstance(body, dict):
        return True
    return body.get("userMessage") in (None, False, 0, "")
