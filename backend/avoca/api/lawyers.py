from fastapi import APIRouter

from ..engine.matching import LawyerCandidate, match_lawyers
from ..schemas import LawyerCandidateModel, LawyerMatchRequest, LawyerMatchResponse

router = APIRouter(prefix="/lawyers", tags=["lawyers"])


@router.post("/match", response_model=LawyerMatchResponse)
async def match(req: LawyerMatchRequest):
    candidates = [LawyerCandidate(**lawyer.model_dump()) for lawyer in req.lawyers]
    matched = match_lawyers(
        candidates,
        category=req.category,
        lawyer_type=req.required_lawyer_type,
    )
    return LawyerMatchResponse(
        lawyers=[LawyerCandidateModel(**vars(lawyer)) for lawyer in matched]
    )
