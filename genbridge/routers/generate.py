from fastapi import APIRouter, Depends, HTTPException

from genbridge.dependencies import get_generation_client
from genbridge.errors import GenerationError
from genbridge.schemas.interactions import GenerateRequest
from genbridge.services.generation_client import GenerationClient

router = APIRouter()


@router.post("/generate")
def generate(req: GenerateRequest, client: GenerationClient = Depends(get_generation_client)):
    try:
        data = client.create_image(req.prompt)
    except GenerationError as e:
        status = 429 if e.code == "RATE_LIMITED" else 400 if e.code == "INVALID_PROMPT" else 502
        raise HTTPException(status, {"code": e.code, "message": str(e)})
    # images keyed by position, the same shape as spreading the provider's list into an object
    return {str(i): item for i, item in enumerate(data)}
