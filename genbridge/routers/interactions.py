import json
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Header, HTTPException, Request
from starlette.concurrency import run_in_threadpool

from genbridge.dependencies import get_job_queue, get_signature_verifier
from genbridge.errors import EnqueueError, InvalidInteraction
from genbridge.models.enums import InteractionResponseType, InteractionType
from genbridge.schemas.interactions import parse_command
from genbridge.services.job_queue import JobQueue
from genbridge.services.signature_verifier import SignatureVerifier, has_signature_headers

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/discord/interactions")
async def interactions(
    request: Request,
    x_signature_timestamp: Optional[str] = Header(None),
    x_signature_ed25519: Optional[str] = Header(None),
    verifier: SignatureVerifier = Depends(get_signature_verifier),
    queue: JobQueue = Depends(get_job_queue),
):
    if not has_signature_headers(x_signature_ed25519, x_signature_timestamp):
        logger.warning("invalid request signature: header missing")
        raise HTTPException(401, "invalid request signature")

    raw = await request.body()
    if not verifier.verify(raw, x_signature_ed25519, x_signature_timestamp):
        logger.warning("invalid request signature")
        raise HTTPException(401, "invalid request signature")

    try:
        body = json.loads(raw)
    except ValueError:
        raise HTTPException(400, "body is not JSON")
    if not isinstance(body, dict):
        raise HTTPException(400, "body is not a JSON object")

    kind = body.get("type")
    if kind == InteractionType.PING:
        return {"type": int(InteractionResponseType.PONG)}

    if kind != InteractionType.APPLICATION_COMMAND:
        raise HTTPException(400, f"unsupported interaction type {kind!r}")

    try:
        command = parse_command(body.get("data"))
    except InvalidInteraction as e:
        logger.warning("rejected command [%s]: %s", e.code, e)
        raise HTTPException(400, str(e))

    try:
        await run_in_threadpool(queue.enqueue, body)
    except EnqueueError as e:
        logger.error("could not queue %s: %s", command.name.value, e)
        raise HTTPException(503, "queue unavailable")

    return {
        "type": int(InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE),
        "data": {"content": f'Generating ({command.name.value}): "{command.prompt}"'},
    }
