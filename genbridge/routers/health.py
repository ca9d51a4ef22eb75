from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
def hello():
    return "Hello from genbridge"


@router.get("/health")
def health():
    return {"ok": True}
