from typing import Optional
from pydantic import BaseModel

from genbridge.models.enums import JobStatus


class JobOutcome(BaseModel):
    index: int = 0
    status: JobStatus
    error_code: Optional[str] = None
    message: Optional[str] = None
