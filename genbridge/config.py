import os
from functools import lru_cache
from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")

# Celery queue carrying interaction payloads from the edge to the worker
QUEUE_NAME = os.getenv("QUEUE_NAME", "discord_messages")

DISCORD_API_BASE = "https://discord.com/api/v10"
OPENAI_BASE_URL = "https://api.openai.com/v1"

IMAGE_SIZE = "512x512"


class Settings(BaseModel):
    discord_public_key: str = ""
    discord_application_id: str = ""
    discord_token: str = ""
    openai_api_key: str = ""

    discord_api_base: str = DISCORD_API_BASE
    openai_base_url: str = OPENAI_BASE_URL
    image_size: str = IMAGE_SIZE
    notify_mode: str = "followup"  # "followup" or "channel"

    queue_name: str = QUEUE_NAME

    http_connect_timeout_s: float = 3.0
    http_read_timeout_s: float = 60.0

    job_max_retries: int = 3
    job_retry_countdown_s: int = 5

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings(
        discord_public_key=os.getenv("DISCORD_PUBLIC_KEY", ""),
        discord_application_id=os.getenv("DISCORD_APPLICATION_ID", ""),
        discord_token=os.getenv("DISCORD_TOKEN", ""),
        openai_api_key=os.getenv("OPENAI_API_KEY", ""),
        discord_api_base=os.getenv("DISCORD_API_BASE", DISCORD_API_BASE),
        openai_base_url=os.getenv("OPENAI_BASE_URL", OPENAI_BASE_URL),
        image_size=os.getenv("IMAGE_SIZE", IMAGE_SIZE),
        notify_mode=os.getenv("NOTIFY_MODE", "followup"),
        queue_name=QUEUE_NAME,
        http_connect_timeout_s=float(os.getenv("HTTP_CONNECT_TIMEOUT_S", "3.0")),
        http_read_timeout_s=float(os.getenv("HTTP_READ_TIMEOUT_S", "60.0")),
        job_max_retries=int(os.getenv("JOB_MAX_RETRIES", "3")),
        job_retry_countdown_s=int(os.getenv("JOB_RETRY_COUNTDOWN_S", "5")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
