from fastapi import Depends

from genbridge.config import Settings, get_settings
from genbridge.services.command_registrar import CommandRegistrar
from genbridge.services.generation_client import GenerationClient
from genbridge.services.job_queue import JobQueue
from genbridge.services.signature_verifier import SignatureVerifier


def get_signature_verifier(settings: Settings = Depends(get_settings)) -> SignatureVerifier:
    return SignatureVerifier(settings.discord_public_key)


def get_job_queue(settings: Settings = Depends(get_settings)) -> JobQueue:
    return JobQueue(settings.queue_name)


def get_generation_client(settings: Settings = Depends(get_settings)) -> GenerationClient:
    return GenerationClient(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        size=settings.image_size,
        connect_timeout_s=settings.http_connect_timeout_s,
        read_timeout_s=settings.http_read_timeout_s,
    )


def get_command_registrar(settings: Settings = Depends(get_settings)) -> CommandRegistrar:
    return CommandRegistrar(
        bot_token=settings.discord_token,
        application_id=settings.discord_application_id,
        api_base=settings.discord_api_base,
        connect_timeout_s=settings.http_connect_timeout_s,
        read_timeout_s=settings.http_read_timeout_s,
    )
