from fastapi import APIRouter, Depends, HTTPException

from genbridge.dependencies import get_command_registrar
from genbridge.errors import RegistrationError
from genbridge.services.command_registrar import CommandRegistrar

router = APIRouter()


@router.get("/discord/command")
def register_commands(registrar: CommandRegistrar = Depends(get_command_registrar)):
    try:
        registrar.register()
    except RegistrationError as e:
        raise HTTPException(502, {"code": e.code, "message": str(e)})
    return {"status": "ok"}
