from fastapi import FastAPI

from genbridge.logging_config import configure_logging
from genbridge.routers import commands, generate, health, interactions

configure_logging()

app = FastAPI(title="genbridge")

app.include_router(interactions.router)
app.include_router(generate.router, prefix="/api")
app.include_router(commands.router)
app.include_router(health.router)
