from fastapi import FastAPI

from hookrelay.api.webhook_routes import router as webhook_router
from hookrelay.core.config import settings
from hookrelay.core.logging import configure_logging

configure_logging(settings.LOG_LEVEL)

app = FastAPI(title=settings.PROJECT_NAME)

app.include_router(webhook_router)


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
