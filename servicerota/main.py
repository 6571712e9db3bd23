import logging

from fastapi import FastAPI
from servicerota.api.routes import schedules
from servicerota.core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="ServiceRota API", version="0.1.0")

app.include_router(schedules.router, prefix="/api/v1")


@app.get("/health")
def health_check():
    return {"status": "ok"}
