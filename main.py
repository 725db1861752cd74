"""FastAPI application entrypoint."""

# pylint: disable=duplicate-code

from pathlib import Path
from fastapi import FastAPI

from routes import rrule
from config import config
from utils.logging import configure_logger

LOG_FILE = Path(config.LOG_DIR) / "server.log"
logger = configure_logger(__name__, LOG_FILE)

logger.info("Initializing FastAPI app")
app = FastAPI(title="Schedule to RRULE converter")
app.include_router(rrule.router)
logger.info("Routers registered")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
