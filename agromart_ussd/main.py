import uvicorn
from fastapi import FastAPI
from loguru import logger

from agromart_ussd.api.routes import api_router
from agromart_ussd.core.config import settings
from agromart_ussd.core.logging_config import setup_logging
from agromart_ussd.infrastructure.cache.session_store import get_session_store

setup_logging()

app = FastAPI(title="Lovitti Agro Mart USSD")
app.include_router(api_router)


@app.on_event("startup")
async def startup():
    get_session_store()
    logger.info(
        "USSD gateway starting (env={}, sessions={})",
        settings.ENV, settings.SESSION_BACKEND,
    )


def run() -> None:
    uvicorn.run(
        "agromart_ussd.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    run()
