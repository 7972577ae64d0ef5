from fastapi import FastAPI
from .settings import settings
from .routers import checkout
from .utils.log_config import configure_logging

configure_logging(settings.LOG_LEVEL)

app = FastAPI(title=settings.APP_NAME)

app.include_router(checkout.router, tags=["Checkout"])

@app.get("/health", tags=["Ops"])
async def health():
    return {"status": "ok"}
