import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from core.config import settings
from core.database import engine
from core.exceptions import register_exception_handlers
from models.base import Base

from routers.auth import router as auth_router
from routers.profile import router as profile_router
from routers.feed import router as feed_router
from routers.connection import router as connection_router
from routers.user import router as user_router
from routers.payment import router as payment_router
from routers.health import router as health_router

app = FastAPI(
    title="DevMatch Backend",
    version="0.1.0",
    description="Backend for DevMatch: profiles, feed and connection requests"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,   # frontend addresses
    allow_credentials=True,                # the session cookie
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

logger = logging.getLogger("uvicorn.error")


@app.middleware("http")
async def log_request_time(request: Request, call_next):
    start_time = time.perf_counter()
    response = await call_next(request)
    response.headers["Cache-Control"] = "no-store"
    process_time = (time.perf_counter() - start_time) * 1000
    logger.info(
        f"{request.method} {request.url.path} {response.status_code} completed in {process_time:.2f} ms"
    )
    return response

register_exception_handlers(app)

app.include_router(auth_router)
app.include_router(profile_router)
app.include_router(feed_router)
app.include_router(connection_router)
app.include_router(user_router)
app.include_router(payment_router)
app.include_router(health_router)


@app.on_event("startup")
async def on_startup():
    # Create all tables first
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@app.get("/")
async def root():
    return {"message": "DevMatch Backend"}


@app.on_event("shutdown")
async def shutdown():
    # Close every pooled connection
    await engine.dispose()
