import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from auth import router as auth_router
from core import settings
from core.db import Database
from core.errors import ClientInputError
from posts import router as posts_router
from users import router as users_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One storage handle per process, injected into handlers via `get_db`.
    app.state.db = await Database.connect()
    logger.info("db_pool_ready")
    try:
        yield
    finally:
        await app.state.db.close()
        app.state.db = None


app = FastAPI(lifespan=lifespan)

# Browser clients (the hosted frontend and local dev) call this API directly.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    first = exc.errors()[0] if exc.errors() else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "Invalid request")
    error = ClientInputError(f"{location}: {message}" if location else message)
    return await http_exception_handler(request, error)


app.include_router(auth_router.router, tags=["auth"])
app.include_router(users_router.router, tags=["users"])
app.include_router(posts_router.router, tags=["posts"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "discord feed api"}
