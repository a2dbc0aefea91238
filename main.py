import logging
from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager

# --- DATABASE ---
from src.app.database import engine
from src.app.models import models

# --- ROUTES ---
from src.app.routes import chat, messages, system
from src.app.config import get_settings

settings = get_settings()

# --- LOGGING ---
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# --- LIFESPAN ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Runs on server startup. Creates missing tables; migrations are managed
    with Alembic.
    """
    logger.info("--- INITIALIZING LLAMACODER API ---")
    models.Base.metadata.create_all(bind=engine)
    logger.info("--- DATABASE INTEGRITY VERIFIED ---")
    yield

# --- APP SETUP ---
app = FastAPI(
    title="LlamaCoder API",
    description="Turns a prompt (and optional screenshot) into a React app via Together AI.",
    version=system.API_VERSION,
    lifespan=lifespan
)

# --- CORS ---
allowed_origins = [
    "http://localhost:3000",  # For local development
]

if settings.PUBLIC_BASE_URL:
    base_domain = settings.PUBLIC_BASE_URL.strip('/')
    if base_domain and base_domain not in allowed_origins:
        allowed_origins.append(base_domain)

# Add origins from environment variable
if settings.ALLOWED_ORIGINS:
    env_origins = [origin.strip() for origin in settings.ALLOWED_ORIGINS.split(",") if origin.strip()]
    allowed_origins.extend(env_origins)

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- EXCEPTION HANDLER ---
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    if isinstance(exc, (HTTPException, StarletteHTTPException)):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    logger.error(f"Unhandled exception for {request.url}: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": "An internal server error occurred."})

# --- ROUTERS ---
app.include_router(system.router, prefix="/system", tags=["System"])
app.include_router(chat.router, prefix="/chats", tags=["Chats"])
app.include_router(messages.router, prefix="/messages", tags=["Messages"])

@app.get("/", tags=["Root"])
async def read_root():
    return {"message": "LlamaCoder API Online", "docs_url": f"{settings.PUBLIC_BASE_URL}/docs"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
