# mood journal backend api
# fastapi app: keyword emotion analysis, gemini-voiced insights, json entry store, trends

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from moodjournal.config import settings
from moodjournal.services.entry_store import build_entry_store
from moodjournal.services.narrative_service import build_narrative_generator
from moodjournal.routers import mood_analysis, journals, trends, chat

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """startup: load the entry store and build the narrator. shutdown: drop them."""
    logger.info("Starting Mood Journal backend...")
    store = build_entry_store()
    store.load()
    app.state.entry_store = store
    app.state.narrator = build_narrative_generator(settings)
    logger.info("Mood Journal backend ready")
    yield
    logger.info("Shutting down Mood Journal backend...")
    app.state.narrator = None
    app.state.entry_store = None


app = FastAPI(
    title="Mood Journal API",
    description="Backend API for the mood journal — emotion analysis, AI insights, entry history and trends",
    version="0.1.0",
    lifespan=lifespan,
)

# cors — allow frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL, "http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# errors are returned as {"error": ...} to match the client contract

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    logger.info(f"Rejected request to {request.url.path}: {field or 'body'}: {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": f"{field}: {message}" if field else message},
    )


# register routers
app.include_router(mood_analysis.router)
app.include_router(journals.router)
app.include_router(trends.router)
app.include_router(chat.router)


@app.get("/health")
async def health_check():
    """basic health check endpoint"""
    return {"status": "ok", "service": "moodjournal-api"}
