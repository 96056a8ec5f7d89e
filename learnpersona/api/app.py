"""
Main FastAPI Application

LearnPersona API with all routes registered.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from learnpersona import __version__
from learnpersona.config import get_settings, configure_logging
from learnpersona.ingest.database import init_database, get_session
from learnpersona.ingest.seed import seed_demo_data
from learnpersona.personas.validation import QuizValidationError, IncompleteSubmissionError
from learnpersona.api.public import router as public_router
from learnpersona.api.ld import router as ld_router


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and load demo data on startup."""
    settings = get_settings()
    engine = init_database()
    if settings.seed_demo_data:
        session = get_session(engine)
        try:
            seed_demo_data(session)
        finally:
            session.close()
    yield


configure_logging()
settings = get_settings()

# Create FastAPI app
app = FastAPI(
    title="LearnPersona API",
    description="Persona-based learning recommendations",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(public_router)
app.include_router(ld_router)


# Health check endpoint
@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# Error handlers
@app.exception_handler(QuizValidationError)
async def quiz_validation_handler(request, exc):
    """Handle rejected quiz submissions."""
    content = {"error": "Invalid quiz submission", "detail": str(exc)}
    if isinstance(exc, IncompleteSubmissionError):
        content["missing"] = exc.missing
    return JSONResponse(status_code=400, content=content)


@app.exception_handler(ValueError)
async def value_error_handler(request, exc):
    """Handle ValueError exceptions."""
    return JSONResponse(
        status_code=400,
        content={"error": "Bad Request", "detail": str(exc)}
    )


@app.exception_handler(LookupError)
async def lookup_error_handler(request, exc):
    """Handle missing records that were not mapped to an HTTP error."""
    return JSONResponse(
        status_code=404,
        content={"error": "Not Found", "detail": str(exc)}
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc):
    """Handle request validation errors."""
    return JSONResponse(
        status_code=422,
        content={"error": "Validation Error", "detail": exc.errors()}
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request, exc):
    """Handle generic HTTP exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP Exception", "detail": exc.detail}
    )


@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    """Handle general exceptions."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error", "detail": str(exc)}
    )
