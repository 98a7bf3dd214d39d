"""
Freshers Job Board - Main Application

FastAPI backend with:
- MongoDB for job postings and subscribers
- Generative AI (Gemini via OpenAI-compatible API) for resume checks and chat
- SMTP email for subscription confirmations and the daily digest

Run: uvicorn jobboard.main:app --reload
"""

import asyncio

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool

from jobboard.api.routes import api_router
from jobboard.core.config import get_settings
from jobboard.core.errors import JobBoardError
from jobboard.core.logging import setup_logging, get_logger
from jobboard.db.mongodb import init_mongo_indexes, test_mongo_connection
from jobboard.services.digest import run_daily_digest_loop
from jobboard.services.mailer import Mailer

settings = get_settings()
setup_logging(settings.log_level)
logger = get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Freshers Job Board",
    description="""
    Job board backend for freshers jobs and internships.

    ## Features
    - **Jobs**: Create, list, update and delete postings
    - **Subscribers**: Daily email digest of the last 24 hours of postings
    - **Resume checker**: ATS score and feedback for an uploaded PDF resume
    - **Chat**: Career assistant backed by a generative AI model
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.exception_handler(JobBoardError)
async def job_board_error_handler(request: Request, exc: JobBoardError):
    """Every domain error becomes {"error": ..., "details"?: ...}."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.error} ({exc.details})")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.error}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies get the same 400 {"error", "details"} shape as domain errors."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    )
    logger.warning(f"{request.method} {request.url.path} rejected: {details}")
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request", "details": details},
    )


# Startup event
@app.on_event("startup")
async def startup_event():
    """Initialize MongoDB indexes, check SMTP and start the daily digest."""
    try:
        await run_in_threadpool(init_mongo_indexes)
        logger.info("MongoDB indexes initialized")
    except Exception as e:
        logger.warning(f"MongoDB index initialization failed: {e}")

    await run_in_threadpool(Mailer(settings).verify)

    if not settings.ai_configured:
        logger.warning("GEMINI_API_KEY is not set; AI endpoints will return 500")

    if settings.digest_enabled:
        app.state.digest_task = asyncio.create_task(run_daily_digest_loop(settings))


@app.on_event("shutdown")
async def shutdown_event():
    task = getattr(app.state, "digest_task", None)
    if task is not None:
        task.cancel()


@app.get("/", tags=["Health"], response_class=PlainTextResponse)
async def root():
    return "FreshersJobs Backend is running..."


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    mongo_ok = await run_in_threadpool(test_mongo_connection)
    return {
        "status": "healthy",
        "mongodb": "connected" if mongo_ok else "disconnected",
        "ai_provider": "configured" if settings.ai_configured else "not configured",
        "mail": "configured" if settings.mail_configured else "not configured"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.port)
