"""
Client Classifier v1.0
FastAPI service that classifies browsers, operating systems, device types and
rendering engines from User-Agent strings and Client Hints

Entry point: python main.py
"""

import os
import sys
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.resolve()
sys.path.insert(0, str(PROJECT_ROOT))

from client_classifier import __version__
from client_classifier.core.config import settings
from client_classifier.api.routes import health, client_detect
from client_classifier.utils.startup import initialize_system

# Create FastAPI application
app = FastAPI(
    title="Client Classifier",
    description="Browser, OS, device and engine detection from User-Agent and Client Hints",
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc"
)

# Rate limiter shared with the routes that declare limits
app.state.limiter = client_detect.limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# CORS middleware - pages post navigator values from the browser
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ],
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_response_headers(request: Request, call_next):
    """Request client hints and add security headers to all responses"""
    response = await call_next(request)
    if settings.ENABLE_CLIENT_HINTS and settings.ACCEPT_CH:
        response.headers["Accept-CH"] = settings.ACCEPT_CH
        response.headers.add_vary_header(settings.ACCEPT_CH)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    if not settings.DEBUG:
        response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
    return response


@app.on_event("startup")
async def startup_event():
    """Initialize system components on startup"""
    print("=" * 70)
    print(f"Client Classifier v{__version__}")
    print("=" * 70)

    await initialize_system(app)

    print("=" * 70)
    print(f"System ready! Server running on {settings.SERVER_URL}")
    print(f"API Docs: {settings.SERVER_URL}/api/docs")
    print("=" * 70)


# Include API routes
app.include_router(health.router, prefix="/api", tags=["Health"])
app.include_router(client_detect.router, prefix="/api", tags=["Client Detection"])


if __name__ == "__main__":
    # Run the server (PORT env var for container deployment)
    port = int(os.environ.get("PORT", settings.PORT))
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=port,
        reload=settings.DEBUG,
        log_level="info"
    )
