# src/main.py
import logging
import time
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from admin.routes import router as admin_router
from auth.routes import router as auth_router
from config import settings
from content.routes import router as content_router
from enquiry.routes import router as enquiry_router
from export.routes import router as export_router
from storage.base import Storage
from storage.memory import MemStorage

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

MAX_LOG_LINE = 160


def create_app(storage: Optional[Storage] = None) -> FastAPI:
    """Build the application around a storage instance (a fresh MemStorage by default)."""
    app = FastAPI(
        title="Content Admin Backend",
        description="Admin API for blogs, videos, enquiry forms and contact messages",
        version="0.1.0",
    )
    app.state.storage = storage if storage is not None else MemStorage()

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        if request.url.path.startswith("/api"):
            duration = int((time.perf_counter() - start) * 1000)
            log_line = f"{request.method} {request.url.path} {response.status_code} in {duration}ms"
            if len(log_line) > MAX_LOG_LINE:
                log_line = log_line[:MAX_LOG_LINE - 1] + "…"
            logger.info(log_line)
        return response

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {str(exc)}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal Server Error"},
        )

    # Include routers
    app.include_router(auth_router)
    app.include_router(admin_router)
    app.include_router(content_router)
    app.include_router(enquiry_router)
    app.include_router(export_router)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {"message": "Welcome to Content Admin Backend!"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    logger.info(f"serving on port {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
