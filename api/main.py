# api/main.py
import logging
import os

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from core.errors import BadRequest, NotFound, ValidationError
from core.sa.database import get_database
from api.routes import ROUTERS

logger = logging.getLogger(__name__)

app = FastAPI(title="Bookcase", description="Catalog of libraries, authors, series, stories and volumes")

# CORS configuration
DEFAULT_ORIGINS = [
    "http://localhost:5173",        # Local Vite dev server
    "http://localhost:4173",        # Local Vite preview
    "http://127.0.0.1:5173",
    "http://localhost",             # Local production URL
]

def _origins():
    configured = os.getenv("BOOKCASE_CORS_ORIGINS")
    if not configured:
        return DEFAULT_ORIGINS
    return [origin.strip() for origin in configured.split(",") if origin.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create any missing tables on startup
@app.on_event("startup")
async def startup_event():
    get_database().init_db()

for router in ROUTERS:
    app.include_router(router, prefix="/api")

@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})

@app.exception_handler(BadRequest)
@app.exception_handler(ValidationError)
async def bad_request_handler(request: Request, exc):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message})

# Malformed offset/limit parameters
@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})

@app.exception_handler(Exception)
async def server_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(exc)})

@app.get("/")
async def root():
    return {"message": "Bookcase catalog API"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8000")))
