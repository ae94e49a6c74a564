from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import JSONResponse, RedirectResponse
import logging
import uvicorn
import os

from app.routes.label_routes import router as label_router
from app.utils.api_clients import ClientConfig
from app.utils.openfda import OpenFdaClient

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = ClientConfig.from_env()
    app.state.openfda_client = OpenFdaClient(config)
    logger.info(f"openFDA client ready for {config.base_url} (timeout {config.timeout}s)")
    yield
    await app.state.openfda_client.aclose()
    logger.info("openFDA client closed")


# Create FastAPI application
app = FastAPI(
    title="Dawa",
    description="Look up indications, side effects and dosage from openFDA drug labels",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "message": str(exc),
                "code": "internal_error",
                "type": "server_error"
            }
        },
    )

app.include_router(label_router, tags=["Drug labels"])
logger.info("Included label router")

# Mount the search screen
static_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), "static")
if os.path.exists(static_dir):
    app.mount("/static", StaticFiles(directory=static_dir, html=True), name="static")
    logger.info(f"Mounted static files directory: {static_dir}")
else:
    logger.warning(f"Static directory not found at {static_dir}")

@app.get("/")
async def root(request: Request):
    """Send browsers to the search screen; everything else gets a status body."""
    if "text/html" in request.headers.get("accept", ""):
        return RedirectResponse(url="/static/index.html")
    return {"message": "Dawa is running", "status": "ok"}

@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "version": "0.1.0",
        "apis": {
            "openfda": "available"
        }
    }

if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
