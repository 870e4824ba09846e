import logging
import sys
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from leaddesk.core.config import config
from leaddesk.core.db.engine import check_database_connection
from leaddesk.core.error_handler import global_exception_handler
from leaddesk.core.storage import SqlStorage, get_storage
from leaddesk.modules.records.router import router as records_router
from leaddesk.modules.sessions.router import router as sessions_router

# Configure logging to output to console
logging.basicConfig(
    level=config.log_level.upper(),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)
logger.info("🚀 Starting LeadDesk API...")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Opens the medium (and creates the local_storage table) before serving
    get_storage()
    yield


app = FastAPI(
    title="LeadDesk API",
    description="Lead intake record stores with validated, confirmed form sessions",
    version="1.0.0",
    lifespan=lifespan,
    docs_url=None if config.is_production else "/docs",
    redoc_url=None if config.is_production else "/redoc",
)

# Add global exception handler
app.add_exception_handler(Exception, global_exception_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers with /api prefix
app.include_router(records_router, prefix="/api")
app.include_router(sessions_router, prefix="/api")


@app.get("/health")
def health() -> dict:
    storage = get_storage()
    healthy = check_database_connection() if isinstance(storage, SqlStorage) else True
    return {
        "status": "ok" if healthy else "degraded",
        "storage": type(storage).__name__,
    }
