import logging

from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .config import CORS_ORIGINS, LOG_LEVEL
from .database import create_tables, get_db
from .routers import tasks
from .schemas.task import DatabaseStatus

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Tasks API",
    description="CRUD API over a single tasks table",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(tasks.router, tags=["tasks"])

# Create tables on startup
@app.on_event("startup")
def on_startup():
    create_tables()

@app.get("/", response_class=PlainTextResponse)
def read_root():
    return "The API is running"

@app.get("/test-db", response_model=DatabaseStatus)
def test_db(db: Session = Depends(get_db)):
    """Confirm database connectivity by asking the server for its clock."""
    try:
        now = db.execute(text("SELECT CURRENT_TIMESTAMP")).scalar_one()
    except SQLAlchemyError:
        logger.exception("Database connectivity check failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error connecting to the database",
        )
    return DatabaseStatus(message="Database connection successful", time=now)
