from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.model import topics, questions, question_completions, contests, streaks
from app.router import (
    topics_router,
    questions_router,
    contests_router,
    streaks_router,
    dashboard_router,
)
from app.config import settings
from app.exceptions import InvalidArgument, StorageError
from app.log import get_logger

log = get_logger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.API_VERSION
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        settings.FRONTEND_URL,
        "http://localhost:3000",  # For local development
        "http://localhost:9002",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(topics_router, prefix="/topics", tags=["Topics"])
app.include_router(questions_router, prefix="/questions", tags=["Questions"])
app.include_router(contests_router, prefix="/contests", tags=["Contests"])
app.include_router(streaks_router, prefix="/streaks", tags=["Streaks"])
app.include_router(dashboard_router, prefix="/dashboard", tags=["Dashboard"])


##########################
### Exception handlers ###
##########################
@app.exception_handler(InvalidArgument)
async def invalid_argument_handler(request: Request, exc: InvalidArgument):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


@app.exception_handler(StorageError)
@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: Exception):
    log.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content={"detail": "Storage unavailable"})


#####################
### Root Endpoint ###
#####################
@app.get("/")
def read_root():
    return {"name": settings.PROJECT_NAME, "environment": settings.ENV, "version": settings.API_VERSION}
