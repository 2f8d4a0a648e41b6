"""FastAPI web application for tourdesk."""

import logging
import time
from contextlib import asynccontextmanager
from typing import List

from fastapi import APIRouter, Depends, FastAPI, Request, Response, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from tourdesk.api.auth_models import AuthResponse, LoginRequest, SignupRequest
from tourdesk.api.exception_handlers import register_exception_handlers
from tourdesk.api.tour_models import TourRequest
from tourdesk.auth.dependencies import get_current_user, get_user_directory
from tourdesk.auth.user_directory import UserDirectory
from tourdesk.config import get_settings
from tourdesk.database.database import get_db, init_db
from tourdesk.database.repository import TourRepository
from tourdesk.models.tour import Tour
from tourdesk.models.user import User

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Fail fast on missing configuration (e.g. JWT_SECRET_KEY).
    get_settings()
    init_db()
    logger.info("tourdesk started")
    yield


# Initialize FastAPI app
app = FastAPI(
    title="tourdesk API",
    description="Per-user tour management with signup, login and owner-scoped CRUD",
    version=VERSION,
    lifespan=lifespan,
)
register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request with its status and duration."""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
    return response


def get_tour_repository(db: Session = Depends(get_db)) -> TourRepository:
    """Get a TourRepository bound to the request's database session."""
    return TourRepository(db)


router = APIRouter()


@router.post("/users/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(request: SignupRequest, directory: UserDirectory = Depends(get_user_directory)):
    """Register a user and return a token for it."""
    user, token = directory.signup(request.model_dump())
    return AuthResponse(token=token, user=user)


@router.post("/users/login", response_model=AuthResponse)
def login(request: LoginRequest, directory: UserDirectory = Depends(get_user_directory)):
    """Exchange email and password for a token."""
    user, token = directory.login(request.email, request.password)
    return AuthResponse(token=token, user=user)


@router.get("/users/me", response_model=User)
def read_me(current_user: User = Depends(get_current_user)):
    """Return the authenticated user's profile."""
    return current_user


@router.get("/tours", response_model=List[Tour])
def list_tours(
    current_user: User = Depends(get_current_user),
    tours: TourRepository = Depends(get_tour_repository),
):
    """List the caller's tours."""
    return tours.get_all(current_user.id)


@router.post("/tours", response_model=Tour, status_code=status.HTTP_201_CREATED)
def create_tour(
    request: TourRequest,
    current_user: User = Depends(get_current_user),
    tours: TourRepository = Depends(get_tour_repository),
):
    """Create a tour owned by the caller."""
    return tours.create(current_user.id, request.model_dump())


@router.get("/tours/{tour_id}", response_model=Tour)
def get_tour(
    tour_id: str,
    current_user: User = Depends(get_current_user),
    tours: TourRepository = Depends(get_tour_repository),
):
    """Get one of the caller's tours."""
    return tours.get(current_user.id, tour_id)


@router.put("/tours/{tour_id}", response_model=Tour)
def update_tour(
    tour_id: str,
    request: TourRequest,
    current_user: User = Depends(get_current_user),
    tours: TourRepository = Depends(get_tour_repository),
):
    """Update the supplied fields of one of the caller's tours."""
    return tours.update(current_user.id, tour_id, request.model_dump(exclude_unset=True))


@router.delete("/tours/{tour_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_tour(
    tour_id: str,
    current_user: User = Depends(get_current_user),
    tours: TourRepository = Depends(get_tour_repository),
):
    """Permanently delete one of the caller's tours."""
    tours.delete(current_user.id, tour_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.get("/", response_class=PlainTextResponse)
async def root():
    """Root endpoint."""
    return "API Running!"


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": VERSION}


app.include_router(router)
app.include_router(router, prefix="/api", include_in_schema=False)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
