"""User API routes."""

import logging

from api.services import get_user_service
from common.models.user import User, UserCreate
from common.services.user_service import UserService
from fastapi import APIRouter, Depends, Query, Request, Response, status

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/user", tags=["users"], redirect_slashes=False)


@router.get("", response_model=list[User])
@router.get("/", response_model=list[User])
def list_users(
    name: str | None = Query(None, description="Case-insensitive partial name filter"),
    service: UserService = Depends(get_user_service),
) -> list[User]:
    if name is not None:
        return service.search_users(name)
    return service.list_users()


@router.get("/{user_id}", response_model=User, responses={404: {"description": "User not found"}})
def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> User | Response:
    user = service.get_user(user_id)
    if user is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return user


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=User, status_code=status.HTTP_201_CREATED)
def create_user(
    user: UserCreate,
    request: Request,
    response: Response,
    service: UserService = Depends(get_user_service),
) -> User:
    created = service.add_user(user)
    response.headers["Location"] = str(request.url_for("get_user", user_id=created.id))
    return created
