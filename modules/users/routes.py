"""
User API endpoints.

Registration is open; profile changes and deletion are limited to the
account behind the caller's session.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_user_service
from api.models import MessageResponse
from shared.models import AuthenticatedUser

from .interfaces import IUserService
from .models import User, UserCreate, UserUpdate
from .exceptions import UserNotFoundError

router = APIRouter()


@router.get("", response_model=list[User])
def list_users(service: IUserService = Depends(get_user_service)) -> list[User]:
    """List all users."""
    return service.list_users()


@router.get("/me", response_model=User)
def get_me(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> User:
    """Get the user behind the current session."""
    me = service.get_user(user.id)
    if me is None:
        raise UserNotFoundError(user.id)
    return me


@router.get("/{user_id}", response_model=User)
def get_user(
    user_id: int,
    service: IUserService = Depends(get_user_service),
) -> User:
    user = service.get_user(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user


@router.post("", response_model=User, status_code=201)
def create_user(
    request: UserCreate,
    service: IUserService = Depends(get_user_service),
) -> User:
    """
    Register a new user.

    Returns 409 if the email is already registered.
    """
    return service.create_user(request)


@router.put("/{user_id}", response_model=User)
def update_user(
    user_id: int,
    request: UserUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> User:
    """
    Update the caller's own account.

    Omitting the password keeps the current one.
    """
    return service.update_user(user_id, request, user)


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> MessageResponse:
    """
    Delete the caller's own account.

    Sessions, ratings, collaborations and subscriptions go with it. Returns
    409 while the user still authors recipes.
    """
    service.delete_user(user_id, user)
    return MessageResponse(message="User deleted")
