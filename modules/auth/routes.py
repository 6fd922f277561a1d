"""
Session API endpoints.

Login opens a session and returns its token; logout closes it.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_session_service
from api.models import MessageResponse

from .interfaces import ISessionService
from .models import LoginRequest, LoginResponse, LogoutRequest

router = APIRouter()


@router.post("/login", response_model=LoginResponse, status_code=201)
def login(
    request: LoginRequest,
    service: ISessionService = Depends(get_session_service),
) -> LoginResponse:
    """
    Start a session.

    Send the returned session_id as `Authorization: Bearer <session_id>`
    on later requests. Unknown email and wrong password both return 401
    with the same body.
    """
    return service.login(request.email, request.password)


@router.post("/logout", response_model=MessageResponse)
def logout(
    request: LogoutRequest,
    service: ISessionService = Depends(get_session_service),
) -> MessageResponse:
    """
    Close an active session.

    Returns 404 if the session does not exist or is already closed.
    """
    service.logout(request.session_id)
    return MessageResponse(message="Session closed")
