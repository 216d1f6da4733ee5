from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from api.domain.users import User
from api.schemas.users import Envelope, UserRead, UserRequest
from api.services.user_service import (
    InvalidUserError,
    MalformedIdentifierError,
    UserNotFoundError,
    UserService,
    UserServiceError,
)

router = APIRouter(prefix="/api/users", tags=["users"])


def _get_user_service(request: Request) -> UserService:
    svc = getattr(getattr(request.app, "state", None), "user_service", None)
    if not svc:
        raise RuntimeError("UserService not configured")
    return svc


def _user_payload(user: User) -> dict:
    return UserRead.from_user(user).model_dump()


def _ok(data, status_code: int = 200) -> JSONResponse:
    return JSONResponse(Envelope(data=data).body(), status_code=status_code)


def _error_response(err: UserServiceError) -> JSONResponse:
    if isinstance(err, UserNotFoundError):
        status_code = 404
    elif isinstance(err, (InvalidUserError, MalformedIdentifierError)):
        status_code = 400
    else:
        status_code = 500
    return JSONResponse(Envelope(error=err.message).body(), status_code=status_code)


@router.post("")
def create_user(payload: UserRequest, request: Request):
    svc = _get_user_service(request)
    try:
        user = svc.create_user(payload.to_draft())
    except UserServiceError as exc:
        return _error_response(exc)
    return _ok(_user_payload(user), status_code=201)


@router.get("")
def list_users(request: Request):
    svc = _get_user_service(request)
    return _ok([_user_payload(user) for user in svc.list_users()])


@router.get("/{user_id}")
def get_user(user_id: str, request: Request):
    svc = _get_user_service(request)
    try:
        user = svc.get_user(user_id)
    except UserServiceError as exc:
        return _error_response(exc)
    return _ok(_user_payload(user))


@router.put("/{user_id}")
def update_user(user_id: str, payload: UserRequest, request: Request):
    svc = _get_user_service(request)
    try:
        user = svc.update_user(user_id, payload.to_draft())
    except UserServiceError as exc:
        return _error_response(exc)
    return _ok(_user_payload(user))


@router.delete("/{user_id}")
def delete_user(user_id: str, request: Request):
    svc = _get_user_service(request)
    try:
        svc.delete_user(user_id)
    except UserServiceError as exc:
        return _error_response(exc)
    return _ok("User Deleted")
