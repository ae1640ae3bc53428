"""User management router.

Registration is anonymous; every other route requires a bearer token.
"""

from uuid import UUID

from fastapi import APIRouter, Request, Response, status

from wobo.presentation.api.dependencies import AuthService, CurrentUser, DBSession
from wobo.presentation.api.exception_handlers import unwrap
from wobo.presentation.api.schemas.users import (
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
)
from wobo_identity.application import Failure, Result

router = APIRouter()


async def _finish(session: DBSession, result: Result) -> None:
    """Commit a successful mutation, roll back a failed one."""
    if isinstance(result, Failure):
        await session.rollback()
    else:
        await session.commit()


@router.get(
    "",
    summary="List users",
    responses={
        200: {"description": "All registered users"},
        401: {"description": "Not authenticated"},
    },
)
async def list_users(
    _: CurrentUser,
    auth_service: AuthService,
) -> list[UserResponse]:
    profiles = await auth_service.list_all()
    return [UserResponse.model_validate(p) for p in profiles]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        409: {"description": "Email already registered"},
        422: {"description": "Invalid input"},
    },
)
async def create_user(
    body: CreateUserRequest,
    request: Request,
    response: Response,
    auth_service: AuthService,
    session: DBSession,
) -> UserResponse:
    """
    Register a new user account.

    The password is stored as a bcrypt hash and never returned.
    """
    result = await auth_service.register(
        name=body.name,
        email=body.email,
        password=body.password,
        gender=body.gender,
    )
    await _finish(session, result)
    profile = unwrap(result)

    response.headers["Location"] = str(
        request.url_for("get_user", user_id=str(profile.id)),
    )
    return UserResponse.model_validate(profile)


@router.get(
    "/{user_id}",
    name="get_user",
    summary="Get user by id",
    responses={
        200: {"description": "User found"},
        401: {"description": "Not authenticated"},
        404: {"description": "User not found"},
    },
)
async def get_user(
    user_id: UUID,
    _: CurrentUser,
    auth_service: AuthService,
) -> UserResponse:
    profile = unwrap(await auth_service.get_by_id(user_id))
    return UserResponse.model_validate(profile)


@router.put(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace a user",
    responses={
        204: {"description": "User updated"},
        401: {"description": "Not authenticated"},
        404: {"description": "User not found"},
        409: {"description": "Email already registered"},
    },
)
async def update_user(
    user_id: UUID,
    body: UpdateUserRequest,
    _: CurrentUser,
    auth_service: AuthService,
    session: DBSession,
) -> None:
    """
    Replace name, email, password and gender of a user.

    All fields are required and the password is re-hashed every time.
    """
    result = await auth_service.update(
        user_id=user_id,
        name=body.name,
        email=body.email,
        password=body.password,
        gender=body.gender,
    )
    await _finish(session, result)
    unwrap(result)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
    responses={
        204: {"description": "User deleted"},
        401: {"description": "Not authenticated"},
        404: {"description": "User not found"},
    },
)
async def delete_user(
    user_id: UUID,
    _: CurrentUser,
    auth_service: AuthService,
    session: DBSession,
) -> None:
    result = await auth_service.delete(user_id)
    await _finish(session, result)
    unwrap(result)
