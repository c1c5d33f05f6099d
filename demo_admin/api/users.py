from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Response, status

from demo_admin.api.dependencies import get_user_service
from demo_admin.models.schemas import User
from demo_admin.services.entity_service import EntityService

router = APIRouter(prefix="/users", tags=["Users"])

_NOT_FOUND = {404: {"description": "User not found"}}


@router.get(
    "",
    response_model=list[User],
    summary="List users",
    description="Returns every registered user.",
    responses={200: {"description": "Users listed"}},
)
def list_users(service: EntityService[User] = Depends(get_user_service)) -> list[User]:
    return service.list_all()


@router.get(
    "/{user_id}",
    response_model=User,
    summary="Get user by ID",
    description="Returns the user with the given ID.",
    responses={200: {"description": "User found"}, **_NOT_FOUND},
)
def get_user(
    user_id: int = Path(description="User ID"),
    service: EntityService[User] = Depends(get_user_service),
):
    user = service.get_by_id(user_id)
    if user is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return user


@router.post(
    "",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    description="Creates a user. Any client-supplied ID is ignored.",
    responses={201: {"description": "User created"}},
)
def create_user(payload: User, service: EntityService[User] = Depends(get_user_service)) -> User:
    return service.create(payload)


@router.put(
    "/{user_id}",
    response_model=User,
    summary="Update user",
    description="Replaces an existing user, keeping its ID.",
    responses={200: {"description": "User updated"}, **_NOT_FOUND},
)
def update_user(
    payload: User,
    user_id: int = Path(description="User ID"),
    service: EntityService[User] = Depends(get_user_service),
):
    user = service.update(user_id, payload)
    if user is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return user


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete user",
    description="Deletes the user with the given ID.",
    responses={204: {"description": "User deleted"}, **_NOT_FOUND},
)
def delete_user(
    user_id: int = Path(description="User ID"),
    service: EntityService[User] = Depends(get_user_service),
) -> Response:
    if service.delete(user_id):
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return Response(status_code=status.HTTP_404_NOT_FOUND)
