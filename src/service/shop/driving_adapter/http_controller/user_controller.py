from typing import List, Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Response, status

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.shop.app.command.create_user_use_case import CreateUserUseCase
from src.service.shop.app.command.update_user_use_case import UpdateUserUseCase
from src.service.shop.app.query.get_user_use_case import GetUserUseCase
from src.service.shop.app.query.list_users_use_case import ListUsersUseCase
from src.service.shop.domain.entity.user_entity import Address
from src.service.shop.driving_adapter.schema.user_schema import (
    AddressSchema,
    UserRequest,
    UserResponse,
)


# === API Router ===

router = APIRouter()


def _to_address(address: Optional[AddressSchema]) -> Optional[Address]:
    if address is None:
        return None
    return Address(**address.model_dump())


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
@inject
async def list_users(
    use_case: ListUsersUseCase = Depends(Provide[Container.list_users_use_case]),
) -> List[UserResponse]:
    users = await use_case.list_all()
    return [UserResponse.model_validate(user) for user in users]


@router.get('/{user_id}', status_code=status.HTTP_200_OK)
@Logger.io
@inject
async def get_user(
    user_id: str,
    use_case: GetUserUseCase = Depends(Provide[Container.get_user_use_case]),
) -> UserResponse:
    user = await use_case.get_by_id(user_id=user_id)
    return UserResponse.model_validate(user)


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
@inject
async def create_user(
    request: UserRequest,
    response: Response,
    create_use_case: CreateUserUseCase = Depends(Provide[Container.create_user_use_case]),
    list_use_case: ListUsersUseCase = Depends(Provide[Container.list_users_use_case]),
) -> List[UserResponse]:
    """Creates the user and answers with the full user listing; Location points at the new user."""
    user = await create_use_case.create(
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email,
        phone=request.phone,
        role=request.role,
        address=_to_address(request.address),
    )
    response.headers['Location'] = f'/api/users/{user.id}'

    users = await list_use_case.list_all()
    return [UserResponse.model_validate(u) for u in users]


@router.put('/{user_id}', status_code=status.HTTP_200_OK)
@Logger.io
@inject
async def update_user(
    user_id: str,
    request: UserRequest,
    use_case: UpdateUserUseCase = Depends(Provide[Container.update_user_use_case]),
) -> UserResponse:
    user = await use_case.update(
        user_id=user_id,
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email,
        phone=request.phone,
        role=request.role,
        address=_to_address(request.address),
    )
    return UserResponse.model_validate(user)
