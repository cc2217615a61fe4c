from typing import Optional

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.shop.domain.entity.user_entity import Address, UserEntity, UserRole


class CreateUserUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @Logger.io
    async def create(
        self,
        *,
        first_name: str,
        last_name: str,
        email: str,
        phone: Optional[str] = None,
        role: UserRole = UserRole.CUSTOMER,
        address: Optional[Address] = None,
    ) -> UserEntity:
        user = UserEntity.create(
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone=phone,
            role=role,
            address=address,
        )
        async with self.uow:
            created_user = await self.uow.users.create(user=user)
            await self.uow.commit()
        return created_user
