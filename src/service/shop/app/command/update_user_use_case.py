from typing import Optional

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.shop.domain.entity.user_entity import Address, UserEntity, UserRole
from src.service.shop.domain.errors import UserNotFoundError


class UpdateUserUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @Logger.io
    async def update(
        self,
        *,
        user_id: str,
        first_name: str,
        last_name: str,
        email: str,
        phone: Optional[str] = None,
        role: UserRole = UserRole.CUSTOMER,
        address: Optional[Address] = None,
    ) -> UserEntity:
        """Replace every profile field; the id never changes."""
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id=user_id)
            if user is None:
                raise UserNotFoundError(user_id)

            user.replace_profile(
                first_name=first_name,
                last_name=last_name,
                email=email,
                phone=phone,
                role=role,
                address=address,
            )
            updated_user = await self.uow.users.update(user=user)
            if updated_user is None:
                raise UserNotFoundError(user_id)

            await self.uow.commit()
        return updated_user
