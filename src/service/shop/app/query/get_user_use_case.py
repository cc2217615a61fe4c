from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.shop.domain.entity.user_entity import UserEntity
from src.service.shop.domain.errors import UserNotFoundError


class GetUserUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @Logger.io
    async def get_by_id(self, *, user_id: str) -> UserEntity:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id=user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
