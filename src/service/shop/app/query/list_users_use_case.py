from typing import List

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.shop.domain.entity.user_entity import UserEntity


class ListUsersUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @Logger.io
    async def list_all(self) -> List[UserEntity]:
        async with self.uow:
            return await self.uow.users.list_all()
