from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.shop.domain.entity.user_entity import UserEntity


class IUserRepo(ABC):
    """Account Store"""

    @abstractmethod
    async def create(self, *, user: UserEntity) -> UserEntity:
        pass

    @abstractmethod
    async def get_by_id(self, *, user_id: str) -> Optional[UserEntity]:
        pass

    @abstractmethod
    async def list_all(self) -> List[UserEntity]:
        pass

    @abstractmethod
    async def update(self, *, user: UserEntity) -> Optional[UserEntity]:
        pass
