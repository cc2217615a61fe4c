from typing import List, Optional

from sqlalchemy import select, update as sql_update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.shop.app.interface.i_user_repo import IUserRepo
from src.service.shop.domain.entity.user_entity import Address, UserEntity, UserRole
from src.service.shop.domain.errors import EmailAlreadyExistsError
from src.service.shop.driven_adapter.model.user_model import UserModel


class UserRepoImpl(IUserRepo):
    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def _address_columns(address: Optional[Address]) -> dict[str, Optional[str]]:
        address = address or Address()
        return {
            'address_street': address.street,
            'address_city': address.city,
            'address_state': address.state,
            'address_zip_code': address.zip_code,
            'address_country': address.country,
        }

    @staticmethod
    def _to_entity(user_model: UserModel) -> UserEntity:
        address = Address(
            street=user_model.address_street,
            city=user_model.address_city,
            state=user_model.address_state,
            zip_code=user_model.address_zip_code,
            country=user_model.address_country,
        )
        return UserEntity(
            id=user_model.id,
            first_name=user_model.first_name,
            last_name=user_model.last_name,
            email=user_model.email,
            phone=user_model.phone,
            role=UserRole(user_model.role),
            address=None if address.is_empty() else address,
            created_at=user_model.created_at,
        )

    @Logger.io
    async def create(self, *, user: UserEntity) -> UserEntity:
        user_model = UserModel(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            phone=user.phone,
            role=user.role.value,
            **UserRepoImpl._address_columns(user.address),
        )
        self.session.add(user_model)
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise EmailAlreadyExistsError(user.email) from e
        await self.session.refresh(user_model)

        return UserRepoImpl._to_entity(user_model)

    @Logger.io
    async def get_by_id(self, *, user_id: str) -> Optional[UserEntity]:
        result = await self.session.execute(select(UserModel).where(UserModel.id == user_id))
        user_model = result.scalar_one_or_none()

        if not user_model:
            return None

        return UserRepoImpl._to_entity(user_model)

    @Logger.io
    async def list_all(self) -> List[UserEntity]:
        result = await self.session.execute(select(UserModel).order_by(UserModel.id))
        return [UserRepoImpl._to_entity(user_model) for user_model in result.scalars().all()]

    @Logger.io
    async def update(self, *, user: UserEntity) -> Optional[UserEntity]:
        stmt = (
            sql_update(UserModel)
            .where(UserModel.id == user.id)
            .values(
                first_name=user.first_name,
                last_name=user.last_name,
                email=user.email,
                phone=user.phone,
                role=user.role.value,
                **UserRepoImpl._address_columns(user.address),
            )
            .returning(UserModel)
            .execution_options(populate_existing=True)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as e:
            raise EmailAlreadyExistsError(user.email) from e

        user_model = result.scalar_one_or_none()
        if not user_model:
            return None

        return UserRepoImpl._to_entity(user_model)
