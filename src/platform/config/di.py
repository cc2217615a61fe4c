"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.shop.app.command.create_product_use_case import CreateProductUseCase
from src.service.shop.app.command.create_user_use_case import CreateUserUseCase
from src.service.shop.app.command.delete_product_use_case import DeleteProductUseCase
from src.service.shop.app.command.reserve_cart_item_use_case import ReserveCartItemUseCase
from src.service.shop.app.command.update_product_use_case import UpdateProductUseCase
from src.service.shop.app.command.update_user_use_case import UpdateUserUseCase
from src.service.shop.app.query.get_product_use_case import GetProductUseCase
from src.service.shop.app.query.get_user_use_case import GetUserUseCase
from src.service.shop.app.query.list_products_use_case import ListProductsUseCase
from src.service.shop.app.query.list_users_use_case import ListUsersUseCase


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (uses AsyncEngineManager with settings from config_service)
    database = providers.Singleton(Database)

    # Unit of Work - a fresh instance (and session) per use case call
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork, session_factory=database.provided.session_maker
    )

    # Catalog use cases
    create_product_use_case = providers.Factory(CreateProductUseCase, uow=unit_of_work)
    update_product_use_case = providers.Factory(UpdateProductUseCase, uow=unit_of_work)
    delete_product_use_case = providers.Factory(DeleteProductUseCase, uow=unit_of_work)
    get_product_use_case = providers.Factory(GetProductUseCase, uow=unit_of_work)
    list_products_use_case = providers.Factory(ListProductsUseCase, uow=unit_of_work)

    # Account use cases
    create_user_use_case = providers.Factory(CreateUserUseCase, uow=unit_of_work)
    update_user_use_case = providers.Factory(UpdateUserUseCase, uow=unit_of_work)
    get_user_use_case = providers.Factory(GetUserUseCase, uow=unit_of_work)
    list_users_use_case = providers.Factory(ListUsersUseCase, uow=unit_of_work)

    # Cart reservation
    reserve_cart_item_use_case = providers.Factory(ReserveCartItemUseCase, uow=unit_of_work)


container = Container()
