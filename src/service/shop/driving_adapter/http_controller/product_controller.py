from typing import List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Query, Response, status

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.shop.app.command.create_product_use_case import CreateProductUseCase
from src.service.shop.app.command.delete_product_use_case import DeleteProductUseCase
from src.service.shop.app.command.update_product_use_case import UpdateProductUseCase
from src.service.shop.app.query.get_product_use_case import GetProductUseCase
from src.service.shop.app.query.list_products_use_case import ListProductsUseCase
from src.service.shop.domain.errors import ProductNotFoundError
from src.service.shop.driving_adapter.schema.product_schema import (
    ProductCreateRequest,
    ProductResponse,
    ProductUpdateRequest,
)


router = APIRouter()


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
@inject
async def list_products(
    use_case: ListProductsUseCase = Depends(Provide[Container.list_products_use_case]),
) -> List[ProductResponse]:
    products = await use_case.list_active()
    return [ProductResponse.model_validate(product) for product in products]


# Declared before /{product_id} so "search" is not parsed as an id
@router.get('/search', status_code=status.HTTP_200_OK)
@Logger.io
@inject
async def search_products(
    keyword: str = Query(..., description='Case-insensitive match on name or description'),
    use_case: ListProductsUseCase = Depends(Provide[Container.list_products_use_case]),
) -> List[ProductResponse]:
    products = await use_case.search(keyword=keyword)
    return [ProductResponse.model_validate(product) for product in products]


@router.get('/{product_id}', status_code=status.HTTP_200_OK)
@Logger.io
@inject
async def get_product(
    product_id: int,
    use_case: GetProductUseCase = Depends(Provide[Container.get_product_use_case]),
) -> ProductResponse:
    product = await use_case.get_by_id(product_id=product_id)
    return ProductResponse.model_validate(product)


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
@inject
async def create_product(
    request: ProductCreateRequest,
    use_case: CreateProductUseCase = Depends(Provide[Container.create_product_use_case]),
) -> ProductResponse:
    product = await use_case.create(
        name=request.name,
        description=request.description,
        price=request.price,
        stock=request.stock,
        category=request.category,
        img_url=request.img_url,
    )
    return ProductResponse.model_validate(product)


@router.put('/{product_id}', status_code=status.HTTP_200_OK)
@Logger.io
@inject
async def update_product(
    product_id: int,
    request: ProductUpdateRequest,
    use_case: UpdateProductUseCase = Depends(Provide[Container.update_product_use_case]),
) -> ProductResponse:
    product = await use_case.update(
        product_id=product_id,
        name=request.name,
        description=request.description,
        price=request.price,
        stock=request.stock,
        category=request.category,
        img_url=request.img_url,
        is_active=request.is_active,
    )
    return ProductResponse.model_validate(product)


@router.delete('/{product_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
@inject
async def delete_product(
    product_id: int,
    use_case: DeleteProductUseCase = Depends(Provide[Container.delete_product_use_case]),
) -> Response:
    if not await use_case.delete(product_id=product_id):
        raise ProductNotFoundError(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
