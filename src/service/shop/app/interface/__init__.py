"""Application layer interfaces (Ports)"""

from src.service.shop.app.interface.i_cart_line_repo import ICartLineRepo
from src.service.shop.app.interface.i_product_repo import IProductRepo
from src.service.shop.app.interface.i_user_repo import IUserRepo

__all__ = [
    'ICartLineRepo',
    'IProductRepo',
    'IUserRepo',
]
