"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.shop.driven_adapter.model.cart_line_model import CartLineModel
from src.service.shop.driven_adapter.model.product_model import ProductModel
from src.service.shop.driven_adapter.model.user_model import UserModel

__all__ = [
    'CartLineModel',
    'ProductModel',
    'UserModel',
]
