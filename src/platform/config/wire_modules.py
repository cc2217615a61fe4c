"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.shop.driving_adapter.http_controller import (
    cart_controller,
    product_controller,
    user_controller,
)


WIRE_MODULES: list[ModuleType] = [
    product_controller,
    user_controller,
    cart_controller,
]
