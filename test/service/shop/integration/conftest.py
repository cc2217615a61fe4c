from collections.abc import Callable
from typing import Any

import pytest


@pytest.fixture
def create_product(client: Any) -> Callable[..., dict[str, Any]]:
    def _create(**overrides: Any) -> dict[str, Any]:
        payload = {
            'name': 'Widget',
            'description': 'A useful widget',
            'price': '9.99',
            'stock': 5,
            'category': 'tools',
            'img_url': None,
        } | overrides
        response = client.post('/api/products', json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_user(client: Any) -> Callable[..., dict[str, Any]]:
    def _create(**overrides: Any) -> dict[str, Any]:
        payload = {
            'first_name': 'Test',
            'last_name': 'User',
            'email': 'u1@example.com',
        } | overrides
        response = client.post('/api/users', json=payload)
        assert response.status_code == 201, response.text
        user_id = response.headers['Location'].rsplit('/', 1)[-1]
        return next(user for user in response.json() if user['id'] == user_id)

    return _create
