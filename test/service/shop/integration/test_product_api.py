from decimal import Decimal

import pytest


@pytest.mark.integration
class TestProductApi:
    def test_create_product(self, client):
        response = client.post(
            '/api/products',
            json={'name': 'Lamp', 'description': 'Desk lamp', 'price': '12.50', 'stock': 3},
        )

        assert response.status_code == 201
        body = response.json()
        assert isinstance(body['id'], int)
        assert body['name'] == 'Lamp'
        assert Decimal(body['price']) == Decimal('12.50')
        assert body['stock'] == 3
        assert body['is_active'] is True

    @pytest.mark.parametrize(
        'payload',
        [
            {'name': 'Lamp', 'price': '-1', 'stock': 3},
            {'name': 'Lamp', 'price': '1', 'stock': -3},
            {'name': '', 'price': '1', 'stock': 3},
            {'price': '1', 'stock': 3},
        ],
    )
    def test_create_product_with_invalid_payload_returns_400(self, client, payload):
        response = client.post('/api/products', json=payload)

        assert response.status_code == 400

    def test_get_product(self, client, create_product):
        product = create_product(name='Lamp')

        response = client.get(f'/api/products/{product["id"]}')

        assert response.status_code == 200
        assert response.json()['name'] == 'Lamp'

    def test_get_unknown_product_returns_404(self, client):
        response = client.get('/api/products/9999')

        assert response.status_code == 404
        assert 'Product not found' in response.json()['detail']

    def test_list_returns_active_products_only(self, client, create_product):
        kept = create_product(name='Kept')
        removed = create_product(name='Removed')
        client.delete(f'/api/products/{removed["id"]}')

        response = client.get('/api/products')

        assert response.status_code == 200
        assert [p['id'] for p in response.json()] == [kept['id']]

    def test_search_is_case_insensitive_and_skips_out_of_stock(self, client, create_product):
        keyboard = create_product(name='Mechanical Keyboard', stock=2)
        create_product(name='Keyboard Cover', stock=0)
        mouse = create_product(name='Mouse', description='Pairs with any KEYBOARD')
        create_product(name='Monitor')

        response = client.get('/api/products/search', params={'keyword': 'keyboard'})

        assert response.status_code == 200
        assert [p['id'] for p in response.json()] == [keyboard['id'], mouse['id']]

    def test_search_requires_keyword(self, client):
        response = client.get('/api/products/search')

        assert response.status_code == 400

    def test_update_product(self, client, create_product):
        product = create_product(name='Old', stock=1)

        response = client.put(
            f'/api/products/{product["id"]}',
            json={'name': 'New', 'description': 'Renamed', 'price': '3.00', 'stock': 7},
        )

        assert response.status_code == 200
        body = response.json()
        assert body['name'] == 'New'
        assert body['stock'] == 7
        assert body['is_active'] is True

    def test_update_unknown_product_returns_404(self, client):
        response = client.put(
            '/api/products/9999', json={'name': 'New', 'price': '3.00', 'stock': 7}
        )

        assert response.status_code == 404

    def test_delete_product_is_soft(self, client, create_product):
        product = create_product()

        response = client.delete(f'/api/products/{product["id"]}')
        fetched = client.get(f'/api/products/{product["id"]}')

        assert response.status_code == 204
        assert fetched.status_code == 200
        assert fetched.json()['is_active'] is False

    def test_delete_unknown_product_returns_404(self, client):
        response = client.delete('/api/products/9999')

        assert response.status_code == 404
