"""Product data from the shop's catalog (Admin GraphQL API)."""

import logging
from typing import Optional

from apps.shops.admin_api import AdminAPIClient

logger = logging.getLogger(__name__)

PRODUCT_QUERY = """
query supplementQRCode($id: ID!) {
  product(id: $id) {
    title
    handle
    images(first: 1) {
      nodes {
        altText
        url
      }
    }
  }
}
"""

PRODUCT_SEARCH_QUERY = """
query searchProducts($first: Int!, $query: String) {
  products(first: $first, query: $query) {
    nodes {
      id
      title
      handle
      images(first: 1) {
        nodes {
          altText
          url
        }
      }
      variants(first: 1) {
        nodes {
          id
        }
      }
    }
  }
}
"""


def _first_node(connection: Optional[dict]) -> dict:
    nodes = (connection or {}).get('nodes') or []
    return nodes[0] if nodes else {}


def fetch_product(client: AdminAPIClient, product_id: str) -> Optional[dict]:
    """
    Title, handle and first image of a product.

    Returns:
        {'title', 'handle', 'image_url', 'image_alt'} or None
        when the product no longer exists in the shop
    """
    data = client.graphql(PRODUCT_QUERY, {'id': product_id})
    product = data.get('product')
    if not product:
        return None

    image = _first_node(product.get('images'))
    return {
        'title': product.get('title'),
        'handle': product.get('handle'),
        'image_url': image.get('url'),
        'image_alt': image.get('altText'),
    }


def search_products(client: AdminAPIClient, query: str = '', limit: int = 10) -> list[dict]:
    """Поиск товаров для выбора в форме QR-кода."""
    data = client.graphql(
        PRODUCT_SEARCH_QUERY,
        {'first': limit, 'query': query or None},
    )
    products = []
    for node in (data.get('products') or {}).get('nodes') or []:
        image = _first_node(node.get('images'))
        variant = _first_node(node.get('variants'))
        products.append({
            'id': node.get('id'),
            'title': node.get('title'),
            'handle': node.get('handle'),
            'variant_id': variant.get('id'),
            'image_url': image.get('url'),
            'image_alt': image.get('altText'),
        })
    return products


class ProductLookup:
    """
    Callable product lookup bound to one shop.

    Usage:
        lookup = ProductLookup(request.admin)
        product = lookup('gid://shopify/Product/1')
    """

    def __init__(self, client: AdminAPIClient):
        self.client = client

    def __call__(self, product_id: str) -> Optional[dict]:
        product = fetch_product(self.client, product_id)
        if product is None:
            logger.warning(
                f'Product {product_id} not found in {self.client.shop_domain}'
            )
        return product
