"""
Куда ведёт сканирование QR-кода.

A scan leads either to the product page or to a checkout
with one unit of the selected variant in the cart.
"""
import re
from typing import Any

from ..models import QRCode

VARIANT_ID_RE = re.compile(r'gid://shopify/ProductVariant/([0-9]+)')


class InvalidVariantReference(ValueError):
    """Variant reference of a cart QR code has no numeric id."""


class InvalidDestination(ValueError):
    """Destination kind is neither product nor cart."""


def _field(qr_code: Any, name: str):
    if isinstance(qr_code, dict):
        return qr_code.get(name)
    return getattr(qr_code, name, None)


def get_destination_url(qr_code) -> str:
    """
    Build the destination URL for a QR code.

    Args:
        qr_code: QRCode instance or dict with shop, destination,
            product_handle and product_variant_id

    Returns:
        Absolute URL on the shop's storefront

    Raises:
        InvalidDestination: unknown destination kind
        InvalidVariantReference: cart destination without a valid variant id
    """
    shop = _field(qr_code, 'shop')
    destination = _field(qr_code, 'destination')
    if destination == QRCode.Destination.PRODUCT:
        return f'https://{shop}/products/{_field(qr_code, "product_handle")}'

    if destination != QRCode.Destination.CART:
        raise InvalidDestination(f'Unknown destination: {destination!r}')

    match = VARIANT_ID_RE.search(_field(qr_code, 'product_variant_id') or '')
    if not match:
        raise InvalidVariantReference('Unrecognized product variant ID')

    return f'https://{shop}/cart/{match.group(1)}:1'
