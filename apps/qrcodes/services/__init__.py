"""
QR codes services package.

Views stay thin; all logic lives here.
"""
from .destinations import InvalidDestination, InvalidVariantReference, get_destination_url
from .images import get_qr_code_image, get_scan_url
from .validation import validate_destination, validate_qr_code
from .products import ProductLookup, fetch_product, search_products
from .enrichment import get_qr_code, get_qr_codes, supplement_qr_code

__all__ = [
    # Destinations
    'InvalidDestination',
    'InvalidVariantReference',
    'get_destination_url',
    # Images
    'get_qr_code_image',
    'get_scan_url',
    # Validation
    'validate_destination',
    'validate_qr_code',
    # Products
    'ProductLookup',
    'fetch_product',
    'search_products',
    # Enrichment
    'get_qr_code',
    'get_qr_codes',
    'supplement_qr_code',
]
