"""
Enrichment of stored QR codes for display.

A stored QR code is joined with product data from the shop's catalog,
its destination URL and a freshly rendered image. Nothing is cached:
the view is rebuilt on every read.
"""
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Callable, Optional

from django.conf import settings

from ..models import QRCode
from .destinations import get_destination_url
from .images import get_qr_code_image

ProductLookupFn = Callable[[str], Optional[dict]]


def supplement_qr_code(qr_code: QRCode, lookup: ProductLookupFn, base_url: str) -> dict:
    """
    Дополнить QR-код данными товара, ссылкой и картинкой.

    The image is rendered on a worker thread while the product lookup runs.
    A product missing upstream yields product_deleted=True instead of an error.
    """
    with ThreadPoolExecutor(max_workers=1) as pool:
        image_future = pool.submit(get_qr_code_image, qr_code.pk, base_url)
        product = lookup(qr_code.product_id)
        image = image_future.result()

    product = product or {}
    return {
        **qr_code.as_dict(),
        'product_deleted': not product.get('title'),
        'product_title': product.get('title'),
        'product_image': product.get('image_url'),
        'product_alt': product.get('image_alt'),
        'destination_url': get_destination_url(qr_code),
        'image': image,
    }


def get_qr_code(
    qr_code_id: int,
    lookup: ProductLookupFn,
    base_url: str,
    shop: Optional[str] = None,
) -> Optional[dict]:
    """Один QR-код с данными товара. None, если записи нет (или она чужого магазина)."""
    qr_codes = QRCode.objects.filter(pk=qr_code_id)
    if shop is not None:
        qr_codes = qr_codes.filter(shop=shop)
    qr_code = qr_codes.first()
    if qr_code is None:
        return None

    return supplement_qr_code(qr_code, lookup, base_url)


def get_qr_codes(shop: str, lookup: ProductLookupFn, base_url: str) -> list[dict]:
    """
    All QR codes of a shop, newest first, each one enriched.

    Records are enriched concurrently; the result keeps the -id order.
    """
    qr_codes = list(QRCode.objects.filter(shop=shop).order_by('-id'))
    if not qr_codes:
        return []

    workers = max(1, min(settings.QRCODES_ENRICH_WORKERS, len(qr_codes)))
    enrich = partial(supplement_qr_code, lookup=lookup, base_url=base_url)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(enrich, qr_codes))
