"""Celery tasks for QR codes."""

import logging

from celery import shared_task

from apps.shops.admin_api import AdminAPIClient, AdminAPIError
from apps.shops.models import Shop

from .models import QRCode
from .services import fetch_product

logger = logging.getLogger(__name__)


@shared_task
def refresh_product_handles(shop_domain: str) -> int:
    """
    Update stored product handles that changed in the shop's catalog.

    Product destination URLs are built from the stored handle, so a renamed
    product would otherwise lead to a 404 on the storefront.

    Args:
        shop_domain: Shop.domain

    Returns:
        Number of QR codes updated
    """
    shop = Shop.objects.filter(domain=shop_domain, is_active=True).first()
    if shop is None:
        logger.warning(f'Shop {shop_domain} not found or not active')
        return 0

    client = AdminAPIClient.for_shop(shop)
    updated = 0

    try:
        for qr_code in QRCode.objects.filter(shop=shop_domain).order_by('-id'):
            product = fetch_product(client, qr_code.product_id)
            if product is None:
                logger.warning(
                    f'QR code {qr_code.pk}: product {qr_code.product_id} deleted upstream'
                )
                continue

            handle = product.get('handle')
            if handle and handle != qr_code.product_handle:
                qr_code.product_handle = handle
                qr_code.save(update_fields=['product_handle'])
                updated += 1
    except AdminAPIError:
        logger.exception(f'Error refreshing product handles for {shop_domain}')

    logger.info(f'Refreshed {updated} product handles for {shop_domain}')
    return updated


@shared_task
def refresh_all_shops() -> int:
    """
    Queue handle refresh for every active shop.

    This task is scheduled to run daily via Celery Beat.
    """
    domains = Shop.objects.filter(is_active=True).values_list('domain', flat=True)

    count = 0
    for domain in domains:
        refresh_product_handles.delay(domain)
        count += 1

    logger.info(f'Queued {count} product handle refresh tasks')
    return count
