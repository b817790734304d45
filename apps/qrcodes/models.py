from django.db import models
from django.db.models import F


class QRCode(models.Model):
    """QR-код, ведущий на страницу товара или в корзину"""

    class Destination(models.TextChoices):
        PRODUCT = 'product', 'Product page'
        CART = 'cart', 'Checkout with product in cart'

    shop = models.CharField('Shop', max_length=255, db_index=True)
    title = models.CharField('Title', max_length=255)
    destination = models.CharField(
        'Destination',
        max_length=20,
        choices=Destination.choices,
        default=Destination.PRODUCT
    )

    # Ссылки на товар в каталоге магазина (gid://shopify/...)
    product_id = models.CharField('Product ID', max_length=255)
    product_variant_id = models.CharField('Product variant ID', max_length=255, blank=True)
    product_handle = models.CharField('Product handle', max_length=255, blank=True)

    # Статистика
    scans = models.PositiveIntegerField('Scans', default=0)

    created_at = models.DateTimeField('Created', auto_now_add=True)

    class Meta:
        verbose_name = 'QR code'
        verbose_name_plural = 'QR codes'
        ordering = ['-id']

    def __str__(self):
        return f'QR-{self.pk} {self.title}'

    def increment_scans(self) -> None:
        """Увеличить счётчик сканирований (атомарно, на стороне БД)"""
        QRCode.objects.filter(pk=self.pk).update(scans=F('scans') + 1)

    def as_dict(self) -> dict:
        return {
            'id': self.pk,
            'shop': self.shop,
            'title': self.title,
            'destination': self.destination,
            'product_id': self.product_id,
            'product_variant_id': self.product_variant_id,
            'product_handle': self.product_handle,
            'scans': self.scans,
            'created_at': self.created_at,
        }
