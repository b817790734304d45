from django.db import models


class Shop(models.Model):
    """Магазин, в который установлено приложение"""

    domain = models.CharField(
        'Domain',
        max_length=255,
        unique=True,
        help_text='Shop domain, e.g. example.myshopify.com'
    )
    access_token = models.CharField('Admin API access token', max_length=255)
    scope = models.CharField('Granted scopes', max_length=500, blank=True)

    is_active = models.BooleanField('Active', default=True)
    installed_at = models.DateTimeField('Installed', auto_now_add=True)

    class Meta:
        verbose_name = 'Shop'
        verbose_name_plural = 'Shops'
        ordering = ['domain']

    def __str__(self):
        return self.domain
