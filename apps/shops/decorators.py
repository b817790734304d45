import hashlib
import hmac
from functools import wraps

from django.conf import settings
from django.http import HttpResponseForbidden

from .admin_api import AdminAPIClient
from .models import Shop

SESSION_KEY = 'shop'


def sign_query(params: dict, secret: str) -> str:
    """HMAC-SHA256 подпись параметров запроса (все, кроме hmac), как её считает админка магазина"""
    message = '&'.join(
        f'{key}={value}'
        for key, value in sorted(params.items())
        if key != 'hmac'
    )
    return hmac.new(secret.encode(), message.encode(), hashlib.sha256).hexdigest()


def verify_query(query) -> bool:
    """Check the hmac parameter of a launch request from the shop admin."""
    secret = settings.SHOPIFY_API_SECRET
    signature = query.get('hmac', '')
    if not secret or not signature:
        return False

    params = {key: query.get(key) for key in query.keys()}
    return hmac.compare_digest(sign_query(params, secret), signature)


def get_session_shop(request):
    """
    Текущий магазин.

    ?shop= is trusted only with a valid hmac signature; otherwise the shop
    stored in the session is used.
    """
    if request.GET.get('shop') and verify_query(request.GET):
        domain = request.GET['shop']
    else:
        domain = request.session.get(SESSION_KEY)
    if not domain:
        return None
    return Shop.objects.filter(domain=domain, is_active=True).first()


def admin_required(func):
    """
    Пускает только запросы от установленного магазина.

    Sets request.shop (Shop) and request.admin (AdminAPIClient).
    """
    @wraps(func)
    def wrapper(request, *args, **kwargs):
        shop = get_session_shop(request)
        if shop is None:
            return HttpResponseForbidden('Shop is not installed or session expired')

        request.session[SESSION_KEY] = shop.domain
        request.shop = shop
        request.admin = AdminAPIClient.for_shop(shop)
        return func(request, *args, **kwargs)

    return wrapper
