"""
Views для QR-кодов.

Тонкие views: вся логика в services/
"""
import logging

from django.conf import settings
from django.http import Http404, JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_GET, require_http_methods

from apps.shops.admin_api import AdminAPIError
from apps.shops.decorators import admin_required

from .forms import NEW_QR_CODE, FormState, form_data_from_post
from .models import QRCode
from .services import (
    ProductLookup,
    get_destination_url,
    get_qr_code,
    get_qr_code_image,
    get_qr_codes,
    search_products,
    supplement_qr_code,
    validate_destination,
    validate_qr_code,
)

logger = logging.getLogger(__name__)


def _wants_json(request) -> bool:
    return 'application/json' in request.headers.get('Accept', '')


def _parse_id(qr_id: str) -> int:
    if not qr_id.isdecimal():
        raise Http404('QR code not found')
    return int(qr_id)


@admin_required
@require_GET
def index(request):
    """Список QR-кодов магазина"""
    qr_codes = get_qr_codes(
        request.shop.domain,
        ProductLookup(request.admin),
        settings.APP_URL,
    )
    return render(request, 'qrcodes/index.html', {
        'shop': request.shop,
        'qr_codes': qr_codes,
    })


@admin_required
@require_http_methods(['GET', 'POST'])
def qr_code_form(request, qr_id):
    """Создание, редактирование и удаление QR-кода"""
    is_new = qr_id == 'new'
    pk = None if is_new else _parse_id(qr_id)

    if request.method == 'POST':
        return _save_qr_code(request, pk)

    if is_new:
        qr_code = None
        form_state = FormState(NEW_QR_CODE)
    else:
        qr_code = get_qr_code(
            pk,
            ProductLookup(request.admin),
            settings.APP_URL,
            shop=request.shop.domain,
        )
        if qr_code is None:
            raise Http404('QR code not found')
        form_state = FormState(qr_code)

    return _render_form(request, qr_code, form_state, is_new)


def _render_form(request, qr_code, form_state, is_new, errors=None, status=200):
    context = {
        'shop': request.shop,
        'qr_code': qr_code,
        'form_state': form_state,
        'is_new': is_new,
        'errors': errors or {},
        'destinations': QRCode.Destination.choices,
    }
    return render(request, 'qrcodes/form.html', context, status=status)


def _save_qr_code(request, pk):
    shop = request.shop.domain
    existing = None
    if pk is not None:
        existing = get_object_or_404(QRCode, pk=pk, shop=shop)

    if request.POST.get('action') == 'delete':
        if existing is None:
            raise Http404('QR code not found')
        existing.delete()
        logger.info(f'QR code {pk} deleted by {shop}')
        return redirect('qrcodes:index')

    data = form_data_from_post(request.POST)
    errors = validate_qr_code(data) or validate_destination(data)

    if errors:
        if _wants_json(request):
            return JsonResponse({'errors': errors}, status=422)
        if existing is None:
            qr_code = None
            form_state = FormState(NEW_QR_CODE).with_draft(data)
        else:
            qr_code = supplement_qr_code(existing, ProductLookup(request.admin), settings.APP_URL)
            form_state = FormState(qr_code).with_draft(data)
        return _render_form(request, qr_code, form_state, existing is None, errors, status=422)

    if existing is None:
        qr_code = QRCode.objects.create(shop=shop, **data)
        logger.info(f'QR code {qr_code.pk} created by {shop}')
    else:
        for field, value in data.items():
            setattr(existing, field, value)
        existing.save(update_fields=list(data))
        qr_code = existing

    return redirect('qrcodes:form', qr_id=qr_code.pk)


@admin_required
@require_GET
def product_search(request):
    """JSON API поиска товаров для формы"""
    query = request.GET.get('query', '').strip()
    try:
        products = search_products(request.admin, query)
    except AdminAPIError as e:
        return JsonResponse({'error': str(e)}, status=502)

    return JsonResponse({'products': products})


@require_GET
def public_qr_code(request, qr_id):
    """Публичная страница с картинкой QR-кода"""
    qr_code = get_object_or_404(QRCode, pk=qr_id)
    return render(request, 'qrcodes/public.html', {
        'title': qr_code.title,
        'image': get_qr_code_image(qr_code.pk, settings.APP_URL),
    })


@require_GET
def scan(request, qr_id):
    """Сканирование: +1 к счётчику и редирект на товар или в корзину"""
    qr_code = get_object_or_404(QRCode, pk=qr_id)

    qr_code.increment_scans()
    logger.info(f'QR code {qr_id} scanned')

    return redirect(get_destination_url(qr_code))
