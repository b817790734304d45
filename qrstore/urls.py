"""URL configuration for qrstore project."""

from django.contrib import admin
from django.urls import path, include
from django.views.generic import RedirectView

urlpatterns = [
    # Главная -> список QR-кодов в админке магазина
    path('', RedirectView.as_view(url='/app/', permanent=False), name='home'),

    # Админка Django
    path('admin/', admin.site.urls),

    # Админ-интерфейс магазина и публичные страницы QR-кодов
    path('', include('apps.qrcodes.urls', namespace='qrcodes')),
]
