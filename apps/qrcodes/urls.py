from django.urls import path
from . import views

app_name = 'qrcodes'

urlpatterns = [
    # Админ-интерфейс магазина
    path('app/', views.index, name='index'),
    path('app/products/', views.product_search, name='product_search'),
    path('app/qrcodes/<str:qr_id>/', views.qr_code_form, name='form'),

    # Публичные страницы
    path('qrcodes/<int:qr_id>/', views.public_qr_code, name='public'),
    path('qrcodes/<int:qr_id>/scan', views.scan, name='scan'),
]
