from django.contrib import admin
from .models import QRCode


@admin.register(QRCode)
class QRCodeAdmin(admin.ModelAdmin):
    list_display = ('id', 'title', 'shop', 'destination', 'scans', 'created_at')
    list_filter = ('destination', 'shop')
    search_fields = ('title', 'shop', 'product_handle')
    readonly_fields = ('scans', 'created_at')
