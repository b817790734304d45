from django.contrib import admin
from .models import Shop


@admin.register(Shop)
class ShopAdmin(admin.ModelAdmin):
    list_display = ('domain', 'is_active', 'installed_at')
    list_filter = ('is_active',)
    search_fields = ('domain',)
    readonly_fields = ('installed_at',)
