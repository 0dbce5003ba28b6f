from django.contrib import admin

from modules.products.models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "price", "quantity", "updated_at")
    search_fields = ("name",)
    readonly_fields = ("created_at", "updated_at")
