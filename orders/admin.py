from django.contrib import admin

from .models import Order


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "order_ref",
        "customer_name",
        "phone",
        "status",
        "payment_status",
        "total_amount",
        "created_at",
    )

    list_filter = (
        "payment_status",
        "status",
    )

    search_fields = (
        "order_ref",
        "customer_name",
        "phone",
        "email",
    )

    ordering = ("-created_at",)

    fieldsets = (
        ("Order Info", {
            "fields": (
                "order_ref",
                "items",
                "total_amount",
            )
        }),
        ("Customer", {
            "fields": (
                "customer_name",
                "phone",
                "email",
            )
        }),
        ("Status", {
            "fields": (
                "status",
                "payment_status",
                "created_at",
            )
        }),
    )

    # ---------------------------------
    # HARD SAFETY RULES
    # ---------------------------------

    def has_delete_permission(self, request, obj=None):
        # Confirmed orders hold venue bookings
        if obj and obj.is_confirmed:
            return False
        return super().has_delete_permission(request, obj)
