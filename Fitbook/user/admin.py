from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from .models import TrainerProfile, User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ["id", "full_name", "email", "role", "remaining_minutes", "is_active", "last_login"]
    list_filter = ("role", "is_active", "date_joined")
    search_fields = ("full_name", "email", "id")
    ordering = ("full_name",)
    # Balance changes go through the credit ledger, never through the admin form
    readonly_fields = ("id", "remaining_minutes", "date_joined", "last_login")

    fieldsets = (
        (None, {"fields": ("id", "full_name", "email", "role")}),
        (_("Contact"), {"fields": ("phone", "avatar_url")}),
        (_("Credits"), {"fields": ("remaining_minutes",)}),
        (_("Status"), {"fields": ("is_active", "is_staff")}),
        (_("Important dates"), {"fields": ("last_login", "date_joined")}),
    )


@admin.register(TrainerProfile)
class TrainerProfileAdmin(admin.ModelAdmin):
    list_display = ["user", "experience", "availability", "updated_at"]
    search_fields = ("user__full_name", "user__email")
    readonly_fields = ("id", "created_at", "updated_at")
