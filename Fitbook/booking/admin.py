from django.contrib import admin

from booking.models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'fitness_class', 'minutes_spent', 'created_at']
    list_filter = ['created_at']
    search_fields = ['user__email', 'fitness_class__title']
    readonly_fields = ['id', 'user', 'fitness_class', 'minutes_spent', 'created_at', 'updated_at']

    # Bookings are created through BookingService so the ledger stays in step
    def has_add_permission(self, request):
        return False
