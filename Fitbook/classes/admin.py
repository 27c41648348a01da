from django.contrib import admin

from classes.models import FitnessClass


@admin.register(FitnessClass)
class FitnessClassAdmin(admin.ModelAdmin):
    list_display = ['title', 'trainer', 'date', 'start_time', 'end_time', 'max_capacity', 'is_recurring_class', 'frequency']
    list_filter = ['is_recurring_class', 'frequency', 'class_type', 'date']
    search_fields = ['title', 'location', 'trainer__email', 'trainer__full_name']
    readonly_fields = ['id', 'created_at', 'updated_at']
    # Attendees are appended by BookingService together with the booking row
    filter_horizontal = ['attendees']
    fieldsets = (
        ('Class Info', {
            'fields': ('id', 'trainer', 'title', 'class_type', 'description', 'requirements', 'location')
        }),
        ('Schedule', {
            'fields': ('date', 'start_time', 'end_time', 'is_recurring_class', 'frequency', 'end_date')
        }),
        ('Capacity', {
            'fields': ('max_capacity', 'attendees')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at')
        }),
    )
