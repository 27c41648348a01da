from django.contrib import admin

from ledger.models import MinuteTransaction


@admin.register(MinuteTransaction)
class MinuteTransactionAdmin(admin.ModelAdmin):
    list_display = ['reference', 'user', 'transaction_type', 'category', 'minutes', 'balance_after', 'created_at']
    list_filter = ['transaction_type', 'category', 'created_at']
    search_fields = ['reference', 'user__email']
    readonly_fields = [f.name for f in MinuteTransaction._meta.fields]

    # Audit rows are written by CreditLedger only
    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
