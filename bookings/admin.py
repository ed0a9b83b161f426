# bookings/admin.py
from django.contrib import admin, messages
from django.contrib.admin import SimpleListFilter
from django.utils.html import format_html

from core.exceptions import InvalidStatusTransition
from .models import Booking, BookingStatus, Contact


# =============================================================================
# CUSTOM FILTERS
# =============================================================================

class CatalogReferenceFilter(SimpleListFilter):
    title = 'catalog reference'
    parameter_name = 'reference'

    def lookups(self, request, model_admin):
        return (
            ('package', 'Has package'),
            ('vehicle', 'Has vehicle'),
            ('none', 'No reference'),
        )

    def queryset(self, request, queryset):
        if self.value() == 'package':
            return queryset.filter(package__isnull=False)
        if self.value() == 'vehicle':
            return queryset.filter(vehicle__isnull=False)
        if self.value() == 'none':
            return queryset.filter(package__isnull=True, vehicle__isnull=True)
        return queryset


# =============================================================================
# LEAD ADMINS
# =============================================================================

STATUS_COLORS = {
    'pending': 'orange',
    'confirmed': 'green',
    'cancelled': 'red',
    'completed': 'gray',
}


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        'customer_name', 'email', 'normalized_phone', 'inquiry_kind',
        'package', 'vehicle', 'preferred_date', 'status_badge', 'created_at',
    )
    list_filter = ('status', 'inquiry_kind', CatalogReferenceFilter)
    search_fields = ('customer_name', 'email', 'phone', 'message')
    readonly_fields = ('id', 'status', 'normalized_phone', 'created_at', 'updated_at')
    list_select_related = ('package', 'vehicle')
    actions = ['confirm_bookings', 'cancel_bookings', 'complete_bookings', 'reopen_bookings']

    fieldsets = (
        ('Customer', {'fields': ('id', 'customer_name', 'email', 'phone', 'normalized_phone')}),
        ('Inquiry', {'fields': ('inquiry_kind', 'package', 'vehicle', 'preferred_date', 'guest_count', 'message')}),
        ('Status', {'fields': ('status', 'created_at', 'updated_at')}),
    )

    def status_badge(self, obj):
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            STATUS_COLORS.get(obj.status, 'black'), obj.get_status_display()
        )

    status_badge.short_description = 'Status'

    def _apply_status(self, request, queryset, status):
        label = BookingStatus(status).label.lower()
        changed, rejected = 0, 0
        for booking in queryset:
            try:
                if booking.transition_to(status):
                    changed += 1
            except InvalidStatusTransition:
                rejected += 1
        self.message_user(request, f"{changed} bookings moved to {label}.", messages.SUCCESS)
        if rejected:
            self.message_user(
                request, f"{rejected} bookings could not be moved to {label}.", messages.WARNING
            )

    def confirm_bookings(self, request, queryset):
        self._apply_status(request, queryset, BookingStatus.CONFIRMED)

    confirm_bookings.short_description = "Confirm selected bookings"

    def cancel_bookings(self, request, queryset):
        self._apply_status(request, queryset, BookingStatus.CANCELLED)

    cancel_bookings.short_description = "Cancel selected bookings"

    def complete_bookings(self, request, queryset):
        self._apply_status(request, queryset, BookingStatus.COMPLETED)

    complete_bookings.short_description = "Mark selected bookings as completed"

    def reopen_bookings(self, request, queryset):
        self._apply_status(request, queryset, BookingStatus.PENDING)

    reopen_bookings.short_description = "Re-open selected bookings"


@admin.register(Contact)
class ContactAdmin(admin.ModelAdmin):
    list_display = ('name', 'email', 'short_message', 'is_read', 'created_at')
    list_filter = ('is_read',)
    search_fields = ('name', 'email', 'message')
    readonly_fields = ('id', 'created_at')
    actions = ['mark_as_read']

    def short_message(self, obj):
        return obj.message[:60] + ('...' if len(obj.message) > 60 else '')

    short_message.short_description = 'Message'

    def mark_as_read(self, request, queryset):
        count = queryset.filter(is_read=False).update(is_read=True)
        self.message_user(request, f"{count} messages marked as read.", messages.SUCCESS)

    mark_as_read.short_description = "Mark selected messages as read"
