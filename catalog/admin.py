# catalog/admin.py
from django.contrib import admin, messages
from django.utils.html import format_html

from .models import Package, SafariPhoto, Testimonial, Vehicle


def image_preview(obj):
    if obj.image_url:
        return format_html(
            '<img src="{}" style="max-height:80px; border-radius:6px;" />', obj.image_url
        )
    return format_html('<span style="color:gray;">No image</span>')


# =============================================================================
# CATALOG ADMINS
# =============================================================================

@admin.register(Vehicle)
class VehicleAdmin(admin.ModelAdmin):
    list_display = ('name', 'capacity', 'status', 'preview', 'created_at')
    list_filter = ('status',)
    search_fields = ('name', 'description')
    readonly_fields = ('id', 'preview', 'created_at', 'updated_at')
    actions = ['mark_available', 'mark_unavailable']

    fieldsets = (
        ('Basic Information', {'fields': ('id', 'name', 'description', 'capacity', 'status')}),
        ('Features', {'fields': ('features',)}),
        ('Image', {'fields': ('image_url', 'preview')}),
        ('Timestamps', {'fields': ('created_at', 'updated_at'), 'classes': ('collapse',)}),
    )

    def preview(self, obj):
        return image_preview(obj)

    preview.short_description = "Image Preview"

    def mark_available(self, request, queryset):
        count = queryset.update(status='available')
        self.message_user(request, f"{count} vehicles marked available.", messages.SUCCESS)

    mark_available.short_description = "Mark selected vehicles available"

    def mark_unavailable(self, request, queryset):
        count = queryset.update(status='unavailable')
        self.message_user(request, f"{count} vehicles marked unavailable.", messages.WARNING)

    mark_unavailable.short_description = "Mark selected vehicles unavailable"


@admin.register(Package)
class PackageAdmin(admin.ModelAdmin):
    list_display = ('name', 'duration', 'price', 'is_popular', 'created_at')
    list_filter = ('is_popular',)
    search_fields = ('name', 'description')
    readonly_fields = ('id', 'created_at', 'updated_at')
    actions = ['make_popular', 'remove_popular']

    def make_popular(self, request, queryset):
        count = queryset.update(is_popular=True)
        self.message_user(request, f"{count} packages marked popular.", messages.SUCCESS)

    make_popular.short_description = "Mark selected packages as popular"

    def remove_popular(self, request, queryset):
        count = queryset.update(is_popular=False)
        self.message_user(request, f"{count} packages no longer popular.", messages.INFO)

    remove_popular.short_description = "Remove popular flag"


@admin.register(SafariPhoto)
class SafariPhotoAdmin(admin.ModelAdmin):
    list_display = ('title', 'category', 'location', 'taken_date', 'is_featured', 'preview')
    list_filter = ('is_featured', 'category')
    search_fields = ('title', 'description', 'location')
    readonly_fields = ('id', 'preview', 'created_at', 'updated_at')
    actions = ['feature_photos', 'unfeature_photos']

    def preview(self, obj):
        return image_preview(obj)

    preview.short_description = "Image Preview"

    def feature_photos(self, request, queryset):
        count = queryset.update(is_featured=True)
        self.message_user(request, f"{count} photos featured.", messages.SUCCESS)

    feature_photos.short_description = "Feature selected photos"

    def unfeature_photos(self, request, queryset):
        count = queryset.update(is_featured=False)
        self.message_user(request, f"{count} photos unfeatured.", messages.INFO)

    unfeature_photos.short_description = "Unfeature selected photos"


@admin.register(Testimonial)
class TestimonialAdmin(admin.ModelAdmin):
    list_display = ('client_name', 'rating', 'is_approved', 'created_at')
    list_filter = ('is_approved', 'rating')
    search_fields = ('client_name', 'content')
    readonly_fields = ('id', 'created_at')
    actions = ['approve_testimonials']

    def approve_testimonials(self, request, queryset):
        count = queryset.filter(is_approved=False).update(is_approved=True)
        self.message_user(request, f"{count} testimonials approved.", messages.SUCCESS)

    approve_testimonials.short_description = "Approve selected testimonials"
