"""
Order statuses admin configuration.
Creating and editing go through the back office pages; the admin is a
read-mostly view over the stored rows.
"""
from django.contrib import admin
from django.utils.html import format_html
from apps.order_states.models import (
    OrderReturnState,
    OrderReturnStateTranslation,
    OrderState,
    OrderStateTranslation,
)


def color_badge(obj):
    return format_html(
        '<span style="background-color: {}; padding: 2px 8px;">{}</span>',
        obj.color,
        obj.color,
    )


color_badge.short_description = 'Color'
color_badge.admin_order_field = 'color'


class OrderStateTranslationInline(admin.TabularInline):
    model = OrderStateTranslation
    extra = 0
    fields = ['language', 'name', 'template']


class OrderReturnStateTranslationInline(admin.TabularInline):
    model = OrderReturnStateTranslation
    extra = 0
    fields = ['language', 'name']


@admin.register(OrderState)
class OrderStateAdmin(admin.ModelAdmin):
    list_display = ['id', '__str__', color_badge, 'send_email', 'delivery', 'invoice', 'deleted']
    list_filter = ['send_email', 'delivery', 'invoice', 'paid', 'shipped', 'deleted']
    search_fields = ['translations__name', 'module_name']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [OrderStateTranslationInline]

    fieldsets = (
        ('Display', {
            'fields': ('color',)
        }),
        ('Options', {
            'fields': ('logable', 'invoice', 'hidden', 'send_email', 'pdf_invoice',
                       'pdf_delivery', 'shipped', 'paid', 'delivery')
        }),
        ('Bookkeeping', {
            'fields': ('unremovable', 'deleted', 'module_name', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def has_delete_permission(self, request, obj=None):
        if obj is not None and obj.unremovable:
            return False
        return super().has_delete_permission(request, obj)


@admin.register(OrderReturnState)
class OrderReturnStateAdmin(admin.ModelAdmin):
    list_display = ['id', '__str__', color_badge]
    search_fields = ['translations__name']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [OrderReturnStateTranslationInline]
