"""
Admin panel configuration for shared models.
"""
from django.contrib import admin
from django.utils.html import format_html
from common.models import Language, AdminActionLog


@admin.register(Language)
class LanguageAdmin(admin.ModelAdmin):
    list_display = ['iso_code', 'name', 'is_active', 'is_default']
    list_filter = ['is_active', 'is_default']
    search_fields = ['iso_code', 'name']


@admin.register(AdminActionLog)
class AdminActionLogAdmin(admin.ModelAdmin):
    """Admin for back office action logs"""

    list_display = ['action_display', 'admin_user', 'target_model', 'target_id', 'ip_address', 'timestamp']
    list_filter = ['action', 'target_model', 'timestamp']
    search_fields = ['admin_user__username', 'target_id', 'ip_address']
    readonly_fields = ['admin_user', 'action', 'target_model', 'target_id',
                       'details', 'ip_address', 'user_agent', 'timestamp']
    date_hierarchy = 'timestamp'

    fieldsets = (
        ('Action Information', {
            'fields': ('admin_user', 'action', 'target_model', 'target_id')
        }),
        ('Details', {
            'fields': ('details',),
            'classes': ('collapse',)
        }),
        ('Request Information', {
            'fields': ('ip_address', 'user_agent', 'timestamp')
        }),
    )

    def action_display(self, obj):
        colors = {
            'CREATE_ORDER_STATE': '#28A745',
            'CREATE_ORDER_RETURN_STATE': '#28A745',
            'UPDATE_ORDER_STATE': '#007BFF',
            'UPDATE_ORDER_RETURN_STATE': '#007BFF',
            'TOGGLE_ORDER_STATE': '#FFC107',
        }
        color = colors.get(obj.action, '#6C757D')
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            color,
            obj.get_action_display()
        )
    action_display.short_description = 'Action'
    action_display.admin_order_field = 'action'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
