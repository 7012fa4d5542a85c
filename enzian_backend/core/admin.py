"""
Enzian - Custom Admin Site & Audit Log Admin
"""

from django.contrib import admin
from django.contrib.admin import AdminSite
from django.contrib.auth.admin import GroupAdmin, UserAdmin
from django.contrib.auth.models import Group, User
from django.utils.html import format_html
from django.utils.safestring import mark_safe

from .models import AuditLog


# ============================================================================
# Custom AdminSite
# ============================================================================
class EnzianAdminSite(AdminSite):
    """Back-office for the doctor, patient and diagnosis records"""
    site_header = "🩺 Enzian – Classificação de Endometriose"
    site_title = "Enzian Admin"
    index_title = "Registros clínicos"
    site_url = None

    def each_context(self, request):
        context = super().each_context(request)
        context['site_subtitle'] = 'Classificação #Enzian (Keckstein 2021)'
        context['site_version'] = 'v1.0.0'
        return context


enzian_admin_site = EnzianAdminSite(name='enzianadmin')

enzian_admin_site.register(User, UserAdmin)
enzian_admin_site.register(Group, GroupAdmin)


# ============================================================================
# AuditLog Admin
# ============================================================================
@admin.register(AuditLog, site=enzian_admin_site)
class AuditLogAdmin(admin.ModelAdmin):
    """Audit log entries (read-only)"""

    list_display = (
        "id",
        "timestamp_display",
        "action_badge",
        "patient_id_display",
        "doctor_id",
    )
    list_filter = ("action", "timestamp")
    search_fields = ("action", "patient_id", "doctor_id")
    ordering = ("-timestamp", "-id")
    list_per_page = 100
    date_hierarchy = "timestamp"

    readonly_fields = ("id", "action", "patient_id", "doctor_id", "timestamp", "meta")

    fieldsets = (
        ("📋 Registro", {
            "fields": ("id", "timestamp")
        }),
        ("🔍 Ação", {
            "fields": ("action", "patient_id", "doctor_id")
        }),
        ("📊 Metadados", {
            "fields": ("meta",),
            "classes": ("collapse",)
        }),
    )

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return request.user.is_superuser

    def timestamp_display(self, obj):
        return format_html(
            '<span style="color: #5F6368; font-family: monospace;">{}</span>',
            obj.timestamp.strftime("%d/%m/%Y %H:%M:%S")
        )
    timestamp_display.short_description = "Data/hora"

    def action_badge(self, obj):
        """Action as a colored badge"""
        if obj.action.endswith("_deleted"):
            color = "#EA4335"
        elif obj.action.endswith("_created"):
            color = "#34A853"
        elif obj.action.endswith("_updated"):
            color = "#1A73E8"
        else:
            color = "#5F6368"
        return format_html(
            '<span style="background-color: {}; color: white; padding: 2px 8px; '
            'border-radius: 4px;">{}</span>',
            color, obj.action
        )
    action_badge.short_description = "Ação"

    def patient_id_display(self, obj):
        if obj.patient_id is None:
            return mark_safe('<span style="color: #9AA0A6;">-</span>')
        return format_html('<span style="font-family: monospace;">#{}</span>', obj.patient_id)
    patient_id_display.short_description = "Paciente"
