"""
Doctors App - Admin
"""

from django.contrib import admin
from django.utils.html import format_html

from enzian_backend.core.admin import enzian_admin_site
from enzian_backend.doctors.models import Doctor


@admin.register(Doctor, site=enzian_admin_site)
class DoctorAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "crm_badge", "specialty", "email", "patient_count_badge")
    search_fields = ("name", "email", "crm")
    list_filter = ("specialty",)
    ordering = ("name",)
    list_per_page = 50

    readonly_fields = ("id", "created_at", "updated_at")

    fieldsets = (
        ("👨‍⚕️ Médico", {
            "fields": ("name", "crm", "specialty")
        }),
        ("📞 Contato", {
            "fields": ("email", "phone")
        }),
        ("📊 Sistema", {
            "fields": ("id", "created_at", "updated_at"),
            "classes": ("collapse",)
        }),
    )

    def crm_badge(self, obj):
        return format_html('<span style="font-family: monospace;">CRM {}</span>', obj.crm)
    crm_badge.short_description = "CRM"

    def patient_count_badge(self, obj):
        """Number of patients under this doctor"""
        count = obj.patients.count()
        color = "#9AA0A6" if count == 0 else "#1A73E8"
        return format_html('<span style="color: {};">👥 {}</span>', color, count)
    patient_count_badge.short_description = "Pacientes"
