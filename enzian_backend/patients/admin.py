"""
Patients App - Admin
"""

from django.contrib import admin
from django.utils.html import format_html

from enzian_backend.core.admin import enzian_admin_site
from enzian_backend.patients.models import Patient


@admin.register(Patient, site=enzian_admin_site)
class PatientAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "medical_record_badge",
        "name",
        "date_of_birth",
        "doctor",
        "diagnosis_count",
        "created_at",
    )
    list_filter = ("doctor", "created_at")
    search_fields = ("name", "medical_record", "email")
    list_select_related = ("doctor",)
    ordering = ("name",)
    list_per_page = 50

    readonly_fields = ("id", "created_at", "updated_at")

    fieldsets = (
        ("👤 Dados da Paciente", {
            "fields": ("name", "medical_record", "date_of_birth")
        }),
        ("📞 Contato", {
            "fields": ("email", "phone")
        }),
        ("👨‍⚕️ Médico Responsável", {
            "fields": ("doctor",)
        }),
        ("📊 Sistema", {
            "fields": ("id", "created_at", "updated_at"),
            "classes": ("collapse",)
        }),
    )

    def medical_record_badge(self, obj):
        """Medical record number as a badge"""
        if not obj.medical_record:
            return format_html('<span style="color: #9AA0A6; font-style: italic;">{}</span>', '-')
        return format_html(
            '<span style="font-family: monospace; background-color: #1A73E8; '
            'color: white; padding: 2px 8px; border-radius: 4px;">{}</span>',
            obj.medical_record
        )
    medical_record_badge.short_description = "Prontuário"

    def diagnosis_count(self, obj):
        return obj.diagnoses.count()
    diagnosis_count.short_description = "Diagnósticos"
