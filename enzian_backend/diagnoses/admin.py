"""
Diagnoses App - Admin
"""

from django.contrib import admin
from django.utils.html import format_html

from enzian_backend.core.admin import enzian_admin_site
from enzian_backend.diagnoses.models import Diagnosis


@admin.register(Diagnosis, site=enzian_admin_site)
class DiagnosisAdmin(admin.ModelAdmin):
    """Diagnoses are recorded through the API; the admin is read-only."""

    list_display = (
        "id",
        "classification_badge",
        "severity_badge",
        "patient",
        "doctor",
        "created_at",
    )
    list_filter = ("peritoneum", "ovary", "tube", "deep_endometriosis", "created_at")
    search_fields = ("final_classification", "patient__name", "patient__medical_record", "doctor__name")
    list_select_related = ("patient", "doctor")
    ordering = ("-created_at",)
    list_per_page = 50

    readonly_fields = (
        "id",
        "patient",
        "doctor",
        "peritoneum",
        "peritoneum_size",
        "ovary",
        "ovary_size",
        "tube",
        "tube_size",
        "deep_endometriosis",
        "deep_endometriosis_size",
        "observations",
        "final_classification",
        "created_at",
    )

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        # Removed only together with the patient.
        return False

    fieldsets = (
        ("🩺 Atendimento", {
            "fields": ("patient", "doctor")
        }),
        ("📋 Classificação Enzian", {
            "fields": (
                ("peritoneum", "peritoneum_size"),
                ("ovary", "ovary_size"),
                ("tube", "tube_size"),
                ("deep_endometriosis", "deep_endometriosis_size"),
                "final_classification",
            )
        }),
        ("📝 Observações", {
            "fields": ("observations",)
        }),
        ("📊 Sistema", {
            "fields": ("id", "created_at"),
            "classes": ("collapse",)
        }),
    )

    def classification_badge(self, obj):
        return format_html(
            '<span style="font-family: monospace; font-weight: bold;">{}</span>',
            obj.final_classification
        )
    classification_badge.short_description = "Classificação"

    def severity_badge(self, obj):
        """Severity tier as a colored badge"""
        tier = obj.severity
        return format_html(
            '<span style="background-color: {}; color: white; padding: 2px 8px; '
            'border-radius: 4px;">{}</span>',
            tier.color, tier.label
        )
    severity_badge.short_description = "Gravidade"
