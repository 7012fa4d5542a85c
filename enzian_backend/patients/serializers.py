from rest_framework import serializers

from enzian_backend.diagnoses.serializers import PatientDiagnosisSerializer
from enzian_backend.doctors.serializers import (
    DoctorNestedSerializer,
    DoctorProfileNestedSerializer,
)
from enzian_backend.patients.models import Patient


OPTIONAL_FIELDS = ('email', 'phone', 'dateOfBirth', 'medicalRecord')


class PatientSerializer(serializers.ModelSerializer):
    """List representation with the doctor's contact projection."""

    dateOfBirth = serializers.DateField(source='date_of_birth', read_only=True)
    medicalRecord = serializers.CharField(source='medical_record', read_only=True)
    doctorId = serializers.IntegerField(source='doctor_id', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)
    doctor = DoctorNestedSerializer(read_only=True)

    class Meta:
        model = Patient
        fields = [
            'id',
            'name',
            'email',
            'phone',
            'dateOfBirth',
            'medicalRecord',
            'doctorId',
            'createdAt',
            'updatedAt',
            'doctor',
        ]
        read_only_fields = fields


class PatientDetailSerializer(PatientSerializer):
    """Detail representation: doctor profile plus diagnoses newest first."""

    doctor = DoctorProfileNestedSerializer(read_only=True)
    diagnoses = serializers.SerializerMethodField()

    class Meta(PatientSerializer.Meta):
        fields = PatientSerializer.Meta.fields + ['diagnoses']
        read_only_fields = fields

    def get_diagnoses(self, obj):
        diagnoses = obj.diagnoses.select_related('doctor').order_by('-created_at', '-id')
        return PatientDiagnosisSerializer(diagnoses, many=True).data


class PatientWriteSerializer(serializers.Serializer):
    """Input for create and update.

    name and doctorId are required. Empty strings in the optional fields are
    treated as "no value" and stored as NULL.
    """

    name = serializers.CharField(required=False, allow_blank=True, max_length=200)
    email = serializers.EmailField(required=False, allow_null=True)
    phone = serializers.CharField(required=False, allow_null=True, max_length=50)
    dateOfBirth = serializers.DateField(source='date_of_birth', required=False, allow_null=True)
    medicalRecord = serializers.CharField(
        source='medical_record', required=False, allow_null=True, max_length=64,
    )
    doctorId = serializers.IntegerField(source='doctor_id', required=False, allow_null=True)

    def to_internal_value(self, data):
        if hasattr(data, 'items'):
            data = {
                key: (None if key in OPTIONAL_FIELDS and isinstance(value, str) and not value.strip() else value)
                for key, value in data.items()
            }
        return super().to_internal_value(data)

    def validate(self, attrs):
        if not (attrs.get('name') or '').strip() or not attrs.get('doctor_id'):
            raise serializers.ValidationError('Name and doctorId are required')
        attrs['name'] = attrs['name'].strip()
        return attrs
