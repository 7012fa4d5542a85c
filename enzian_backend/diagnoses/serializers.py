from rest_framework import serializers

from enzian_backend.diagnoses.classification import (
    DeepEndometriosisCode,
    LesionSize,
    OvaryCode,
    PeritoneumCode,
    TubeCode,
)
from enzian_backend.diagnoses.models import Diagnosis
from enzian_backend.doctors.serializers import (
    DoctorCredentialsNestedSerializer,
    DoctorNestedSerializer,
)
from enzian_backend.patients.models import Patient


REQUIRED_FIELDS = ('patient_id', 'doctor_id', 'peritoneum', 'ovary', 'tube', 'deep_endometriosis')
SIZE_FIELDS = ('peritoneum_size', 'ovary_size', 'tube_size', 'deep_endometriosis_size')


class PatientNestedSerializer(serializers.ModelSerializer):
    medicalRecord = serializers.CharField(source='medical_record', read_only=True)

    class Meta:
        model = Patient
        fields = ['id', 'name', 'medicalRecord']


class DiagnosisSerializer(serializers.ModelSerializer):
    """Read serializer with patient/doctor projections and derived severity."""

    patientId = serializers.IntegerField(source='patient_id', read_only=True)
    doctorId = serializers.IntegerField(source='doctor_id', read_only=True)
    peritoneumSize = serializers.CharField(source='peritoneum_size', read_only=True)
    ovarySize = serializers.CharField(source='ovary_size', read_only=True)
    tubeSize = serializers.CharField(source='tube_size', read_only=True)
    deepEndometriosis = serializers.CharField(source='deep_endometriosis', read_only=True)
    deepEndometriosisSize = serializers.CharField(source='deep_endometriosis_size', read_only=True)
    finalClassification = serializers.CharField(source='final_classification', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    severity = serializers.SerializerMethodField()
    patient = PatientNestedSerializer(read_only=True)
    doctor = DoctorCredentialsNestedSerializer(read_only=True)

    class Meta:
        model = Diagnosis
        fields = [
            'id',
            'patientId',
            'doctorId',
            'peritoneum',
            'peritoneumSize',
            'ovary',
            'ovarySize',
            'tube',
            'tubeSize',
            'deepEndometriosis',
            'deepEndometriosisSize',
            'observations',
            'finalClassification',
            'severity',
            'createdAt',
            'patient',
            'doctor',
        ]
        read_only_fields = fields

    def get_severity(self, obj):
        return obj.severity.to_dict()


class PatientDiagnosisSerializer(DiagnosisSerializer):
    """Diagnosis as embedded in a patient: no patient projection, doctor contact."""

    doctor = DoctorNestedSerializer(read_only=True)

    class Meta(DiagnosisSerializer.Meta):
        fields = [name for name in DiagnosisSerializer.Meta.fields if name != 'patient']
        read_only_fields = fields


class DiagnosisCreateSerializer(serializers.Serializer):
    """Input for recording a diagnosis.

    finalClassification is not accepted; the server composes it from the
    four axis codes.
    """

    patientId = serializers.IntegerField(source='patient_id', required=False, allow_null=True)
    doctorId = serializers.IntegerField(source='doctor_id', required=False, allow_null=True)
    peritoneum = serializers.ChoiceField(choices=PeritoneumCode.choices, required=False, allow_blank=True)
    peritoneumSize = serializers.ChoiceField(
        source='peritoneum_size', choices=LesionSize.choices,
        required=False, allow_blank=True, allow_null=True,
    )
    ovary = serializers.ChoiceField(choices=OvaryCode.choices, required=False, allow_blank=True)
    ovarySize = serializers.ChoiceField(
        source='ovary_size', choices=LesionSize.choices,
        required=False, allow_blank=True, allow_null=True,
    )
    tube = serializers.ChoiceField(choices=TubeCode.choices, required=False, allow_blank=True)
    tubeSize = serializers.ChoiceField(
        source='tube_size', choices=LesionSize.choices,
        required=False, allow_blank=True, allow_null=True,
    )
    deepEndometriosis = serializers.ChoiceField(
        source='deep_endometriosis', choices=DeepEndometriosisCode.choices,
        required=False, allow_blank=True,
    )
    deepEndometriosisSize = serializers.ChoiceField(
        source='deep_endometriosis_size', choices=LesionSize.choices,
        required=False, allow_blank=True, allow_null=True,
    )
    observations = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def validate(self, attrs):
        if not all(attrs.get(name) for name in REQUIRED_FIELDS):
            raise serializers.ValidationError('Missing required fields')
        for name in SIZE_FIELDS:
            attrs[name] = attrs.get(name) or None
        attrs['observations'] = (attrs.get('observations') or '').strip() or None
        return attrs
