from rest_framework import serializers

from enzian_backend.doctors.models import Doctor


REQUIRED_FIELDS = ('name', 'email', 'crm', 'specialty')


class DoctorSerializer(serializers.ModelSerializer):
    """Read-only serializer with all fields."""

    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Doctor
        fields = [
            'id',
            'name',
            'email',
            'crm',
            'specialty',
            'phone',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = fields


class DoctorWriteSerializer(serializers.Serializer):
    """Input for create (all required fields) and update (partial)."""

    name = serializers.CharField(required=False, allow_blank=True, max_length=200)
    email = serializers.EmailField(required=False, allow_blank=True)
    crm = serializers.CharField(required=False, allow_blank=True, max_length=32)
    specialty = serializers.CharField(required=False, allow_blank=True, max_length=200)
    phone = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=50)

    def validate_phone(self, value):
        return value or None

    def validate(self, attrs):
        if self.partial:
            blank = [name for name in REQUIRED_FIELDS if name in attrs and not attrs[name]]
            if blank:
                raise serializers.ValidationError(
                    'Name, email, CRM and specialty cannot be blank'
                )
        elif not all(attrs.get(name) for name in REQUIRED_FIELDS):
            raise serializers.ValidationError('Name, email, CRM and specialty are required')
        return attrs


class DoctorNestedSerializer(serializers.ModelSerializer):
    """Contact projection embedded in patient listings."""

    class Meta:
        model = Doctor
        fields = ['id', 'name', 'email']


class DoctorCredentialsNestedSerializer(serializers.ModelSerializer):
    """License projection embedded in diagnoses."""

    class Meta:
        model = Doctor
        fields = ['id', 'name', 'crm']


class DoctorProfileNestedSerializer(serializers.ModelSerializer):
    """Profile projection embedded in patient detail."""

    class Meta:
        model = Doctor
        fields = ['id', 'name', 'email', 'crm', 'specialty']
