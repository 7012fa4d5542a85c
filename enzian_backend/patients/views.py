from rest_framework import generics, status
from rest_framework.response import Response

from enzian_backend.patients import services
from enzian_backend.patients.serializers import (
    PatientDetailSerializer,
    PatientSerializer,
    PatientWriteSerializer,
)


class PatientListCreateView(generics.ListCreateAPIView):
    """List patients (``?search=``) or register a new patient."""

    def get_queryset(self):
        return services.list_patients(self.request.query_params.get('search'))

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return PatientWriteSerializer
        return PatientSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        patient = services.create_patient(serializer.validated_data)
        return Response(PatientDetailSerializer(patient).data, status=status.HTTP_201_CREATED)


class PatientDetailView(generics.GenericAPIView):
    """Retrieve (with diagnoses), update or delete a patient."""

    serializer_class = PatientDetailSerializer

    def get_object(self):
        return services.get_patient(self.kwargs['pk'])

    def get(self, request, *args, **kwargs):
        return Response(PatientDetailSerializer(self.get_object()).data)

    def put(self, request, *args, **kwargs):
        patient = self.get_object()
        serializer = PatientWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        patch = services.PatientPatch.from_data(serializer.validated_data)
        patient = services.update_patient(patient, patch)
        return Response(PatientDetailSerializer(patient).data)

    def patch(self, request, *args, **kwargs):
        return self.put(request, *args, **kwargs)

    def delete(self, request, *args, **kwargs):
        services.delete_patient(self.get_object())
        return Response({'message': 'Patient deleted successfully'}, status=status.HTTP_200_OK)
