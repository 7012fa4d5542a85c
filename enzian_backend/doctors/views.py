from rest_framework import generics, status
from rest_framework.response import Response

from enzian_backend.doctors import services
from enzian_backend.doctors.serializers import DoctorSerializer, DoctorWriteSerializer


class DoctorListCreateView(generics.ListCreateAPIView):
    """List doctors (``?search=``) or register a new doctor."""

    def get_queryset(self):
        return services.list_doctors(self.request.query_params.get('search'))

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return DoctorWriteSerializer
        return DoctorSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        doctor = services.create_doctor(serializer.validated_data)
        return Response(DoctorSerializer(doctor).data, status=status.HTTP_201_CREATED)


class DoctorDetailView(generics.GenericAPIView):
    """Retrieve, partially update or delete a doctor."""

    serializer_class = DoctorSerializer

    def get_object(self):
        return services.get_doctor(self.kwargs['pk'])

    def get(self, request, *args, **kwargs):
        return Response(DoctorSerializer(self.get_object()).data)

    def put(self, request, *args, **kwargs):
        doctor = self.get_object()
        serializer = DoctorWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        patch = services.DoctorPatch.from_data(serializer.validated_data)
        doctor = services.update_doctor(doctor, patch)
        return Response(DoctorSerializer(doctor).data)

    def patch(self, request, *args, **kwargs):
        return self.put(request, *args, **kwargs)

    def delete(self, request, *args, **kwargs):
        services.delete_doctor(self.get_object())
        return Response({'message': 'Doctor deleted successfully'}, status=status.HTTP_200_OK)
