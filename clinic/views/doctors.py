from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from clinic.permissions import IsAdminRole, ReadOnly
from clinic.serializers.catalog import DoctorSerializer
from clinic.services import doctors as doctor_service
from clinic.services.doctors import format_doctor


def _listing(qs):
    return Response([format_doctor(d) for d in qs])


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, IsAdminRole | ReadOnly])
def doctors(request):
    """List the directory or add an entry.

    Query params:
      - q: optional search (name/specialization contains)
    """
    if request.method == 'GET':
        q = (request.query_params.get('q') or '').strip() or None
        return _listing(doctor_service.list_doctors(q=q))
    s = DoctorSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    doctor = doctor_service.create_doctor(**s.validated_data)
    return Response(format_doctor(doctor), status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([IsAuthenticated, IsAdminRole | ReadOnly])
def doctor_detail(request, pk):
    if request.method == 'GET':
        return Response(format_doctor(doctor_service.get_doctor(pk)))
    if request.method == 'DELETE':
        doctor_service.delete_doctor(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
    s = DoctorSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    return Response(format_doctor(doctor_service.update_doctor(pk, **s.validated_data)))


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def doctors_available(request):
    return _listing(doctor_service.list_doctors(available_only=True))


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def doctors_by_department(request, department: str):
    return _listing(doctor_service.list_doctors(department=department))


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def doctors_by_specialization(request, specialization: str):
    return _listing(doctor_service.list_doctors(specialization=specialization))


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def doctor_by_email(request, email: str):
    return Response(format_doctor(doctor_service.get_by_email(email)))
