from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from clinic.permissions import IsClinician, IsPharmacyStaff, ReadOnly
from clinic.serializers.prescriptions import DispenseSerializer, PrescriptionSerializer
from clinic.services import prescriptions as prescription_service
from clinic.services.prescriptions import format_prescription


def _listing(qs):
    return Response([format_prescription(p) for p in qs])


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, IsClinician | ReadOnly])
def prescriptions(request):
    if request.method == 'GET':
        return _listing(prescription_service.list_prescriptions())
    s = PrescriptionSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    p = prescription_service.create_prescription(**s.validated_data)
    return Response(format_prescription(p), status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([IsAuthenticated, IsClinician | ReadOnly])
def prescription_detail(request, pk):
    if request.method == 'GET':
        return Response(format_prescription(prescription_service.get_prescription(pk)))
    if request.method == 'DELETE':
        prescription_service.delete_prescription(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
    s = PrescriptionSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    p = prescription_service.update_prescription(pk, **s.validated_data)
    return Response(format_prescription(p))


@api_view(['PATCH'])
@permission_classes([IsAuthenticated, IsPharmacyStaff])
def prescription_dispense(request, pk):
    """Mark a prescription dispensed; ``pharmacistName`` defaults to the caller."""
    s = DispenseSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    name = s.validated_data.get('pharmacistName') or request.user.name or request.user.email
    return Response(format_prescription(prescription_service.dispense(pk, name)))


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def prescriptions_by_patient(request, patient_id: str):
    return _listing(prescription_service.list_prescriptions(patient_id=patient_id))


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def prescriptions_by_doctor(request, doctor_id: str):
    return _listing(prescription_service.list_prescriptions(doctor_id=doctor_id))


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def prescriptions_by_patient_name(request, patient_name: str):
    return _listing(prescription_service.list_prescriptions(patient_name=patient_name))
