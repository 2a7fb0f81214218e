"""
Appointment views.

New bookings always start ``Scheduled``.  ``PATCH .../status`` accepts
``status`` and an optional ``cancellationReason`` either as query
parameters or in the JSON body; query parameters win.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..serializers.appointments import AppointmentSerializer, AppointmentStatusSerializer
from ..services import appointments as appointment_service
from ..services.appointments import format_appointment


def _listing(qs):
    return Response([format_appointment(a) for a in qs])


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def appointments(request):
    if request.method == 'GET':
        return _listing(appointment_service.list_appointments())
    s = AppointmentSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    appt = appointment_service.create_appointment(**s.validated_data)
    return Response(format_appointment(appt), status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([IsAuthenticated])
def appointment_detail(request, pk):
    if request.method == 'GET':
        return Response(format_appointment(appointment_service.get_appointment(pk)))
    if request.method == 'DELETE':
        appointment_service.delete_appointment(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
    s = AppointmentSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    return Response(format_appointment(appointment_service.update_appointment(pk, **s.validated_data)))


@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def appointment_status(request, pk):
    data = {}
    for key in ('status', 'cancellationReason'):
        value = request.query_params.get(key)
        if value is None and hasattr(request.data, 'get'):
            value = request.data.get(key)
        if value is not None:
            data[key] = value
    s = AppointmentStatusSerializer(data=data)
    s.is_valid(raise_exception=True)
    appt = appointment_service.update_status(
        pk, s.validated_data['status'], s.validated_data.get('cancellationReason'),
    )
    return Response(format_appointment(appt))


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def appointments_by_patient(request, patient_id: str):
    return _listing(appointment_service.list_appointments(patient_id=patient_id))


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def appointments_by_doctor(request, doctor_id: str):
    return _listing(appointment_service.list_appointments(doctor_id=doctor_id))


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def appointments_by_status(request, status_value: str):
    return _listing(appointment_service.list_appointments(status=status_value))
