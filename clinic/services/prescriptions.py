import logging
from typing import Iterable, Optional

from django.db import transaction
from django.utils import timezone

from clinic.exceptions import NotFound
from clinic.models import Medicine, Prescription

logger = logging.getLogger(__name__)

MEDICINE_FIELDS = ('medicine_name', 'dosage', 'frequency', 'duration', 'instructions', 'quantity')
CLINICAL_FIELDS = ('diagnosis', 'symptoms', 'additional_notes', 'follow_up_date')


def _iso(value):
    return value.isoformat() if value else None


def format_medicine(m: Medicine) -> dict:
    return {
        'id': m.id,
        'medicineName': m.medicine_name,
        'dosage': m.dosage,
        'frequency': m.frequency,
        'duration': m.duration,
        'instructions': m.instructions,
        'quantity': m.quantity,
    }


def format_prescription(p: Prescription) -> dict:
    return {
        'id': str(p.id),
        'patientId': p.patient_id,
        'doctorId': p.doctor_id,
        'patientName': p.patient_name,
        'doctorName': p.doctor_name,
        'gender': p.gender,
        'age': p.age,
        'diagnosis': p.diagnosis,
        'symptoms': p.symptoms,
        'additionalNotes': p.additional_notes,
        'followUpDate': _iso(p.follow_up_date),
        'createdDate': _iso(p.created_date),
        'edited': p.edited,
        'lastEditedDate': _iso(p.last_edited_date),
        'dispensedStatus': p.dispensed_status,
        'dispensedDate': _iso(p.dispensed_date),
        'dispensedBy': p.dispensed_by,
        'medicines': [format_medicine(m) for m in p.medicines.all()],
    }


def _add_medicines(prescription: Prescription, medicines: Iterable[dict]) -> None:
    Medicine.objects.bulk_create([
        Medicine(prescription=prescription, position=i, **{k: item.get(k) or '' for k in MEDICINE_FIELDS})
        for i, item in enumerate(medicines or [])
    ])


def get_prescription(pk) -> Prescription:
    p = Prescription.objects.prefetch_related('medicines').filter(pk=pk).first()
    if not p:
        raise NotFound(f'Prescription not found with id: {pk}')
    return p


def list_prescriptions(*, patient_id: Optional[str]=None, doctor_id: Optional[str]=None,
                       patient_name: Optional[str]=None):
    qs = Prescription.objects.prefetch_related('medicines')
    if patient_id is not None:
        qs = qs.filter(patient_id=patient_id)
    if doctor_id is not None:
        qs = qs.filter(doctor_id=doctor_id)
    if patient_name is not None:
        qs = qs.filter(patient_name=patient_name)
    return qs


@transaction.atomic
def create_prescription(*, medicines=None, **fields) -> Prescription:
    fields.update(
        created_date=timezone.now(),
        dispensed_status=Prescription.DISPENSE_PENDING,
        edited=False,
        last_edited_date=None,
        dispensed_date=None,
        dispensed_by=None,
    )
    p = Prescription.objects.create(**fields)
    _add_medicines(p, medicines)
    logger.info('prescription created id=%s patient=%s medicines=%s', p.id, p.patient_id, len(medicines or []))
    return get_prescription(p.pk)


@transaction.atomic
def update_prescription(pk, *, medicines=None, **fields) -> Prescription:
    """Replace the clinical fields and the whole medicine list."""
    p = get_prescription(pk)
    for field in CLINICAL_FIELDS:
        value = fields.get(field)
        if value is None and field != 'follow_up_date':
            value = ''
        setattr(p, field, value)
    p.edited = True
    p.last_edited_date = timezone.now()
    p.save()
    p.medicines.all().delete()
    _add_medicines(p, medicines)
    logger.info('prescription edited id=%s medicines=%s', pk, len(medicines or []))
    return get_prescription(pk)


def dispense(pk, pharmacist_name: str) -> Prescription:
    p = get_prescription(pk)
    p.dispensed_status = Prescription.DISPENSE_DONE
    p.dispensed_date = timezone.now()
    p.dispensed_by = pharmacist_name
    p.save(update_fields=['dispensed_status', 'dispensed_date', 'dispensed_by'])
    logger.info('prescription dispensed id=%s by=%s', pk, pharmacist_name)
    return p


def delete_prescription(pk) -> None:
    get_prescription(pk).delete()
    logger.info('prescription deleted id=%s', pk)
