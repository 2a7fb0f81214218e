"""
Reference data loaded on a fresh database: the hospital departments and
the doctor directory.  Each table is only seeded while it is empty so
running the loader repeatedly is harmless.
"""
import logging

from django.db import transaction

from clinic.models import Department, Doctor

logger = logging.getLogger(__name__)

DEPARTMENTS = [
    ('General Medicine', 'Primary healthcare and general medical conditions'),
    ('Cardiology', 'Heart and cardiovascular system care'),
    ('Dermatology', 'Skin, hair, and nail conditions'),
    ('Neurology', 'Brain and nervous system disorders'),
    ('Orthopedics', 'Bone, joint, and musculoskeletal care'),
    ('Pediatrics', 'Healthcare for infants, children, and adolescents'),
    ('Gynecology', "Women's reproductive health"),
    ('ENT', 'Ear, nose, and throat conditions'),
    ('Ophthalmology', 'Eye care and vision'),
    ('Psychiatry', 'Mental health and behavioral disorders'),
]

# name, email, department, specialization, phone, experience years, qualification
DOCTORS = [
    ('Dr. Neha Bhatia', 'neha.bhatia@hospital.com', 'General Medicine', 'Internal Medicine', '+91 9876543210', 12, 'MBBS, MD'),
    ('Dr. Rajesh Kumar', 'rajesh.kumar@hospital.com', 'General Medicine', 'Family Medicine', '+91 9876543211', 15, 'MBBS, MD'),
    ('Dr. Priya Sharma', 'priya.sharma@hospital.com', 'General Medicine', 'General Practice', '+91 9876543212', 8, 'MBBS'),
    ('Dr. Meena Kapoor', 'meena.kapoor@hospital.com', 'Cardiology', 'Interventional Cardiology', '+91 9876543213', 18, 'MBBS, MD, DM'),
    ('Dr. Arjun Singh', 'arjun.singh@hospital.com', 'Cardiology', 'Clinical Cardiology', '+91 9876543214', 20, 'MBBS, MD, DM'),
    ('Dr. Kavita Reddy', 'kavita.reddy@hospital.com', 'Cardiology', 'Pediatric Cardiology', '+91 9876543215', 14, 'MBBS, MD, DM'),
    ('Dr. Rajesh Kumar', 'rajesh.derm@hospital.com', 'Dermatology', 'Clinical Dermatology', '+91 9876543216', 10, 'MBBS, MD'),
    ('Dr. Sneha Patel', 'sneha.patel@hospital.com', 'Dermatology', 'Cosmetic Dermatology', '+91 9876543217', 9, 'MBBS, MD'),
    ('Dr. Amit Gupta', 'amit.gupta@hospital.com', 'Dermatology', 'Dermatosurgery', '+91 9876543218', 11, 'MBBS, MD'),
    ('Dr. Sneha Iyer', 'sneha.iyer@hospital.com', 'Neurology', 'Clinical Neurology', '+91 9876543219', 13, 'MBBS, MD, DM'),
    ('Dr. Vikram Rao', 'vikram.rao@hospital.com', 'Neurology', 'Neurosurgery', '+91 9876543220', 16, 'MBBS, MS, MCh'),
    ('Dr. Deepika Singh', 'deepika.singh@hospital.com', 'Neurology', 'Pediatric Neurology', '+91 9876543221', 12, 'MBBS, MD, DM'),
    ('Dr. Amitabh Singh', 'amitabh.singh@hospital.com', 'Orthopedics', 'Joint Replacement', '+91 9876543222', 19, 'MBBS, MS'),
    ('Dr. Ravi Kumar', 'ravi.kumar@hospital.com', 'Orthopedics', 'Sports Medicine', '+91 9876543223', 14, 'MBBS, MS'),
    ('Dr. Meera Joshi', 'meera.joshi@hospital.com', 'Orthopedics', 'Spine Surgery', '+91 9876543224', 17, 'MBBS, MS, MCh'),
    ('Dr. Anita Gupta', 'anita.gupta@hospital.com', 'Pediatrics', 'General Pediatrics', '+91 9876543225', 11, 'MBBS, MD'),
    ('Dr. Suresh Patel', 'suresh.patel@hospital.com', 'Pediatrics', 'Neonatology', '+91 9876543226', 15, 'MBBS, MD, DM'),
    ('Dr. Kavya Nair', 'kavya.nair@hospital.com', 'Pediatrics', 'Pediatric Intensive Care', '+91 9876543227', 10, 'MBBS, MD'),
    ('Dr. Priya Nair', 'priya.nair@hospital.com', 'Gynecology', 'Obstetrics', '+91 9876543228', 13, 'MBBS, MD'),
    ('Dr. Sunita Sharma', 'sunita.sharma@hospital.com', 'Gynecology', 'Gynecologic Oncology', '+91 9876543229', 16, 'MBBS, MD, DM'),
    ('Dr. Rekha Verma', 'rekha.verma@hospital.com', 'Gynecology', 'Reproductive Medicine', '+91 9876543230', 12, 'MBBS, MD'),
    ('Dr. Mohammed Ali', 'mohammed.ali@hospital.com', 'ENT', 'Otology', '+91 9876543231', 14, 'MBBS, MS'),
    ('Dr. Deepak Joshi', 'deepak.joshi@hospital.com', 'ENT', 'Rhinology', '+91 9876543232', 11, 'MBBS, MS'),
    ('Dr. Sita Ram', 'sita.ram@hospital.com', 'ENT', 'Head and Neck Surgery', '+91 9876543233', 15, 'MBBS, MS'),
    ('Dr. Rahul Verma', 'rahul.verma@hospital.com', 'Ophthalmology', 'Cataract Surgery', '+91 9876543234', 17, 'MBBS, MS'),
    ('Dr. Nisha Patel', 'nisha.patel@hospital.com', 'Ophthalmology', 'Retina Specialist', '+91 9876543235', 13, 'MBBS, MS'),
    ('Dr. Kiran Kumar', 'kiran.kumar@hospital.com', 'Ophthalmology', 'Glaucoma Specialist', '+91 9876543236', 12, 'MBBS, MS'),
    ('Dr. Aarav Sharma', 'aarav.sharma@hospital.com', 'Psychiatry', 'Adult Psychiatry', '+91 9876543237', 10, 'MBBS, MD'),
    ('Dr. Pooja Singh', 'pooja.singh@hospital.com', 'Psychiatry', 'Child Psychiatry', '+91 9876543238', 9, 'MBBS, MD'),
    ('Dr. Manish Gupta', 'manish.gupta@hospital.com', 'Psychiatry', 'Addiction Psychiatry', '+91 9876543239', 11, 'MBBS, MD'),
]


@transaction.atomic
def seed_reference_data() -> dict:
    """Seed departments and doctors into empty tables; returns inserted counts."""
    seeded = {'departments': 0, 'doctors': 0}
    if not Department.objects.exists():
        created = Department.objects.bulk_create([
            Department(name=name, description=description, active=True)
            for name, description in DEPARTMENTS
        ])
        seeded['departments'] = len(created)
        logger.info('seeded departments count=%s', len(created))
    if not Doctor.objects.exists():
        created = Doctor.objects.bulk_create([
            Doctor(name=name, email=email, department=dept, specialization=spec, phone=phone,
                   available=True, experience_years=years, qualification=qual)
            for name, email, dept, spec, phone, years, qual in DOCTORS
        ])
        seeded['doctors'] = len(created)
        logger.info('seeded doctors count=%s', len(created))
    return seeded
