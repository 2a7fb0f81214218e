"""
URL mappings for the hospital backend API.

This module registers all API endpoints with their corresponding view
functions.  Trailing slashes are deliberately omitted to match the
front-end.  Fixed sub-paths such as ``available`` or ``pending`` are
registered before the parameterised detail routes that would otherwise
shadow them.
"""
from django.urls import path

from .auth_views import jwt_logout_view, jwt_refresh_view, login_view, signup_view
from .views import appointments, departments, doctors, health, prescriptions, users


urlpatterns = [
    path('healthz', health.healthz, name='healthz'),

    # Authentication
    path('auth/signup', signup_view, name='signup_view'),
    path('auth/login', login_view, name='login_view'),
    path('auth/refresh', jwt_refresh_view, name='jwt_refresh_view'),
    path('auth/logout', jwt_logout_view, name='jwt_logout_view'),

    # Users
    path('api/users', users.users, name='users'),
    path('api/users/pending', users.users_pending, name='users_pending'),
    path('api/users/role/<str:role>', users.users_by_role, name='users_by_role'),
    path('api/users/<str:email>/verify', users.user_verify, name='user_verify'),
    path('api/users/<str:email>', users.user_detail, name='user_detail'),

    # Doctors
    path('api/doctors', doctors.doctors, name='doctors'),
    path('api/doctors/available', doctors.doctors_available, name='doctors_available'),
    path('api/doctors/department/<str:department>', doctors.doctors_by_department, name='doctors_by_department'),
    path('api/doctors/specialization/<str:specialization>', doctors.doctors_by_specialization,
         name='doctors_by_specialization'),
    path('api/doctors/email/<str:email>', doctors.doctor_by_email, name='doctor_by_email'),
    path('api/doctors/<uuid:pk>', doctors.doctor_detail, name='doctor_detail'),

    # Departments
    path('api/departments', departments.departments, name='departments'),
    path('api/departments/active', departments.departments_active, name='departments_active'),
    path('api/departments/name/<str:name>', departments.department_by_name, name='department_by_name'),
    path('api/departments/<uuid:pk>', departments.department_detail, name='department_detail'),

    # Appointments
    path('api/appointments', appointments.appointments, name='appointments'),
    path('api/appointments/patient/<str:patient_id>', appointments.appointments_by_patient,
         name='appointments_by_patient'),
    path('api/appointments/doctor/<str:doctor_id>', appointments.appointments_by_doctor,
         name='appointments_by_doctor'),
    path('api/appointments/status/<str:status_value>', appointments.appointments_by_status,
         name='appointments_by_status'),
    path('api/appointments/<uuid:pk>/status', appointments.appointment_status, name='appointment_status'),
    path('api/appointments/<uuid:pk>', appointments.appointment_detail, name='appointment_detail'),

    # Prescriptions
    path('api/prescriptions', prescriptions.prescriptions, name='prescriptions'),
    path('api/prescriptions/patient/<str:patient_id>', prescriptions.prescriptions_by_patient,
         name='prescriptions_by_patient'),
    path('api/prescriptions/doctor/<str:doctor_id>', prescriptions.prescriptions_by_doctor,
         name='prescriptions_by_doctor'),
    path('api/prescriptions/patient-name/<str:patient_name>', prescriptions.prescriptions_by_patient_name,
         name='prescriptions_by_patient_name'),
    path('api/prescriptions/<uuid:pk>/dispense', prescriptions.prescription_dispense,
         name='prescription_dispense'),
    path('api/prescriptions/<uuid:pk>', prescriptions.prescription_detail, name='prescription_detail'),
]
