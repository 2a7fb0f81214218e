"""Clinic application for the hospital management backend.

This package contains models, services, serializers, views and route
registrations for users, doctors, departments, appointments and
prescriptions.
"""
