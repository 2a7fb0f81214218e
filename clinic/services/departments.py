import logging
from typing import Optional

from django.db import transaction

from clinic.exceptions import NotFound, ValidationFailure
from clinic.models import Department

logger = logging.getLogger(__name__)


def format_department(d: Department) -> dict:
    return {
        'id': str(d.id),
        'name': d.name,
        'description': d.description,
        'head': d.head,
        'active': d.active,
    }


def list_departments(*, active_only: bool = False):
    qs = Department.objects.all()
    if active_only:
        qs = qs.filter(active=True)
    return qs


def get_department(pk) -> Department:
    dept = Department.objects.filter(pk=pk).first()
    if not dept:
        raise NotFound(f'Department not found with id: {pk}')
    return dept


def get_by_name(name: str) -> Department:
    dept = Department.objects.filter(name=name).first()
    if not dept:
        raise NotFound(f'Department not found with name: {name}')
    return dept


def _check_unique_name(name: str, exclude_pk=None) -> None:
    qs = Department.objects.filter(name=name)
    if exclude_pk is not None:
        qs = qs.exclude(pk=exclude_pk)
    if qs.exists():
        raise ValidationFailure({'name': ['A department with this name already exists.']})


@transaction.atomic
def create_department(*, name: str, description: str = '', head: str = '', active: bool = True) -> Department:
    _check_unique_name(name)
    dept = Department.objects.create(name=name, description=description or '', head=head or '', active=active)
    logger.info('department created name=%s', name)
    return dept


def ensure_department(name: str) -> Department:
    """Return the department called ``name``, creating an active one if missing."""
    dept, created = Department.objects.get_or_create(
        name=name,
        defaults={'description': f'Department of {name}', 'active': True},
    )
    if created:
        logger.info('department created name=%s reason=doctor-approval', name)
    return dept


@transaction.atomic
def update_department(pk, *, name: str, description: str = '', head: Optional[str] = '', active: bool = True) -> Department:
    dept = get_department(pk)
    _check_unique_name(name, exclude_pk=dept.pk)
    dept.name = name
    dept.description = description or ''
    dept.head = head or ''
    dept.active = active
    dept.save()
    return dept


def delete_department(pk) -> None:
    dept = get_department(pk)
    dept.delete()
    logger.info('department deleted id=%s name=%s', pk, dept.name)
