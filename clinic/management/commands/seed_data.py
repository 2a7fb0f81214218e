# clinic/management/commands/seed_data.py
from django.core.management.base import BaseCommand

from clinic.services.seeding import seed_reference_data


class Command(BaseCommand):
    help = "Seed reference departments and doctors into empty tables (idempotent)."

    def handle(self, *args, **opts):
        seeded = seed_reference_data()
        for table, count in seeded.items():
            if count:
                self.stdout.write(self.style.SUCCESS(f"seeded {count} {table}"))
            else:
                self.stdout.write(f"{table}: already populated, skipped")
        self.stdout.write(self.style.SUCCESS("Reference data ensured."))
