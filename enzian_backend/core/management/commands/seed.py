"""
Enzian seed command: resets the database to the demo dataset.

Usage:
    python manage.py seed            # asks for confirmation
    python manage.py seed --noinput  # no prompt

WARNING: every doctor, patient and diagnosis is deleted before the three
demo doctors, patients and diagnoses are inserted.
"""

from django.core.management.base import BaseCommand, CommandError

from enzian_backend.core.seeders import seed_demo_data


class Command(BaseCommand):
    help = "Replace all doctors, patients and diagnoses with the demo dataset"

    def add_arguments(self, parser):
        parser.add_argument(
            "--noinput",
            "--no-input",
            action="store_false",
            dest="interactive",
            help="Do not prompt before deleting existing records.",
        )

    def handle(self, *args, **options):
        if options["interactive"]:
            answer = input("This deletes ALL doctors, patients and diagnoses. Continue? [y/N] ")
            if answer.strip().lower() not in ("y", "yes"):
                raise CommandError("Seeding cancelled.")

        self.stdout.write("=" * 80)
        self.stdout.write("  Enzian Seed - demo data")
        self.stdout.write("=" * 80)

        try:
            created = seed_demo_data()
        except Exception as e:
            self.stdout.write(f"\n✗ Seeding failed: {e}")
            raise

        self._print_summary(created)
        self.stdout.write(self.style.SUCCESS("\n✓ Seeding completed"))

    def _print_summary(self, created):
        self.stdout.write("\nCreated records:")
        for key, records in created.items():
            self.stdout.write(f"  • {key}: {len(records)}")
        for diagnosis in created["diagnoses"]:
            self.stdout.write(
                f"    - {diagnosis.patient.name}: {diagnosis.final_classification} "
                f"({diagnosis.severity.label})"
            )
