from django.core.management.base import BaseCommand

from catalog.seed import seed_catalog


class Command(BaseCommand):
    help = "Populate empty catalog tables with the starter vehicles, packages and photos"

    def handle(self, *args, **kwargs):
        created = seed_catalog()
        for label, count in created.items():
            if count:
                self.stdout.write(self.style.SUCCESS(f"✅ Created {count} {label}"))
            else:
                self.stdout.write(f"Skipped {label}: table is not empty")
