from __future__ import annotations

from decimal import Decimal

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from modules.products.models import Product

SAMPLE_CATALOG = [
    ("Widget", "A general purpose widget", Decimal("9.99"), 100),
    ("Gadget", "Pocket-sized gadget", Decimal("24.50"), 40),
    ("Mechanical Keyboard", None, Decimal("399.90"), 15),
    ("Monitor 27\"", "IPS panel, 144 Hz", Decimal("1299.90"), 8),
    ("Desk Lamp", "LED, dimmable", Decimal("59.90"), 0),
]


class Command(BaseCommand):
    help = "Create the default accounts and, optionally, a sample product catalog."

    def add_arguments(self, parser):
        parser.add_argument(
            "--with-products",
            action="store_true",
            help="Also seed a small sample catalog.",
        )

    def handle(self, *args, **options):
        self.stdout.write("Seeding development data...")

        users_created = self._seed_users()
        products_created = self._seed_products() if options["with_products"] else 0

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={users_created}, "
                f"products={products_created}"
            )
        )

    def _seed_users(self) -> int:
        User = get_user_model()
        created = 0
        if not User.objects.filter(username="user").exists():
            User.objects.create_user("user", password=settings.SEED_USER_PASSWORD)
            created += 1
        if not User.objects.filter(username="admin").exists():
            User.objects.create_superuser("admin", password=settings.SEED_ADMIN_PASSWORD)
            created += 1
        return created

    def _seed_products(self) -> int:
        self.stdout.write("Creating products...")
        created = 0
        for name, description, price, quantity in SAMPLE_CATALOG:
            _, was_created = Product.objects.get_or_create(
                name=name,
                defaults={
                    "description": description,
                    "price": price,
                    "quantity": quantity,
                },
            )
            created += int(was_created)
        self.stdout.write(self.style.SUCCESS("Creating products... Done!"))
        return created
