from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.models import Product


class Command(BaseCommand):
    help = "Seed the products table with development data, or clear it."

    catalog = [
        ("Curved Monitor 27 inch", Decimal("299.00"), True),
        ("Mechanical Keyboard", Decimal("89.90"), True),
        ("Wireless Mouse", Decimal("24.50"), True),
        ("USB-C Hub", Decimal("39.99"), False),
        ("Noise Cancelling Headset", Decimal("149.00"), True),
        ("Laptop Stand", Decimal("45.00"), True),
    ]

    def add_arguments(self, parser):
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Delete every product instead of seeding.",
        )

    def handle(self, *args, **options):
        if options["clear"]:
            deleted, _ = Product.objects.all().delete()
            self.stdout.write(self.style.SUCCESS(f"Cleared products: {deleted}"))
            return

        self.stdout.write("Seeding development data...")
        created = self._seed_products()
        self.stdout.write(self.style.SUCCESS(f"Seed completed: products={created}"))

    def _seed_products(self) -> int:
        created = 0
        for name, price, availability in self.catalog:
            _, was_created = Product.objects.get_or_create(
                name=name,
                defaults={"price": price, "availability": availability},
            )
            created += int(was_created)
        return created
