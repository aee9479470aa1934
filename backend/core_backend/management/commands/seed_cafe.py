"""
Django management command to load a demo cafe: staff users, settings,
a menu and a floor of tables.

Usage:
    python manage.py seed_cafe
    python manage.py seed_cafe --clear
    python manage.py seed_cafe --dry-run
"""

from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from orders.models import Order, OrderNumberCounter
from orders.services.numbering_service import ORDER_NUMBER_COUNTER
from products.models import Category, Product, ProductVariant
from settings.models import GlobalSettings
from tables.models import Table

STAFF = [
    # username, password, first name, last name, is_staff
    ("admin", "admin", "Admin", "User", True),
    ("cashier", "cashier", "Cashier", "Staff", False),
    ("kitchen", "kitchen", "Kitchen", "Staff", False),
]

MENU = {
    ("Hot Drinks", "Coffee, tea, and other hot beverages"): [
        ("Espresso", "250", [("Single", "250"), ("Double", "350")]),
        ("Cappuccino", "350", []),
        ("Latte", "400", [("Regular", "400"), ("Large", "500")]),
        ("Chai Latte", "300", []),
        ("Green Tea", "200", []),
    ],
    ("Cold Drinks", "Smoothies, juices, and iced beverages"): [
        ("Iced Coffee", "400", []),
        ("Mango Smoothie", "450", []),
        ("Fresh Orange Juice", "350", []),
        ("Lemonade", "250", []),
    ],
    ("Breakfast", "Morning favorites and brunch items"): [
        ("Pancakes", "500", [("Stack of 3", "500"), ("Stack of 5", "700")]),
        ("Omelette", "400", []),
        ("Avocado Toast", "550", []),
    ],
    ("Main Course", "Lunch and dinner entrees"): [
        ("Grilled Chicken", "950", []),
        ("Beef Steak", "1500", [("Medium", "1500"), ("Large", "1900")]),
        ("Chicken Biryani", "700", []),
        ("Vegetable Curry", "550", []),
    ],
    ("Desserts", "Sweet treats and pastries"): [
        ("Chocolate Brownie", "350", []),
        ("Cheesecake", "450", []),
        ("Gulab Jamun", "250", []),
    ],
    ("Snacks", "Light bites and appetizers"): [
        ("French Fries", "300", [("Regular", "300"), ("Large", "450")]),
        ("Chicken Wings", "550", []),
        ("Garlic Bread", "250", []),
    ],
}

TABLES = [
    (1, "Table 1", 2),
    (2, "Table 2", 2),
    (3, "Table 3", 4),
    (4, "Table 4", 4),
    (5, "Table 5", 4),
    (6, "Table 6", 6),
    (7, "Table 7", 6),
    (8, "Table 8", 8),
    (9, "VIP Room", 10),
    (10, "Outdoor 1", 4),
]


class Command(BaseCommand):
    help = "Seed a demo cafe (staff, settings, menu, tables)"

    def add_arguments(self, parser):
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Delete existing orders, menu and tables first",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Show what would be created without writing anything",
        )

    def handle(self, *args, **options):
        product_count = sum(len(products) for products in MENU.values())
        if options["dry_run"]:
            self.stdout.write(self.style.WARNING("DRY RUN MODE - No data will be created"))
            self.stdout.write(
                f"Would create {len(STAFF)} users, {len(MENU)} categories, "
                f"{product_count} products and {len(TABLES)} tables"
            )
            return

        with transaction.atomic():
            if options["clear"]:
                self.clear_data()
            self.seed_staff()
            self.seed_settings()
            self.seed_menu()
            self.seed_tables()
            OrderNumberCounter.objects.get_or_create(name=ORDER_NUMBER_COUNTER, defaults={"value": 0})

        self.stdout.write(self.style.SUCCESS("Cafe seeded successfully"))

    def clear_data(self):
        Table.objects.update(current_order=None, status=Table.Status.AVAILABLE)
        Order.objects.all().delete()
        Product.objects.all().delete()
        Category.objects.all().delete()
        Table.objects.all().delete()
        OrderNumberCounter.objects.all().delete()
        self.stdout.write("Existing orders, menu and tables cleared")

    def seed_staff(self):
        User = get_user_model()
        for username, password, first_name, last_name, is_staff in STAFF:
            user, created = User.objects.get_or_create(
                username=username,
                defaults={"first_name": first_name, "last_name": last_name, "is_staff": is_staff},
            )
            if created:
                user.set_password(password)
                user.save(update_fields=["password"])
                self.stdout.write(f"User '{username}' created")

    def seed_settings(self):
        settings_obj = GlobalSettings.load()
        settings_obj.cafe_address = settings_obj.cafe_address or "123 Main Street, City Center"
        settings_obj.cafe_phone = settings_obj.cafe_phone or "+92 300 1234567"
        settings_obj.save()

    def seed_menu(self):
        for sort_order, ((name, description), products) in enumerate(MENU.items()):
            category, _ = Category.objects.get_or_create(
                name=name, defaults={"description": description, "sort_order": sort_order}
            )
            for product_order, (product_name, price, variants) in enumerate(products):
                product, created = Product.objects.get_or_create(
                    name=product_name,
                    defaults={
                        "category": category,
                        "price": Decimal(price),
                        "sort_order": product_order,
                    },
                )
                if created:
                    ProductVariant.objects.bulk_create(
                        ProductVariant(product=product, name=variant, price=Decimal(variant_price))
                        for variant, variant_price in variants
                    )
        self.stdout.write(f"Menu ready: {Category.objects.count()} categories, {Product.objects.count()} products")

    def seed_tables(self):
        for number, name, capacity in TABLES:
            Table.objects.get_or_create(number=number, defaults={"name": name, "capacity": capacity})
        self.stdout.write(f"{Table.objects.count()} tables ready")
