from __future__ import annotations

import random

import structlog
from django.core.management.base import BaseCommand

from modules.carts.models import Cart
from modules.carts.repositories.django_repository import CartDjangoRepository
from modules.orders.dtos import OrderInputDTO
from modules.orders.services import build_order_service

DESCRIPTIONS = [
    "Monitor 27 inch",
    "Mechanical keyboard",
    "Gaming mouse",
    "14 inch notebook",
    "Headset",
    "Office desk",
    "Ergonomic chair",
    "Bookshelf",
]


class Command(BaseCommand):
    help = "Seed database with development carts and orders."

    def add_arguments(self, parser):
        parser.add_argument("--carts", type=int, default=5)
        parser.add_argument("--orders", type=int, default=20)

    def handle(self, *args, **options):
        random.seed(42)
        structlog.contextvars.bind_contextvars(command="seed_orders")
        self.stdout.write("Seeding development data...")

        carts = self._seed_carts(options["carts"])
        orders_created = self._seed_orders(carts, options["orders"])

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: carts={len(carts)}, orders={orders_created}"
            )
        )
        structlog.contextvars.unbind_contextvars("command")

    def _seed_carts(self, count: int) -> list[Cart]:
        self.stdout.write("Creating carts...")
        repo = CartDjangoRepository()
        carts = [repo.save(Cart(user_id=user_id)) for user_id in range(1, count + 1)]
        self.stdout.write(self.style.SUCCESS("Creating carts... Done!"))
        return carts

    def _seed_orders(self, carts: list[Cart], count: int) -> int:
        self.stdout.write("Creating orders...")
        if not carts:
            self.stdout.write(self.style.WARNING("Skipping orders (no carts)."))
            return 0

        service = build_order_service()
        for _ in range(count):
            order = service.create_order(
                OrderInputDTO(
                    cart_id=random.choice(carts).id,
                    description=random.choice(DESCRIPTIONS),
                    fee=round(random.uniform(5, 500), 2),
                )
            )
            # 0, 1 or 2 advances: CREATED, ORDERED or IN_PAYMENT
            for _ in range(random.randint(0, 2)):
                service.advance_status(order.order_id)

        self.stdout.write(self.style.SUCCESS("Creating orders... Done!"))
        return count
