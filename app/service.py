"""
Product catalog logic.

``ProductService`` sits between the HTTP routes and the ``ProductStore``:
it validates incoming payloads, hands out ids, stamps timestamps and
filters by category.  Bad input is reported through ``Result`` rather
than raised; unknown ids come back as ``None``/``False``.
"""

import logging
from datetime import datetime
from typing import List, Optional

from .database import ProductStore
from .models import Product, ProductIn, Result, validate_product

logger = logging.getLogger(__name__)

SEED_PRODUCTS = [
    ProductIn(name="Laptop", description="High-performance laptop", price=999.99, quantity=10, category="Electronics"),
    ProductIn(name="Mouse", description="Wireless mouse", price=29.99, quantity=50, category="Electronics"),
    ProductIn(name="Keyboard", description="Mechanical keyboard", price=89.99, quantity=30, category="Electronics"),
    ProductIn(name="Desk Chair", description="Ergonomic office chair", price=299.99, quantity=15, category="Furniture"),
    ProductIn(name="Monitor", description="27-inch 4K monitor", price=399.99, quantity=20, category="Electronics"),
]


class ProductService:
    def __init__(self, store: Optional[ProductStore] = None, seed: bool = True):
        self.store = store if store is not None else ProductStore()
        if seed:
            self.seed()

    def list_all(self) -> List[Product]:
        return self.store.values()

    def list_by_category(self, category: str) -> List[Product]:
        wanted = category.casefold()
        return [
            p for p in self.store.values()
            if p.category is not None and p.category.casefold() == wanted
        ]

    def get_by_id(self, product_id: str) -> Optional[Product]:
        return self.store.get(product_id)

    def exists(self, product_id: str) -> bool:
        return self.store.exists(product_id)

    def create(self, payload: ProductIn) -> Result:
        """Validate ``payload`` and store it under a fresh id.

        On failure nothing is stored and the returned ``Result`` carries
        the ``ValidationError``.
        """
        error = validate_product(payload)
        if error is not None:
            logger.info("Rejected new product: %s", error.message)
            return Result(error=error)

        pid = self.store.next_id()
        now = datetime.now()
        product = payload.to_product(pid, created_at=now, updated_at=now)
        self.store.put(pid, product)
        logger.info("Created product %s (%s)", pid, product.name)
        return Result(value=product)

    def update(self, product_id: str, payload: ProductIn) -> Optional[Result]:
        """Replace the product stored at ``product_id``.

        Returns ``None`` when no such product exists.  The stored id and
        ``created_at`` are kept; any id in the payload is ignored.
        """
        error = validate_product(payload)
        if error is not None:
            if not self.store.exists(product_id):
                return None
            logger.info("Rejected update of product %s: %s", product_id, error.message)
            return Result(error=error)

        def rebuild(existing: Product) -> Product:
            return payload.to_product(
                product_id,
                created_at=existing.created_at,
                updated_at=max(datetime.now(), existing.created_at),
            )

        # lookup and write share one store lock
        product = self.store.replace(product_id, rebuild)
        if product is None:
            return None
        logger.info("Updated product %s", product_id)
        return Result(value=product)

    def delete(self, product_id: str) -> bool:
        removed = self.store.remove(product_id)
        if removed:
            logger.info("Deleted product %s", product_id)
        return removed

    def count(self) -> int:
        return len(self.store)

    def clear(self) -> None:
        self.store.clear()
        logger.info("Product store cleared")

    def seed(self) -> None:
        for payload in SEED_PRODUCTS:
            self.create(payload).unwrap()
        logger.info("Seeded %d products", len(SEED_PRODUCTS))

    def reset(self) -> None:
        """Clear and reseed as one unit; concurrent writers wait until it is done."""
        with self.store.batch():
            self.clear()
            self.seed()
