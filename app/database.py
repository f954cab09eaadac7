import threading
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, List, Optional

from .models import Product

# In-memory product storage. One (re-entrant) lock covers the map and the id counter.


class ProductStore:
    def __init__(self):
        self._products: Dict[str, Product] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    def put(self, product_id: str, product: Product) -> None:
        with self._lock:
            self._products[product_id] = product

    def get(self, product_id: str) -> Optional[Product]:
        with self._lock:
            return self._products.get(product_id)

    def replace(self, product_id: str, build: Callable[[Product], Product]) -> Optional[Product]:
        """Swap the entry at ``product_id`` for ``build(existing)`` in one step.

        Returns the new product, or ``None`` (and stores nothing) when the
        id is absent.
        """
        with self._lock:
            existing = self._products.get(product_id)
            if existing is None:
                return None
            product = build(existing)
            self._products[product_id] = product
            return product

    def remove(self, product_id: str) -> bool:
        with self._lock:
            return self._products.pop(product_id, None) is not None

    def exists(self, product_id: str) -> bool:
        with self._lock:
            return product_id in self._products

    def values(self) -> List[Product]:
        with self._lock:
            return list(self._products.values())

    def next_id(self) -> str:
        with self._lock:
            pid = str(self._next_id)
            self._next_id += 1
            return pid

    def clear(self) -> None:
        """Drop every product and restart ids at "1". Tests/demo only."""
        with self._lock:
            self._products.clear()
            self._next_id = 1

    @contextmanager
    def batch(self) -> Iterator["ProductStore"]:
        # other threads wait until the whole block is done
        with self._lock:
            yield self

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)
