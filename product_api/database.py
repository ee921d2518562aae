# product_api/database.py
import threading
from typing import Iterable, List, Optional

from .models import Product, ProductIn, SEED_PRODUCTS, _make_product

# In-memory product store. Every read and write goes through one re-entrant
# lock so callers can hold it across a lookup followed by a mutation.


class ProductStore:
    def __init__(self, seed: Optional[Iterable[ProductIn]] = None):
        self.lock = threading.RLock()
        self._products: List[Product] = []
        self.reset(seed)

    def __len__(self) -> int:
        with self.lock:
            return len(self._products)

    def reset(self, seed: Optional[Iterable[ProductIn]] = None):
        with self.lock:
            self._products = []
            for draft in seed or []:
                self.append(draft)

    def get_all(self) -> List[Product]:
        with self.lock:
            return list(self._products)

    def get_by_id(self, product_id: str) -> Optional[Product]:
        with self.lock:
            for p in self._products:
                if p.id == product_id:
                    return p
            return None

    def find_index(self, product_id: str) -> Optional[int]:
        with self.lock:
            for i, p in enumerate(self._products):
                if p.id == product_id:
                    return i
            return None

    def _next_id(self) -> str:
        # count + 1, skipping ids still held after a delete
        n = len(self._products) + 1
        taken = {p.id for p in self._products}
        while str(n) in taken:
            n += 1
        return str(n)

    def append(self, draft: ProductIn) -> Product:
        with self.lock:
            product = _make_product(self._next_id(), draft)
            self._products.append(product)
            return product

    def replace(self, product_id: str, draft: ProductIn) -> Optional[Product]:
        with self.lock:
            product = self.get_by_id(product_id)
            if product is None:
                return None
            product.name = draft.name
            product.description = draft.description
            product.price = draft.price
            product.category = draft.category
            product.in_stock = draft.in_stock
            return product

    def remove_at(self, index: int) -> Product:
        with self.lock:
            return self._products.pop(index)


def seeded_store() -> ProductStore:
    return ProductStore(seed=SEED_PRODUCTS)
