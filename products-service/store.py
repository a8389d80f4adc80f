"""
Store en mémoire des produits.

Une seule séquence ordonnée protégée par un seul verrou: chaque opération
le tient pendant toute sa durée, lecture comme écriture.
"""
from threading import Lock
from typing import Iterable, List, Optional

from loguru import logger

from errors import ProductNotFoundError
from models import Product, seed_products


class ProductStore:
    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._lock = Lock()
        self._products: List[Product] = list(products or [])

    @classmethod
    def seeded(cls) -> "ProductStore":
        return cls(seed_products())

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def _index_of(self, product_id: int) -> int:
        # Premier match: l'unicité des ids n'est pas garantie après un update
        index = next((i for i, p in enumerate(self._products) if p.id == product_id), None)
        if index is None:
            raise ProductNotFoundError(product_id)
        return index

    def list(self) -> List[Product]:
        with self._lock:
            return list(self._products)

    def get(self, product_id: int) -> Product:
        with self._lock:
            return self._products[self._index_of(product_id)]

    def create(self, name: str, price: float, description: str, image: str) -> Product:
        """
        Ajoute un produit en fin de séquence.

        L'id vaut len + 2, compatible avec l'API existante: deux ids peuvent
        entrer en collision après une suppression.
        """
        with self._lock:
            product = Product(
                id=len(self._products) + 2,
                name=name,
                price=price,
                description=description,
                image=image,
            )
            self._products.append(product)
            logger.debug(f"Stored product {product.id}, collection size {len(self._products)}")
            return product

    def update(self, product: Product) -> Product:
        """Remplace en entier le premier produit de même id"""
        with self._lock:
            self._products[self._index_of(product.id)] = product
            return product

    def delete(self, product_id: int) -> Product:
        with self._lock:
            return self._products.pop(self._index_of(product_id))
