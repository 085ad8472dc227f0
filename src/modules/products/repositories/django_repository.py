"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
instead of raising HTTP-level exceptions. The Service Layer decides
how to translate a missing entity into an API response.
"""

from __future__ import annotations

from typing import List, Optional

from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

# Range of a BIGINT primary key; anything outside cannot match a row
_PK_MIN = -(2**63)
_PK_MAX = 2**63 - 1


def _in_pk_range(id: int) -> bool:
    return _PK_MIN <= id <= _PK_MAX


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key, ``None`` when it does not exist."""
        if not _in_pk_range(id):
            return None
        return Product.objects.filter(id=id).first()

    def get_for_update(self, id: int) -> Optional[Product]:
        """Retrieve and lock a product row; must run inside a transaction."""
        if not _in_pk_range(id):
            return None
        return Product.objects.select_for_update().filter(id=id).first()

    def list(self) -> List[Product]:
        return list(Product.objects.order_by("id"))

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Remove a product by ID.

        Returns ``True`` if the product was found and deleted,
        ``False`` if no product exists with the given ID.
        """
        if not _in_pk_range(id):
            return False
        deleted, _ = Product.objects.filter(id=id).delete()
        return deleted > 0
