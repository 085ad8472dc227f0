"""Product repository interface.

The Store contract the service layer depends on.  Handlers never touch
the ORM directly; every Product lifecycle change goes through here.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def list(self) -> List["Product"]:
        """List every product ordered by ``id``."""

    @abstractmethod
    def get_for_update(self, id: int) -> Optional["Product"]:
        """Retrieve a product with a row-level lock (SELECT FOR UPDATE).

        Used by read-modify-write use cases such as toggling availability.
        Returns ``None`` if the product does not exist.
        """
