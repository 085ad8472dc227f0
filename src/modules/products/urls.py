"""Product URL configuration.

One Store handle is built when the URLconf is imported and shared by
every request; it stays open for the life of the process.
"""

from __future__ import annotations

from django.urls import re_path

from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.views import ProductViewSet

store = ProductDjangoRepository()

product_list = ProductViewSet.as_view(
    {"get": "list", "post": "create"},
    repository=store,
)
product_detail = ProductViewSet.as_view(
    {
        "get": "retrieve",
        "put": "update",
        "patch": "toggle_availability",
        "delete": "destroy",
    },
    repository=store,
)

urlpatterns = [
    re_path(r"^api/products/?$", product_list, name="product-list"),
    re_path(r"^api/products/(?P<id>[^/]+)/?$", product_detail, name="product-detail"),
]
