"""Request rule sets for the product routes.

Every rule in a set is evaluated; the order of each tuple is the order
of the resulting ``errors`` list.
"""

from __future__ import annotations

from modules.core.validation import (
    body,
    is_boolean,
    is_int,
    is_numeric,
    is_positive,
    not_empty,
    param,
)

PRODUCT_ID_RULES = (param("id", is_int, "ID no valido"),)

# GET /:id historically reports the id with different casing
RETRIEVE_PRODUCT_RULES = (param("id", is_int, "Id no valido"),)

PRODUCT_FIELDS_RULES = (
    body("name", not_empty, "El nombre del producto no puede ir vacio"),
    body("price", is_numeric, "Valor no valido"),
    body("price", not_empty, "El precio del producto no puede ir vacio"),
    body("price", is_positive, "Precio no valido"),
)

CREATE_PRODUCT_RULES = PRODUCT_FIELDS_RULES

UPDATE_PRODUCT_RULES = (
    *PRODUCT_ID_RULES,
    *PRODUCT_FIELDS_RULES,
    body("availability", is_boolean, "Valor para disponibilidad no valido"),
)

TOGGLE_AVAILABILITY_RULES = PRODUCT_ID_RULES

DELETE_PRODUCT_RULES = PRODUCT_ID_RULES
