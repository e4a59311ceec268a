"""Messages returned by the Product API."""

NAME_EMPTY = "name must not be empty"
PRICE_NOT_NUMERIC = "invalid value"
PRICE_EMPTY = "price must not be empty"
PRICE_INVALID = "invalid price"
ID_INVALID = "invalid ID"
AVAILABILITY_EMPTY = "availability must not be empty"

PRODUCT_NOT_FOUND = "product not found"
PRODUCT_DELETED = "product deleted"
