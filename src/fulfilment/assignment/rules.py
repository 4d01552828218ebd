"""Fan-out limits for fulfilment assignments.

Each limit counts the distinct counterparts an entity is already linked to,
leaving out the counterpart being assigned: a warehouse or product that is
already present never counts against itself.
"""

from fulfilment.exceptions import ConstraintViolation

MAX_WAREHOUSES_PER_STORE_PRODUCT = 2
MAX_WAREHOUSES_PER_STORE = 3
MAX_PRODUCTS_PER_WAREHOUSE = 5


def _distinct_others(values, candidate):
    return {str(value) for value in values if value is not None} - {str(candidate)}


def check_store_product_limit(assignments, warehouse_code):
    """At most 2 warehouses fulfil one product for one store."""
    others = _distinct_others((a.warehouse_code for a in assignments), warehouse_code)
    if len(others) >= MAX_WAREHOUSES_PER_STORE_PRODUCT:
        raise ConstraintViolation(
            {
                "warehouse_code": [
                    f"A product can be fulfilled by at most {MAX_WAREHOUSES_PER_STORE_PRODUCT} "
                    "warehouses per store"
                ]
            }
        )


def check_store_limit(assignments, warehouse_code):
    """At most 3 warehouses fulfil one store."""
    others = _distinct_others((a.warehouse_code for a in assignments), warehouse_code)
    if len(others) >= MAX_WAREHOUSES_PER_STORE:
        raise ConstraintViolation(
            {
                "warehouse_code": [
                    f"A store can be fulfilled by at most {MAX_WAREHOUSES_PER_STORE} different warehouses"
                ]
            }
        )


def check_warehouse_limit(assignments, product_id):
    """At most 5 product types are stored in one warehouse."""
    others = _distinct_others((a.product_id for a in assignments), product_id)
    if len(others) >= MAX_PRODUCTS_PER_WAREHOUSE:
        raise ConstraintViolation(
            {
                "product_id": [
                    f"A warehouse can store at most {MAX_PRODUCTS_PER_WAREHOUSE} different product types"
                ]
            }
        )
