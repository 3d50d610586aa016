from product_api.app.schemas.product import Product


def make_product(**overrides) -> Product:
    fields = {
        "name": "Tea",
        "description": "Hot leaf water",
        "price": 1.5,
        "sku": "tea-hot-leaf",
    }
    fields.update(overrides)
    return Product(**fields)


def payload(**overrides) -> dict:
    """A valid request body using the wire field names."""
    body = {
        "name": "Tea",
        "descripton": "Hot leaf water",
        "price": 1.5,
        "sku": "tea-hot-leaf",
    }
    body.update(overrides)
    return body
