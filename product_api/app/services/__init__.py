"""
Service layer.

``product_repository`` owns the in‑memory product list and
``product_validation`` decides whether a candidate may be stored.
Neither module knows about HTTP.
"""
