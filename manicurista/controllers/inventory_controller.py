"""
Inventory controller for handling HTTP requests.
"""

from flask import Blueprint

from manicurista.controllers.controller_helpers import json_object
from manicurista.core.api_utils import api_response
from manicurista.core.exceptions import ValidationError
from manicurista.core.limiter_config import limiter
from manicurista.schemas.dtos import ProductRequest, product_to_dict
from manicurista.state import get_state

inventory_bp = Blueprint("inventory", __name__, url_prefix="/api/inventory")


@inventory_bp.route("", methods=["GET"])
@limiter.limit("100 per minute")
def list_inventory():
    """List all products."""
    products = get_state().inventory_service.list_products()
    return api_response(True, "Inventory retrieved", [product_to_dict(p) for p in products])


@inventory_bp.route("", methods=["POST"])
@limiter.limit("30 per minute")
def add_product():
    product = get_state().inventory_service.add_product(
        ProductRequest.from_payload(json_object())
    )
    return api_response(True, "Product created", product_to_dict(product), 201)


@inventory_bp.route("/low-stock", methods=["GET"])
def low_stock():
    products = get_state().inventory_service.low_stock()
    return api_response(
        True, "Products at or below minimum stock", [product_to_dict(p) for p in products]
    )


@inventory_bp.route("/<int:product_id>", methods=["GET"])
def get_product(product_id: int):
    product = get_state().inventory_service.get_product(product_id)
    return api_response(True, "Product found", product_to_dict(product))


@inventory_bp.route("/<int:product_id>", methods=["PUT"])
@limiter.limit("30 per minute")
def update_product(product_id: int):
    product = get_state().inventory_service.update_product(
        product_id, ProductRequest.from_payload(json_object())
    )
    return api_response(True, "Product updated", product_to_dict(product))


@inventory_bp.route("/<int:product_id>", methods=["DELETE"])
@limiter.limit("30 per minute")
def delete_product(product_id: int):
    deleted = get_state().inventory_service.delete_product(product_id)
    message = "Product deleted" if deleted else "Product not found, nothing deleted"
    return api_response(True, message, {"deleted": deleted})


@inventory_bp.route("/<int:product_id>/stock", methods=["PATCH"])
@limiter.limit("60 per minute")
def change_stock(product_id: int):
    """Adjust stock by {"delta": n}; the result may not go below zero."""
    data = json_object()
    if "delta" not in data:
        raise ValidationError("delta is required", field="delta")
    product = get_state().inventory_service.change_stock(product_id, data["delta"])
    return api_response(True, "Stock updated", product_to_dict(product))
