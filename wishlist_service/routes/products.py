import logging
from flask import Blueprint, current_app, request, jsonify
from wishlist_service.errors import InvalidCredentialError
from wishlist_service.routes import json_body
from wishlist_service.services import get_services
from wishlist_service.signatures import SHOPIFY_HMAC_HEADER, verify_shopify_hmac

logger = logging.getLogger(__name__)

products_bp = Blueprint('products', __name__)


@products_bp.route('/webhook', methods=['POST'])
def product_webhook():
    """
    Receive product price updates from the store
    ---
    tags:
      - Products
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - id
            - price
          properties:
            id:
              type: string
            price:
              type: number
            title:
              type: string
    responses:
      200:
        description: Webhook acknowledged
      400:
        description: Missing product id or price, or bad signature
    """
    secret = current_app.config.get('SHOPIFY_WEBHOOK_SECRET')
    if secret:
        signature = request.headers.get(SHOPIFY_HMAC_HEADER)
        if not verify_shopify_hmac(request.get_data(), signature, secret):
            raise InvalidCredentialError('Invalid webhook signature')

    data = json_body()
    logger.info("Webhook received for product %s (%s)", data.get('id'), data.get('title'))

    get_services().price_ledger.record(data.get('id'), data.get('price'))

    # Acknowledge receipt even when the database write fell back to memory
    return jsonify({'success': True}), 200


@products_bp.route('/<product_id>/price-comparison', methods=['GET'])
def price_comparison(product_id):
    """
    Compare the latest recorded price with the product's all-time low
    ---
    tags:
      - Products
    parameters:
      - in: path
        name: product_id
        required: true
        type: string
    responses:
      200:
        description: Current price, lowest price and price history (newest first)
    """
    comparison = get_services().price_ledger.compare_by_history(product_id)
    return jsonify(comparison.to_dict()), 200


@products_bp.route('/price-comparison', methods=['POST'])
def price_comparison_for_price():
    """
    Compare a live price against the product's recorded history
    ---
    tags:
      - Products
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - productId
            - price
          properties:
            productId:
              type: string
            price:
              type: number
    responses:
      200:
        description: Comparison with the supplied price prepended to the history
      400:
        description: Missing product id or price
    """
    data = json_body()

    comparison = get_services().price_ledger.compare_given_price(data.get('productId'), data.get('price'))

    return jsonify(comparison.to_dict()), 200
