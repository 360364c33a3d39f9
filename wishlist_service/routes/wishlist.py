from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required, get_jwt
from wishlist_service.routes import json_body
from wishlist_service.services import get_services

wishlist_bp = Blueprint('wishlist', __name__)


def _current_phone():
    return get_jwt()['user']['phone']


@wishlist_bp.route('', methods=['POST'])
@jwt_required()
def add_item():
    """
    Add a product to the caller's wishlist
    ---
    tags:
      - Wishlist
    security:
      - Bearer: []
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - merchantId
            - productId
          properties:
            merchantId:
              type: string
            productId:
              type: string
            token:
              type: string
    responses:
      200:
        description: The created wishlist item
      400:
        description: Missing fields or item already in wishlist
      401:
        description: Missing or invalid token
    """
    data = json_body()

    item = get_services().wishlist.add(_current_phone(), data.get('merchantId'), data.get('productId'))

    return jsonify(item.to_dict()), 200


@wishlist_bp.route('/get', methods=['POST'])
@jwt_required()
def list_items():
    """
    List the caller's wishlist, newest first
    ---
    tags:
      - Wishlist
    security:
      - Bearer: []
    responses:
      200:
        description: Wishlist items
    """
    items = get_services().wishlist.list_all(_current_phone())
    return jsonify([item.to_dict() for item in items]), 200


@wishlist_bp.route('/merchant', methods=['POST'])
@jwt_required()
def list_merchant_items():
    """
    List the caller's wishlist items from one merchant, newest first
    ---
    tags:
      - Wishlist
    security:
      - Bearer: []
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - merchantId
          properties:
            merchantId:
              type: string
    responses:
      200:
        description: Wishlist items for the merchant
      400:
        description: Missing merchant id
      401:
        description: Missing or invalid token
    """
    data = json_body()

    items = get_services().wishlist.list_by_merchant(_current_phone(), data.get('merchantId'))

    return jsonify([item.to_dict() for item in items]), 200


@wishlist_bp.route('/delete/<item_id>', methods=['POST'])
@jwt_required()
def delete_item(item_id):
    """
    Remove an item from the caller's wishlist
    ---
    tags:
      - Wishlist
    security:
      - Bearer: []
    parameters:
      - in: path
        name: item_id
        required: true
        type: string
    responses:
      200:
        description: Item removed
      401:
        description: Item belongs to another user
      404:
        description: Item not found
    """
    message = get_services().wishlist.remove(_current_phone(), item_id)
    return jsonify({'msg': message}), 200


@wishlist_bp.route('/interested', methods=['POST'])
def interested_count():
    """
    Count distinct users who have a product in their wishlist
    ---
    tags:
      - Wishlist
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - productId
          properties:
            productId:
              type: string
    responses:
      200:
        description: Number of interested users
      400:
        description: Missing product id
    """
    data = json_body()

    count = get_services().wishlist.count_interested(data.get('productId'))

    return jsonify({'count': count}), 200
