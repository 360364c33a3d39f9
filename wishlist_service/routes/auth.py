from flask import Blueprint, jsonify
from wishlist_service.routes import json_body
from wishlist_service.services import get_services

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/send-otp', methods=['POST'])
def send_otp():
    """
    Send OTP to user's phone
    ---
    tags:
      - Auth
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - phone
          properties:
            phone:
              type: string
              example: "1234567890"
    responses:
      200:
        description: OTP sent successfully
      400:
        description: Missing or invalid phone number
    """
    data = json_body()
    phone = data.get('phone')

    get_services().sessions.send_otp(phone)

    return jsonify({'msg': 'OTP sent successfully', 'phone': phone}), 200


@auth_bp.route('/verify-otp', methods=['POST'])
def verify_otp():
    """
    Verify OTP and return an access token
    ---
    tags:
      - Auth
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - phone
            - otp
          properties:
            phone:
              type: string
            otp:
              type: string
    responses:
      200:
        description: Token valid for 24 hours
      400:
        description: Invalid phone number or OTP
    """
    data = json_body()

    token = get_services().sessions.issue(data.get('phone'), data.get('otp'))

    return jsonify({'token': token}), 200
