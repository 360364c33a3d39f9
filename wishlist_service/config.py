"""
Wishlist Service configuration
Values come from the environment; a local .env file is loaded first.
"""

import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()


def _database_uri():
    # DATABASE_URL wins; otherwise build a postgres URI when a DB host is given.
    # No URI at all means the service runs in memory-only mode.
    if os.environ.get('DATABASE_URL'):
        return os.environ['DATABASE_URL']
    if os.environ.get('DB_HOST'):
        db_user = os.environ.get('DB_USER', 'wishlist_svc_user')
        db_pass = os.environ.get('DB_PASS', 'password')
        db_name = os.environ.get('DB_NAME', 'wishlist_db')
        return f"postgresql://{db_user}:{db_pass}@{os.environ['DB_HOST']}/{db_name}"
    return None


class Config:
    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    JWT_SECRET_KEY = os.environ.get('JWT_SECRET', 'dev-secret-change-me')
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=24)
    # The web client posts the token inside the JSON body
    JWT_TOKEN_LOCATION = ['headers', 'json']
    JWT_JSON_KEY = 'token'

    OTP_FIXED_CODE = os.environ.get('OTP_FIXED_CODE', '1212')
    SHOPIFY_WEBHOOK_SECRET = os.environ.get('SHOPIFY_WEBHOOK_SECRET')

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    PORT = int(os.environ.get('PORT', '3000'))
