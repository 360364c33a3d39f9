"""
Wishlist Service Flask application
Phone OTP login, per-user wishlists and product price history.
"""

import logging
from flask import Flask, jsonify
from flasgger import Swagger
from flask_cors import CORS
from wishlist_service.config import Config
from wishlist_service.errors import register_error_handlers
from wishlist_service.extensions import db, jwt
from wishlist_service.logging_config import setup_logging
from wishlist_service.services import EXTENSION_KEY, FixedCodeOtpProvider, build_services
from wishlist_service.storage import MemoryStore, SqlStore, StorageFallback

logger = logging.getLogger(__name__)


def create_app(test_config=None):
    app = Flask(__name__)

    # Configuration
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    setup_logging(app.config['LOG_LEVEL'])

    # Initialize Extensions
    jwt.init_app(app)
    CORS(app)

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return jsonify({'msg': 'Token is not valid'}), 401

    @jwt.unauthorized_loader
    def missing_token(reason):
        return jsonify({'msg': 'No token, authorization denied'}), 401

    # Storage: database when reachable, process memory otherwise
    durable = SqlStore(db)
    if app.config.get('SQLALCHEMY_DATABASE_URI'):
        db.init_app(app)
        with app.app_context():
            durable.connect()
    else:
        logger.warning("No database configured. Running in memory-only mode.")

    storage = StorageFallback(durable, MemoryStore())
    otp_provider = app.config.get('OTP_PROVIDER') or FixedCodeOtpProvider(app.config['OTP_FIXED_CODE'])
    app.extensions[EXTENSION_KEY] = build_services(storage, otp_provider)

    register_error_handlers(app)
    Swagger(app)

    # Register Blueprints
    from wishlist_service.routes.auth import auth_bp
    app.register_blueprint(auth_bp, url_prefix='/api/auth')

    from wishlist_service.routes.wishlist import wishlist_bp
    app.register_blueprint(wishlist_bp, url_prefix='/api/wishlist')

    from wishlist_service.routes.products import products_bp
    app.register_blueprint(products_bp, url_prefix='/api/products')

    @app.route('/')
    def index():
        return jsonify({'msg': 'Welcome to Wishlist API'}), 200

    @app.route('/health')
    def health():
        return jsonify({
            'service': 'wishlist-service',
            'status': 'healthy',
            'storage': storage.mode,
        }), 200

    return app


def main():
    app = create_app()
    app.run(host='0.0.0.0', port=app.config['PORT'])


if __name__ == '__main__':
    main()
