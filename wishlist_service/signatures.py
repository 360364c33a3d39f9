"""Shopify webhook HMAC verification."""

import base64
import hashlib
import hmac

SHOPIFY_HMAC_HEADER = 'X-Shopify-Hmac-Sha256'


def compute_shopify_hmac(payload, secret):
    digest = hmac.new(secret.encode('utf-8'), payload, hashlib.sha256).digest()
    return base64.b64encode(digest).decode('utf-8')


def verify_shopify_hmac(payload, signature, secret):
    if not signature:
        return False
    expected = compute_shopify_hmac(payload, secret)
    return hmac.compare_digest(expected.encode('utf-8'), signature.encode('utf-8'))
