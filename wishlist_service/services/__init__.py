from dataclasses import dataclass
from flask import current_app
from wishlist_service.services.identity import IdentityStore, SessionIssuer
from wishlist_service.services.otp import FixedCodeOtpProvider, OtpProvider
from wishlist_service.services.price_ledger import PriceLedger
from wishlist_service.services.wishlist_store import WishlistStore

EXTENSION_KEY = 'wishlist_service'


@dataclass
class Services:
    price_ledger: PriceLedger
    wishlist: WishlistStore
    identity: IdentityStore
    sessions: SessionIssuer


def build_services(storage, otp_provider):
    identity = IdentityStore(storage)
    return Services(
        price_ledger=PriceLedger(storage),
        wishlist=WishlistStore(storage),
        identity=identity,
        sessions=SessionIssuer(identity, otp_provider),
    )


def get_services():
    return current_app.extensions[EXTENSION_KEY]


__all__ = [
    'Services', 'build_services', 'get_services',
    'PriceLedger', 'WishlistStore', 'IdentityStore', 'SessionIssuer',
    'OtpProvider', 'FixedCodeOtpProvider',
]
