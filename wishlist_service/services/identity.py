"""
Identity Store and Session Issuer
Users are keyed by a 10-digit phone number and created on their first OTP request.
"""

import logging
import re
from flask_jwt_extended import create_access_token
from wishlist_service.errors import InvalidCredentialError, NotFoundError, ValidationError
from wishlist_service.models import User, new_id, utcnow

logger = logging.getLogger(__name__)

PHONE_PATTERN = re.compile(r'[0-9]{10}')

# Identity bound into tokens for phones with no stored user record
UNREGISTERED_USER_ID = 'unregistered'


def validate_phone(phone):
    if not phone:
        raise ValidationError('Phone number is required')
    if not isinstance(phone, str) or not PHONE_PATTERN.fullmatch(phone):
        raise ValidationError('Please enter a valid 10-digit phone number')
    return phone


class IdentityStore:

    def __init__(self, storage):
        self.storage = storage

    def ensure_user(self, phone):
        """Return the user for ``phone``, creating it on first sight."""
        validate_phone(phone)

        def upsert(store):
            user = store.find_user(phone)
            if user is None:
                user = store.add_user(User(id=new_id(), phone=phone, created_at=utcnow()))
                logger.info("Created user for phone %s in %s store", phone, store.name)
            return user

        return self.storage.run('ensure user', upsert)

    def find_user(self, phone):
        """Look the phone up in the database, then in memory. Returns None if neither has it."""
        def lookup(store):
            user = store.find_user(phone)
            if user is None:
                raise NotFoundError('User not found')
            return user

        # Users created during a database outage live only in memory
        try:
            return self.storage.run('find user', lookup, fall_through_on=(NotFoundError,))
        except NotFoundError:
            return None


class SessionIssuer:

    def __init__(self, identity_store, otp_provider):
        self.identity_store = identity_store
        self.otp_provider = otp_provider

    def send_otp(self, phone):
        user = self.identity_store.ensure_user(phone)
        self.otp_provider.send(phone)
        return user

    def issue(self, phone, otp):
        """
        Verify ``otp`` for ``phone`` and return a signed access token.
        Expiry comes from JWT_ACCESS_TOKEN_EXPIRES. Requires an app context.
        """
        if not phone or not otp:
            raise ValidationError('Phone number and OTP are required')
        validate_phone(phone)

        if not self.otp_provider.verify(phone, otp):
            raise InvalidCredentialError('Invalid OTP')

        user = self.identity_store.find_user(phone)
        user_id = user.id if user is not None else UNREGISTERED_USER_ID

        return create_access_token(
            identity=user_id,
            additional_claims={'user': {'id': user_id, 'phone': phone}},
        )
