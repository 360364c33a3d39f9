"""
One-time password providers.
Real SMS delivery is not wired up; FixedCodeOtpProvider accepts a single
configured code for every phone.
"""

import hmac
import logging

logger = logging.getLogger(__name__)


class OtpProvider:

    def send(self, phone):
        raise NotImplementedError

    def verify(self, phone, code):
        raise NotImplementedError


class FixedCodeOtpProvider(OtpProvider):

    def __init__(self, code):
        self.code = code

    def send(self, phone):
        logger.info("OTP requested for %s (fixed code provider, nothing delivered)", phone)

    def verify(self, phone, code):
        if not isinstance(code, str):
            return False
        return hmac.compare_digest(code.encode('utf-8'), self.code.encode('utf-8'))
