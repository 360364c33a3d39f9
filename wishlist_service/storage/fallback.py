"""
Storage fallback coordinator.

Runs an action against the durable store when it is available, and against
the in-memory store when it is not or when the durable call fails. The two
stores are never reconciled, so data written during an outage stays in memory
only and is lost on restart.
"""

import logging
from wishlist_service.errors import StorageUnavailableError

logger = logging.getLogger(__name__)


class StorageFallback:

    def __init__(self, durable, ephemeral):
        self.durable = durable
        self.ephemeral = ephemeral

    @property
    def mode(self):
        return self.durable.name if self.durable.is_available() else self.ephemeral.name

    def run(self, operation, action, fall_through_on=()):
        """
        Call ``action(store)`` on the durable store, then on the in-memory one.

        ``operation`` names the call in log lines. Exceptions listed in
        ``fall_through_on`` raised by the durable action also send the call to
        the in-memory store; any other domain error propagates unchanged.
        """
        if self.durable.is_available():
            try:
                return action(self.durable)
            except StorageUnavailableError as e:
                logger.warning("Database operation failed during %s: %s", operation, e)
            except fall_through_on as e:
                logger.debug("%s fell through to memory store: %s", operation, e)
        return action(self.ephemeral)
