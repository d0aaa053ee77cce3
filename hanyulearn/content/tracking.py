"""
ProgressReporter - Fire-and-forget delivery of progress events.

Failures are logged and dropped: no retry, no local queue.
"""

import logging

from hanyulearn.schemas import ProgressEvent

from .client import ApiError, HanyuApiClient


logger = logging.getLogger(__name__)


class ProgressReporter:
    def __init__(self, client: HanyuApiClient):
        self.client = client

    def report(self, event: ProgressEvent) -> bool:
        """
        Send one event to the tracking endpoint.

        Returns True if the backend accepted it. Never raises for I/O errors.
        """
        token = self.client.token_store.get()
        if not token:
            logger.debug(f"No access token, not tracking {event.item_type.value} {event.item_id}")
            return False

        logger.info(f"Tracking progress: {event.to_payload()}")
        try:
            self.client.track_progress(event, token)
        except ApiError as e:
            logger.error(f"Error tracking progress: {e} (detail: {e.detail})")
            return False
        logger.debug("Progress tracked successfully")
        return True
