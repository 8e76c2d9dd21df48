import logging
import threading

from bloodportal.errors import ApiError
from bloodportal.models.blood_request_model import BloodRequest, sample_requests
from bloodportal.models.filter_model import FilterState
from bloodportal.services.api_client import REQUESTS_PATH
from bloodportal.utils import utc_now_iso

logger = logging.getLogger(__name__)


def filter_requests(requests, criteria):
    """Keep the requests that satisfy every non-empty criterion.

    `criteria` is a FilterState or a dict with camelCase keys
    (city, bloodType, urgency). The input list is never modified.
    """
    if not isinstance(criteria, FilterState):
        criteria = FilterState.from_dict(criteria or {})
    if criteria.is_empty():
        return list(requests)
    return [r for r in requests if criteria.matches(r)]


class RequestFeedController:
    """Owns the list of active blood requests and keeps it loosely in sync with the backend.

    The list is only changed through this class: a poll replaces it wholesale,
    a submission prepends to it, and a failed poll seeds it with sample data
    when (and only when) it is still empty.

    Overlapping polls are allowed. By default the response that completes
    last wins. With ``discard_stale`` a response whose poll was issued before
    the last applied one is dropped instead.
    """

    def __init__(self, client, discard_stale=False):
        self.client = client
        self.discard_stale = discard_stale
        self.filters = FilterState()
        self.consecutive_failures = 0
        self.last_success_at = None
        self._requests = []
        self._lock = threading.Lock()
        self._issued_seq = 0
        self._applied_seq = 0

    @classmethod
    def from_config(cls, client, config):
        return cls(client, discard_stale=config.get('DISCARD_STALE_POLLS', False))

    @property
    def requests(self):
        with self._lock:
            return list(self._requests)

    # Polling

    def load_requests(self):
        """Fetch the backend's requests and replace the local list.

        Returns True when the response was applied. Errors never escape:
        they are logged and the fallback policy applies.
        """
        seq = self.begin_poll()
        try:
            rows = self.client.fetch_requests()
        except ApiError as e:
            self.fail_poll(seq, e)
            return False
        return self.complete_poll(seq, rows)

    def begin_poll(self):
        with self._lock:
            self._issued_seq += 1
            return self._issued_seq

    def complete_poll(self, seq, rows):
        fetched = [BloodRequest.from_dict(row) for row in rows or []]
        with self._lock:
            if self.discard_stale and seq < self._applied_seq:
                logger.debug('Discarding poll #%s, #%s already applied', seq, self._applied_seq)
                return False
            self._requests = fetched
            self._applied_seq = max(self._applied_seq, seq)
            self.consecutive_failures = 0
            self.last_success_at = utc_now_iso()
        logger.debug('Poll #%s applied: %s active requests', seq, len(fetched))
        return True

    def fail_poll(self, seq, error):
        with self._lock:
            self.consecutive_failures += 1
            failures = self.consecutive_failures
            cached = len(self._requests)
            seeded = not cached
            if seeded:
                self._requests = sample_requests()
        if seeded:
            logger.warning('Could not load requests from %s, using sample (poll #%s): %s',
                           REQUESTS_PATH, seq, error)
        else:
            logger.warning('Could not load requests from %s, keeping %s cached (poll #%s, %s failures in a row): %s',
                           REQUESTS_PATH, cached, seq, failures, error)

    # Submissions

    def create_request(self, payload):
        """Prepend a new request locally, then submit it to the backend.

        The local entry is added before the network call and is never rolled
        back; its ``status`` ends up confirmed or failed. Raises ValueError
        (before touching the list) when the blood type or urgency is invalid.
        """
        blood_request = BloodRequest.from_form(payload)
        blood_request.status = BloodRequest.STATUS_PENDING
        with self._lock:
            self._requests = [blood_request] + self._requests

        try:
            self.client.create_request(blood_request)
        except ApiError as e:
            logger.warning('Blood request for %s not submitted: %s', blood_request.patient_name, e)
            self._set_status(blood_request, BloodRequest.STATUS_FAILED)
            return blood_request

        self._set_status(blood_request, BloodRequest.STATUS_CONFIRMED)
        logger.info('Blood request submitted: %s %s in %s (%s)', blood_request.patient_name,
                    blood_request.blood_type, blood_request.city, blood_request.urgency)
        return blood_request

    def _set_status(self, blood_request, status):
        with self._lock:
            blood_request.status = status

    # Filtering

    def set_filters(self, criteria):
        if not isinstance(criteria, FilterState):
            criteria = FilterState.from_dict(criteria or {})
        with self._lock:
            self.filters = criteria
        return criteria

    def visible_requests(self, criteria=None):
        return filter_requests(self.requests, criteria if criteria is not None else self.filters)

    def poll_status(self):
        with self._lock:
            return {
                'consecutiveFailures': self.consecutive_failures,
                'lastSuccessAt': self.last_success_at,
                'lastAppliedPoll': self._applied_seq,
                'discardStale': self.discard_stale,
            }
