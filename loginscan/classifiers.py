"""Login Scan - Line classification and field extraction"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from .models import FailedLoginEvent
from .patterns import (
    CLASSIFIER_MODES,
    FAILED_LOGIN_PATTERN,
    FAILED_LOGIN_TOKEN,
    IP_KEY,
    USER_KEY,
)

logger = logging.getLogger(__name__)


def extract_field(line: str, key: str) -> Optional[str]:
    """Return the value following the first ``key`` in ``line``.

    The value runs up to the next whitespace character or the end of the
    line and may be empty. No format checks are made on it. Returns None
    only when the key is missing.
    """
    start = line.find(key)
    if start < 0:
        return None
    rest = line[start + len(key):]
    return rest.split(None, 1)[0] if rest and not rest[0].isspace() else ''


def parse_timestamp(token: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp, returning None if it does not parse."""
    if not token:
        return None
    if token.endswith(('Z', 'z')):
        token = token[:-1] + '+00:00'
    try:
        return datetime.fromisoformat(token)
    except ValueError:
        return None


class LineClassifier(ABC):
    """Decides whether a single log line is a failed login"""

    name = ''

    @abstractmethod
    def classify(self, line: str, line_number: int = 0) -> Optional[FailedLoginEvent]:
        """Return the event for ``line`` or None if it is not a failed login."""


class StrictClassifier(LineClassifier):
    """Accepts only ``<timestamp> FAILED_LOGIN user=<user> ip=<ip> ...`` lines"""

    name = 'strict'

    def classify(self, line: str, line_number: int = 0) -> Optional[FailedLoginEvent]:
        match = FAILED_LOGIN_PATTERN.fullmatch(line.rstrip('\r\n'))
        if not match:
            return None

        timestamp = match.group('timestamp')
        occurred_at = parse_timestamp(timestamp)
        if occurred_at is None:
            # Still a failed login, the timestamp format is not enforced
            logger.debug("Line %d: unparsed timestamp %r", line_number, timestamp)

        return FailedLoginEvent(
            user=match.group('user'),
            ip=match.group('ip'),
            timestamp=timestamp,
            occurred_at=occurred_at,
            line_number=line_number,
        )


class TolerantClassifier(LineClassifier):
    """Accepts any line with a FAILED_LOGIN word; user and ip are optional"""

    name = 'tolerant'

    def classify(self, line: str, line_number: int = 0) -> Optional[FailedLoginEvent]:
        line = line.rstrip('\r\n')
        if not FAILED_LOGIN_TOKEN.search(line):
            return None

        event = FailedLoginEvent(
            user=extract_field(line, USER_KEY),
            ip=extract_field(line, IP_KEY),
            line_number=line_number,
        )
        if event.user is None or event.ip is None:
            logger.debug("Line %d: partial event user=%s ip=%s", line_number, event.user, event.ip)
        return event


CLASSIFIERS = {
    StrictClassifier.name: StrictClassifier,
    TolerantClassifier.name: TolerantClassifier,
}


def get_classifier(name: str) -> LineClassifier:
    try:
        return CLASSIFIERS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown mode {name!r}, expected one of: {', '.join(CLASSIFIER_MODES)}"
        ) from None
