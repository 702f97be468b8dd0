"""Login Scan - Data models"""

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from .patterns import TOP_N


@dataclass
class FailedLoginEvent:
    """Failed login parsed from one log line"""
    user: Optional[str]
    ip: Optional[str]
    timestamp: Optional[str] = None
    occurred_at: Optional[datetime] = None
    line_number: int = 0


def _ranked(counts: Mapping[str, int], limit: Optional[int] = None) -> List[Tuple[str, int]]:
    # Highest count first, equal counts ordered by identifier
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return ranked if limit is None else ranked[:max(limit, 0)]


@dataclass(frozen=True)
class AnalysisResult:
    """Counts produced by one scan of a log file.

    The per-user and per-IP maps only hold events where the field was present,
    so their sums can be lower than ``total_failed_logins``.
    """
    total_failed_logins: int = 0
    failed_by_user: Mapping[str, int] = field(default_factory=dict)
    failed_by_ip: Mapping[str, int] = field(default_factory=dict)

    # Read-only views inside, so never hashable
    __hash__ = None

    def __post_init__(self):
        object.__setattr__(self, 'failed_by_user', MappingProxyType(dict(self.failed_by_user)))
        object.__setattr__(self, 'failed_by_ip', MappingProxyType(dict(self.failed_by_ip)))

    @classmethod
    def empty(cls) -> 'AnalysisResult':
        return cls()

    def top_users(self, limit: int = TOP_N) -> List[Tuple[str, int]]:
        return _ranked(self.failed_by_user, limit)

    def top_ips(self, limit: int = TOP_N) -> List[Tuple[str, int]]:
        return _ranked(self.failed_by_ip, limit)

    def alerts(self, threshold: int) -> List[Tuple[str, int]]:
        """Users whose count is at or above ``threshold``."""
        return [(user, count) for user, count in _ranked(self.failed_by_user)
                if count >= threshold]
