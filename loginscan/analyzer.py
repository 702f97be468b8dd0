"""Login Scan - Core analysis engine"""

import logging
from collections import Counter
from pathlib import Path
from typing import Iterable, Optional, Union

from .classifiers import LineClassifier, StrictClassifier
from .models import AnalysisResult

logger = logging.getLogger(__name__)


class LogAnalyzer:
    """Counts failed logins per user and per IP in a single pass"""

    def __init__(self, classifier: Optional[LineClassifier] = None):
        self.classifier = classifier or StrictClassifier()

    def analyze_lines(self, lines: Iterable[str]) -> AnalysisResult:
        total = 0
        by_user: Counter = Counter()
        by_ip: Counter = Counter()

        for line_num, line in enumerate(lines, 1):
            event = self.classifier.classify(line, line_num)
            if event is None:
                continue

            total += 1
            if event.user is not None:
                by_user[event.user] += 1
            if event.ip is not None:
                by_ip[event.ip] += 1

        return AnalysisResult(
            total_failed_logins=total,
            failed_by_user=by_user,
            failed_by_ip=by_ip,
        )

    def analyze_file(self, filepath: Union[str, Path]) -> AnalysisResult:
        path = Path(filepath)
        logger.debug("Scanning %s with %s classifier", path, self.classifier.name)

        with open(path, 'r', encoding='utf-8') as f:
            result = self.analyze_lines(f)

        logger.info(
            "Scanned %s: %d failed logins, %d users, %d IPs",
            path, result.total_failed_logins,
            len(result.failed_by_user), len(result.failed_by_ip),
        )
        return result
