"""Login Scan package"""

from .patterns import VERSION, DEFAULT_THRESHOLD, TOP_N
from .models import AnalysisResult, FailedLoginEvent
from .classifiers import (
    LineClassifier,
    StrictClassifier,
    TolerantClassifier,
    extract_field,
    get_classifier,
    parse_timestamp,
)
from .analyzer import LogAnalyzer
from .output import print_report, render_report
from .logger import setup_logging

__all__ = [
    'VERSION', 'DEFAULT_THRESHOLD', 'TOP_N',
    'AnalysisResult', 'FailedLoginEvent',
    'LineClassifier', 'StrictClassifier', 'TolerantClassifier',
    'extract_field', 'get_classifier', 'parse_timestamp',
    'LogAnalyzer', 'print_report', 'render_report', 'setup_logging',
]
