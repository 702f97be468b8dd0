"""Login Scan - Report output"""

from typing import List, Optional

from rich.console import Console

from .models import AnalysisResult
from .patterns import TOP_N


def render_report(result: AnalysisResult, threshold: int, file_label: str,
                  limit: int = TOP_N) -> List[str]:
    lines = [
        "=== Security Log Analyzer Summary ===",
        f"File: {file_label}",
        f"Total failed login events: {result.total_failed_logins}",
        "",
        "Top users by failed logins:",
    ]
    lines.extend(f"  {user}: {count}" for user, count in result.top_users(limit))

    lines.append("")
    lines.append("Top IPs by failed logins:")
    lines.extend(f"  {ip}: {count}" for ip, count in result.top_ips(limit))

    lines.append("")
    lines.append(f"Alerts (threshold >= {threshold}):")
    alerts = result.alerts(threshold)
    for user, count in alerts:
        lines.append(f"  ALERT: user {user} has {count} failed logins")
    if not alerts:
        lines.append("  (none)")

    return lines


def print_report(result: AnalysisResult, threshold: int, file_label: str,
                 console: Optional[Console] = None):
    console = console or Console(highlight=False)
    for line in render_report(result, threshold, file_label):
        # User and IP values are raw log text, never rich markup
        console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)
