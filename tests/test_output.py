import io

from rich.console import Console

from loginscan import AnalysisResult, print_report, render_report


def make_result():
    return AnalysisResult(
        total_failed_logins=9,
        failed_by_user={"alice": 5, "bob": 3, "[red]eve[/red]": 1},
        failed_by_ip={"203.0.113.9": 6, "198.51.100.7": 3},
    )


def test_render_report_layout():
    lines = render_report(make_result(), 5, "auth.log")
    assert lines == [
        "=== Security Log Analyzer Summary ===",
        "File: auth.log",
        "Total failed login events: 9",
        "",
        "Top users by failed logins:",
        "  alice: 5",
        "  bob: 3",
        "  [red]eve[/red]: 1",
        "",
        "Top IPs by failed logins:",
        "  203.0.113.9: 6",
        "  198.51.100.7: 3",
        "",
        "Alerts (threshold >= 5):",
        "  ALERT: user alice has 5 failed logins",
    ]


def test_threshold_is_inclusive():
    result = AnalysisResult(total_failed_logins=5, failed_by_user={"alice": 5})
    assert render_report(result, 5, "f")[-1] == "  ALERT: user alice has 5 failed logins"
    assert render_report(result, 6, "f")[-1] == "  (none)"


def test_empty_result_reports_no_alerts():
    lines = render_report(AnalysisResult.empty(), 5, "empty.log")
    assert "Total failed login events: 0" in lines
    assert lines[-2:] == ["Alerts (threshold >= 5):", "  (none)"]


def test_top_lists_capped_at_ten_with_name_tiebreak():
    users = {f"user{i:02d}": 1 for i in range(15)}
    users["zed"] = 4
    result = AnalysisResult(total_failed_logins=19, failed_by_user=users)
    top = result.top_users()
    assert len(top) == 10
    assert top[0] == ("zed", 4)
    assert [name for name, _ in top[1:]] == [f"user{i:02d}" for i in range(9)]
    counts = [count for _, count in top]
    assert counts == sorted(counts, reverse=True)


def test_alerts_ranked_like_top_users():
    result = AnalysisResult(
        total_failed_logins=20,
        failed_by_user={"carol": 6, "alice": 6, "bob": 8},
    )
    assert result.alerts(6) == [("bob", 8), ("alice", 6), ("carol", 6)]


def test_print_report_writes_plain_text():
    buffer = io.StringIO()
    console = Console(file=buffer, width=20)
    print_report(make_result(), 5, "/var/log/a-rather-long-path/auth.log", console)
    output = buffer.getvalue()
    assert "\x1b[" not in output
    assert "File: /var/log/a-rather-long-path/auth.log\n" in output
    assert "  [red]eve[/red]: 1\n" in output
    assert output.endswith("  ALERT: user alice has 5 failed logins\n")


def test_empty_user_is_listed():
    result = AnalysisResult(total_failed_logins=1, failed_by_user={"": 1})
    assert "  : 1" in render_report(result, 5, "f")


def test_render_report_keeps_raw_identifiers():
    result = AnalysisResult(total_failed_logins=1, failed_by_user={"bell\x07": 1})
    assert "  bell\x07: 1" in render_report(result, 5, "f")
