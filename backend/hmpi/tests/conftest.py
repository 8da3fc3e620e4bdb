import pytest


@pytest.fixture
def scenario_rows():
    """Two-metal rows with a known HPI of 150 for the first sample"""
    return [
        {"id": "S1", "As": 0.02, "Pb": 0.01},
        {"id": "S2", "As": 0.001, "Pb": 0.002},
        {"id": "S3", "As": 0.05, "Pb": 0.03},
    ]


@pytest.fixture
def geolocated_rows():
    """Rows mixing coordinate spellings, ids and blank values"""
    return [
        {"id": "W-01", "latitude": 23.02, "longitude": 72.57, "As": 0.005, "Cd": 0.001, "Fe": 0.2},
        {"lat": 23.10, "lon": 72.61, "As": 0.015, "Cd": 0.004, "Fe": 0.5},
        {"id": "", "lat": "23.2", "lng": "72.7", "As": "", "Cd": "n/a", "Fe": "0.1"},
    ]


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()

    if report.when not in {"call", "setup"}:
        return

    if report.when == "setup" and not report.skipped:
        return

    terminal_reporter = item.config.pluginmanager.getplugin("terminalreporter")
    if terminal_reporter is None:
        return

    if report.passed:
        status = "PASS"
    elif report.failed:
        status = "FAIL"
    else:
        status = "SKIP"

    duration = getattr(report, "duration", 0.0)
    terminal_reporter.write_line(f"[{status}] {item.nodeid} ({duration:.3f}s)")
