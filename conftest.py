import pytest


@pytest.fixture(autouse=True)
def clean_calc_env(monkeypatch):
    # Settings come from the environment; keep the developer's shell out of tests.
    for var in ("CALC_LOG_LEVEL", "CALC_PROMPT", "CALC_FLOAT_FORMAT"):
        monkeypatch.delenv(var, raising=False)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when == "call":
        print(f"TEST: {item.name} - {'PASSED' if report.passed else 'FAILED'}")
