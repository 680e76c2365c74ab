import pytest

pytest_plugins = ["pytester"]


@pytest.fixture(scope="function")
def assertion_error_cfg(monkeypatch):
    """Probe `pkpending.pending._assertion_error` with another config value"""

    def res(value):
        from pkpending import pending
        from pykern.pkcollections import PKDict

        monkeypatch.setattr(pending, "_cfg", PKDict(assertion_error=value))
        return pending._assertion_error()

    return res
