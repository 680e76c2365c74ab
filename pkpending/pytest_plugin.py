"""PyTest plugin to run tests as pkpending examples

Registered with the ``pytest11`` entry point. Every test function
runs as the current `pkpending.example.Example`, so it may call
`pkpending.pending.pending` and `pkpending.pending.skip`. A test can
also be declared pending with a marker::

    @pytest.mark.pending("waiting on upstream fix")
    def test_frobnicate():
        ...

Outcomes are mapped to pytest's: a skipped test is skipped, a pending
test which fails is xfailed, and a pending test which passes fails
with `pkpending.pending.PendingExampleFixedError`.

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

import pytest

# Do not import pykern or pkpending.pending here

#: Name of marker which declares a test pending
MARKER = "pending"


def pytest_configure(config):
    """Register `MARKER`"""
    config.addinivalue_line(
        "markers",
        f"{MARKER}(reason=None): test is expected to fail and fails if it passes",
    )


@pytest.hookimpl(wrapper=True)
def pytest_fixture_setup(fixturedef, request):
    """Report `pkpending.pending.skip` in a fixture as a skipped test

    Args:
        fixturedef (FixtureDef): fixture being set up
        request (FixtureRequest): requesting context

    Returns:
        object: fixture value
    """
    from pkpending import pending

    try:
        return (yield)
    except pending.SkipDeclaredInExample as e:
        pytest.skip(pending.reason(e.argument))


@pytest.hookimpl(wrapper=True)
def pytest_pyfunc_call(pyfuncitem):
    """Run the test function inside its example

    Args:
        pyfuncitem (Function): pytest test item (case)

    Returns:
        object: result of the inner hooks when the test passes
    """
    from pkpending import example, pending, runner

    e = _example(pyfuncitem)
    runner.start(e)
    res = None
    x = None
    with example.context(e):
        try:
            res = yield
            runner.check_fixed(e)
        except pending.SkipDeclaredInExample:
            pass
        except Exception as err:
            x = err
    _report(e, runner.finish(e, x))
    return res


def _example(item):
    from pkpending import example
    from pykern.pkcollections import PKDict

    m = item.get_closest_marker(MARKER)
    return example.Example(
        item.nodeid,
        metadata=None if m is None else PKDict(pending=_marker_reason(m)),
        location="{}:{}".format(item.location[0], item.location[1] + 1),
    )


def _marker_reason(marker):
    if marker.args:
        return marker.args[0]
    return marker.kwargs.get("reason", True)


def _report(ex, status):
    """Raise the pytest outcome for `status`

    Args:
        ex (Example): finished example
        status (str): from `runner.finish`
    """
    from pkpending import example

    r = ex.execution_result
    if status == example.FAILED:
        raise r.exception
    if status == example.PENDING:
        if ex.is_skipped():
            pytest.skip(r.pending_message)
        pytest.xfail(r.pending_message)
