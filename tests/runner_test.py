# -*- coding: utf-8 -*-
"""PyTest for :mod:`pkpending.runner`

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""


def test_declared_pending_fails():
    from pkpending import example, runner
    from pykern.pkunit import pkeq

    def _body():
        raise ValueError("broken")

    e = example.Example("x", body=_body, metadata={"pending": "waiting"})
    pkeq(example.PENDING, runner.run(e))
    r = e.execution_result
    pkeq("waiting", r.pending_message)
    pkeq(False, r.pending_fixed)
    pkeq(ValueError, type(r.pending_exception))
    pkeq(None, r.exception)


def test_declared_pending_passes():
    from pkpending import example, pending, runner
    from pykern.pkunit import pkeq, pkok

    e = example.Example("x", body=lambda: None, metadata={"pending": True})
    pkeq(example.FAILED, runner.run(e))
    r = e.execution_result
    pkeq(True, r.pending_fixed)
    pkeq(pending.NO_REASON_GIVEN, r.pending_message)
    pkok(
        isinstance(r.exception, pending.PendingExampleFixedError),
        "exception={} should be PendingExampleFixedError",
        r.exception,
    )
    pkeq(runner.FIXED_MESSAGE, str(r.exception))
    pkeq(None, r.pending_exception)


def test_declared_skip():
    from pkpending import example, runner
    from pykern.pkunit import pkeq

    called = []
    e = example.Example(
        "x",
        body=lambda: called.append(1),
        metadata={"skip": "not ready"},
    )
    pkeq(example.PENDING, runner.run(e))
    pkeq([], called)
    pkeq(True, e.metadata.skip)
    pkeq(True, e.metadata.pending)
    pkeq("not ready", e.execution_result.pending_message)


def test_fails():
    from pkpending import example, runner
    from pykern.pkunit import pkeq

    def _body():
        raise KeyError("xyzzy")

    e = example.Example("x", body=_body)
    pkeq(example.FAILED, runner.run(e))
    pkeq(KeyError, type(e.execution_result.exception))
    pkeq(None, e.execution_result.pending_message)


def test_interrupt():
    from pkpending import example, runner
    from pykern.pkunit import pkexcept

    def _body():
        raise KeyboardInterrupt()

    with pkexcept(KeyboardInterrupt):
        runner.run(example.Example("x", body=_body))


def test_no_body():
    from pkpending import example, pending, runner
    from pykern.pkunit import pkeq

    e = example.Example("x")
    pkeq(example.PENDING, runner.run(e))
    pkeq(True, e.is_skipped())
    pkeq(pending.NOT_YET_IMPLEMENTED, e.execution_result.pending_message)


def test_passes():
    from pkpending import example, runner
    from pykern.pkunit import pkeq, pkok

    def _body():
        pkeq(e, example.current())

    e = example.Example("x", body=_body)
    pkeq(example.PASSED, runner.run(e))
    r = e.execution_result
    pkeq(example.PASSED, r.status)
    pkeq(None, r.exception)
    pkeq(None, r.pending_message)
    pkeq(None, r.pending_fixed)
    pkok(
        r.started_at <= r.finished_at,
        "started_at={} finished_at={}",
        r.started_at,
        r.finished_at,
    )
    pkok(r.run_time >= 0, "run_time={}", r.run_time)


def test_pending_in_body_fails():
    from pkpending import example, pending, runner
    from pykern.pkunit import pkeq

    reached = []

    def _body():
        pending.pending("fix later")
        reached.append(1)
        raise RuntimeError("generic error")

    e = example.Example("x", body=_body)
    pkeq(example.PENDING, runner.run(e))
    pkeq([1], reached)
    r = e.execution_result
    pkeq("fix later", r.pending_message)
    pkeq(False, r.pending_fixed)
    pkeq(None, r.exception)
    pkeq(RuntimeError, type(r.pending_exception))


def test_pending_in_body_passes():
    from pkpending import example, pending, runner
    from pykern.pkunit import pkeq

    e = example.Example("x", body=lambda: pending.pending("fix later"))
    pkeq(example.FAILED, runner.run(e))
    pkeq(True, e.execution_result.pending_fixed)
    pkeq("fix later", e.execution_result.pending_message)


def test_skip_in_body():
    from pkpending import example, pending, runner
    from pykern.pkunit import pkeq

    reached = []

    def _body():
        try:
            pending.skip("not ready")
        except Exception:
            reached.append("except")
        reached.append("after")

    e = example.Example("x", body=_body)
    pkeq(example.PENDING, runner.run(e))
    pkeq([], reached)
    pkeq(True, e.metadata.skip)
    pkeq("not ready", e.execution_result.pending_message)
    pkeq(None, e.execution_result.exception)


def test_skip_after_pending():
    from pkpending import example, pending, runner
    from pykern.pkunit import pkeq

    def _body():
        pending.pending("fix later")
        pending.skip("not ready")

    e = example.Example("x", body=_body)
    pkeq(example.PENDING, runner.run(e))
    pkeq(True, e.is_skipped())
    pkeq("not ready", e.execution_result.pending_message)
    pkeq(False, e.execution_result.pending_fixed)
