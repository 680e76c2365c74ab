"""Run examples, honoring pending and skip

`run` is the whole protocol. Runners which execute the body
themselves (see `pkpending.pytest_plugin`) call `start`,
`check_fixed` and `finish` around it.

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from pkpending import example
from pkpending import pending
from pykern.pkdebug import pkdc, pkdexc, pkdlog
import datetime

#: Message of `pending.PendingExampleFixedError`
FIXED_MESSAGE = "Expected example to fail since it is pending, but it passed."


def check_fixed(ex):
    """Fail `ex` if it is pending, because its body just passed

    Args:
        ex (Example): example whose body completed without an exception
    """
    if not ex.is_pending():
        return
    pending.mark_fixed(ex)
    pkdlog(
        "example={} pending_message={} passed",
        ex,
        ex.execution_result.pending_message,
    )
    raise pending.PendingExampleFixedError(FIXED_MESSAGE)


def finish(ex, exc=None):
    """Compute final status of `ex`

    An exception from a pending example is saved in
    ``pending_exception`` and does not fail the example, except for
    `pending.PendingExampleFixedError`.

    Args:
        ex (Example): example which has run
        exc (Exception): raised by the body or `check_fixed` [None]

    Returns:
        str: `example.FAILED`, `example.PENDING` or `example.PASSED`
    """
    r = ex.execution_result
    if (
        exc is not None
        and ex.is_pending()
        and not isinstance(exc, pending.PendingExampleFixedError)
    ):
        r.pending_exception = exc
        exc = None
    if exc is not None:
        r.exception = exc
        r.status = example.FAILED
    elif r.pending_message is not None:
        r.status = example.PENDING
    else:
        r.status = example.PASSED
    r.finished_at = _now()
    r.run_time = (r.finished_at - r.started_at).total_seconds()
    pkdc("example={} status={} run_time={}", ex, r.status, r.run_time)
    return r.status


def run(ex):
    """Execute `ex` and record its result

    Args:
        ex (Example): skipped with `pending.NOT_YET_IMPLEMENTED` if it has no body

    Returns:
        str: status of `ex`
    """
    if ex.body is None and not ex.is_skipped():
        ex.metadata.skip = pending.NOT_YET_IMPLEMENTED
    if not start(ex):
        return finish(ex)
    e = None
    with example.context(ex):
        try:
            ex.body()
            check_fixed(ex)
        except pending.SkipDeclaredInExample:
            pass
        except Exception as x:
            pkdc("example={} exception={} stack={}", ex, x, pkdexc())
            e = x
    return finish(ex, e)


def start(ex):
    """Begin `ex`, applying metadata declared pending or skip

    Args:
        ex (Example): about to run

    Returns:
        bool: True if the body should be run
    """
    ex.execution_result.started_at = _now()
    if ex.is_skipped():
        pending.mark_skipped(ex, ex.metadata.skip)
        return False
    if ex.is_pending():
        pending.mark_pending(ex, ex.metadata.pending)
    return True


def _now():
    return datetime.datetime.now(datetime.timezone.utc)
