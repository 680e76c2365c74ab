"""Examples, their execution results, and the current example

An `Example` is a single executable test case. The runner creates it,
`pkpending.pending` mutates its `metadata` and `execution_result`
while it runs, and the runner reads both when it reports.

The current example is scoped with `context`, which binds it in a
`contextvars.ContextVar` so threads and asyncio tasks each see their
own example::

    with example.context(e):
        e.body()

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from pykern.pkcollections import PKDict
import contextlib
import contextvars

#: Example raised an exception (or was pending and passed)
FAILED = "failed"

#: Example was pending (or skipped) and did not fail unexpectedly
PENDING = "pending"

#: Example completed without an exception
PASSED = "passed"

_current = contextvars.ContextVar("pkpending_current_example", default=None)


class Example:
    """A single test case

    Args:
        description (str): what the example tests
        body (callable): called with no args to run the example [None]
        metadata (dict): declarative tags such as ``pending`` or ``skip`` [None]
        location (str): file:line of the definition [None]
    """

    def __init__(self, description, body=None, metadata=None, location=None):
        self.description = description
        self.body = body
        self.location = location
        self.metadata = PKDict(metadata or ())
        self.execution_result = ExecutionResult()

    def is_pending(self):
        return bool(self.metadata.get("pending"))

    def is_skipped(self):
        return bool(self.metadata.get("skip"))

    def __repr__(self):
        return f"Example({self.description!r})"


class ExecutionResult(PKDict):
    """Outcome of one run of an `Example`

    Attributes:
        status (str): `PASSED`, `FAILED` or `PENDING` once finished
        exception (Exception): why the example failed
        pending_exception (Exception): error raised while the example was pending
        pending_message (str): why the example is pending
        pending_fixed (bool): a pending example passed
        started_at (datetime): when the example began
        finished_at (datetime): when the example finished
        run_time (float): seconds between start and finish
    """

    def __init__(self, *args, **kwargs):
        super().__init__(
            status=None,
            exception=None,
            pending_exception=None,
            pending_message=None,
            pending_fixed=None,
            started_at=None,
            finished_at=None,
            run_time=None,
        )
        self.update(*args, **kwargs)


@contextlib.contextmanager
def context(example):
    """Make `example` the current example for the duration

    Nested calls restore the outer example on exit.

    Args:
        example (Example): what `current` returns inside the block

    Yields:
        Example: `example`
    """
    t = _current.set(example)
    try:
        yield example
    finally:
        _current.reset(t)


def current():
    """Example which is executing in this context

    Returns:
        Example: current example or None if not inside `context`
    """
    return _current.get()
