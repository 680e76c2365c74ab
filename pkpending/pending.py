"""Mark examples as pending or skipped

`pending` and `skip` are called from within a running example::

    from pkpending.pending import pending, skip

    def test_frobnicate():
        # reported as "Pending: waiting on upstream fix"
        pending("waiting on upstream fix")
        assert frobnicate() == 3

    def test_unfrobnicate():
        # reported as "Pending: No reason given", the assert never runs
        skip()
        assert unfrobnicate() == 3

With `pending`, the rest of the example still runs. If it then
passes, the runner fails the example with `PendingExampleFixedError`
so the marker gets removed. With `skip`, `SkipDeclaredInExample` is
raised and the runner reports the example as skipped.

`mark_pending`, `mark_skipped` and `mark_fixed` are called by the
runner for examples tagged in their metadata.

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from pkpending import example
from pykern import pkconfig
from pykern import pkinspect
from pykern.pkdebug import pkdc, pkdlog
import importlib

#: Message used when `pending` or `skip` is not given one
NO_REASON_GIVEN = "No reason given"

#: Default message for examples without a body
NOT_YET_IMPLEMENTED = "Not yet implemented"

_cfg = pkconfig.init(
    assertion_error=(
        "pykern.pkunit:PKFail",
        str,
        "module:class of the assertion error PendingExampleFixedError extends, empty for Error",
    ),
)


class Error(Exception):
    """Base for errors raised by pkpending"""

    pass


class SkipDeclaredInExample(BaseException):
    """Raised by `skip` to abort the rest of the example

    Not an `Exception` so that ``except Exception`` in the example
    body does not stop the skip.

    Args:
        argument (object): message (or flag) passed to `skip`
    """

    def __init__(self, argument=None):
        super().__init__(argument)
        self.argument = argument


def _assertion_error():
    n = _cfg.assertion_error
    if not n:
        return Error
    m, _, c = n.partition(":")
    try:
        res = getattr(importlib.import_module(m), c)
    except (ImportError, AttributeError) as e:
        pkdlog("assertion_error={} not available, using Error; error={}", n, e)
        return Error
    if not (isinstance(res, type) and issubclass(res, Exception)):
        pkdlog("assertion_error={} is not an Exception, using Error", n)
        return Error
    return res


class PendingExampleFixedError(_assertion_error()):
    """A pending example passed

    Extends the configured assertion error so that the host assertion
    framework reports it as a failure rather than an error.
    """

    pass


def mark_fixed(example):
    """Record that a pending example passed

    Args:
        example (Example): pending example which completed without an exception
    """
    pkdc("fixed example={}", example)
    example.execution_result.pending_fixed = True


def mark_pending(example, message_or_flag):
    """Mark example as pending

    Args:
        example (Example): what to mark
        message_or_flag (object): message (str) or True
    """
    m = reason(message_or_flag)
    pkdc("pending example={} message={}", example, m)
    example.metadata.pending = True
    example.execution_result.pending_message = m
    example.execution_result.pending_fixed = False


def mark_skipped(example, message_or_flag):
    """Mark example as pending and skipped

    Args:
        example (Example): what to mark
        message_or_flag (object): message (str) or True
    """
    mark_pending(example, message_or_flag)
    example.metadata.skip = True


def reason(message_or_flag):
    """Message recorded for `message_or_flag`

    Args:
        message_or_flag (object): message (str), True or None

    Returns:
        str: `message_or_flag` if a non-empty str, else `NO_REASON_GIVEN`
    """
    if isinstance(message_or_flag, str) and message_or_flag:
        return message_or_flag
    return NO_REASON_GIVEN


def pending(message=None, block=None):
    """Mark the current example as pending

    The rest of the example is still executed. If it passes, the
    example fails to indicate that the pending can be removed.

    Args:
        message (str): why the example is pending [`NO_REASON_GIVEN`]
        block (callable): not supported, raises `TypeError`
    """
    if block is not None or callable(message):
        raise TypeError(
            f"""Passing a block to `pending` is no longer supported. `pending`
does not skip the code it is given. The rest of the example is still
run but is expected to fail, and will be marked as a failure (rather
than as pending) if the example passes.

Move the code in the block provided to `pending` into the rest of
the example body.

Called from {pkinspect.caller()}.
""",
        )
    e = example.current()
    if e is None:
        raise RuntimeError(
            "`pending` may not be used outside of examples, such as in a setup hook."
            " Maybe you want `skip`?"
        )
    mark_pending(e, message)


def skip(message=None):
    """Mark the current example as skipped and abort it

    Raises `SkipDeclaredInExample` even when there is no current example.

    Args:
        message (str): why the example is skipped [`NO_REASON_GIVEN`]
    """
    e = example.current()
    if e is not None:
        mark_skipped(e, message)
    raise SkipDeclaredInExample(message)
