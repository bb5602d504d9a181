"""Pause a computation and hand back a one-shot capability to continue it.

A SuspensionScope runs one zero-argument driver. Inside the driver,
scope.suspend(*values) pauses right there and makes the values available to
whoever called establish() or resume(). Both of those return a tagged
outcome:

   Returned(value)                  the driver ran to completion
   Suspended(values, resume_point)  the driver called suspend(*values)

Feeding the resume point back into scope.resume(point, *args) continues the
driver from the paused suspend() call, which then returns args. A resume point
works exactly once.

The base class keeps the resume point bookkeeping. Subclasses supply the host
facility that actually parks the driver: a worker thread blocked on a queue
(threaded.ThreadScope) or a greenlet (greenlets.GreenletScope).
"""

from typing import Any, Callable, Optional, Tuple
import collections
import logging

from resumable_generators.errors import NoActiveSuspensionScope, StaleResumePoint

log = logging.getLogger(__name__)

Returned = collections.namedtuple("Returned", ["value"])
Suspended = collections.namedtuple("Suspended", ["values", "resume_point"])


def collapse(values: Tuple) -> Any:
    """Turn a tuple of values into the single object a Python call returns.

    No values become None, one value is returned bare, and anything longer
    stays a tuple.
    """
    if not values:
        return None
    if len(values) == 1:
        return values[0]
    return tuple(values)


class ResumePoint:
    __slots__ = ("scope",)

    def __init__(self, scope: "SuspensionScope"):
        self.scope = scope

    def __repr__(self):
        return "<ResumePoint of %r>" % (self.scope,)


class SuspensionScope:
    name = "abstract"

    def __init__(self):
        self._established = False
        self._finished = False
        self._live_point: Optional[ResumePoint] = None

    def __repr__(self):
        return "<%s at %#x>" % (type(self).__name__, id(self))

    @property
    def finished(self) -> bool:
        return self._finished

    def establish(self, driver: Callable[[], Any]):
        if self._established:
            raise RuntimeError("%r was already established" % self)
        self._established = True
        log.debug("establish %r", self)
        return self._start(driver)

    def suspend(self, *values):
        if not self._in_body():
            raise NoActiveSuspensionScope(
                "suspend() called outside the body running under %r" % self
            )
        point = ResumePoint(self)
        self._live_point = point
        log.debug("suspend %r with %d value(s)", self, len(values))
        return collapse(self._pause(Suspended(values, point)))

    def resume(self, point: ResumePoint, *values):
        self.check_driver()
        self._consume(point)
        log.debug("resume %r with %d value(s)", self, len(values))
        return self._continue(values)

    def close(self, point: ResumePoint) -> None:
        """Raise GeneratorExit at the suspension point and wait for the unwind.

        Raises RuntimeError when the driver swallows GeneratorExit and
        suspends again, the way Python's own generators refuse to be ignored.
        """
        self.check_driver()
        self._consume(point)
        log.debug("close %r", self)
        outcome = self._interrupt()
        if isinstance(outcome, Suspended):
            self._live_point = None
            raise RuntimeError("body of %r ignored GeneratorExit" % self)

    def check_driver(self) -> None:
        """Raise if the calling thread cannot resume this scope.

        Runs before a resume point is consumed, so a refused call leaves the
        scope as it was.
        """

    def _consume(self, point: ResumePoint) -> None:
        if point.scope is not self:
            raise StaleResumePoint("%r was not created by %r" % (point, self))
        if self._finished or point is not self._live_point:
            raise StaleResumePoint("%r was already used" % (point,))
        self._live_point = None

    # Host facility. _start and _continue return the next outcome and re-raise
    # whatever escapes the driver. _pause runs on the driver's side and returns
    # the tuple of resume values, or raises GeneratorExit when closed.

    def _start(self, driver):
        raise NotImplementedError

    def _in_body(self) -> bool:
        raise NotImplementedError

    def _pause(self, outcome: Suspended) -> Tuple:
        raise NotImplementedError

    def _continue(self, values: Tuple):
        raise NotImplementedError

    def _interrupt(self):
        raise NotImplementedError
