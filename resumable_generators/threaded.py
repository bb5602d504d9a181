"""Suspension scope backed by a worker thread parked on a pair of queues.

The driver runs on its own thread. suspend() puts the outcome on one queue
and blocks on the other; the driving side does the reverse. Each queue holds
at most one message, so exactly one of the two threads runs at any time.
"""

import collections
import queue
import threading

from resumable_generators.suspension import Returned, Suspended, SuspensionScope

# Carries an exception from the worker thread to the driving side.
_Raised = collections.namedtuple("_Raised", ["exception"])

_CLOSE = object()


class ThreadScope(SuspensionScope):
    name = "thread"

    def __init__(self):
        super().__init__()
        self._to_body = queue.Queue(maxsize=1)
        self._to_driver = queue.Queue(maxsize=1)
        self._worker = None

    def _start(self, driver):
        self._worker = threading.Thread(
            target=self._run,
            args=(driver,),
            name="resumable-%#x" % id(self),
            daemon=True,
        )
        self._worker.start()
        return self._receive()

    def _run(self, driver):
        try:
            outcome = Returned(driver())
        except BaseException as e:
            # Re-raised on the driving side by _receive().
            outcome = _Raised(e)
        self._finished = True
        self._to_driver.put(outcome)

    def _in_body(self):
        return not self._finished and threading.current_thread() is self._worker

    def _pause(self, outcome):
        self._to_driver.put(outcome)
        values = self._to_body.get()
        if values is _CLOSE:
            raise GeneratorExit
        return values

    def _continue(self, values):
        self._to_body.put(values)
        return self._receive()

    def _interrupt(self):
        self._to_body.put(_CLOSE)
        try:
            return self._receive()
        except GeneratorExit:
            return Returned(None)

    def _receive(self):
        outcome = self._to_driver.get()
        if isinstance(outcome, Suspended):
            return outcome

        # The driver is done, so the worker is about to exit.
        self._worker.join()
        if isinstance(outcome, _Raised):
            raise outcome.exception
        return outcome
