"""Suspension scope backed by a greenlet.

The driver runs in its own greenlet. suspend() switches to the greenlet that
resumed it last, and resume() switches back in. Greenlets cannot switch across
threads, so a GreenletScope must be driven from the thread that established it.
"""

import functools
import threading

import greenlet

from resumable_generators.suspension import Returned, SuspensionScope


class GreenletScope(SuspensionScope):
    name = "greenlet"

    def __init__(self):
        super().__init__()
        self._glet = None
        self._thread_id = None

    def check_driver(self):
        if self._thread_id is not None and threading.get_ident() != self._thread_id:
            raise greenlet.error("%r was established on another thread" % self)

    def _start(self, driver):
        self._thread_id = threading.get_ident()
        self._glet = greenlet.greenlet(functools.partial(self._run, driver))
        return self._glet.switch()

    def _run(self, driver):
        try:
            return Returned(driver())
        finally:
            self._finished = True

    def _in_body(self):
        return (
            not self._finished
            and self._glet is not None
            and greenlet.getcurrent() is self._glet
        )

    def _pause(self, outcome):
        return self._glet.parent.switch(outcome)

    def _continue(self, values):
        self._glet.parent = greenlet.getcurrent()
        return self._glet.switch(values)

    def _interrupt(self):
        self._glet.parent = greenlet.getcurrent()
        try:
            return self._glet.throw(GeneratorExit)
        except GeneratorExit:
            return Returned(None)
