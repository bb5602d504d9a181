"""Generators written as ordinary sequential functions.

A generator definition is a function that receives a private yield capability
and returns the body:

   def counter(yield_):
       def body(start=0):
           i = start
           while True:
               yield_(i)
               i += 1
       return body

   gen = construct(counter)
   gen()    # -> 0, runs body(), stops at the first yield_
   gen()    # -> 1

The first invoke's arguments are the body's call arguments. Every later
invoke's arguments become the result of the yield_ call the body is paused in.
When the body returns, that invoke returns the body's return value and the
generator is done.
"""

from typing import Any, Callable, Optional, Type, Union
import enum
import logging
import os

from resumable_generators.errors import GeneratorExhausted
from resumable_generators.greenlets import GreenletScope
from resumable_generators.suspension import (
    ResumePoint,
    Suspended,
    SuspensionScope,
    collapse,
)
from resumable_generators.threaded import ThreadScope

log = logging.getLogger(__name__)

BACKENDS = {
    ThreadScope.name: ThreadScope,
    GreenletScope.name: GreenletScope,
}

BACKEND_ENV_VAR = "RESUMABLE_GENERATORS_BACKEND"
DEFAULT_BACKEND = "thread"

GeneratorDefinition = Callable[[Callable[..., Any]], Callable[..., Any]]


class GeneratorState(enum.Enum):
    READY = "ready"
    SUSPENDED = "suspended"
    DONE = "done"


def resolve_backend(
    backend: Union[None, str, Type[SuspensionScope]] = None
) -> Type[SuspensionScope]:
    """Map a backend name (or None for the configured default) to a scope class."""
    if backend is None:
        backend = os.environ.get(BACKEND_ENV_VAR, DEFAULT_BACKEND)
    if isinstance(backend, type) and issubclass(backend, SuspensionScope):
        return backend
    try:
        return BACKENDS[backend]
    except KeyError:
        raise ValueError(
            "Unknown generator backend %r, expected one of %s"
            % (backend, ", ".join(sorted(BACKENDS)))
        ) from None


class Generator:
    """One resumable run of a generator body.

    Not safe to invoke from several threads at once.
    """

    def __init__(self, definition: GeneratorDefinition, backend=None):
        self._scope: SuspensionScope = resolve_backend(backend)()
        self._resume_point: Optional[ResumePoint] = None
        self.state = GeneratorState.READY
        self._running = False
        self.body = definition(self._scope.suspend)

    def __repr__(self):
        return "<Generator %s backend=%s>" % (self.state.name, self._scope.name)

    def invoke(self, *args, **kwargs):
        """Run the body up to its next yield, or to its end.

        The first invoke calls the body with args and kwargs. Every later
        invoke resumes the body at the yield_ call it is paused in, and args
        become that call's result. Returns the yielded values, or the body's
        return value once it finishes. An exception raised by the body
        propagates from here and finishes the generator.

        Raises ValueError when called from inside the body while it is
        running, and GeneratorExhausted once the generator is done.
        """
        if self._running:
            raise ValueError("generator already executing")

        if self.state is GeneratorState.DONE:
            raise GeneratorExhausted("%r has already finished" % self)

        if self.state is GeneratorState.SUSPENDED:
            if kwargs:
                raise TypeError(
                    "a suspended generator accepts positional values only"
                )
            self._scope.check_driver()

        self._running = True
        try:
            if self.state is GeneratorState.READY:
                body = self.body
                outcome = self._scope.establish(lambda: body(*args, **kwargs))
            else:
                point, self._resume_point = self._resume_point, None
                outcome = self._scope.resume(point, *args)
        except BaseException:
            # The body cannot be re-entered after an uncaught error.
            self._finish()
            raise
        finally:
            self._running = False

        if isinstance(outcome, Suspended):
            self._resume_point = outcome.resume_point
            self.state = GeneratorState.SUSPENDED
            return collapse(outcome.values)

        self._finish()
        return outcome.value

    __call__ = invoke

    def close(self) -> None:
        """Finish the generator, unwinding a suspended body first.

        The body sees GeneratorExit raised from its pending yield, so its
        finally blocks and context managers run.
        """
        if self._running:
            raise ValueError("generator already executing")

        if self.state is GeneratorState.SUSPENDED:
            self._scope.check_driver()
            point, self._resume_point = self._resume_point, None
            self._running = True
            try:
                self._scope.close(point)
            finally:
                self._running = False
                self._finish()
        else:
            self._finish()

    def _finish(self):
        if self.state is not GeneratorState.DONE:
            log.debug("%r finished", self)
        self._resume_point = None
        self.state = GeneratorState.DONE

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def __iter__(self):
        return self

    def __next__(self):
        try:
            return self.invoke()
        except GeneratorExhausted:
            raise StopIteration from None


def construct(definition: GeneratorDefinition, backend=None) -> Generator:
    """Wrap a generator definition. No body code runs until the first invoke."""
    return Generator(definition, backend=backend)


def invoke(generator: Generator, *args, **kwargs):
    """Same as generator.invoke(*args, **kwargs)."""
    return generator.invoke(*args, **kwargs)
