"""Public API for resumable generators.

Build a generator from a definition that receives a private yield capability,

   gen = construct(lambda yield_: lambda: [yield_(i) for i in range(3)])

or write the body directly with the resumable() decorator:

   @resumable
   def countdown(yield_, n):
       while n > 0:
           n = yield_(n) or n - 1
       return "liftoff"

   gen = countdown()
   gen(3)   # -> 3
   gen()    # -> 2
"""

import functools

from resumable_generators.errors import (
    GeneratorExhausted,
    NoActiveSuspensionScope,
    ResumableError,
    StaleResumePoint,
)
from resumable_generators.generator import (
    BACKENDS,
    Generator,
    GeneratorState,
    construct,
    invoke,
)
from resumable_generators.suspension import Returned, Suspended, SuspensionScope

__all__ = [
    "BACKENDS",
    "Generator",
    "GeneratorExhausted",
    "GeneratorState",
    "NoActiveSuspensionScope",
    "ResumableError",
    "Returned",
    "StaleResumePoint",
    "Suspended",
    "SuspensionScope",
    "construct",
    "invoke",
    "resumable",
]


def resumable(func=None, *, backend=None):
    """Turn func(yield_, *args) into a factory of independent generators.

    Every call of the factory constructs one new generator whose yield
    capability is passed as func's first argument. The arguments of the
    generator's first invoke fill in the rest.
    """
    if func is None:
        return functools.partial(resumable, backend=backend)

    @functools.wraps(func)
    def factory():
        return construct(
            lambda yield_: functools.partial(func, yield_), backend=backend
        )

    return factory
