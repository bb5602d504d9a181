"""Exceptions raised by the generator and its suspension scopes."""


class ResumableError(RuntimeError):
    pass


class GeneratorExhausted(ResumableError):
    """The generator already finished. Invoking it again runs nothing."""


class NoActiveSuspensionScope(ResumableError):
    """A yield capability was called outside the body it belongs to.

    This happens when the capability escapes its generator: it is called
    before the first invoke, after the body finished, or from the code that
    drives the generator rather than from the body itself.
    """


class StaleResumePoint(ResumableError):
    """A resume point was used twice, or by a scope that did not create it."""
