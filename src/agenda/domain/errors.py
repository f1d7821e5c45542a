"""Fatal errors. Business outcomes (bad fields, missing records) are results, not exceptions."""


class CounterOverflowError(RuntimeError):
    """The identifier counter for an entity kind has no values left."""


class MissingCallerError(ValueError):
    """A caller-keyed agenda was asked to create a record without a caller identity."""
