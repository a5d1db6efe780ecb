"""Error taxonomy of the screening engine."""


class ScreeningError(Exception):
    """Base class for errors raised to callers of the screening engine."""


class InvalidInputError(ScreeningError, ValueError):
    """The ad copy is not a string, is empty, or exceeds the configured maximum length."""


class RuleTableLoadError(ScreeningError):
    """A rule or product definition is malformed. Raised before any table becomes usable."""


class PatternEvaluationWarning(UserWarning):
    """A single rule could not be evaluated against a text and was skipped.

    Never raised to callers; the matcher logs it and moves on to the next rule.
    """
