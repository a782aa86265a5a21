"""Errors surfaced by the compliance layer."""


class ComplianceInputError(TypeError):
    """A collection argument was not a list.

    Callers own validation of their data-fetch results; this is the one
    condition the compliance layer reports instead of degrading.
    """


def ensure_sequence(value: object, name: str) -> list:
    """Return ``value`` as a list; None means empty."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    raise ComplianceInputError(
        f"{name} must be a list, got {type(value).__name__}"
    )
