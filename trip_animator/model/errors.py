"""Errors raised by the trip animator core.

Only two things can go wrong once the app is running:
- MalformedTripError: a raw trip record cannot become a Trip (load time)
- UnknownTripError: a toggle names a trip the catalog does not contain

Everything else (ticks, projection) is total over validated state.
"""


class TripAnimatorError(Exception):
    """Base class for trip animator errors."""


class MalformedTripError(TripAnimatorError, ValueError):
    """A raw trip record is missing its name or coordinates, or is inconsistent."""

    def __init__(self, reason: str, index: int | None = None, name: str | None = None) -> None:
        self.reason = reason
        self.index = index
        self.name = name
        where = []
        if index is not None:
            where.append(f"record {index}")
        if name:
            where.append(f"'{name}'")
        prefix = f"{' '.join(where)}: " if where else ""
        super().__init__(f"Malformed trip {prefix}{reason}")


class UnknownTripError(TripAnimatorError, KeyError):
    """A trip name is not present in the catalog."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown trip '{self.name}'"
