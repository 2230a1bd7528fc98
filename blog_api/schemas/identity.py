from dataclasses import dataclass


@dataclass(frozen=True)
class AutoAssignedId:
    """The database picks the primary key."""


@dataclass(frozen=True)
class ExplicitId:
    """The client asked for a specific primary key."""

    value: int


def identity_from(value):
    if value is None:
        return AutoAssignedId()
    return ExplicitId(value)


def assign_identity(row, identity):
    if isinstance(identity, ExplicitId):
        row.id = identity.value
    return row
