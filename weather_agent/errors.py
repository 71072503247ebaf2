# errors.py
"""
Error kinds carried by Err results.

The set is closed: Validation, NotFound, Infrastructure, UpstreamAPI.
Each is a plain record; the `kind` tag is what callers see on the wire.
"""
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, Union


@dataclass(frozen=True)
class Validation:
    """Bad or missing input; the caller can fix it."""
    message: str
    field: Optional[str] = None
    kind: ClassVar[str] = "validation"


@dataclass(frozen=True)
class NotFound:
    """Input was well-formed but the thing it names does not exist."""
    resource: str
    id: Optional[str] = None
    message: str = ""
    kind: ClassVar[str] = "not-found"

    def __post_init__(self):
        if not self.message:
            text = f"{self.resource} '{self.id}' not found" if self.id else f"{self.resource} not found"
            object.__setattr__(self, "message", text)


@dataclass(frozen=True)
class Infrastructure:
    """A collaborator was unreachable or returned data we could not read."""
    message: str
    # diagnostic only, never rendered to callers
    cause: Any = field(default=None, compare=False, repr=False)
    kind: ClassVar[str] = "infrastructure"


@dataclass(frozen=True)
class UpstreamAPI:
    """A collaborator answered but reported an application-level failure."""
    message: str
    status_code: Optional[int] = None
    kind: ClassVar[str] = "upstream-api"


AppError = Union[Validation, NotFound, Infrastructure, UpstreamAPI]


def validation(message: str, field: Optional[str] = None) -> Validation:
    return Validation(message=message, field=field)


def not_found(resource: str, id: Optional[str] = None) -> NotFound:
    return NotFound(resource=resource, id=id)


def infrastructure(message: str, cause: Any = None) -> Infrastructure:
    return Infrastructure(message=message, cause=cause)


def upstream_api(message: str, status_code: Optional[int] = None) -> UpstreamAPI:
    return UpstreamAPI(message=message, status_code=status_code)
