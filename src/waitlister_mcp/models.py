"""Input models for the Waitlister tools.

Each tool validates its arguments through one of these models and asks it
for the request it produces. The ``Annotated`` field types are shared with
the tool signatures in :mod:`waitlister_mcp.tools`, so the schema advertised
to the agent and the checks applied here are the same.
"""

from __future__ import annotations

import re
from typing import Annotated, Any, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from waitlister_mcp.waitlister_client import encode_path_segment

_EMAIL_RE = re.compile(
    r"^(?!\.)(?!.*\.\.)[A-Za-z0-9_'+\-.]*[A-Za-z0-9_+\-]"
    r"@(?:[A-Za-z0-9][A-Za-z0-9\-]*\.)+[A-Za-z]{2,}$"
)


def _check_email(value: str) -> str:
    if not _EMAIL_RE.fullmatch(value):
        raise ValueError(f"invalid email address: {value!r}")
    return value


EmailAddress = Annotated[
    str,
    AfterValidator(_check_email),
    Field(json_schema_extra={"format": "email"}),
]
SubscriberRef = Annotated[str, Field(min_length=1)]
Metadata = dict[str, str]
Limit = Annotated[int, Field(ge=1, le=100)]
Page = Annotated[int, Field(ge=1)]
SortBy = Literal["position", "points", "date", "referral_count", "email"]
SortDir = Literal["asc", "desc"]


class _ToolInput(BaseModel):
    model_config = ConfigDict(extra="forbid")


class AddSubscriberInput(_ToolInput):
    """Input for signing a new subscriber up to the waitlist."""

    email: EmailAddress
    name: str | None = None
    phone: str | None = None
    referred_by: str | None = None
    metadata: Metadata | None = None

    def to_body(self) -> dict[str, Any]:
        """Return the ``POST /sign-up`` body.

        ``referred_by`` travels inside ``metadata`` and overrides a
        ``referred_by`` key already present there. An empty merged mapping
        is left out entirely.
        """
        body: dict[str, Any] = {"email": self.email}
        if self.name:
            body["name"] = self.name
        if self.phone:
            body["phone"] = self.phone

        metadata = dict(self.metadata or {})
        if self.referred_by:
            metadata["referred_by"] = self.referred_by
        if metadata:
            body["metadata"] = metadata
        return body


class ListSubscribersInput(_ToolInput):
    """Input for fetching one page of subscribers."""

    limit: Limit = 20
    page: Page = 1
    sort_by: SortBy = "date"
    sort_dir: SortDir = "desc"

    def to_params(self) -> dict[str, str]:
        return {
            "limit": str(self.limit),
            "page": str(self.page),
            "sort_by": self.sort_by,
            "sort_dir": self.sort_dir,
        }


class GetSubscriberInput(_ToolInput):
    """Input for looking up one subscriber by ID or email."""

    id_or_email: SubscriberRef

    @property
    def path(self) -> str:
        return f"/subscribers/{encode_path_segment(self.id_or_email)}"


class UpdateSubscriberInput(GetSubscriberInput):
    """Input for a partial subscriber update."""

    name: str | None = None
    phone: str | None = None
    points: int | float | None = None
    metadata: Metadata | None = None

    def to_body(self) -> dict[str, Any]:
        """Return only the fields the caller supplied.

        Presence is what counts: ``""`` and ``0`` are sent, ``None`` is not.
        """
        return self.model_dump(exclude={"id_or_email"}, exclude_none=True)


class LogViewInput(_ToolInput):
    """Input for recording a waitlist page view."""

    visitor_id: str | None = None
    referring_domain: str | None = None

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.visitor_id:
            body["visitor_id"] = self.visitor_id
        if self.referring_domain:
            body["metadata"] = {"referring_domain": self.referring_domain}
        return body
