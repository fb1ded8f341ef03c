"""MCP tool implementations for the Waitlister API.

Each tool validates its arguments through a model from
:mod:`waitlister_mcp.models`, issues exactly one API call and returns the
response body as pretty-printed JSON. A non-2xx answer becomes an error
result carrying the API's message verbatim; validation, network and parse
failures are raised and reported by FastMCP.
"""

import json
import logging
from typing import Annotated, Any

from mcp.types import CallToolResult, TextContent, ToolAnnotations
from pydantic import Field

from waitlister_mcp import waitlister_client
from waitlister_mcp.models import (
    AddSubscriberInput,
    EmailAddress,
    GetSubscriberInput,
    Limit,
    ListSubscribersInput,
    LogViewInput,
    Metadata,
    Page,
    SortBy,
    SortDir,
    SubscriberRef,
    UpdateSubscriberInput,
)
from waitlister_mcp.server import mcp
from waitlister_mcp.waitlister_client import ApiError

log = logging.getLogger("waitlister-mcp")


def _text_response(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def _error_result(message: str) -> CallToolResult:
    return CallToolResult(isError=True, content=[TextContent(type="text", text=message)])


async def _call_api(path: str, **kwargs: Any) -> str | CallToolResult:
    """Issue one API call and shape the outcome as a tool result."""
    try:
        data = await waitlister_client.get_client().request(path, **kwargs)
    except ApiError as exc:
        return _error_result(str(exc))
    return _text_response(data)


# ---------------------------------------------------------------------------
# Tool 1: add_subscriber
# ---------------------------------------------------------------------------


@mcp.tool(
    name="add_subscriber",
    structured_output=False,
    description=(
        "Add a new subscriber to your Waitlister waitlist. Returns their position, "
        "referral code, and sign-up token."
    ),
    annotations=ToolAnnotations(
        title="Add Subscriber",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def add_subscriber(
    email: Annotated[EmailAddress, Field(description="The subscriber's email address")],
    name: Annotated[str | None, Field(description="The subscriber's name")] = None,
    phone: Annotated[str | None, Field(description="The subscriber's phone number")] = None,
    referred_by: Annotated[
        str | None,
        Field(description="Referral code of the person who referred this subscriber"),
    ] = None,
    metadata: Annotated[
        Metadata | None,
        Field(
            description="Additional custom fields to store with the subscriber "
            "(e.g. company, role)"
        ),
    ] = None,
) -> str | CallToolResult:
    """Sign *email* up to the waitlist, attributing it to *referred_by* if given."""
    params = AddSubscriberInput(
        email=email, name=name, phone=phone, referred_by=referred_by, metadata=metadata
    )
    return await _call_api("/sign-up", method="POST", json=params.to_body())


# ---------------------------------------------------------------------------
# Tool 2: list_subscribers
# ---------------------------------------------------------------------------


@mcp.tool(
    name="list_subscribers",
    structured_output=False,
    description=(
        "Retrieve a paginated list of subscribers from your waitlist. Supports sorting "
        "by position, points, date, referral_count, or email."
    ),
    annotations=ToolAnnotations(
        title="List Subscribers",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def list_subscribers(
    limit: Annotated[Limit, Field(description="Number of results to return (1-100, default 20)")] = 20,
    page: Annotated[Page, Field(description="Page number for pagination (default 1)")] = 1,
    sort_by: Annotated[SortBy, Field(description="Field to sort by (default: date)")] = "date",
    sort_dir: Annotated[SortDir, Field(description="Sort direction (default: desc)")] = "desc",
) -> str | CallToolResult:
    """Return one page of subscribers plus the API's pagination info."""
    params = ListSubscribersInput(limit=limit, page=page, sort_by=sort_by, sort_dir=sort_dir)
    return await _call_api("/subscribers", params=params.to_params())


# ---------------------------------------------------------------------------
# Tool 3: get_subscriber
# ---------------------------------------------------------------------------


@mcp.tool(
    name="get_subscriber",
    structured_output=False,
    description=(
        "Retrieve detailed information about a specific subscriber by their ID or email "
        "address. Returns position, points, referral info, metadata, location, and more."
    ),
    annotations=ToolAnnotations(
        title="Get Subscriber",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def get_subscriber(
    id_or_email: Annotated[
        SubscriberRef, Field(description="The subscriber's unique ID or email address")
    ],
) -> str | CallToolResult:
    """Look up one subscriber. The API decides whether the value is an ID or an email."""
    params = GetSubscriberInput(id_or_email=id_or_email)
    return await _call_api(params.path)


# ---------------------------------------------------------------------------
# Tool 4: update_subscriber
# ---------------------------------------------------------------------------


@mcp.tool(
    name="update_subscriber",
    structured_output=False,
    description=(
        "Update an existing subscriber's information. You can update their name, phone, "
        "points, and/or custom metadata. Only include fields you want to change."
    ),
    annotations=ToolAnnotations(
        title="Update Subscriber",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def update_subscriber(
    id_or_email: Annotated[
        SubscriberRef, Field(description="The subscriber's unique ID or email address")
    ],
    name: Annotated[str | None, Field(description="Updated name")] = None,
    phone: Annotated[str | None, Field(description="Updated phone number")] = None,
    points: Annotated[int | float | None, Field(description="Updated points value")] = None,
    metadata: Annotated[
        Metadata | None,
        Field(description="Custom fields to add or update (merged with existing metadata)"),
    ] = None,
) -> str | CallToolResult:
    """Apply a partial update; only the supplied fields are sent."""
    params = UpdateSubscriberInput(
        id_or_email=id_or_email, name=name, phone=phone, points=points, metadata=metadata
    )
    body = params.to_body()
    if not body:
        log.info("update_subscriber called for %s with no fields to change", params.id_or_email)
    return await _call_api(params.path, method="PUT", json=body)


# ---------------------------------------------------------------------------
# Tool 5: log_view
# ---------------------------------------------------------------------------


@mcp.tool(
    name="log_view",
    structured_output=False,
    description=(
        "Record a view of your waitlist page. Useful for tracking engagement and "
        "calculating conversion rates."
    ),
    annotations=ToolAnnotations(
        title="Log Waitlist View",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def log_view(
    visitor_id: Annotated[
        str | None,
        Field(description="Unique identifier for the visitor (prevents duplicate counts)"),
    ] = None,
    referring_domain: Annotated[
        str | None, Field(description="Domain that referred the view")
    ] = None,
) -> str | CallToolResult:
    """Count one page view, optionally tagged with the visitor and referrer."""
    params = LogViewInput(visitor_id=visitor_id, referring_domain=referring_domain)
    return await _call_api("/log-view", method="POST", json=params.to_body())
