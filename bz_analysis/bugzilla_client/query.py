"""Bugzilla search query building."""

from pydantic import BaseModel, Field

BASE_FIELDS = ("id", "alias", "summary", "blocks")
OPEN_RESOLUTION = "---"


class BugQuery(BaseModel):
    """Server-side filter for the bug search endpoint."""

    product: str = Field(..., description="Bugzilla product name")
    component: str | None = Field(None, description="Component within the product")
    resolution: str = Field(OPEN_RESOLUTION, description="'---' selects open bugs")
    rank_field: str | None = Field(None, description="Optional rank field to include")


def build_query_params(query: BugQuery) -> dict[str, str]:
    """Build the query string parameters for ``/rest/bug``.

    Example:
        >>> build_query_params(BugQuery(product="Core", component="Layout"))
        {"product": "Core", "component": "Layout",
         "include_fields": "id,alias,summary,blocks", "resolution": "---",
         "limit": "0"}
    """
    fields = list(BASE_FIELDS)
    if query.rank_field and query.rank_field not in fields:
        fields.append(query.rank_field)

    params = {"product": query.product}
    if query.component:
        params["component"] = query.component
    params["include_fields"] = ",".join(fields)
    params["resolution"] = query.resolution
    # limit=0 lifts the server's default page size
    params["limit"] = "0"
    return params


def bug_url(base_url: str, issue_id: int) -> str:
    """Detail page URL for a bug."""
    return f"{base_url.rstrip('/')}/show_bug.cgi?id={issue_id}"
