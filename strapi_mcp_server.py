#!/usr/bin/env python3
"""
Strapi MCP Server
Connects Claude Desktop to a Strapi 5 CMS for content publishing.

Tools cover articles, tutorials and events (create, list, get, update,
publish) plus author/category/tag lookups. Each tool call is forwarded as a
single request to Strapi's content-manager API.

Setup:
  1. pip install "mcp[cli]" httpx pydantic
  2. Set STRAPI_URL (defaults to http://localhost:1337)
  3. Set STRAPI_API_TOKEN, or STRAPI_ADMIN_EMAIL and STRAPI_ADMIN_PASSWORD
  4. Add to claude_desktop_config.json:
       "strapi": {"command": "strapi-mcp", "env": {"STRAPI_URL": "..."}}
"""

import json
import logging
import math
import os
import re
import sys
import time
import unicodedata
from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional
from urllib.parse import quote

import httpx
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import BaseModel, ConfigDict, Field

# ─── Configuration ───────────────────────────────────────────────────────────


def _int_setting(name: str, default: int) -> Optional[int]:
    """Read an integer env var; None when it is set but not a number."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return None


STRAPI_URL = os.environ.get("STRAPI_URL", "http://localhost:1337").rstrip("/")
API_TOKEN = os.environ.get("STRAPI_API_TOKEN", "")
ADMIN_EMAIL = os.environ.get("STRAPI_ADMIN_EMAIL", "")
ADMIN_PASSWORD = os.environ.get("STRAPI_ADMIN_PASSWORD", "")
TOKEN_LIFETIME_SECONDS = _int_setting("STRAPI_TOKEN_LIFETIME", 1800)
LOG_LEVEL = os.environ.get("STRAPI_MCP_LOG_LEVEL", "INFO").upper()

DEFAULT_PAGE_SIZE = 25
REQUEST_TIMEOUT = 30.0
CONTENT_PREVIEW_LENGTH = 200
WORDS_PER_MINUTE = 200

CONTENT_MANAGER_PATH = "/content-manager/collection-types"
ARTICLE_UID = "api::article.article"
TUTORIAL_UID = "api::tutorial.tutorial"
EVENT_UID = "api::event.event"
AUTHOR_UID = "api::author.author"
CATEGORY_UID = "api::category.category"
TAG_UID = "api::tag.tag"

# Tool argument name -> Strapi attribute name
FIELD_MAP = {
    "author_id": "author",
    "category_id": "category",
    "tag_ids": "tags",
    "published_at": "publishedAt",
}
TRIMMED_FIELDS = ("content", "description")
DOCUMENT_ID_PATTERN = r"^[A-Za-z0-9_-]+$"

Status = Literal["published", "draft", "all"]
Difficulty = Literal["beginner", "intermediate", "advanced"]
EventType = Literal["webinar", "workshop", "meetup", "conference"]

logger = logging.getLogger("strapi_mcp")

mcp = FastMCP("strapi_mcp")

# ─── Authentication ──────────────────────────────────────────────────────────

_jwt_token: Optional[str] = None
_jwt_expires_at = 0.0


def _has_credentials() -> bool:
    return bool(API_TOKEN or (ADMIN_EMAIL and ADMIN_PASSWORD))


def reset_token() -> None:
    """Forget the cached admin JWT so the next call logs in again."""
    global _jwt_token, _jwt_expires_at
    _jwt_token = None
    _jwt_expires_at = 0.0


async def _authenticate() -> str:
    """Return a bearer token for Strapi.

    A configured API token is used as-is. Otherwise the admin JWT from
    ``/admin/login`` is cached for TOKEN_LIFETIME_SECONDS and fetched again
    once it is missing or expired.
    """
    global _jwt_token, _jwt_expires_at

    if API_TOKEN:
        return API_TOKEN
    if not (ADMIN_EMAIL and ADMIN_PASSWORD):
        raise ValueError(
            "No Strapi credentials configured. Set STRAPI_API_TOKEN or both "
            "STRAPI_ADMIN_EMAIL and STRAPI_ADMIN_PASSWORD."
        )
    if _jwt_token and time.monotonic() < _jwt_expires_at:
        return _jwt_token

    if _jwt_token:
        logger.info("Admin token expired, logging in again")
    async with httpx.AsyncClient(timeout=REQUEST_TIMEOUT) as client:
        response = await client.post(
            f"{STRAPI_URL}/admin/login",
            json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
        )
        response.raise_for_status()
        body = response.json()

    try:
        token = body["data"]["token"]
    except (KeyError, TypeError):
        raise ValueError("Strapi admin login response did not contain a token.") from None

    _jwt_token = token
    _jwt_expires_at = time.monotonic() + TOKEN_LIFETIME_SECONDS
    logger.info("Authenticated with admin credentials (%s)", ADMIN_EMAIL)
    return token


# ─── HTTP Client ─────────────────────────────────────────────────────────────


async def _get_headers() -> Dict[str, str]:
    """Return authorization headers for the Strapi API."""
    token = await _authenticate()
    return {
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
        "Accept": "application/json",
    }


async def _api_request(method: str, path: str, **kwargs: Any) -> Any:
    """Make an authenticated request to Strapi and return the JSON body."""
    headers = await _get_headers()
    logger.info("%s %s", method, path)
    async with httpx.AsyncClient(timeout=REQUEST_TIMEOUT) as client:
        response = await client.request(
            method, f"{STRAPI_URL}{path}", headers=headers, **kwargs
        )
    if response.status_code == 401 and not API_TOKEN:
        reset_token()
    response.raise_for_status()
    return response.json()


async def _api_get(path: str, params: Optional[Dict[str, Any]] = None) -> Any:
    return await _api_request("GET", path, params=params or {})


async def _api_post(path: str, data: Dict[str, Any]) -> Any:
    return await _api_request("POST", path, json=data)


async def _api_put(path: str, data: Dict[str, Any]) -> Any:
    return await _api_request("PUT", path, json=data)


def _strapi_error_message(response: httpx.Response) -> Optional[str]:
    """Pull the message out of Strapi's ``{"error": {...}}`` envelope."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        return body["error"].get("message")
    return None


def _handle_api_error(e: Exception) -> str:
    """Consistent error formatting."""
    if isinstance(e, httpx.HTTPStatusError):
        status = e.response.status_code
        if status == 400:
            message = _strapi_error_message(e.response) or e.response.text[:500]
            return f"Error: Strapi rejected the request: {message}"
        elif status == 401:
            return (
                "Error: Authentication failed. Check STRAPI_API_TOKEN or "
                "STRAPI_ADMIN_EMAIL/STRAPI_ADMIN_PASSWORD."
            )
        elif status == 403:
            return "Error: Permission denied. The credentials lack access to this content type."
        elif status == 404:
            return "Error: Resource not found. Check the document ID is correct."
        elif status == 429:
            return "Error: Rate limit exceeded. Wait a moment and retry."
        else:
            body = e.response.text[:500]
            return f"Error: Strapi returned {status}. Response: {body}"
    elif isinstance(e, httpx.TimeoutException):
        return "Error: Request timed out. Try again."
    elif isinstance(e, httpx.RequestError):
        return f"Error: Could not reach Strapi at {STRAPI_URL}: {e}"
    elif isinstance(e, ValueError):
        return f"Error: {e}"
    return f"Error: {type(e).__name__}: {e}"


def _tool_error(tool: str, e: Exception) -> ToolError:
    message = _handle_api_error(e)
    logger.warning("%s failed: %s", tool, message)
    return ToolError(message)


# ─── Payload Helpers ─────────────────────────────────────────────────────────


def slugify(text: str) -> str:
    """Convert a title to a URL-friendly slug."""
    text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    text = text.lower()
    text = re.sub(r"[\s_]+", "-", text)
    text = re.sub(r"[^a-z0-9-]", "", text)
    text = re.sub(r"-+", "-", text)
    return text.strip("-")


def reading_time(text: str) -> int:
    """Estimated reading time in minutes at WORDS_PER_MINUTE."""
    return math.ceil(len(text.split()) / WORDS_PER_MINUTE)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _to_strapi_fields(values: Dict[str, Any]) -> Dict[str, Any]:
    return {FIELD_MAP.get(key, key): value for key, value in values.items()}


def _add_derived_fields(data: Dict[str, Any], with_reading_time: bool = True) -> Dict[str, Any]:
    """Add slug (from title) and reading_time (from content) when present."""
    if "title" in data:
        data["slug"] = slugify(data["title"])
    if with_reading_time and "content" in data:
        data["reading_time"] = reading_time(data["content"])
    return data


def _build_create_payload(params: BaseModel, with_reading_time: bool = True) -> Dict[str, Any]:
    data = _to_strapi_fields(params.model_dump(exclude_none=True))
    # A missing publish date means the entry is created as a draft
    data.setdefault("publishedAt", None)
    return _add_derived_fields(data, with_reading_time)


def _build_update_payload(params: BaseModel, with_reading_time: bool = True) -> Dict[str, Any]:
    values = params.model_dump(exclude_none=True, exclude={"document_id"})
    if not values:
        raise ValueError("No fields to update. Provide at least one field to change.")
    return _add_derived_fields(_to_strapi_fields(values), with_reading_time)


def _list_query(page: int, page_size: int, sort: str, status: str) -> Dict[str, Any]:
    """Base content-manager query: pagination, sort and draft/published filter."""
    query: Dict[str, Any] = {"page": page, "pageSize": page_size, "sort": sort}
    if status == "published":
        query["filters[publishedAt][$notNull]"] = "true"
    elif status == "draft":
        query["filters[publishedAt][$null]"] = "true"
    return query


def _add_relation_filter(query: Dict[str, Any], field: str, relation_id: Optional[int]) -> None:
    if relation_id is not None:
        query[f"filters[{field}][id][$eq]"] = relation_id


def _add_value_filter(query: Dict[str, Any], field: str, value: Optional[str]) -> None:
    if value is not None:
        query[f"filters[{field}][$eq]"] = value


def _trim_text(value: Any) -> Any:
    if isinstance(value, str) and len(value) > CONTENT_PREVIEW_LENGTH:
        return value[:CONTENT_PREVIEW_LENGTH] + "..."
    return value


def _trim_entries(body: Any) -> Any:
    """Shorten long text fields of every entry in a list response."""
    if not isinstance(body, dict):
        return body
    trimmed = dict(body)
    for key in ("results", "data"):
        entries = trimmed.get(key)
        if not isinstance(entries, list):
            continue
        trimmed[key] = [
            {
                name: _trim_text(value) if name in TRIMMED_FIELDS else value
                for name, value in entry.items()
            }
            if isinstance(entry, dict)
            else entry
            for entry in entries
        ]
    return trimmed


def _to_text(body: Any) -> str:
    return json.dumps(body, indent=2, ensure_ascii=False)


def _collection_path(uid: str, document_id: Optional[str] = None) -> str:
    path = f"{CONTENT_MANAGER_PATH}/{uid}"
    if document_id:
        path = f"{path}/{quote(document_id, safe='')}"
    return path


async def _list_entries(uid: str, query: Dict[str, Any]) -> str:
    body = await _api_get(_collection_path(uid), params=query)
    return _to_text(_trim_entries(body))


async def _get_entry(uid: str, document_id: str) -> str:
    return _to_text(await _api_get(_collection_path(uid, document_id)))


async def _create_entry(uid: str, data: Dict[str, Any]) -> str:
    return _to_text(await _api_post(_collection_path(uid), data))


async def _update_entry(uid: str, document_id: str, data: Dict[str, Any]) -> str:
    return _to_text(await _api_put(_collection_path(uid, document_id), data))


async def _set_published(uid: str, document_id: str, publish: bool) -> str:
    data = {"publishedAt": _now_iso() if publish else None}
    return await _update_entry(uid, document_id, data)


# ─── Input Models ────────────────────────────────────────────────────────────


class DocumentInput(BaseModel):
    """Input for tools addressing a single document."""
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    document_id: str = Field(
        ...,
        description="Strapi document ID",
        min_length=1,
        pattern=DOCUMENT_ID_PATTERN,
    )


class PublishInput(DocumentInput):
    """Input for publishing or unpublishing a document."""

    publish: bool = Field(default=True, description="true to publish, false to unpublish")


class ListInput(BaseModel):
    """Pagination and status filter shared by the content list tools."""
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    page: int = Field(default=1, description="Page number", ge=1)
    page_size: int = Field(
        default=DEFAULT_PAGE_SIZE, description="Results per page", ge=1, le=100
    )
    status: Status = Field(default="all", description="Filter by publication status")


class ListLookupInput(BaseModel):
    """Input for listing authors, categories or tags."""
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    page: int = Field(default=1, description="Page number", ge=1)
    page_size: int = Field(default=100, description="Results per page", ge=1, le=100)


class CreateArticleInput(BaseModel):
    """Input for creating an article."""
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    title: str = Field(..., description="Article title", min_length=1, max_length=255)
    content: str = Field(..., description="Article content in MARKDOWN format", min_length=1)
    description: Optional[str] = Field(default=None, description="Short description/excerpt")
    author_id: int = Field(..., description="Author ID (use strapi_list_authors to find)")
    category_id: Optional[int] = Field(
        default=None, description="Category ID (use strapi_list_categories)"
    )
    tag_ids: Optional[List[int]] = Field(
        default=None, description="Tag IDs (use strapi_list_tags)"
    )
    published_at: Optional[str] = Field(
        default=None, description="Publication date (ISO 8601); omit to create a draft"
    )


class ListArticlesInput(ListInput):
    """Input for listing articles."""

    category_id: Optional[int] = Field(default=None, description="Filter by category ID")
    author_id: Optional[int] = Field(default=None, description="Filter by author ID")
    tag_id: Optional[int] = Field(default=None, description="Filter by tag ID")
    sort: str = Field(
        default="createdAt:desc",
        description="Sort field and direction (e.g., 'publishedAt:desc', 'title:asc')",
    )
    search: Optional[str] = Field(default=None, description="Search in title and content")


class UpdateArticleInput(DocumentInput):
    """Input for updating an article. Only supplied fields change."""

    title: Optional[str] = Field(default=None, description="New title", min_length=1)
    content: Optional[str] = Field(
        default=None, description="New content in MARKDOWN", min_length=1
    )
    description: Optional[str] = Field(default=None, description="New description")
    category_id: Optional[int] = Field(default=None, description="New category ID")
    tag_ids: Optional[List[int]] = Field(default=None, description="New tag IDs")


class CreateTutorialInput(BaseModel):
    """Input for creating a tutorial."""
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    title: str = Field(..., description="Tutorial title", min_length=1, max_length=255)
    content: str = Field(..., description="Tutorial content in MARKDOWN format", min_length=1)
    description: Optional[str] = Field(default=None, description="Short description")
    difficulty: Optional[Difficulty] = Field(default=None, description="Difficulty level")
    duration: Optional[int] = Field(
        default=None, description="Estimated duration in minutes", ge=1
    )
    author_id: int = Field(..., description="Author ID")
    category_id: Optional[int] = Field(default=None, description="Category ID")
    tag_ids: Optional[List[int]] = Field(default=None, description="Tag IDs")
    published_at: Optional[str] = Field(
        default=None, description="Publication date (ISO 8601); omit to create a draft"
    )


class ListTutorialsInput(ListInput):
    """Input for listing tutorials."""

    difficulty: Optional[Difficulty] = Field(default=None, description="Filter by difficulty")
    category_id: Optional[int] = Field(default=None, description="Filter by category ID")
    sort: str = Field(default="createdAt:desc", description="Sort field and direction")


class UpdateTutorialInput(DocumentInput):
    """Input for updating a tutorial. Only supplied fields change."""

    title: Optional[str] = Field(default=None, description="New title", min_length=1)
    content: Optional[str] = Field(
        default=None, description="New content in MARKDOWN", min_length=1
    )
    description: Optional[str] = Field(default=None, description="New description")
    difficulty: Optional[Difficulty] = Field(default=None, description="New difficulty")
    duration: Optional[int] = Field(default=None, description="New duration in minutes", ge=1)


class CreateEventInput(BaseModel):
    """Input for creating an event."""
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    title: str = Field(..., description="Event title", min_length=1, max_length=255)
    description: str = Field(..., description="Event description in MARKDOWN", min_length=1)
    event_type: EventType = Field(..., description="Type of event")
    start_date: str = Field(..., description="Event start date/time (ISO 8601)")
    end_date: Optional[str] = Field(default=None, description="Event end date/time (ISO 8601)")
    location: Optional[str] = Field(
        default=None, description="Physical location or virtual platform"
    )
    registration_url: Optional[str] = Field(default=None, description="Registration/signup URL")
    max_attendees: Optional[int] = Field(
        default=None, description="Maximum number of attendees", ge=1
    )
    published_at: Optional[str] = Field(
        default=None, description="Publication date (ISO 8601); omit to create a draft"
    )


class ListEventsInput(ListInput):
    """Input for listing events."""

    event_type: Optional[EventType] = Field(default=None, description="Filter by event type")
    upcoming: bool = Field(default=False, description="Only events starting from now on")
    sort: str = Field(default="start_date:asc", description="Sort field and direction")


class UpdateEventInput(DocumentInput):
    """Input for updating an event. Only supplied fields change."""

    title: Optional[str] = Field(default=None, description="New title", min_length=1)
    description: Optional[str] = Field(default=None, description="New description")
    start_date: Optional[str] = Field(default=None, description="New start date/time")
    end_date: Optional[str] = Field(default=None, description="New end date/time")
    location: Optional[str] = Field(default=None, description="New location")
    registration_url: Optional[str] = Field(default=None, description="New registration URL")


# ─── Tool Annotations ────────────────────────────────────────────────────────

_READ_HINTS = {
    "readOnlyHint": True,
    "destructiveHint": False,
    "idempotentHint": True,
    "openWorldHint": True,
}
_CREATE_HINTS = {
    "readOnlyHint": False,
    "destructiveHint": False,
    "idempotentHint": False,
    "openWorldHint": True,
}
_UPDATE_HINTS = {
    "readOnlyHint": False,
    "destructiveHint": False,
    "idempotentHint": True,
    "openWorldHint": True,
}

# ─── Article Tools ───────────────────────────────────────────────────────────


@mcp.tool(
    name="strapi_create_article",
    annotations={"title": "Create Article", **_CREATE_HINTS},
)
async def strapi_create_article(params: CreateArticleInput) -> str:
    """Create a new article in Strapi with markdown content.

    The URL slug is generated from the title and a reading time estimate
    (minutes, at 200 words per minute) from the content. Without
    published_at the article is saved as a draft.

    Args:
        params: Article fields. title, content and author_id are required.

    Returns:
        str: JSON of the created article as returned by Strapi.
    """
    try:
        return await _create_entry(ARTICLE_UID, _build_create_payload(params))
    except Exception as e:
        raise _tool_error("strapi_create_article", e) from e


@mcp.tool(
    name="strapi_list_articles",
    annotations={"title": "List Articles", **_READ_HINTS},
)
async def strapi_list_articles(params: Optional[ListArticlesInput] = None) -> str:
    """List articles with filtering, sorting and pagination.

    Long content and description fields are shortened to a preview; use
    strapi_get_article for the full text.

    Args:
        params: Pagination, status/category/author/tag filters, sort and search.

    Returns:
        str: JSON with results and pagination.
    """
    params = params or ListArticlesInput()
    try:
        query = _list_query(params.page, params.page_size, params.sort, params.status)
        _add_relation_filter(query, "category", params.category_id)
        _add_relation_filter(query, "author", params.author_id)
        _add_relation_filter(query, "tags", params.tag_id)
        if params.search:
            query["_q"] = params.search
        return await _list_entries(ARTICLE_UID, query)
    except Exception as e:
        raise _tool_error("strapi_list_articles", e) from e


@mcp.tool(
    name="strapi_get_article",
    annotations={"title": "Get Article", **_READ_HINTS},
)
async def strapi_get_article(params: DocumentInput) -> str:
    """Get a specific article by document ID, including its full content.

    Args:
        params: Article document ID.

    Returns:
        str: JSON of the article.
    """
    try:
        return await _get_entry(ARTICLE_UID, params.document_id)
    except Exception as e:
        raise _tool_error("strapi_get_article", e) from e


@mcp.tool(
    name="strapi_update_article",
    annotations={"title": "Update Article", **_UPDATE_HINTS},
)
async def strapi_update_article(params: UpdateArticleInput) -> str:
    """Update an existing article. Only the fields given are changed.

    Changing the title regenerates the slug; changing the content
    recalculates the reading time.

    Args:
        params: Document ID and the fields to change.

    Returns:
        str: JSON of the updated article.
    """
    try:
        data = _build_update_payload(params)
        return await _update_entry(ARTICLE_UID, params.document_id, data)
    except Exception as e:
        raise _tool_error("strapi_update_article", e) from e


@mcp.tool(
    name="strapi_publish_article",
    annotations={"title": "Publish Article", **_UPDATE_HINTS},
)
async def strapi_publish_article(params: PublishInput) -> str:
    """Publish or unpublish an article.

    Args:
        params: Document ID and publish flag (false moves it back to draft).

    Returns:
        str: JSON of the article after the change.
    """
    try:
        return await _set_published(ARTICLE_UID, params.document_id, params.publish)
    except Exception as e:
        raise _tool_error("strapi_publish_article", e) from e


# ─── Lookup Tools ────────────────────────────────────────────────────────────


@mcp.tool(
    name="strapi_list_authors",
    annotations={"title": "List Authors", **_READ_HINTS},
)
async def strapi_list_authors(params: Optional[ListLookupInput] = None) -> str:
    """List all authors. Use the IDs as author_id when creating content.

    Args:
        params: Pagination options.

    Returns:
        str: JSON list of authors.
    """
    params = params or ListLookupInput()
    try:
        return await _list_entries(
            AUTHOR_UID, {"page": params.page, "pageSize": params.page_size}
        )
    except Exception as e:
        raise _tool_error("strapi_list_authors", e) from e


@mcp.tool(
    name="strapi_list_categories",
    annotations={"title": "List Categories", **_READ_HINTS},
)
async def strapi_list_categories(params: Optional[ListLookupInput] = None) -> str:
    """List all categories."""
    params = params or ListLookupInput()
    try:
        return await _list_entries(
            CATEGORY_UID, {"page": params.page, "pageSize": params.page_size}
        )
    except Exception as e:
        raise _tool_error("strapi_list_categories", e) from e


@mcp.tool(
    name="strapi_list_tags",
    annotations={"title": "List Tags", **_READ_HINTS},
)
async def strapi_list_tags(params: Optional[ListLookupInput] = None) -> str:
    """List all tags."""
    params = params or ListLookupInput()
    try:
        return await _list_entries(
            TAG_UID, {"page": params.page, "pageSize": params.page_size}
        )
    except Exception as e:
        raise _tool_error("strapi_list_tags", e) from e


# ─── Tutorial Tools ──────────────────────────────────────────────────────────


@mcp.tool(
    name="strapi_create_tutorial",
    annotations={"title": "Create Tutorial", **_CREATE_HINTS},
)
async def strapi_create_tutorial(params: CreateTutorialInput) -> str:
    """Create a new tutorial with step-by-step content in markdown.

    Slug and reading time are derived the same way as for articles.

    Args:
        params: Tutorial fields. title, content and author_id are required.

    Returns:
        str: JSON of the created tutorial.
    """
    try:
        return await _create_entry(TUTORIAL_UID, _build_create_payload(params))
    except Exception as e:
        raise _tool_error("strapi_create_tutorial", e) from e


@mcp.tool(
    name="strapi_list_tutorials",
    annotations={"title": "List Tutorials", **_READ_HINTS},
)
async def strapi_list_tutorials(params: Optional[ListTutorialsInput] = None) -> str:
    """List tutorials with filtering and pagination.

    Args:
        params: Pagination, status/difficulty/category filters and sort.

    Returns:
        str: JSON with results and pagination.
    """
    params = params or ListTutorialsInput()
    try:
        query = _list_query(params.page, params.page_size, params.sort, params.status)
        _add_value_filter(query, "difficulty", params.difficulty)
        _add_relation_filter(query, "category", params.category_id)
        return await _list_entries(TUTORIAL_UID, query)
    except Exception as e:
        raise _tool_error("strapi_list_tutorials", e) from e


@mcp.tool(
    name="strapi_get_tutorial",
    annotations={"title": "Get Tutorial", **_READ_HINTS},
)
async def strapi_get_tutorial(params: DocumentInput) -> str:
    """Get a specific tutorial by document ID."""
    try:
        return await _get_entry(TUTORIAL_UID, params.document_id)
    except Exception as e:
        raise _tool_error("strapi_get_tutorial", e) from e


@mcp.tool(
    name="strapi_update_tutorial",
    annotations={"title": "Update Tutorial", **_UPDATE_HINTS},
)
async def strapi_update_tutorial(params: UpdateTutorialInput) -> str:
    """Update an existing tutorial. Only the fields given are changed.

    Args:
        params: Document ID and the fields to change.

    Returns:
        str: JSON of the updated tutorial.
    """
    try:
        data = _build_update_payload(params)
        return await _update_entry(TUTORIAL_UID, params.document_id, data)
    except Exception as e:
        raise _tool_error("strapi_update_tutorial", e) from e


@mcp.tool(
    name="strapi_publish_tutorial",
    annotations={"title": "Publish Tutorial", **_UPDATE_HINTS},
)
async def strapi_publish_tutorial(params: PublishInput) -> str:
    """Publish or unpublish a tutorial."""
    try:
        return await _set_published(TUTORIAL_UID, params.document_id, params.publish)
    except Exception as e:
        raise _tool_error("strapi_publish_tutorial", e) from e


# ─── Event Tools ─────────────────────────────────────────────────────────────


@mcp.tool(
    name="strapi_create_event",
    annotations={"title": "Create Event", **_CREATE_HINTS},
)
async def strapi_create_event(params: CreateEventInput) -> str:
    """Create a new event (webinar, workshop, meetup, conference).

    The slug is generated from the title. Events carry no reading time.

    Args:
        params: Event fields. title, description, event_type and start_date
            are required.

    Returns:
        str: JSON of the created event.
    """
    try:
        data = _build_create_payload(params, with_reading_time=False)
        return await _create_entry(EVENT_UID, data)
    except Exception as e:
        raise _tool_error("strapi_create_event", e) from e


@mcp.tool(
    name="strapi_list_events",
    annotations={"title": "List Events", **_READ_HINTS},
)
async def strapi_list_events(params: Optional[ListEventsInput] = None) -> str:
    """List events with filtering and pagination.

    Args:
        params: Pagination, status/event type filters, upcoming-only flag
            and sort (soonest first by default).

    Returns:
        str: JSON with results and pagination.
    """
    params = params or ListEventsInput()
    try:
        query = _list_query(params.page, params.page_size, params.sort, params.status)
        _add_value_filter(query, "event_type", params.event_type)
        if params.upcoming:
            query["filters[start_date][$gte]"] = _now_iso()
        return await _list_entries(EVENT_UID, query)
    except Exception as e:
        raise _tool_error("strapi_list_events", e) from e


@mcp.tool(
    name="strapi_get_event",
    annotations={"title": "Get Event", **_READ_HINTS},
)
async def strapi_get_event(params: DocumentInput) -> str:
    """Get a specific event by document ID."""
    try:
        return await _get_entry(EVENT_UID, params.document_id)
    except Exception as e:
        raise _tool_error("strapi_get_event", e) from e


@mcp.tool(
    name="strapi_update_event",
    annotations={"title": "Update Event", **_UPDATE_HINTS},
)
async def strapi_update_event(params: UpdateEventInput) -> str:
    """Update an existing event. Only the fields given are changed.

    Args:
        params: Document ID and the fields to change.

    Returns:
        str: JSON of the updated event.
    """
    try:
        data = _build_update_payload(params, with_reading_time=False)
        return await _update_entry(EVENT_UID, params.document_id, data)
    except Exception as e:
        raise _tool_error("strapi_update_event", e) from e


@mcp.tool(
    name="strapi_publish_event",
    annotations={"title": "Publish Event", **_UPDATE_HINTS},
)
async def strapi_publish_event(params: PublishInput) -> str:
    """Publish or unpublish an event."""
    try:
        return await _set_published(EVENT_UID, params.document_id, params.publish)
    except Exception as e:
        raise _tool_error("strapi_publish_event", e) from e


# ─── Entry Point ─────────────────────────────────────────────────────────────


def _log_configuration() -> None:
    """Log which settings are present without revealing secrets."""
    logger.info("STRAPI_URL: %s", STRAPI_URL)
    logger.info("STRAPI_API_TOKEN: %s", "present" if API_TOKEN else "not set")
    logger.info("STRAPI_ADMIN_EMAIL: %s", ADMIN_EMAIL or "not set")
    logger.info("STRAPI_ADMIN_PASSWORD: %s", "present" if ADMIN_PASSWORD else "not set")


def main() -> None:
    level = logging.getLevelName(LOG_LEVEL)
    # stdout carries the MCP stdio protocol, so logs go to stderr
    logging.basicConfig(
        level=level if isinstance(level, int) else logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    if not isinstance(level, int):
        logger.error("Unknown STRAPI_MCP_LOG_LEVEL %r.", LOG_LEVEL)
        sys.exit(1)
    if TOKEN_LIFETIME_SECONDS is None or TOKEN_LIFETIME_SECONDS <= 0:
        logger.error("STRAPI_TOKEN_LIFETIME must be a positive number of seconds.")
        sys.exit(1)
    _log_configuration()
    if not _has_credentials():
        logger.error(
            "Missing Strapi credentials. Set STRAPI_API_TOKEN or both "
            "STRAPI_ADMIN_EMAIL and STRAPI_ADMIN_PASSWORD."
        )
        sys.exit(1)
    logger.info("Strapi MCP server starting (stdio)")
    mcp.run()


if __name__ == "__main__":
    main()
