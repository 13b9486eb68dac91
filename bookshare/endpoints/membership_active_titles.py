"""Membership Assistant operations on a user's active books and periodicals."""

from __future__ import annotations

from functools import partial

from bookshare.endpoints.active_titles import PROFILE
from bookshare.formats.descriptor import endpoint

_endpoint = partial(endpoint, topic="MembershipActiveTitles")

_USER = {"user": "userIdentifier"}
_ACCOUNT = "/accounts/{userIdentifier}"

_PAGING = {
    "start": "string",
    "limit": "integer",
    "sortOrder": "ActiveBookSortOrder",
    "direction": "Direction",
}

ENDPOINTS = [
    _endpoint(
        "get_active_books", "GET", _ACCOUNT + "/activeBooks",
        required={"userIdentifier": "string"},
        optional=_PAGING,
        aliases=_USER,
        reference_id="_user-active-books",
        response="ActiveBookList",
        summary="Get a user's active books",
    ),
    _endpoint(
        "create_active_book", "POST", _ACCOUNT + "/activeBooks",
        required={"userIdentifier": "string", "bookshareId": "string", "format": "FormatType"},
        aliases={**_USER, "fmt": "format"},
        reference_id="_user-active-books-add",
        response="ActiveBookList",
        summary="Add a title to a user's active books",
    ),
    _endpoint(
        "delete_active_book", "DELETE", _ACCOUNT + "/activeBooks/{activeTitleId}",
        required={"userIdentifier": "string", "activeTitleId": "string"},
        aliases=_USER,
        reference_id="_user-active-books-remove",
        response="ActiveBookList",
        summary="Remove a title from a user's active books",
    ),
    _endpoint(
        "get_active_periodicals", "GET", _ACCOUNT + "/activePeriodicals",
        required={"userIdentifier": "string"},
        optional=_PAGING,
        aliases=_USER,
        reference_id="_user-active-periodicals",
        response="ActivePeriodicalList",
        summary="Get a user's active periodicals",
    ),
    _endpoint(
        "create_active_periodical", "POST", _ACCOUNT + "/activePeriodicals",
        required={"userIdentifier": "string", "bookshareId": "string", "format": "FormatType"},
        aliases={**_USER, "fmt": "format"},
        reference_id="_user-active-periodicals-add",
        response="ActivePeriodicalList",
        summary="Add an edition to a user's active periodicals",
    ),
    _endpoint(
        "delete_active_periodical", "DELETE", _ACCOUNT + "/activePeriodicals/{activeTitleId}",
        required={"userIdentifier": "string", "activeTitleId": "string"},
        aliases=_USER,
        reference_id="_user-active-periodicals-remove",
        response="ActivePeriodicalList",
        summary="Remove an edition from a user's active periodicals",
    ),
    _endpoint(
        "get_active_books_profile", "GET", _ACCOUNT + "/activeBooksProfile",
        required={"userIdentifier": "string"},
        aliases=_USER,
        reference_id="_get-active-book-profile",
        response="ActiveBookProfile",
        summary="Get a user's active books profile",
    ),
    _endpoint(
        "update_active_books_profile", "PUT", _ACCOUNT + "/activeBooksProfile",
        required={"userIdentifier": "string"},
        optional=PROFILE,
        aliases=_USER,
        reference_id="_put-active-book-profile",
        response="ActiveBookProfile",
        summary="Update a user's active books profile",
    ),
]
