"""The current user's active books and periodicals."""

from __future__ import annotations

from functools import partial

from bookshare.formats.descriptor import endpoint

_endpoint = partial(endpoint, topic="ActiveTitles")

_PAGING = {
    "start": "string",
    "limit": "integer",
    "sortOrder": "ActiveBookSortOrder",
    "direction": "Direction",
}

PROFILE = {
    "useRecommendations": "boolean",
    "useRequestList": "boolean",
    "maxContributions": "integer",
}

ENDPOINTS = [
    _endpoint(
        "get_my_active_books", "GET", "/myActiveBooks",
        optional=_PAGING,
        reference_id="_my-active-books",
        response="ActiveBookList",
        summary="Get my active books",
    ),
    _endpoint(
        "add_my_active_book", "POST", "/myActiveBooks",
        required={"bookshareId": "string", "format": "FormatType"},
        aliases={"fmt": "format"},
        reference_id="_my-active-books-add",
        response="ActiveBookList",
        summary="Add a title to my active books",
    ),
    _endpoint(
        "remove_my_active_book", "DELETE", "/myActiveBooks/{activeTitleId}",
        required={"activeTitleId": "string"},
        reference_id="_my-active-books-remove",
        response="ActiveBookList",
        summary="Remove a title from my active books",
    ),
    _endpoint(
        "get_my_active_periodicals", "GET", "/myActivePeriodicals",
        optional=_PAGING,
        reference_id="_my-active-periodicals",
        response="ActivePeriodicalList",
        summary="Get my active periodicals",
    ),
    _endpoint(
        "add_my_active_periodical", "POST", "/myActivePeriodicals",
        required={"editionId": "string", "format": "FormatType"},
        aliases={"fmt": "format"},
        reference_id="_my-active-periodicals-add",
        response="ActivePeriodicalList",
        summary="Add an edition to my active periodicals",
    ),
    _endpoint(
        "remove_my_active_periodical", "DELETE", "/myActivePeriodicals/{activeTitleId}",
        required={"activeTitleId": "string"},
        reference_id="_my-active-periodicals-remove",
        response="ActivePeriodicalList",
        summary="Remove an edition from my active periodicals",
    ),
    _endpoint(
        "get_my_active_books_profile", "GET", "/myActiveBooksProfile",
        reference_id="_my-active-book-profile-get",
        response="ActiveBookProfile",
        summary="Get my active books profile",
    ),
    _endpoint(
        "update_my_active_books_profile", "PUT", "/myActiveBooksProfile",
        optional=PROFILE,
        reference_id="_my-active-book-profile-put",
        response="ActiveBookProfile",
        summary="Update my active books profile",
    ),
]
