"""Reading lists owned by or shared with the current user."""

from __future__ import annotations

from functools import partial

from bookshare.formats.descriptor import endpoint

_endpoint = partial(endpoint, topic="ReadingLists")

_LIST_PAGING = {
    "start": "string",
    "limit": "integer",
    "sortOrder": "MyReadingListSortOrder",
    "direction": "Direction",
}

ENDPOINTS = [
    _endpoint(
        "get_my_reading_lists", "GET", "/mylists",
        optional=_LIST_PAGING,
        reference_id="_get-my-readinglists-list",
        response="ReadingListList",
        summary="Get my reading lists",
    ),
    _endpoint(
        "create_my_reading_list", "POST", "/mylists",
        required={"name": "string", "access": "Access"},
        optional={"description": "string"},
        reference_id="_post-readinglist-create",
        response="ReadingList",
        summary="Create a reading list",
    ),
    _endpoint(
        "subscribe_my_reading_list", "PUT", "/mylists/{readingListId}/subscription",
        required={"readingListId": "string", "enabled": "boolean"},
        defaults={"enabled": True},
        reference_id="_put-readinglist-subscription",
        response="ReadingListUserView",
        summary="Subscribe to a reading list",
    ),
    _endpoint(
        "unsubscribe_my_reading_list", "PUT", "/mylists/{readingListId}/subscription",
        required={"readingListId": "string", "enabled": "boolean"},
        defaults={"enabled": False},
        response="ReadingListUserView",
        synthetic=True,
        summary="Unsubscribe from a reading list",
    ),
    _endpoint(
        "get_all_reading_lists", "GET", "/lists",
        optional=_LIST_PAGING,
        reference_id="_get-all-reading-lists",
        response="ReadingListList",
        summary="Get all reading lists visible to the user",
    ),
    _endpoint(
        "get_reading_list", "GET", "/lists",
        required={"readingListId": "string"},
        response="ReadingListUserView",
        synthetic=True,
        summary="One reading list (from the list of all reading lists)",
    ),
    _endpoint(
        "update_reading_list", "PUT", "/lists/{readingListId}",
        required={"readingListId": "string"},
        optional={"name": "string", "description": "string", "access": "Access"},
        reference_id="_put-readinglist-edit-metadata",
        response="ReadingList",
        summary="Edit reading list metadata",
    ),
    _endpoint(
        "get_reading_list_titles", "GET", "/lists/{readingListId}/titles",
        required={"readingListId": "string"},
        optional={
            "start": "string",
            "limit": "integer",
            "sortOrder": "ReadingListSortOrder",
            "direction": "Direction",
        },
        reference_id="_get-readinglist-titles",
        response="ReadingListTitlesList",
        summary="Get the titles in a reading list",
    ),
    _endpoint(
        "create_reading_list_title", "POST", "/lists/{readingListId}/titles",
        required={"readingListId": "string", "bookshareId": "string"},
        reference_id="_post-readinglist-title",
        response="ReadingListTitlesList",
        summary="Add a title to a reading list",
    ),
    _endpoint(
        "remove_reading_list_title", "DELETE", "/lists/{readingListId}/titles/{bookshareId}",
        required={"readingListId": "string", "bookshareId": "string"},
        reference_id="_delete-readinglist-title",
        response="ReadingListTitlesList",
        summary="Remove a title from a reading list",
    ),
]
