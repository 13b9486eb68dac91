"""Titles assigned to students by sponsors and teachers."""

from __future__ import annotations

from functools import partial

from bookshare.formats.descriptor import endpoint

_endpoint = partial(endpoint, topic="AssignedTitles")

_USER = {"user": "userIdentifier"}

ENDPOINTS = [
    _endpoint(
        "get_my_assigned_titles", "GET", "/myAssignedTitles",
        optional={
            "start": "string",
            "limit": "integer",
            "sortOrder": "MyAssignedSortOrder",
            "direction": "Direction",
        },
        reference_id="_my-assigned-titles",
        response="TitleMetadataSummaryList",
        summary="Get titles assigned to me",
    ),
    _endpoint(
        "get_assigned_titles", "GET", "/assignedTitles/{userIdentifier}",
        required={"userIdentifier": "string"},
        optional={
            "start": "string",
            "limit": "integer",
            "sortOrder": "AssignedSortOrder",
            "direction": "Direction",
        },
        aliases=_USER,
        reference_id="_titles-assigned-member",
        response="AssignedTitleMetadataSummaryList",
        summary="Get titles assigned to a member",
    ),
    _endpoint(
        "create_assigned_title", "POST", "/assignedTitles/{userIdentifier}",
        required={"userIdentifier": "string", "bookshareId": "string"},
        aliases=_USER,
        reference_id="_title-assign",
        response="AssignedTitleMetadataSummaryList",
        summary="Assign a title to a member",
    ),
    _endpoint(
        "remove_assigned_title", "DELETE", "/assignedTitles/{userIdentifier}",
        required={"userIdentifier": "string", "bookshareId": "string"},
        aliases=_USER,
        reference_id="_title-unassign",
        response="AssignedTitleMetadataSummaryList",
        summary="Unassign a title from a member",
    ),
]
