"""Periodicals: series search, editions, downloads and the user's subscriptions."""

from __future__ import annotations

from functools import partial

from bookshare.formats.descriptor import ANONYMOUS, endpoint

_endpoint = partial(endpoint, topic="Periodicals")

_EDITION = "/periodicals/{seriesId}/editions/{editionId}/{format}"

ENDPOINTS = [
    _endpoint(
        "get_periodicals", "GET", "/periodicals",
        optional={
            "title": "string",
            "issn": "string",
            "language": "language",
            "start": "string",
            "limit": "integer",
            "sortOrder": "PeriodicalSortOrder",
            "direction": "Direction",
        },
        role=ANONYMOUS,
        reference_id="_periodical-search",
        response="PeriodicalSeriesMetadataSummaryList",
        summary="Search for periodicals",
    ),
    _endpoint(
        "get_periodical", "GET", "/periodicals/{seriesId}",
        required={"seriesId": "string"},
        role=ANONYMOUS,
        reference_id="_periodical-series-metadata",
        response="PeriodicalSeriesMetadataSummary",
        summary="Get periodical series metadata",
    ),
    _endpoint(
        "get_periodical_editions", "GET", "/periodicals/{seriesId}/editions",
        required={"seriesId": "string"},
        optional={
            "limit": "integer",
            "sortOrder": "EditionSortOrder",
            "direction": "Direction",
        },
        role=ANONYMOUS,
        reference_id="_periodical-editions",
        response="PeriodicalEditionList",
        summary="Get periodical editions",
    ),
    _endpoint(
        "get_periodical_edition", "GET", "/periodicals/{seriesId}/editions",
        required={"seriesId": "string", "editionId": "string"},
        role=ANONYMOUS,
        response="PeriodicalEdition",
        synthetic=True,
        summary="One edition of a periodical series (from the edition list)",
    ),
    _endpoint(
        "download_periodical_edition", "GET", _EDITION,
        required={"seriesId": "string", "editionId": "string", "format": "FormatType"},
        optional={"forUser": "string"},
        aliases={"fmt": "format"},
        reference_id="_periodical-download",
        response="StatusModel",
        summary="Download a periodical edition",
    ),
    _endpoint(
        "get_periodical_resource_files", "GET", _EDITION + "/resources",
        required={"seriesId": "string", "editionId": "string", "format": "FormatType"},
        optional={"start": "string"},
        aliases={"fmt": "format"},
        reference_id="_get-periodical-title-file-resource-list",
        response="TitleFileResourceList",
        summary="Get a list of periodical file resources",
    ),
    _endpoint(
        "get_periodical_resource_file", "GET", _EDITION + "/resources/{resourceId}",
        required={
            "seriesId": "string",
            "editionId": "string",
            "format": "FormatType",
            "resourceId": "string",
            "size": "string",
        },
        aliases={"fmt": "format"},
        reference_id="_get-periodical-title-file-resource",
        response="StatusModel",
        summary="Download a periodical file resource",
    ),
    _endpoint(
        "get_my_periodicals", "GET", "/myPeriodicals",
        reference_id="_get-myperiodicals",
        response="PeriodicalSubscriptionList",
        summary="Get my periodical subscriptions",
    ),
    _endpoint(
        "subscribe_my_periodical", "POST", "/myPeriodicals",
        required={"seriesId": "string", "format": "PeriodicalFormatType"},
        aliases={"fmt": "format"},
        reference_id="_subscribe-myperiodicals",
        response="PeriodicalSubscriptionList",
        summary="Subscribe to a periodical series",
    ),
    _endpoint(
        "unsubscribe_my_periodical", "DELETE", "/myPeriodicals/{seriesId}",
        required={"seriesId": "string"},
        reference_id="_unsubscribe-myperiodicals",
        response="PeriodicalSubscriptionList",
        summary="Unsubscribe from a periodical series",
    ),
]
