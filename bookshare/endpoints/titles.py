"""Titles: search, metadata, downloads, file resources and categories."""

from __future__ import annotations

from functools import partial

from bookshare.formats.descriptor import ANONYMOUS, endpoint

_endpoint = partial(endpoint, topic="Titles")

ENDPOINTS = [
    _endpoint(
        "get_title_count", "GET", "/titles/count",
        role=ANONYMOUS,
        reference_id="_title-count",
        response="TitleCount",
        summary="Live title count",
    ),
    _endpoint(
        "get_title", "GET", "/titles/{bookshareId}",
        required={"bookshareId": "string"},
        role=ANONYMOUS,
        reference_id="_title-metadata",
        response="TitleMetadataDetail",
        summary="Get title metadata",
    ),
    _endpoint(
        "download_title", "GET", "/titles/{bookshareId}/{format}",
        required={"bookshareId": "string", "format": "FormatType"},
        optional={"forUser": "string"},
        aliases={"fmt": "format"},
        reference_id="_title-download",
        response="StatusModel",
        summary="Download a title",
    ),
    _endpoint(
        "get_titles", "GET", "/titles",
        optional={
            "title": "string",
            "author": "string",
            "narrator": "string",
            "composer": "string",
            "keyword": "string",
            "isbn": "string",
            "categories": "string",
            "language": "language",
            "country": "string",
            "format": "FormatType",
            "narratorType": "NarratorType",
            "brailleType": "BrailleType",
            "readingAge": "integer",
            "excludedContentWarnings": "ContentWarning",
            "includedContentWarnings": "ContentWarning",
            "externalIdentifierCode": "string",
            "maxDuration": "duration",
            "titleContentType": "TitleContentType",
            "start": "string",
            "limit": "integer",
            "sortOrder": "TitleSortOrder",
            "direction": "Direction",
        },
        multi=[
            "author", "narrator", "composer", "categories",
            "excludedContentWarnings", "includedContentWarnings",
        ],
        aliases={"fmt": "format"},
        role=ANONYMOUS,
        reference_id="_title-search",
        response="TitleMetadataSummaryList",
        summary="Search for titles",
    ),
    _endpoint(
        "get_artifact_metadata", "GET", "/titles/{bookshareId}",
        required={"bookshareId": "string", "format": "FormatType"},
        aliases={"fmt": "format"},
        role=ANONYMOUS,
        response="ArtifactMetadata",
        synthetic=True,
        summary="Metadata of one artifact of a title (from the title metadata)",
    ),
    _endpoint(
        "get_title_resource_files", "GET", "/titles/{bookshareId}/{format}/resources",
        required={"bookshareId": "string", "format": "FormatType"},
        optional={"start": "string"},
        aliases={"fmt": "format"},
        reference_id="_get-title-file-resource-list",
        response="TitleFileResourceList",
        summary="Get a list of title file resources",
    ),
    _endpoint(
        "get_title_resource_file", "GET",
        "/titles/{bookshareId}/{format}/resources/{resourceId}",
        required={
            "bookshareId": "string",
            "format": "FormatType",
            "resourceId": "string",
            "size": "string",
        },
        aliases={"fmt": "format"},
        reference_id="_get-title-file-resource",
        response="StatusModel",
        summary="Download a title file resource",
    ),
    _endpoint(
        "get_categories", "GET", "/categories",
        optional={"start": "string", "limit": "integer"},
        role=ANONYMOUS,
        reference_id="_categories",
        response="CategoriesList",
        summary="Category listing",
    ),
    _endpoint(
        "get_retrieval", "GET", "",
        required={"url": "string"},
        response="RetrievalResult",
        synthetic=True,
        summary="Retrieve an artifact by a fully formed Bookshare URL",
    ),
]
