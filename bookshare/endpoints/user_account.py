"""The current user's identity, account summary, history, preferences and recommendations."""

from __future__ import annotations

from functools import partial

from bookshare.formats.descriptor import endpoint

_endpoint = partial(endpoint, topic="UserAccount")

PREFERENCES = {
    "allowAdultContent": "boolean",
    "showAllBooks": "boolean",
    "language": "language",
    "format": "FormatType",
    "brailleGrade": "BrailleGrade",
    "brailleFormat": "BrailleFormat",
    "brailleCellLineWidth": "integer",
    "useUeb": "boolean",
}

RECOMMENDATION_PROFILE = {
    "includeGlobalCollection": "boolean",
    "narratorType": "NarratorType",
    "narratorGender": "Gender",
    "readingAge": "integer",
    "excludedContentWarnings": "ContentWarning",
    "includedContentWarnings": "ContentWarning",
    "excludedCategories": "string",
    "includedCategories": "string",
    "excludedAuthors": "string",
    "includedAuthors": "string",
}

RECOMMENDATION_MULTI = [
    "excludedContentWarnings", "includedContentWarnings",
    "excludedCategories", "includedCategories",
    "excludedAuthors", "includedAuthors",
]

ENDPOINTS = [
    _endpoint(
        "get_user_identity", "GET", "/me",
        reference_id="_me",
        response="UserIdentity",
        summary="Get the current user's identity",
    ),
    _endpoint(
        "get_my_account", "GET", "/myaccount",
        reference_id="_get-myaccount-summary",
        response="MyAccountSummary",
        summary="Get my account summary",
    ),
    _endpoint(
        "get_my_download_history", "GET", "/myaccount/history",
        optional={
            "limit": "integer",
            "sortOrder": "HistorySortOrder",
            "direction": "DirectionRev",
        },
        reference_id="_get-myaccount-downloads",
        response="TitleDownloadList",
        summary="Get my download history",
    ),
    _endpoint(
        "get_my_preferences", "GET", "/myaccount/preferences",
        reference_id="_get-myaccount-preferences",
        response="MyAccountPreferences",
        summary="Get my account preferences",
    ),
    _endpoint(
        "update_my_preferences", "PUT", "/myaccount/preferences",
        optional=PREFERENCES,
        aliases={"fmt": "format"},
        reference_id="_put-myaccount-preferences",
        response="MyAccountPreferences",
        summary="Update my account preferences",
    ),
    _endpoint(
        "get_my_recommendation_profile", "GET", "/myaccount/recommendationProfile",
        reference_id="_get-my-recommendation-profile",
        response="RecommendationProfile",
        summary="Get my recommendation profile",
    ),
    _endpoint(
        "update_my_recommendation_profile", "PUT", "/myaccount/recommendationProfile",
        optional=RECOMMENDATION_PROFILE,
        multi=RECOMMENDATION_MULTI,
        reference_id="_put-my-recommendation-profile",
        response="RecommendationProfile",
        summary="Update my recommendation profile",
    ),
]
