"""Membership Assistant operations on user accounts.

Every path is rooted at ``/accounts/{userIdentifier}``; ``user`` is accepted
as an alias for ``userIdentifier`` throughout.
"""

from __future__ import annotations

from functools import partial

from bookshare.endpoints.user_account import (
    PREFERENCES,
    RECOMMENDATION_MULTI,
    RECOMMENDATION_PROFILE,
)
from bookshare.formats.descriptor import endpoint

_endpoint = partial(endpoint, topic="MembershipUserAccounts")

_USER = {"user": "userIdentifier"}
_ACCOUNT = "/accounts/{userIdentifier}"

_ACCOUNT_FIELDS = {
    "phoneNumber": "string",
    "address2": "string",
    "state": "string",
    "guardianFirstName": "string",
    "guardianLastName": "string",
    "dateOfBirth": "string",
    "language": "language",
    "allowAdultContent": "boolean",
    "site": "SiteType",
    "role": "RoleType",
    "password": "string",
}

_SUBSCRIPTION_FIELDS = {
    "endDate": "day",
    "numBooksAllowed": "integer",
    "downloadTimeframe": "Timeframe",
    "notes": "string",
}

ENDPOINTS = [
    # -- Accounts --
    _endpoint(
        "get_account", "GET", _ACCOUNT,
        required={"userIdentifier": "string"},
        aliases=_USER,
        reference_id="_get-useraccount-search",
        response="UserAccount",
        summary="Look up a user account",
    ),
    _endpoint(
        "update_account", "PUT", _ACCOUNT,
        required={"userIdentifier": "string"},
        optional={
            "firstName": "string",
            "lastName": "string",
            "emailAddress": "string",
            "address1": "string",
            "city": "string",
            "country": "string",
            "postalCode": "string",
            **_ACCOUNT_FIELDS,
        },
        aliases=_USER,
        reference_id="_update-useraccount",
        response="UserAccount",
        summary="Update a user account",
    ),
    _endpoint(
        "create_account", "POST", "/accounts",
        required={
            "firstName": "string",
            "lastName": "string",
            "emailAddress": "string",
            "address1": "string",
            "city": "string",
            "country": "string",
            "postalCode": "string",
        },
        optional=_ACCOUNT_FIELDS,
        reference_id="_create-useraccount",
        response="UserAccount",
        summary="Create a user account",
    ),
    _endpoint(
        "update_account_password", "PUT", _ACCOUNT + "/password",
        required={"userIdentifier": "string", "password": "string"},
        aliases=_USER,
        reference_id="_update-membership-password",
        response="StatusModel",
        summary="Update a user's password",
    ),
    # -- Subscriptions --
    _endpoint(
        "get_subscriptions", "GET", _ACCOUNT + "/subscriptions",
        required={"userIdentifier": "string"},
        aliases=_USER,
        reference_id="_get-membership-subscriptions",
        response="UserSubscriptionList",
        summary="Get a user's subscriptions",
    ),
    _endpoint(
        "create_subscription", "POST", _ACCOUNT + "/subscriptions",
        required={
            "userIdentifier": "string",
            "startDate": "day",
            "userSubscriptionType": "string",
        },
        optional=_SUBSCRIPTION_FIELDS,
        aliases=_USER,
        reference_id="_create-membership-subscription",
        response="UserSubscription",
        summary="Create a subscription for a user",
    ),
    _endpoint(
        "get_subscription", "GET", _ACCOUNT + "/subscriptions/{subscriptionId}",
        required={"userIdentifier": "string", "subscriptionId": "string"},
        aliases=_USER,
        reference_id="_get-single-membership-subscription",
        response="UserSubscription",
        summary="Get one of a user's subscriptions",
    ),
    _endpoint(
        "update_subscription", "PUT", _ACCOUNT + "/subscriptions/{subscriptionId}",
        required={
            "userIdentifier": "string",
            "subscriptionId": "string",
            "startDate": "day",
            "userSubscriptionType": "string",
        },
        optional=_SUBSCRIPTION_FIELDS,
        aliases=_USER,
        reference_id="_update-membership-subscription",
        response="UserSubscription",
        summary="Update one of a user's subscriptions",
    ),
    _endpoint(
        "get_subscription_types", "GET", "/subscriptiontypes",
        reference_id="_get-membership-subscription-types",
        response="UserSubscriptionTypeList",
        summary="Get the subscription types",
    ),
    # -- Proof of disability --
    _endpoint(
        "get_user_pod", "GET", _ACCOUNT + "/pod",
        required={"userIdentifier": "string"},
        aliases=_USER,
        reference_id="_get-membership-pods",
        response="UserPodList",
        summary="Get a user's proofs of disability",
    ),
    _endpoint(
        "create_user_pod", "POST", _ACCOUNT + "/pod",
        required={
            "userIdentifier": "string",
            "disabilityType": "DisabilityType",
            "proofSource": "ProofOfDisabilitySource",
        },
        aliases=_USER,
        reference_id="_create-membership-pod",
        response="UserPodList",
        summary="Add a proof of disability",
    ),
    _endpoint(
        "update_user_pod", "PUT", _ACCOUNT + "/pod/{disabilityType}",
        required={
            "userIdentifier": "string",
            "disabilityType": "DisabilityType",
            "proofSource": "ProofOfDisabilitySource",
        },
        aliases=_USER,
        reference_id="_update-membership-pod",
        response="UserPodList",
        summary="Update a proof of disability",
    ),
    _endpoint(
        "remove_user_pod", "DELETE", _ACCOUNT + "/pod/{disabilityType}",
        required={"userIdentifier": "string", "disabilityType": "DisabilityType"},
        aliases=_USER,
        reference_id="_delete-membership-pod",
        response="UserPodList",
        summary="Remove a proof of disability",
    ),
    # -- Signed agreements --
    _endpoint(
        "get_user_agreements", "GET", _ACCOUNT + "/agreements",
        required={"userIdentifier": "string"},
        aliases=_USER,
        reference_id="_get-signed-agreements",
        response="UserSignedAgreementList",
        summary="Get a user's signed agreements",
    ),
    _endpoint(
        "create_user_agreement", "POST", _ACCOUNT + "/agreements",
        required={
            "userIdentifier": "string",
            "agreementType": "AgreementType",
            "dateSigned": "string",
            "printName": "string",
        },
        optional={"signedByLegalGuardian": "string"},
        aliases=_USER,
        reference_id="_create-signed-agreement",
        response="UserSignedAgreement",
        summary="Record a signed agreement",
    ),
    _endpoint(
        "remove_user_agreement", "POST", _ACCOUNT + "/agreements/{id}/expired",
        required={"userIdentifier": "string", "id": "string"},
        aliases=_USER,
        reference_id="_expire-signed-agreement",
        response="UserSignedAgreement",
        summary="Expire a signed agreement",
    ),
    # -- Recommendation profile --
    _endpoint(
        "get_recommendation_profile", "GET", _ACCOUNT + "/recommendationProfile",
        required={"userIdentifier": "string"},
        aliases=_USER,
        reference_id="_get-recommendation-profile",
        response="RecommendationProfile",
        summary="Get a user's recommendation profile",
    ),
    _endpoint(
        "update_recommendation_profile", "PUT", _ACCOUNT + "/recommendationProfile",
        required={"userIdentifier": "string"},
        optional=RECOMMENDATION_PROFILE,
        multi=RECOMMENDATION_MULTI,
        aliases=_USER,
        reference_id="_put-recommendation-profile",
        response="RecommendationProfile",
        summary="Update a user's recommendation profile",
    ),
    # -- Preferences --
    _endpoint(
        "get_preferences", "GET", _ACCOUNT + "/preferences",
        required={"userIdentifier": "string"},
        aliases=_USER,
        reference_id="_get-user-account-preferences",
        response="MyAccountPreferences",
        summary="Get a user's preferences",
    ),
    _endpoint(
        "update_preferences", "PUT", _ACCOUNT + "/preferences",
        required={"userIdentifier": "string"},
        optional=PREFERENCES,
        aliases={**_USER, "fmt": "format"},
        reference_id="_put-user-account-preferences",
        response="MyAccountPreferences",
        summary="Update a user's preferences",
    ),
    # -- Periodical subscriptions --
    _endpoint(
        "get_periodical_subscriptions", "GET", _ACCOUNT + "/periodicals",
        required={"userIdentifier": "string"},
        aliases=_USER,
        reference_id="_get-periodicals-user",
        response="PeriodicalSubscriptionList",
        summary="Get a user's periodical subscriptions",
    ),
    _endpoint(
        "subscribe_periodical", "POST", _ACCOUNT + "/periodicals",
        required={
            "userIdentifier": "string",
            "seriesId": "string",
            "format": "PeriodicalFormatType",
        },
        aliases={**_USER, "fmt": "format"},
        reference_id="_subscribe-periodical-series",
        response="PeriodicalSubscriptionList",
        summary="Subscribe a user to a periodical series",
    ),
    _endpoint(
        "unsubscribe_periodical", "DELETE", _ACCOUNT + "/periodicals/{seriesId}",
        required={"userIdentifier": "string", "seriesId": "string"},
        aliases=_USER,
        reference_id="_unsubscribe-periodical-series",
        response="PeriodicalSubscriptionList",
        summary="Unsubscribe a user from a periodical series",
    ),
    # -- Reading lists --
    _endpoint(
        "get_reading_lists", "GET", _ACCOUNT + "/lists",
        required={"userIdentifier": "string"},
        optional={
            "start": "string",
            "limit": "integer",
            "sortOrder": "MyReadingListSortOrder",
            "direction": "Direction",
        },
        aliases=_USER,
        reference_id="_get-member-readinglists-list",
        response="ReadingListList",
        summary="Get a user's reading lists",
    ),
    _endpoint(
        "create_reading_list", "POST", _ACCOUNT + "/lists",
        required={"userIdentifier": "string", "name": "string", "access": "Access"},
        optional={"description": "string"},
        aliases=_USER,
        reference_id="_post-member-readinglist-create",
        response="ReadingList",
        summary="Create a reading list for a user",
    ),
]
