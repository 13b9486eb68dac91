"""Membership Assistant operations on organizations and their members."""

from __future__ import annotations

from functools import partial

from bookshare.formats.descriptor import endpoint

_endpoint = partial(endpoint, topic="MembershipOrganizations")

_ORG = {"organization": "organizationId"}

ENDPOINTS = [
    _endpoint(
        "get_organization", "GET", "/organizations/{organizationId}",
        required={"organizationId": "string"},
        aliases=_ORG,
        reference_id="_get-organization",
        response="Organization",
        summary="Get an organization",
    ),
    _endpoint(
        "create_organization", "POST", "/organizations",
        required={
            "organizationName": "string",
            "address1": "string",
            "city": "string",
            "country": "string",
            "postalCode": "string",
            "organizationType": "string",
            "contactFirstName": "string",
            "contactLastName": "string",
            "contactPhoneNumber": "string",
            "contactTitle": "string",
            "contactEmailAddress": "string",
        },
        optional={
            "address2": "string",
            "state": "string",
            "website": "string",
            "site": "SiteType",
        },
        reference_id="_create-organization",
        response="Organization",
        summary="Create an organization",
    ),
    _endpoint(
        "get_organization_members", "GET", "/organizations/{organizationId}/members",
        required={"organizationId": "string"},
        optional={
            "start": "string",
            "limit": "integer",
            "sortOrder": "MemberSortOrder",
            "direction": "Direction",
        },
        aliases=_ORG,
        reference_id="_get-organization-members",
        response="UserAccountList",
        summary="Get the members of an organization",
    ),
    _endpoint(
        "add_organization_member", "POST", "/organizations/{organizationId}/members",
        required={
            "organizationId": "string",
            "firstName": "string",
            "lastName": "string",
            "dateOfBirth": "string",
            "grade": "string",
            "disabilityType": "DisabilityType",
            "proofSource": "ProofOfDisabilitySource",
        },
        optional={
            "username": "string",
            "password": "string",
            "disabilityPlan": "string",
        },
        multi=["disabilityPlan"],
        aliases=_ORG,
        reference_id="_create-organizationmember",
        response="UserAccount",
        summary="Add a member to an organization",
    ),
    _endpoint(
        "get_organization_types", "GET", "/organizationTypes",
        reference_id="_get-organization-types",
        response="OrganizationTypeList",
        summary="Get the organization types",
    ),
]
