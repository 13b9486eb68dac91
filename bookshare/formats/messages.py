"""Pydantic models for Bookshare API v2 response bodies.

Every message tolerates fields it does not declare (they stay reachable as
attributes) and leaves absent or ``null`` fields at their zero value.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Message(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


# ---------------------------------------------------------------------------
# Shared records
# ---------------------------------------------------------------------------


class Link(Message):
    rel: str = ""
    href: str = ""


class Name(Message):
    firstName: str = ""
    lastName: str = ""
    middle: str = ""
    prefix: str = ""
    suffix: str = ""


class Address(Message):
    address1: str = ""
    address2: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    postalCode: str = ""


class Contributor(Message):
    name: Name | None = None
    type: str = ""
    indexName: str = ""


class Category(Message):
    name: str = ""
    code: str = ""
    description: str = ""
    categoryType: str = ""
    links: list[Link] = Field(default_factory=list)


class Format(Message):
    formatId: str = ""
    name: str = ""


class Grade(Message):
    gradeId: str = ""
    gradeCode: str = ""
    name: str = ""


class UsageRestriction(Message):
    usageRestrictionId: str = ""
    name: str = ""


class StatusModel(Message):
    """Generic acknowledgement: a status key plus human-readable messages."""

    key: str = ""
    messages: list[str] = Field(default_factory=list)


class PagedList(Message):
    """Fields common to every paginated list response."""

    allows: list[str] = Field(default_factory=list)
    limit: int = 0
    next: str = ""
    totalResults: int = 0
    links: list[Link] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Titles
# ---------------------------------------------------------------------------


class TitleCount(Message):
    count: int = 0

    @model_validator(mode="before")
    @classmethod
    def _wrap_bare_count(cls, data: Any) -> Any:
        # The count endpoint answers with a bare JSON integer.
        if isinstance(data, int) and not isinstance(data, bool):
            return {"count": data}
        return data


class ArtifactMetadata(Message):
    bookshareId: str = ""
    format: Format | None = None
    brailleCode: str = ""
    brailleGrade: str = ""
    brailleType: str = ""
    brailleMusicScoreLayout: str = ""
    dateAdded: str = ""
    externalIdentifierCode: str = ""
    fundingSource: str = ""
    globalBookServiceId: str = ""
    narrator: Name | None = None
    producer: str = ""
    supplier: str = ""
    transcriber: str = ""
    links: list[Link] = Field(default_factory=list)


class TitleMetadataSummary(Message):
    bookshareId: str = ""
    title: str = ""
    subtitle: str = ""
    authors: list[Name] = Field(default_factory=list)
    contributors: list[Contributor] = Field(default_factory=list)
    isbn13: str = ""
    synopsis: str = ""
    publishDate: str = ""
    copyrightDate: str = ""
    seriesTitle: str = ""
    seriesNumber: str = ""
    languages: list[str] = Field(default_factory=list)
    formats: list[Format] = Field(default_factory=list)
    contentWarnings: list[str] = Field(default_factory=list)
    available: bool = False
    site: str = ""
    titleContentType: str = ""
    links: list[Link] = Field(default_factory=list)


class TitleMetadataDetail(TitleMetadataSummary):
    adultContent: bool = False
    allowRecommend: bool = False
    artifacts: list[ArtifactMetadata] = Field(default_factory=list)
    categories: list[Category] = Field(default_factory=list)
    copyright: str = ""
    countries: list[str] = Field(default_factory=list)
    edition: str = ""
    grades: list[Grade] = Field(default_factory=list)
    marrakeshAvailable: bool = False
    notes: str = ""
    numPages: int = 0
    publisher: str = ""
    readingAgeMaximum: int = 0
    readingAgeMinimum: int = 0
    relatedIsbns: list[str] = Field(default_factory=list)
    replacementId: str = ""
    usageRestriction: UsageRestriction | None = None

    def artifact(self, fmt: str) -> ArtifactMetadata | None:
        """The artifact in format *fmt*, if the title has one."""
        for artifact in self.artifacts:
            if artifact.format is not None and fmt in (artifact.format.formatId, artifact.format.name):
                return artifact
        return None


class TitleMetadataSummaryList(PagedList):
    titles: list[TitleMetadataSummary] = Field(default_factory=list)


class AssignedTitleMetadataSummary(TitleMetadataSummary):
    assignedBy: str = ""
    dateAdded: str = ""
    dateDownloaded: str = ""


class AssignedTitleMetadataSummaryList(PagedList):
    titles: list[AssignedTitleMetadataSummary] = Field(default_factory=list)


class TitleFileResource(Message):
    resourceId: str = ""
    localURI: str = ""
    mimeType: str = ""
    size: int = 0
    links: list[Link] = Field(default_factory=list)


class TitleFileResourceList(PagedList):
    titleFileResources: list[TitleFileResource] = Field(default_factory=list)


class CategoriesList(PagedList):
    categories: list[Category] = Field(default_factory=list)


class TitleDownload(Message):
    bookshareId: str = ""
    title: str = ""
    authors: list[Name] = Field(default_factory=list)
    format: Format | None = None
    status: str = ""
    dateDownloaded: str = ""
    downloadedBy: str = ""
    downloadedFor: str = ""
    links: list[Link] = Field(default_factory=list)


class TitleDownloadList(PagedList):
    titleDownloads: list[TitleDownload] = Field(default_factory=list)


class RetrievalResult(StatusModel):
    """Outcome of fetching a fully formed Bookshare URL.

    A JSON reply populates the status fields; any other content is
    summarized by its URL, media type and size in bytes.  The raw bytes
    are kept in ``content`` but left out of serialized output.
    """

    url: str = ""
    contentType: str = ""
    contentLength: int = 0
    content: bytes = Field(default=b"", exclude=True)


# ---------------------------------------------------------------------------
# Periodicals
# ---------------------------------------------------------------------------


class PeriodicalEdition(Message):
    editionId: str = ""
    editionName: str = ""
    publicationDate: str = ""
    expirationDate: str = ""
    formats: list[Format] = Field(default_factory=list)
    links: list[Link] = Field(default_factory=list)


class PeriodicalEditionList(PagedList):
    periodicalEditions: list[PeriodicalEdition] = Field(default_factory=list)

    def edition(self, edition_id: str) -> PeriodicalEdition | None:
        for edition in self.periodicalEditions:
            if edition.editionId == edition_id:
                return edition
        return None


class PeriodicalSeriesMetadataSummary(Message):
    seriesId: str = ""
    title: str = ""
    issn: str = ""
    description: str = ""
    publisher: str = ""
    externalCategoryCode: str = ""
    categories: list[Category] = Field(default_factory=list)
    countries: list[str] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    editionCount: int = 0
    latestEdition: PeriodicalEdition | None = None
    links: list[Link] = Field(default_factory=list)


class PeriodicalSeriesMetadataSummaryList(PagedList):
    periodicals: list[PeriodicalSeriesMetadataSummary] = Field(default_factory=list)


class PeriodicalSubscription(Message):
    seriesId: str = ""
    title: str = ""
    format: Format | None = None
    links: list[Link] = Field(default_factory=list)


class PeriodicalSubscriptionList(PagedList):
    periodicalSubscriptions: list[PeriodicalSubscription] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Reading lists
# ---------------------------------------------------------------------------


class ReadingListSubscription(Message):
    enabled: bool = False
    links: list[Link] = Field(default_factory=list)


class ReadingList(Message):
    readingListId: str = ""
    name: str = ""
    description: str = ""
    owner: str = ""
    access: str = ""
    titleCount: int = 0
    memberCount: int = 0
    dateUpdated: str = ""
    allows: list[str] = Field(default_factory=list)
    links: list[Link] = Field(default_factory=list)


class ReadingListUserView(ReadingList):
    subscription: ReadingListSubscription | None = None


class ReadingListList(PagedList):
    lists: list[ReadingListUserView] = Field(default_factory=list)

    def reading_list(self, reading_list_id: str) -> ReadingListUserView | None:
        for entry in self.lists:
            if entry.readingListId == reading_list_id:
                return entry
        return None


class ReadingListTitle(TitleMetadataSummary):
    ranking: int = 0
    dateAdded: str = ""


class ReadingListTitlesList(PagedList):
    titles: list[ReadingListTitle] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Active titles
# ---------------------------------------------------------------------------


class ActiveBook(Message):
    activeTitleId: str = ""
    title: TitleMetadataSummary | None = None
    format: Format | None = None
    dateAdded: str = ""
    links: list[Link] = Field(default_factory=list)


class ActiveBookList(PagedList):
    activeBooks: list[ActiveBook] = Field(default_factory=list)


class ActivePeriodical(Message):
    activeTitleId: str = ""
    seriesId: str = ""
    edition: PeriodicalEdition | None = None
    format: Format | None = None
    dateAdded: str = ""
    links: list[Link] = Field(default_factory=list)


class ActivePeriodicalList(PagedList):
    activePeriodicals: list[ActivePeriodical] = Field(default_factory=list)


class ActiveBookProfile(Message):
    useRecommendations: bool = False
    useRequestList: bool = False
    maxContributions: int = 0
    allows: list[str] = Field(default_factory=list)
    links: list[Link] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# User accounts
# ---------------------------------------------------------------------------


class UserIdentity(Message):
    username: str = ""
    name: Name | None = None
    links: list[Link] = Field(default_factory=list)


class MyAccountSummary(Message):
    userAccountId: str = ""
    name: Name | None = None
    username: str = ""
    emailAddress: str = ""
    phoneNumber: str = ""
    address: Address | None = None
    dateOfBirth: str = ""
    language: str = ""
    allowAdultContent: bool = False
    canDownload: bool = False
    hasAgreement: bool = False
    proofOfDisabilityStatus: str = ""
    studentStatus: str = ""
    subscriptionStatus: str = ""
    downloadsRemaining: int = 0
    links: list[Link] = Field(default_factory=list)


class MyAccountPreferences(Message):
    allowAdultContent: bool = False
    showAllBooks: bool = False
    language: str = ""
    format: Format | None = None
    brailleGrade: str = ""
    brailleFormat: str = ""
    brailleCellLineWidth: int = 0
    useUeb: bool = False
    links: list[Link] = Field(default_factory=list)


class RecommendationProfile(Message):
    includeGlobalCollection: bool = False
    narratorType: str = ""
    narratorGender: str = ""
    readingAge: int = 0
    excludedContentWarnings: list[str] = Field(default_factory=list)
    includedContentWarnings: list[str] = Field(default_factory=list)
    excludedCategories: list[Category] = Field(default_factory=list)
    includedCategories: list[Category] = Field(default_factory=list)
    excludedAuthors: list[Name] = Field(default_factory=list)
    includedAuthors: list[Name] = Field(default_factory=list)
    links: list[Link] = Field(default_factory=list)


class UserAccount(Message):
    userAccountId: str = ""
    name: Name | None = None
    username: str = ""
    emailAddress: str = ""
    phoneNumber: str = ""
    address: Address | None = None
    dateOfBirth: str = ""
    language: str = ""
    allowAdultContent: bool = False
    site: str = ""
    roles: list[str] = Field(default_factory=list)
    guardian: Name | None = None
    hasAgreement: bool = False
    deleted: bool = False
    locked: bool = False
    links: list[Link] = Field(default_factory=list)


class UserAccountList(PagedList):
    userAccounts: list[UserAccount] = Field(default_factory=list)


class UserSubscriptionType(Message):
    name: str = ""
    description: str = ""


class UserSubscriptionTypeList(PagedList):
    userSubscriptionTypes: list[UserSubscriptionType] = Field(default_factory=list)


class UserSubscription(Message):
    userSubscriptionId: str = ""
    startDate: str = ""
    endDate: str = ""
    numBooksAllowed: int = 0
    downloadTimeframe: str = ""
    userSubscriptionType: UserSubscriptionType | None = None
    notes: str = ""
    links: list[Link] = Field(default_factory=list)


class UserSubscriptionList(PagedList):
    userSubscriptions: list[UserSubscription] = Field(default_factory=list)


class UserPod(Message):
    disabilityType: str = ""
    proofSource: str = ""
    links: list[Link] = Field(default_factory=list)


class UserPodList(PagedList):
    disabilities: list[UserPod] = Field(default_factory=list)


class UserSignedAgreement(Message):
    signedAgreementId: str = ""
    agreementType: str = ""
    dateSigned: str = ""
    dateExpired: str = ""
    printName: str = ""
    signedByLegalGuardian: bool = False
    expired: bool = False
    links: list[Link] = Field(default_factory=list)


class UserSignedAgreementList(PagedList):
    signedAgreements: list[UserSignedAgreement] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Organizations
# ---------------------------------------------------------------------------


class Organization(Message):
    organizationId: str = ""
    organizationName: str = ""
    organizationType: str = ""
    address: Address | None = None
    contact: UserAccount | None = None
    phoneNumber: str = ""
    website: str = ""
    site: str = ""
    links: list[Link] = Field(default_factory=list)


class OrganizationType(Message):
    name: str = ""
    description: str = ""


class OrganizationTypeList(PagedList):
    organizationTypes: list[OrganizationType] = Field(default_factory=list)


SCHEMAS: dict[str, type[Message]] = {
    cls.__name__: cls
    for cls in (
        StatusModel,
        TitleCount,
        ArtifactMetadata,
        TitleMetadataDetail,
        TitleMetadataSummaryList,
        AssignedTitleMetadataSummaryList,
        TitleFileResourceList,
        CategoriesList,
        TitleDownloadList,
        RetrievalResult,
        PeriodicalEdition,
        PeriodicalEditionList,
        PeriodicalSeriesMetadataSummary,
        PeriodicalSeriesMetadataSummaryList,
        PeriodicalSubscriptionList,
        ReadingList,
        ReadingListUserView,
        ReadingListList,
        ReadingListTitlesList,
        ActiveBookList,
        ActivePeriodicalList,
        ActiveBookProfile,
        UserIdentity,
        MyAccountSummary,
        MyAccountPreferences,
        RecommendationProfile,
        UserAccount,
        UserAccountList,
        UserSubscriptionTypeList,
        UserSubscription,
        UserSubscriptionList,
        UserPodList,
        UserSignedAgreement,
        UserSignedAgreementList,
        Organization,
        OrganizationTypeList,
    )
}


def get_schema(name: str) -> type[Message]:
    try:
        return SCHEMAS[name]
    except KeyError:
        raise KeyError(f"No response schema named {name!r}") from None
