"""Enumerated (coded string) value sets accepted by the Bookshare API."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Enumeration:
    name: str
    values: tuple[str, ...]
    default: str | None = None

    def __contains__(self, value: object) -> bool:
        return value in self.values


_TABLE: dict[str, tuple[list[str], str | None]] = {
    "Access": (["private", "shared", "org"], "shared"),
    "AgreementType": (["individual", "volunteer", "sponsor"], "individual"),
    "BrailleFormat": (["refreshable", "embossable"], "embossable"),
    "BrailleGrade": (["grade_1", "grade_2"], "grade_1"),
    "BrailleType": (["automated", "transcribed"], "automated"),
    "ContentWarning": (
        ["contentWarning", "sex", "violence", "drugs", "language", "intolerance", "adult", "unrated"],
        None,
    ),
    "Direction": (["asc", "desc"], "asc"),
    "DirectionRev": (["asc", "desc"], "desc"),
    "DisabilityType": (["visual", "learning", "physical", "nonspecific"], "nonspecific"),
    # The API does not document HTML or TEXT but they exist.
    "FormatType": (
        ["DAISY", "DAISY_SEGMENTED", "DAISY_AUDIO", "BRF", "EPUB3", "PDF", "DOCX", "HTML", "TEXT"],
        "DAISY",
    ),
    "Gender": (["Male", "Female", "Other"], "Other"),
    "NarratorType": (["TTS", "Human"], "Human"),
    "PeriodicalFormatType": (["DAISY", "DAISY_AUDIO", "BRF", "EPUB3"], "DAISY"),
    "ProofOfDisabilitySource": (
        ["schoolVerified", "faxed", "nls", "learningAlly", "partner", "hadley"],
        "schoolVerified",
    ),
    "RoleType": (
        ["individual", "volunteer", "trustedVolunteer", "collectionAssistant", "membershipAssistant"],
        None,
    ),
    # 'emma' may not be honored upstream yet.
    "SiteType": (["bookshare", "cela", "rnib", "emma"], "bookshare"),
    "Timeframe": (["monthly", "entireSubscription"], "monthly"),
    "TitleContentType": (["text", "musicScore"], "text"),
    # -- sort orders --
    "TitleSortOrder": (["relevance", "title", "author", "dateAdded", "copyrightDate"], "title"),
    "HistorySortOrder": (["title", "author", "dateDownloaded"], "title"),
    "MemberSortOrder": (
        [
            "dateAdded", "lastName", "firstName", "email", "userId",
            "district", "school", "grade", "birthDate", "status",
        ],
        "lastName",
    ),
    "MyAssignedSortOrder": (["title", "author"], "title"),
    "AssignedSortOrder": (["title", "author", "assignedBy", "assignedDate", "downloadDate"], "title"),
    "ActiveBookSortOrder": (["title", "author", "dateAdded"], "dateAdded"),
    "PeriodicalSortOrder": (["title"], "title"),
    "EditionSortOrder": (["editionName"], "editionName"),
    # "count" (by title count) is undocumented.
    "MyReadingListSortOrder": (["name", "owner", "dateUpdated", "count"], "name"),
    "ReadingListSortOrder": (["title", "dateAddedToReadingList", "author"], "title"),
}

ENUMERATIONS: dict[str, Enumeration] = {
    name: Enumeration(name=name, values=tuple(values), default=default)
    for name, (values, default) in _TABLE.items()
}


def get_enumeration(name: str) -> Enumeration | None:
    return ENUMERATIONS.get(name)
