"""Profile aggregate: personal and display data for an account."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from datetime import date, datetime
from typing import Any, Mapping
from uuid import UUID

from profilehub.domain.profile.services.completeness import (
    calculate_profile_completeness,
)
from profilehub.domain.profile.value_objects import (
    EmergencyContact,
    Gender,
    Location,
    MediaReference,
    NotificationPreferences,
    ProfilePrivacy,
    SocialLinks,
)
from profilehub.domain.shared.dotted_path import iter_leaf_changes, replace_path
from profilehub.domain.shared.exceptions import PathNotFoundError, ValidationError
from profilehub.domain.shared.time import utc_now, utc_today

BIO_MAX_LENGTH = 500


@dataclass
class Profile:
    """Profile aggregate, keyed by account_id (one per account).

    ``completeness_percent`` is derived; callers recompute it with
    :meth:`recalculate_completeness` before persisting.
    """

    account_id: UUID
    bio: str = ""
    date_of_birth: date | None = None
    gender: Gender = Gender.PREFER_NOT_TO_SAY
    location: Location = field(default_factory=Location)
    social_links: SocialLinks = field(default_factory=SocialLinks)
    emergency_contact: EmergencyContact = field(default_factory=EmergencyContact)
    profile_picture: MediaReference | None = None
    cover_photo: MediaReference | None = None
    privacy: ProfilePrivacy = field(default_factory=ProfilePrivacy)
    notification_prefs: NotificationPreferences = field(
        default_factory=NotificationPreferences
    )
    custom_fields: dict[str, Any] = field(default_factory=dict)
    view_count: int = 0
    completeness_percent: int = 0
    last_profile_update: datetime | None = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    # Fields a partial update may touch. Media references and counters
    # have dedicated operations.
    UPDATABLE_FIELDS = frozenset(
        {
            "bio",
            "date_of_birth",
            "gender",
            "location",
            "social_links",
            "emergency_contact",
            "privacy",
            "notification_prefs",
            "custom_fields",
        }
    )

    def __post_init__(self):
        if self.bio is None:
            self.bio = ""
        if len(self.bio) > BIO_MAX_LENGTH:
            msg = f"bio cannot exceed {BIO_MAX_LENGTH} characters"
            raise ValidationError(msg, details={"field": "bio"})
        if self.date_of_birth is not None and self.date_of_birth > utc_today():
            msg = "date_of_birth cannot be in the future"
            raise ValidationError(msg, details={"field": "date_of_birth"})
        if self.view_count < 0:
            msg = f"view_count cannot be negative: {self.view_count}"
            raise ValidationError(msg, details={"field": "view_count"})

    @classmethod
    def default(cls, account_id: UUID) -> Profile:
        """Create an empty profile for an account."""
        return cls(account_id=account_id)

    def apply_update(self, changes: Mapping[str, Any]) -> None:
        """Merge a partial update into this profile.

        Nested groups merge field by field, so ``{"location": {"city": "X"}}``
        keeps the stored country. Completeness is not recomputed here.

        Raises
        ------
        ValidationError
            If a key is unknown or not updatable, or a value does not fit
        """
        for key in changes:
            if key not in self.UPDATABLE_FIELDS:
                msg = f"Unknown or read-only profile field: {key}"
                raise ValidationError(msg, details={"field": key})

        try:
            updated = self
            for path, value in iter_leaf_changes(Profile, changes):
                if path == "bio" and value is None:
                    value = ""
                updated = replace_path(updated, path, value)
        except PathNotFoundError as e:
            msg = f"Unknown profile field: {e.path}"
            raise ValidationError(msg, details={"field": e.path}) from e

        for f in fields(self):
            setattr(self, f.name, getattr(updated, f.name))

    def recalculate_completeness(self) -> int:
        """Recompute derived fields before persistence."""
        now = utc_now()
        self.completeness_percent = calculate_profile_completeness(self)
        self.last_profile_update = now
        self.updated_at = now
        return self.completeness_percent

    def set_profile_picture(self, picture: MediaReference) -> UUID | None:
        """Replace the profile picture, returning the superseded file id."""
        old = self.profile_picture
        self.profile_picture = self._stamped(picture)
        return self._superseded_file_id(old, picture)

    def set_cover_photo(self, photo: MediaReference) -> UUID | None:
        """Replace the cover photo, returning the superseded file id."""
        old = self.cover_photo
        self.cover_photo = self._stamped(photo)
        return self._superseded_file_id(old, photo)

    def increment_views(self) -> int:
        self.view_count += 1
        return self.view_count

    @staticmethod
    def _stamped(reference: MediaReference) -> MediaReference:
        if reference.uploaded_at is None:
            return replace(reference, uploaded_at=utc_now())
        return reference

    @staticmethod
    def _superseded_file_id(
        old: MediaReference | None,
        new: MediaReference,
    ) -> UUID | None:
        if old is None or old.file_id is None or old.file_id == new.file_id:
            return None
        return old.file_id
