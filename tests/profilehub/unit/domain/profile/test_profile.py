"""Tests for the Profile aggregate and its completeness score."""

from datetime import date, timedelta
from uuid import uuid4

import pytest

from profilehub.domain.profile import (
    BIO_MAX_LENGTH,
    Gender,
    Location,
    MediaReference,
    Profile,
    ProfileVisibility,
    calculate_profile_completeness,
    percent_of,
)
from profilehub.domain.shared.exceptions import ValidationError


@pytest.fixture
def profile() -> Profile:
    return Profile.default(uuid4())


class TestProfileDefaults:
    def test_default_profile_is_empty(self, profile):
        assert profile.bio == ""
        assert profile.gender == Gender.PREFER_NOT_TO_SAY
        assert profile.location == Location()
        assert profile.view_count == 0
        assert profile.completeness_percent == 0

    def test_rejects_long_bio(self):
        with pytest.raises(ValidationError):
            Profile(account_id=uuid4(), bio="x" * (BIO_MAX_LENGTH + 1))

    def test_rejects_future_birth_date(self):
        with pytest.raises(ValidationError, match="future"):
            Profile(account_id=uuid4(), date_of_birth=date.today() + timedelta(days=2))


class TestApplyUpdate:
    def test_nested_groups_merge_field_by_field(self, profile):
        profile.apply_update({"location": {"city": "London", "country": "UK"}})

        profile.apply_update({"location": {"city": "Paris"}})

        assert profile.location.city == "Paris"
        assert profile.location.country == "UK"

    def test_coerces_enums_and_dates(self, profile):
        profile.apply_update(
            {
                "gender": "female",
                "date_of_birth": "1815-12-10",
                "privacy": {"visibility": "private"},
            }
        )

        assert profile.gender is Gender.FEMALE
        assert profile.date_of_birth == date(1815, 12, 10)
        assert profile.privacy.visibility is ProfileVisibility.PRIVATE

    def test_unknown_top_level_field_is_rejected(self, profile):
        with pytest.raises(ValidationError, match="nickname"):
            profile.apply_update({"nickname": "ada"})

    def test_read_only_field_is_rejected(self, profile):
        with pytest.raises(ValidationError):
            profile.apply_update({"view_count": 99})

    def test_unknown_nested_field_is_a_validation_error(self, profile):
        with pytest.raises(ValidationError, match="location.planet"):
            profile.apply_update({"location": {"planet": "Mars"}})

    def test_failed_update_leaves_profile_unchanged(self, profile):
        with pytest.raises(ValidationError):
            profile.apply_update({"bio": "new", "gender": "robot"})

        assert profile.bio == ""

    def test_bio_length_is_checked_on_update(self, profile):
        with pytest.raises(ValidationError):
            profile.apply_update({"bio": "x" * (BIO_MAX_LENGTH + 1)})

    def test_null_bio_clears_it(self, profile):
        profile.apply_update({"bio": "Mathematician"})

        profile.apply_update({"bio": None})

        assert profile.bio == ""

    def test_does_not_recompute_completeness(self, profile):
        profile.apply_update({"bio": "Mathematician"})

        assert profile.completeness_percent == 0


class TestCompleteness:
    def test_empty_profile_scores_zero(self, profile):
        assert calculate_profile_completeness(profile) == 0

    def test_counts_each_tracked_field(self, profile):
        profile.apply_update(
            {
                "bio": "Mathematician",
                "location": {"city": "London"},
                "social_links": {"linkedin": "https://linkedin.com/in/ada"},
            }
        )

        # 3 of 6 tracked fields
        assert calculate_profile_completeness(profile) == 50

    def test_whitespace_does_not_count(self, profile):
        profile.apply_update({"bio": "   "})

        assert calculate_profile_completeness(profile) == 0

    def test_recalculate_stamps_update_time(self, profile):
        profile.apply_update({"bio": "Mathematician"})

        percent = profile.recalculate_completeness()

        assert percent == 17
        assert profile.completeness_percent == 17
        assert profile.last_profile_update is not None

    @pytest.mark.parametrize(
        ("filled", "total", "expected"),
        [(0, 8, 0), (1, 8, 13), (3, 8, 38), (5, 8, 63), (8, 8, 100), (1, 0, 0)],
    )
    def test_percent_rounds_halves_up(self, filled, total, expected):
        assert percent_of(filled, total) == expected


class TestMedia:
    def test_first_picture_supersedes_nothing(self, profile):
        stale = profile.set_profile_picture(MediaReference(file_id=uuid4(), url="u"))

        assert stale is None
        assert profile.profile_picture.uploaded_at is not None

    def test_replacing_picture_returns_old_file_id(self, profile):
        old_id = uuid4()
        profile.set_profile_picture(MediaReference(file_id=old_id, url="old"))

        stale = profile.set_profile_picture(MediaReference(file_id=uuid4(), url="new"))

        assert stale == old_id
        assert profile.profile_picture.url == "new"

    def test_same_file_is_not_stale(self, profile):
        file_id = uuid4()
        profile.set_cover_photo(MediaReference(file_id=file_id, url="a"))

        assert profile.set_cover_photo(MediaReference(file_id=file_id, url="b")) is None

    def test_increment_views(self, profile):
        profile.increment_views()

        assert profile.increment_views() == 2
