from profilehub.domain.profile.aggregates.profile import BIO_MAX_LENGTH, Profile

__all__ = ["BIO_MAX_LENGTH", "Profile"]
