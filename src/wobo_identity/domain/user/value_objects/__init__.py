"""Value objects for the user domain."""

from wobo_identity.domain.user.value_objects.gender import Gender
from wobo_identity.domain.user.value_objects.user_profile import UserProfile

__all__ = [
    "Gender",
    "UserProfile",
]
