class ProfileDataError(Exception):
    """Base class for profile data errors."""


class ConfigurationError(ProfileDataError, ValueError):
    """
    Bad, missing or malformed input for a profile.

    Raised while a profile is constructed; the message names the profile and
    the offending key.
    """


class InterpolationError(ProfileDataError, ValueError):
    """Interpolation table is empty, not 1-D, or x/y lengths differ."""


class RangeExtrapolationWarning(UserWarning):
    """Query lies outside the tabulated range and was linearly extrapolated."""
