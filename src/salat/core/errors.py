from __future__ import annotations


class SalatError(Exception):
    """Base error."""


class InvalidGeometryError(SalatError, ValueError):
    """
    Raised when the sun never reaches the requested altitude on that day.

    This happens at high latitudes around the solstices (midnight sun or
    polar night for the given angle): the cosine of the hour angle falls
    outside [-1, 1] and no clock time exists for the event.
    """

    def __init__(self, angle: float, latitude: float, declination: float, cos_hour_angle: float):
        self.angle = angle
        self.latitude = latitude
        self.declination = declination
        self.cos_hour_angle = cos_hour_angle
        super().__init__(
            f"sun never reaches {angle:+.3f} deg at latitude {latitude:.4f} "
            f"(declination {declination:.4f}, cos H = {cos_hour_angle:.4f})"
        )


class MethodExistsError(SalatError, KeyError):
    """Raised when registering a calculation method under a name already taken."""
