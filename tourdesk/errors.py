"""Client-facing error types for tourdesk.

Each error carries the HTTP status it maps to and a message that is safe to
return verbatim in an `{"error": message}` body.
"""


class TourDeskError(Exception):
    """Base class for errors reported to API clients."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailed(TourDeskError):
    """Malformed or missing input."""

    status_code = 400


class EmailTaken(TourDeskError):
    """Signup with an email that already belongs to a user."""

    status_code = 400

    def __init__(self, message: str = "Email already in use"):
        super().__init__(message)


class InvalidCredentials(TourDeskError):
    """Login failed. Same message whether the email or the password was wrong."""

    status_code = 400

    def __init__(self, message: str = "Incorrect email or password"):
        super().__init__(message)


class Unauthorized(TourDeskError):
    """Missing, invalid or expired token, or a token for an unknown user."""

    status_code = 401

    def __init__(self, message: str = "Request is not authorized"):
        super().__init__(message)


class NotFound(TourDeskError):
    """Resource absent, or owned by someone other than the caller."""

    status_code = 404
