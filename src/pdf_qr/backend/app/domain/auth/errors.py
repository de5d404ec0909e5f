class MissingCredentials(Exception):
    """Raised when username or password is empty."""
    pass


class InvalidCredentialsError(Exception):
    """Raised when username/password combination is invalid."""
    pass


class NotAuthenticated(Exception):
    """Raised when a session token is missing, unknown or expired."""
    pass
