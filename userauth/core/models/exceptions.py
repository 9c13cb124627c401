class AuthError(Exception):
    """Base exception for recoverable authentication outcomes."""

    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class DuplicateEmailError(AuthError):
    """Exception raised when registering an email that is already taken."""

    def __init__(self, message: str = "User with this email already exists"):
        super().__init__(message, status_code=400)


class InvalidCredentialsError(AuthError):
    """Exception raised when no user matches the given email and password."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, status_code=401)


class InvalidTokenError(AuthError):
    """Exception raised when a bearer token fails verification."""

    def __init__(self, message: str = "Invalid access token"):
        super().__init__(message, status_code=401)


class ConfigurationError(Exception):
    """Exception raised when required configuration is missing at startup."""
    pass


class RecordConflictError(ValueError):
    """Exception raised when an insert violates a store constraint."""
    pass
