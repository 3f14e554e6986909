"""Exceptions raised while resolving credentials."""


class CredentialError(Exception):
    """Base exception for credential-related errors."""

    pass


class CredentialNotFoundError(CredentialError):
    """A required credential could not be found in any source.

    Attributes:
        env_var_name: The environment variable that was checked, if any.
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """A credential file could not be read."""

    pass
