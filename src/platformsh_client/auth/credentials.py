"""Credential and setting resolution for the Platform.sh client.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment variable
3. .env file (python-dotenv, loaded into the environment once)
4. Default value

Example:
    ```python
    from platformsh_client.auth import CredentialResolver

    resolver = CredentialResolver()
    token = resolver.resolve(env_var_name="PLATFORMSH_CLIENT_API_TOKEN", required=True)

    # A token kept in a file, the path coming from the environment
    token = resolver.resolve_from_file(env_var_name="PLATFORMSH_CLIENT_API_TOKEN_FILE")
    ```

API tokens are never logged; only the source they were read from is.
"""

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from platformsh_client.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)


class CredentialResolver:
    """Resolve credentials and settings from several sources.

    Args:
        dotenv_path: Path to a .env file. If None, python-dotenv searches
            the current directory and its parents.
        load_dotenv: Whether to load the .env file at all.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for credential resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            # Only ever attempted once
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        secret: bool = True,
    ) -> str | None:
        """Resolve a credential or setting.

        Args:
            value: Explicit value; wins over every other source.
            env_var_name: Environment variable to read (also covers .env values).
            default: Used when no other source has a value.
            required: Raise CredentialNotFoundError instead of returning None.
            secret: Mask the value in log messages. Disable for plain settings.

        Returns:
            The resolved value, or None if not found and not required.

        Raises:
            CredentialNotFoundError: If required and not found in any source.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = "***" if secret else result
            logger.debug(f"Resolved {env_var_name or 'value'} from {source}: {shown}")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a credential from a file.

        The path may be given directly or through an environment variable, and
        may use ``~`` and ``$VAR``. Surrounding whitespace is stripped.

        Raises:
            CredentialFileError: If required and the file cannot be read.
        """
        path_to_use = None

        if file_path is not None:
            path_to_use = str(file_path)
        elif env_var_name:
            path_to_use = self.resolve(env_var_name=env_var_name, secret=False)

        if not path_to_use:
            if required:
                error_msg = "No file path provided for credential resolution"
                if env_var_name:
                    error_msg += f" (env var '{env_var_name}' not set)"
                raise CredentialFileError(error_msg)
            return None

        path_obj = Path(os.path.expanduser(os.path.expandvars(path_to_use)))

        try:
            content = path_obj.read_text().strip()
        except FileNotFoundError:
            error_msg = f"Credential file not found: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.debug(error_msg)
            return None
        except PermissionError:
            error_msg = f"Permission denied reading credential file: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.warning(error_msg)
            return None
        except OSError as e:
            error_msg = f"Error reading credential file {path_obj}: {e}"
            if required:
                raise CredentialFileError(error_msg) from e
            logger.warning(error_msg)
            return None

        logger.debug(f"Resolved credential from file: {path_obj} (***)")
        return content
