"""Testing utilities for code built on the Platform.sh client.

Example:
    ```python
    from platformsh_client.model import Project
    from platformsh_client.testing import MockApi


    def test_missing_project_is_none():
        api = MockApi()
        api.add("GET", "https://eu.platform.sh/api/projects/gone", status_code=404)
        transport = api.transport("https://eu.platform.sh/api/projects/")
        assert Project.get("gone", "", transport) is None
    ```
"""

from platformsh_client.testing.mock_api import MockApi, error_response, hal, json_response

__all__ = ["MockApi", "error_response", "hal", "json_response"]
