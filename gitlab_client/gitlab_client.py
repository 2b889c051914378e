from typing import Optional

from .api_caller import APICaller
from .push_rules import PushRules


class GitLabClient(object):
    """The GitLab Client
    Initialize the session with the API server and expose its resources

    Examples:
     - gitlab_client.push_rules.get(42)
     - gitlab_client.push_rules.delete("my-group/my-project")

    :param token: GitLab personal, project or group access token
    :type token: str
    :param url: GitLab URL. Default: "https://gitlab.com"
    :type url: str
    :param timeout: Default timeout in seconds for every request. Default: no timeout
    :type timeout: float
    """

    def __init__(
        self,
        token: str,
        url: str = "https://gitlab.com",
        timeout: Optional[float] = None,
    ):
        headers = {
            "Content-Type": "application/json",
            "PRIVATE-TOKEN": token,
        }
        self._api = APICaller(
            host=url, base_url="api/v4", headers=headers, timeout=timeout
        )
        self.push_rules = PushRules(api=self._api)
