from collections.abc import Mapping
from typing import Union, TYPE_CHECKING

from pydantic import ValidationError

from .api_caller import APIResponse
from .exception import DecodingException
from .models.push_rule import PushRuleModel, PushRuleOptionsModel
from .util import resolve_project_ref

if TYPE_CHECKING:
    from .api_caller import APICaller


class PushRules(object):
    """Push rules of a project: the server side constraints applied to git pushes.

    A project has at most one push rule, so every method targets the same
    `projects/{project}/push_rule` path and only the HTTP verb and payload vary.
    The project is referenced by its numeric ID or its "namespace/name" path.

    Examples:
     - push_rules.get(42)
     - push_rules.create("group/project", prevent_secrets=True)
     - push_rules.update(42, PushRuleOptionsModel(max_file_size_mb=10))
     - push_rules.delete("group/project")

    :param api: The shared API caller
    :type api: APICaller
    """

    def __init__(self, api: "APICaller"):
        self._api = api

    @staticmethod
    def path(pid: Union[int, str]) -> str:
        return f"projects/{resolve_project_ref(pid)}/push_rule"

    @staticmethod
    def _payload(options: PushRuleOptionsModel, fields: Mapping) -> str:
        if options is None:
            options = PushRuleOptionsModel(**fields)
        elif not isinstance(options, PushRuleOptionsModel):
            raise TypeError(
                f"options must be a PushRuleOptionsModel, not {type(options).__name__}"
            )
        elif fields:
            raise TypeError("Use either an options model or keyword fields, not both")
        return options.model_dump_json()

    @staticmethod
    def _to_model(api_response: APIResponse) -> PushRuleModel:
        if not isinstance(api_response.data, Mapping):
            raise DecodingException(
                f"Expected a push rule object, got {type(api_response.data).__name__}"
            )
        try:
            push_rule = PushRuleModel(**api_response.data)
        except ValidationError as e:
            raise DecodingException(f"Invalid push rule in response: {e}") from e
        push_rule._response = api_response
        return push_rule

    def get(
        self, pid: Union[int, str], request_options: Mapping = None
    ) -> PushRuleModel:
        path = self.path(pid)
        api_response = self._api.get(path=path, **(request_options or {}))
        return self._to_model(api_response)

    def create(
        self,
        pid: Union[int, str],
        options: PushRuleOptionsModel = None,
        request_options: Mapping = None,
        **kwargs,
    ) -> PushRuleModel:
        path = self.path(pid)
        payload = self._payload(options, kwargs)
        api_response = self._api.post(
            path=path, data=payload, **(request_options or {})
        )
        return self._to_model(api_response)

    def update(
        self,
        pid: Union[int, str],
        options: PushRuleOptionsModel = None,
        request_options: Mapping = None,
        **kwargs,
    ) -> PushRuleModel:
        path = self.path(pid)
        payload = self._payload(options, kwargs)
        api_response = self._api.put(path=path, data=payload, **(request_options or {}))
        return self._to_model(api_response)

    def delete(
        self, pid: Union[int, str], request_options: Mapping = None
    ) -> APIResponse:
        """Remove the push rule of a project.

        Deleting is idempotent on the server side: it succeeds whether or not
        a push rule exists. Error responses are raised as is.
        Returns the APIResponse of the call.
        """
        path = self.path(pid)
        return self._api.delete(path=path, **(request_options or {}))
