from datetime import datetime
from typing import Any, Optional

from pydantic import ConfigDict, Field, PrivateAttr

from . import SnakeCaseBaseModel


class PushRuleOptionsModel(SnakeCaseBaseModel):
    # Values are sent as given: no str to bool/int coercion
    model_config = ConfigDict(extra="forbid", strict=True)

    commit_message_regex: Optional[str] = None
    branch_name_regex: Optional[str] = None
    deny_delete_tag: Optional[bool] = None
    member_check: Optional[bool] = None
    prevent_secrets: Optional[bool] = None
    author_email_regex: Optional[str] = None
    file_name_regex: Optional[str] = None
    max_file_size_mb: Optional[int] = Field(None, alias="max_file_size")


AddPushRuleOptionsModel = PushRuleOptionsModel
EditPushRuleOptionsModel = PushRuleOptionsModel


class PushRuleModel(SnakeCaseBaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    project_id: int
    commit_message_regex: Optional[str] = None
    branch_name_regex: Optional[str] = None
    deny_delete_tag: Optional[bool] = None
    created_at: Optional[datetime] = None
    member_check: Optional[bool] = None
    prevent_secrets: Optional[bool] = None
    author_email_regex: Optional[str] = None
    file_name_regex: Optional[str] = None
    max_file_size_mb: Optional[int] = Field(None, alias="max_file_size")

    _response: Any = PrivateAttr(default=None)

    @property
    def response(self):
        """The APIResponse this push rule was read from (status code, headers)"""
        return self._response

    def __str__(self):
        return self.model_dump_json()
