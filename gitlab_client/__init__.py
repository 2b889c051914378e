__version__ = "0.1.0"

from .gitlab_client import GitLabClient
from .push_rules import PushRules
from .models.push_rule import (
    PushRuleModel,
    PushRuleOptionsModel,
    AddPushRuleOptionsModel,
    EditPushRuleOptionsModel,
)
