import inflection
from pydantic import BaseModel, ConfigDict


class SnakeCaseBaseModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=inflection.underscore, populate_by_name=True
    )

    def __init__(self, **kwargs):
        underscored_kwargs = {
            inflection.underscore(key): value for key, value in kwargs.items()
        }
        super().__init__(**underscored_kwargs)

    # Sparse dumps: unset and null fields never reach the wire
    def model_dump(
        self, *, by_alias=True, exclude_unset=True, exclude_none=True, **kwargs
    ):
        return super().model_dump(
            by_alias=by_alias,
            exclude_unset=exclude_unset,
            exclude_none=exclude_none,
            **kwargs,
        )

    def model_dump_json(
        self, *, by_alias=True, exclude_unset=True, exclude_none=True, **kwargs
    ):
        return super().model_dump_json(
            by_alias=by_alias,
            exclude_unset=exclude_unset,
            exclude_none=exclude_none,
            **kwargs,
        )


from .push_rule import (
    PushRuleModel,
    PushRuleOptionsModel,
    AddPushRuleOptionsModel,
    EditPushRuleOptionsModel,
)
