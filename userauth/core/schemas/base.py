from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    # Wire format is camelCase (accessToken, totalCount); attributes stay snake_case.
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
