from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Entity(BaseModel):
    """JSON record exchanged with the client: camelCase on the wire, unknown fields dropped."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='ignore',
        # NaN and Infinity would serialize as bare tokens the client cannot parse.
        allow_inf_nan=False,
    )

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)
