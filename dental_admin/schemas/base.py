"""
Base común de los schemas del cliente.

La API remota habla JSON en camelCase; en Python los campos son snake_case
con alias camelCase. Los `null` que envía la API se descartan para que
apliquen los valores por defecto.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    def to_wire(self, exclude: set[str] | None = None) -> dict[str, Any]:
        """Serializa a JSON de la API remota (camelCase)."""
        return self.model_dump(mode="json", by_alias=True, exclude=exclude)
