from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class EnvEntry(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., description="Normalized variable name, e.g. APP_TIMEOUT")
    usage: str = Field("", description="Human-readable usage text")
    default_text: str = Field(..., description="Default value rendered at registration")
    value: Any = Field(..., exclude=True, description="Typed value handle")

    @property
    def is_zero_default(self) -> bool:
        """True when the default renders like the zero value of its type."""
        return self.default_text == getattr(self.value, "zero_text", "")
