"""Argument models shared by the tool modules.

Every tool declares a pydantic model for its arguments. Scalar fields use the
pydantic Strict* types so that e.g. "22" is rejected where a number is
expected, instead of being coerced.
"""
from typing import Annotated, Any, Dict

from pydantic import BaseModel, BeforeValidator, ConfigDict


def _whole_number(value: Any) -> Any:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("Input should be a number")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError("Input should be a whole number")
        return int(value)
    return value


# any JSON number with no fractional part (22 or 22.0), never a string or bool
WholeNumber = Annotated[int, BeforeValidator(_whole_number)]


class ToolArgs(BaseModel):
    """Base for tool argument models. Unknown keys are dropped."""

    model_config = ConfigDict(extra="ignore")

    def payload(self, *exclude: str) -> Dict[str, Any]:
        """Fields the caller actually supplied, as a request body."""
        return self.model_dump(exclude_unset=True, exclude_none=True, exclude=set(exclude) or None)


class NoArgs(ToolArgs):
    pass
