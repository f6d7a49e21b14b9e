"""Declarative tool contract for agent frameworks.

A tool pairs an id and description with pydantic input and output models and
an async ``execute`` callable that receives the validated input.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from mergedprs.exceptions import ToolInputError

InputT = TypeVar("InputT", bound=BaseModel)
OutputT = TypeVar("OutputT", bound=BaseModel)


@dataclass(frozen=True)
class Tool(Generic[InputT, OutputT]):
    id: str
    description: str
    input_model: type[InputT]
    output_model: type[OutputT]
    execute: Callable[[InputT], Awaitable[OutputT]]

    def input_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema(by_alias=True)

    def output_schema(self) -> dict[str, Any]:
        return self.output_model.model_json_schema(by_alias=True, mode="serialization")

    def describe(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "inputSchema": self.input_schema(),
            "outputSchema": self.output_schema(),
        }

    async def run(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        """Validate *payload*, execute the tool, and return its JSON-ready output.

        Raises:
            ToolInputError: If *payload* does not match the input schema.
        """
        try:
            context = self.input_model.model_validate(dict(payload))
        except ValidationError as exc:
            raise ToolInputError(f"invalid input for tool {self.id}: {exc}") from exc

        result = await self.execute(context)
        if not isinstance(result, self.output_model):
            result = self.output_model.model_validate(result)
        return result.model_dump(mode="json", by_alias=True)
