"""Intrinsic vocabulary - tag to literal mapping.

The host may extend the table; the engine only looks tags up.

YAML form:
    literals:
      indent: "  "
      semi: ";"
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from rendertree.engine.context import Context, create_context
from rendertree.exceptions import ConfigError, InvalidComponent

DEFAULT_LITERALS: dict[str, str] = {
    "br": "\n",
    "lb": "{",
    "rb": "}",
}


class IntrinsicTable(BaseModel):
    """Immutable mapping from intrinsic tag to literal text."""

    model_config = ConfigDict(frozen=True)

    literals: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_LITERALS))

    def lookup(self, tag: str) -> str:
        try:
            return self.literals[tag]
        except KeyError:
            raise InvalidComponent(tag, f"Unknown intrinsic tag: '{tag}'") from None

    def extend(self, **literals: str) -> IntrinsicTable:
        """Return a new table with ``literals`` added or overridden."""
        return IntrinsicTable(literals={**self.literals, **literals})

    def __contains__(self, tag: object) -> bool:
        return tag in self.literals


IntrinsicsContext: Context[IntrinsicTable] = create_context(IntrinsicTable(), name="intrinsics")


def _from_data(data: Any, source: str) -> IntrinsicTable:
    if data is None:
        return IntrinsicTable()
    if not isinstance(data, dict):
        raise ConfigError(f"{source}: expected a mapping, got {type(data).__name__}")

    try:
        extra = IntrinsicTable(literals=data.get("literals") or {})
    except ValidationError as e:
        raise ConfigError(f"{source}: {e}") from e
    return IntrinsicTable().extend(**extra.literals)


def load_intrinsics(path: str | Path) -> IntrinsicTable:
    """Load an intrinsic table from a YAML file, merged over the defaults."""
    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"{path}: {e}") from e
    return _from_data(data, str(path))


def load_intrinsics_from_string(content: str) -> IntrinsicTable:
    """Load an intrinsic table from a YAML string."""
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"<string>: {e}") from e
    return _from_data(data, "<string>")
