"""
Store definitions: which schema, label and messages belong to a store key.
"""

import enum
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple, Type

from pydantic import BaseModel

from leaddesk.core.exceptions import NotFoundError
from leaddesk.core.utils import humanize_field_name


class StoreKind(str, enum.Enum):
    """How a store is persisted"""

    LIST = "list"  # JSON array of records with ids
    PROFILE = "profile"  # one JSON object


@dataclass(frozen=True)
class StoreDefinition:
    key: str
    schema: Type[BaseModel]
    label: str
    kind: StoreKind = StoreKind.LIST
    confirm_message: str = "Do you want to save the details?"
    saved_message: Optional[str] = None
    delete_message: str = "You will not be able to recover this entry!"
    search_fields: Tuple[str, ...] = ()

    @property
    def success_message(self) -> str:
        return self.saved_message or f"{self.label} details have been saved successfully."

    def default_values(self) -> Dict[str, Any]:
        """Blank draft: schema defaults, empty strings for required fields."""
        values: Dict[str, Any] = {}
        for name, field in self.schema.model_fields.items():
            key = field.alias or name
            if field.is_required():
                values[key] = ""
            else:
                values[key] = field.get_default(call_default_factory=True)
        return values

    def field_title(self, name: str) -> str:
        field = self.schema.model_fields.get(name)
        if field is not None and field.title:
            return field.title
        return humanize_field_name(name)


class StoreRegistry:
    """Lookup of store definitions by key."""

    def __init__(self, definitions: Iterable[StoreDefinition] = ()):
        self._definitions: Dict[str, StoreDefinition] = {}
        for definition in definitions:
            self.register(definition)

    def register(self, definition: StoreDefinition) -> StoreDefinition:
        if definition.key in self._definitions:
            raise ValueError(f"Store '{definition.key}' is already registered")
        self._definitions[definition.key] = definition
        return definition

    def get(self, key: str) -> StoreDefinition:
        """
        Raises:
            NotFoundError: If no store is registered under key
        """
        definition = self._definitions.get(key)
        if definition is None:
            raise NotFoundError("Store", key)
        return definition

    def all(self) -> List[StoreDefinition]:
        return list(self._definitions.values())

    def __contains__(self, key: str) -> bool:
        return key in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)
