# utils/base_model.py
from typing import TypeVar, Any
from pydantic import BaseModel, ConfigDict

T = TypeVar('T', bound='ImmutableModel')


class ImmutableModel(BaseModel):
    """
    Base class for value types that must never change after construction.

    Instances are frozen, so they compare and hash by field values and can be
    shared freely. Operations that "modify" a value build a new one instead,
    either directly or via with_changes().
    """
    model_config = ConfigDict(frozen=True)

    def with_changes(self: T, **changes: Any) -> T:
        """
        Create a new instance with the given fields replaced.

        Args:
            **changes: Field names mapped to their new values

        Returns:
            New validated instance of the same class

        Raises:
            ValueError: If a name is not a field of this model
        """
        fields = type(self).model_fields
        for key in changes:
            if key not in fields:
                raise ValueError(f"Invalid field: {key}")

        # Shallow dump keeps nested models as instances rather than dicts
        data = {name: getattr(self, name) for name in fields}
        data.update(changes)
        return type(self).model_validate(data)
