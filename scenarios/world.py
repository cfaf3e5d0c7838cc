# scenarios/world.py
from typing import Dict
from domain.geometry.tuples import Tuple


class UnknownVariableError(KeyError):
    """A step refers to a name that no earlier step has bound."""

    def __str__(self) -> str:
        return f"Variable '{self.args[0]}' is not defined in this scenario"


class World:
    """Named tuples shared by the steps of a single scenario."""

    def __init__(self):
        self.tuples: Dict[str, Tuple] = {}

    def __getitem__(self, name: str) -> Tuple:
        try:
            return self.tuples[name]
        except KeyError:
            raise UnknownVariableError(name) from None

    def __setitem__(self, name: str, value: Tuple) -> None:
        self.tuples[name] = value

    def __contains__(self, name: str) -> bool:
        return name in self.tuples
