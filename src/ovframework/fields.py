"""
Contains a declarative description of the properties of a class. A FieldTable is built once per class from its
type annotations and provides a Field (name, extraction function, type) for each attribute. Binding rules via a
FieldTable avoids typos in attribute names and enables runtime type checks of the bound values.
"""
import operator
import weakref
from dataclasses import dataclass, field
from difflib import get_close_matches
from typing import Any, Callable, ClassVar, Iterator, Optional, get_origin, get_type_hints

from frozendict import frozendict


@dataclass(frozen=True)
class Field:
    """
    Describes a single property: its (attribute) name, how to extract the value and the declared type.
    """

    name: str
    extract: Callable[[Any], Any] = field(compare=False)
    display_name: Optional[str] = None
    attribute_type: Any = Any

    @classmethod
    def attribute(cls, name: str, attribute_type: Any = Any, display_name: Optional[str] = None) -> "Field":
        """Creates a Field reading the attribute `name`"""
        return cls(name, operator.attrgetter(name), display_name=display_name, attribute_type=attribute_type)


class FieldTable:
    """
    Maps the attribute names of a class onto Field objects. Use `FieldTable.of` to create (or get the cached) table of
    a class:
    ```
    fields = FieldTable.of(Message)
    validator.rule_for(fields.subject).not_empty()
    ```
    """

    _cache: ClassVar["weakref.WeakKeyDictionary[type, FieldTable]"] = weakref.WeakKeyDictionary()

    def __init__(self, owner: type, fields: dict[str, Field] | frozendict[str, Field]):
        # weak, otherwise the cached table would keep its owner alive
        self._owner_ref = weakref.ref(owner)
        self.fields: frozendict[str, Field] = fields if isinstance(fields, frozendict) else frozendict(fields)

    @property
    def owner(self) -> type:
        """The class described by this table"""
        owner = self._owner_ref()
        assert owner is not None, "The owner of a FieldTable has been garbage collected"
        return owner

    @staticmethod
    def of(owner: type, **display_names: str) -> "FieldTable":
        """
        Builds the FieldTable of `owner` from its type annotations (including the ones of base classes).
        `ClassVar` annotations and names starting with an underscore are skipped.
        Keyword arguments override the display names of single fields.
        The table without display name overrides is cached per class as long as the class is alive.
        """
        if not display_names and owner in FieldTable._cache:
            return FieldTable._cache[owner]
        type_hints = {
            name: attribute_type
            for name, attribute_type in get_type_hints(owner).items()
            if not name.startswith("_") and get_origin(attribute_type) is not ClassVar
        }
        unknown = set(display_names) - set(type_hints)
        if unknown:
            raise ValueError(f"{owner.__name__} has no attribute(s) {sorted(unknown)}")
        table = FieldTable(
            owner,
            {
                name: Field.attribute(name, attribute_type, display_name=display_names.get(name))
                for name, attribute_type in type_hints.items()
            },
        )
        if not display_names:
            FieldTable._cache[owner] = table
        return table

    def _not_found_message(self, name: str) -> str:
        message = f"{self.owner.__name__} has no field '{name}'."
        suggestions = get_close_matches(name, list(self.fields), n=3, cutoff=0.6)
        if suggestions:
            message += f" Did you mean: {', '.join(suggestions)}?"
        return message

    def __getitem__(self, name: str) -> Field:
        try:
            return self.fields[name]
        except KeyError as error:
            raise KeyError(self._not_found_message(name)) from error

    def __getattr__(self, name: str) -> Field:
        if name.startswith("__") or name in ("_owner_ref", "fields"):
            raise AttributeError(name)
        try:
            return self.fields[name]
        except KeyError as error:
            raise AttributeError(self._not_found_message(name)) from error

    def __contains__(self, name: object) -> bool:
        return name in self.fields

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields.values())

    def __len__(self):
        return len(self.fields)

    def __eq__(self, other):
        return isinstance(other, FieldTable) and self.owner is other.owner and self.fields == other.fields

    def __hash__(self):
        return hash(self.owner) + hash(self.fields)

    def __repr__(self):
        return f"FieldTable({self.owner.__name__}, {list(self.fields)})"
