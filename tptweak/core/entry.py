"""
Tweak entry model.

An entry names one configurable value by its category/section/cell path
and says what kind of control it is. Entries hold no value themselves;
every accessor goes through a TweakStore.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Optional, Tuple, Union

if TYPE_CHECKING:
    from .store import TweakStore


@dataclass(frozen=True)
class Switch:
    """On/off toggle."""
    default: bool = False

    value_type: ClassVar[Any] = bool

    @property
    def default_value(self) -> bool:
        return self.default


@dataclass(frozen=True)
class Action:
    """Button that runs a callback. Has no stored value."""
    callback: Callable[[], None]

    value_type: ClassVar[Any] = None

    @property
    def default_value(self) -> None:
        return None

    def trigger(self) -> None:
        self.callback()


@dataclass(frozen=True)
class StringChoice:
    """Picker over a fixed list of strings."""
    options: Tuple[str, ...]
    selected: str

    value_type: ClassVar[Any] = str

    def __post_init__(self):
        object.__setattr__(self, "options", tuple(self.options))

    @property
    def default_value(self) -> str:
        return self.selected


@dataclass(frozen=True)
class NumberChoice:
    """Picker over a fixed list of numbers."""
    options: Tuple[float, ...]
    selected: float

    value_type: ClassVar[Any] = float

    def __post_init__(self):
        object.__setattr__(self, "options", tuple(float(o) for o in self.options))
        object.__setattr__(self, "selected", float(self.selected))

    @property
    def default_value(self) -> float:
        return self.selected


TweakKind = Union[Switch, Action, StringChoice, NumberChoice]


def make_identifier(category: str, section: str, cell: str) -> str:
    """
    Build the storage key for a category/section/cell path.

    Components are joined with "/". Separator characters inside a
    component are percent-escaped so different paths never share a key.
    """
    return "/".join(_escape(part) for part in (category, section, cell))


def _escape(part: str) -> str:
    return part.replace("%", "%25").replace("/", "%2F").replace("\\", "%5C")


@dataclass(frozen=True)
class TweakEntry:
    """
    One tweakable value.

    Attributes:
        category: Top-level grouping shown on the first tweak screen
        section: Grouping of cells within a category
        cell: Name of the row within a section
        kind: Switch, Action, StringChoice or NumberChoice
        footer: Optional note shown under the section
    """
    category: str
    section: str
    cell: str
    kind: TweakKind
    footer: Optional[str] = None

    def __post_init__(self):
        for name in ("category", "section", "cell"):
            if not getattr(self, name):
                raise ValueError(f"TweakEntry {name} must be a non-empty string")

    @property
    def identifier(self) -> str:
        return make_identifier(self.category, self.section, self.cell)

    def get_value(self, store: "TweakStore", value_type: Any = None) -> Any:
        """
        Read the stored value for this entry.

        Args:
            store: Store holding tweak values
            value_type: Type to decode as. Defaults to the kind's value type.

        Returns:
            The stored value, or None if nothing is stored, it doesn't
            decode as value_type, or the store is not in debug mode
        """
        if value_type is None:
            value_type = self.kind.value_type
        return store.read(value_type, self.identifier)

    def set_value(self, store: "TweakStore", value: Any) -> Any:
        """
        Persist a new value for this entry.

        Returns:
            The value on success, None on failure or outside debug mode
        """
        return store.set(value, self.identifier)

    def remove(self, store: "TweakStore") -> None:
        """Delete the stored value. The entry stays registered."""
        store.remove(self.identifier)

    def register(self, store: "TweakStore") -> None:
        """Add this entry to the store's registry."""
        store.add(self)

    def current_value(self, store: "TweakStore") -> Any:
        """Stored value if there is one, otherwise the kind's default."""
        value = self.get_value(store)
        return self.kind.default_value if value is None else value
