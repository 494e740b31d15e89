from dataclasses import dataclass, field
from typing import Union

# Node types: Integer, Float, Symbol, String, List.
# `pos` is the source offset of the token; it never takes part in equality.

DEFAULT_MAX_DEPTH = 256

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


@dataclass(frozen=True)
class Integer:
    value: int
    pos: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class Float:
    value: float
    pos: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class Symbol:
    name: str
    pos: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class String:
    value: str
    pos: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class List:
    items: tuple = ()
    pos: int = field(default=0, compare=False, repr=False)

    def __post_init__(self):
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]


Node = Union[Integer, Float, Symbol, String, List]


@dataclass
class ReaderConfig:
    max_depth: int = DEFAULT_MAX_DEPTH

    @classmethod
    def from_any(cls, config: Union["ReaderConfig", dict, None]) -> "ReaderConfig":
        """Accept a ReaderConfig, a dict with the same keys, or None for defaults."""
        if config is None:
            return cls()
        if isinstance(config, dict):
            return cls(max_depth=config.get("max_depth", DEFAULT_MAX_DEPTH))
        return config
