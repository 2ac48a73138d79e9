from __future__ import annotations
from typing import Any, Callable, ClassVar, Iterator, Tuple
from numpy import ndarray
import numpy as np
from ..types.color_types import ColorSpace, Scalar, ScalarVector, is_hue_space
from ..utils import get_dimension


def _channel_property(index: int, name: str) -> property:
    return property(lambda self: self._value[index], doc=f"The '{name}' channel.")


class ColorBase:
    """
    Immutable color value: a fixed set of named float channels.

    Subclasses declare ``mode`` and ``channels``; a read-only property is
    generated for every channel name. Instances can be built positionally,
    by channel name, from a sequence or from another color (which is
    converted into this space).
    """
    __slots__ = ('_value', '_is_frozen')

    mode:         ClassVar[ColorSpace]
    channels:     ClassVar[Tuple[str, ...]] = ()
    num_channels: ClassVar[int] = 0
    convert: Callable[..., ColorBase]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.num_channels = len(cls.channels)
        for index, name in enumerate(cls.__dict__.get('channels', ())):
            setattr(cls, name, _channel_property(index, name))

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __init__(self, *values: Any, **fields: Scalar) -> None:
        # ---- Single argument: another color or a whole sequence ----
        if len(values) == 1 and not fields:
            value = values[0]
            if isinstance(value, ColorBase):
                if value.mode != self.mode:
                    value = value.convert(self.mode)
                values = value.value
            elif isinstance(value, (tuple, list, ndarray)):
                values = tuple(value)

        # ---- Named channels ----
        if fields:
            unknown = sorted(set(fields) - set(self.channels))
            if unknown:
                raise TypeError(f"{self.__class__.__name__} got unexpected channel(s): {', '.join(unknown)}")
            given = dict(zip(self.channels, values))
            repeated = sorted(given.keys() & fields.keys())
            if repeated:
                raise TypeError(f"{self.__class__.__name__} got multiple values for: {', '.join(repeated)}")
            given.update(fields)
            missing = [name for name in self.channels if name not in given]
            if missing:
                raise ValueError(f"{self.__class__.__name__} missing channel(s): {', '.join(missing)}")
            values = tuple(given[name] for name in self.channels)

        if get_dimension(values) != self.num_channels:
            raise ValueError(
                f"{self.mode.value} expects {self.num_channels} channels {self.channels}, got {len(values)}"
            )

        # safe assignment; __setattr__ still allows it during init
        self._value = tuple(float(v) for v in values)

        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ScalarVector:
        return self._value

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return is_hue_space(self.mode)

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index: int) -> float:
        return self._value[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        body = ", ".join(f"{name}={v!r}" for name, v in zip(self.channels, self._value))
        return f"{self.__class__.__name__}({body})"

    def __reduce__(self):
        return (self.__class__, self._value)

    def replace(self, **changes: Scalar) -> ColorBase:
        """Return a copy with the given channels replaced."""
        return self.__class__(**{**dict(zip(self.channels, self._value)), **changes})

    def to_array(self) -> ndarray:
        return np.array(self._value, dtype=float)


def build_registry(*classes: type[ColorBase]) -> dict[ColorSpace, type[ColorBase]]:
    return {
        cls.mode: cls
        for cls in classes
    }
