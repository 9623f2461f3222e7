"""DECDLD parameter list.

The font-definition sequence starts with up to eight positional,
optional, semicolon-separated decimal parameters:

    Pfn;Pcn;Pe;Pcmw;Pss;Pu;Pcmh;Pcss

A ParameterSet remembers the exact text it was parsed from and how many
slots that text had, so an unmodified set serializes unchanged and a
modified one keeps its trailing empty slots.
"""

from collections.abc import Sequence

PARAMETER_NAMES: tuple[str, ...] = ("pfn", "pcn", "pe", "pcmw", "pss", "pu", "pcmh", "pcss")
SLOT_COUNT = len(PARAMETER_NAMES)


class ParameterSet:
    """Fixed eight-slot array of optional integers with a remembered length.

    ``serialized_length`` is the number of slots emitted by ``text``. It
    starts at the number of slots present in the parsed text and only
    grows, when a value is stored past it.

    Example:
        params = ParameterSet.parse("1;1;2;;;2")
        params.pe = None
        params.text  # "1;1;;;;2"
    """

    def __init__(self) -> None:
        self._values: list[int | None] = [None] * SLOT_COUNT
        # Slots past the eighth are carried verbatim and never interpreted
        self._overflow: list[int | None] = []
        self._text = ""
        self.serialized_length = 0

    @classmethod
    def parse(cls, text: str) -> "ParameterSet":
        """Parse a parameter string.

        Characters other than digits and ``;`` are ignored when reading
        values but kept in ``text`` until the set is modified.

        Args:
            text: Parameter string as found between the introducer and ``{``

        Returns:
            ParameterSet whose ``text`` equals ``text``
        """
        values: list[int | None] = []
        value: int | None = None
        for ch in text:
            if "0" <= ch <= "9":
                value = (value or 0) * 10 + ord(ch) - ord("0")
            elif ch == ";":
                values.append(value)
                value = None
        values.append(value)

        params = cls()
        params._values[: min(len(values), SLOT_COUNT)] = values[:SLOT_COUNT]
        params._overflow = values[SLOT_COUNT:]
        params.serialized_length = len(values)
        params._text = text
        return params

    @classmethod
    def from_values(cls, values: Sequence[int | None]) -> "ParameterSet":
        """Build a parameter set from explicit values.

        Args:
            values: Leading parameter values; the serialized length is
                ``len(values)``

        Returns:
            New ParameterSet
        """
        params = cls()
        params._values[: min(len(values), SLOT_COUNT)] = list(values[:SLOT_COUNT])
        params._overflow = list(values[SLOT_COUNT:])
        params.serialized_length = len(values)
        params._rebuild()
        return params

    @property
    def text(self) -> str:
        """Serialized parameter string."""
        return self._text

    def get(self, index: int) -> int | None:
        """Get a parameter by position."""
        return self._values[index]

    def set(self, index: int, value: int | None) -> None:
        """Set a parameter by position and rebuild the text form."""
        self._values[index] = value
        self._rebuild()

    def values(self) -> tuple[int | None, ...]:
        """Return all eight slots."""
        return tuple(self._values)

    def _rebuild(self) -> None:
        last_used = max(
            (i + 1 for i, value in enumerate(self._values) if value is not None),
            default=0,
        )
        self.serialized_length = max(self.serialized_length, last_used)
        slots = self._values + self._overflow
        self._text = ";".join(
            "" if slots[i] is None else str(slots[i])
            for i in range(self.serialized_length)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterSet):
            return NotImplemented
        return self._text == other._text and self._values == other._values

    def __repr__(self) -> str:
        return f"ParameterSet({self._text!r})"

    @property
    def pfn(self) -> int | None:
        """Font number (target buffer)."""
        return self._values[0]

    @pfn.setter
    def pfn(self, value: int | None) -> None:
        self.set(0, value)

    @property
    def pcn(self) -> int | None:
        """Starting character number."""
        return self._values[1]

    @pcn.setter
    def pcn(self, value: int | None) -> None:
        self.set(1, value)

    @property
    def pe(self) -> int | None:
        """Erase control."""
        return self._values[2]

    @pe.setter
    def pe(self, value: int | None) -> None:
        self.set(2, value)

    @property
    def pcmw(self) -> int | None:
        """Character matrix width (or VT2xx matrix shorthand 2-4)."""
        return self._values[3]

    @pcmw.setter
    def pcmw(self, value: int | None) -> None:
        self.set(3, value)

    @property
    def pss(self) -> int | None:
        """Screen size code."""
        return self._values[4]

    @pss.setter
    def pss(self, value: int | None) -> None:
        self.set(4, value)

    @property
    def pu(self) -> int | None:
        """Font usage (2 means full cell, anything else text)."""
        return self._values[5]

    @pu.setter
    def pu(self, value: int | None) -> None:
        self.set(5, value)

    @property
    def pcmh(self) -> int | None:
        """Character matrix height."""
        return self._values[6]

    @pcmh.setter
    def pcmh(self, value: int | None) -> None:
        self.set(6, value)

    @property
    def pcss(self) -> int | None:
        """Character set size (1 means 96 characters, otherwise 94)."""
        return self._values[7]

    @pcss.setter
    def pcss(self, value: int | None) -> None:
        self.set(7, value)
