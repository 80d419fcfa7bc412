"""Operation modes and the application's fixed strings."""

from __future__ import annotations

from enum import Enum

APPLICATION_NAME = "Time Machine Logs"
APPLICATION_VERSION = "1.0"
APPLICATION_DESCRIPTION = "The one and only app to help you when you are lost in time."

MODE_SHORT = "m"
MODE_LONG = "mode"
INPUT_SHORT = "i"
INPUT_LONG = "input"
OUTPUT_SHORT = "o"
OUTPUT_LONG = "output"

MODE_DESCRIPTION = "Operation mode: pack or unpack"
INPUT_DESCRIPTION = "Input directory or archive file"
OUTPUT_DESCRIPTION = "Output archive file or directory"

MODE_PACK = "pack"
MODE_UNPACK = "unpack"


class Mode(Enum):
    """What the archiver is asked to do."""

    PACK = "Pack"
    UNPACK = "Unpack"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, text: str) -> "Mode":
        """Return the mode named by ``text``, ignoring case; UNKNOWN if none matches."""
        for mode in cls:
            if mode.value == text:
                return mode
        folded = text.casefold()
        for mode in cls:
            if mode.value.casefold() == folded:
                return mode
        return cls.UNKNOWN

    def is_valid(self) -> bool:
        """True for every mode except UNKNOWN."""
        return self is not Mode.UNKNOWN

    def __str__(self) -> str:
        return self.value