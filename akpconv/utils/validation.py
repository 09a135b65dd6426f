"""
Error types and validation helpers for AKP program data.

Every parse failure is raised as a subclass of AkpError so callers can catch
the whole family at once, or a single kind when they need to tell
"not an AKP file" apart from "AKP file with a bad chunk".
"""


class AkpError(Exception):
    """Base class for all AKP parsing errors."""

    pass


class InvalidRiffHeaderError(AkpError):
    """The file does not start with a RIFF signature."""

    def __init__(self):
        super().__init__(
            "Invalid file format: Expected RIFF header but found different signature"
        )


class InvalidAprgSignatureError(AkpError):
    """The RIFF container does not carry an APRG (program) payload."""

    def __init__(self):
        super().__init__(
            "Invalid file format: Expected APRG signature but found different "
            "signature (not an Akai program file)"
        )


class TruncatedDataError(AkpError, EOFError):
    """The stream ended before a required read completed."""

    pass


class InvalidChunkSizeError(AkpError):
    """A chunk declares fewer bytes than its layout requires."""

    def __init__(self, chunk_id: str, size: int):
        self.chunk_id = chunk_id
        self.size = size
        super().__init__(f"Invalid size {size} for chunk '{chunk_id}'")


class CorruptedChunkError(AkpError):
    """A chunk is structurally sound but its content makes no sense."""

    def __init__(self, chunk_id: str, reason: str):
        self.chunk_id = chunk_id
        self.reason = reason
        super().__init__(f"Corrupted '{chunk_id}' chunk: {reason}")


class InvalidKeyRangeError(AkpError):
    """Zone low key is above its high key."""

    def __init__(self, low: int, high: int):
        self.low = low
        self.high = high
        super().__init__(f"Invalid key range: low_key ({low}) must be <= high_key ({high})")


class InvalidVelocityRangeError(AkpError):
    """Zone low velocity is above its high velocity."""

    def __init__(self, low: int, high: int):
        self.low = low
        self.high = high
        super().__init__(
            f"Invalid velocity range: low_vel ({low}) must be <= high_vel ({high})"
        )


class InvalidParameterValueError(AkpError):
    """A single field holds a value outside its domain."""

    def __init__(self, name: str, value: int):
        self.name = name
        self.value = value
        super().__init__(f"Invalid value {value} for parameter '{name}'")


class MissingRequiredChunkError(AkpError):
    """A structurally valid file lacks a chunk the program cannot do without."""

    def __init__(self, chunk_id: str):
        self.chunk_id = chunk_id
        super().__init__(f"Missing required '{chunk_id}' chunk")


def validate_midi_value(value: int, name: str = "value") -> None:
    """
    Validate that a value is in MIDI range (0-127).

    Args:
        value: The value to validate
        name: Name of the value for error messages

    Raises:
        InvalidParameterValueError: If value is out of range
    """
    if not 0 <= value <= 127:
        raise InvalidParameterValueError(name, value)


def validate_range(low: int, high: int, error_cls: type) -> None:
    """
    Validate that a low/high pair is ordered.

    Args:
        low: Lower bound
        high: Upper bound
        error_cls: Error raised with (low, high) when low > high
    """
    if low > high:
        raise error_cls(low, high)


def validate_chunk_size(chunk_id: str, size: int, minimum: int) -> None:
    """
    Validate a declared chunk size against the layout minimum.

    Args:
        chunk_id: Chunk tag, reported without padding
        size: Declared payload size
        minimum: Smallest size the chunk layout can be read from

    Raises:
        InvalidChunkSizeError: If size is below the minimum
    """
    if size < minimum:
        raise InvalidChunkSizeError(chunk_id.strip(), size)


def validate_akp_header(data: bytes) -> bool:
    """
    Validate the 12-byte AKP container prefix.

    Args:
        data: File data (at least 12 bytes)

    Returns:
        True if the data starts with RIFF....APRG
    """
    if len(data) < 12:
        return False

    return data[:4] == b"RIFF" and data[8:12] == b"APRG"
