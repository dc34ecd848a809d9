"""
PETSCII (Commodore 64/128, VIC-20, PET) encoding with shift controls.

Unlike a plain character map, this codec follows the in-band shift state:
decoding starts in the unshifted (uppercase/graphics) set and switches on
0x0E and 0x8E, and encoding writes those bytes whenever the next character
needs the other set.  Every call starts unshifted, so only whole buffers
are converted; no incremental or stream classes are offered.
"""

# std imports
import codecs
from typing import Tuple

# local
from .. import shift
from ..codec import decode_bytes, encode_char
from ..error import UnmappableCharacter


class Codec(codecs.Codec):
    """PETSCII shift-aware codec."""

    def encode(  # pylint: disable=redefined-builtin
        self, input: str, errors: str = "strict"
    ) -> Tuple[bytes, int]:
        """Encode input string, inserting shift controls as needed."""
        output = bytearray()
        mode = shift.INITIAL_MODE
        position = 0
        while position < len(input):
            try:
                chunk, mode = encode_char(input[position], mode)
            except UnmappableCharacter as err:
                exc = UnicodeEncodeError(
                    "petscii", input, position, position + 1, err.reason
                )
                replacement, position = codecs.lookup_error(errors)(exc)
                if position < 0:
                    position += len(input)
                if isinstance(replacement, bytes):
                    output.extend(replacement)
                    continue
                for char in replacement:
                    try:
                        chunk, mode = encode_char(char, mode)
                    except UnmappableCharacter:
                        raise exc from err
                    output.extend(chunk)
                continue
            output.extend(chunk)
            position += 1
        return bytes(output), len(input)

    def decode(  # pylint: disable=redefined-builtin
        self, input: bytes, errors: str = "strict"
    ) -> Tuple[str, int]:
        """Decode input bytes, following shift controls; never fails."""
        return decode_bytes(bytes(input)), len(input)


def getregentry() -> codecs.CodecInfo:
    """Return the codec registry entry."""
    return codecs.CodecInfo(
        name="petscii",
        encode=Codec().encode,
        decode=Codec().decode,  # type: ignore[arg-type]
    )


def getaliases() -> Tuple[str, ...]:
    """Return codec aliases."""
    return ("cbm", "commodore", "c64", "c128", "vic20")
