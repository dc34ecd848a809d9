"""
PETSCII mapping tables -- unshifted and shifted character sets.

Each decoding table holds 256 entries, one Unicode character per byte value.
The unshifted set is the power-on default of the Commodore 64: uppercase
letters at 0x41-0x5A and block graphics at 0xC0-0xDF.  The shifted set shows
lowercase letters at 0x41-0x5A and uppercase letters at 0xC1-0xDA.

Mapping sources:
- Commodore 64 Programmer's Reference Guide, Appendix C
- https://sta.c64.org/cbm64pet.html
- Unicode Consortium Symbols for Legacy Computing (U+1FB00-U+1FBFF)

Control codes (0x00-0x1F, 0x80-0x9F) carry the C0/C1 control character with
the same value.  They are not printable characters: :func:`lookup` answers
``None`` for them.  Byte ranges 0x60-0x7F and 0xE0-0xFF repeat glyphs found
elsewhere; they decode normally but are never chosen when encoding.
"""
# std imports
import types
from typing import Dict, List, Optional, Tuple

# local
from .shift import Mode, SHIFT_CODES

__all__ = ('UNSHIFTED_TABLE', 'SHIFTED_TABLE', 'DECODING_TABLES',
           'ENCODING_TABLE', 'CONTROL_CODES', 'is_control', 'lookup',
           'reverse_lookup')

# Decoding Table -- PETSCII unshifted (uppercase/graphics) mode, 256 entries.

UNSHIFTED_TABLE = (
    # 0x00-0x1F: control codes
    "\x00"  # 0x00 NUL
    "\x01"  # 0x01 (unused)
    "\x02"  # 0x02 (unused)
    "\x03"  # 0x03 RUN/STOP
    "\x04"  # 0x04 (unused)
    "\x05"  # 0x05 WHT (white)
    "\x06"  # 0x06 (unused)
    "\x07"  # 0x07 BEL
    "\x08"  # 0x08 disable shift-C=
    "\x09"  # 0x09 enable shift-C=
    "\n"  # 0x0A LF
    "\x0b"  # 0x0B (unused)
    "\x0c"  # 0x0C (unused)
    "\r"  # 0x0D RETURN
    "\x0e"  # 0x0E SHIFT-OUT (lowercase charset)
    "\x0f"  # 0x0F (unused)
    "\x10"  # 0x10 (unused)
    "\x11"  # 0x11 CRSR DOWN
    "\x12"  # 0x12 RVS ON
    "\x13"  # 0x13 HOME
    "\x14"  # 0x14 DEL
    "\x15"  # 0x15 (unused)
    "\x16"  # 0x16 (unused)
    "\x17"  # 0x17 (unused)
    "\x18"  # 0x18 (unused)
    "\x19"  # 0x19 (unused)
    "\x1a"  # 0x1A (unused)
    "\x1b"  # 0x1B ESC
    "\x1c"  # 0x1C RED
    "\x1d"  # 0x1D CRSR RIGHT
    "\x1e"  # 0x1E GRN (green)
    "\x1f"  # 0x1F BLU (blue)
    # 0x20-0x3F: ASCII compatible
    " "  # 0x20
    "!"  # 0x21
    '"'  # 0x22
    "#"  # 0x23
    "$"  # 0x24
    "%"  # 0x25
    "&"  # 0x26
    "'"  # 0x27
    "("  # 0x28
    ")"  # 0x29
    "*"  # 0x2A
    "+"  # 0x2B
    ","  # 0x2C
    "-"  # 0x2D
    "."  # 0x2E
    "/"  # 0x2F
    "0"  # 0x30
    "1"  # 0x31
    "2"  # 0x32
    "3"  # 0x33
    "4"  # 0x34
    "5"  # 0x35
    "6"  # 0x36
    "7"  # 0x37
    "8"  # 0x38
    "9"  # 0x39
    ":"  # 0x3A
    ";"  # 0x3B
    "<"  # 0x3C
    "="  # 0x3D
    ">"  # 0x3E
    "?"  # 0x3F
    # 0x40-0x5F: @, uppercase A-Z, [, pound, ], up-arrow, left-arrow
    "@"  # 0x40 COMMERCIAL AT
    "A"  # 0x41 LATIN CAPITAL LETTER A
    "B"  # 0x42 LATIN CAPITAL LETTER B
    "C"  # 0x43 LATIN CAPITAL LETTER C
    "D"  # 0x44 LATIN CAPITAL LETTER D
    "E"  # 0x45 LATIN CAPITAL LETTER E
    "F"  # 0x46 LATIN CAPITAL LETTER F
    "G"  # 0x47 LATIN CAPITAL LETTER G
    "H"  # 0x48 LATIN CAPITAL LETTER H
    "I"  # 0x49 LATIN CAPITAL LETTER I
    "J"  # 0x4A LATIN CAPITAL LETTER J
    "K"  # 0x4B LATIN CAPITAL LETTER K
    "L"  # 0x4C LATIN CAPITAL LETTER L
    "M"  # 0x4D LATIN CAPITAL LETTER M
    "N"  # 0x4E LATIN CAPITAL LETTER N
    "O"  # 0x4F LATIN CAPITAL LETTER O
    "P"  # 0x50 LATIN CAPITAL LETTER P
    "Q"  # 0x51 LATIN CAPITAL LETTER Q
    "R"  # 0x52 LATIN CAPITAL LETTER R
    "S"  # 0x53 LATIN CAPITAL LETTER S
    "T"  # 0x54 LATIN CAPITAL LETTER T
    "U"  # 0x55 LATIN CAPITAL LETTER U
    "V"  # 0x56 LATIN CAPITAL LETTER V
    "W"  # 0x57 LATIN CAPITAL LETTER W
    "X"  # 0x58 LATIN CAPITAL LETTER X
    "Y"  # 0x59 LATIN CAPITAL LETTER Y
    "Z"  # 0x5A LATIN CAPITAL LETTER Z
    "["  # 0x5B LEFT SQUARE BRACKET
    "\u00a3"  # 0x5C POUND SIGN
    "]"  # 0x5D RIGHT SQUARE BRACKET
    "\u2191"  # 0x5E UPWARDS ARROW
    "\u2190"  # 0x5F LEFTWARDS ARROW
    # 0x60-0x7F: same glyphs as 0xC0-0xDF
    "\u2500"  # 0x60 BOX DRAWINGS LIGHT HORIZONTAL (same as 0xC0)
    "\u2660"  # 0x61 BLACK SPADE SUIT (same as 0xC1)
    "\U0001fb72"  # 0x62 VERTICAL ONE EIGHTH BLOCK-4 (same as 0xC2)
    "\U0001fb78"  # 0x63 HORIZONTAL ONE EIGHTH BLOCK-4 (same as 0xC3)
    "\U0001fb77"  # 0x64 HORIZONTAL ONE EIGHTH BLOCK-3 (same as 0xC4)
    "\U0001fb76"  # 0x65 HORIZONTAL ONE EIGHTH BLOCK-2 (same as 0xC5)
    "\U0001fb7a"  # 0x66 HORIZONTAL ONE EIGHTH BLOCK-6 (same as 0xC6)
    "\U0001fb71"  # 0x67 VERTICAL ONE EIGHTH BLOCK-3 (same as 0xC7)
    "\U0001fb74"  # 0x68 VERTICAL ONE EIGHTH BLOCK-6 (same as 0xC8)
    "\u256e"  # 0x69 BOX DRAWINGS LIGHT ARC DOWN AND LEFT (same as 0xC9)
    "\u2570"  # 0x6A BOX DRAWINGS LIGHT ARC UP AND RIGHT (same as 0xCA)
    "\u256f"  # 0x6B BOX DRAWINGS LIGHT ARC UP AND LEFT (same as 0xCB)
    "\U0001fb7c"  # 0x6C LEFT AND LOWER ONE EIGHTH BLOCK (same as 0xCC)
    "\u2572"  # 0x6D BOX DRAWINGS LIGHT DIAGONAL UPPER LEFT TO LOWER RIGHT (same as 0xCD)
    "\u2571"  # 0x6E BOX DRAWINGS LIGHT DIAGONAL UPPER RIGHT TO LOWER LEFT (same as 0xCE)
    "\U0001fb7d"  # 0x6F LEFT AND UPPER ONE EIGHTH BLOCK (same as 0xCF)
    "\U0001fb7e"  # 0x70 RIGHT AND UPPER ONE EIGHTH BLOCK (same as 0xD0)
    "\u25cf"  # 0x71 BLACK CIRCLE (same as 0xD1)
    "\U0001fb7b"  # 0x72 HORIZONTAL ONE EIGHTH BLOCK-7 (same as 0xD2)
    "\u2665"  # 0x73 BLACK HEART SUIT (same as 0xD3)
    "\U0001fb70"  # 0x74 VERTICAL ONE EIGHTH BLOCK-2 (same as 0xD4)
    "\u256d"  # 0x75 BOX DRAWINGS LIGHT ARC DOWN AND RIGHT (same as 0xD5)
    "\u2573"  # 0x76 BOX DRAWINGS LIGHT DIAGONAL CROSS (same as 0xD6)
    "\u25cb"  # 0x77 WHITE CIRCLE (same as 0xD7)
    "\u2663"  # 0x78 BLACK CLUB SUIT (same as 0xD8)
    "\U0001fb75"  # 0x79 VERTICAL ONE EIGHTH BLOCK-7 (same as 0xD9)
    "\u2666"  # 0x7A BLACK DIAMOND SUIT (same as 0xDA)
    "\u253c"  # 0x7B BOX DRAWINGS LIGHT VERTICAL AND HORIZONTAL (same as 0xDB)
    "\U0001fb8c"  # 0x7C LEFT HALF MEDIUM SHADE (same as 0xDC)
    "\u2502"  # 0x7D BOX DRAWINGS LIGHT VERTICAL (same as 0xDD)
    "\u03c0"  # 0x7E GREEK SMALL LETTER PI (same as 0xDE)
    "\u25e5"  # 0x7F BLACK UPPER RIGHT TRIANGLE (same as 0xDF)
    # 0x80-0x9F: control codes (colors, function keys, cursor)
    "\x80"  # 0x80 (unused)
    "\x81"  # 0x81 ORN (orange)
    "\x82"  # 0x82 (unused)
    "\x83"  # 0x83 (unused)
    "\x84"  # 0x84 (unused)
    "\x85"  # 0x85 F1
    "\x86"  # 0x86 F3
    "\x87"  # 0x87 F5
    "\x88"  # 0x88 F7
    "\x89"  # 0x89 F2
    "\x8a"  # 0x8A F4
    "\x8b"  # 0x8B F6
    "\x8c"  # 0x8C F8
    "\x8d"  # 0x8D SHIFT-RETURN
    "\x8e"  # 0x8E SHIFT-IN (uppercase charset)
    "\x8f"  # 0x8F (unused)
    "\x90"  # 0x90 BLK (black)
    "\x91"  # 0x91 CRSR UP
    "\x92"  # 0x92 RVS OFF
    "\x93"  # 0x93 CLR
    "\x94"  # 0x94 INST
    "\x95"  # 0x95 BRN (brown)
    "\x96"  # 0x96 LRD (light red)
    "\x97"  # 0x97 GR1 (dark grey)
    "\x98"  # 0x98 GR2 (medium grey)
    "\x99"  # 0x99 LGR (light green)
    "\x9a"  # 0x9A LBL (light blue)
    "\x9b"  # 0x9B GR3 (light grey)
    "\x9c"  # 0x9C PUR (purple)
    "\x9d"  # 0x9D CRSR LEFT
    "\x9e"  # 0x9E YEL (yellow)
    "\x9f"  # 0x9F CYN (cyan)
    # 0xA0-0xBF: graphics
    "\xa0"  # 0xA0 SHIFTED SPACE
    "\u258c"  # 0xA1 LEFT HALF BLOCK
    "\u2584"  # 0xA2 LOWER HALF BLOCK
    "\u2594"  # 0xA3 UPPER ONE EIGHTH BLOCK
    "\u2581"  # 0xA4 LOWER ONE EIGHTH BLOCK
    "\u258f"  # 0xA5 LEFT ONE EIGHTH BLOCK
    "\u2592"  # 0xA6 MEDIUM SHADE
    "\u2595"  # 0xA7 RIGHT ONE EIGHTH BLOCK
    "\U0001fb8f"  # 0xA8 LOWER HALF MEDIUM SHADE
    "\u25e4"  # 0xA9 BLACK UPPER LEFT TRIANGLE
    "\U0001fb87"  # 0xAA RIGHT ONE QUARTER BLOCK
    "\u251c"  # 0xAB BOX DRAWINGS LIGHT VERTICAL AND RIGHT
    "\u2597"  # 0xAC QUADRANT LOWER RIGHT
    "\u2514"  # 0xAD BOX DRAWINGS LIGHT UP AND RIGHT
    "\u2510"  # 0xAE BOX DRAWINGS LIGHT DOWN AND LEFT
    "\u2582"  # 0xAF LOWER ONE QUARTER BLOCK
    "\u250c"  # 0xB0 BOX DRAWINGS LIGHT DOWN AND RIGHT
    "\u2534"  # 0xB1 BOX DRAWINGS LIGHT UP AND HORIZONTAL
    "\u252c"  # 0xB2 BOX DRAWINGS LIGHT DOWN AND HORIZONTAL
    "\u2524"  # 0xB3 BOX DRAWINGS LIGHT VERTICAL AND LEFT
    "\u258e"  # 0xB4 LEFT ONE QUARTER BLOCK
    "\u258d"  # 0xB5 LEFT THREE EIGHTHS BLOCK
    "\U0001fb88"  # 0xB6 RIGHT THREE EIGHTHS BLOCK
    "\U0001fb82"  # 0xB7 UPPER ONE QUARTER BLOCK
    "\U0001fb83"  # 0xB8 UPPER THREE EIGHTHS BLOCK
    "\u2583"  # 0xB9 LOWER THREE EIGHTHS BLOCK
    "\U0001fb7f"  # 0xBA RIGHT AND LOWER ONE EIGHTH BLOCK
    "\u2596"  # 0xBB QUADRANT LOWER LEFT
    "\u259d"  # 0xBC QUADRANT UPPER RIGHT
    "\u2518"  # 0xBD BOX DRAWINGS LIGHT UP AND LEFT
    "\u2598"  # 0xBE QUADRANT UPPER LEFT
    "\u259a"  # 0xBF QUADRANT UPPER LEFT AND LOWER RIGHT
    # 0xC0-0xDF: graphics
    "\u2500"  # 0xC0 BOX DRAWINGS LIGHT HORIZONTAL
    "\u2660"  # 0xC1 BLACK SPADE SUIT
    "\U0001fb72"  # 0xC2 VERTICAL ONE EIGHTH BLOCK-4
    "\U0001fb78"  # 0xC3 HORIZONTAL ONE EIGHTH BLOCK-4
    "\U0001fb77"  # 0xC4 HORIZONTAL ONE EIGHTH BLOCK-3
    "\U0001fb76"  # 0xC5 HORIZONTAL ONE EIGHTH BLOCK-2
    "\U0001fb7a"  # 0xC6 HORIZONTAL ONE EIGHTH BLOCK-6
    "\U0001fb71"  # 0xC7 VERTICAL ONE EIGHTH BLOCK-3
    "\U0001fb74"  # 0xC8 VERTICAL ONE EIGHTH BLOCK-6
    "\u256e"  # 0xC9 BOX DRAWINGS LIGHT ARC DOWN AND LEFT
    "\u2570"  # 0xCA BOX DRAWINGS LIGHT ARC UP AND RIGHT
    "\u256f"  # 0xCB BOX DRAWINGS LIGHT ARC UP AND LEFT
    "\U0001fb7c"  # 0xCC LEFT AND LOWER ONE EIGHTH BLOCK
    "\u2572"  # 0xCD BOX DRAWINGS LIGHT DIAGONAL UPPER LEFT TO LOWER RIGHT
    "\u2571"  # 0xCE BOX DRAWINGS LIGHT DIAGONAL UPPER RIGHT TO LOWER LEFT
    "\U0001fb7d"  # 0xCF LEFT AND UPPER ONE EIGHTH BLOCK
    "\U0001fb7e"  # 0xD0 RIGHT AND UPPER ONE EIGHTH BLOCK
    "\u25cf"  # 0xD1 BLACK CIRCLE
    "\U0001fb7b"  # 0xD2 HORIZONTAL ONE EIGHTH BLOCK-7
    "\u2665"  # 0xD3 BLACK HEART SUIT
    "\U0001fb70"  # 0xD4 VERTICAL ONE EIGHTH BLOCK-2
    "\u256d"  # 0xD5 BOX DRAWINGS LIGHT ARC DOWN AND RIGHT
    "\u2573"  # 0xD6 BOX DRAWINGS LIGHT DIAGONAL CROSS
    "\u25cb"  # 0xD7 WHITE CIRCLE
    "\u2663"  # 0xD8 BLACK CLUB SUIT
    "\U0001fb75"  # 0xD9 VERTICAL ONE EIGHTH BLOCK-7
    "\u2666"  # 0xDA BLACK DIAMOND SUIT
    "\u253c"  # 0xDB BOX DRAWINGS LIGHT VERTICAL AND HORIZONTAL
    "\U0001fb8c"  # 0xDC LEFT HALF MEDIUM SHADE
    "\u2502"  # 0xDD BOX DRAWINGS LIGHT VERTICAL
    "\u03c0"  # 0xDE GREEK SMALL LETTER PI
    "\u25e5"  # 0xDF BLACK UPPER RIGHT TRIANGLE
    # 0xE0-0xFF: same glyphs as 0xA0-0xBE, and 0xDE at 0xFF
    "\xa0"  # 0xE0 SHIFTED SPACE (same as 0xA0)
    "\u258c"  # 0xE1 LEFT HALF BLOCK (same as 0xA1)
    "\u2584"  # 0xE2 LOWER HALF BLOCK (same as 0xA2)
    "\u2594"  # 0xE3 UPPER ONE EIGHTH BLOCK (same as 0xA3)
    "\u2581"  # 0xE4 LOWER ONE EIGHTH BLOCK (same as 0xA4)
    "\u258f"  # 0xE5 LEFT ONE EIGHTH BLOCK (same as 0xA5)
    "\u2592"  # 0xE6 MEDIUM SHADE (same as 0xA6)
    "\u2595"  # 0xE7 RIGHT ONE EIGHTH BLOCK (same as 0xA7)
    "\U0001fb8f"  # 0xE8 LOWER HALF MEDIUM SHADE (same as 0xA8)
    "\u25e4"  # 0xE9 BLACK UPPER LEFT TRIANGLE (same as 0xA9)
    "\U0001fb87"  # 0xEA RIGHT ONE QUARTER BLOCK (same as 0xAA)
    "\u251c"  # 0xEB BOX DRAWINGS LIGHT VERTICAL AND RIGHT (same as 0xAB)
    "\u2597"  # 0xEC QUADRANT LOWER RIGHT (same as 0xAC)
    "\u2514"  # 0xED BOX DRAWINGS LIGHT UP AND RIGHT (same as 0xAD)
    "\u2510"  # 0xEE BOX DRAWINGS LIGHT DOWN AND LEFT (same as 0xAE)
    "\u2582"  # 0xEF LOWER ONE QUARTER BLOCK (same as 0xAF)
    "\u250c"  # 0xF0 BOX DRAWINGS LIGHT DOWN AND RIGHT (same as 0xB0)
    "\u2534"  # 0xF1 BOX DRAWINGS LIGHT UP AND HORIZONTAL (same as 0xB1)
    "\u252c"  # 0xF2 BOX DRAWINGS LIGHT DOWN AND HORIZONTAL (same as 0xB2)
    "\u2524"  # 0xF3 BOX DRAWINGS LIGHT VERTICAL AND LEFT (same as 0xB3)
    "\u258e"  # 0xF4 LEFT ONE QUARTER BLOCK (same as 0xB4)
    "\u258d"  # 0xF5 LEFT THREE EIGHTHS BLOCK (same as 0xB5)
    "\U0001fb88"  # 0xF6 RIGHT THREE EIGHTHS BLOCK (same as 0xB6)
    "\U0001fb82"  # 0xF7 UPPER ONE QUARTER BLOCK (same as 0xB7)
    "\U0001fb83"  # 0xF8 UPPER THREE EIGHTHS BLOCK (same as 0xB8)
    "\u2583"  # 0xF9 LOWER THREE EIGHTHS BLOCK (same as 0xB9)
    "\U0001fb7f"  # 0xFA RIGHT AND LOWER ONE EIGHTH BLOCK (same as 0xBA)
    "\u2596"  # 0xFB QUADRANT LOWER LEFT (same as 0xBB)
    "\u259d"  # 0xFC QUADRANT UPPER RIGHT (same as 0xBC)
    "\u2518"  # 0xFD BOX DRAWINGS LIGHT UP AND LEFT (same as 0xBD)
    "\u2598"  # 0xFE QUADRANT UPPER LEFT (same as 0xBE)
    "\u03c0"  # 0xFF GREEK SMALL LETTER PI (same as 0xDE)
)

assert len(UNSHIFTED_TABLE) == 256

# Decoding Table -- PETSCII shifted (lowercase) mode, 256 entries.

SHIFTED_TABLE = (
    # 0x00-0x1F: control codes
    "\x00"  # 0x00 NUL
    "\x01"  # 0x01 (unused)
    "\x02"  # 0x02 (unused)
    "\x03"  # 0x03 RUN/STOP
    "\x04"  # 0x04 (unused)
    "\x05"  # 0x05 WHT (white)
    "\x06"  # 0x06 (unused)
    "\x07"  # 0x07 BEL
    "\x08"  # 0x08 disable shift-C=
    "\x09"  # 0x09 enable shift-C=
    "\n"  # 0x0A LF
    "\x0b"  # 0x0B (unused)
    "\x0c"  # 0x0C (unused)
    "\r"  # 0x0D RETURN
    "\x0e"  # 0x0E SHIFT-OUT (lowercase charset)
    "\x0f"  # 0x0F (unused)
    "\x10"  # 0x10 (unused)
    "\x11"  # 0x11 CRSR DOWN
    "\x12"  # 0x12 RVS ON
    "\x13"  # 0x13 HOME
    "\x14"  # 0x14 DEL
    "\x15"  # 0x15 (unused)
    "\x16"  # 0x16 (unused)
    "\x17"  # 0x17 (unused)
    "\x18"  # 0x18 (unused)
    "\x19"  # 0x19 (unused)
    "\x1a"  # 0x1A (unused)
    "\x1b"  # 0x1B ESC
    "\x1c"  # 0x1C RED
    "\x1d"  # 0x1D CRSR RIGHT
    "\x1e"  # 0x1E GRN (green)
    "\x1f"  # 0x1F BLU (blue)
    # 0x20-0x3F: ASCII compatible
    " "  # 0x20
    "!"  # 0x21
    '"'  # 0x22
    "#"  # 0x23
    "$"  # 0x24
    "%"  # 0x25
    "&"  # 0x26
    "'"  # 0x27
    "("  # 0x28
    ")"  # 0x29
    "*"  # 0x2A
    "+"  # 0x2B
    ","  # 0x2C
    "-"  # 0x2D
    "."  # 0x2E
    "/"  # 0x2F
    "0"  # 0x30
    "1"  # 0x31
    "2"  # 0x32
    "3"  # 0x33
    "4"  # 0x34
    "5"  # 0x35
    "6"  # 0x36
    "7"  # 0x37
    "8"  # 0x38
    "9"  # 0x39
    ":"  # 0x3A
    ";"  # 0x3B
    "<"  # 0x3C
    "="  # 0x3D
    ">"  # 0x3E
    "?"  # 0x3F
    # 0x40-0x5F: @, lowercase a-z, [, pound, ], up-arrow, left-arrow
    "@"  # 0x40 COMMERCIAL AT
    "a"  # 0x41 LATIN SMALL LETTER A
    "b"  # 0x42 LATIN SMALL LETTER B
    "c"  # 0x43 LATIN SMALL LETTER C
    "d"  # 0x44 LATIN SMALL LETTER D
    "e"  # 0x45 LATIN SMALL LETTER E
    "f"  # 0x46 LATIN SMALL LETTER F
    "g"  # 0x47 LATIN SMALL LETTER G
    "h"  # 0x48 LATIN SMALL LETTER H
    "i"  # 0x49 LATIN SMALL LETTER I
    "j"  # 0x4A LATIN SMALL LETTER J
    "k"  # 0x4B LATIN SMALL LETTER K
    "l"  # 0x4C LATIN SMALL LETTER L
    "m"  # 0x4D LATIN SMALL LETTER M
    "n"  # 0x4E LATIN SMALL LETTER N
    "o"  # 0x4F LATIN SMALL LETTER O
    "p"  # 0x50 LATIN SMALL LETTER P
    "q"  # 0x51 LATIN SMALL LETTER Q
    "r"  # 0x52 LATIN SMALL LETTER R
    "s"  # 0x53 LATIN SMALL LETTER S
    "t"  # 0x54 LATIN SMALL LETTER T
    "u"  # 0x55 LATIN SMALL LETTER U
    "v"  # 0x56 LATIN SMALL LETTER V
    "w"  # 0x57 LATIN SMALL LETTER W
    "x"  # 0x58 LATIN SMALL LETTER X
    "y"  # 0x59 LATIN SMALL LETTER Y
    "z"  # 0x5A LATIN SMALL LETTER Z
    "["  # 0x5B LEFT SQUARE BRACKET
    "\u00a3"  # 0x5C POUND SIGN
    "]"  # 0x5D RIGHT SQUARE BRACKET
    "\u2191"  # 0x5E UPWARDS ARROW
    "\u2190"  # 0x5F LEFTWARDS ARROW
    # 0x60-0x7F: same glyphs as 0xC0-0xDF
    "\u2500"  # 0x60 BOX DRAWINGS LIGHT HORIZONTAL (same as 0xC0)
    "A"  # 0x61 LATIN CAPITAL LETTER A (same as 0xC1)
    "B"  # 0x62 LATIN CAPITAL LETTER B (same as 0xC2)
    "C"  # 0x63 LATIN CAPITAL LETTER C (same as 0xC3)
    "D"  # 0x64 LATIN CAPITAL LETTER D (same as 0xC4)
    "E"  # 0x65 LATIN CAPITAL LETTER E (same as 0xC5)
    "F"  # 0x66 LATIN CAPITAL LETTER F (same as 0xC6)
    "G"  # 0x67 LATIN CAPITAL LETTER G (same as 0xC7)
    "H"  # 0x68 LATIN CAPITAL LETTER H (same as 0xC8)
    "I"  # 0x69 LATIN CAPITAL LETTER I (same as 0xC9)
    "J"  # 0x6A LATIN CAPITAL LETTER J (same as 0xCA)
    "K"  # 0x6B LATIN CAPITAL LETTER K (same as 0xCB)
    "L"  # 0x6C LATIN CAPITAL LETTER L (same as 0xCC)
    "M"  # 0x6D LATIN CAPITAL LETTER M (same as 0xCD)
    "N"  # 0x6E LATIN CAPITAL LETTER N (same as 0xCE)
    "O"  # 0x6F LATIN CAPITAL LETTER O (same as 0xCF)
    "P"  # 0x70 LATIN CAPITAL LETTER P (same as 0xD0)
    "Q"  # 0x71 LATIN CAPITAL LETTER Q (same as 0xD1)
    "R"  # 0x72 LATIN CAPITAL LETTER R (same as 0xD2)
    "S"  # 0x73 LATIN CAPITAL LETTER S (same as 0xD3)
    "T"  # 0x74 LATIN CAPITAL LETTER T (same as 0xD4)
    "U"  # 0x75 LATIN CAPITAL LETTER U (same as 0xD5)
    "V"  # 0x76 LATIN CAPITAL LETTER V (same as 0xD6)
    "W"  # 0x77 LATIN CAPITAL LETTER W (same as 0xD7)
    "X"  # 0x78 LATIN CAPITAL LETTER X (same as 0xD8)
    "Y"  # 0x79 LATIN CAPITAL LETTER Y (same as 0xD9)
    "Z"  # 0x7A LATIN CAPITAL LETTER Z (same as 0xDA)
    "\u253c"  # 0x7B BOX DRAWINGS LIGHT VERTICAL AND HORIZONTAL (same as 0xDB)
    "\U0001fb8c"  # 0x7C LEFT HALF MEDIUM SHADE (same as 0xDC)
    "\u2502"  # 0x7D BOX DRAWINGS LIGHT VERTICAL (same as 0xDD)
    "\U0001fb96"  # 0x7E INVERSE CHECKER BOARD FILL (same as 0xDE)
    "\U0001fb98"  # 0x7F UPPER LEFT TO LOWER RIGHT FILL (same as 0xDF)
    # 0x80-0x9F: control codes (colors, function keys, cursor)
    "\x80"  # 0x80 (unused)
    "\x81"  # 0x81 ORN (orange)
    "\x82"  # 0x82 (unused)
    "\x83"  # 0x83 (unused)
    "\x84"  # 0x84 (unused)
    "\x85"  # 0x85 F1
    "\x86"  # 0x86 F3
    "\x87"  # 0x87 F5
    "\x88"  # 0x88 F7
    "\x89"  # 0x89 F2
    "\x8a"  # 0x8A F4
    "\x8b"  # 0x8B F6
    "\x8c"  # 0x8C F8
    "\x8d"  # 0x8D SHIFT-RETURN
    "\x8e"  # 0x8E SHIFT-IN (uppercase charset)
    "\x8f"  # 0x8F (unused)
    "\x90"  # 0x90 BLK (black)
    "\x91"  # 0x91 CRSR UP
    "\x92"  # 0x92 RVS OFF
    "\x93"  # 0x93 CLR
    "\x94"  # 0x94 INST
    "\x95"  # 0x95 BRN (brown)
    "\x96"  # 0x96 LRD (light red)
    "\x97"  # 0x97 GR1 (dark grey)
    "\x98"  # 0x98 GR2 (medium grey)
    "\x99"  # 0x99 LGR (light green)
    "\x9a"  # 0x9A LBL (light blue)
    "\x9b"  # 0x9B GR3 (light grey)
    "\x9c"  # 0x9C PUR (purple)
    "\x9d"  # 0x9D CRSR LEFT
    "\x9e"  # 0x9E YEL (yellow)
    "\x9f"  # 0x9F CYN (cyan)
    # 0xA0-0xBF: graphics
    "\xa0"  # 0xA0 SHIFTED SPACE
    "\u258c"  # 0xA1 LEFT HALF BLOCK
    "\u2584"  # 0xA2 LOWER HALF BLOCK
    "\u2594"  # 0xA3 UPPER ONE EIGHTH BLOCK
    "\u2581"  # 0xA4 LOWER ONE EIGHTH BLOCK
    "\u258f"  # 0xA5 LEFT ONE EIGHTH BLOCK
    "\u2592"  # 0xA6 MEDIUM SHADE
    "\u2595"  # 0xA7 RIGHT ONE EIGHTH BLOCK
    "\U0001fb8f"  # 0xA8 LOWER HALF MEDIUM SHADE
    "\U0001fb99"  # 0xA9 UPPER RIGHT TO LOWER LEFT FILL
    "\U0001fb87"  # 0xAA RIGHT ONE QUARTER BLOCK
    "\u251c"  # 0xAB BOX DRAWINGS LIGHT VERTICAL AND RIGHT
    "\u2597"  # 0xAC QUADRANT LOWER RIGHT
    "\u2514"  # 0xAD BOX DRAWINGS LIGHT UP AND RIGHT
    "\u2510"  # 0xAE BOX DRAWINGS LIGHT DOWN AND LEFT
    "\u2582"  # 0xAF LOWER ONE QUARTER BLOCK
    "\u250c"  # 0xB0 BOX DRAWINGS LIGHT DOWN AND RIGHT
    "\u2534"  # 0xB1 BOX DRAWINGS LIGHT UP AND HORIZONTAL
    "\u252c"  # 0xB2 BOX DRAWINGS LIGHT DOWN AND HORIZONTAL
    "\u2524"  # 0xB3 BOX DRAWINGS LIGHT VERTICAL AND LEFT
    "\u258e"  # 0xB4 LEFT ONE QUARTER BLOCK
    "\u258d"  # 0xB5 LEFT THREE EIGHTHS BLOCK
    "\U0001fb88"  # 0xB6 RIGHT THREE EIGHTHS BLOCK
    "\U0001fb82"  # 0xB7 UPPER ONE QUARTER BLOCK
    "\U0001fb83"  # 0xB8 UPPER THREE EIGHTHS BLOCK
    "\u2583"  # 0xB9 LOWER THREE EIGHTHS BLOCK
    "\u2713"  # 0xBA CHECK MARK
    "\u2596"  # 0xBB QUADRANT LOWER LEFT
    "\u259d"  # 0xBC QUADRANT UPPER RIGHT
    "\u2518"  # 0xBD BOX DRAWINGS LIGHT UP AND LEFT
    "\u2598"  # 0xBE QUADRANT UPPER LEFT
    "\u259a"  # 0xBF QUADRANT UPPER LEFT AND LOWER RIGHT
    # 0xC0-0xDF: horizontal line, uppercase A-Z, graphics
    "\u2500"  # 0xC0 BOX DRAWINGS LIGHT HORIZONTAL
    "A"  # 0xC1 LATIN CAPITAL LETTER A
    "B"  # 0xC2 LATIN CAPITAL LETTER B
    "C"  # 0xC3 LATIN CAPITAL LETTER C
    "D"  # 0xC4 LATIN CAPITAL LETTER D
    "E"  # 0xC5 LATIN CAPITAL LETTER E
    "F"  # 0xC6 LATIN CAPITAL LETTER F
    "G"  # 0xC7 LATIN CAPITAL LETTER G
    "H"  # 0xC8 LATIN CAPITAL LETTER H
    "I"  # 0xC9 LATIN CAPITAL LETTER I
    "J"  # 0xCA LATIN CAPITAL LETTER J
    "K"  # 0xCB LATIN CAPITAL LETTER K
    "L"  # 0xCC LATIN CAPITAL LETTER L
    "M"  # 0xCD LATIN CAPITAL LETTER M
    "N"  # 0xCE LATIN CAPITAL LETTER N
    "O"  # 0xCF LATIN CAPITAL LETTER O
    "P"  # 0xD0 LATIN CAPITAL LETTER P
    "Q"  # 0xD1 LATIN CAPITAL LETTER Q
    "R"  # 0xD2 LATIN CAPITAL LETTER R
    "S"  # 0xD3 LATIN CAPITAL LETTER S
    "T"  # 0xD4 LATIN CAPITAL LETTER T
    "U"  # 0xD5 LATIN CAPITAL LETTER U
    "V"  # 0xD6 LATIN CAPITAL LETTER V
    "W"  # 0xD7 LATIN CAPITAL LETTER W
    "X"  # 0xD8 LATIN CAPITAL LETTER X
    "Y"  # 0xD9 LATIN CAPITAL LETTER Y
    "Z"  # 0xDA LATIN CAPITAL LETTER Z
    "\u253c"  # 0xDB BOX DRAWINGS LIGHT VERTICAL AND HORIZONTAL
    "\U0001fb8c"  # 0xDC LEFT HALF MEDIUM SHADE
    "\u2502"  # 0xDD BOX DRAWINGS LIGHT VERTICAL
    "\U0001fb96"  # 0xDE INVERSE CHECKER BOARD FILL
    "\U0001fb98"  # 0xDF UPPER LEFT TO LOWER RIGHT FILL
    # 0xE0-0xFF: same glyphs as 0xA0-0xBE, and 0xDE at 0xFF
    "\xa0"  # 0xE0 SHIFTED SPACE (same as 0xA0)
    "\u258c"  # 0xE1 LEFT HALF BLOCK (same as 0xA1)
    "\u2584"  # 0xE2 LOWER HALF BLOCK (same as 0xA2)
    "\u2594"  # 0xE3 UPPER ONE EIGHTH BLOCK (same as 0xA3)
    "\u2581"  # 0xE4 LOWER ONE EIGHTH BLOCK (same as 0xA4)
    "\u258f"  # 0xE5 LEFT ONE EIGHTH BLOCK (same as 0xA5)
    "\u2592"  # 0xE6 MEDIUM SHADE (same as 0xA6)
    "\u2595"  # 0xE7 RIGHT ONE EIGHTH BLOCK (same as 0xA7)
    "\U0001fb8f"  # 0xE8 LOWER HALF MEDIUM SHADE (same as 0xA8)
    "\U0001fb99"  # 0xE9 UPPER RIGHT TO LOWER LEFT FILL (same as 0xA9)
    "\U0001fb87"  # 0xEA RIGHT ONE QUARTER BLOCK (same as 0xAA)
    "\u251c"  # 0xEB BOX DRAWINGS LIGHT VERTICAL AND RIGHT (same as 0xAB)
    "\u2597"  # 0xEC QUADRANT LOWER RIGHT (same as 0xAC)
    "\u2514"  # 0xED BOX DRAWINGS LIGHT UP AND RIGHT (same as 0xAD)
    "\u2510"  # 0xEE BOX DRAWINGS LIGHT DOWN AND LEFT (same as 0xAE)
    "\u2582"  # 0xEF LOWER ONE QUARTER BLOCK (same as 0xAF)
    "\u250c"  # 0xF0 BOX DRAWINGS LIGHT DOWN AND RIGHT (same as 0xB0)
    "\u2534"  # 0xF1 BOX DRAWINGS LIGHT UP AND HORIZONTAL (same as 0xB1)
    "\u252c"  # 0xF2 BOX DRAWINGS LIGHT DOWN AND HORIZONTAL (same as 0xB2)
    "\u2524"  # 0xF3 BOX DRAWINGS LIGHT VERTICAL AND LEFT (same as 0xB3)
    "\u258e"  # 0xF4 LEFT ONE QUARTER BLOCK (same as 0xB4)
    "\u258d"  # 0xF5 LEFT THREE EIGHTHS BLOCK (same as 0xB5)
    "\U0001fb88"  # 0xF6 RIGHT THREE EIGHTHS BLOCK (same as 0xB6)
    "\U0001fb82"  # 0xF7 UPPER ONE QUARTER BLOCK (same as 0xB7)
    "\U0001fb83"  # 0xF8 UPPER THREE EIGHTHS BLOCK (same as 0xB8)
    "\u2583"  # 0xF9 LOWER THREE EIGHTHS BLOCK (same as 0xB9)
    "\u2713"  # 0xFA CHECK MARK (same as 0xBA)
    "\u2596"  # 0xFB QUADRANT LOWER LEFT (same as 0xBB)
    "\u259d"  # 0xFC QUADRANT UPPER RIGHT (same as 0xBC)
    "\u2518"  # 0xFD BOX DRAWINGS LIGHT UP AND LEFT (same as 0xBD)
    "\u2598"  # 0xFE QUADRANT UPPER LEFT (same as 0xBE)
    "\U0001fb96"  # 0xFF INVERSE CHECKER BOARD FILL (same as 0xDE)
)

assert len(SHIFTED_TABLE) == 256

DECODING_TABLES = types.MappingProxyType({
    Mode.UNSHIFTED: UNSHIFTED_TABLE,
    Mode.SHIFTED: SHIFTED_TABLE,
})

CONTROL_CODES = frozenset(range(0x00, 0x20)) | frozenset(range(0x80, 0xA0))

# Canonical bytes first, so the mirror ranges never win a reverse lookup.
_PREFERENCE_ORDER = (tuple(range(0x00, 0x60)) + tuple(range(0x80, 0xE0)) +
                     tuple(range(0x60, 0x80)) + tuple(range(0xE0, 0x100)))


def is_control(byte: int) -> bool:
    """Whether ``byte`` is a control code rather than a printable character."""
    return byte in CONTROL_CODES


def lookup(byte: int, mode: Mode) -> Optional[str]:
    """
    Return the character shown for ``byte`` in character set ``mode``.

    Returns ``None`` when ``byte`` is a control code, which has no printable
    form in either character set.
    """
    if byte in CONTROL_CODES:
        return None
    return DECODING_TABLES[mode][byte]


def reverse_lookup(char: str) -> Tuple[Tuple[int, Mode], ...]:
    """
    Return every ``(byte, mode)`` pair that decodes to ``char``.

    Pairs are ordered by preference: unshifted before shifted, and within a
    mode the canonical byte before its mirror.  An empty tuple means ``char``
    has no PETSCII representation.
    """
    return ENCODING_TABLE.get(char, ())


def _build_encoding_table() -> Dict[str, Tuple[Tuple[int, Mode], ...]]:
    table: Dict[str, List[Tuple[int, Mode]]] = {}
    for mode in Mode:
        decoding = DECODING_TABLES[mode]
        for byte in _PREFERENCE_ORDER:
            # shift controls are consumed while decoding, never yielded
            if byte in SHIFT_CODES:
                continue
            table.setdefault(decoding[byte], []).append((byte, mode))
    return {char: tuple(pairs) for char, pairs in table.items()}


ENCODING_TABLE = types.MappingProxyType(_build_encoding_table())
