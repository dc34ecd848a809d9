#!/usr/bin/env python3
"""
Print "Hello, world!" in a PETSCII block graphics border.

The record mixes both character sets: the greeting is typed in lowercase
after a shift-out (0x0E) and the right border follows a shift-in (0x8E).
"""
import argparse

import forbidden_bands
from forbidden_bands.accessories import make_logger

HELLO_WORLD = bytes([
    0x0d, 0x0a, 0xb0, 0x60, 0x60, 0x60, 0x60, 0x60, 0x60, 0x60, 0x60, 0x60, 0x60, 0x60, 0x60,
    0x60, 0x60, 0x60, 0xae, 0x0d, 0x0a, 0x7d, 0x20, 0x48, 0x0e, 0x45, 0x4c, 0x4c, 0x4f, 0x2c,
    0x20, 0x57, 0x4f, 0x52, 0x4c, 0x44, 0x21, 0x20, 0x8e, 0x7d, 0x0d, 0x0a, 0xad, 0x60, 0x60,
    0x60, 0x60, 0x60, 0x60, 0x60, 0x60, 0x60, 0x60, 0x60, 0x60, 0x60, 0x60, 0x60, 0xbd, 0x0d,
    0x0a,
])

ARGS = argparse.ArgumentParser(
    description="Print a PETSCII greeting",
    formatter_class=argparse.ArgumentDefaultsHelpFormatter)
ARGS.add_argument('--loglevel', help='Logging level', default='info')
ARGS.add_argument('--debug', action='store_true', help='show a hexdump')


def main():
    args = ARGS.parse_args()
    log = make_logger('hello_world', loglevel=args.loglevel)

    string = forbidden_bands.FixedString(len(HELLO_WORLD), HELLO_WORLD)
    if args.debug:
        print(forbidden_bands.format_debug(string))
    text = forbidden_bands.decode(string)
    log.info('decoded %d bytes to %d characters', len(string), len(text))
    print(text.replace('\r\n', '\n'))


if __name__ == '__main__':
    main()
