"""Command-line tools converting PETSCII records on standard input."""
# std imports
import argparse
import sys

# local
from . import accessories, codec, debug
from .error import ForbiddenBandsError
from .fixedstring import FillPolicy, FixedString, SPACE

__all__ = ('decode_main', 'encode_main')


def _add_logging_arguments(parser):
    parser.add_argument("--loglevel", default="warn", help="log level")
    parser.add_argument(
        "--logfmt", default=accessories._DEFAULT_LOGFMT, help="log format"
    )
    parser.add_argument("--logfile", help="filepath")


def _get_decode_argument_parser():
    parser = argparse.ArgumentParser(
        description="Decode a PETSCII record from standard input",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--length", type=int, default=None,
        help="fixed record length, the input length when omitted",
    )
    parser.add_argument(
        "--strip-padding", type=accessories.parse_byte, default=None,
        help="byte value of trailing padding to leave out, e.g. 0xa0",
    )
    parser.add_argument(
        "--debug", action="store_true", help="write a hexdump to stderr"
    )
    _add_logging_arguments(parser)
    return parser


def _get_encode_argument_parser():
    parser = argparse.ArgumentParser(
        description="Encode text from standard input as a PETSCII record",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--length", type=int, default=None,
        help="fixed record length, the encoded length when omitted",
    )
    parser.add_argument(
        "--policy",
        default=FillPolicy.FAIL.value,
        choices=[policy.value for policy in FillPolicy],
        help="what to do when the encoded text does not fit",
    )
    parser.add_argument(
        "--fill", type=accessories.parse_byte, default=SPACE,
        help="padding byte value",
    )
    parser.add_argument(
        "--keep-newline", action="store_true",
        help="encode the trailing newline of the input",
    )
    _add_logging_arguments(parser)
    return parser


def decode_main(argv=None):
    """Read raw bytes from stdin and write the decoded text to stdout."""
    args = _get_decode_argument_parser().parse_args(argv)
    log = accessories.make_logger(
        "forbidden_bands.cli", loglevel=args.loglevel,
        logfile=args.logfile, logfmt=args.logfmt)

    data = sys.stdin.buffer.read()
    length = len(data) if args.length is None else args.length
    log.debug("read %d bytes, record length %d", len(data), length)
    try:
        string = FixedString(length, data)
    except ForbiddenBandsError as err:
        log.error("%s", err)
        return 1

    if args.debug:
        sys.stderr.write(debug.format_debug(string) + "\n")
    sys.stdout.write(codec.decode(string, padding=args.strip_padding) + "\n")
    sys.stdout.flush()
    return 0


def encode_main(argv=None):
    """Read text from stdin and write the encoded record to stdout."""
    args = _get_encode_argument_parser().parse_args(argv)
    log = accessories.make_logger(
        "forbidden_bands.cli", loglevel=args.loglevel,
        logfile=args.logfile, logfmt=args.logfmt)

    text = sys.stdin.read()
    if not args.keep_newline and text.endswith("\n"):
        text = text[:-1]
    try:
        if args.length is None:
            data = codec.encode_bytes(text)
        else:
            data = bytes(codec.encode(
                text, args.length, policy=FillPolicy(args.policy),
                fill=args.fill))
    except ForbiddenBandsError as err:
        log.error("%s", err)
        return 1

    log.debug("encoded %d characters to %d bytes", len(text), len(data))
    sys.stdout.buffer.write(data)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(decode_main())
