import logging
import sys
from argparse import ArgumentParser
from timeit import default_timer as timer
from typing import BinaryIO, Optional

from binstr.common import Mode, BinstrError
from binstr.decoder import decode
from binstr.encoder import encode
from binstr.utils import strip_newline


log = logging.getLogger('binstr')


# -----------------------------------------------------------------------------

PROG = 'binstr'

INPUT_ENCODING = 'utf-8'
OUTPUT_ENCODING = 'ascii'
OUTPUT_NEWLINE = b'\n'

LOG_FORMAT = '%(name)s: %(levelname)s: %(message)s'

EXIT_FAILURE = 1


# -----------------------------------------------------------------------------

def cmd_encode(f_in: BinaryIO, f_out: BinaryIO, strip: bool, newline: bool):
    data = f_in.read()
    if strip is True:
        data = strip_newline(data)

    time_start = timer()
    digits = encode(data)
    time_end = timer()

    delta = '{0:.6g}'.format(time_end - time_start)
    log.info("Encoded %d bytes into %d digits in %s seconds",
             len(data), len(digits), delta)

    f_out.write(digits.encode(OUTPUT_ENCODING))
    if newline is True:
        f_out.write(OUTPUT_NEWLINE)


def cmd_decode(f_in: BinaryIO, f_out: BinaryIO, strip: bool, newline: bool):
    # Undecodable input is kept as surrogates so it is reported as an invalid
    # digit rather than as a UnicodeDecodeError.
    digits = f_in.read().decode(INPUT_ENCODING, errors='surrogateescape')

    time_start = timer()
    data = decode(digits, strip=strip)
    time_end = timer()

    delta = '{0:.6g}'.format(time_end - time_start)
    log.info("Decoded %d digits into %d bytes in %s seconds",
             len(digits), len(data), delta)

    f_out.write(data)
    if newline is True:
        f_out.write(OUTPUT_NEWLINE)


# -----------------------------------------------------------------------------

def make_argument_parser():
    parser = ArgumentParser(
        prog=PROG,
        description=(
            "Convert standard input between bytes and a string of binary "
            "digits, 8 digits per byte, most significant bit first."
        )
    )

    parser.add_argument(
        '-d',
        dest='mode',
        action='store_const',
        const=Mode.Decode,
        default=Mode.Encode,
        help="Decode binary digits to bytes instead of encoding."
    )

    parser.add_argument(
        '-n',
        dest='newline',
        action='store_false',
        help="Do not append a trailing newline to the output."
    )

    parser.add_argument(
        '--no-strip',
        dest='strip',
        action='store_false',
        help=(
            "Do not strip a trailing newline from the input before "
            "processing it."
        )
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help="Log diagnostic messages to standard error."
    )

    return parser


def setup_logging(verbose: bool):
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    # stdout carries the payload.
    log.handlers = [handler]
    log.setLevel(logging.DEBUG if verbose else logging.WARNING)


def main(argv: Optional[list[str]] = None):
    parser = make_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    log.debug("Running in %s mode", args.mode.value)

    f_in = sys.stdin.buffer
    f_out = sys.stdout.buffer

    try:
        match args.mode:
            case Mode.Encode:
                cmd_encode(f_in, f_out, args.strip, args.newline)
            case Mode.Decode:
                cmd_decode(f_in, f_out, args.strip, args.newline)
    except BinstrError as e:
        parser.exit(EXIT_FAILURE, f"{parser.prog}: error: {e}\n")

    f_out.flush()


# -----------------------------------------------------------------------------

if __name__ == '__main__':
    main()
