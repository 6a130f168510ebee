"""
Read a BDF font and write it back out normalised

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import sys
import argparse
import logging

import bdfont
from bdfont.scripting import wrap_main
from bdfont.streams import Stream


def _get_parser():
    parser = argparse.ArgumentParser(
        prog='bdfont',
        description='Read a BDF font and write it back out normalised.',
    )
    parser.add_argument('infile', nargs='?', default='', help='BDF file to read (default: stdin)')
    parser.add_argument('outfile', nargs='?', default='', help='file to write (default: stdout)')
    parser.add_argument(
        '--entries', action='store_true',
        help='print the decoded records instead of writing a font'
    )
    parser.add_argument('--overwrite', action='store_true', help='replace existing output file')
    parser.add_argument('--debug', action='store_true', help='enable debugging output')
    parser.add_argument(
        '--version', action='version', version=f'bdfont v{bdfont.__version__}'
    )
    return parser


def dump_entries(infile, outstream):
    """Print one line per record, with the line number it ended on."""
    with Stream(infile or sys.stdin, 'r') as stream:
        reader = bdfont.Reader(stream.text)
        for record in reader:
            outstream.write(f'{reader.line_number}: {record!r}\n')


def main(argv=None):
    args = _get_parser().parse_args(argv)
    with wrap_main(args.debug):
        if args.entries:
            dump_entries(args.infile, sys.stdout)
        else:
            font = bdfont.load(args.infile)
            logging.debug('Loaded %r.', font)
            bdfont.save(font, args.outfile, overwrite=args.overwrite)


if __name__ == '__main__':
    main()
