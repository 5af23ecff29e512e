#!/usr/bin/env python3
'''
Extract translatable strings from Go source files into a .pot template.

Strings are taken from calls to the marker functions given with --keyword
and --keyword-plural. A comment right above a call is copied to the
template when it starts with the --add-comments-tag text.

Examples:

    %(prog)s -k i18n.G --keyword-plural i18n.NG -o po/snappy.pot *.go
    %(prog)s -s --no-location -f POTFILES.in
'''

import argparse
import logging
import sys

from logging.config import dictConfig

from gettext_extractor.comments import DEFAULT_TAG
from gettext_extractor.errors import ExtractionError
from gettext_extractor.options import (DEFAULT_KEYWORD,
                                       DEFAULT_KEYWORD_PLURAL,
                                       ExtractOptions)
from gettext_extractor.parse import process_files
from gettext_extractor.pot_export import format_time, write_to_pot


LOGGING_CONFIG = {
    'formatters': {
        'standard': {'format': '%(levelname)s %(funcName)s: %(message)s'},
    },
    'handlers': {
        'default': {
            'level': 'NOTSET',  # will be set later
            'formatter': 'standard',
            'class': 'logging.StreamHandler',
        },
    },
    'loggers': {
        __name__: {
            'handlers': ['default'],
            'level': 'INFO',
        },
        'gettext_extractor': {
            'handlers': ['default'],
            'level': 'INFO',
        },
    },
    'disable_existing_loggers': False,
    'version': 1,
}


log = logging.getLogger(__name__)


def read_files_from(path):
    """Read input file names from a list file, one per line."""
    with open(path, encoding="utf-8") as fp:
        names = [line.strip() for line in fp]
    return [name for name in names if name and not name.startswith("#")]


def build_arg_parser():
    arg_parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter)
    arg_parser.add_argument(
        'files', nargs='*',
        help='Go source files to scan')
    arg_parser.add_argument(
        '-f', '--files-from', dest='files_from',
        help='get list of input files from FILE')
    arg_parser.add_argument(
        '-o', '--output', dest='output',
        help='output to specified file instead of standard output')
    arg_parser.add_argument(
        '-c', '--add-comments', dest='add_comments', action='store_true',
        help='place all comment blocks preceding keyword lines '
        'in output file')
    arg_parser.add_argument(
        '--add-comments-tag', dest='add_comments_tag', default=DEFAULT_TAG,
        help='place comment blocks starting with TAG and preceding '
        'keyword lines in output file')
    arg_parser.add_argument(
        '-s', '--sort-output', dest='sort_output', action='store_true',
        help='generate sorted output')
    arg_parser.add_argument(
        '--no-location', dest='no_location', action='store_true',
        help="do not write '#: filename:line' lines")
    arg_parser.add_argument(
        '--msgid-bugs-address', dest='msgid_bugs_address', default='EMAIL',
        help='set report address for msgid bugs')
    arg_parser.add_argument(
        '--package-name', dest='package_name', default='',
        help='set package name in output')
    arg_parser.add_argument(
        '-k', '--keyword', dest='keyword', default=DEFAULT_KEYWORD,
        help='comma separated names of the singular marker functions')
    arg_parser.add_argument(
        '--keyword-plural', dest='keyword_plural',
        default=DEFAULT_KEYWORD_PLURAL,
        help='comma separated names of the plural marker functions')
    arg_parser.add_argument(
        '--loglevel', dest='loglevel',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='WARNING',
        help="set verbosity level")
    return arg_parser


def main(argv=None) -> int:
    """
    Called when the script is executed directly
    """
    arg_parser = build_arg_parser()
    args_dict = vars(arg_parser.parse_args(argv))

    dictConfig(LOGGING_CONFIG)
    level = getattr(logging, args_dict.get('loglevel'))
    for logger_name in LOGGING_CONFIG['loggers']:
        logging.getLogger(logger_name).setLevel(level)

    files = list(args_dict.get('files'))
    if args_dict.get('files_from'):
        try:
            files += read_files_from(args_dict['files_from'])
        except OSError as err:
            log.error('cannot read file list: %s', err)
            return 1
    if not files:
        arg_parser.error('no input files given')

    options = ExtractOptions.from_args(
        keyword=args_dict.get('keyword'),
        keyword_plural=args_dict.get('keyword_plural'),
        add_comments=args_dict.get('add_comments'),
        add_comments_tag=args_dict.get('add_comments_tag'),
        no_location=args_dict.get('no_location'),
        sort_output=args_dict.get('sort_output'),
        package_name=args_dict.get('package_name'),
        msgid_bugs_address=args_dict.get('msgid_bugs_address'),
    )

    # nothing is written unless every file was parsed
    try:
        catalog = process_files(files, options)
    except ExtractionError as err:
        log.error('%s', err)
        return 1
    except OSError as err:
        log.error('cannot read source: %s', err)
        return 1

    output = args_dict.get('output')
    if not output:
        write_to_pot(sys.stdout, catalog, options, format_time)
        return 0
    try:
        with open(output, 'w', encoding='utf-8') as fp:
            write_to_pot(fp, catalog, options, format_time)
    except OSError as err:
        log.error('cannot write %s: %s', output, err)
        return 1
    log.info('wrote %d message(s) to %s', len(catalog), output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
