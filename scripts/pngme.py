#!/usr/bin/env python3
'''
Hide messages into PNG files using private ancillary chunks

 $ pngme.py encode image.png ruSt 'secret message'
 $ pngme.py decode image.png ruSt
'''
import logging
import sys
import os

from pngstruct import commands
from pngstruct.exceptions import PNGStructException


logging.basicConfig(level=logging.INFO if 'DEBUG' not in os.environ else logging.DEBUG)
logger = logging.getLogger(__name__)


def usage(progname):
    print(f'''usage: {progname} encode <png file path> <chunk type> <message> [<output path>]
       {progname} decode <png file path> <chunk type>
       {progname} remove <png file path> <chunk type>
       {progname} print <png file path>''')
    sys.exit(1)


def do_encode(path, chunk_type, message, output=None):
    commands.encode(path, chunk_type, message, output=output)
    print('encoded correctly')


def do_decode(path, chunk_type):
    print(f'decoded message: {commands.decode(path, chunk_type)}')


def do_remove(path, chunk_type):
    commands.remove(path, chunk_type)
    print('chunk removed successfully')


def do_print(path):
    print(commands.print_chunks(path))


# name -> (callable, min args, max args)
COMMANDS = {
    'encode': (do_encode, 3, 4),
    'decode': (do_decode, 2, 2),
    'remove': (do_remove, 2, 2),
    'print': (do_print, 1, 1),
}


if __name__ == '__main__':
    if len(sys.argv) < 2 or sys.argv[1] not in COMMANDS:
        usage(sys.argv[0])

    command, min_args, max_args = COMMANDS[sys.argv[1]]
    args = sys.argv[2:]

    if not min_args <= len(args) <= max_args:
        usage(sys.argv[0])

    try:
        command(*args)
    except (PNGStructException, OSError) as e:
        print(f'{sys.argv[0]}: {e}', file=sys.stderr)
        sys.exit(1)
