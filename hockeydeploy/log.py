# Any copyright is dedicated to the Public Domain.
# http://creativecommons.org/publicdomain/zero/1.0/

'''
Console output in the build step's colors. Failures and warnings go to
stderr, everything else to stdout.
'''

import sys

RED = '\x1b[31;1m'
YELLOW = '\x1b[33;1m'
BLUE = '\x1b[34;1m'
GREEN = '\x1b[32;1m'
RESET = '\x1b[0m'


def _printable(message):
    # Surrogate escapes from undecodable input can't be written to a strict stream.
    return message.encode('utf-8', 'backslashreplace').decode('utf-8')


def _colored(color, message):
    return '%s%s%s' % (color, _printable(message), RESET)


def info(message):
    print()
    print(_colored(BLUE, message))


def details(message):
    print('  %s' % _printable(message))


def done(message):
    print('  %s' % _colored(GREEN, message))


def warn(message):
    print(_colored(YELLOW, message), file=sys.stderr)


def fail(message):
    print(_colored(RED, message), file=sys.stderr)
