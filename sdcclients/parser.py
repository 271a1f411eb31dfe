#
# MIT License
#
# (C) Copyright 2026 Hewlett Packard Enterprise Development LP
#
# Permission is hereby granted, free of charge, to any person obtaining a
# copy of this software and associated documentation files (the "Software"),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included
# in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL
# THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR
# OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE,
# ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR
# OTHER DEALINGS IN THE SOFTWARE.
#
"""
The top-level argument parser of the command line interface.
"""
from argparse import ArgumentParser, _SubParsersAction
from importlib.metadata import PackageNotFoundError, version as package_version
import sys

import inflect

import sdcclients.cli

DISTRIBUTION_NAME = 'sdc-clients'


def _unrecognized_msg(unknown, subcommand=None):
    """Generates an error message describing unrecognized option(s).

    Args:
        unknown ([str]): unrecognized arguments
        subcommand (str, None): the subcommand in use.

    Returns:
        a string describing the unrecognized arguments.
    """
    inf = inflect.engine()
    return ('unrecognized {}{}: {}'
            .format(inf.plural("argument", len(unknown)),
                    ' for subcommand {}'.format(subcommand) if subcommand else '',
                    inf.join(unknown)))


class SDCArgParser(ArgumentParser):
    """Small subclass of argparse.ArgumentParser.

    This prints the usage of the subcommand, rather than of the whole
    program, when a subcommand is given problematic arguments.
    """
    def parse_args(self, args=None, namespace=None):
        """Parses command line arguments.

        See superclass documentation.
        """
        parsed, unknown = self.parse_known_args(args, namespace)

        if parsed.command is None:  # No subcommand given
            self.print_help()
            if unknown:
                self.error(_unrecognized_msg(unknown))
            else:
                self.error('missing subcommand')

        elif unknown:
            self.error(_unrecognized_msg(unknown, subcommand=parsed.command))

        else:
            return parsed

    def error(self, message):
        """Prints errors based on invalid arguments.

        See superclass documentation.
        """
        if len(sys.argv) > 1:
            subcommand = sys.argv[1]
            subparser_actions = [action for action in self._actions
                                 if isinstance(action, _SubParsersAction)]
            if not subparser_actions:
                # Called from a subparser itself
                self._print_message(self.format_usage(), file=sys.stderr)
            else:
                action = subparser_actions.pop()
                if subcommand in action.choices:
                    self._print_message(action.choices[subcommand].format_help(),
                                        file=sys.stderr)

        fargs = {'prog': self.prog, 'message': message}
        self.exit(2, "{prog}: error: {message}\n".format(**fargs))


def get_version():
    """Get the version of the installed sdc-clients distribution."""
    try:
        return package_version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return 'unknown'


def create_parent_parser():
    """Creates the top-level parser and adds subparsers for the commands.

    Returns:
        An argparse.ArgumentParser object with all arguments and subparsers
        added to it.
    """

    parser = SDCArgParser(description='Clients for the SmartDataCenter REST services')

    parser.add_argument('--version', action='version',
                        version='%(prog)s {}'.format(get_version()))

    parser.add_argument(
        '--logfile',
        help='Set location of logs for this run. Overrides value set in config file.')

    parser.add_argument(
        '--loglevel',
        help='Set minimum log severity to report for this run. This level applies to '
             'messages logged to stderr and to the log file. Overrides values set in '
             'config file.',
        choices=['debug', 'info', 'warning', 'error', 'critical'])

    subparsers = parser.add_subparsers(metavar='command', dest='command')
    sdcclients.cli.build_out_subparsers(subparsers)

    return parser
