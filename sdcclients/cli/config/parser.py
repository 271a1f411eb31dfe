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
The parser for the config subcommand.
"""


def add_config_subparser(subparsers):
    """Add the config subparser to the parent parser.

    Args:
        subparsers: The argparse.ArgumentParser object returned by the
            add_subparsers method.

    Returns:
        None
    """

    config_parser = subparsers.add_parser(
        'config', help='Look up configuration files in the Config service.',
        description='Look up the configuration files of a service role and print them '
                    'as JSON, or write them to their paths on the local system.')

    config_parser.add_argument('role', help='The service role.')
    config_parser.add_argument('--url', dest='config_service_url',
                               help='The Config service URL. Overrides value set in config file.')
    config_parser.add_argument('--zoneid', help='Only look up files for this zone.')
    config_parser.add_argument('--tag', help='Only look up files with this tag.')
    config_parser.add_argument('--write', action='store_true',
                               help='Write the files to their paths instead of printing them.')
