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
The parser for the papi subcommand.
"""


def add_papi_subparser(subparsers):
    """Add the papi subparser to the parent parser.

    Args:
        subparsers: The argparse.ArgumentParser object returned by the
            add_subparsers method.

    Returns:
        None
    """

    papi_parser = subparsers.add_parser(
        'papi', help='Query the Package API.',
        description='List or get packages from the Package API and print them as JSON.')

    papi_parser.add_argument('--url', dest='papi_url',
                             help='The PAPI URL. Overrides value set in config file.')

    actions = papi_parser.add_subparsers(metavar='action', dest='action', required=True)

    list_parser = actions.add_parser('list', help='List packages.')
    list_parser.add_argument(
        '--filter', action='append', default=[], metavar='ATTR=VALUE', dest='filters',
        help='Only list packages whose attribute ATTR matches VALUE. May be given '
             'more than once.')
    list_parser.add_argument(
        '--ldap-filter', dest='ldap_filter',
        help='An LDAP search filter, e.g. "(max_physical_memory=128)". '
             'Takes precedence over --filter.')
    list_parser.add_argument(
        '--no-escape', dest='escape', action='store_false',
        help='Do not escape wildcards in --filter values.')
    list_parser.add_argument('--limit', type=int, help='The maximum number of packages.')
    list_parser.add_argument('--offset', type=int, help='The number of packages to skip.')

    get_parser = actions.add_parser('get', help='Get a package.')
    get_parser.add_argument('uuid', help='The UUID of the package.')
    get_parser.add_argument('--owner-uuid', dest='owner_uuid',
                            help='Only find the package if it is available to this owner.')
