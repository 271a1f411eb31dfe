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
The parser for the cloudapi subcommand.
"""

RESOURCES = ('account', 'keys', 'packages', 'datasets', 'datacenters',
             'machines', 'analytics', 'instrumentations')


def add_cloudapi_subparser(subparsers):
    """Add the cloudapi subparser to the parent parser.

    Args:
        subparsers: The argparse.ArgumentParser object returned by the
            add_subparsers method.

    Returns:
        None
    """

    cloudapi_parser = subparsers.add_parser(
        'cloudapi', help='Query CloudAPI.',
        description='Query a CloudAPI resource and print it as JSON. With a name, '
                    'get a single key, package, dataset, machine or instrumentation.')

    cloudapi_parser.add_argument('resource', choices=RESOURCES, help='The resource to query.')
    cloudapi_parser.add_argument('name', nargs='?', help='The name or id of a single item.')

    cloudapi_parser.add_argument('--url', help='The CloudAPI URL. Overrides value set in config file.')
    cloudapi_parser.add_argument('--account', help='The login name of the account to query.')
    cloudapi_parser.add_argument('--username', help='Login name for HTTP Basic authentication.')
    cloudapi_parser.add_argument('--key-id', dest='key_id',
                                 help='The id of the SSH key to sign requests with.')
    cloudapi_parser.add_argument('--key-file', dest='key_file',
                                 help='The PEM private key file that goes with --key-id.')
    cloudapi_parser.add_argument('--no-cache', dest='no_cache', action='store_true', default=None,
                                 help='Disable response caching.')
