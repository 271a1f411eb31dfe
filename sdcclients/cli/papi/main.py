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
Entry point for the papi subcommand.
"""
import logging

from sdcclients.apiclient import APIError, PAPIClient
from sdcclients.util import json_dump

LOGGER = logging.getLogger(__name__)


def parse_filters(filters):
    """Parse ATTR=VALUE strings into a dict.

    Raises:
        ValueError: if a string does not contain '='.
    """
    parsed = {}
    for filter_str in filters:
        attr, sep, value = filter_str.partition('=')
        if not sep or not attr:
            raise ValueError(f"Filter '{filter_str}' is not of the form ATTR=VALUE.")
        parsed[attr] = value
    return parsed


def do_papi(args):
    """Run the papi command with the given arguments.

    Args:
        args: The argparse.Namespace object containing the parsed arguments
            passed to this subcommand.
    """
    try:
        client = PAPIClient()
    except ValueError as err:
        LOGGER.error('Unable to create PAPI client: %s', err)
        raise SystemExit(1)

    try:
        if args.action == 'list':
            options = {'escape': args.escape}
            for option in ('limit', 'offset'):
                if getattr(args, option) is not None:
                    options[option] = getattr(args, option)
            package_filter = args.ldap_filter or parse_filters(args.filters)
            result = client.list(package_filter, options)
        else:
            options = {'owner_uuids': args.owner_uuid} if args.owner_uuid else None
            result = client.get(args.uuid, options)
    except (APIError, ValueError) as err:
        LOGGER.error(err)
        raise SystemExit(1)
    finally:
        client.close()

    print(json_dump(result))
