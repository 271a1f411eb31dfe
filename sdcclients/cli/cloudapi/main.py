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
Entry point for the cloudapi subcommand.
"""
import logging

from sdcclients.apiclient import APIError, CloudAPIClient
from sdcclients.util import json_dump

LOGGER = logging.getLogger(__name__)

# Methods for listing each resource, and for getting a single item by name
RESOURCE_METHODS = {
    'account': ('get_account', None),
    'keys': ('list_keys', 'get_key'),
    'packages': ('list_packages', 'get_package'),
    'datasets': ('list_datasets', 'get_dataset'),
    'datacenters': ('list_datacenters', None),
    'machines': ('list_machines', 'get_machine'),
    'analytics': ('describe_analytics', None),
    'instrumentations': ('list_insts', 'get_inst'),
}


def query_resource(client, resource, name=None):
    """Query one CloudAPI resource.

    Args:
        client (CloudAPIClient): the client to query with.
        resource (str): one of the keys of RESOURCE_METHODS.
        name (str): the name or id of a single item, or None to list.

    Returns:
        The decoded response.

    Raises:
        ValueError: if `name` is given for a resource without single items.
        APIError: if the query fails.
    """
    list_method, get_method = RESOURCE_METHODS[resource]
    if name is None:
        result = getattr(client, list_method)()
        if resource == 'machines':
            machines, done = result
            if not done:
                LOGGER.warning('More machines exist than were returned by CloudAPI.')
            return machines
        return result

    if get_method is None:
        raise ValueError(f"Resource '{resource}' does not support getting a single item.")
    if resource == 'instrumentations':
        try:
            name = int(name)
        except ValueError:
            raise ValueError(f"Instrumentation id '{name}' must be an integer.")
    return getattr(client, get_method)(name)


def do_cloudapi(args):
    """Run the cloudapi command with the given arguments.

    Args:
        args: The argparse.Namespace object containing the parsed arguments
            passed to this subcommand.
    """
    try:
        client = CloudAPIClient(account=args.account)
    except ValueError as err:
        LOGGER.error('Unable to create CloudAPI client: %s', err)
        raise SystemExit(1)

    try:
        result = query_resource(client, args.resource, args.name)
    except (APIError, ValueError) as err:
        LOGGER.error(err)
        raise SystemExit(1)
    finally:
        client.close()

    print(json_dump(result))
