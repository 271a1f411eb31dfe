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
Entry point for the config subcommand.
"""
import logging

from sdcclients.apiclient import APIError, ConfigServiceClient
from sdcclients.util import json_dump

LOGGER = logging.getLogger(__name__)


def do_config(args):
    """Run the config command with the given arguments.

    Args:
        args: The argparse.Namespace object containing the parsed arguments
            passed to this subcommand.
    """
    try:
        client = ConfigServiceClient()
    except ValueError as err:
        LOGGER.error('Unable to create Config service client: %s', err)
        raise SystemExit(1)

    try:
        config = client.lookup(args.role, {'zoneid': args.zoneid, 'tag': args.tag})
        if args.write:
            client.write(config)
    except (APIError, OSError, ValueError) as err:
        LOGGER.error(err)
        raise SystemExit(1)
    finally:
        client.unbind()

    if not args.write:
        print(json_dump(config))
    elif not config:
        LOGGER.warning('No configuration files found for role %s.', args.role)
