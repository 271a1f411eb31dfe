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
Entry point for the command-line interface.
"""

import logging
import sys

import argcomplete

from sdcclients.cli import get_subcommand_main
from sdcclients.config import get_config_file_path, load_config
from sdcclients.logging import bootstrap_logging, configure_logging
from sdcclients.parser import create_parent_parser
from sdcclients.util import ensure_permissions

LOGGER = logging.getLogger(__name__)


def main():
    """sdc-clients main.

    Returns:
        None. Calls sys.exit().
    """
    try:
        bootstrap_logging()

        parser = create_parent_parser()
        argcomplete.autocomplete(parser)
        args = parser.parse_args()

        # The config file may hold a password, so keep it private
        ensure_permissions(get_config_file_path())

        load_config(args)
        configure_logging()

        # Import only the code of the requested subcommand
        try:
            subcommand = get_subcommand_main(args.command)
        except RuntimeError as err:
            LOGGER.error('%s', err)
            sys.exit(1)

        subcommand(args)

    except KeyboardInterrupt:
        LOGGER.info("Received keyboard interrupt; quitting.", exc_info=True)

    sys.exit(0)


if __name__ == '__main__':
    main()
