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
Client for the Config service, which stores the configuration files of each
service role.
"""
import logging
import os

from sdcclients.apiclient.rest import APIError, RESTClient
from sdcclients.config import get_config_value
from sdcclients.util import get_field, json_dump, path_segment

LOGGER = logging.getLogger(__name__)

CONFIGS = '/configs/{}'
CONFIG = CONFIGS + '/{}'

FILE_TYPES = ('text', 'json')
REQUIRED_FILE_FIELDS = ('service', 'type', 'path', 'contents')
LOOKUP_OPTIONS = ('zoneid', 'tag')


def validate_file(config_file):
    """Check that a config file has every required field and a known type.

    Args:
        config_file (dict): a config file with 'service', 'type', 'path'
            and 'contents'.

    Raises:
        ValueError: if a field is missing or the type is unknown.
    """
    if not isinstance(config_file, dict):
        raise TypeError('file (object) required')
    missing = [field for field in REQUIRED_FILE_FIELDS if field not in config_file]
    if missing:
        raise ValueError(f'Config file is missing field(s): {", ".join(missing)}')
    if config_file['type'] not in FILE_TYPES:
        raise ValueError(f"Config file type '{config_file['type']}' is not one of "
                         f"{', '.join(FILE_TYPES)}")


class ConfigServiceClient(RESTClient):
    """A client for the Config service."""

    service_name = 'Config service'

    def __init__(self, url=None, session=None, timeout=None):
        if url is None:
            url = get_config_value('config_service.url')
        super().__init__(url, session=session, timeout=timeout)

    def lookup(self, role, options=None):
        """Look up the config files of a role.

        Args:
            role (str): the service role.
            options (dict): optional 'zoneid' and 'tag' to narrow the lookup.

        Returns:
            A dict mapping service name to config file. Empty if the role
            has no config files.
        """
        if not role or not isinstance(role, str):
            raise TypeError('role (str) required')
        options = options or {}
        params = {key: options[key] for key in LOOKUP_OPTIONS if options.get(key)}

        try:
            response = self.get(CONFIGS.format(path_segment(role)), params=params or None)
        except APIError as err:
            if err.status_code == 404:
                LOGGER.debug('No config files found for role %s', role)
                return {}
            raise

        return self.json(response) or {}

    def put(self, config_file, role):
        """Store a config file for a role, replacing any for the same service.

        Args:
            config_file (dict): the config file, see validate_file.
            role (str): the service role.
        """
        if not role or not isinstance(role, str):
            raise TypeError('role (str) required')
        validate_file(config_file)

        path = CONFIG.format(path_segment(role), path_segment(config_file['service']))
        super().put(path, json=config_file)

    def delete(self, service, role):
        """Delete the config file of a service from a role.

        Args:
            service (str or dict): the service name, or a config file.
            role (str): the service role.
        """
        if not isinstance(service, str):
            service = get_field(service, 'service')
        if not service:
            raise TypeError('service (object|str) required')
        if not role or not isinstance(role, str):
            raise TypeError('role (str) required')

        super().delete(CONFIG.format(path_segment(role), path_segment(service)))

    def write(self, config):
        """Write the config files returned by lookup to their local paths.

        Args:
            config (dict): a mapping of service name to config file.

        Raises:
            OSError: if a file can't be written.
        """
        for service, config_file in config.items():
            validate_file(config_file)
            path = config_file['path']
            directory = os.path.dirname(path)
            if directory:
                os.makedirs(directory, exist_ok=True)

            if config_file['type'] == 'json':
                contents = json_dump(config_file['contents'])
            else:
                contents = config_file['contents']

            LOGGER.info("Writing config file for service '%s' to %s", service, path)
            with open(path, 'w') as f:
                f.write(contents)

    def unbind(self):
        """Close the connection to the Config service."""
        self.close()
