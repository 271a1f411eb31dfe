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
Client for the Package API (PAPI).
"""
import logging

from sdcclients.apiclient.rest import APIError, RESTClient
from sdcclients.config import get_config_value
from sdcclients.util import path_segment, resource_name

LOGGER = logging.getLogger(__name__)

PACKAGES = '/packages'
PACKAGE = PACKAGES + '/{}'

# RFC 4515 escapes for LDAP filter values
LDAP_ESCAPES = {
    '\\': '\\5c',
    '*': '\\2a',
    '(': '\\28',
    ')': '\\29',
    '\0': '\\00',
}


class PAPIError(APIError):
    """An error reported by PAPI.

    The message is the service's own message, and `body` holds the full
    error response, e.g. the list of field errors under 'errors'.
    """
    pass


def ldap_escape(value):
    """Escape the special characters of an LDAP filter value.

    Args:
        value: the value to escape. Lists are escaped element-wise; values
            other than strings are returned unchanged.

    Returns:
        The escaped value.
    """
    if isinstance(value, list):
        return [ldap_escape(v) for v in value]
    if not isinstance(value, str):
        return value
    return ''.join(LDAP_ESCAPES.get(c, c) for c in value)


class PAPIClient(RESTClient):
    """A client for the Package API."""

    service_name = 'PAPI'

    def __init__(self, url=None, session=None, timeout=None):
        if url is None:
            url = get_config_value('papi.url')
        super().__init__(url, session=session, timeout=timeout)

    @staticmethod
    def _error(err):
        """Convert an APIError to a PAPIError carrying the service's message."""
        message = err.message
        if isinstance(err.body, dict) and err.body.get('message'):
            message = err.body['message']
        return PAPIError(message, status_code=err.status_code, body=err.body)

    def _request(self, req_type, path, params=None, json=None):
        try:
            return self._make_req(path, req_type=req_type, params=params, json=json)
        except APIError as err:
            raise self._error(err)

    def add(self, package):
        """Create a package.

        Args:
            package (dict): the package attributes.

        Returns:
            The created package, including its 'uuid'.
        """
        if not package or not isinstance(package, dict):
            raise TypeError('package (object) required')
        return self.json(self._request('POST', PACKAGES, json=package))

    def get(self, uuid, options=None):
        """Get a package.

        Args:
            uuid (str or dict): the package UUID, or a package object.
            options (dict): query options, e.g. 'owner_uuids' to only find
                the package when it is available to that owner.
        """
        uuid = path_segment(resource_name(uuid, 'uuid', 'uuid'))
        return self.json(self._request('GET', PACKAGE.format(uuid), params=options or None))

    def update(self, uuid, changes):
        """Modify the mutable attributes of a package.

        Returns:
            The updated package.
        """
        uuid = path_segment(resource_name(uuid, 'uuid', 'uuid'))
        if not changes or not isinstance(changes, dict):
            raise TypeError('changes (object) required')
        return self.json(self._request('PUT', PACKAGE.format(uuid), json=changes))

    def delete(self, uuid, options=None):
        """Delete a package.

        Args:
            uuid (str or dict): the package UUID, or a package object.
            options (dict): query options, e.g. {'force': True}.
        """
        uuid = path_segment(resource_name(uuid, 'uuid', 'uuid'))
        self._request('DELETE', PACKAGE.format(uuid), params=options or None)

    def list(self, filter=None, options=None):
        """List packages.

        Args:
            filter (str or dict): an LDAP search filter string, or a dict of
                attribute values. Dict values are LDAP-escaped so that e.g.
                '*' matches literally, unless options['escape'] is False.
            options (dict): 'escape', plus any of 'offset', 'limit', 'sort'
                and 'order'.

        Returns:
            A list of packages.
        """
        options = dict(options or {})
        escape = options.pop('escape', True)

        if filter is None:
            params = {}
        elif isinstance(filter, str):
            params = {'filter': filter}
        elif isinstance(filter, dict):
            params = {key: ldap_escape(value) if escape else value
                      for key, value in filter.items()}
        else:
            raise TypeError('filter (object|str) required')

        params.update(options)
        packages = self.json(self._request('GET', PACKAGES, params=params))
        LOGGER.debug('PAPI list(%s) -> %d packages', params, len(packages or []))
        return packages or []
