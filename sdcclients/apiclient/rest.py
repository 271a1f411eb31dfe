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
Base client for the REST services.
"""
import logging
from urllib.parse import urljoin

import requests

from sdcclients.config import get_config_value
from sdcclients.session import SDCSession

LOGGER = logging.getLogger(__name__)


class APIError(Exception):
    """An exception occurred when making a request to the API.

    Attributes:
        status_code (int): the HTTP status of the response, or None when no
            response was received.
        body: the decoded JSON body of the error response, or None.
    """

    def __init__(self, message, status_code=None, body=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


def _decode_body(response):
    """Get the decoded JSON body of a response, or None if it has none."""
    try:
        return response.json()
    except ValueError:
        return None


class RESTClient:
    """A client for a REST service rooted at a base URL."""

    # This can be set in subclasses to name the service in log messages
    service_name = 'REST'

    def __init__(self, url, session=None, timeout=None):
        """Initialize the RESTClient.

        Args:
            url (str): The base URL of the service.
            session (requests.Session): The session to use when making REST
                calls, or None to create an SDCSession from configuration.
            timeout (int): number of seconds to wait for a response before
                timing out requests.

        Raises:
            ValueError: if `url` is empty.
        """
        if not url:
            raise ValueError(f'{self.service_name} URL required')

        self.url = url.rstrip('/')
        self.session = SDCSession() if session is None else session
        self.timeout = get_config_value('http.timeout') if timeout is None else timeout

    def _url(self, path):
        return urljoin(self.url + '/', path.lstrip('/'))

    def _make_req(self, path, req_type='GET', params=None, json=None, headers=None, expect=None):
        """Perform HTTP request with type `req_type` to the resource at `path`.

        Args:
            path (str): the path of the resource relative to the base URL.
            req_type (str): Type of request (GET, POST, PUT, or DELETE).
            params (dict): query parameters.
            json (dict): The data to encode as JSON and send as the body.
            headers (dict): extra headers for this request.
            expect (int): if given, the only status code considered a success.

        Returns:
            The requests.models.Response object if the request was successful.

        Raises:
            APIError: if the status code of the response is >= 400 or does not
                match `expect`, or the request raises a RequestException of
                any kind.
        """
        url = self._url(path)

        LOGGER.debug("Issuing %s request to URL '%s'", req_type, url)

        kwargs = {'params': params, 'headers': headers, 'timeout': self.timeout}
        try:
            if req_type == 'GET':
                r = self.session.get(url, **kwargs)
            elif req_type == 'POST':
                r = self.session.post(url, json=json, **kwargs)
            elif req_type == 'PUT':
                r = self.session.put(url, json=json, **kwargs)
            elif req_type == 'DELETE':
                r = self.session.delete(url, **kwargs)
            else:
                # Internal error not expected to occur.
                raise ValueError("Request type '{}' is invalid.".format(req_type))
        except requests.exceptions.RequestException as err:
            raise APIError(
                "{} request to URL '{}' failed: {}".format(req_type, url, err)
            ) from err

        LOGGER.debug("Received response to %s request to URL '%s' "
                     "with status code: '%s': %s", req_type, r.url, r.status_code, r.reason)

        if not r.ok or (expect is not None and r.status_code != expect):
            api_err_msg = (f"{req_type} request to URL '{url}' failed with status "
                           f"code {r.status_code}: {r.reason}")
            if r.ok:
                api_err_msg += f'. Expected status code {expect}'

            # Attempt to get more information from response
            body = _decode_body(r)
            if isinstance(body, dict):
                if 'code' in body:
                    api_err_msg += f'. {body["code"]}'
                if 'message' in body:
                    api_err_msg += f': {body["message"]}'

            raise APIError(api_err_msg, status_code=r.status_code, body=body)

        return r

    @staticmethod
    def json(response):
        """Decode the JSON body of a successful response.

        Returns:
            The decoded body, or None for an empty body.

        Raises:
            APIError: if the body is not valid JSON.
        """
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as err:
            raise APIError(f"Response from URL '{response.url}' could not be parsed as JSON: {err}")

    def get(self, path, params=None, headers=None, expect=None):
        """Issue an HTTP GET request to the resource at `path`.

        Returns:
            The requests.models.Response object if the request was successful.

        Raises:
            APIError: if the request failed.
        """
        return self._make_req(path, req_type='GET', params=params, headers=headers, expect=expect)

    def post(self, path, json=None, params=None, headers=None, expect=None):
        """Issue an HTTP POST request to the resource at `path`.

        Returns:
            The requests.models.Response object if the request was successful.

        Raises:
            APIError: if the request failed.
        """
        return self._make_req(path, req_type='POST', params=params, json=json,
                              headers=headers, expect=expect)

    def put(self, path, json=None, params=None, headers=None, expect=None):
        """Issue an HTTP PUT request to the resource at `path`.

        Returns:
            The requests.models.Response object if the request was successful.

        Raises:
            APIError: if the request failed.
        """
        return self._make_req(path, req_type='PUT', params=params, json=json,
                              headers=headers, expect=expect)

    def delete(self, path, params=None, headers=None, expect=None):
        """Issue an HTTP DELETE request to the resource at `path`.

        Returns:
            The requests.models.Response object if the request was successful.

        Raises:
            APIError: if the request failed.
        """
        return self._make_req(path, req_type='DELETE', params=params, headers=headers, expect=expect)

    def close(self):
        """Release the connections held by the session."""
        self.session.close()
