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
Helpers shared by the unit tests.
"""
from contextlib import contextmanager
import copy
import unittest
from unittest import mock

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
import requests
from requests.structures import CaseInsensitiveDict

import sdcclients.config
from sdcclients.config import SDCConfig


class ExtendedTestCase(unittest.TestCase):
    """A subclass that implements additional helpful assertions."""

    def assert_in_element(self, element, container):
        """Assert the given element is in one of the elements in container.

        Returns:
            None.

        Raises:
            AssertionError: if the assertion fails.
        """
        for item in container:
            if element in item:
                return
        self.fail("Element '{}' is not in any of the elements in "
                  "the given container.".format(element))

    def assert_not_in_element(self, element, container):
        """Assert the given element is not in one of the elements in container.

        Returns:
            None.

        Raises:
            AssertionError: if the assertion fails.
        """
        for item in container:
            if element in item:
                self.fail("Element '{}' is in one of the elements in "
                          "the given container.".format(element))


@contextmanager
def config(overrides=None):
    """Use a default configuration, updated with `overrides`, in a context.

    Args:
        overrides (dict): a mapping of section name to a dict of options.
    """
    stored_config = sdcclients.config.CONFIG
    test_config = SDCConfig('')
    for section, options in (overrides or {}).items():
        test_config.sections[section].update(options)
    sdcclients.config.CONFIG = test_config
    try:
        yield test_config
    finally:
        sdcclients.config.CONFIG = stored_config


class ConfiguredTestCase(ExtendedTestCase):
    """A test case that runs every test with the default configuration."""

    def setUp(self):
        self.stored_config = sdcclients.config.CONFIG
        sdcclients.config.CONFIG = SDCConfig('')

    def tearDown(self):
        sdcclients.config.CONFIG = self.stored_config
        mock.patch.stopall()


def generate_pem_key():
    """Generate an RSA private key.

    Returns:
        A tuple of the private key object and its unencrypted PEM encoding.
    """
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption()
    ).decode('ascii')
    return private_key, pem


def mock_response(json_data=None, status_code=200, headers=None, url='https://example.com/'):
    """Create a mock requests.Response.

    Args:
        json_data: the decoded JSON body, or None for an empty body.
        status_code (int): the HTTP status.
        headers (dict): the response headers.
        url (str): the URL of the response.
    """
    response = mock.Mock(spec=requests.Response)
    response.status_code = status_code
    response.ok = status_code < 400
    response.reason = 'OK' if response.ok else 'Error'
    response.headers = CaseInsensitiveDict(headers or {})
    response.url = url
    if json_data is None:
        response.content = b''
        response.json.side_effect = ValueError('No JSON object could be decoded')
    else:
        response.content = b'{...}'
        response.json.return_value = copy.deepcopy(json_data)
    return response
