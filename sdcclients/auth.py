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
Authorization header construction for CloudAPI requests.

Two schemes are supported: HTTP Basic authentication with a username and
password, and HTTP Signature authentication, where the value of the Date
header is signed with an RSA private key whose public half is registered
under `key_id`. Signature authentication is used whenever a key is given.
"""
import base64
from email.utils import formatdate

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

SIGNATURE = 'Signature keyId="{}",algorithm="{}" {}'
SIGNATURE_ALGORITHM = 'rsa-sha256'
BASIC_SCHEME = 'basic'
SIGNATURE_SCHEME = 'signature'


def http_date(timestamp=None):
    """Get an RFC 1123 date string in GMT, suitable for a Date header.

    Args:
        timestamp (float): seconds since the epoch, or None for now.

    Returns:
        str: e.g. 'Mon, 19 Oct 2026 12:00:00 GMT'
    """
    return formatdate(timestamp, usegmt=True)


def basic_auth(username, password):
    """Get the value of a Basic Authorization header."""
    token = base64.b64encode(f'{username}:{password}'.encode('utf-8')).decode('ascii')
    return f'Basic {token}'


def load_private_key(key):
    """Load an RSA private key from PEM data.

    Args:
        key (str or bytes): the PEM encoded private key.

    Returns:
        The RSAPrivateKey object.

    Raises:
        ValueError: if the key can't be parsed or is not an RSA key.
    """
    if isinstance(key, str):
        key = key.encode('utf-8')
    try:
        private_key = serialization.load_pem_private_key(key, password=None)
    except (TypeError, ValueError, UnsupportedAlgorithm) as err:
        raise ValueError(f'Unable to load private key: {err}') from err

    if not isinstance(private_key, rsa.RSAPrivateKey):
        raise ValueError('Private key must be an RSA key.')
    return private_key


class Authenticator:
    """Builds the Authorization header for each request."""

    def __init__(self, username=None, password=None, key_id=None, key=None):
        """Create an Authenticator.

        Args:
            username (str): login name for Basic authentication.
            password (str): password for Basic authentication.
            key_id (str): id of the SSH key registered with the service.
            key (str or bytes): PEM private key matching `key_id`.

        Raises:
            ValueError: if neither username/password nor key_id/key are
                given, or if the key can't be loaded.
        """
        if not (username and password) and not (key_id and key):
            raise ValueError('Either username/password or key_id/key are required')

        self.key_id = None
        self.private_key = None
        self.basic_auth = None

        if key_id and key:
            self.key_id = key_id
            self.private_key = load_private_key(key)
        else:
            self.basic_auth = basic_auth(username, password)

    @property
    def scheme(self):
        return BASIC_SCHEME if self.basic_auth else SIGNATURE_SCHEME

    def sign(self, data):
        """Sign `data` with RSA-SHA256 and return the base64 signature."""
        signature = self.private_key.sign(data.encode('utf-8'), padding.PKCS1v15(), hashes.SHA256())
        return base64.b64encode(signature).decode('ascii')

    def authorization(self, date):
        """Get the Authorization header value for a request.

        Args:
            date (str): the value of the request's Date header.

        Returns:
            str: the Authorization header value.
        """
        if self.basic_auth:
            return self.basic_auth
        return SIGNATURE.format(self.key_id, SIGNATURE_ALGORITHM, self.sign(date))
