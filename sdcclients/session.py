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
HTTP session shared by the REST clients.
"""

import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from sdcclients.config import get_config_value

LOGGER = logging.getLogger(__name__)


class SDCSession(requests.Session):
    """A requests Session which follows the config file.

    Retry and backoff settings are applied through an HTTPAdapter mounted
    for both http:// and https:// URLs, so the clients themselves never
    retry a request.
    """

    def __init__(self, cert_verify=None, retries=None, backoff=None):
        """Initialize an SDCSession.

        Args:
            cert_verify (bool): Whether to verify server certificates.
            retries (int): Total number of retries for failed requests.
            backoff (float): The backoff factor between retries.
        """
        super().__init__()

        if cert_verify is None:
            cert_verify = get_config_value('http.cert_verify')
        if retries is None:
            retries = get_config_value('http.retries')
        if backoff is None:
            backoff = get_config_value('http.backoff')

        self.verify = cert_verify
        if not cert_verify:
            LOGGER.warning('Certificate verification is disabled; HTTPS requests are insecure.')

        self.max_retries = Retry(
            total=retries,
            backoff_factor=backoff,
            status_forcelist=range(500, 601),
            # Hand the final error response back so its body can be reported
            raise_on_status=False
        )
        adapter = HTTPAdapter(max_retries=self.max_retries)
        self.mount('http://', adapter)
        self.mount('https://', adapter)
