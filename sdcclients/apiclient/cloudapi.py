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
Client for the CloudAPI service.

Every request carries a Date header and an Authorization header built from
either Basic credentials or an RSA key (see sdcclients.auth). GET responses
are cached by request path unless caching is disabled; POST and DELETE
requests purge the cached entry for their path.
"""
from collections import namedtuple
import logging
import os

from sdcclients.apiclient.rest import APIError, RESTClient
from sdcclients.auth import Authenticator, http_date
from sdcclients.cache import ResponseCache
from sdcclients.config import get_config_value
from sdcclients.util import get_field, path_segment, resource_name

LOGGER = logging.getLogger(__name__)

# When set in the environment, machines are never actually provisioned.
NO_PROVISION_ENV_VAR = 'SDC_TESTING'

ROOT = '/{}'
KEYS = ROOT + '/keys'
KEY = KEYS + '/{}'
PACKAGES = ROOT + '/packages'
PACKAGE = PACKAGES + '/{}'
DATASETS = ROOT + '/datasets'
DATASET = DATASETS + '/{}'
DATACENTERS = ROOT + '/datacenters'
MACHINES = ROOT + '/machines'
MACHINE = MACHINES + '/{}'
ANALYTICS = ROOT + '/analytics'
INSTS = ANALYTICS + '/instrumentations'
INST = INSTS + '/{}'
INST_RAW = INST + '/value/raw'
INST_HMAP = INST + '/value/heatmap/image'
INST_HMAP_DETAILS = INST + '/value/heatmap/details'

MACHINE_CACHE_TTL = 15
MACHINE_ACTION_STATUS = 202

Request = namedtuple('Request', ['path', 'headers', 'body', 'query', 'expect', 'cache_ttl'])

# Option names that are passed through to a client for another datacenter
CLIENT_OPTIONS = ('account', 'version', 'username', 'password', 'key_id', 'key',
                  'no_cache', 'cache_size', 'cache_expiry', 'session')


class CloudAPIError(APIError):
    """An error reported by CloudAPI, carrying the service's error code."""

    name = 'CloudApiError'

    def __init__(self, code, message, status_code=None, body=None):
        super().__init__(message, status_code=status_code, body=body)
        self.code = code

    def __str__(self):
        return f'{self.code}: {self.message}'


class CloudAPIClient(RESTClient):
    """A client for CloudAPI.

    Arguments left as None are read from the 'cloudapi' section of the
    configuration file.
    """

    service_name = 'CloudAPI'

    def __init__(self, url=None, account=None, version=None, username=None, password=None,
                 key_id=None, key=None, no_cache=None, cache_size=None, cache_expiry=None,
                 session=None, timeout=None):
        """Create a CloudAPIClient.

        Args:
            url (str): the CloudAPI location.
            account (str): the login name to use by default.
            version (str): the API version to request.
            username (str): login name for Basic authentication.
            password (str): password for Basic authentication.
            key_id (str): id of the SSH key to sign requests with.
            key (str): the PEM private key that goes with `key_id`.
            no_cache (bool): disable response caching.
            cache_size (int): maximum number of cached responses.
            cache_expiry (int): default maximum age of a cached response in seconds.
            session (requests.Session): the HTTP session to use.
            timeout (int): seconds to wait for a response.

        Raises:
            ValueError: if the URL or the credentials are missing.
        """
        if url is None:
            url = get_config_value('cloudapi.url')
        super().__init__(url, session=session, timeout=timeout)

        self.account = account or get_config_value('cloudapi.account')
        self.version = version or get_config_value('cloudapi.version')

        if username is None:
            username = get_config_value('cloudapi.username')
        if password is None:
            password = get_config_value('cloudapi.password')
        if key_id is None:
            key_id = get_config_value('cloudapi.key_id')
        if key is None and key_id:
            key = self._read_key_file(get_config_value('cloudapi.key_file'))

        self.authenticator = Authenticator(username=username, password=password,
                                           key_id=key_id, key=key)

        if no_cache is None:
            no_cache = get_config_value('cloudapi.no_cache')
        self.cache = None
        if not no_cache:
            cache_size = cache_size or get_config_value('cloudapi.cache_size')
            cache_expiry = cache_expiry or get_config_value('cloudapi.cache_expiry')
            self.cache = ResponseCache(cache_size, cache_expiry)

        self.options = {
            'account': self.account,
            'version': self.version,
            'username': username,
            'password': password,
            'key_id': key_id,
            'key': key,
            'no_cache': no_cache,
            'cache_size': cache_size,
            'cache_expiry': cache_expiry,
            'session': self.session,
        }

        self.no_provision = bool(os.getenv(NO_PROVISION_ENV_VAR))
        if self.no_provision:
            LOGGER.warning('%s env var set: provisioning will *not* happen', NO_PROVISION_ENV_VAR)

    @staticmethod
    def _read_key_file(key_file):
        """Read the PEM private key from `key_file`, or return None if unset."""
        if not key_file:
            return None
        try:
            with open(os.path.expanduser(key_file)) as f:
                return f.read()
        except OSError as err:
            raise ValueError(f"Unable to read key file '{key_file}': {err}") from err

    def _account(self, account):
        """Get the login name to use, given an optional login or account object."""
        if account is None:
            return self.account
        if isinstance(account, str):
            return account
        login = get_field(account, 'login')
        if not login:
            raise TypeError('account (object|str) must have a login')
        return login

    def get_account(self, account=None, no_cache=False):
        """Look up an account record.

        Args:
            account (str or dict): the login name, or an account object.
            no_cache (bool): skip the cache.

        Returns:
            A dict describing the account.
        """
        req = self._request(ROOT.format(self._account(account)))
        return self._get(req, no_cache)

    def create_key(self, options, account=None):
        """Create an SSH key on the account.

        Args:
            options (dict or str): a dict with 'key' (the SSH public key) and
                optionally 'name', or just the public key.
            account (str or dict): the login name, or an account object.

        Returns:
            A dict describing the created key.
        """
        if not options or not isinstance(options, (str, dict)):
            raise TypeError('options (object) required')
        if isinstance(options, str):
            options = {'key': options}

        req = self._request(KEYS.format(self._account(account)), body=options)
        return self._post(req)

    def list_keys(self, account=None, no_cache=False):
        """List all SSH keys on file for the account.

        Returns:
            A list of dicts.
        """
        req = self._request(KEYS.format(self._account(account)))
        return self._get(req, no_cache)

    def get_key(self, key, account=None, no_cache=False):
        """Retrieve an SSH key.

        Args:
            key (str or dict): the key name, or a key object from create/list.
            account (str or dict): the login name, or an account object.
            no_cache (bool): skip the cache.
        """
        name = path_segment(resource_name(key, 'name', 'key'))
        req = self._request(KEY.format(self._account(account), name))
        return self._get(req, no_cache)

    def delete_key(self, key, account=None):
        """Delete an SSH key.

        Args:
            key (str or dict): the key name, or a key object from create/list.
            account (str or dict): the login name, or an account object.
        """
        name = path_segment(resource_name(key, 'name', 'key'))
        req = self._request(KEY.format(self._account(account), name))
        return self._del(req)

    def list_packages(self, account=None, no_cache=False):
        """List all packages available to the account."""
        req = self._request(PACKAGES.format(self._account(account)))
        return self._get(req, no_cache)

    def get_package(self, package, account=None, no_cache=False):
        """Retrieve a single package by name or package object."""
        name = path_segment(resource_name(package, 'name', 'package'))
        req = self._request(PACKAGE.format(self._account(account), name))
        return self._get(req, no_cache)

    def list_datasets(self, account=None, no_cache=False):
        """List all datasets available to the account."""
        req = self._request(DATASETS.format(self._account(account)))
        return self._get(req, no_cache)

    def get_dataset(self, dataset, account=None, no_cache=False):
        """Retrieve a single dataset by id or dataset object."""
        name = path_segment(resource_name(dataset, 'id', 'dataset'))
        req = self._request(DATASET.format(self._account(account), name))
        return self._get(req, no_cache)

    def list_datacenters(self, account=None, no_cache=False):
        """List all datacenters available to the account.

        Returns:
            A dict mapping datacenter name to its CloudAPI URL.
        """
        req = self._request(DATACENTERS.format(self._account(account)))
        return self._get(req, no_cache)

    def create_client_for_datacenter(self, datacenter, account=None, no_cache=False):
        """Create a new client connected to another datacenter.

        The new client has the same credentials and options as this one.

        Args:
            datacenter (str): the name of the datacenter.
            account (str or dict): the login name, or an account object.
            no_cache (bool): skip the cache when listing datacenters.

        Returns:
            A CloudAPIClient.

        Raises:
            CloudAPIError: if the datacenter does not exist.
        """
        if not isinstance(datacenter, str):
            raise TypeError('datacenter (str) required')

        datacenters = self.list_datacenters(account=account, no_cache=no_cache) or {}
        if datacenter not in datacenters:
            raise CloudAPIError('ResourceNotFound', f'datacenter {datacenter} not found')

        return CloudAPIClient(url=datacenters[datacenter], timeout=self.timeout,
                              **{option: self.options[option] for option in CLIENT_OPTIONS})

    def create_machine(self, options=None, account=None):
        """Provision a new smartmachine or virtualmachine.

        Args:
            options (dict): 'name', 'dataset' and 'package' are all optional;
                'dataset' and 'package' may be objects returned by the
                respective APIs.
            account (str or dict): the login name, or an account object.

        Returns:
            A dict describing the created machine.
        """
        if options is None:
            options = {}
        if not isinstance(options, dict):
            raise TypeError('options must be an object')
        if options.get('name') and not isinstance(options['name'], str):
            raise TypeError('options.name must be a string')

        options = dict(options)
        for field in ('dataset', 'package'):
            if options.get(field) and not isinstance(options[field], str):
                if isinstance(options[field], (int, float, bool, bytes)):
                    raise TypeError(f'options.{field} must be a string or object')
                options[field] = get_field(options[field], 'id')

        account = self._account(account)

        if self.no_provision:
            LOGGER.warning('%s env var set: not provisioning machine %s',
                           NO_PROVISION_ENV_VAR, options.get('name'))
            return {}

        req = self._request(MACHINES.format(account), body=options)
        return self._post(req)

    def list_machines(self, options=None, account=None):
        """List the machines of the account.

        This is a 'deep list', and is never cached since listings are
        large and volatile. Filtering and pagination are set in `options`:
        name, dataset, package, type, state, memory, offset and limit.

        Returns:
            A tuple of the list of machines and a bool which is False if
            there are more records. Call again with offset=len(machines) to
            get them.
        """
        if options is None:
            options = {}
        if not isinstance(options, dict):
            raise TypeError('options must be an object')

        req = self._request(MACHINES.format(self._account(account)), query=options)
        try:
            response = self.get(req.path, params=req.query, headers=req.headers)
        except APIError as err:
            raise self._error(err)

        machines = self.json(response)
        done = True
        resource_count = response.headers.get('x-resource-count')
        query_limit = response.headers.get('x-query-limit')
        if resource_count and query_limit:
            try:
                done = int(resource_count) < int(query_limit)
            except ValueError:
                LOGGER.warning("Ignoring invalid paging headers: x-resource-count='%s', "
                               "x-query-limit='%s'", resource_count, query_limit)

        LOGGER.debug('CloudAPI list_machines(%s) -> %d machines, done=%s',
                     req.path, len(machines or []), done)
        return machines, done

    def get_machine(self, machine, account=None, no_cache=False):
        """Get a single machine.

        Machines are volatile, so cached responses are only used for 15
        seconds.

        Args:
            machine (str or dict): the machine id, or a machine object.
        """
        name = path_segment(resource_name(machine, 'id', 'machine'))
        req = self._request(MACHINE.format(self._account(account), name),
                            cache_ttl=MACHINE_CACHE_TTL)
        return self._get(req, no_cache)

    def reboot_machine(self, machine, account=None):
        """Reboot a machine."""
        return self._update_machine(self._account(account), machine, 'reboot')

    def stop_machine(self, machine, account=None):
        """Shut down a machine."""
        return self._update_machine(self._account(account), machine, 'stop')

    def start_machine(self, machine, account=None):
        """Boot up a machine."""
        return self._update_machine(self._account(account), machine, 'start')

    def delete_machine(self, machine, account=None):
        """Delete a machine."""
        name = path_segment(resource_name(machine, 'id', 'machine'))
        req = self._request(MACHINE.format(self._account(account), name))
        return self._del(req)

    def describe_analytics(self, account=None, no_cache=False):
        """Get the metrics available to instrumentations.

        Returns:
            A (big) dict.
        """
        req = self._request(ANALYTICS.format(self._account(account)))
        return self._get(req, no_cache)

    get_metrics = describe_analytics

    def create_inst(self, options, account=None):
        """Create an instrumentation.

        Args:
            options (dict): the instrumentation parameters.
        """
        if not options or not isinstance(options, dict):
            raise TypeError('options (object) required')

        req = self._request(INSTS.format(self._account(account)), body=options)
        return self._post(req)

    create_instrumentation = create_inst

    def list_insts(self, account=None, no_cache=False):
        """List instrumentations."""
        req = self._request(INSTS.format(self._account(account)))
        return self._get(req, no_cache)

    list_instrumentations = list_insts

    def get_inst(self, inst, account=None, no_cache=False):
        """Get an instrumentation.

        Args:
            inst (int or dict): the instrumentation id, or an instrumentation object.
        """
        name = path_segment(resource_name(inst, 'id', 'inst', types=(int,)))
        req = self._request(INST.format(self._account(account), name))
        return self._get(req, no_cache)

    get_instrumentation = get_inst

    def get_inst_value(self, inst, account=None):
        """Get the raw value of an instrumentation. Never served from the cache."""
        name = path_segment(resource_name(inst, 'id', 'inst', types=(int,)))
        req = self._request(INST_RAW.format(self._account(account), name))
        return self._get(req, no_cache=True)

    get_instrumentation_value = get_inst_value

    def get_inst_hmap(self, inst, account=None):
        """Get the heatmap image of an instrumentation. Never served from the cache."""
        name = path_segment(resource_name(inst, 'id', 'inst', types=(int,)))
        req = self._request(INST_HMAP.format(self._account(account), name))
        return self._get(req, no_cache=True)

    get_instrumentation_heatmap = get_inst_hmap

    def get_inst_hmap_details(self, inst, options, account=None):
        """Get the details of a point in an instrumentation heatmap.

        Args:
            inst (int or dict): the instrumentation id, or an instrumentation object.
            options (dict): the 'x' and 'y' coordinates of the point.
        """
        name = path_segment(resource_name(inst, 'id', 'inst', types=(int,)))
        if not options or not isinstance(options, dict):
            raise TypeError('options (object) required')

        req = self._request(INST_HMAP_DETAILS.format(self._account(account), name),
                            query=options)
        return self._get(req, no_cache=True)

    get_instrumentation_heatmap_details = get_inst_hmap_details

    def del_inst(self, inst, account=None):
        """Delete an instrumentation."""
        name = path_segment(resource_name(inst, 'id', 'inst', types=(int,)))
        req = self._request(INST.format(self._account(account), name))
        return self._del(req)

    delete_instrumentation = del_inst

    def _update_machine(self, account, machine, action):
        name = path_segment(resource_name(machine, 'id', 'machine'))
        req = self._request(MACHINE.format(account, name), query={'action': action},
                            expect=MACHINE_ACTION_STATUS)
        return self._post(req)

    def _error(self, err):
        """Unwrap a service error body into a CloudAPIError.

        Args:
            err (APIError): the error raised by the REST layer.

        Returns:
            A CloudAPIError if the error body carries a code, else `err`.
        """
        body = err.body
        if isinstance(body, dict) and body.get('code'):
            return CloudAPIError(body['code'], body.get('message'),
                                 status_code=err.status_code, body=body)
        return err

    def _request(self, path, body=None, query=None, expect=None, cache_ttl=None):
        """Build the description of a request to `path`."""
        now = http_date()
        headers = {
            'Authorization': self.authenticator.authorization(now),
            'Date': now,
            'X-Api-Version': self.version,
        }
        return Request(path, headers, body, query, expect, cache_ttl)

    def _get(self, req, no_cache=False):
        if not no_cache:
            cached = self._cache_get(req.path, req.cache_ttl)
            if cached is not None:
                return cached

        try:
            response = self.get(req.path, params=req.query, headers=req.headers,
                                expect=req.expect)
        except APIError as err:
            raise self._error(err)

        obj = self.json(response)
        if obj is not None:
            self._cache_put(req.path, obj)

        LOGGER.debug('CloudAPI GET %s -> %s', req.path, obj)
        return obj

    def _post(self, req):
        try:
            response = self.post(req.path, json=req.body, params=req.query,
                                 headers=req.headers, expect=req.expect)
        except APIError as err:
            raise self._error(err)

        self._cache_put(req.path, None)

        obj = self.json(response)
        LOGGER.debug('CloudAPI POST %s -> %s', req.path, obj)
        return obj

    def _del(self, req):
        try:
            self.delete(req.path, params=req.query, headers=req.headers, expect=req.expect)
        except APIError as err:
            raise self._error(err)

        self._cache_put(req.path, None)
        LOGGER.debug('CloudAPI DELETE %s', req.path)

    def _cache_put(self, key, value):
        if self.cache is None:
            return False
        return self.cache.put(key, value)

    def _cache_get(self, key, ttl=None):
        if self.cache is None:
            return None
        return self.cache.get(key, ttl)
