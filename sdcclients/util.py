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
Contains structures and code that is generally useful across sdc-clients.
"""
from collections.abc import Mapping
from functools import partial
from json import dumps
import logging
import os
import os.path
from urllib.parse import quote

LOGGER = logging.getLogger(__name__)

JSON_FORMAT_PARAMS = {'indent': 4}

# A function to dump json to be used by all sdc-clients code.
json_dump = partial(dumps, **JSON_FORMAT_PARAMS)


def get_field(obj, field):
    """Get a field from a mapping or an attribute from an object.

    Args:
        obj: a dict as returned by one of the APIs, or any object.
        field (str): the key or attribute name.

    Returns:
        The value, or None if `obj` doesn't have it.
    """
    if isinstance(obj, Mapping):
        return obj.get(field)
    return getattr(obj, field, None)


def resource_name(resource, field, description, types=(str,)):
    """Reduce an identifier or a previously returned object to an identifier.

    Args:
        resource: either an identifier of one of `types`, or a mapping or
            object from which `field` is taken.
        field (str): the field holding the identifier, e.g. 'id' or 'name'.
        description (str): what `resource` is, for error messages.
        types (tuple): the accepted identifier types.

    Returns:
        The identifier.

    Raises:
        TypeError: if `resource` is empty or of an unsupported type.
    """
    type_names = '|'.join(['object'] + [t.__name__ for t in types])
    if isinstance(resource, bool) or not resource:
        raise TypeError(f'{description} ({type_names}) required')
    if isinstance(resource, types):
        return resource
    if isinstance(resource, (str, int, float, bytes)):
        raise TypeError(f'{description} ({type_names}) required')

    value = get_field(resource, field)
    if value is None:
        raise TypeError(f'{description} has no {field}')
    return value


def path_segment(value):
    """Percent-encode an identifier for use as a single URL path segment."""
    return quote(str(value), safe='')


def ensure_permissions(path, file_mode=0o600, dir_mode=0o700):
    """Lock down the file and directory permissions for a given path.

    If the given path points to a file, the file is given the mode
    `file_mode` and the containing directory is given the mode `dir_mode`.
    If the given path points to a directory, it is given the mode
    `dir_mode`. Paths which do not exist are left alone.

    Args:
        path (str): the path to the file or directory to have permissions set
        file_mode (int): the mode of the file
        dir_mode (int): the mode of the containing directory

    Returns: None
    """
    if os.path.isdir(path):
        os.chmod(path, dir_mode)
        return
    elif os.path.isfile(path):
        os.chmod(path, file_mode)

    dir_path = os.path.dirname(path)
    if os.path.isdir(dir_path):
        os.chmod(dir_path, dir_mode)
