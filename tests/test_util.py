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
Unit tests for sdcclients.util
"""
from types import SimpleNamespace
import unittest
from unittest import mock

from sdcclients.util import ensure_permissions, get_field, json_dump, path_segment, resource_name


class TestGetField(unittest.TestCase):
    """Tests for the get_field function."""

    def test_mapping(self):
        """Test getting a key from a dict"""
        self.assertEqual('id_rsa', get_field({'name': 'id_rsa'}, 'name'))
        self.assertIsNone(get_field({}, 'name'))

    def test_object(self):
        """Test getting an attribute from an object"""
        self.assertEqual('id_rsa', get_field(SimpleNamespace(name='id_rsa'), 'name'))
        self.assertIsNone(get_field(object(), 'name'))


class TestResourceName(unittest.TestCase):
    """Tests for the resource_name function."""

    def test_identifier(self):
        """Test that an identifier is returned as it is"""
        self.assertEqual('id_rsa', resource_name('id_rsa', 'name', 'key'))
        self.assertEqual(3, resource_name(3, 'id', 'inst', types=(int,)))

    def test_object(self):
        """Test that the field is taken from an object"""
        self.assertEqual('abc-123', resource_name({'id': 'abc-123', 'name': 'web'}, 'id', 'machine'))
        self.assertEqual(3, resource_name(SimpleNamespace(id=3), 'id', 'inst', types=(int,)))

    def test_missing(self):
        """Test that empty identifiers are rejected"""
        for value in (None, '', {}, 0):
            with self.subTest(value=value):
                with self.assertRaisesRegex(TypeError, r'key \(object\|str\) required'):
                    resource_name(value, 'name', 'key')

    def test_wrong_type(self):
        """Test that identifiers of other types are rejected"""
        for value in (True, 'abc', 1.5):
            with self.subTest(value=value):
                with self.assertRaisesRegex(TypeError, r'inst \(object\|int\) required'):
                    resource_name(value, 'id', 'inst', types=(int,))

    def test_object_without_field(self):
        """Test that an object lacking the field is rejected"""
        with self.assertRaisesRegex(TypeError, 'key has no name'):
            resource_name({'fingerprint': 'aa:bb'}, 'name', 'key')


class TestPathSegment(unittest.TestCase):
    """Tests for the path_segment function."""

    def test_plain(self):
        """Test that ordinary identifiers are unchanged"""
        self.assertEqual('regular_128', path_segment('regular_128'))
        self.assertEqual('3', path_segment(3))

    def test_reserved_characters(self):
        """Test that characters which would change the request target are encoded"""
        self.assertEqual('a%2Fb%3Fc%23d%20e', path_segment('a/b?c#d e'))


class TestJsonDump(unittest.TestCase):
    """Tests for json_dump."""

    def test_indented(self):
        """Test that JSON is dumped with an indent of 4"""
        self.assertEqual('{\n    "a": 1\n}', json_dump({'a': 1}))


class TestEnsurePermissions(unittest.TestCase):
    """Tests for the ensure_permissions function."""

    def setUp(self):
        self.mock_chmod = mock.patch('sdcclients.util.os.chmod').start()
        self.mock_isdir = mock.patch('sdcclients.util.os.path.isdir').start()
        self.mock_isfile = mock.patch('sdcclients.util.os.path.isfile').start()

    def tearDown(self):
        mock.patch.stopall()

    def test_file(self):
        """Test that a file and its directory are locked down"""
        self.mock_isdir.side_effect = lambda path: path == '/home/admin/.config/sdc-clients'
        self.mock_isfile.return_value = True
        ensure_permissions('/home/admin/.config/sdc-clients/sdc-clients.toml')
        self.mock_chmod.assert_has_calls([
            mock.call('/home/admin/.config/sdc-clients/sdc-clients.toml', 0o600),
            mock.call('/home/admin/.config/sdc-clients', 0o700)
        ])

    def test_directory(self):
        """Test that a directory is given the directory mode"""
        self.mock_isdir.return_value = True
        ensure_permissions('/home/admin/.config/sdc-clients')
        self.mock_chmod.assert_called_once_with('/home/admin/.config/sdc-clients', 0o700)

    def test_nonexistent(self):
        """Test that paths which do not exist are left alone"""
        self.mock_isdir.return_value = False
        self.mock_isfile.return_value = False
        ensure_permissions('/home/admin/.config/sdc-clients/sdc-clients.toml')
        self.mock_chmod.assert_not_called()


if __name__ == '__main__':
    unittest.main()
