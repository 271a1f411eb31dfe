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
Unit tests for sdcclients.logging
"""
import logging
import os
import shutil
import tempfile
import unittest
from unittest import mock

from sdcclients.logging import bootstrap_logging, configure_logging
from tests.common import config


class TestLogging(unittest.TestCase):
    """Tests for the two stages of logging setup."""

    def setUp(self):
        self.package_logger = logging.getLogger('sdcclients')
        self.urllib3_logger = logging.getLogger('urllib3')
        self.saved = [(logger, logger.handlers, logger.level)
                      for logger in (self.package_logger, self.urllib3_logger)]
        for logger in (self.package_logger, self.urllib3_logger):
            logger.handlers = []

        self.tmpdir = tempfile.mkdtemp()
        self.log_file = os.path.join(self.tmpdir, 'logs', 'sdc-clients.log')

    def tearDown(self):
        for logger, handlers, level in self.saved:
            for handler in logger.handlers:
                handler.close()
            logger.handlers = handlers
            logger.setLevel(level)
        shutil.rmtree(self.tmpdir)

    def configure(self, file_level='info', stderr_level='critical'):
        """Run both stages of logging setup with the given levels."""
        bootstrap_logging()
        logging_options = {
            'file_name': self.log_file,
            'file_level': file_level,
            'stderr_level': stderr_level
        }
        with config({'logging': logging_options}):
            configure_logging()

    def read_log(self):
        for handler in self.package_logger.handlers:
            handler.flush()
        with open(self.log_file) as f:
            return f.read().splitlines()

    def test_bootstrap_logging(self):
        """Test that only warnings reach stderr before the config is loaded."""
        bootstrap_logging()

        self.assertEqual(logging.DEBUG, self.package_logger.level)
        self.assertEqual(1, len(self.package_logger.handlers))
        handler = self.package_logger.handlers[0]
        self.assertNotIsInstance(handler, logging.FileHandler)
        self.assertEqual(logging.WARNING, handler.level)

        record = logging.makeLogRecord({'levelname': 'WARNING', 'msg': 'Unknown option'})
        self.assertEqual('WARNING: Unknown option', handler.format(record))

    def test_file_log(self):
        """Test the messages and format of the log file."""
        self.configure()
        logging.getLogger('sdcclients.apiclient.cloudapi').info('Listing machines')
        logging.getLogger('sdcclients.cache').debug('Cache hit for /my/keys')

        lines = self.read_log()
        self.assertEqual(1, len(lines))
        self.assertTrue(lines[0].endswith(
            ' - INFO - sdcclients.apiclient.cloudapi - Listing machines'))

    def test_stderr_level(self):
        """Test that the console handler is replaced by one at the configured level."""
        self.configure(stderr_level='error')
        console_handlers = [handler for handler in self.package_logger.handlers
                            if not isinstance(handler, logging.FileHandler)]
        self.assertEqual([logging.ERROR], [handler.level for handler in console_handlers])

    def test_urllib3_retries_logged_to_file(self):
        """Test that urllib3 retry warnings go to the log file only."""
        self.configure()
        logging.getLogger('urllib3.connectionpool').warning(
            'Retrying (Retry(total=2)) after connection broken'
        )
        logging.getLogger('urllib3.connectionpool').info('Starting new HTTPS connection')

        lines = self.read_log()
        self.assertEqual(1, len(lines))
        self.assertIn(' - WARNING - urllib3.connectionpool - Retrying', lines[0])
        self.assertEqual([logging.FileHandler],
                         [type(handler) for handler in self.urllib3_logger.handlers])

    @mock.patch('sdcclients.logging.os.makedirs', side_effect=OSError('read-only'))
    def test_unwritable_log_directory(self, _):
        """Test that logging falls back to stderr when the log directory can't be created."""
        with self.assertLogs('sdcclients.logging', logging.WARNING) as cm:
            self.configure()

        self.assertIn('Unable to create log directory', cm.output[0])
        self.assertFalse(any(isinstance(handler, logging.FileHandler)
                             for handler in self.package_logger.handlers))
        self.assertEqual([], self.urllib3_logger.handlers)


if __name__ == '__main__':
    unittest.main()
