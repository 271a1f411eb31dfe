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
# Reads the release version of sdc-clients from the newest released entry of
# CHANGELOG.md, which follows the "Keep a Changelog" format.

import re

RELEASE_HEADER_RE = re.compile(
    r'^## \[(?P<version>\d+\.\d+\.\d+)\] - \d{4}-\d{2}-\d{2}$', re.MULTILINE
)


def get_latest_version_from_file(file_path):
    """Get the version of the newest release listed in a changelog.

    The '## [Unreleased]' section has no version and is skipped.

    Args:
        file_path (str): the path to CHANGELOG.md.

    Returns:
        The version string, or None if no release is listed.
    """
    with open(file_path, encoding='utf-8') as f:
        match = RELEASE_HEADER_RE.search(f.read())
    return match.group('version') if match else None
