# Copyright © 2026 CZ.NIC, z. s. p. o.
# SPDX-License-Identifier: GPL-3.0-or-later
#
# This file is part of hsts-preloaded.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from base64 import b64encode

import pytest
import requests

from hsts_preloaded import fetch

SAMPLE_LIST = """// Copyright 2012 The Chromium Authors
// Use of this source code is governed by a BSD-style license.

// The top-level element is a dictionary with a single key, "entries".
{
  "pinsets": [
    {
      "name": "test",
      "static_spki_hashes": ["TestSPKI"],
      "report_uri": "http://report-example.test/test"
    }
  ],
  "entries": [
    // Testing
    { "name": "pinningtest.appspot.com", "policy": "test", "include_subdomains": true, "pins": "test" },
    { "name": "a.example", "policy": "custom", "mode": "force-https", "include_subdomains": true },

    // Custom
    { "name": "www.dropbox.com", "policy": "custom", "mode": "force-https", "pins": "dropbox" },
    { "name": "Mixed.Example", "policy": "bulk-18-weeks", "mode": "force-https", "expect_ct": false }
  ]
}
"""


class FakeResponse:
    def __init__(self, body, status_code=200):
        self.content = body if isinstance(body, bytes) else body.encode("utf-8")
        self.status_code = status_code


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def serve(monkeypatch):
    """Make requests.get answer with the given body, base64-encoded like gitiles does by default."""
    calls = []

    def _serve(text, status_code=200, encode=True, exception=None):
        def fake_get(url, **kwargs):
            calls.append((url, kwargs))
            if exception is not None:
                raise exception
            body = b64encode(text.encode("utf-8")).decode("ascii") if encode else text
            return FakeResponse(body, status_code)
        monkeypatch.setattr(fetch.requests, "get", fake_get)
        return calls

    return _serve


@pytest.fixture
def sample_list():
    return SAMPLE_LIST


@pytest.fixture
def connection_error():
    return requests.exceptions.ConnectionError("Name or service not known")
