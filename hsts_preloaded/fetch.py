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

import binascii
from base64 import b64decode

import requests

from .errors import FetchError, InvalidArgument, ParseError


def get_content_from_url(url, timeout, user_agent):
    try:
        r = requests.get(url, headers={"User-Agent": user_agent}, timeout=timeout)
    except requests.exceptions.RequestException as e:
        raise FetchError(url, cause=e) from e
    if r.status_code != 200:
        raise FetchError(url, status=r.status_code)
    try:
        return r.content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"content of '{url}' is not valid UTF-8 ({e})") from e


def unwrap_content(content, source_format):
    # gitiles serves raw files base64-encoded with ?format=TEXT
    if source_format == "plain":
        return content
    if source_format != "base64":
        raise InvalidArgument(f"Unknown source format '{source_format}'")
    try:
        return b64decode(content, validate=False).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise ParseError(f"invalid base64 content ({e})") from e
