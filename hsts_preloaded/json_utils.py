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

import json
import re

from .errors import ParseError

comment_line = re.compile(r"^\s*//")


def strip_comments(content):
    """Drop full-line `//` comments, the only thing keeping the list from being valid JSON.

    A `//` later in the line (e.g. inside a URL) is left alone. Only newlines end a
    line, other line separators are valid inside JSON strings.
    """
    lines = content.split("\n")
    # trailing empty lines go, like perl's split
    while lines and not lines[-1]:
        lines.pop()
    output = ""
    for line in lines:
        if not comment_line.match(line):
            output += f"{line}\n"
    return output


def decode_preloaded_list(content):
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ParseError(f"{e.msg} (line {e.lineno}, column {e.colno})") from e
    if not isinstance(data, dict):
        raise ParseError("the top level is not an object")
    if not isinstance(data.get("entries"), list):
        raise ParseError("'entries' is missing or is not an array")
    return data


def build_host_index(entries):
    hosts = set()
    for num, entry in enumerate(entries):
        if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
            raise ParseError(f"entry #{num} has no usable 'name'")
        hosts.add(entry["name"])
    return hosts


def get_preloaded_list_data(content):
    return decode_preloaded_list(strip_comments(content))
