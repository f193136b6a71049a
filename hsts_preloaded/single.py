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
import sys
from os.path import basename

import idna

from .errors import FetchError, PreloadedListError
from .preloaded import HSTSPreloaded
from .timestamp import timestamp


def print_help():
    exe = basename(sys.argv[0])
    sys.stderr.write(f"{exe} - check hosts against Chromium's HSTS preloaded list\n\n")
    sys.stderr.write(f"Usage: {exe} <file>\n")
    sys.stderr.write("       file - plaintext host list, one host per line, empty lines are ignored\n")
    sys.stderr.write(f"       {exe} --dump\n")
    sys.stderr.write("       print the whole preloaded list as JSON\n")
    sys.exit(1)


def encode_host(host):
    try:
        return idna.encode(host).decode("ascii")
    except idna.IDNAError:
        return host


def get_json_result(preloaded, host):
    result = {
        "host": host,
        "preloaded": preloaded.is_host_preloaded(encode_host(host))
    }
    return json.dumps(result, ensure_ascii=False, separators=(",", ":"))


def load_preloaded_list():
    sys.stderr.write(f"{timestamp()} Downloading the preloaded list.\n")
    try:
        preloaded = HSTSPreloaded()
    except PreloadedListError as e:
        phase = "download" if isinstance(e, FetchError) else "parse"
        sys.stderr.write(f"{timestamp()} Failed to {phase} the preloaded list. {e}\n")
        sys.exit(1)
    sys.stderr.write(f"{timestamp()} Loaded the preloaded list from {preloaded.url}.\n")
    return preloaded


def main():
    if "-h" in sys.argv or "--help" in sys.argv or len(sys.argv) < 2:
        print_help()

    try:
        if sys.argv[1] == "--dump":
            preloaded = load_preloaded_list()
            print(json.dumps(preloaded.get_all_data(), ensure_ascii=False, indent=2), flush=True)
            return

        filename = sys.argv[1]
        try:
            file = open(filename, "r", encoding="utf-8")
        except FileNotFoundError:
            sys.stderr.write(f"File '{filename}' does not exist.\n\n")
            print_help()
        sys.stderr.write(f"{timestamp()} Reading hosts from {filename}.\n")
        with file:
            hosts = [line.strip() for line in file.read().splitlines() if line.strip()]
        host_count = len(hosts)
        sys.stderr.write(f"{timestamp()} Read {host_count} host{('s' if host_count != 1 else '')}.\n")
        preloaded = load_preloaded_list()
        for host in hosts:
            print(get_json_result(preloaded, host), flush=True)
        sys.stderr.write(f"{timestamp()} Finished.\n")
    except KeyboardInterrupt:
        sys.exit(0)
