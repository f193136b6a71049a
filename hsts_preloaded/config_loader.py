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

import sys
from copy import deepcopy
from os import getcwd, path

import yaml

from .timestamp import timestamp

default_config_filename = "config.yml"

PRELOAD_LIST_URL = ("https://chromium.googlesource.com/chromium/src/+/main/"
                    "net/http/transport_security_state_static.json?format=TEXT")

SOURCE_FORMATS = ("base64", "plain")

defaults = {
    "source": {
        "url": PRELOAD_LIST_URL,
        "format": "base64"
    },
    "timeouts": {
        "http": 10
    },
    "web": {
        "user_agent": "hsts-preloaded"
    }
}


def merge_dicts(source, destination):
    for key, value in source.items():
        if isinstance(value, dict) != isinstance(destination.get(key, value), dict):
            sys.stderr.write(f"{timestamp()} Ignoring '{key}' in the config file, it should" +
                             f"{'' if isinstance(destination[key], dict) else ' not'} be a mapping.\n")
        elif isinstance(value, dict):
            node = destination.setdefault(key, {})
            merge_dicts(value, node)
        else:
            if isinstance(value, str):
                if value and value[0].isdigit():
                    try:
                        destination[key] = float(value)
                    except ValueError:
                        destination[key] = value
                elif value == "False":
                    destination[key] = False
                elif value == "True":
                    destination[key] = True
                else:
                    destination[key] = value
            else:
                destination[key] = value
    return destination


def check_config(config):
    source_format = config["source"].get("format")
    if source_format not in SOURCE_FORMATS:
        sys.stderr.write(f"{timestamp()} Unknown source format '{source_format}' in the config file," +
                         f" using '{defaults['source']['format']}' instead.\n")
        config["source"]["format"] = defaults["source"]["format"]
    return config


def load_config_from_file(filename=default_config_filename):
    pwd = getcwd()
    config = deepcopy(defaults)
    try:
        with open(path.join(pwd, filename), "r", encoding="utf-8") as conf_file:
            config_from_file = yaml.safe_load(conf_file)
    except FileNotFoundError:
        return config
    if not config_from_file:
        sys.stderr.write(f"{timestamp()} Didn't find anything in the config file. Using defaults.\n")
        return config
    if not isinstance(config_from_file, dict):
        sys.stderr.write(f"{timestamp()} The config file is not a mapping. Using defaults.\n")
        return config
    return check_config(merge_dicts(config_from_file, config))


def load_config(filename=default_config_filename):
    return load_config_from_file(filename)
