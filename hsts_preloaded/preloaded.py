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

from copy import deepcopy

from .config_loader import default_config_filename, load_config
from .errors import InvalidArgument
from .fetch import get_content_from_url, unwrap_content
from .json_utils import build_host_index, get_preloaded_list_data


class HSTSPreloaded:
    """Chromium's HSTS preloaded list, downloaded once on construction.

    The constructor is the only place that touches the network. Everything
    else reads data the object already has, so an instance can be shared
    between threads.

        h = HSTSPreloaded()
        h.is_host_preloaded("google.com")     # True
        h.is_host_preloaded("microsoft.com")  # False

    Lookups are literal: case-sensitive, and a subdomain of an entry
    with include_subdomains is not reported unless it's listed itself.
    """

    def __init__(self, *args, **kwargs):
        if args or kwargs:
            raise InvalidArgument("You should use HSTSPreloaded() without params")

        config = load_config(default_config_filename)
        self._url = config["source"]["url"]
        content = get_content_from_url(self._url, config["timeouts"]["http"], config["web"]["user_agent"])
        self._data = get_preloaded_list_data(unwrap_content(content, config["source"]["format"]))

        # to speed up is_host_preloaded()
        self._hosts = frozenset(build_host_index(self._data["entries"]))

    @property
    def url(self):
        return self._url

    def is_host_preloaded(self, host):
        if host is None:
            raise InvalidArgument("Host is not defined")
        return host in self._hosts

    def get_all_data(self):
        """Return the whole parsed list.

        The result is a deep copy, which takes a while for the full upstream
        list: keep it rather than calling this in a loop. Booleans from the
        JSON are plain `bool`. One entry looks like:

            {
                "name": "www.dropbox.com",
                "policy": "custom",
                "mode": "force-https",
                "include_subdomains": True,
                "pins": "dropbox",
            }
        """
        return deepcopy(self._data)
