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

class PreloadedListError(Exception):
    pass


class FetchError(PreloadedListError):
    def __init__(self, url, status=None, cause=None):
        self.url = url
        self.status = status
        self.cause = cause
        if status is not None:
            message = f"Can't get url '{url}'. Got http status {status}."
        else:
            message = f"Can't get url '{url}': {cause}"
        super().__init__(message)


class ParseError(PreloadedListError):
    def __init__(self, reason):
        self.reason = reason
        super().__init__(f"Can't parse the preloaded list: {reason}")


class InvalidArgument(ValueError):
    pass
