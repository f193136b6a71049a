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

from hsts_preloaded.config_loader import PRELOAD_LIST_URL, defaults, load_config, merge_dicts


def test_defaults_without_file():
    config = load_config()
    assert config == defaults
    assert config is not defaults
    assert config["source"]["url"] == PRELOAD_LIST_URL


def test_empty_file(workdir, capsys):
    (workdir / "config.yml").write_text("", encoding="utf-8")
    assert load_config() == defaults
    assert "Using defaults" in capsys.readouterr().err


def test_partial_override(workdir):
    (workdir / "config.yml").write_text("timeouts:\n  http: 3\nweb:\n  user_agent: test-agent\n",
                                        encoding="utf-8")
    config = load_config()
    assert config["timeouts"]["http"] == 3
    assert config["web"]["user_agent"] == "test-agent"
    assert config["source"] == defaults["source"]
    assert defaults["timeouts"]["http"] == 10


def test_unknown_format(workdir, capsys):
    (workdir / "config.yml").write_text("source:\n  format: gzip\n", encoding="utf-8")
    assert load_config()["source"]["format"] == "base64"
    assert "gzip" in capsys.readouterr().err


def test_custom_filename(workdir):
    (workdir / "other.yml").write_text("source:\n  format: plain\n", encoding="utf-8")
    assert load_config("other.yml")["source"]["format"] == "plain"


def test_merge_dicts_coerces_strings():
    merged = merge_dicts({"a": {"b": "5", "c": "True", "d": "False", "e": "text", "f": "1.2.3"}}, {"a": {}})
    assert merged == {"a": {"b": 5.0, "c": True, "d": False, "e": "text", "f": "1.2.3"}}


def test_empty_section(workdir, capsys):
    (workdir / "config.yml").write_text("source:\ntimeouts:\n  http: 3\n", encoding="utf-8")
    config = load_config()
    assert config["source"] == defaults["source"]
    assert config["timeouts"]["http"] == 3
    assert "Ignoring 'source'" in capsys.readouterr().err


def test_scalar_section(workdir, capsys):
    (workdir / "config.yml").write_text("source: https://example.test/list.json\n", encoding="utf-8")
    assert load_config()["source"] == defaults["source"]
    assert "should be a mapping" in capsys.readouterr().err


def test_mapping_instead_of_value(workdir, capsys):
    (workdir / "config.yml").write_text("timeouts:\n  http:\n    connect: 3\n", encoding="utf-8")
    assert load_config()["timeouts"]["http"] == 10
    assert "should not be a mapping" in capsys.readouterr().err
