# Copyright (c) 2013 Mirantis Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or
# implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from blueprint_resolver.resolver import placeholders as ph
from blueprint_resolver.tests.unit import base


class PlaceholdersTest(base.BlueprintResolverTestCase):
    def test_make_placeholder(self):
        self.assertEqual("%HOSTGROUP::group1%", ph.make_placeholder("group1"))
        self.assertEqual("%HOSTGROUP::group-1%:8080",
                         ph.make_placeholder("group-1", "8080"))

    def test_referenced_host_groups(self):
        value = "%HOSTGROUP::group1%:2181,%HOSTGROUP::host-group-2%:2181"
        self.assertTrue(ph.has_placeholder(value))
        self.assertEqual(["group1", "host-group-2"],
                         ph.get_referenced_host_groups(value))
        self.assertFalse(ph.has_placeholder("localhost:2181"))

    def test_port_regex(self):
        match = ph.HOSTGROUP_PORT_REGEX.search(
            "qjournal://%HOSTGROUP::group1%:8080;x")
        self.assertEqual(("group1", "8080"), match.groups())
        match = ph.HOSTGROUP_PORT_REGEX.search("%HOSTGROUP::group1%/path")
        self.assertEqual(("group1", None), match.groups())

    def test_split_scheme(self):
        self.assertEqual(("thrift://", "localhost:9083"),
                         ph.split_scheme("thrift://localhost:9083"))
        self.assertEqual(("", "localhost:2181"),
                         ph.split_scheme("localhost:2181"))

    def test_get_port_from_address(self):
        self.assertEqual("2181", ph.get_port_from_address("localhost:2181"))
        self.assertIsNone(ph.get_port_from_address("localhost"))
        self.assertRaises(ValueError, ph.get_port_from_address, "host:port")
