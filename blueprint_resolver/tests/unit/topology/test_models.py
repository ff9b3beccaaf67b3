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

from blueprint_resolver import exceptions as ex
from blueprint_resolver.tests.unit import base
from blueprint_resolver.topology import models


class HostGroupTest(base.BlueprintResolverTestCase):
    def test_hosts_keep_order_without_duplicates(self):
        group = models.HostGroup("group1", ["DATANODE"],
                                 ["h2", "h1", "h2"])
        self.assertEqual(["h2", "h1"], group.hosts)
        self.assertTrue(group.has_component("DATANODE"))
        self.assertFalse(group.has_component("NAMENODE"))


class ConfigurationTest(base.BlueprintResolverTestCase):
    def test_get_set_property(self):
        properties = {"core-site": {"fs.defaultFS": "hdfs://localhost"}}
        conf = models.Configuration(properties)

        self.assertEqual("hdfs://localhost",
                         conf.get_property("core-site", "fs.defaultFS"))
        self.assertIsNone(conf.get_property("hdfs-site", "missing"))
        self.assertEqual("x", conf.get_property("hdfs-site", "missing", "x"))

        conf.set_property("hdfs-site", "dfs.nameservices", "ns")
        self.assertEqual({"dfs.nameservices": "ns"}, properties["hdfs-site"])

    def test_remove_property_drops_attributes(self):
        properties = {"yarn-site": {"a": "1", "b": "2"}}
        attributes = {"yarn-site": {"final": {"a": "true", "b": "true"}}}
        conf = models.Configuration(properties, attributes)

        self.assertEqual("1", conf.remove_property("yarn-site", "a"))
        self.assertEqual({"b": "2"}, properties["yarn-site"])
        self.assertEqual({"final": {"b": "true"}}, attributes["yarn-site"])
        self.assertIsNone(conf.remove_property("yarn-site", "a"))
        self.assertIsNone(conf.remove_property("other", "a"))

    def test_snapshot_is_independent(self):
        conf = models.Configuration({"core-site": {"a": "1"}})
        snapshot = conf.snapshot()
        snapshot.set_property("core-site", "a", "2")

        self.assertEqual("1", conf.get_property("core-site", "a"))
        self.assertEqual("2", snapshot.get_property("core-site", "a"))

    def test_iter_properties(self):
        conf = models.Configuration({"t1": {"a": "1"}, "t2": {"b": "2"}})
        self.assertEqual([("t1", "a", "1"), ("t2", "b", "2")],
                         sorted(conf.iter_properties()))


class ClusterTopologyTest(base.BlueprintResolverTestCase):
    def test_lookup(self):
        topology = base.make_topology([
            ("master", ["NAMENODE", "ZOOKEEPER_SERVER"], ["m1"]),
            ("worker", ["DATANODE", "ZOOKEEPER_SERVER"], ["w1", "w2"])])

        self.assertEqual(["master", "worker"],
                         topology.get_host_group_names())
        self.assertEqual("worker",
                         topology.get_host_group_for_host("w2").name)
        self.assertIsNone(topology.get_host_group_for_host("external"))
        self.assertIsNone(topology.get_host_group("missing"))
        self.assertEqual(["m1", "w1", "w2"], topology.get_all_hosts())
        self.assertEqual(["NAMENODE", "ZOOKEEPER_SERVER", "DATANODE"],
                         topology.get_components())

    def test_configuration_from_dict(self):
        topology = models.ClusterTopology(
            [], {"core-site": {"a": "1"}})
        self.assertEqual("1",
                         topology.configuration.get_property("core-site",
                                                             "a"))

    def test_duplicate_host_group_name(self):
        self.assertRaises(ex.InvalidTopology, base.make_topology,
                          [("group1", [], ["h1"]), ("group1", [], ["h2"])])

    def test_host_in_two_groups(self):
        self.assertRaises(ex.InvalidTopology, base.make_topology,
                          [("group1", [], ["h1"]), ("group2", [], ["h1"])])
