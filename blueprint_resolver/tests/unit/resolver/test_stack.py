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

from unittest import mock

from blueprint_resolver import exceptions as ex
from blueprint_resolver.resolver import stack as stack_lib
from blueprint_resolver.tests.unit import base


class StackTest(base.BlueprintResolverTestCase):
    def test_component_metadata(self):
        self.assertEqual("1-2", str(self.stack.get_cardinality("NAMENODE")))
        self.assertEqual("HDFS",
                         self.stack.get_service_for_component("DATANODE"))
        self.assertTrue(self.stack.is_master_component("NAMENODE"))
        self.assertFalse(self.stack.is_master_component("DATANODE"))

    def test_unknown_component(self):
        cardinality = self.stack.get_cardinality("UNKNOWN")
        self.assertTrue(cardinality.allows_zero)
        self.assertTrue(cardinality.allows_many)
        self.assertIsNone(self.stack.get_service_for_component("UNKNOWN"))
        self.assertFalse(self.stack.is_master_component("UNKNOWN"))

    def test_service_metadata(self):
        self.assertIn("hdfs-site",
                      self.stack.get_config_types_for_service("HDFS"))
        self.assertEqual({"ranger-hdfs-plugin-properties"},
                         self.stack.get_excluded_config_types("HDFS"))
        self.assertEqual([], self.stack.get_config_types_for_service("X"))
        self.assertEqual(set(), self.stack.get_excluded_config_types("X"))

    def test_services_for_components(self):
        self.assertEqual(
            ["HDFS", "ZOOKEEPER"],
            self.stack.get_services_for_components(
                ["NAMENODE", "DATANODE", "ZOOKEEPER_SERVER", "UNKNOWN"]))

    def test_from_dict_missing_key(self):
        self.assertRaises(ex.ConfigurationError, stack_lib.Stack.from_dict,
                          {"services": [{"config_types": []}]})

    def test_from_dict_malformed_cardinality(self):
        data = {"services": [{"name": "S", "components": [
            {"name": "C", "cardinality": "one"}]}]}
        self.assertRaises(ex.InvalidCardinality, stack_lib.Stack.from_dict,
                          data)

    def test_load_default_stack(self):
        stack = stack_lib.load_stack()
        self.assertEqual("HDP", stack.name)
        self.assertEqual("0-1",
                         str(stack.get_cardinality("APP_TIMELINE_SERVER")))
        self.assertEqual("ALL", str(stack.get_cardinality("GANGLIA_MONITOR")))

    @mock.patch("blueprint_resolver.utils.files.get_file_text")
    def test_load_stack_from_configured_resource(self, get_file_text):
        get_file_text.return_value = '{"name": "CUSTOM", "services": []}'
        self.override_config("stack_definition", "resources/custom.json")

        stack = stack_lib.load_stack()

        self.assertEqual("CUSTOM", stack.name)
        get_file_text.assert_called_once_with("resources/custom.json",
                                              "blueprint_resolver")
