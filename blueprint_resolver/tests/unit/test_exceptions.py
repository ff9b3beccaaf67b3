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

from blueprint_resolver import exceptions as exc
from blueprint_resolver.tests.unit import base


class TestExceptions(base.BlueprintResolverTestCase):
    def _validate_exc(self, exc, expected_message, *args, **kwargs):
        message = ""
        try:
            raise exc(*args, **kwargs)
        except exc as e:
            message = str(e)
            if message.find("\nError ID") != -1:
                message = message.split("\nError ID")[0]

        self.assertEqual(expected_message, message)

    def test_configuration_error(self):
        self._validate_exc(
            exc.ConfigurationError, "The configuration has failed")
        self._validate_exc(exc.ConfigurationError, "message", "message")

    def test_invalid_cardinality(self):
        self._validate_exc(
            exc.InvalidCardinality, "Cardinality '1-x' is malformed", "1-x")

    def test_missing_component(self):
        self._validate_exc(
            exc.MissingComponent,
            "Component 'HISTORYSERVER' is required (cardinality '1') but "
            "is not mapped to any host group.", "HISTORYSERVER", "1")
        self._validate_exc(
            exc.MissingComponent,
            "Unable to update configuration property "
            "'mapreduce.jobhistory.address' with topology information. "
            "Component 'HISTORYSERVER' is required (cardinality '1') but "
            "is not mapped to any host group.", "HISTORYSERVER", "1",
            property_name="mapreduce.jobhistory.address")

    def test_ambiguous_host_group(self):
        self._validate_exc(
            exc.AmbiguousHostGroup,
            "Component 'NIMBUS' is mapped to an invalid number of host "
            "groups: group1, group2.", "NIMBUS", ("group1", "group2"))

    def test_unresolvable_reference(self):
        self._validate_exc(
            exc.UnresolvableReference,
            "Unable to match blueprint host group token to a host group: "
            "group9", "group9")

    def test_malformed_value_has_no_error_id(self):
        e = exc.MalformedValue("namenode_heapsize", "lots", "memory size")
        self.assertEqual("Value 'lots' of property 'namenode_heapsize' does "
                         "not have the expected memory size shape", str(e))
        self.assertEqual("MALFORMED_VALUE", e.code)

    def test_namenode_ha_configuration_error(self):
        self._validate_exc(
            exc.NameNodeHAConfigurationError,
            "NameNode High Availability: reason", "reason")

    def test_error_id(self):
        e = exc.InvalidTopology()
        self.assertIn("\nError ID: %s" % e.uuid, e.message)
        self.assertEqual("INVALID_TOPOLOGY", e.code)
