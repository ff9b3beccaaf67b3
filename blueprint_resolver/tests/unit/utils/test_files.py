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

from oslo_serialization import jsonutils

from blueprint_resolver.tests.unit import base
from blueprint_resolver.utils import files


class FilesTest(base.BlueprintResolverTestCase):
    def test_get_file_text(self):
        data = jsonutils.loads(
            files.get_file_text("resources/default_stack.json"))
        self.assertEqual("HDP", data["name"])
        self.assertIn("services", data)

    def test_missing_file(self):
        self.assertRaises(FileNotFoundError, files.get_file_text,
                          "resources/missing.json")
