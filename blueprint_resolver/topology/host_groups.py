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

from oslo_log import log as logging

from blueprint_resolver import exceptions as ex


LOG = logging.getLogger(__name__)


class HostGroupIndex(object):
    """Lookup of host groups and hosts by component or name.

    Matches are returned as (host group, hosts) pairs in the topology's
    host group declaration order.
    """

    def __init__(self, topology, stack):
        self.topology = topology
        self.stack = stack

    def find(self, component):
        """Return every host group hosting the component, unchecked."""
        return [(group, list(group.hosts))
                for group in self.topology.host_groups
                if group.has_component(component)]

    def resolve(self, component, property_name=None):
        """Return the host groups hosting the component.

        The number of matches is checked against the component's
        cardinality. An optional component which is not deployed yields
        an empty list.
        """
        matches = self.find(component)
        cardinality = self.stack.get_cardinality(component)

        if not matches:
            if cardinality.allows_zero:
                return []
            raise ex.MissingComponent(component, cardinality, property_name)

        if len(matches) > 1 and not cardinality.allows_many:
            raise ex.AmbiguousHostGroup(
                component, [group.name for group, hosts in matches],
                property_name)

        return matches

    def get_host_groups_for_component(self, component):
        return [group.name for group, hosts in self.find(component)]

    def get_hosts_for_component(self, component):
        return [host for group, hosts in self.find(component)
                for host in hosts]

    def get_hosts_for_group(self, name):
        group = self.topology.get_host_group(name)
        if group is None:
            raise ex.UnresolvableReference(name)
        return list(group.hosts)

    def get_group_for_host(self, host):
        group = self.topology.get_host_group_for_host(host)
        if group is None:
            LOG.debug("Host {host} is not part of any host group".format(
                host=host))
            return None
        return group.name
