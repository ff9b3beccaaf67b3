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

import copy

from blueprint_resolver import exceptions as ex
from blueprint_resolver.i18n import _


class HostGroup(object):
    def __init__(self, name, components=None, hosts=None):
        self.name = name
        self.components = list(components or [])
        self.hosts = []
        for host in hosts or []:
            if host not in self.hosts:
                self.hosts.append(host)

    def has_component(self, component):
        return component in self.components

    def __repr__(self):
        return 'HostGroup(%r, components=%r, hosts=%r)' % (
            self.name, self.components, self.hosts)


class Configuration(object):
    """Two level configuration mapping.

    Properties are kept as config type -> property name -> value and
    attributes as config type -> attribute name -> property name -> value.
    Both mappings are the caller's objects and are mutated in place.
    """

    def __init__(self, properties=None, attributes=None):
        self.properties = properties if properties is not None else {}
        self.attributes = attributes if attributes is not None else {}

    def get_property(self, config_type, name, default=None):
        return self.properties.get(config_type, {}).get(name, default)

    def has_property(self, config_type, name):
        return name in self.properties.get(config_type, {})

    def set_property(self, config_type, name, value):
        self.properties.setdefault(config_type, {})[name] = value

    def remove_property(self, config_type, name):
        type_props = self.properties.get(config_type)
        if type_props is None or name not in type_props:
            return None
        for occurrences in self.attributes.get(config_type, {}).values():
            occurrences.pop(name, None)
        return type_props.pop(name)

    def get_type(self, config_type):
        return self.properties.get(config_type, {})

    def config_types(self):
        return list(self.properties)

    def iter_properties(self):
        for config_type, type_props in self.properties.items():
            for name, value in type_props.items():
                yield config_type, name, value

    def snapshot(self):
        return Configuration(copy.deepcopy(self.properties),
                             copy.deepcopy(self.attributes))


class ClusterTopology(object):
    """Host groups of a cluster together with its configuration.

    Host groups keep their declaration order, which is the order used
    whenever hosts of several groups are combined.
    """

    def __init__(self, host_groups, configuration=None, name=None):
        self.name = name
        self.host_groups = list(host_groups)
        if configuration is None:
            configuration = Configuration()
        elif isinstance(configuration, dict):
            configuration = Configuration(configuration)
        self.configuration = configuration

        self._groups_by_name = {}
        self._groups_by_host = {}
        self._validate()

    def _validate(self):
        for group in self.host_groups:
            if group.name in self._groups_by_name:
                raise ex.InvalidTopology(
                    _("Host group name '%s' is not unique") % group.name)
            self._groups_by_name[group.name] = group

            for host in group.hosts:
                owner = self._groups_by_host.get(host)
                if owner is not None:
                    raise ex.InvalidTopology(
                        _("Host '%(host)s' belongs to host groups "
                          "'%(first)s' and '%(second)s'")
                        % {'host': host, 'first': owner.name,
                           'second': group.name})
                self._groups_by_host[host] = group

    def get_host_group(self, name):
        return self._groups_by_name.get(name)

    def get_host_group_names(self):
        return [group.name for group in self.host_groups]

    def get_host_group_for_host(self, host):
        return self._groups_by_host.get(host)

    def get_all_hosts(self):
        return [host for group in self.host_groups for host in group.hosts]

    def get_components(self):
        components = []
        for group in self.host_groups:
            for component in group.components:
                if component not in components:
                    components.append(component)
        return components
