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
from blueprint_resolver.resolver import ha_helper
from blueprint_resolver.resolver import placeholders as ph
from blueprint_resolver.resolver import registry
from blueprint_resolver.resolver import stack as stack_lib
from blueprint_resolver.resolver import strategies
from blueprint_resolver.topology import host_groups
from blueprint_resolver.topology import models


LOG = logging.getLogger(__name__)


class ConfigurationProcessor(object):
    """Resolves host group dependent configuration of a cluster.

    Cluster create resolution replaces host group placeholders and
    default host literals with the hosts of the topology. Blueprint
    export does the opposite. Updates are computed against a snapshot of
    the configuration and committed only when every property resolved,
    so a failed call leaves the caller's configuration untouched.
    """

    def __init__(self, topology, configuration=None, stack=None,
                 updaters=None):
        self.topology = topology
        if configuration is None:
            configuration = topology.configuration
        elif isinstance(configuration, dict):
            configuration = models.Configuration(configuration)
        self.configuration = configuration
        self.updaters = updaters or registry.REGISTRY
        self._stack = stack

    @property
    def stack(self):
        if self._stack is None:
            self._stack = stack_lib.load_stack()
        return self._stack

    def _create_context(self, configuration, stack):
        ha = ha_helper.HAState(configuration)
        index = host_groups.HostGroupIndex(self.topology, stack)
        return strategies.ResolutionContext(
            self.topology, configuration, index, ha)

    def _get_registered_properties(self, ctx):
        dynamic = ctx.ha.get_dynamic_updaters()
        for config_type, name, value in ctx.configuration.iter_properties():
            if value is None:
                continue
            updater = (self.updaters.get(config_type, name) or
                       dynamic.get((config_type, name)))
            if updater is not None:
                yield config_type, name, value, updater

    def resolve_for_cluster_create(self):
        ctx = self._create_context(self.configuration.snapshot(), self.stack)

        updates = {}
        for config_type, name, value, updater in (
                self._get_registered_properties(ctx)):
            try:
                new_value = strategies.update_for_cluster_create(
                    ctx, updater, name, value)
            except ex.MalformedValue as e:
                LOG.warning("Property {type}/{name} is left unchanged: "
                            "{reason}".format(type=config_type, name=name,
                                              reason=e))
                continue

            if new_value != value:
                LOG.debug("Resolved {type}/{name}: {old} -> {new}".format(
                    type=config_type, name=name, old=value, new=new_value))
                updates[(config_type, name)] = new_value

        # depends on the NameNode HA address properties above
        updates.update(ha_helper.get_namenode_fixups(
            ctx.ha, ctx.configuration, ctx.index))

        self._commit(updates)
        return self.configuration

    def resolve_for_blueprint_export(self):
        # cardinality is not consulted on export
        ctx = self._create_context(self.configuration.snapshot(), self._stack)

        updates = {}
        removals = []
        for config_type, name, value, updater in (
                self._get_registered_properties(ctx)):
            new_value = strategies.update_for_blueprint_export(
                ctx, updater, name, value)
            if new_value is None:
                removals.append((config_type, name))
            elif new_value != value:
                LOG.debug("Exported {type}/{name}: {old} -> {new}".format(
                    type=config_type, name=name, old=value, new=new_value))
                updates[(config_type, name)] = new_value

        self._commit(updates, removals)
        return self.configuration

    def get_required_host_groups(self):
        ctx = self._create_context(self.configuration, self.stack)

        required = set()
        for config_type, name, value, updater in (
                self._get_registered_properties(ctx)):
            if updater.component is None:
                continue
            if not strategies.is_database_managed(ctx, updater):
                continue

            referenced = ph.get_referenced_host_groups(value)
            if referenced:
                required.update(referenced)
                continue

            groups = ctx.index.get_host_groups_for_component(
                updater.component)
            if not groups and not updater.optional:
                cardinality = self.stack.get_cardinality(updater.component)
                if not cardinality.allows_zero:
                    LOG.warning("No host group found for component "
                                "{component} referenced by {type}/{name}, "
                                "cardinality is {cardinality}".format(
                                    component=updater.component,
                                    type=config_type, name=name,
                                    cardinality=cardinality))
            required.update(groups)

        return required

    def _commit(self, updates, removals=()):
        for (config_type, name), value in updates.items():
            self.configuration.set_property(config_type, name, value)
        for config_type, name in removals:
            LOG.debug("Removing {type}/{name} from exported "
                      "configuration".format(type=config_type, name=name))
            self.configuration.remove_property(config_type, name)


def resolve_for_cluster_create(topology, configuration=None, stack=None):
    return ConfigurationProcessor(
        topology, configuration, stack).resolve_for_cluster_create()


def resolve_for_blueprint_export(topology, configuration=None):
    return ConfigurationProcessor(
        topology, configuration).resolve_for_blueprint_export()


def get_required_host_groups(topology, configuration=None, stack=None):
    return ConfigurationProcessor(
        topology, configuration, stack).get_required_host_groups()
