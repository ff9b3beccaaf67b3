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

from oslo_config import cfg
from oslo_log import log as logging

from blueprint_resolver import exceptions as ex
from blueprint_resolver.i18n import _
from blueprint_resolver.resolver import common as c
from blueprint_resolver.resolver import registry


LOG = logging.getLogger(__name__)
CONF = cfg.CONF


def _split_list(value):
    if not value:
        return []
    return [item.strip() for item in value.split(',') if item.strip()]


def parse_nameservices(configuration):
    return _split_list(
        configuration.get_property(c.HDFS_SITE, c.DFS_NAMESERVICES))


def parse_namenodes(nameservice, configuration):
    return _split_list(configuration.get_property(
        c.HDFS_SITE, c.DFS_HA_NAMENODES % nameservice))


def is_namenode_ha_enabled(configuration):
    return bool(parse_nameservices(configuration))


def is_resourcemanager_ha_enabled(configuration):
    return configuration.get_property(
        c.YARN_SITE, c.YARN_RM_HA_ENABLED) == "true"


def is_hive_ha_enabled(configuration):
    if configuration.get_property(
            c.HIVE_SITE, c.HIVE_SERVER2_DISCOVERY) == "true":
        return True
    uris = configuration.get_property(c.HIVE_SITE, c.HIVE_METASTORE_URIS)
    return bool(uris) and uris.count(c.THRIFT_PREFIX) > 1


def is_oozie_ha_enabled(configuration):
    services = configuration.get_property(c.OOZIE_SITE, c.OOZIE_SERVICES_EXT)
    if not services:
        return False
    return any(marker in services for marker in c.OOZIE_HA_SERVICES)


class HAState(object):
    """HA families activated by the configuration being resolved."""

    def __init__(self, configuration):
        self.nameservices = parse_nameservices(configuration)
        self.namenodes = dict(
            (ns, parse_namenodes(ns, configuration))
            for ns in self.nameservices)
        self.namenode_ha = bool(self.nameservices)
        self.resourcemanager_ha = is_resourcemanager_ha_enabled(
            configuration)
        self.hive_ha = is_hive_ha_enabled(configuration)
        self.oozie_ha = is_oozie_ha_enabled(configuration)

        if self.namenode_ha:
            LOG.debug("NameNode HA is enabled for nameservices "
                      "{nameservices}".format(
                          nameservices=", ".join(self.nameservices)))
        if self.resourcemanager_ha:
            LOG.debug("ResourceManager HA is enabled")
        if self.hive_ha:
            LOG.debug("Hive HA is enabled")
        if self.oozie_ha:
            LOG.debug("Oozie HA is enabled")

    def is_nameservice_uri(self, value):
        """Check that a URI's authority is a declared nameservice."""
        if not self.nameservices or '://' not in value:
            return False
        authority = value.split('://', 1)[1].split('/', 1)[0]
        return authority.split(':', 1)[0] in self.nameservices

    def get_namenode_address_properties(self):
        names = []
        for nameservice in self.nameservices:
            for namenode in self.namenodes[nameservice]:
                for family in c.NAMENODE_HA_ADDRESS_PROPERTIES:
                    names.append('%s.%s.%s' % (family, nameservice, namenode))
        return names

    def get_dynamic_updaters(self):
        """Updaters for the NameNode HA address property family."""
        return dict(((c.HDFS_SITE, name), registry.single_host(c.NAMENODE))
                    for name in self.get_namenode_address_properties())

    def uses_multiple_host_semantics(self, updater):
        """Oozie HA spreads the server address over every Oozie host."""
        return (self.oozie_ha and updater.kind == registry.SINGLE_HOST and
                updater.component == c.OOZIE_SERVER and
                updater.shape != registry.PRINCIPAL)

    def tolerates_host_group_count(self, updater, value, count):
        """Whether a host group count is acceptable without rewriting.

        HA deployments spread a master over several host groups. Values
        already naming concrete hosts are kept as they are.
        """
        component = updater.component
        concrete = CONF.default_host_literal not in value

        if self.namenode_ha:
            if component == c.NAMENODE and count == 2:
                return updater.nameservice_uri or concrete
            if component == c.SECONDARY_NAMENODE and count == 0:
                return True
        if (self.resourcemanager_ha and component == c.RESOURCEMANAGER and
                count == 2):
            return concrete
        if self.oozie_ha and component == c.OOZIE_SERVER and count > 1:
            return concrete
        if self.hive_ha and component == c.HIVE_SERVER and count > 1:
            return concrete
        if component == c.HIVE_METASTORE and count > 1:
            return concrete
        return False


def get_namenode_fixups(ha, configuration, index):
    """Initial active and standby NameNode hosts.

    The first NameNode host in host group declaration order becomes
    active and the remaining NameNode hosts standby. Nothing is returned
    when NameNode HA is disabled or either property is already set.
    """
    if not ha.namenode_ha:
        return {}

    active = configuration.get_property(
        c.HADOOP_ENV, c.DFS_HA_INITIAL_NAMENODE_ACTIVE)
    standby = configuration.get_property(
        c.HADOOP_ENV, c.DFS_HA_INITIAL_NAMENODE_STANDBY)
    if active or standby:
        return {}

    hosts = index.get_hosts_for_component(c.NAMENODE)
    if len(hosts) < 2:
        raise ex.NameNodeHAConfigurationError(
            _("at least two NameNode hosts are required, found %d")
            % len(hosts))

    LOG.debug("Initial active NameNode is {active}, standby {standby}".format(
        active=hosts[0], standby=", ".join(hosts[1:])))
    return {
        (c.HADOOP_ENV, c.DFS_HA_INITIAL_NAMENODE_ACTIVE): hosts[0],
        (c.HADOOP_ENV, c.DFS_HA_INITIAL_NAMENODE_STANDBY):
            ','.join(hosts[1:]),
    }
