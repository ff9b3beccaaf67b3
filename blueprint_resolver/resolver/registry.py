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

import collections
import types

from blueprint_resolver.resolver import common as c


# updater kinds
SINGLE_HOST = 'single-host'
MULTIPLE_HOST = 'multiple-host'
EMBEDDED_URL = 'embedded-url'
BRACKETED_LIST = 'bracketed-list'
PASS_THROUGH = 'pass-through'
MEMORY = 'memory'

KINDS = (SINGLE_HOST, MULTIPLE_HOST, EMBEDDED_URL, BRACKETED_LIST,
         PASS_THROUGH, MEMORY)

# value shapes
PLAIN = 'plain'
URL = 'url'
COMMA_LIST = 'comma-list'
BRACKETED_QUOTED_LIST = 'bracketed-quoted-list'
PRINCIPAL = 'principal'


PropertyUpdater = collections.namedtuple(
    'PropertyUpdater',
    ['kind', 'component', 'shape', 'separator', 'prefix_each_host',
     'optional', 'database_type', 'sub_property', 'nameservice_uri',
     'removed_on_export'],
    defaults=(None, PLAIN, ',', False, False, None, None, False, False))


def single_host(component, **kwargs):
    return PropertyUpdater(SINGLE_HOST, component, **kwargs)


def multiple_host(component, **kwargs):
    kwargs.setdefault('shape', COMMA_LIST)
    return PropertyUpdater(MULTIPLE_HOST, component, **kwargs)


def embedded_url(component, database_type=None):
    return PropertyUpdater(EMBEDDED_URL, component, shape=URL,
                           database_type=database_type)


def bracketed_list(component):
    return PropertyUpdater(BRACKETED_LIST, component,
                           shape=BRACKETED_QUOTED_LIST)


def pass_through():
    return PropertyUpdater(PASS_THROUGH)


def original_value():
    """Kept as is on cluster create, never exported."""
    return PropertyUpdater(PASS_THROUGH, removed_on_export=True)


def memory():
    return PropertyUpdater(MEMORY)


def _nameservice_uri():
    return single_host(c.NAMENODE, shape=URL, nameservice_uri=True)


def _optional_ganglia():
    return single_host(c.GANGLIA_SERVER, optional=True)


_UPDATERS = {
    c.HDFS_SITE: {
        'dfs.http.address': single_host(c.NAMENODE),
        'dfs.https.address': single_host(c.NAMENODE),
        'dfs.namenode.http-address': single_host(c.NAMENODE),
        'dfs.namenode.https-address': single_host(c.NAMENODE),
        'dfs.namenode.rpc-address': single_host(c.NAMENODE),
        'dfs.secondary.http.address': single_host(c.SECONDARY_NAMENODE),
        'dfs.namenode.secondary.http-address':
            single_host(c.SECONDARY_NAMENODE),
        'dfs.namenode.shared.edits.dir':
            multiple_host(c.JOURNALNODE, separator=';'),
        'dfs.datanode.address': pass_through(),
        'dfs.datanode.http.address': pass_through(),
        'dfs.datanode.https.address': pass_through(),
        'dfs.datanode.ipc.address': pass_through(),
    },
    c.CORE_SITE: {
        'fs.default.name': _nameservice_uri(),
        'fs.defaultFS': _nameservice_uri(),
        'ha.zookeeper.quorum': multiple_host(c.ZOOKEEPER_SERVER),
        'hadoop.proxyuser.hive.hosts': multiple_host(c.HIVE_SERVER),
        'hadoop.proxyuser.HTTP.hosts': multiple_host(c.WEBHCAT_SERVER),
        'hadoop.proxyuser.hcat.hosts': multiple_host(c.WEBHCAT_SERVER),
        'hadoop.proxyuser.oozie.hosts': multiple_host(c.OOZIE_SERVER),
        'hadoop.proxyuser.knox.hosts': multiple_host(c.KNOX_GATEWAY),
    },
    c.HADOOP_ENV: {
        'namenode_heapsize': memory(),
        'namenode_opt_newsize': memory(),
        'namenode_opt_maxnewsize': memory(),
        'dtnode_heapsize': memory(),
    },
    c.HBASE_SITE: {
        'hbase.rootdir': _nameservice_uri(),
        'hbase.zookeeper.quorum': multiple_host(c.ZOOKEEPER_SERVER),
    },
    c.HBASE_ENV: {
        'hbase_master_heapsize': memory(),
        'hbase_regionserver_heapsize': memory(),
    },
    c.ACCUMULO_SITE: {
        'instance.volumes': _nameservice_uri(),
        'instance.zookeeper.host': multiple_host(c.ZOOKEEPER_SERVER),
    },
    c.YARN_SITE: {
        'yarn.resourcemanager.hostname': single_host(c.RESOURCEMANAGER),
        'yarn.resourcemanager.resource-tracker.address':
            single_host(c.RESOURCEMANAGER),
        'yarn.resourcemanager.webapp.address':
            single_host(c.RESOURCEMANAGER),
        'yarn.resourcemanager.webapp.https.address':
            single_host(c.RESOURCEMANAGER),
        'yarn.resourcemanager.scheduler.address':
            single_host(c.RESOURCEMANAGER),
        'yarn.resourcemanager.address': single_host(c.RESOURCEMANAGER),
        'yarn.resourcemanager.admin.address':
            single_host(c.RESOURCEMANAGER),
        'yarn.timeline-service.address':
            single_host(c.APP_TIMELINE_SERVER),
        'yarn.timeline-service.webapp.address':
            single_host(c.APP_TIMELINE_SERVER),
        'yarn.timeline-service.webapp.https.address':
            single_host(c.APP_TIMELINE_SERVER),
        'yarn.log.server.url': single_host(c.HISTORYSERVER, shape=URL),
        'yarn.resourcemanager.zk-address':
            multiple_host(c.ZOOKEEPER_SERVER),
        'hadoop.registry.zk.quorum': multiple_host(c.ZOOKEEPER_SERVER),
    },
    c.YARN_ENV: {
        'resourcemanager_heapsize': memory(),
        'nodemanager_heapsize': memory(),
        'apptimelineserver_heapsize': memory(),
    },
    c.MAPRED_SITE: {
        'mapreduce.jobhistory.address': single_host(c.HISTORYSERVER),
        'mapreduce.jobhistory.webapp.address': single_host(c.HISTORYSERVER),
    },
    c.HIVE_SITE: {
        c.HIVE_METASTORE_URIS: multiple_host(
            c.HIVE_METASTORE, prefix_each_host=True),
        'javax.jdo.option.ConnectionURL': embedded_url(
            c.MYSQL_SERVER, database_type=(c.HIVE_ENV, 'hive_database')),
        'hive.zookeeper.quorum': multiple_host(c.ZOOKEEPER_SERVER),
        'hive.cluster.delegation.token.store.zookeeper.connectString':
            multiple_host(c.ZOOKEEPER_SERVER),
    },
    c.HIVE_ENV: {
        'hive_hostname': single_host(c.HIVE_SERVER),
    },
    c.WEBHCAT_SITE: {
        'templeton.hive.properties': multiple_host(
            c.HIVE_METASTORE, separator='\\,',
            prefix_each_host=True,
            sub_property=c.HIVE_METASTORE_URIS),
        'templeton.kerberos.principal':
            single_host(c.WEBHCAT_SERVER, shape=PRINCIPAL),
        'templeton.zookeeper.hosts': multiple_host(c.ZOOKEEPER_SERVER),
        'webhcat.proxyuser.knox.hosts': multiple_host(c.KNOX_GATEWAY),
    },
    c.OOZIE_SITE: {
        'oozie.base.url': single_host(c.OOZIE_SERVER, shape=URL),
        'oozie.authentication.kerberos.principal':
            single_host(c.OOZIE_SERVER, shape=PRINCIPAL),
        'oozie.service.HadoopAccessorService.kerberos.principal':
            single_host(c.OOZIE_SERVER, shape=PRINCIPAL),
        'oozie.service.JPAService.jdbc.url': original_value(),
        'oozie.service.ProxyUserService.proxyuser.knox.hosts':
            multiple_host(c.KNOX_GATEWAY),
    },
    c.OOZIE_ENV: {
        'oozie_hostname': single_host(c.OOZIE_SERVER),
        'oozie_existing_mysql_host': original_value(),
    },
    c.STORM_SITE: {
        'storm.zookeeper.servers': bracketed_list(c.ZOOKEEPER_SERVER),
        'nimbus.host': single_host(c.NIMBUS),
        'nimbus.childopts': _optional_ganglia(),
        'worker.childopts': _optional_ganglia(),
        'supervisor.childopts': _optional_ganglia(),
    },
    c.SLIDER_CLIENT: {
        'slider.zookeeper.quorum': multiple_host(c.ZOOKEEPER_SERVER),
    },
    c.KAFKA_BROKER: {
        'zookeeper.connect': multiple_host(c.ZOOKEEPER_SERVER),
        'kafka.ganglia.metrics.host': _optional_ganglia(),
    },
    c.FALCON_STARTUP: {
        '*.broker.url': single_host(c.FALCON_SERVER, shape=URL),
        '*.falcon.service.authentication.kerberos.principal':
            single_host(c.FALCON_SERVER, shape=PRINCIPAL),
        '*.falcon.http.authentication.kerberos.principal':
            single_host(c.FALCON_SERVER, shape=PRINCIPAL),
    },
}


class UpdaterRegistry(object):
    """Immutable (config type, property name) -> updater table."""

    def __init__(self, updaters):
        entries = {}
        for config_type, type_updaters in updaters.items():
            for name, updater in type_updaters.items():
                if updater.kind not in KINDS:
                    raise ValueError("Unknown updater kind %s for %s/%s"
                                     % (updater.kind, config_type, name))
                entries[(config_type, name)] = updater
        self._entries = types.MappingProxyType(entries)

    def get(self, config_type, name):
        return self._entries.get((config_type, name))

    def items(self):
        return self._entries.items()

    def __contains__(self, key):
        return key in self._entries

    def __len__(self):
        return len(self._entries)


REGISTRY = UpdaterRegistry(_UPDATERS)
