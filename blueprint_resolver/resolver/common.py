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

# config types
ACCUMULO_SITE = "accumulo-site"
CLUSTER_ENV = "cluster-env"
CORE_SITE = "core-site"
FALCON_STARTUP = "falcon-startup.properties"
HADOOP_ENV = "hadoop-env"
HBASE_ENV = "hbase-env"
HBASE_SITE = "hbase-site"
HDFS_SITE = "hdfs-site"
HIVE_ENV = "hive-env"
HIVE_SITE = "hive-site"
KAFKA_BROKER = "kafka-broker"
MAPRED_SITE = "mapred-site"
OOZIE_ENV = "oozie-env"
OOZIE_SITE = "oozie-site"
SLIDER_CLIENT = "slider-client"
STORM_SITE = "storm-site"
WEBHCAT_SITE = "webhcat-site"
YARN_ENV = "yarn-env"
YARN_SITE = "yarn-site"

# components
APP_TIMELINE_SERVER = "APP_TIMELINE_SERVER"
FALCON_SERVER = "FALCON_SERVER"
GANGLIA_SERVER = "GANGLIA_SERVER"
HISTORYSERVER = "HISTORYSERVER"
HIVE_METASTORE = "HIVE_METASTORE"
HIVE_SERVER = "HIVE_SERVER"
JOURNALNODE = "JOURNALNODE"
KNOX_GATEWAY = "KNOX_GATEWAY"
MYSQL_SERVER = "MYSQL_SERVER"
NAMENODE = "NAMENODE"
NIMBUS = "NIMBUS"
OOZIE_SERVER = "OOZIE_SERVER"
RESOURCEMANAGER = "RESOURCEMANAGER"
SECONDARY_NAMENODE = "SECONDARY_NAMENODE"
WEBHCAT_SERVER = "WEBHCAT_SERVER"
ZOOKEEPER_SERVER = "ZOOKEEPER_SERVER"

# HA markers
DFS_NAMESERVICES = "dfs.nameservices"
DFS_HA_NAMENODES = "dfs.ha.namenodes.%s"
DFS_HA_INITIAL_NAMENODE_ACTIVE = "dfs_ha_initial_namenode_active"
DFS_HA_INITIAL_NAMENODE_STANDBY = "dfs_ha_initial_namenode_standby"
NAMENODE_HA_ADDRESS_PROPERTIES = (
    "dfs.namenode.https-address",
    "dfs.namenode.http-address",
    "dfs.namenode.rpc-address",
)
YARN_RM_HA_ENABLED = "yarn.resourcemanager.ha.enabled"
HIVE_SERVER2_DISCOVERY = "hive.server2.support.dynamic.service.discovery"
HIVE_METASTORE_URIS = "hive.metastore.uris"
OOZIE_SERVICES_EXT = "oozie.services.ext"
OOZIE_HA_SERVICES = (
    "org.apache.oozie.service.ZKLocksService",
    "org.apache.oozie.service.ZKXLogStreamingService",
    "org.apache.oozie.service.ZKJobsConcurrencyService",
    "org.apache.oozie.service.ZKUUIDService",
)

# values which must never be treated as host names
WILDCARD_ADDRESS = "0.0.0.0"
UNDEFINED_VALUE = "undefined"

MANAGED_DATABASE_PREFIX = "New"
THRIFT_PREFIX = "thrift://"

GLOBAL_CONFIG = "GLOBAL-CONFIG"
INITIAL_TAG = "INITIAL"
TOPOLOGY_RESOLVED_TAG = "TOPOLOGY_RESOLVED"
