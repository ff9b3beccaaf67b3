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

from oslo_log import log as logging

from blueprint_resolver.resolver import common as c


LOG = logging.getLogger(__name__)


ConfigElement = collections.namedtuple(
    'ConfigElement', ['config_type', 'properties', 'attributes'])


class ServiceConfigRequest(object):
    """Configuration types of one service, submitted together."""

    def __init__(self, service_name, tag):
        self.service_name = service_name
        self.tag = tag
        self.elements = []

    def add_element(self, config_type, properties, attributes=None):
        self.elements.append(
            ConfigElement(config_type, properties, attributes or {}))

    def get_config_types(self):
        return [element.config_type for element in self.elements]


def group_configurations_by_service(topology, configuration, stack,
                                    tag=c.TOPOLOGY_RESOLVED_TAG):
    """Split a cluster configuration into per service requests.

    Each service deployed by the topology receives the configuration
    types the stack declares for it, except excluded types and
    cluster-env. The cluster-env type is carried by a single trailing
    GLOBAL-CONFIG request.
    """
    requests = []
    services = stack.get_services_for_components(topology.get_components())
    for service in services:
        request = ServiceConfigRequest(service, tag)
        excluded = stack.get_excluded_config_types(service)
        for config_type in stack.get_config_types_for_service(service):
            if config_type in excluded or config_type == c.CLUSTER_ENV:
                continue
            if config_type in configuration.properties:
                request.add_element(
                    config_type, configuration.properties[config_type],
                    configuration.attributes.get(config_type))
        LOG.debug("Service {service} configuration types: {types}".format(
            service=service, types=", ".join(request.get_config_types())))
        requests.append(request)

    global_request = ServiceConfigRequest(c.GLOBAL_CONFIG, tag)
    global_request.add_element(
        c.CLUSTER_ENV, configuration.properties.get(c.CLUSTER_ENV, {}),
        configuration.attributes.get(c.CLUSTER_ENV))
    requests.append(global_request)
    return requests
