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
from oslo_serialization import jsonutils as json

from blueprint_resolver import exceptions as ex
from blueprint_resolver.i18n import _
from blueprint_resolver.topology import cardinality
from blueprint_resolver.utils import files


LOG = logging.getLogger(__name__)
CONF = cfg.CONF

UNKNOWN_COMPONENT_CARDINALITY = '0+'


class Component(object):
    def __init__(self, name, service, cardinality_spec, master=False):
        self.name = name
        self.service = service
        self.cardinality = cardinality.Cardinality(cardinality_spec)
        self.master = master


class Service(object):
    def __init__(self, name, config_types=None, excluded_config_types=None):
        self.name = name
        self.config_types = list(config_types or [])
        self.excluded_config_types = set(excluded_config_types or [])


class Stack(object):
    """Read-only stack metadata.

    Provides component cardinality, the service owning a component and
    whether it is a master, and the configuration types of each service.
    """

    def __init__(self, name, version, services=None, components=None):
        self.name = name
        self.version = version
        self.services = {}
        self.components = {}
        for service in services or []:
            self.services[service.name] = service
        for component in components or []:
            self.components[component.name] = component

    @classmethod
    def from_dict(cls, data):
        services = []
        components = []
        try:
            for service_data in data['services']:
                services.append(Service(
                    service_data['name'],
                    service_data.get('config_types'),
                    service_data.get('excluded_config_types')))
                for component_data in service_data.get('components', []):
                    components.append(Component(
                        component_data['name'],
                        service_data['name'],
                        component_data['cardinality'],
                        component_data.get('master', False)))
        except KeyError as e:
            raise ex.ConfigurationError(
                _("Stack definition is missing required key %s") % e)

        return cls(data.get('name'), data.get('version'),
                   services, components)

    def _get_component(self, component):
        res = self.components.get(component)
        if res is None:
            LOG.warning("Component {component} is not defined by stack "
                        "{name} {version}".format(component=component,
                                                  name=self.name,
                                                  version=self.version))
        return res

    def get_cardinality(self, component):
        res = self._get_component(component)
        if res is None:
            return cardinality.Cardinality(UNKNOWN_COMPONENT_CARDINALITY)
        return res.cardinality

    def get_service_for_component(self, component):
        res = self._get_component(component)
        return res.service if res else None

    def is_master_component(self, component):
        res = self._get_component(component)
        return res.master if res else False

    def get_config_types_for_service(self, service):
        res = self.services.get(service)
        return list(res.config_types) if res else []

    def get_excluded_config_types(self, service):
        res = self.services.get(service)
        return set(res.excluded_config_types) if res else set()

    def get_services_for_components(self, components):
        services = []
        for component in components:
            service = self.get_service_for_component(component)
            if service and service not in services:
                services.append(service)
        return services


def load_stack(resource=None, package='blueprint_resolver'):
    resource = resource or CONF.stack_definition
    LOG.debug("Loading stack definition from {resource}".format(
        resource=resource))
    return Stack.from_dict(json.loads(files.get_file_text(resource, package)))
