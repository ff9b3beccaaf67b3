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

from oslo_utils import uuidutils

from blueprint_resolver.i18n import _


class BlueprintResolverException(Exception):
    """Base Exception for the project

    To correctly use this class, inherit from it and define
    a 'message' and 'code' properties.
    """
    code = "UNKNOWN_EXCEPTION"
    message = _("An unknown exception occurred")

    def __str__(self):
        return self.message

    def __init__(self, message=None, code=None, inject_error_id=True):
        self.uuid = uuidutils.generate_uuid()

        if code:
            self.code = code
        if message:
            self.message = message

        if inject_error_id:
            # Add Error UUID to the message if required
            self.message = (_('%(message)s\nError ID: %(id)s')
                            % {'message': self.message, 'id': self.uuid})

        super(BlueprintResolverException, self).__init__(
            '%s: %s' % (self.code, self.message))


class ConfigurationError(BlueprintResolverException):
    code = "CONFIGURATION_ERROR"
    message = _("The configuration has failed")


class InvalidCardinality(BlueprintResolverException):
    code = "INVALID_CARDINALITY"
    message_template = _("Cardinality '%s' is malformed")

    def __init__(self, value):
        self.value = value
        super(InvalidCardinality, self).__init__(self.message_template % value)


class InvalidTopology(BlueprintResolverException):
    code = "INVALID_TOPOLOGY"
    message = _("Cluster topology is invalid")


class MissingComponent(BlueprintResolverException):
    code = "MISSING_COMPONENT"

    def __init__(self, component, cardinality, property_name=None):
        self.component = component
        self.cardinality = cardinality
        self.property_name = property_name
        if property_name:
            message = _("Unable to update configuration property "
                        "'%(property)s' with topology information. "
                        "Component '%(component)s' is "
                        "required (cardinality '%(cardinality)s') but is "
                        "not mapped to any host group.")
        else:
            message = _("Component '%(component)s' is required "
                        "(cardinality '%(cardinality)s') but is not mapped "
                        "to any host group.")
        super(MissingComponent, self).__init__(
            message % {'property': property_name,
                       'component': component, 'cardinality': cardinality})


class AmbiguousHostGroup(BlueprintResolverException):
    code = "AMBIGUOUS_HOST_GROUP"

    def __init__(self, component, host_groups, property_name=None):
        self.component = component
        self.host_groups = list(host_groups)
        self.property_name = property_name
        if property_name:
            message = _("Unable to update configuration property "
                        "'%(property)s' with topology information. "
                        "Component '%(component)s' is mapped "
                        "to an invalid number of host groups: %(groups)s.")
        else:
            message = _("Component '%(component)s' is mapped to an invalid "
                        "number of host groups: %(groups)s.")
        super(AmbiguousHostGroup, self).__init__(
            message % {'property': property_name,
                       'component': component,
                       'groups': ', '.join(self.host_groups)})


class UnresolvableReference(BlueprintResolverException):
    code = "UNRESOLVABLE_REFERENCE"
    message_template = _("Unable to match blueprint host group token to a "
                         "host group: %s")

    def __init__(self, host_group):
        self.host_group = host_group
        super(UnresolvableReference, self).__init__(
            self.message_template % host_group)


class MalformedValue(BlueprintResolverException):
    code = "MALFORMED_VALUE"
    message_template = _("Value '%(value)s' of property '%(property)s' "
                         "does not have the expected %(shape)s shape")

    def __init__(self, property_name, value, shape):
        self.property_name = property_name
        self.value = value
        self.shape = shape
        super(MalformedValue, self).__init__(
            self.message_template % {'value': value,
                                     'property': property_name,
                                     'shape': shape},
            inject_error_id=False)


class NameNodeHAConfigurationError(BlueprintResolverException):
    code = "NAMENODE_HIGHAVAILABILITY_CONFIGURATION_ERROR"
    message_template = _("NameNode High Availability: %s")

    def __init__(self, reason):
        super(NameNodeHAConfigurationError, self).__init__(
            self.message_template % reason)
