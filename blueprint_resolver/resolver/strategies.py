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

"""Per-kind rewrite rules for topology dependent property values.

Every rule takes the resolution context, the registry entry, the
property name and its current value. Cluster create rules return the
new value. Blueprint export rules return the new value, or None when
the property has to be left out of the exported blueprint.
"""

import re

from oslo_config import cfg
from oslo_log import log as logging

from blueprint_resolver import exceptions as ex
from blueprint_resolver.resolver import common as c
from blueprint_resolver.resolver import placeholders as ph
from blueprint_resolver.resolver import registry


LOG = logging.getLogger(__name__)
CONF = cfg.CONF

MEMORY_REGEX = re.compile(r'^\d+[kKmMgG]?$')
SUB_PROPERTY_SEPARATOR_REGEX = re.compile(r'(?<!\\),')


class ResolutionContext(object):
    """Inputs shared by the rules during a single resolution call.

    The configuration is the unmodified snapshot taken before any rule
    ran, so rules never observe each other's results.
    """

    def __init__(self, topology, configuration, index, ha):
        self.topology = topology
        self.configuration = configuration
        self.index = index
        self.ha = ha
        self._host_regex = None

    def replace_hosts(self, value):
        """Replace every topology host in value with its placeholder.

        Returns the new value and whether any host was found.
        """
        if self._host_regex is None:
            hosts = sorted(self.topology.get_all_hosts(), key=len,
                           reverse=True)
            if not hosts:
                return value, False
            self._host_regex = re.compile(
                r'(?<![\w.-])(%s)(?![\w.-])' %
                '|'.join(re.escape(host) for host in hosts))

        matched = []

        def _placeholder(match):
            group = self.topology.get_host_group_for_host(match.group(1))
            matched.append(group.name)
            return ph.make_placeholder(group.name)

        return self._host_regex.sub(_placeholder, value), bool(matched)


def is_pass_through(ctx, updater, value):
    if c.WILDCARD_ADDRESS in value or c.UNDEFINED_VALUE in value:
        return True
    return updater.nameservice_uri and ctx.ha.is_nameservice_uri(value)


def is_database_managed(ctx, updater):
    if not updater.database_type:
        return True
    config_type, name = updater.database_type
    database = ctx.configuration.get_property(config_type, name)
    return bool(database) and database.startswith(c.MANAGED_DATABASE_PREFIX)


def _first_host_of_group(ctx, match):
    hosts = ctx.index.get_hosts_for_group(match.group(1))
    if not hosts:
        raise ex.UnresolvableReference(match.group(1))
    return hosts[0]


# cluster create

def single_host_for_cluster_create(ctx, updater, name, value):
    if ph.has_placeholder(value):
        return ph.HOSTGROUP_REGEX.sub(
            lambda m: _first_host_of_group(ctx, m), value)

    if is_pass_through(ctx, updater, value):
        return value

    matches = ctx.index.find(updater.component)
    if updater.optional and not matches:
        LOG.debug("Optional component {component} is not deployed, "
                  "{name} is left unchanged".format(
                      component=updater.component, name=name))
        return value
    if ctx.ha.tolerates_host_group_count(updater, value, len(matches)):
        return value

    matches = ctx.index.resolve(updater.component, name)
    if not matches:
        return value
    if len(matches) > 1:
        raise ex.AmbiguousHostGroup(
            updater.component, [group.name for group, hosts in matches],
            property_name=name)

    group, hosts = matches[0]
    if not hosts:
        LOG.warning("Host group {group} has no hosts, {name} is left "
                    "unchanged".format(group=group.name, name=name))
        return value
    return value.replace(CONF.default_host_literal, hosts[0])


def _find_default_tokens(value):
    """Return the default literal host tokens of value, with their ports."""
    return list(re.finditer(
        r'(?<![\w.-])%s(?::\w+)?(?![\w.-])' %
        re.escape(CONF.default_host_literal), value))


def _get_default_hosts(ctx, updater, name, value, tokens):
    """Expand default literal tokens into the owning component's hosts.

    Ports are assigned by position when the value carries one token per
    host. Otherwise every host gets the port of the first token.
    """
    try:
        ports = [ph.get_port_from_address(token.group(0))
                 for token in tokens]
    except ValueError:
        raise ex.MalformedValue(name, value, updater.shape)

    hosts = [host for group, group_hosts in
             ctx.index.resolve(updater.component, name)
             for host in group_hosts]
    if len(ports) != len(hosts):
        ports = [ports[0]] * len(hosts)
    return ['%s:%s' % (host, port) if port else host
            for host, port in zip(hosts, ports)]


def multiple_host_for_cluster_create(ctx, updater, name, value):
    if (not ph.has_placeholder(value) and
            CONF.default_host_literal not in value):
        # concrete host names given directly
        return value

    prefix = ''
    suffix = ''
    matches = list(ph.HOSTGROUP_PORT_REGEX.finditer(value))
    if matches:
        host_strings = []
        for match in matches:
            group_name, port = match.group(1), match.group(2)
            for host in ctx.index.get_hosts_for_group(group_name):
                host_strings.append(
                    '%s:%s' % (host, port) if port else host)

        prefix = value[:matches[0].start()]
        if prefix == "['":
            prefix = ''
        suffix = value[matches[-1].end():]
        if suffix == "']":
            suffix = ''
    else:
        tokens = _find_default_tokens(value)
        if not tokens:
            return value
        host_strings = _get_default_hosts(ctx, updater, name, value, tokens)
        if not host_strings:
            return value
        prefix = value[:tokens[0].start()]
        suffix = value[tokens[-1].end():]

    separator = updater.separator
    if updater.prefix_each_host and prefix:
        separator += prefix
    return prefix + separator.join(host_strings) + suffix


def _parse_bracketed_list(updater, name, value):
    stripped = value.strip()
    if not (stripped.startswith('[') and stripped.endswith(']')):
        raise ex.MalformedValue(name, value, updater.shape)
    items = []
    for item in stripped[1:-1].split(','):
        item = item.strip()
        if len(item) >= 2 and item[0] == item[-1] == "'":
            item = item[1:-1]
        if item:
            items.append(item)
    return items


def bracketed_list_for_cluster_create(ctx, updater, name, value):
    if not value.strip().startswith('['):
        return multiple_host_for_cluster_create(ctx, updater, name, value)

    items = ','.join(_parse_bracketed_list(updater, name, value))
    resolved = multiple_host_for_cluster_create(ctx, updater, name, items)
    if resolved == items:
        return value
    return "[%s]" % ','.join("'%s'" % item
                             for item in resolved.split(',') if item)


def embedded_url_for_cluster_create(ctx, updater, name, value):
    if not is_database_managed(ctx, updater):
        return value
    return single_host_for_cluster_create(ctx, updater, name, value)


def memory_for_cluster_create(ctx, updater, name, value):
    if not MEMORY_REGEX.match(value):
        raise ex.MalformedValue(name, value, 'memory size')
    if value[-1].isdigit():
        return value + CONF.memory_unit_suffix
    return value


def pass_through_for_cluster_create(ctx, updater, name, value):
    return value


# blueprint export

def single_host_for_blueprint_export(ctx, updater, name, value):
    if is_pass_through(ctx, updater, value):
        return value

    replaced, found = ctx.replace_hosts(value)
    if found:
        return replaced
    if updater.nameservice_uri or not CONF.drop_unresolved_on_export:
        return value

    LOG.debug("Property {name} references a host outside of the cluster "
              "topology and is not exported".format(name=name))
    return None


def multiple_host_for_blueprint_export(ctx, updater, name, value):
    replaced, found = ctx.replace_hosts(value)
    if not found:
        return value

    in_brackets = replaced.startswith('[')
    prefix, body, suffix = '', replaced, ''
    if not updater.prefix_each_host:
        prefix, body = ph.split_scheme(replaced)
        path_start = body.find('/') if prefix else -1
        if path_start >= 0:
            body, suffix = body[:path_start], body[path_start:]

    tokens = []
    for token in body.split(updater.separator):
        token = token.replace('[', '').replace(']', '')
        if token not in tokens:
            tokens.append(token)

    result = prefix + updater.separator.join(tokens) + suffix
    if in_brackets:
        result = '[%s]' % result
    return result


def bracketed_list_for_blueprint_export(ctx, updater, name, value):
    return multiple_host_for_blueprint_export(ctx, updater, name, value)


def embedded_url_for_blueprint_export(ctx, updater, name, value):
    replaced, found = ctx.replace_hosts(value)
    if found:
        return replaced
    if not CONF.drop_unresolved_on_export:
        return value

    LOG.debug("Property {name} references an external database host and "
              "is not exported".format(name=name))
    return None


def memory_for_blueprint_export(ctx, updater, name, value):
    return value


def pass_through_for_blueprint_export(ctx, updater, name, value):
    if updater.removed_on_export:
        LOG.debug("Property {name} is not exported".format(name=name))
        return None
    return value


def _apply_to_sub_property(updater, value, func):
    segments = SUB_PROPERTY_SEPARATOR_REGEX.split(value)
    result = []
    for segment in segments:
        key, sep, sub_value = segment.partition('=')
        if sep and key == updater.sub_property:
            new_sub_value = func(sub_value)
            if new_sub_value is None:
                continue
            segment = '%s=%s' % (key, new_sub_value)
        result.append(segment)
    return ','.join(result)


CLUSTER_CREATE = {
    registry.SINGLE_HOST: single_host_for_cluster_create,
    registry.MULTIPLE_HOST: multiple_host_for_cluster_create,
    registry.EMBEDDED_URL: embedded_url_for_cluster_create,
    registry.BRACKETED_LIST: bracketed_list_for_cluster_create,
    registry.PASS_THROUGH: pass_through_for_cluster_create,
    registry.MEMORY: memory_for_cluster_create,
}

BLUEPRINT_EXPORT = {
    registry.SINGLE_HOST: single_host_for_blueprint_export,
    registry.MULTIPLE_HOST: multiple_host_for_blueprint_export,
    registry.EMBEDDED_URL: embedded_url_for_blueprint_export,
    registry.BRACKETED_LIST: bracketed_list_for_blueprint_export,
    registry.PASS_THROUGH: pass_through_for_blueprint_export,
    registry.MEMORY: memory_for_blueprint_export,
}


def update_for_cluster_create(ctx, updater, name, value):
    if ctx.ha.uses_multiple_host_semantics(updater):
        rule = multiple_host_for_cluster_create
    else:
        rule = CLUSTER_CREATE[updater.kind]

    if updater.sub_property:
        return _apply_to_sub_property(
            updater, value, lambda sub: rule(ctx, updater, name, sub))
    return rule(ctx, updater, name, value)


def update_for_blueprint_export(ctx, updater, name, value):
    rule = BLUEPRINT_EXPORT[updater.kind]
    if updater.sub_property:
        return _apply_to_sub_property(
            updater, value, lambda sub: rule(ctx, updater, name, sub))
    return rule(ctx, updater, name, value)
