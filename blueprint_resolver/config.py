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

import itertools

from oslo_config import cfg
from oslo_log import log

from blueprint_resolver import exceptions as ex
from blueprint_resolver.i18n import _
from blueprint_resolver import version


resolver_opts = [
    cfg.StrOpt('default_host_literal',
               default='localhost',
               help='Example host literal used by blueprint default values. '
                    'Cluster create resolution replaces it with the hosts '
                    'of the owning component.'),
    cfg.StrOpt('memory_unit_suffix',
               default='m',
               help='Unit suffix appended to heap size properties which '
                    'are given as a bare number.'),
    cfg.BoolOpt('drop_unresolved_on_export',
                default=True,
                help='Omit single host properties and database URLs whose '
                     'host is not part of the cluster topology from an '
                     'exported blueprint. If set to False such values '
                     'are exported verbatim.')
]

stack_opts = [
    cfg.StrOpt('stack_definition',
               default='resources/default_stack.json',
               help='Package resource holding the stack metadata used '
                    'when no stack is passed to the resolver.')
]


CONF = cfg.CONF
CONF.register_opts(resolver_opts)
CONF.register_opts(stack_opts)

log.register_options(CONF)


def list_opts():
    return [
        (None,
         itertools.chain(resolver_opts,
                         stack_opts))
    ]


def parse_configs(conf_files=None):
    try:
        CONF(args=[], project='blueprint_resolver',
             version=version.version_string(),
             default_config_files=conf_files)
    except cfg.RequiredOptError as roe:
        raise ex.ConfigurationError(
            _("Option '%(option)s' is required for config group '%(group)s'") %
            {'option': roe.opt_name, 'group': roe.group.name})


def setup_logging():
    log.setup(CONF, 'blueprint_resolver')
