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

import re

from oslo_utils import netutils


HOSTGROUP_REGEX = re.compile(r'%HOSTGROUP::(\S+?)%')
HOSTGROUP_PORT_REGEX = re.compile(r'%HOSTGROUP::(\S+?)%:?(\d+)?')

KNOWN_URL_SCHEMES = ('thrift://', 'qjournal://', 'https://', 'http://')


def make_placeholder(host_group, port=None):
    token = '%%HOSTGROUP::%s%%' % host_group
    if port:
        token = '%s:%s' % (token, port)
    return token


def has_placeholder(value):
    return HOSTGROUP_REGEX.search(value) is not None


def get_referenced_host_groups(value):
    return [m.group(1) for m in HOSTGROUP_REGEX.finditer(value)]


def split_scheme(value):
    for scheme in KNOWN_URL_SCHEMES:
        if value.startswith(scheme):
            return scheme, value[len(scheme):]
    return '', value


def get_port_from_address(address):
    """Return the port of a 'host[:port]' token as a string or None."""
    host, port = netutils.parse_host_port(address)
    return str(port) if port is not None else None
