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

import os
import re

import setuptools

project = 'blueprint_resolver'


def parse_requirements(requirements_file):
    requirements = []
    if not os.path.exists(requirements_file):
        return requirements
    with open(requirements_file) as f:
        for line in f:
            line = line.split('#', 1)[0].strip()
            # pip options and editable installs are not install requires
            if not line or line.startswith('-'):
                continue
            requirements.append(line)
    return requirements


def get_version():
    with open(os.path.join(project, 'version.py')) as f:
        match = re.search(r'^VERSION = \((\d+), (\d+), (\d+)\)',
                          f.read(), re.M)
    return '.'.join(match.groups())


setuptools.setup(
    name=project,
    version=get_version(),
    description='Ambari blueprint configuration topology resolver',
    author='OpenStack',
    author_email='openstack-dev@lists.openstack.org',
    classifiers=[
        'Environment :: OpenStack',
        'Intended Audience :: Information Technology',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
    ],
    license='Apache Software License',
    python_requires='>=3.9',
    packages=setuptools.find_packages(),
    package_data={project: [
        'resources/*.json',
    ]},
    install_requires=parse_requirements('requirements.txt'),
    extras_require={
        'test': parse_requirements('test-requirements.txt'),
    },
    include_package_data=True,
    entry_points={
        'oslo.config.opts': [
            'blueprint_resolver.config = blueprint_resolver.config:list_opts',
        ],
    },
)
