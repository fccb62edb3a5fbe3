"""
Shared pytest fixtures for all tests.

Provides reusable fixtures for:
- Temporary configuration directories
- Writing YAML configuration files
- ConfigPath instances over the sample files
"""

import os
import shutil
import tempfile

import pytest
import yaml

from configpath import ConfigPath


def write_yaml(path, data):
    """Write a dictionary as YAML."""
    with open(path, 'w') as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def temp_dir():
    """Empty temporary directory, removed afterwards."""
    path = tempfile.mkdtemp()
    yield path
    shutil.rmtree(path)


@pytest.fixture
def temp_config_dir(temp_dir):
    """
    Create a config directory with two YAML files.

    file1.yml: {'a': {'b': 'c'}, 'foo': 'bar', 'thingies': [...]}
    file2.yml: {'baz': 'gorch'}
    """
    config_dir = os.path.join(temp_dir, 'conf.d')
    os.makedirs(config_dir)

    file1 = write_yaml(os.path.join(config_dir, 'file1.yml'), {
        'a': {'b': 'c'},
        'foo': 'bar',
        'thingies': [
            {'name': 'first', 'size': 1},
            {'name': 'second', 'size': 2},
        ],
    })
    file2 = write_yaml(os.path.join(config_dir, 'file2.yml'), {'baz': 'gorch'})

    yield config_dir, [file1, file2]


@pytest.fixture
def sample_config(temp_config_dir):
    """ConfigPath over the sample files, in file-list mode."""
    config_dir, files = temp_config_dir
    return ConfigPath(files=files)
