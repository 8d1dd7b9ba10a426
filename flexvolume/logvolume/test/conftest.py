""" Shared fixtures for logvolume tests """

import logging

import pytest

from flexvolume.logvolume.backend import MountBackend, MountResult
from flexvolume.logvolume.config import DEFAULTS
from flexvolume.logvolume.plugin import Plugin

class ScriptedBackend(MountBackend):
    """ In-memory backend, returns scripted results and records calls """
    def __init__(self, mount_result=None, unmount_result=None):
        self.mount_result = mount_result or MountResult()
        self.unmount_result = unmount_result or MountResult()
        self.calls = []
        self.mounts = {}
        super(ScriptedBackend, self).__init__()

    def bind_mount(self, host_path, container_path):
        self.calls.append(("bind_mount", host_path, container_path))
        if self.mount_result.returncode == 0:
            self.mounts[container_path] = host_path
        return self.mount_result

    def unmount(self, container_path):
        self.calls.append(("unmount", container_path))
        if self.unmount_result.returncode == 0:
            self.mounts.pop(container_path, None)
        return self.unmount_result

@pytest.fixture
def config(tmp_path):
    cfg = dict(DEFAULTS)
    cfg["logBaseDir"] = str(tmp_path / "log-volumes")
    cfg["supportDir"] = str(tmp_path / "plugin")
    return cfg

@pytest.fixture
def backend():
    return ScriptedBackend()

@pytest.fixture
def logger():
    log = logging.getLogger("logvolume-test")
    log.setLevel(logging.DEBUG)
    return log

@pytest.fixture
def plugin(config, backend, logger):
    return Plugin(logger=logger, config=config, backend=backend)

@pytest.fixture(autouse=True)
def reset_plugin_logger():
    yield
    log = logging.getLogger("logvolume")
    for handler in list(log.handlers):
        log.removeHandler(handler)
