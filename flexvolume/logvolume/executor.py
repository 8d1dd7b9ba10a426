# Copyright (c) 2017 Karl Bunch <karlbunch@karlbunch.com>

""" Run bind mount / unmount through a backend and turn failures into exceptions """

import logging

from .exceptions import MountError, UnmountError

class MountExecutor(object):
    """ Classifies backend results, silent on success """
    def __init__(self, backend, logger=None):
        self.backend = backend
        self.log = logger or logging.getLogger("logvolume")

    def bind_mount(self, host_path, container_path):
        """ Bind mount host_path onto container_path, raise MountError on non-zero exit """
        result = self.backend.bind_mount(host_path, container_path)

        if result.returncode != 0:
            self.log.debug("bind mount %s -> %s returned %d", host_path, container_path, result.returncode)
            raise MountError(
                "run bind mount command failed, hostPath: {}, containerPath: {}, error: exit status {}, output: {}".format(
                    host_path, container_path, result.returncode, result.output)
            )

    def unmount(self, container_path):
        """ Unmount container_path, raise UnmountError carrying the raw command output """
        result = self.backend.unmount(container_path)

        if result.returncode != 0:
            self.log.debug("unmount %s returned %d", container_path, result.returncode)
            raise UnmountError(result.output)
