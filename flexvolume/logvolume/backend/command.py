# Copyright (c) 2017 Karl Bunch <karlbunch@karlbunch.com>

""" Bind mount using mount(8) / umount(8) """

import logging
import subprocess

from . import MountBackend, MountResult

class MountBackendCommand(MountBackend):
    """ Runs the os mount commands and waits for them to finish """
    def __init__(self, mount_cmd=None, unmount_cmd=None, logger=None):
        self.mount_cmd = list(mount_cmd or ["mount", "-o", "bind"])
        self.unmount_cmd = list(unmount_cmd or ["umount"])
        self.log = logger or logging.getLogger("logvolume")

        super(MountBackendCommand, self).__init__()

    def pipe_exec(self, cmd):
        """ Run command capturing stdout/stderr together """
        self.log.debug("run: %s", str(cmd))

        try:
            result = subprocess.run(cmd, check=False, stdout=subprocess.PIPE, stderr=subprocess.STDOUT)
        except OSError as err:
            self.log.debug("return: 127 (%s)", err)
            return MountResult(returncode=127, output=str(err))

        output = result.stdout.rstrip().decode('utf-8', errors='replace')

        self.log.debug("return: %d", result.returncode)

        return MountResult(returncode=result.returncode, output=output)

    def bind_mount(self, host_path, container_path):
        """ mount -o bind host_path container_path """
        return self.pipe_exec(self.mount_cmd + [host_path, container_path])

    def unmount(self, container_path):
        """ umount container_path """
        return self.pipe_exec(self.unmount_cmd + [container_path])
