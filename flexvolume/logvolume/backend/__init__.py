# Copyright (c) 2017 Karl Bunch <karlbunch@karlbunch.com>

""" Mount backends for the logvolume flexvolume plugin """

from .. import exceptions

class MountResult(object): # pylint: disable=too-few-public-methods
    """ Exit status and combined stdout/stderr of a mount/unmount """
    def __init__(self, returncode=0, output=""):
        self.returncode = returncode
        self.output = output

    def __str__(self):
        return "%s(%s)" % (self.__class__.__name__, str(self.__dict__))

class MountBackend(object):
    """ Base mount backend """
    def __init__(self):
        pass

    def bind_mount(self, host_path, container_path):
        """ Bind mount host_path onto container_path, return MountResult """
        raise NotImplementedError

    def unmount(self, container_path):
        """ Unmount container_path, return MountResult """
        raise NotImplementedError

def get_backend(name, config, log=None):
    """ Return the backend object """
    if name.lower() == "command":
        from .command import MountBackendCommand
        return MountBackendCommand(config["mountCommand"], config["unmountCommand"], log)

    raise exceptions.BackendNotSupportedError("%s mount backend is not supported" % name)
