# Copyright (c) 2017 Karl Bunch <karlbunch@karlbunch.com>

""" Exceptions used by package """

class LogVolumeError(Exception):
    """ Base for errors reported back to kubelet as a Failure response """
    def __init__(self, message=None):
        self.message = message
        super(LogVolumeError, self).__init__(message)

class InvalidArgsError(LogVolumeError):
    """ Operation called with too few arguments """

class MalformedInputError(LogVolumeError):
    """ json options could not be decoded """

class ValidationError(LogVolumeError):
    """ json options decoded but a required value is missing """

class DirectoryCreationError(LogVolumeError):
    """ Unable to create a directory """

class MountError(LogVolumeError):
    """ Bind mount command returned non-zero """

class UnmountError(LogVolumeError):
    """ Unmount command returned non-zero """

class ConfigError(LogVolumeError):
    """ Config file is unreadable or has bad values """

class BackendNotSupportedError(LogVolumeError):
    """ Unsupported mount backend """
