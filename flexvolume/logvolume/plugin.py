# Copyright (c) 2017 Karl Bunch <karlbunch@karlbunch.com>

""" Implements a kubernetes flexvolume that bind mounts a per-pod host log directory into the container

    See https://github.com/kubernetes/community/blob/master/contributors/devel/flexvolume.md

    The host directory is <logBaseDir>/<pod.name>_<pod.namespace>_<pod.uid>, it is created on mount
    and left in place on unmount so logs survive container restarts. Cleaning it up is somebody else's job.

    Every call is a fresh process, the only state is what's on the filesystem. Failures go back to
    kubelet in the status json on stdout, the exit code is always 0.
"""

import json
import logging
import logging.handlers
import os
import sys
import time
import traceback

from .backend import get_backend
from .config import load_config
from .exceptions import (LogVolumeError, InvalidArgsError, DirectoryCreationError,
                         MountError, UnmountError)
from .executor import MountExecutor
from .options import parse_options
from .paths import derive_host_path, ensure_dir

STATUS_SUCCESS = "Success"
STATUS_FAILURE = "Failure"
STATUS_NOT_SUPPORTED = "Not supported"

def Run(args):
    """ Run an operation output status json to stdout """
    try:
        plugin = Plugin()
    except LogVolumeError as err:
        print(json.dumps(make_response(STATUS_FAILURE, err.message)))
        return False

    if not args:
        return plugin.response(make_response(STATUS_FAILURE, "missing operation"))

    return plugin.run_operation(args[0], args[1:])

def make_response(status, message, capabilities=None):
    """
    See kubernetes/pkg/volume/flexvolume/driver-call.go

    type DriverStatus struct {
            // Status of the callout. One of "Success", "Failure" or "Not supported".
            Status string `json:"status"`
            // Reason for success/failure.
            Message string `json:"message,omitempty"`
            // Returns capabilities of the driver.
            Capabilities map[string]bool
    }
    """
    resp = {"status": status, "message": message}

    if capabilities is not None:
        resp["capabilities"] = capabilities

    return resp

def make_logger(config, log_stream=None):
    """ syslog logger, falls back to stderr since stdout belongs to kubelet """
    log = logging.getLogger("logvolume")
    log.setLevel(config["logLevel"].upper())

    if log.handlers:
        return log

    handler = None

    if log_stream is None and os.path.exists(config["syslogAddress"]):
        try:
            handler = logging.handlers.SysLogHandler(address=config["syslogAddress"],
                                                     facility=logging.handlers.SysLogHandler.LOG_DAEMON)
            handler.ident = 'logvolume: '
        except OSError:
            handler = None

    if handler is None:
        handler = logging.StreamHandler(stream=log_stream or sys.stderr)

    handler.setFormatter(logging.Formatter('[%(process)d] %(levelname)s %(message)s'))
    log.addHandler(handler)

    return log

def check_args_len(operation, args, expected_num):
    """ Raise InvalidArgsError if fewer than expected_num args, extras are ignored """
    if len(args) < expected_num:
        raise InvalidArgsError("{}: invalid args num, {}".format(operation, list(args)))

class Plugin(object):
    """ Implements the flexvolume plugin operations """

    def __init__(self, logger=None, log_stream=None, config=None, backend=None):
        self.config = config if config is not None else load_config()

        if logger:
            self.log = logger
        else:
            self.log = make_logger(self.config, log_stream)

        if backend is None:
            backend = get_backend(self.config["backend"], self.config, self.log)

        self.executor = MountExecutor(backend, self.log)

    def response(self, resp):
        """ Write resp json to stdout, return True on Success """
        resp_json = json.dumps(resp)

        self.log.info("Response: %s", resp_json)

        print(resp_json)

        return resp["status"] == STATUS_SUCCESS

    def run_operation(self, operation, args):
        """ Run a single plugin operation """
        handler = getattr(self, 'op_' + operation, None)

        if handler is None or not callable(handler):
            return self.response(make_response(STATUS_NOT_SUPPORTED, "Unknown operation: {}".format(operation)))

        start_time = time.time()

        try:
            resp = handler(*args)
        except Exception: # pylint: disable=broad-except
            self.log.error("Exception Calling op_%s(%s)\n%s", operation, args, traceback.format_exc())
            resp = make_response(STATUS_FAILURE, "Driver error, check syslog for details.")

        delta_time = int(time.time() - start_time)

        if resp["status"] == STATUS_SUCCESS:
            self.log.info("%s SUCCESS after %d second(s)", operation, delta_time)
        else:
            self.log.info("%s FAILED after %d second(s)", operation, delta_time)

        return self.response(resp)

    def ensure_base_dirs(self):
        """ Create the log base and plugin support directories if needed """
        ensure_dir(self.config["logBaseDir"], "create log dir {} failed, {}")
        ensure_dir(self.config["supportDir"], "create plugin dir {} failed, {}")

    def op_init(self, *args): # pylint: disable=unused-argument
        """
        Initializes the driver. Called during Kubelet & Controller manager
        initialization.

        <driver executable> init
        """
        try:
            self.ensure_base_dirs()
        except DirectoryCreationError as err:
            return make_response(STATUS_FAILURE, err.message)

        return make_response(STATUS_SUCCESS, "Success", capabilities={"attach": False})

    def op_mount(self, *args):
        """
        Bind mount <logBaseDir>/<pod.name>_<pod.namespace>_<pod.uid> onto the mount dir.
        Called only from Kubelet.

        <driver executable> mount <mount dir> <json options>
        """
        self.log.debug("mount args: %s", list(args))

        try:
            check_args_len("mount", args, 2)

            container_path = args[0]
            options = parse_options(args[1])

            self.log.info("op_mount: container_path: %s options: %s", container_path, options)

            self.ensure_base_dirs()

            host_path = derive_host_path(self.config["logBaseDir"], options.pod_name, options.pod_namespace, options.pod_uid)

            ensure_dir(host_path, "create hostPath failed, {1}")

            try:
                self.executor.bind_mount(host_path, container_path)
            except MountError as err:
                raise MountError("bind mount failed, {}".format(err.message)) from err
        except LogVolumeError as err:
            self.log.error("%s", err.message)
            return make_response(STATUS_FAILURE, err.message)

        return make_response(STATUS_SUCCESS, "Success")

    def op_unmount(self, *args):
        """
        Unmount the mount dir. The host log directory is left alone.
        Called only from Kubelet.

        <driver executable> unmount <mount dir>
        """
        self.log.debug("unmount args: %s", list(args))

        try:
            check_args_len("unmount", args, 1)

            container_path = args[0]

            try:
                self.executor.unmount(container_path)
            except UnmountError as err:
                raise UnmountError("unmount container path {} failed, {}".format(container_path, err.message)) from err
        except LogVolumeError as err:
            self.log.error("%s", err.message)
            return make_response(STATUS_FAILURE, err.message)

        return make_response(STATUS_SUCCESS, "Success")

    def not_supported(self, operation, args):
        """ Answer for call-outs this driver leaves to kubelet """
        self.log.info("op_%s: %s not supported", operation, list(args))

        return make_response(STATUS_NOT_SUPPORTED, "Not supported")

    def op_getvolumename(self, *args):
        """ <driver executable> getvolumename <json options> """
        return self.not_supported("getvolumename", args)

    def op_attach(self, *args):
        """ <driver executable> attach <json options> <node name>, no attach capability """
        return self.not_supported("attach", args)

    def op_detach(self, *args):
        """ <driver executable> detach <mount device> <node name> """
        return self.not_supported("detach", args)

    def op_waitforattach(self, *args):
        """ <driver executable> waitforattach <mount device> <json options> """
        return self.not_supported("waitforattach", args)

    def op_isattached(self, *args):
        """ <driver executable> isattached <json options> <node name> """
        return self.not_supported("isattached", args)

    def op_mountdevice(self, *args):
        """ <driver executable> mountdevice <mount dir> <mount device> <json options> """
        return self.not_supported("mountdevice", args)

    def op_unmountdevice(self, *args):
        """ <driver executable> unmountdevice <mount device> """
        return self.not_supported("unmountdevice", args)
