# Copyright (c) 2017 Karl Bunch <karlbunch@karlbunch.com>

""" Plugin configuration

    Read from /etc/kubernetes/flexvolume-logvolume.conf (or $FLEXVOLUME_LOGVOLUME_CONFIG), e.g.:

        logBaseDir: /var/lib/app/log-volumes
        supportDir: /var/lib/app/log-volume-plugin
        backend: command
        mountCommand: [mount, -o, bind]
        unmountCommand: [umount]
        logLevel: DEBUG
        syslogAddress: /dev/log

    Every key is optional, a missing file means all defaults.
"""

import logging
import os
from copy import deepcopy
import yaml

from .exceptions import ConfigError

CONFIG_ENV = "FLEXVOLUME_LOGVOLUME_CONFIG"
DEFAULT_CONFIG_FILE = "/etc/kubernetes/flexvolume-logvolume.conf"

DEFAULTS = {
    "logBaseDir": "/var/lib/app/log-volumes",
    "supportDir": "/var/lib/app/log-volume-plugin",
    "backend": "command",
    "mountCommand": ["mount", "-o", "bind"],
    "unmountCommand": ["umount"],
    "logLevel": "DEBUG",
    "syslogAddress": "/dev/log",
}

def config_path():
    """ Config file location, environment wins """
    return os.environ.get(CONFIG_ENV) or DEFAULT_CONFIG_FILE

def load_config(path=None):
    """ Load config file merged over DEFAULTS """
    path = path or config_path()
    cfg = deepcopy(DEFAULTS)

    if not os.path.exists(path):
        return cfg

    try:
        with open(path) as fobj:
            data = yaml.safe_load(fobj)
    except (OSError, yaml.YAMLError) as err:
        raise ConfigError("failed to read config {}: {}".format(path, err))

    if data is None:
        return cfg

    if not isinstance(data, dict):
        raise ConfigError("config {} must be a mapping".format(path))

    cfg.update(data)

    return check_config(cfg, path)

def check_config(cfg, path="<config>"):
    """ Make sure values have usable types """
    for key in ("logBaseDir", "supportDir", "backend", "logLevel", "syslogAddress"):
        if not isinstance(cfg[key], str) or not cfg[key]:
            raise ConfigError("{}: {} must be a non-empty string".format(path, key))

    if not isinstance(logging.getLevelName(cfg["logLevel"].upper()), int):
        raise ConfigError("{}: logLevel {} is not a logging level".format(path, cfg["logLevel"]))

    for key in ("mountCommand", "unmountCommand"):
        if not isinstance(cfg[key], list) or not cfg[key] or not all(isinstance(i, str) for i in cfg[key]):
            raise ConfigError("{}: {} must be a non-empty list of strings".format(path, key))

    return cfg
