# Copyright (c) 2017 Karl Bunch <karlbunch@karlbunch.com>

""" Parse the json options kubelet passes to mount

    json_options from kubernetes/pkg/volume/flexvolume/driver-call.go:
        "format"                            - Required, must be a non-empty string
        "kubernetes.io/pod.name"            - Used to derive the host log directory
        "kubernetes.io/pod.namespace"       - Used to derive the host log directory
        "kubernetes.io/pod.uid"             - Used to derive the host log directory
        "kubernetes.io/pvOrVolumeName"      - Logged only
        "kubernetes.io/readwrite"           - Logged only
        "kubernetes.io/serviceAccount.name" - Logged only

    Anything else is ignored.
"""

import json

from .exceptions import MalformedInputError, ValidationError

OPTION_KEYS = {
    "format": "format",
    "kubernetes.io/pod.name": "pod_name",
    "kubernetes.io/pod.namespace": "pod_namespace",
    "kubernetes.io/pod.uid": "pod_uid",
    "kubernetes.io/pvOrVolumeName": "volume_name",
    "kubernetes.io/readwrite": "readwrite",
    "kubernetes.io/serviceAccount.name": "service_account",
}

class MountOptions(object): # pylint: disable=too-few-public-methods,too-many-instance-attributes
    """ Options for a single mount call, never persisted """
    def __init__(self, format, pod_name="", pod_namespace="", pod_uid="", # pylint: disable=redefined-builtin,too-many-arguments
                 volume_name="", readwrite="", service_account=""):
        self.format = format
        self.pod_name = pod_name
        self.pod_namespace = pod_namespace
        self.pod_uid = pod_uid
        self.volume_name = volume_name
        self.readwrite = readwrite
        self.service_account = service_account

    def __eq__(self, other):
        return isinstance(other, MountOptions) and self.__dict__ == other.__dict__

    def __str__(self):
        return "%s(%s)" % (self.__class__.__name__, str(self.__dict__))

def parse_options(json_options):
    """ Decode and validate json options passed in from the mount call """
    try:
        opts = json.loads(json_options)
    except (TypeError, ValueError) as err:
        raise MalformedInputError(str(err))

    if opts is None:
        opts = {}

    if not isinstance(opts, dict):
        raise MalformedInputError("json options must be an object, got {}".format(type(opts).__name__))

    values = {}

    for key, name in OPTION_KEYS.items():
        if key not in opts or opts[key] is None:
            values[name] = ""
            continue

        if not isinstance(opts[key], str):
            raise MalformedInputError("cannot decode {} value {!r} into string".format(key, opts[key]))

        values[name] = opts[key]

    if not values["format"]:
        raise ValidationError("format: non zero value required")

    return MountOptions(**values)
