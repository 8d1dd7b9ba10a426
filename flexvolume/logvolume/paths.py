# Copyright (c) 2017 Karl Bunch <karlbunch@karlbunch.com>

""" Host side directory helpers """

import os

from .exceptions import DirectoryCreationError

def derive_host_path(base_dir, pod_name, pod_namespace, pod_uid):
    """ Return <base_dir>/<pod_name>_<pod_namespace>_<pod_uid>

        No escaping is done, a "_" inside one of the fields can collide with another pod.
        A leading "/" in pod_name stays under base_dir.
    """
    return os.path.normpath(base_dir + "/" + "_".join([pod_name, pod_namespace, pod_uid]))

def ensure_dir(path, message="create dir {} failed, {}"):
    """ Create path (and parents) if it doesn't exist """
    try:
        os.makedirs(path, exist_ok=True)
    except (OSError, ValueError) as err:
        raise DirectoryCreationError(message.format(path, err))

    return path
