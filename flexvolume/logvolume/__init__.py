# Copyright (c) 2017 Karl Bunch <karlbunch@karlbunch.com>

""" Simple defs for command line entry points

    Kubernetes expects the command line script to be in:

    /usr/libexec/kubernetes/kubelet-plugins/volume/exec/app~logvolume/logvolume
"""

import sys

def run_plugin():
    """ Run flexvolume plugin, kubelet reads status from stdout so always exit 0 """
    from flexvolume.logvolume.plugin import Run
    Run(sys.argv[1:])
    return 0
