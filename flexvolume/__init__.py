"""
Kubernetes flexvolume drivers

Kubernetes expects the driver executable on nodes at:

    /usr/libexec/kubernetes/kubelet-plugins/volume/exec/app~logvolume/logvolume

which can be the flexvolume-logvolume console script or a wrapper running "python3 -m flexvolume".
"""
