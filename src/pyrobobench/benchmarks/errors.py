""" Failures raised while loading benchmark query data. """

import sys
import warnings


class QueryDataError(RuntimeError):
    """Base class for failures that abort loading benchmark query data."""


class ModelUnavailableError(QueryDataError):
    """Raised when no usable robot model or planning scene is available."""


class UnknownJointGroupError(QueryDataError):
    """Raised when a joint group name does not resolve against the robot model."""

    def __init__(self, group_name):
        self.group_name = group_name
        super().__init__(f"Robot model has no joint group named '{group_name}'")


class NoValidPosesError(QueryDataError):
    """Raised when none of the requested predefined poses could be resolved."""


class UnresolvedPoseWarning(UserWarning):
    """Warns that a single predefined pose could not be resolved and was skipped."""

    def __init__(self, pose_name):
        self.pose_name = pose_name
        super().__init__(f"Failed to set robot state to named target '{pose_name}'")


def warn_unresolved_pose(pose_name):
    """
    Warns that a predefined pose was skipped, attributing the warning to the caller.

    Every call is reported under the "default" filter action, including repeated calls
    for the same pose from the same line. Filters set to "error", "ignore" or "once"
    still apply.
    """
    frame = sys._getframe(1)
    warnings.warn_explicit(
        UnresolvedPoseWarning(pose_name),
        UnresolvedPoseWarning,
        frame.f_code.co_filename,
        frame.f_lineno,
        module=frame.f_globals.get("__name__"),
        registry={},
    )
