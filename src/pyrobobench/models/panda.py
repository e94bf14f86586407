"""Utilities to load example Franka Emika Panda model."""

import os

from ..core.planning_scene import PlanningSceneMonitor
from ..core.robot_model import load_robot_model as load_robot_model_from_files
from .utils import get_example_models_folder


def get_description_filenames():
    """
    Gets the paths to the example Panda robot description files.

    Returns
    -------
        tuple[str]
            A 2-tuple containing the URDF and SRDF file paths.
    """
    package_dir = os.path.join(get_example_models_folder(), "panda_description")
    return (
        os.path.join(package_dir, "urdf", "panda.urdf"),
        os.path.join(package_dir, "srdf", "panda.srdf"),
    )


def load_robot_model():
    """
    Gets the example Panda robot model.

    The model has the joint groups `panda_arm`, `hand`, and `panda_arm_hand`.
    The `panda_arm` group defines the states `ready`, `home`, `extended`, and `transport`,
    and the `hand` group defines the states `open` and `close`.

    Returns
    -------
        `RobotModel`
            The Panda robot model.
    """
    urdf_filename, srdf_filename = get_description_filenames()
    return load_robot_model_from_files(urdf_filename, srdf_filename)


def load_planning_scene_monitor(scene_name="panda_empty"):
    """
    Gets a planning scene monitor for the example Panda robot model.

    Parameters
    ----------
        scene_name : str, optional
            The name of the planning scene.

    Returns
    -------
        `PlanningSceneMonitor`
            The planning scene monitor.
    """
    urdf_filename, srdf_filename = get_description_filenames()
    return PlanningSceneMonitor.from_robot_description(
        urdf_filename, srdf_filename, scene_name=scene_name
    )
