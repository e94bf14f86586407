from .messages import PlanningSceneMsg
from .robot_model import load_robot_model
from .robot_state import RobotState, robot_state_to_msg


class PlanningScene:

    def __init__(self, robot_model, name=""):
        """
        Creates a planning scene instance given a robot model.
        """
        self.robot_model = robot_model
        self.name = name
        self.current_state = RobotState(robot_model)

    def get_planning_scene_msg(self):
        return PlanningSceneMsg(
            name=self.name,
            robot_model_name=self.robot_model.name,
            robot_state=robot_state_to_msg(self.current_state),
            is_diff=False,
        )


class PlanningSceneMonitor:
    """
    Provides the robot model and planning scene that benchmarks run against.

    A monitor without a robot model has no planning scene either.
    """

    def __init__(self, robot_model=None, scene_name=""):
        """
        Creates a planning scene monitor.

        Parameters
        ----------
            robot_model : `RobotModel`, optional
                The robot model to monitor. If None, the monitor provides neither a model nor a scene.
            scene_name : str, optional
                The name of the monitored planning scene.
        """
        self.robot_model = robot_model
        self.scene = None
        if robot_model is not None:
            self.scene = PlanningScene(robot_model, name=scene_name)

    @classmethod
    def from_robot_description(cls, urdf_filename, srdf_filename=None, scene_name=""):
        """
        Creates a planning scene monitor from a robot description on disk.

        Parameters
        ----------
            urdf_filename : str
                Path to the URDF file describing the robot kinematics.
            srdf_filename : str, optional
                Path to the SRDF file describing the joint groups and group states.
            scene_name : str, optional
                The name of the monitored planning scene.

        Returns
        -------
            `PlanningSceneMonitor`
                The planning scene monitor.
        """
        robot_model = load_robot_model(urdf_filename, srdf_filename)
        return cls(robot_model, scene_name=scene_name)

    def get_robot_model(self):
        return self.robot_model

    def get_planning_scene(self):
        return self.scene

    def new_planning_scene_message(self):
        """
        Serializes the current planning scene.

        Returns
        -------
            `PlanningSceneMsg` or None
                The serialized planning scene, or None if there is no scene to serialize.
        """
        if self.scene is None:
            return None
        return self.scene.get_planning_scene_msg()
