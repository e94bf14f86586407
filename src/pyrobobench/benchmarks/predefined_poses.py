""" Benchmark queries that combine the predefined poses of a joint group.

Every predefined pose, or named group state, becomes both a start state and a goal,
so that an executor can plan between all combinations of them.
"""

import warnings

from ..core.constraints import construct_goal_constraints
from ..core.robot_state import RobotState, robot_state_to_msg

from .errors import (
    ModelUnavailableError,
    NoValidPosesError,
    UnknownJointGroupError,
    warn_unresolved_pose,
)
from .queries import GoalConstraints, QueryDataLoader, StartState


def build_predefined_pose_queries(
    robot_model, group_name, pose_names, default_group_name=""
):
    """
    Creates start states and goal constraints from the predefined poses of a joint group.

    Poses that are not defined for the group are skipped with an `UnresolvedPoseWarning`.
    Repeated pose names produce repeated records.

    Parameters
    ----------
        robot_model : `RobotModel`
            The robot model defining the joint group and its poses.
        group_name : str
            The name of the joint group. If empty, `default_group_name` is used instead.
        pose_names : list[str]
            The names of the predefined poses, in the order the records are created.
        default_group_name : str, optional
            The fallback joint group name.

    Returns
    -------
        tuple[list]
            A 2-tuple of the `StartState` and `GoalConstraints` records,
            where the i-th records of both lists come from the same pose.

    Raises
    ------
        `ModelUnavailableError`
            If there is no robot model.
        `UnknownJointGroupError`
            If the joint group does not exist in the robot model.
        `NoValidPosesError`
            If none of the poses could be resolved.
    """
    if robot_model is None:
        raise ModelUnavailableError("Failed to load robot model")

    if not group_name:
        warnings.warn(
            "Predefined poses group is not set, using default planning group "
            f"'{default_group_name}' instead."
        )
        group_name = default_group_name
    joint_group = robot_model.get_joint_group(group_name) if group_name else None
    if joint_group is None:
        raise UnknownJointGroupError(group_name)

    # The same state is reused for all poses; records copy its values.
    robot_state = RobotState(robot_model)
    start_states = []
    goal_constraints = []
    for pose_name in pose_names:
        if not robot_state.set_to_default_values(joint_group, pose_name):
            warn_unresolved_pose(pose_name)
            continue

        start_states.append(
            StartState(name=pose_name, state=robot_state_to_msg(robot_state))
        )
        goal_constraints.append(
            GoalConstraints(
                name=pose_name,
                constraints=[construct_goal_constraints(robot_state, joint_group)],
            )
        )

    if not start_states or not goal_constraints:
        raise NoValidPosesError(
            "Failed to init start and goal states from predefined poses"
        )
    return start_states, goal_constraints


class CombinePredefinedPosesLoader(QueryDataLoader):
    """
    Loads benchmark queries for all combinations of a joint group's predefined poses.

    Path constraints, trajectory constraints, and custom queries are not used,
    so they are always left empty.
    """

    def __init__(self, scene_monitor):
        """
        Creates a predefined poses query loader.

        Parameters
        ----------
            scene_monitor : `PlanningSceneMonitor`
                Provides the robot model and planning scene.
        """
        self.scene_monitor = scene_monitor

    def load_benchmark_query_data(self, options, query_data):
        query_data.clear()

        scene_msg = self.scene_monitor.new_planning_scene_message()
        if scene_msg is None:
            raise ModelUnavailableError("Failed to load planning scene")

        robot_model = self.scene_monitor.get_robot_model()
        if robot_model is None:
            raise ModelUnavailableError("Failed to load robot model")

        start_states, goal_constraints = build_predefined_pose_queries(
            robot_model,
            options.predefined_poses_group,
            options.predefined_poses,
            default_group_name=options.group_name,
        )

        query_data.scene = scene_msg
        query_data.start_states.extend(start_states)
        query_data.goal_constraints.extend(goal_constraints)
        query_data.path_constraints.clear()
        query_data.traj_constraints.clear()
        query_data.queries.clear()
