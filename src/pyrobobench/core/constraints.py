""" Utilities for building and checking kinematic constraints. """

import numpy as np

from .messages import Constraints, JointConstraint


def construct_goal_constraints(
    robot_state,
    joint_group,
    tolerance_below=np.finfo(np.float64).eps,
    tolerance_above=np.finfo(np.float64).eps,
):
    """
    Creates goal constraints that require a joint group to reach the configuration of a robot state.

    Parameters
    ----------
        robot_state : `RobotState`
            The robot state holding the goal configuration.
        joint_group : `JointGroup`
            The joint group to constrain.
        tolerance_below : float, optional
            The tolerance below the goal position of each joint variable.
        tolerance_above : float, optional
            The tolerance above the goal position of each joint variable.

    Returns
    -------
        `Constraints`
            Goal constraints with one joint constraint per variable of the group.
    """
    robot_model = robot_state.robot_model
    goal = Constraints()
    for joint_name in joint_group.joint_names:
        variable_names = robot_model.get_joint_variable_names(joint_name)
        values = robot_state.get_joint_positions(joint_name)
        for variable_name, value in zip(variable_names, values):
            goal.joint_constraints.append(
                JointConstraint(
                    joint_name=variable_name,
                    position=float(value),
                    tolerance_above=tolerance_above,
                    tolerance_below=tolerance_below,
                    weight=1.0,
                )
            )
    return goal


def check_joint_constraints(constraints, robot_state):
    """
    Checks whether a robot state satisfies all joint constraints in a constraint set.

    Continuous joints are compared using their shortest angular distance.

    Parameters
    ----------
        constraints : `Constraints`
            The constraints to check.
        robot_state : `RobotState`
            The robot state to check against the constraints.

    Returns
    -------
        bool
            True if every joint constraint is satisfied, otherwise False.
    """
    robot_model = robot_state.robot_model
    positions = dict(zip(robot_model.variable_names, robot_state.positions))

    for joint_constraint in constraints.joint_constraints:
        if joint_constraint.joint_name not in positions:
            raise ValueError(
                f"Constraint refers to unknown joint variable '{joint_constraint.joint_name}'."
            )
        delta = positions[joint_constraint.joint_name] - joint_constraint.position
        if robot_model.has_joint(
            joint_constraint.joint_name
        ) and robot_model.is_continuous_joint(joint_constraint.joint_name):
            delta = (delta + np.pi) % (2.0 * np.pi) - np.pi

        if delta > joint_constraint.tolerance_above:
            return False
        if delta < -joint_constraint.tolerance_below:
            return False

    return True
