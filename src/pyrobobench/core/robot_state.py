""" Mutable robot states and their serialization. """

import copy
import numpy as np

from .messages import JointState, RobotStateMsg


class RobotState:
    """
    Holds a full joint configuration of a robot model.

    The configuration is stored as a Pinocchio configuration vector in `q`
    and is modified in place by the setter methods.
    """

    def __init__(self, robot_model):
        """
        Creates a robot state at the model's default configuration.

        Parameters
        ----------
            robot_model : `RobotModel`
                The robot model this state belongs to.
        """
        self.robot_model = robot_model
        self.q = robot_model.get_default_configuration()

    @property
    def positions(self):
        """The values of all model variables, ordered as in the model's `variable_names`."""
        return self.robot_model.get_variable_positions(self.q)

    def set_to_default_values(self, joint_group=None, name=None):
        """
        Sets the state to a set of default values.

        If no joint group is given, every variable is set to the model's default configuration.
        Otherwise, the variables of the group's named default state are set, and all other
        variables are left untouched.

        Parameters
        ----------
            joint_group : `JointGroup` or str, optional
                The joint group, or its name, whose default state to apply.
            name : str, optional
                The name of the default state.

        Returns
        -------
            bool
                True if the state was set, or False if the group or named state does not exist.
        """
        if joint_group is None:
            self.q[:] = self.robot_model.get_default_configuration()
            return True

        if isinstance(joint_group, str):
            joint_group = self.robot_model.get_joint_group(joint_group)
            if joint_group is None:
                return False

        values = joint_group.get_default_state(name)
        if values is None:
            return False
        for joint_name, joint_values in values.items():
            self.set_joint_positions(joint_name, joint_values)
        return True

    def get_joint_positions(self, joint_name):
        return self.robot_model.get_joint_values(self.q, joint_name)

    def set_joint_positions(self, joint_name, values):
        self.robot_model.set_joint_values(self.q, joint_name, values)

    def get_group_positions(self, joint_group):
        """
        Gets the variable values of all joints in a group.

        Parameters
        ----------
            joint_group : `JointGroup`
                The joint group.

        Returns
        -------
            array-like
                The variable values of the group's joints, in group order.
        """
        if not joint_group.joint_names:
            return np.array([])
        return np.concatenate(
            [
                self.get_joint_positions(joint_name)
                for joint_name in joint_group.joint_names
            ]
        )

    def copy(self):
        new_state = copy.copy(self)
        new_state.q = np.array(self.q)
        return new_state


def robot_state_to_msg(robot_state):
    """
    Serializes a robot state.

    The resulting message holds copies of the state's values, so later changes
    to the state do not affect it.

    Parameters
    ----------
        robot_state : `RobotState`
            The robot state to serialize.

    Returns
    -------
        `RobotStateMsg`
            The serialized robot state, containing every variable of the model.
    """
    joint_state = JointState(
        name=list(robot_state.robot_model.variable_names),
        position=[float(value) for value in robot_state.positions],
    )
    return RobotStateMsg(joint_state=joint_state, is_diff=False)
