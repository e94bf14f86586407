""" Robot models with joint groups and named group states. """

import numpy as np
import pinocchio
import warnings
from lxml import etree


class JointGroup:
    """
    A named subset of a robot's joints that is treated as one planning unit.

    Joint groups and their named default configurations, or group states,
    are typically defined in a robot's SRDF file.
    """

    def __init__(self, name, joint_names, default_states=None):
        """
        Creates a joint group.

        Parameters
        ----------
            name : str
                The name of the joint group.
            joint_names : list[str]
                The names of the movable joints in the group, in model order.
            default_states : dict[str, dict[str, array-like]], optional
                Named default configurations of the group.
                Each entry maps a joint name to the values of that joint's variables.
        """
        self.name = name
        self.joint_names = tuple(joint_names)
        self.default_states = {} if default_states is None else default_states

    @property
    def default_state_names(self):
        """The names of all default states defined for this group."""
        return list(self.default_states.keys())

    def has_joint(self, joint_name):
        return joint_name in self.joint_names

    def has_default_state(self, name):
        return name in self.default_states

    def get_default_state(self, name):
        """
        Gets a named default configuration of this group.

        Parameters
        ----------
            name : str
                The name of the default state.

        Returns
        -------
            dict[str, array-like] or None
                A mapping of joint names to joint variable values, or None if the state does not exist.
        """
        return self.default_states.get(name)

    def __repr__(self):
        return f"JointGroup(name={self.name!r}, joints={list(self.joint_names)})"


class RobotModel:
    """
    Describes the kinematic structure of a robot, along with its joint groups.

    The kinematics are represented by a Pinocchio model. On top of that, this class
    exposes every joint in terms of its variables, which is one angle per revolute or
    continuous joint and one position per prismatic joint.
    Note that Pinocchio stores continuous joints as a (cos, sin) pair in its configuration vector.
    """

    def __init__(self, model, joint_groups=None, name=None):
        """
        Creates a robot model.

        Parameters
        ----------
            model : `pinocchio.Model`
                The kinematic model of the robot.
            joint_groups : dict[str, `JointGroup`], optional
                The joint groups of the robot, keyed by name.
            name : str, optional
                The name of the robot. If not specified, uses the name of the Pinocchio model.
        """
        self.model = model
        self.name = model.name if name is None else name
        self.joint_groups = {} if joint_groups is None else joint_groups

        self.joint_names = [model.names[joint_id] for joint_id in range(1, model.njoints)]
        self.variable_names = []
        for joint_name in self.joint_names:
            self.variable_names.extend(self.get_joint_variable_names(joint_name))

    @classmethod
    def from_xml(cls, urdf_xml, srdf_xml=None):
        """
        Creates a robot model from URDF and SRDF strings.

        Parameters
        ----------
            urdf_xml : str
                The contents of the URDF describing the robot kinematics.
            srdf_xml : str, optional
                The contents of the SRDF describing the joint groups and group states.
                If not specified, the model has no joint groups.

        Returns
        -------
            `RobotModel`
                The resulting robot model.
        """
        robot_model = cls(pinocchio.buildModelFromXML(urdf_xml))
        if srdf_xml is not None:
            urdf_root = etree.fromstring(_to_bytes(urdf_xml))
            srdf_root = etree.fromstring(_to_bytes(srdf_xml))
            robot_model.joint_groups = _parse_joint_groups(
                robot_model, urdf_root, srdf_root
            )
        return robot_model

    @property
    def joint_group_names(self):
        return list(self.joint_groups.keys())

    def has_joint_group(self, name):
        return name in self.joint_groups

    def get_joint_group(self, name):
        """
        Gets a joint group by name.

        Parameters
        ----------
            name : str
                The name of the joint group.

        Returns
        -------
            `JointGroup` or None
                The joint group, or None if the model has no group with that name.
        """
        return self.joint_groups.get(name)

    def has_joint(self, joint_name):
        return joint_name in self.joint_names

    def get_joint_id(self, joint_name):
        if not self.has_joint(joint_name):
            raise ValueError(f"Robot model has no joint named '{joint_name}'.")
        return self.model.getJointId(joint_name)

    def is_continuous_joint(self, joint_name):
        joint_id = self.get_joint_id(joint_name)
        return self.model.nqs[joint_id] == 2 and self.model.nvs[joint_id] == 1

    def get_joint_variable_count(self, joint_name):
        if self.is_continuous_joint(joint_name):
            return 1
        return self.model.nqs[self.get_joint_id(joint_name)]

    def get_joint_variable_names(self, joint_name):
        """
        Gets the names of a joint's variables.

        Single-variable joints have one variable named after the joint itself.
        Multi-variable joints, such as floating joints, have one variable per
        configuration entry, named `<joint_name>/<index>`.

        Parameters
        ----------
            joint_name : str
                The name of the joint.

        Returns
        -------
            list[str]
                The names of the joint's variables.
        """
        num_variables = self.get_joint_variable_count(joint_name)
        if num_variables == 1:
            return [joint_name]
        return [f"{joint_name}/{idx}" for idx in range(num_variables)]

    def get_variable_bounds(self, joint_name):
        """
        Gets the position bounds of a joint's variables.

        Parameters
        ----------
            joint_name : str
                The name of the joint.

        Returns
        -------
            tuple[array-like]
                A 2-tuple of the lower and upper bounds of each joint variable.
        """
        if self.is_continuous_joint(joint_name):
            return np.array([-np.pi]), np.array([np.pi])
        joint_id = self.get_joint_id(joint_name)
        idx_q = self.model.idx_qs[joint_id]
        nq = self.model.nqs[joint_id]
        return (
            np.array(self.model.lowerPositionLimit[idx_q : idx_q + nq]),
            np.array(self.model.upperPositionLimit[idx_q : idx_q + nq]),
        )

    def get_joint_values(self, q, joint_name):
        """
        Extracts the variable values of a single joint from a configuration vector.

        Parameters
        ----------
            q : array-like
                The joint configuration of the model.
            joint_name : str
                The name of the joint.

        Returns
        -------
            array-like
                The values of the joint's variables.
        """
        joint_id = self.get_joint_id(joint_name)
        idx_q = self.model.idx_qs[joint_id]
        if self.is_continuous_joint(joint_name):
            return np.array([np.arctan2(q[idx_q + 1], q[idx_q])])
        return np.array(q[idx_q : idx_q + self.model.nqs[joint_id]])

    def set_joint_values(self, q, joint_name, values):
        """
        Writes the variable values of a single joint into a configuration vector, in place.

        Parameters
        ----------
            q : array-like
                The joint configuration of the model to modify.
            joint_name : str
                The name of the joint.
            values : float or array-like
                The values of the joint's variables.
        """
        values = np.atleast_1d(np.asarray(values, dtype=np.float64))
        num_variables = self.get_joint_variable_count(joint_name)
        if len(values) != num_variables:
            raise ValueError(
                f"Joint '{joint_name}' has {num_variables} variable(s), but {len(values)} value(s) were given."
            )

        joint_id = self.get_joint_id(joint_name)
        idx_q = self.model.idx_qs[joint_id]
        if self.is_continuous_joint(joint_name):
            q[idx_q] = np.cos(values[0])
            q[idx_q + 1] = np.sin(values[0])
        else:
            q[idx_q : idx_q + len(values)] = values

    def get_variable_positions(self, q):
        """
        Converts a configuration vector to the values of all model variables.

        Parameters
        ----------
            q : array-like
                The joint configuration of the model.

        Returns
        -------
            array-like
                The variable values, ordered as in `variable_names`.
        """
        if not self.joint_names:
            return np.array([])
        return np.concatenate(
            [self.get_joint_values(q, joint_name) for joint_name in self.joint_names]
        )

    def get_default_configuration(self):
        """
        Gets the default joint configuration of the model.

        Every variable is set to zero, unless zero lies outside its bounds,
        in which case it is set to the middle of its bounds.

        Returns
        -------
            array-like
                The default joint configuration.
        """
        q = pinocchio.neutral(self.model)
        for joint_name in self.joint_names:
            if self.is_continuous_joint(joint_name):
                continue
            lower, upper = self.get_variable_bounds(joint_name)
            values = self.get_joint_values(q, joint_name)
            for idx in range(len(values)):
                if not (np.isfinite(lower[idx]) and np.isfinite(upper[idx])):
                    continue
                if values[idx] < lower[idx] or values[idx] > upper[idx]:
                    values[idx] = 0.5 * (lower[idx] + upper[idx])
            self.set_joint_values(q, joint_name, values)
        return q

    def __repr__(self):
        return f"RobotModel(name={self.name!r}, groups={self.joint_group_names})"


def load_robot_model(urdf_filename, srdf_filename=None):
    """
    Loads a robot model from URDF and SRDF files.

    Parameters
    ----------
        urdf_filename : str
            Path to the URDF file describing the robot kinematics.
        srdf_filename : str, optional
            Path to the SRDF file describing the joint groups and group states.

    Returns
    -------
        `RobotModel`
            The resulting robot model.
    """
    with open(urdf_filename, "rb") as f:
        urdf_xml = f.read().decode("utf-8")
    srdf_xml = None
    if srdf_filename is not None:
        with open(srdf_filename, "rb") as f:
            srdf_xml = f.read().decode("utf-8")
    return RobotModel.from_xml(urdf_xml, srdf_xml)


def _to_bytes(xml):
    # lxml rejects str input that carries an encoding declaration.
    if isinstance(xml, str):
        return xml.encode("utf-8")
    return xml


def _get_urdf_topology(urdf_root):
    """Returns a mapping of each child link name to its (joint name, parent link name)."""
    child_to_joint = {}
    for joint in urdf_root.findall("joint"):
        parent = joint.find("parent")
        child = joint.find("child")
        if parent is None or child is None:
            continue
        child_to_joint[child.get("link")] = (joint.get("name"), parent.get("link"))
    return child_to_joint


def _get_chain_joints(base_link, tip_link, child_to_joint):
    joint_names = []
    link = tip_link
    while link != base_link:
        if link not in child_to_joint:
            raise ValueError(
                f"Links '{base_link}' and '{tip_link}' do not form a kinematic chain."
            )
        joint_name, link = child_to_joint[link]
        joint_names.append(joint_name)
    return joint_names[::-1]


def _resolve_group_joints(group_name, group_elements, child_to_joint, visiting=()):
    if group_name not in group_elements:
        raise ValueError(f"SRDF refers to undefined joint group '{group_name}'.")
    if group_name in visiting:
        raise ValueError(f"Joint group '{group_name}' contains itself.")

    joint_names = []
    for element in group_elements[group_name]:
        if element.tag == "joint":
            joint_names.append(element.get("name"))
        elif element.tag == "link":
            link_name = element.get("name")
            if link_name in child_to_joint:
                joint_names.append(child_to_joint[link_name][0])
        elif element.tag == "chain":
            joint_names.extend(
                _get_chain_joints(
                    element.get("base_link"), element.get("tip_link"), child_to_joint
                )
            )
        elif element.tag == "group":
            joint_names.extend(
                _resolve_group_joints(
                    element.get("name"),
                    group_elements,
                    child_to_joint,
                    visiting + (group_name,),
                )
            )
    return joint_names


def _parse_joint_groups(robot_model, urdf_root, srdf_root):
    """
    Parses the joint groups and group states of an SRDF.

    Parameters
    ----------
        robot_model : `RobotModel`
            The robot model the SRDF refers to.
        urdf_root : `lxml.etree._Element`
            The root element of the robot's URDF.
        srdf_root : `lxml.etree._Element`
            The root element of the robot's SRDF.

    Returns
    -------
        dict[str, `JointGroup`]
            The joint groups, keyed by name, in the order they are defined in the SRDF.
    """
    child_to_joint = _get_urdf_topology(urdf_root)
    urdf_joint_names = {joint_name for joint_name, _ in child_to_joint.values()}
    group_elements = {group.get("name"): group for group in srdf_root.findall("group")}

    joint_groups = {}
    for group_name in group_elements:
        joint_names = []
        for joint_name in _resolve_group_joints(
            group_name, group_elements, child_to_joint
        ):
            if robot_model.has_joint(joint_name):
                if joint_name not in joint_names:
                    joint_names.append(joint_name)
            elif joint_name not in urdf_joint_names:
                raise ValueError(
                    f"Joint group '{group_name}' refers to unknown joint '{joint_name}'."
                )
            # Fixed joints have no variables, so they are left out of the group.

        joint_names.sort(key=robot_model.get_joint_id)
        joint_groups[group_name] = JointGroup(group_name, joint_names)

    for group_state in srdf_root.findall("group_state"):
        state_name = group_state.get("name")
        group = joint_groups.get(group_state.get("group"))
        if group is None:
            warnings.warn(
                f"Group state '{state_name}' refers to unknown joint group '{group_state.get('group')}'."
            )
            continue

        values = {}
        for joint in group_state.findall("joint"):
            joint_name = joint.get("name")
            if not group.has_joint(joint_name):
                warnings.warn(
                    f"Group state '{state_name}' specifies a value for joint '{joint_name}', "
                    f"which is not a movable joint of group '{group.name}'."
                )
                continue
            joint_values = np.array(
                [float(value) for value in joint.get("value", "").split()]
            )
            num_variables = robot_model.get_joint_variable_count(joint_name)
            if len(joint_values) != num_variables:
                raise ValueError(
                    f"Group state '{state_name}' specifies {len(joint_values)} value(s) "
                    f"for joint '{joint_name}', which has {num_variables} variable(s)."
                )
            values[joint_name] = joint_values
        group.default_states[state_name] = values

    return joint_groups
