""" Plain records exchanged between query loaders, executors, and planners. """

from dataclasses import dataclass, field
from typing import List


@dataclass
class JointState:
    """Names and positions of a set of joint variables."""

    name: List[str] = field(default_factory=list)
    position: List[float] = field(default_factory=list)


@dataclass
class RobotStateMsg:
    """Serialized robot state."""

    joint_state: JointState = field(default_factory=JointState)

    is_diff: bool = False
    """If True, the state only contains changes relative to another state."""


@dataclass
class JointConstraint:
    """Constrains a single joint variable to lie within a tolerance band around a position."""

    joint_name: str
    position: float
    tolerance_above: float
    tolerance_below: float
    weight: float = 1.0


@dataclass
class Constraints:
    """A named set of kinematic constraints."""

    name: str = ""
    joint_constraints: List[JointConstraint] = field(default_factory=list)


@dataclass
class PlanningSceneMsg:
    """Serialized planning scene."""

    name: str = ""
    robot_model_name: str = ""
    robot_state: RobotStateMsg = field(default_factory=RobotStateMsg)
    is_diff: bool = False


@dataclass
class MotionPlanRequest:
    """A single motion planning problem, as handed to a planner."""

    group_name: str = ""
    start_state: RobotStateMsg = field(default_factory=RobotStateMsg)
    goal_constraints: List[Constraints] = field(default_factory=list)
    path_constraints: Constraints = field(default_factory=Constraints)
    trajectory_constraints: List[Constraints] = field(default_factory=list)
    pipeline_id: str = ""
    planner_id: str = ""
    num_planning_attempts: int = 1
    allowed_planning_time: float = 10.0
