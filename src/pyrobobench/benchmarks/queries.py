""" Benchmark query records and the interface for loading them. """

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from ..core.messages import (
    Constraints,
    MotionPlanRequest,
    PlanningSceneMsg,
    RobotStateMsg,
)


@dataclass
class StartState:
    """A named robot state that planning queries may start from."""

    name: str
    state: RobotStateMsg


@dataclass
class GoalConstraints:
    """Named goal constraints that planning queries may end at."""

    name: str
    constraints: List[Constraints] = field(default_factory=list)


@dataclass
class PathConstraints:
    """Named constraints that must hold along a planned path."""

    name: str
    constraints: List[Constraints] = field(default_factory=list)


@dataclass
class TrajectoryConstraints:
    """Named constraints on the waypoints of a planned trajectory."""

    name: str
    constraints: List[Constraints] = field(default_factory=list)


@dataclass
class BenchmarkRequest:
    """A named motion planning request to benchmark."""

    name: str
    request: MotionPlanRequest = field(default_factory=MotionPlanRequest)


@dataclass
class BenchmarkQueryData:
    """
    All query data that a benchmark executor runs planners against.

    An executor may reuse the same instance across loads, so loaders
    overwrite every field they are responsible for.
    """

    scene: Optional[PlanningSceneMsg] = None
    start_states: List[StartState] = field(default_factory=list)
    path_constraints: List[PathConstraints] = field(default_factory=list)
    goal_constraints: List[GoalConstraints] = field(default_factory=list)
    traj_constraints: List[TrajectoryConstraints] = field(default_factory=list)
    queries: List[BenchmarkRequest] = field(default_factory=list)

    def clear(self):
        self.scene = None
        self.start_states.clear()
        self.path_constraints.clear()
        self.goal_constraints.clear()
        self.traj_constraints.clear()
        self.queries.clear()


class QueryDataLoader(ABC):
    """Loads the query data for a benchmark run."""

    @abstractmethod
    def load_benchmark_query_data(self, options, query_data):
        """
        Fills in the query data for a benchmark run.

        Parameters
        ----------
            options : `BenchmarkOptions`
                The benchmark options.
            query_data : `BenchmarkQueryData`
                The query data to fill in, modified in place.

        Raises
        ------
            `QueryDataError`
                If the query data could not be loaded.
        """
