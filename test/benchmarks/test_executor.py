import pytest

from pyrobobench.benchmarks.errors import ModelUnavailableError
from pyrobobench.benchmarks.executor import BenchmarkExecutor
from pyrobobench.benchmarks.options import BenchmarkOptions
from pyrobobench.benchmarks.predefined_poses import CombinePredefinedPosesLoader
from pyrobobench.benchmarks.queries import BenchmarkRequest, QueryDataLoader
from pyrobobench.core.constraints import check_joint_constraints
from pyrobobench.core.messages import MotionPlanRequest
from pyrobobench.core.planning_scene import PlanningSceneMonitor
from pyrobobench.core.robot_state import RobotState
from pyrobobench.models.panda import load_planning_scene_monitor


class CustomQueriesLoader(QueryDataLoader):
    def __init__(self, queries):
        self.queries = queries

    def load_benchmark_query_data(self, options, query_data):
        query_data.clear()
        query_data.queries.extend(self.queries)


def test_initialize_benchmarks():
    options = BenchmarkOptions(
        group_name="panda_arm",
        predefined_poses_group="panda_arm",
        predefined_poses=["ready", "home", "extended"],
        timeout=1.5,
    )
    executor = BenchmarkExecutor(
        CombinePredefinedPosesLoader(load_planning_scene_monitor())
    )

    requests = executor.initialize_benchmarks(options)

    assert len(requests) == 9
    assert [r.name for r in requests[:3]] == [
        "ready_ready",
        "ready_home",
        "ready_extended",
    ]
    assert requests[-1].name == "extended_extended"
    assert executor.benchmark_requests == requests

    for benchmark_request in requests:
        request = benchmark_request.request
        assert request.group_name == "panda_arm"
        assert request.allowed_planning_time == 1.5
        assert request.num_planning_attempts == 1
        assert len(request.goal_constraints) == 1
        assert request.path_constraints.joint_constraints == []
        assert request.trajectory_constraints == []


def test_requests_pair_start_states_with_goals():
    options = BenchmarkOptions(
        group_name="panda_arm",
        predefined_poses_group="panda_arm",
        predefined_poses=["ready", "transport"],
    )
    monitor = load_planning_scene_monitor()
    executor = BenchmarkExecutor(CombinePredefinedPosesLoader(monitor))
    requests = {r.name: r.request for r in executor.initialize_benchmarks(options)}

    state = RobotState(monitor.get_robot_model())
    state.set_to_default_values("panda_arm", "transport")
    assert check_joint_constraints(
        requests["transport_ready"].goal_constraints[0], state
    )
    assert not check_joint_constraints(
        requests["ready_transport"].goal_constraints[0], state
    )

    start_positions = requests["ready_transport"].start_state.joint_state.position
    assert start_positions == pytest.approx([float(value) for value in state.positions])


def test_run_benchmarks():
    options = BenchmarkOptions(
        group_name="panda_arm",
        predefined_poses=["ready", "home"],
        predefined_poses_group="panda_arm",
        runs=2,
        planning_pipelines={"ompl": ["RRTConnect", "PRM"], "stomp": ["STOMP"]},
    )
    executor = BenchmarkExecutor(
        CombinePredefinedPosesLoader(load_planning_scene_monitor())
    )

    solved_requests = []

    def solve_fn(request):
        solved_requests.append(request)
        return len(solved_requests)

    assert executor.run_benchmarks(options, solve_fn)

    # 4 start and goal combinations, 3 planners, and 2 runs.
    assert len(solved_requests) == 24
    assert len(executor.results) == 24
    assert executor.results[0] == ("ready_ready", "ompl", "RRTConnect", 0, 1)
    assert executor.results[1] == ("ready_ready", "ompl", "RRTConnect", 1, 2)
    assert executor.results[2][:4] == ("ready_ready", "ompl", "PRM", 0)
    assert executor.results[-1][:4] == ("home_home", "stomp", "STOMP", 1)
    assert {(r.pipeline_id, r.planner_id) for r in solved_requests} == {
        ("ompl", "RRTConnect"),
        ("ompl", "PRM"),
        ("stomp", "STOMP"),
    }

    # The stored requests are not modified by running them.
    assert all(r.request.planner_id == "" for r in executor.benchmark_requests)


def test_run_benchmarks_without_solver():
    options = BenchmarkOptions(
        group_name="panda_arm",
        predefined_poses=["ready"],
        predefined_poses_group="panda_arm",
        planning_pipelines={"ompl": ["RRTConnect"]},
    )
    executor = BenchmarkExecutor(
        CombinePredefinedPosesLoader(load_planning_scene_monitor())
    )

    assert executor.run_benchmarks(options)
    assert [r.name for r in executor.benchmark_requests] == ["ready_ready"]
    assert executor.results == []


def test_run_benchmarks_failure(capsys):
    options = BenchmarkOptions(group_name="panda_arm", predefined_poses=["ready"])
    executor = BenchmarkExecutor(CombinePredefinedPosesLoader(PlanningSceneMonitor()))

    def solve_fn(request):
        raise AssertionError("No request should be solved.")

    assert not executor.run_benchmarks(options, solve_fn)
    assert "Failed to initialize benchmark: Failed to load planning scene" in (
        capsys.readouterr().out
    )
    assert executor.benchmark_requests == []

    with pytest.raises(ModelUnavailableError):
        executor.initialize_benchmarks(options)


def test_custom_queries():
    custom_query = BenchmarkRequest(
        name="custom", request=MotionPlanRequest(group_name="panda_arm")
    )
    options = BenchmarkOptions(group_name="panda_arm")
    executor = BenchmarkExecutor(CustomQueriesLoader([custom_query]))

    requests = executor.initialize_benchmarks(options)
    assert requests == [custom_query]
    assert requests[0] is not custom_query
