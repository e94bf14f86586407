"""
This example shows how to create benchmark queries for all combinations
of a robot's predefined poses, and how to hand them to a planner.
"""

import os

from pyrobobench.benchmarks.executor import BenchmarkExecutor
from pyrobobench.benchmarks.options import BenchmarkOptions
from pyrobobench.benchmarks.predefined_poses import CombinePredefinedPosesLoader
from pyrobobench.models.panda import load_planning_scene_monitor


if __name__ == "__main__":
    # Load the benchmark options and the robot model
    config_file = os.path.join(
        os.path.dirname(__file__), "config", "panda_predefined_poses.yaml"
    )
    options = BenchmarkOptions.from_yaml(config_file)
    scene_monitor = load_planning_scene_monitor(scene_name=options.scene_name)

    # Set up the benchmark executor with a predefined poses query loader
    executor = BenchmarkExecutor(CombinePredefinedPosesLoader(scene_monitor))

    def solve_fn(request):
        # Replace this with a call to a motion planner.
        start = request.start_state.joint_state.position
        goal = [jc.position for jc in request.goal_constraints[0].joint_constraints]
        print(f"  [{request.pipeline_id}/{request.planner_id}] {start[:7]} -> {goal}")
        return None

    if not executor.run_benchmarks(options, solve_fn):
        raise SystemExit(1)

    print(f"Created {len(executor.benchmark_requests)} benchmark requests:")
    for benchmark_request in executor.benchmark_requests:
        print(f"  {benchmark_request.name}")
