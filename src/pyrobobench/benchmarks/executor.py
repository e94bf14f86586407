""" Utilities for executing motion planning benchmarks. """

import copy
from itertools import product

from ..core.messages import MotionPlanRequest

from .errors import QueryDataError
from .queries import BenchmarkQueryData, BenchmarkRequest


class BenchmarkExecutor:
    """
    Runs motion planning benchmarks over the queries provided by a query data loader.

    The executor turns every pairing of a goal and a start state into a benchmark request,
    then hands each request to an external solve function for every planner and run.
    Planning and scoring themselves are left to that function.
    """

    def __init__(self, query_loader):
        """
        Creates a benchmark executor.

        Parameters
        ----------
            query_loader : `QueryDataLoader`
                Loads the query data to benchmark.
        """
        self.query_loader = query_loader
        self.query_data = BenchmarkQueryData()
        self.reset()

    def reset(self):
        """Resets all the benchmark data structures."""
        self.benchmark_requests = []
        self.results = []

    def initialize_benchmarks(self, options):
        """
        Loads the query data and creates all benchmark requests.

        Parameters
        ----------
            options : `BenchmarkOptions`
                The benchmark options.

        Returns
        -------
            list[`BenchmarkRequest`]
                One request per combination of goal and start state, named `<goal>_<start>`.

        Raises
        ------
            `QueryDataError`
                If the query data could not be loaded.
        """
        self.reset()
        self.query_loader.load_benchmark_query_data(options, self.query_data)

        requests = []
        for goal, start in product(
            self.query_data.goal_constraints, self.query_data.start_states
        ):
            request = MotionPlanRequest(
                group_name=options.group_name,
                start_state=copy.deepcopy(start.state),
                goal_constraints=copy.deepcopy(goal.constraints),
                num_planning_attempts=1,
                allowed_planning_time=options.timeout,
            )
            requests.append(
                BenchmarkRequest(name=f"{goal.name}_{start.name}", request=request)
            )

        # Custom queries are benchmarked as they are.
        requests.extend(copy.deepcopy(self.query_data.queries))

        self.benchmark_requests = requests
        return requests

    def run_benchmarks(self, options, solve_fn=None):
        """
        Runs the benchmarks described by a set of options.

        Parameters
        ----------
            options : `BenchmarkOptions`
                The benchmark options.
            solve_fn : callable, optional
                A function that takes a `MotionPlanRequest` and returns a planning result.
                It is called once per request, pipeline, planner, and run.
                If not specified, the requests are only created.

        Returns
        -------
            bool
                True if the benchmarks were run, or False if they could not be initialized.
        """
        try:
            requests = self.initialize_benchmarks(options)
        except QueryDataError as exc:
            print(f"Failed to initialize benchmark: {exc}")
            return False

        if solve_fn is None:
            return True

        for benchmark_request in requests:
            for pipeline_id, planner_ids in options.planning_pipelines.items():
                for planner_id in planner_ids:
                    request = copy.deepcopy(benchmark_request.request)
                    request.pipeline_id = pipeline_id
                    request.planner_id = planner_id
                    for run in range(options.runs):
                        result = solve_fn(request)
                        self.results.append(
                            (
                                benchmark_request.name,
                                pipeline_id,
                                planner_id,
                                run,
                                result,
                            )
                        )
        return True
