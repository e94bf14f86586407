""" Options for configuring benchmark runs. """

import yaml


class BenchmarkOptions:
    """Options for running a motion planning benchmark."""

    def __init__(
        self,
        group_name,
        benchmark_name="",
        predefined_poses_group="",
        predefined_poses=None,
        runs=10,
        timeout=10.0,
        output_directory="",
        scene_name="",
        planning_pipelines=None,
    ):
        """
        Initializes a set of benchmark options.

        Parameters
        ----------
            group_name : str
                The joint group to plan for.
            benchmark_name : str
                The name of the benchmark.
            predefined_poses_group : str
                The joint group whose named states are used as predefined poses.
                If empty, `group_name` is used instead.
            predefined_poses : list[str]
                The names of the predefined poses to combine into start and goal states.
            runs : int
                The number of times each planner is run on each query.
            timeout : float
                The allowed planning time, in seconds, for each query.
            output_directory : str
                The directory that benchmark results are written to by the executor.
            scene_name : str
                The name of the planning scene to benchmark in.
            planning_pipelines : dict[str, list[str]]
                The planner IDs to benchmark, keyed by planning pipeline name.
        """
        if runs < 1:
            raise ValueError("The number of runs must be at least 1.")
        if timeout <= 0.0:
            raise ValueError("The planning timeout must be positive.")
        if isinstance(predefined_poses, str):
            raise ValueError(
                f"Predefined poses must be a list of pose names, got '{predefined_poses}'."
            )

        self.group_name = group_name
        self.benchmark_name = benchmark_name
        self.predefined_poses_group = predefined_poses_group
        self.predefined_poses = [] if predefined_poses is None else list(predefined_poses)
        self.runs = runs
        self.timeout = timeout
        self.output_directory = output_directory
        self.scene_name = scene_name
        self.planning_pipelines = (
            {} if planning_pipelines is None else dict(planning_pipelines)
        )

    @classmethod
    def from_dict(cls, config):
        """
        Creates benchmark options from a configuration dictionary.

        The dictionary follows the layout of MoveIt benchmark configuration files,
        with all options under a top-level `benchmark_config` key.

        Parameters
        ----------
            config : dict
                The benchmark configuration.

        Returns
        -------
            `BenchmarkOptions`
                The resulting benchmark options.
        """
        if not config or "benchmark_config" not in config:
            raise ValueError("Benchmark configuration has no 'benchmark_config' entry.")
        benchmark_config = config["benchmark_config"] or {}

        parameters = benchmark_config.get("parameters")
        if not parameters:
            raise ValueError("Benchmark configuration has no 'parameters' entry.")
        if not parameters.get("group"):
            raise ValueError("Benchmark configuration does not specify a 'group'.")

        warehouse = benchmark_config.get("warehouse") or {}

        planning_pipelines = {}
        pipelines_config = benchmark_config.get("planning_pipelines") or {}
        for pipeline in pipelines_config.get("pipelines") or []:
            pipeline_config = pipelines_config.get(pipeline) or {}
            pipeline_name = pipeline_config.get("name", pipeline)
            planning_pipelines[pipeline_name] = list(
                pipeline_config.get("planners") or []
            )

        return cls(
            group_name=parameters["group"],
            benchmark_name=parameters.get("name", ""),
            predefined_poses_group=parameters.get("predefined_poses_group", ""),
            predefined_poses=parameters.get("predefined_poses") or [],
            runs=parameters.get("runs", 10),
            timeout=parameters.get("timeout", 10.0),
            output_directory=parameters.get("output_directory", ""),
            scene_name=warehouse.get("scene_name", ""),
            planning_pipelines=planning_pipelines,
        )

    @classmethod
    def from_yaml(cls, filename):
        """
        Loads benchmark options from a YAML file.

        Parameters
        ----------
            filename : str
                Path to the YAML benchmark configuration file.

        Returns
        -------
            `BenchmarkOptions`
                The resulting benchmark options.
        """
        with open(filename, "r") as f:
            return cls.from_dict(yaml.safe_load(f))
