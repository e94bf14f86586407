import os
import pytest

from pyrobobench.benchmarks.options import BenchmarkOptions


EXAMPLE_CONFIG = os.path.join(
    os.path.dirname(__file__),
    "..",
    "..",
    "examples",
    "config",
    "panda_predefined_poses.yaml",
)


def make_config(**parameters):
    config_parameters = {"name": "test", "group": "panda_arm"}
    config_parameters.update(parameters)
    return {"benchmark_config": {"parameters": config_parameters}}


def test_default_options():
    options = BenchmarkOptions(group_name="panda_arm")
    assert options.group_name == "panda_arm"
    assert options.predefined_poses_group == ""
    assert options.predefined_poses == []
    assert options.runs == 10
    assert options.timeout == pytest.approx(10.0)
    assert options.planning_pipelines == {}


def test_invalid_options():
    with pytest.raises(ValueError):
        BenchmarkOptions(group_name="panda_arm", runs=0)
    with pytest.raises(ValueError):
        BenchmarkOptions(group_name="panda_arm", timeout=0.0)
    with pytest.raises(ValueError):
        BenchmarkOptions(group_name="panda_arm", predefined_poses="ready")


def test_options_from_dict():
    config = {
        "benchmark_config": {
            "warehouse": {"scene_name": "kitchen"},
            "parameters": {
                "name": "panda_poses",
                "runs": 3,
                "group": "panda_arm_hand",
                "timeout": 1.5,
                "output_directory": "/tmp/results",
                "predefined_poses_group": "panda_arm",
                "predefined_poses": ["ready", "extended"],
            },
            "planning_pipelines": {
                "pipelines": ["ompl_rrtc", "chomp"],
                "ompl_rrtc": {"name": "ompl", "planners": ["RRTConnect"]},
                "chomp": {"planners": ["CHOMP"]},
            },
        }
    }
    options = BenchmarkOptions.from_dict(config)

    assert options.benchmark_name == "panda_poses"
    assert options.group_name == "panda_arm_hand"
    assert options.predefined_poses_group == "panda_arm"
    assert options.predefined_poses == ["ready", "extended"]
    assert options.runs == 3
    assert options.timeout == pytest.approx(1.5)
    assert options.output_directory == "/tmp/results"
    assert options.scene_name == "kitchen"
    assert options.planning_pipelines == {"ompl": ["RRTConnect"], "chomp": ["CHOMP"]}


def test_options_from_dict_defaults():
    options = BenchmarkOptions.from_dict(make_config())
    assert options.predefined_poses_group == ""
    assert options.predefined_poses == []
    assert options.scene_name == ""
    assert options.planning_pipelines == {}


def test_invalid_config():
    with pytest.raises(ValueError):
        BenchmarkOptions.from_dict({})
    with pytest.raises(ValueError):
        BenchmarkOptions.from_dict({"benchmark_config": {}})
    with pytest.raises(ValueError):
        BenchmarkOptions.from_dict(make_config(group=""))
    with pytest.raises(ValueError):
        BenchmarkOptions.from_dict(make_config(runs=0))
    with pytest.raises(ValueError, match="list of pose names"):
        BenchmarkOptions.from_dict(make_config(predefined_poses="ready"))


def test_options_from_yaml(tmp_path):
    config_file = tmp_path / "benchmark.yaml"
    config_file.write_text(
        "benchmark_config:\n"
        "  parameters:\n"
        "    name: yaml_test\n"
        "    group: hand\n"
        "    predefined_poses: [open, close]\n"
    )
    options = BenchmarkOptions.from_yaml(str(config_file))
    assert options.benchmark_name == "yaml_test"
    assert options.group_name == "hand"
    assert options.predefined_poses == ["open", "close"]


def test_example_config():
    options = BenchmarkOptions.from_yaml(EXAMPLE_CONFIG)
    assert options.group_name == "panda_arm"
    assert options.predefined_poses_group == "panda_arm"
    assert options.predefined_poses == ["ready", "home", "extended", "transport"]
    assert "ompl" in options.planning_pipelines
