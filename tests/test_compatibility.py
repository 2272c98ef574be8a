# tests/test_compatibility.py
import json

from compatibility import calculate_score, evaluate_compatibility, find_missing_parts
from config import Config
from models import PART_CATEGORIES, Part, PartSelection
from sample_parts import find_part, sample_build


def _make_build(**overrides):
    """Sample build with some categories swapped or removed (value None)."""
    selection = sample_build()
    for category, part in overrides.items():
        if part is None:
            selection.remove(category)
        else:
            selection.select(part)
    return selection


def test_empty_selection():
    result = evaluate_compatibility(PartSelection())
    assert result.score == 5
    assert not result.is_compatible
    assert all(check.waiting for _, check in result.details.all())
    assert {i.id for i in result.issues} == {"missing_cpu", "missing_motherboard", "missing_memory", "missing_psu"}
    assert result.warnings == []


def test_accepts_plain_mapping():
    result = evaluate_compatibility({"cpu": find_part("intel-i5-13600k"), "gpu": None})
    assert not result.is_compatible
    assert result.details.cpu_socket.waiting


def test_sample_build_is_compatible():
    result = evaluate_compatibility(sample_build())
    assert result.is_compatible
    assert result.score == 100
    assert result.issues == []
    assert result.warnings == []


def test_matching_socket_pair_only():
    selection = PartSelection.from_parts([
        Part("cpu-1", "Test CPU", "cpu", price=32000, specifications={"socket": "LGA1700"}),
        Part("mb-1", "Test Board", "motherboard", price=15000, specifications={"socket": "LGA1700"}),
    ])
    result = evaluate_compatibility(selection)
    assert result.details.cpu_socket.compatible
    assert not result.details.cpu_socket.waiting
    assert not any(i.type == "socket_mismatch" for i in result.issues)
    assert not result.is_compatible


def test_socket_mismatch_scenario():
    selection = _make_build(cpu=find_part("amd-ryzen-7-7800x3d"))
    result = evaluate_compatibility(selection)
    assert not result.is_compatible
    socket_issues = [i for i in result.issues if i.type == "socket_mismatch"]
    assert len(socket_issues) == 1
    assert socket_issues[0].severity == "critical"
    assert "AM5" in socket_issues[0].message
    assert result.score == 100 - 30 - 10


def test_gpu_too_long_for_case():
    case = Part("small-case", "Small Case", "case", specifications={
        "supportedFormFactors": ["ATX"], "maxGpuLength": 300, "maxCoolerHeight": 170,
    })
    gpu = Part("long-gpu", "Long GPU", "gpu", price=90000, specifications={
        "length": 350, "powerConnectors": ["8pin"],
    })
    result = evaluate_compatibility(_make_build(case=case, gpu=gpu))
    conflicts = [i for i in result.issues if i.type == "size_conflict"]
    assert len(conflicts) == 1
    assert "350mm" in conflicts[0].message
    assert "300mm" in conflicts[0].message
    assert not result.is_compatible


def test_missing_psu_blocks_compatibility():
    result = evaluate_compatibility(_make_build(psu=None))
    assert not result.is_compatible
    assert result.details.power_connectors.waiting
    assert [i.id for i in result.critical_issues()] == ["missing_psu"]
    assert result.score == 100 - 20


def test_optional_parts_still_wait():
    result = evaluate_compatibility(_make_build(case=None))
    assert result.details.physical_fit.waiting
    assert not result.is_compatible
    assert result.critical_issues() == []


def test_warnings_cost_points_but_do_not_block():
    memory = Part("ram-8", "Test RAM 8GB", "memory", specifications={"type": "DDR5", "capacity": 8, "modules": 1})
    result = evaluate_compatibility(_make_build(memory=memory))
    assert result.is_compatible
    assert len(result.warnings) == 2
    assert result.score == 96


def test_bottleneck_is_warning_not_issue():
    gpu = Part("cheap-gpu", "Cheap GPU", "gpu", price=15000, specifications={"length": 200, "powerConnectors": ["6pin"]})
    result = evaluate_compatibility(_make_build(gpu=gpu))
    assert result.is_compatible
    assert not result.details.performance_match.balanced
    assert [w.id for w in result.warnings] == ["performance_bottleneck_0"]
    assert result.score == 100 - 5 - 2


def test_repeated_evaluation_is_identical():
    selection = _make_build(cpu=find_part("amd-ryzen-7-7800x3d"))
    assert evaluate_compatibility(selection) == evaluate_compatibility(selection)


def test_find_missing_parts():
    selection = PartSelection.from_parts([find_part("intel-i5-13600k")])
    assert find_missing_parts(selection, Config()) == ["motherboard", "memory", "psu"]


def test_score_is_clamped():
    base = evaluate_compatibility(PartSelection())
    warnings = [object()] * 10
    assert calculate_score(base.details, base.issues, warnings) == 0
    result = evaluate_compatibility(sample_build())
    assert calculate_score(result.details, [], []) == 100


def _malformed_selections():
    nan, inf = float("nan"), float("inf")
    yield {c: Part(f"{c}-1", f"Broken {c}", c, specifications=None) for c in PART_CATEGORIES}
    yield {c: Part(f"{c}-1", f"Broken {c}", c, specifications=["x", 1]) for c in PART_CATEGORIES}
    yield {c: Part(f"{c}-1", f"Broken {c}", c, specifications={
        "socket": 1700, "memoryType": [5, None], "type": inf, "capacity": nan, "maxMemory": -inf,
        "modules": nan, "length": inf, "height": nan, "maxGpuLength": nan, "maxCoolerHeight": inf,
        "formFactor": ["ATX"], "supportedFormFactors": {"a": 1}, "powerConnectors": "8pin",
        "connectors": {"24pin": inf, "8pin": nan, "6+2pin": 10 ** 400}, "cpuPowerConnector": None,
    }) for c in PART_CATEGORIES}
    selection = sample_build()
    selection.select(Part("psu-x", "PSU", "psu", specifications=json.loads(
        '{"capacity": NaN, "connectors": {"24pin": Infinity, "6+2pin": 1e300}}'
    )))
    yield selection


def test_malformed_specs_never_raise():
    for selection in _malformed_selections():
        result = evaluate_compatibility(selection)
        assert 0 <= result.score <= 100
        assert evaluate_compatibility(selection) == result


def test_non_string_sockets_are_not_compatible():
    selection = _make_build(
        cpu=Part("cpu-int", "CPU", "cpu", specifications={"socket": 1700}),
        motherboard=Part("mb-int", "Board", "motherboard", specifications={"socket": "1700"}),
    )
    result = evaluate_compatibility(selection)
    assert not result.is_compatible
    assert "cpu_socket_mismatch" in [i.id for i in result.issues]


def test_socket_whitespace_difference_is_reported():
    cpu = find_part("intel-i5-13600k")
    selection = _make_build(cpu=Part(cpu.id, cpu.name, "cpu", price=cpu.price, specifications={"socket": "LGA1700 "}))
    result = evaluate_compatibility(selection)
    assert not result.is_compatible
    assert [i.type for i in result.critical_issues()] == ["socket_mismatch"]
