# tests/test_physical_check.py
from checks.physical_check import check_physical
from models import Part, PartSelection, STATUS_COMPATIBLE, STATUS_INCOMPATIBLE, STATUS_WAITING


def _make_case(**specs):
    specs = specs or {
        "supportedFormFactors": ["ATX", "Micro-ATX"],
        "maxGpuLength": 300,
        "maxCoolerHeight": 165,
    }
    return Part("case-1", "Test Case", "case", specifications=specs)


def _make_selection(case=None, gpu_length=None, cooler_height=None, form_factor=None):
    parts = [case or _make_case()]
    if gpu_length is not None:
        parts.append(Part("gpu-1", "Test GPU", "gpu", specifications={"length": gpu_length}))
    if cooler_height is not None:
        parts.append(Part("cooler-1", "Test Cooler", "cooler", specifications={"height": cooler_height}))
    if form_factor is not None:
        parts.append(Part("mb-1", "Test Board", "motherboard", specifications={"formFactor": form_factor}))
    return PartSelection.from_parts(parts)


def test_everything_fits():
    result = check_physical(_make_selection(gpu_length=250, cooler_height=150, form_factor="ATX"))
    assert result.status == STATUS_COMPATIBLE
    assert result.issues == []
    assert result.warnings == []
    assert result.message == "Physical fit OK"
    assert all(c.status == "pass" for c in result.clearances)


def test_gpu_too_long():
    result = check_physical(_make_selection(gpu_length=350))
    assert result.status == STATUS_INCOMPATIBLE
    assert len(result.issues) == 1
    assert "350mm" in result.issues[0]
    assert "300mm" in result.issues[0]


def test_gpu_near_limit_warns():
    result = check_physical(_make_selection(gpu_length=280))
    assert result.status == STATUS_COMPATIBLE
    assert len(result.warnings) == 1
    assert "close to the case limit" in result.warnings[0]


def test_cooler_too_tall():
    result = check_physical(_make_selection(cooler_height=170))
    assert result.status == STATUS_INCOMPATIBLE
    assert "170mm" in result.issues[0]


def test_cooler_near_limit_warns():
    result = check_physical(_make_selection(cooler_height=160))
    assert result.status == STATUS_COMPATIBLE
    assert len(result.warnings) == 1


def test_unsupported_form_factor():
    result = check_physical(_make_selection(form_factor="E-ATX"))
    assert result.status == STATUS_INCOMPATIBLE
    assert "E-ATX" in result.issues[0]


def test_case_without_limits_accepts_anything():
    case = _make_case(color="black")
    result = check_physical(_make_selection(case=case, gpu_length=420, form_factor="E-ATX"))
    assert result.status == STATUS_COMPATIBLE


def test_large_gpu_with_tall_cooler_warns():
    case = _make_case(maxGpuLength=450, maxCoolerHeight=200)
    result = check_physical(_make_selection(case=case, gpu_length=330, cooler_height=165))
    assert result.status == STATUS_COMPATIBLE
    assert any("clearance" in w for w in result.warnings)
    assert result.clearances[-1].check == "GPU/cooler clearance"


def test_waiting_without_case():
    selection = PartSelection.from_parts([Part("gpu-1", "Test GPU", "gpu", specifications={"length": 300})])
    assert check_physical(selection).status == STATUS_WAITING


def test_no_listed_limit_means_no_size_notes():
    case = _make_case(supportedFormFactors=["ATX"])
    result = check_physical(_make_selection(case=case, gpu_length=950, cooler_height=200))
    assert result.status == STATUS_COMPATIBLE
    assert not any("close to the case limit" in w for w in result.warnings)
    assert [c.check for c in result.clearances] == ["GPU/cooler clearance"]
