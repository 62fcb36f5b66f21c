import pytest

from leader_lexis.core.dataset import Dataset
from leader_lexis.core.view_registry import ViewRegistry
from leader_lexis.views import GenderBarView, LexisView, ScatterView


def _make_registry():
    registry = ViewRegistry()
    registry.register(LexisView)
    registry.register(GenderBarView)
    registry.register(ScatterView)
    return registry


def test_create_all_keeps_registration_order():
    ds = Dataset(name="Empty", records=[], country_groups=["oecd"])

    views = _make_registry().create_all(ds)

    assert [v.id for v in views] == ["lexis", "gender_bar", "scatter"]
    assert all(v.dataset is ds for v in views)


def test_register_rejects_duplicates_and_non_views():
    registry = _make_registry()

    with pytest.raises(ValueError):
        registry.register(LexisView)

    with pytest.raises(TypeError):
        registry.register(object)


def test_create_unknown_view_raises():
    ds = Dataset(name="Empty", records=[], country_groups=["oecd"])

    with pytest.raises(KeyError):
        _make_registry().create("nope", ds)
