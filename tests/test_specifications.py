import pytest

from IsoBands.isobands import ContourBuilder
from IsoBands.specifications import DEFAULT_SPECIFICATIONS, IsobandSpecifications


def test_defaults():
    specs = IsobandSpecifications()
    assert specs == DEFAULT_SPECIFICATIONS
    builder = ContourBuilder.from_specifications(3, 3, specs)
    assert builder.is_identity
    assert builder.max_workers is None


def test_save_and_load(tmp_path):
    filename = str(tmp_path / "specs.json")
    specs = IsobandSpecifications({"x_step": 0.12, "y_step": -0.09})
    specs.update({"use_quad_tree": True, "max_workers": 2})
    specs.save(filename)

    loaded = IsobandSpecifications(filename)
    assert loaded == specs
    assert loaded["precision"] == 1e-4

    builder = ContourBuilder.from_specifications(3, 3, loaded)
    assert builder.use_quad_tree
    assert (builder.x_step, builder.y_step) == (0.12, -0.09)


def test_recursive_update():
    specs = IsobandSpecifications({"metadata": {"source": "dem", "unit": "m"}})
    specs.update({"metadata": {"unit": "ft"}})
    assert specs["metadata"] == {"source": "dem", "unit": "ft"}


def test_copy_is_independent():
    specs = IsobandSpecifications({"metadata": {"unit": "m"}})
    other = specs.copy()
    other["metadata"]["unit"] = "ft"
    assert specs["metadata"]["unit"] == "m"
    assert isinstance(other, IsobandSpecifications)


def test_unsupported_format(tmp_path):
    with pytest.raises(ValueError):
        IsobandSpecifications(str(tmp_path / "specs.yaml"))
    with pytest.raises(ValueError):
        IsobandSpecifications().save(str(tmp_path / "specs.txt"))


if __name__ == "__main__":
    test_defaults()
    test_recursive_update()
