import json

import numpy as np

from IsoBands.export import bands_to_feature_collection, export_geojson
from IsoBands.isobands import Band, ContourBuilder
from IsoBands.polygons import ring_area
from IsoBands.specifications import IsobandSpecifications


def block_samples():
    values = np.zeros((10, 10))
    values[3:8, 3:6] = 1.0
    return values.ravel().tolist()


MINIMAL = [1.0, 1.0, 1.0, 5.0]
MINIMAL_RING = [(0.5, 1.0), (1.0, 0.5), (1.0, 0.0), (0.0, 0.0), (0.0, 1.0), (0.5, 1.0)]


def test_geojson_feature():
    bands = ContourBuilder(10, 10).contours(block_samples(), [0.5, 1.0])
    expected = {
        "type": "Feature",
        "geometry": {
            "type": "MultiPolygon",
            "coordinates": [
                [
                    [
                        [3.0, 2.5],
                        [2.5, 3.0],
                        [2.5, 4.0],
                        [2.5, 5.0],
                        [2.5, 6.0],
                        [2.5, 7.0],
                        [3.0, 7.5],
                        [4.0, 7.5],
                        [5.0, 7.5],
                        [5.5, 7.0],
                        [5.5, 6.0],
                        [5.5, 5.0],
                        [5.5, 4.0],
                        [5.5, 3.0],
                        [5.0, 2.5],
                        [4.0, 2.5],
                        [3.0, 2.5],
                    ]
                ]
            ],
        },
        "properties": {"min_v": 0.5, "max_v": 1.0},
    }
    assert bands[0].to_geojson() == expected
    # serialisable as is
    assert json.loads(json.dumps(bands[0].to_geojson())) == expected


def test_extra_properties():
    band = Band(0.0, 1.0, [])
    feature = band.to_geojson({"name": "low"})
    assert feature["properties"] == {"min_v": 0.0, "max_v": 1.0, "name": "low"}
    assert feature["geometry"]["coordinates"] == []


def test_identity_transform():
    bands = ContourBuilder(2, 2).contours(MINIMAL, [1.0, 3.0])
    assert len(bands) == 1
    assert bands[0].polygons[0].exterior == MINIMAL_RING
    assert bands[0].into_inner()[1:] == (1.0, 3.0)


def test_origin_and_step():
    builder = ContourBuilder(2, 2).with_origin(10.0, 20.0).with_step(2.0, 3.0)
    exterior = builder.contours(MINIMAL, [1.0, 3.0])[0].polygons[0].exterior
    assert exterior == [
        (11.0, 23.0),
        (12.0, 21.5),
        (12.0, 20.0),
        (10.0, 20.0),
        (10.0, 23.0),
        (11.0, 23.0),
    ]


def test_mirrored_axis_keeps_winding():
    builder = ContourBuilder(2, 2, y_step=-1.0)
    exterior = builder.contours(MINIMAL, [1.0, 3.0])[0].polygons[0].exterior
    assert exterior == [
        (0.5, -1.0),
        (0.0, -1.0),
        (0.0, 0.0),
        (1.0, 0.0),
        (1.0, -0.5),
        (0.5, -1.0),
    ]
    assert ring_area(exterior) > 0


def test_quad_tree_builder_matches():
    samples = block_samples()
    plain = ContourBuilder(10, 10).contours(samples, [0.0, 0.5, 1.0])
    tree = ContourBuilder(10, 10).with_quad_tree().contours(samples, [0.0, 0.5, 1.0])
    assert [b.to_geojson() for b in plain] == [b.to_geojson() for b in tree]


def test_from_specifications():
    specs = IsobandSpecifications({"x_origin": 10.0, "y_origin": 20.0, "x_step": 2.0})
    specs.update({"y_step": 3.0})
    builder = ContourBuilder.from_specifications(2, 2, specs)
    exterior = builder.contours(MINIMAL, [1.0, 3.0])[0].polygons[0].exterior
    assert exterior[0] == (11.0, 23.0)
    assert builder.use_quad_tree is False


def test_export_geojson(tmp_path):
    bands = ContourBuilder(10, 10).contours(block_samples(), [0.0, 0.5, 1.0])
    filename = tmp_path / "bands.geojson"
    export_geojson(bands, filename, properties={"source": "test"})

    with open(filename) as f:
        document = json.load(f)
    assert document == bands_to_feature_collection(bands, {"source": "test"})
    assert document["type"] == "FeatureCollection"
    assert len(document["features"]) == 2
    assert document["features"][1]["properties"] == {
        "min_v": 0.5,
        "max_v": 1.0,
        "source": "test",
    }


if __name__ == "__main__":
    test_geojson_feature()
    test_origin_and_step()
