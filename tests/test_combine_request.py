"""
Unit tests for /combine body parsing
"""

import pytest

from scene_combiner.core.layout import Layout
from scene_combiner.schemas.CombineRequest import CombineRequest


def visual(url=None, name="img"):
    data = {"type": "image", "name": name}
    if url is not None:
        data["uploaded_image_url"] = url
    return data


class TestSingleScene:
    def test_wrapper_object(self):
        request = CombineRequest.from_body(
            {"scene_number": 3, "input": [visual("http://a/1.png"), visual(), visual("")]}
        )
        assert not request.is_scene_list
        assert request.scene_number == 3
        assert request.image_urls == ["http://a/1.png"]
        assert request.layout is None

    def test_layout_in_body(self):
        request = CombineRequest.from_body({"scene_number": 1, "input": [], "layout": "strip"})
        assert request.layout == Layout.STRIP

    def test_missing_scene_number(self):
        with pytest.raises(ValueError, match="scene_number is required"):
            CombineRequest.from_body({"input": []})

    def test_null_scene_number(self):
        with pytest.raises(ValueError, match="scene_number is required"):
            CombineRequest.from_body({"scene_number": None, "input": []})

    @pytest.mark.parametrize("bad_input", [None, "x", {"a": 1}, 5])
    def test_input_must_be_array(self, bad_input):
        body = {"scene_number": 1}
        if bad_input is not None:
            body["input"] = bad_input
        with pytest.raises(ValueError, match="input must be an array of visuals"):
            CombineRequest.from_body(body)

    def test_bad_visual_field(self):
        with pytest.raises(ValueError, match="uploaded_image_url"):
            CombineRequest.from_body(
                {"scene_number": 1, "input": [{"uploaded_image_url": ["not", "a", "string"]}]}
            )

    def test_unknown_layout(self):
        with pytest.raises(ValueError, match="layout must be one of"):
            CombineRequest.from_body({"scene_number": 1, "input": [], "layout": "diagonal"})


class TestSceneList:
    def test_flat_array(self):
        request = CombineRequest.from_body(
            [
                {"scene_number": 2, "visuals": [visual("http://a/2.png")]},
                {"scene_number": 1, "visuals": [visual("http://a/1.png"), visual()]},
            ]
        )
        assert request.is_scene_list
        assert request.scene_number is None
        assert request.image_urls == ["http://a/1.png", "http://a/2.png"]
        assert [scene.scene_number for scene in request.sorted_scenes()] == [1, 2]

    def test_scenes_wrapper(self):
        request = CombineRequest.from_body(
            {"scenes": [{"scene_number": 1, "visuals": []}], "layout": "horizontal"}
        )
        assert request.is_scene_list
        assert request.layout == Layout.HORIZONTAL

    def test_nested_arrays_are_flattened(self):
        request = CombineRequest.from_body(
            [
                [{"scene_number": 1, "visuals": [visual("http://a/1.png")]}],
                [{"scene_number": 2, "visuals": []}, [{"scene_number": 3, "visuals": []}]],
            ]
        )
        assert [scene.scene_number for scene in request.scenes] == [1, 2, 3]

    def test_flattened_input_key(self):
        request = CombineRequest.from_body([{"scene_number": 1, "input": [visual("http://a/1.png")]}])
        assert request.image_urls == ["http://a/1.png"]

    def test_missing_visuals_is_empty(self):
        request = CombineRequest.from_body([{"scene_number": 4}])
        assert request.scenes[0].visuals == []

    def test_visuals_must_be_array(self):
        with pytest.raises(ValueError, match="visuals must be an array of visuals"):
            CombineRequest.from_body([{"scene_number": 1, "visuals": "nope"}])

    def test_scene_must_be_object(self):
        with pytest.raises(ValueError, match="each scene must be an object"):
            CombineRequest.from_body([1, 2])

    def test_scenes_key_must_be_array(self):
        with pytest.raises(ValueError, match="scenes must be an array"):
            CombineRequest.from_body({"scenes": "nope"})

    def test_stable_sort_for_equal_numbers(self):
        request = CombineRequest.from_body(
            [
                {"scene_number": 2, "visuals": [visual("http://a/first.png")]},
                {"scene_number": 1, "visuals": []},
                {"scene_number": 2, "visuals": [visual("http://a/second.png")]},
            ]
        )
        urls = [scene.image_urls for scene in request.sorted_scenes()]
        assert urls == [[], ["http://a/first.png"], ["http://a/second.png"]]


def test_scalar_body_rejected():
    with pytest.raises(ValueError, match="body must be"):
        CombineRequest.from_body("hello")
