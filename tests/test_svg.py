import xml.etree.ElementTree as ET

import pytest

from statstar.engine.pipeline import update_star
from statstar.engine.tooltip import describe_tooltip
from statstar.model.geometry_primitives import format_coordinate
from statstar.render.svg import SvgRenderer
from statstar.render.transitions import EntranceTransition

NS = {"svg": "http://www.w3.org/2000/svg"}


def parse(document: str) -> ET.Element:
    return ET.fromstring(document)


def test_document_is_well_formed_with_three_layers(zero_stats):
    root = parse(SvgRenderer().render(update_star(zero_stats)))

    assert root.get("viewBox") == "0 0 400 400"
    paths = root.findall(".//svg:path", NS)
    assert [p.get("class") for p in paths] == [f"star-path star-layer-{i}" for i in range(3)]
    assert [p.get("fill") for p in paths] == ["#FFA500", "#FFD700", "#FFFFE0"]


def test_glow_filter_defined_and_used_once(even_stats):
    document = SvgRenderer().render(update_star(even_stats))
    root = parse(document)

    blur = root.find(".//svg:defs/svg:filter/svg:feGaussianBlur", NS)
    assert blur.get("stdDeviation") == "2.5"
    assert document.count('filter="url(#starGlow)"') == 1
    glowing = [p for p in root.findall(".//svg:path", NS) if p.get("filter")]
    assert [p.get("class") for p in glowing] == ["star-path star-layer-2"]


def test_outer_layer_path_data(zero_stats):
    scene = update_star(zero_stats)
    root = parse(SvgRenderer().render(scene))
    d = root.findall(".//svg:path", NS)[0].get("d")
    assert d == scene.layers[0].to_svg_path()
    assert d.startswith("M 200 170 L")


def test_guides_can_be_turned_off(zero_stats):
    with_guides = parse(SvgRenderer().render(update_star(zero_stats)))
    without = parse(SvgRenderer(show_guides=False).render(update_star(zero_stats)))

    assert len(with_guides.findall(".//svg:circle", NS)) == 4
    assert len(with_guides.findall(".//svg:line", NS)) == 5
    assert without.findall(".//svg:circle", NS) == []


def test_tooltip_is_drawn_and_replaced():
    scene = update_star({"physical": 5})
    renderer = SvgRenderer()
    renderer.render(scene)

    renderer.show_tooltip(describe_tooltip(scene.point_for("physical")))
    renderer.show_tooltip(describe_tooltip(scene.point_for("mental")))
    root = parse(renderer.to_svg())
    texts = [t.text for t in root.findall(".//svg:text", NS)]
    assert texts == ["Mental: 0"]

    renderer.hide_tooltip()
    assert parse(renderer.to_svg()).findall(".//svg:text", NS) == []


def test_transition_frame_sets_group_transform(zero_stats):
    frame = EntranceTransition().sample(0.3)
    root = parse(SvgRenderer().render(update_star(zero_stats), frame=frame))
    star = root.find(".//svg:g[@class='star']", NS)
    assert "scale(" in star.get("transform")
    assert float(star.get("opacity")) == pytest.approx(frame.opacity, abs=1e-4)


def test_to_svg_before_render_fails():
    with pytest.raises(RuntimeError):
        SvgRenderer().to_svg()


@pytest.mark.parametrize(("value", "text"), [
    (200.0, "200"),
    (12.5, "12.5"),
    (-0.00001, "0"),
    (192.94657, "192.9466"),
    (-3.0, "-3"),
])
def test_format_coordinate(value, text):
    assert format_coordinate(value) == text
