import pytest

from statstar.engine.guides import build_guides, ring_radii
from statstar.engine.pipeline import max_stat_value, reset_star, update_star
from statstar.model.stats import StatId, StatValues
from statstar.render.svg import SvgRenderer


def test_same_stats_give_identical_scenes():
    stats = {"physical": 13, "mental": 2, "social": 44, "creative": 0, "productive": 7}
    first, second = update_star(stats), update_star(dict(stats))

    assert first == second
    assert SvgRenderer().render(first) == SvgRenderer().render(second)


def test_scene_contents(even_stats):
    scene = update_star(even_stats)

    assert scene.stats == even_stats
    assert len(scene.points) == 5
    assert len(scene.layers) == 3
    assert scene.glow_layer is scene.layers[-1]
    assert scene.point_for("social").stat_id is StatId.SOCIAL


def test_point_for_rejects_unknown_stat(even_stats):
    with pytest.raises(ValueError):
        update_star(even_stats).point_for("luck")


def test_reset_star_is_the_zero_scene():
    scene = reset_star()
    assert scene.stats == StatValues.zero()
    assert all(p.radius == 30.0 for p in scene.points)


def test_max_stat_value_helper():
    assert max_stat_value({}) == 1
    assert max_stat_value({"creative": 31, "mental": 4}) == 31


def test_guides():
    guides = build_guides()

    assert guides.backdrop.radius == 150.0
    assert guides.backdrop.dash == (5.0, 5.0)
    assert [ring.radius for ring in guides.rings] == pytest.approx([70.0, 110.0, 150.0])
    assert ring_radii() == pytest.approx([70.0, 110.0, 150.0])
    assert len(guides.spokes) == 5
    top = guides.spokes[0].end
    assert (top.x, top.y) == pytest.approx((200.0, 50.0))
