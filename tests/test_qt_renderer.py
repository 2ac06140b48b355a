import pytest

pytest.importorskip("PySide6")

from PySide6.QtCore import QAbstractAnimation
from PySide6.QtWidgets import QGraphicsDropShadowEffect

from statstar.engine.pipeline import update_star
from statstar.engine.tooltip import describe_tooltip
from statstar.render.qt import QtStarRenderer, polygon_to_painter_path, to_qcolor
from statstar.render.transitions import EntranceTransition


def test_render_adds_one_item_per_layer(qapp, even_stats):
    renderer = QtStarRenderer(show_guides=False)
    renderer.render(update_star(even_stats))

    items = renderer.star_items
    assert len(items) == 3
    assert [item.zValue() for item in items] == [1.0, 2.0, 3.0]
    assert len(renderer.graphics_scene.items()) == 3


def test_only_innermost_item_has_glow_effect(qapp, zero_stats):
    renderer = QtStarRenderer(show_guides=False)
    renderer.render(update_star(zero_stats))

    effects = [item.graphicsEffect() for item in renderer.star_items]
    assert effects[0] is None and effects[1] is None
    assert isinstance(effects[2], QGraphicsDropShadowEffect)


def test_rerender_swaps_items(qapp, zero_stats, even_stats):
    renderer = QtStarRenderer(show_guides=False)
    renderer.render(update_star(zero_stats))
    old_items = renderer.star_items

    renderer.render(update_star(even_stats))

    assert all(item.scene() is None for item in old_items)
    assert len(renderer.graphics_scene.items()) == 3


def test_guides_drawn_once(qapp, zero_stats, even_stats):
    renderer = QtStarRenderer()
    renderer.render(update_star(zero_stats))
    renderer.render(update_star(even_stats))
    # backdrop + 3 rings + 5 spokes + 3 layers
    assert len(renderer.graphics_scene.items()) == 12


def test_guides_follow_show_guides_flag(qapp, zero_stats):
    renderer = QtStarRenderer()
    scene = update_star(zero_stats)
    renderer.render(scene)
    assert len(renderer.graphics_scene.items()) == 12

    renderer.show_guides = False
    renderer.render(scene)
    assert len(renderer.graphics_scene.items()) == 3

    renderer.show_guides = True
    renderer.render(scene)
    assert len(renderer.graphics_scene.items()) == 12


def test_single_tooltip_at_a_time(qapp, zero_stats):
    renderer = QtStarRenderer(show_guides=False)
    scene = update_star(zero_stats)
    renderer.render(scene)

    renderer.show_tooltip(describe_tooltip(scene.points[0]))
    renderer.show_tooltip(describe_tooltip(scene.points[1]))
    # 3 layers + group(background, text)
    assert len(renderer.graphics_scene.items()) == 6

    renderer.hide_tooltip()
    assert len(renderer.graphics_scene.items()) == 3


def test_new_render_cancels_running_transition(qapp, zero_stats):
    renderer = QtStarRenderer(transition=EntranceTransition(), show_guides=False)
    renderer.render(update_star(zero_stats))
    first = renderer.animation
    assert first.state() == QAbstractAnimation.State.Running
    assert renderer.star_items[0].scale() == 0.0

    renderer.render(update_star(zero_stats))
    assert first.state() == QAbstractAnimation.State.Stopped
    assert first.parent() is None
    assert renderer.animation is not first
    assert renderer.animation.state() == QAbstractAnimation.State.Running


def test_repeated_renders_release_old_animations(qapp, zero_stats):
    renderer = QtStarRenderer(transition=EntranceTransition(), show_guides=False)
    scene = update_star(zero_stats)
    for _ in range(50):
        renderer.render(scene)

    animations = [c for c in renderer.children() if isinstance(c, QAbstractAnimation)]
    assert len(animations) == 1


def test_stopped_animation_no_longer_drives_items(qapp, zero_stats):
    renderer = QtStarRenderer(transition=EntranceTransition(), show_guides=False)
    renderer.render(update_star(zero_stats))
    renderer.transition = None
    renderer.render(update_star(zero_stats))

    assert renderer.animation is None
    assert [item.scale() for item in renderer.star_items] == [1.0, 1.0, 1.0]


def test_star_rendered_signal(qapp, zero_stats):
    renderer = QtStarRenderer(show_guides=False)
    received = []
    renderer.star_rendered.connect(received.append)

    scene = update_star(zero_stats)
    renderer.render(scene)
    assert received == [scene]


def test_painter_path_starts_at_first_tip(qapp, zero_stats):
    polygon = update_star(zero_stats).layers[0].polygon
    path = polygon_to_painter_path(polygon)

    first = path.elementAt(0)
    assert first.isMoveTo()
    assert (first.x, first.y) == pytest.approx((200.0, 170.0))


def test_to_qcolor():
    assert to_qcolor("#FFA500").name() == "#ffa500"
    rgba = to_qcolor("rgba(255, 255, 255, 0.1)")
    assert rgba.alphaF() == pytest.approx(0.1, abs=0.01)
    with pytest.raises(ValueError):
        to_qcolor("not-a-colour")
