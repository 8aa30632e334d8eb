import math

import pytest

from games.color_shooter.cluster import Target, TargetCluster
from games.color_shooter.const import DROP_STEP, SPAWN_SPACING, SPAWN_X, SPAWN_Y

from conftest import palette_of


def test_spawn_lays_targets_out_in_a_row():
    cluster = TargetCluster.spawn(3, palette_of("red", "blue", "green"), speed=0.5)
    assert [(t.x, t.y) for t in cluster.targets] == [
        (SPAWN_X + i * SPAWN_SPACING, SPAWN_Y) for i in range(3)]
    assert [t.color for t in cluster.targets] == ["red", "blue", "green"]
    assert cluster.phase == 0.0


def test_advance_moves_every_target_by_the_same_amount():
    cluster = TargetCluster.spawn(4, palette_of("red"), speed=1.5)
    before = [t.x for t in cluster.targets]
    bounced = cluster.advance(0.01, 800)
    assert not bounced
    dx = math.sin(0.01) * 1.5
    assert [t.x for t in cluster.targets] == pytest.approx([x + dx for x in before])
    assert all(t.y == SPAWN_Y for t in cluster.targets)


def test_leading_target_at_left_wall_reverses_and_drops():
    cluster = TargetCluster(speed=0.5, phase=math.pi, targets=[
        Target(0.0, 100.0, "red"), Target(50.0, 100.0, "blue"), Target(100.0, 100.0, "green")])

    assert cluster.advance(0.01, 800)
    assert all(t.y == 100.0 + DROP_STEP for t in cluster.targets)

    # now heading right again
    xs = [t.x for t in cluster.targets]
    assert not cluster.advance(0.01, 800)
    assert all(t.x > x for t, x in zip(cluster.targets, xs))


def test_trailing_target_at_right_wall_bounces():
    cluster = TargetCluster(speed=0.5, targets=[Target(700.0, 80.0, "red"), Target(800.0, 80.0, "red")])
    assert cluster.advance(0.01, 800)
    assert cluster.lowest_y() == 80.0 + DROP_STEP


def test_reached_floor_uses_lowest_target():
    cluster = TargetCluster(speed=0.5, targets=[Target(10.0, 100.0, "red"), Target(60.0, 501.0, "red")])
    assert cluster.reached_floor(600)
    cluster.targets[1].y = 500.0
    assert not cluster.reached_floor(600)


def test_positions_keep_cluster_order():
    cluster = TargetCluster(speed=0.5, targets=[Target(1.0, 2.0, "red"), Target(3.0, 4.0, "blue")])
    assert cluster.positions().tolist() == [[1.0, 2.0], [3.0, 4.0]]
    assert TargetCluster(speed=0.5).positions().shape == (0, 2)


def test_advancing_an_empty_cluster_is_a_bug():
    with pytest.raises(AssertionError):
        TargetCluster(speed=0.5).advance(0.01, 800)
