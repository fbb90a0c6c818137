import pytest

from mpicollide.collider import Body
from mpicollide.serial import initial_bodies, main, run, step
from mpicollide.vectors import Vector


def test_initial_bodies_match_scenario():
    a, b = initial_bodies()
    assert list(a.position) == [30.0, 25.0, 0.0]
    assert list(a.velocity) == [1.0, 0.0, 0.0]
    assert list(b.position) == [90.0, 25.0, 0.0]
    assert list(b.velocity) == [-2.0, 0.0, 0.0]
    assert a.id != b.id


def test_step_moves_bodies_without_collision():
    bodies = initial_bodies()
    assert step(bodies, 0.1) == []
    assert bodies[0].position[0] == pytest.approx(30.1)
    assert bodies[1].position[0] == pytest.approx(89.8)


def test_step_reports_collision_and_conserves_momentum():
    a = Body(position=Vector(10.0, 10.0, 0.0), velocity=Vector(1.0, 0.0, 0.0))
    b = Body(position=Vector(11.0, 10.0, 0.0), velocity=Vector(-1.0, 0.5, 0.0))
    before = [x + y for x, y in zip(a.velocity, b.velocity)]
    collisions = step([a, b], 0.01, 100, 50)
    assert collisions == [(a.id, b.id)]
    after = [x + y for x, y in zip(a.velocity, b.velocity)]
    assert after == pytest.approx(before)


def test_step_bounces_off_walls():
    b = Body(position=Vector(99.95, 25.0, 0.0), velocity=Vector(1.0, 0.0, 0.0))
    step([b], 0.1, 100, 50)
    assert b.velocity[0] == -1.0


def test_run_frame_count_and_stop():
    frames = []
    run(3.0, 1.0, 100, 50, lambda bodies, collisions: frames.append(len(bodies)))
    assert len(frames) == 4

    calls = []

    def stop(bodies, collisions):
        calls.append(1)
        return False

    run(100.0, 0.1, 100, 50, stop)
    assert calls == [1]


def test_run_sees_a_collision_and_keeps_bodies_near_box():
    seen = []
    bodies = run(on_frame=lambda b, c: seen.extend(c))
    assert len(seen) >= 1
    for b in bodies:
        assert -5.0 <= b.position[0] <= 105.0
        assert b.position[1] == pytest.approx(25.0)


def test_main_reports_collisions(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines
    assert set(lines) == {"Collision on rank 0"}