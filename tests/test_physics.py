from djinni.geometry import Coordinate, Rectangle
from djinni.logger import LogLevel, default_logger
from djinni.physics import PhysicsBody, Velocity


def test_create_sets_bounds_and_rest():
    body = PhysicsBody.create(1, 2, 3, 4)
    assert body.bounds == Rectangle(1, 2, 3, 4)
    assert body.velocity == Velocity(0, 0)


def test_velocity_defaults_to_rest():
    v = Velocity()
    assert (v.dx, v.dy) == (0, 0)


def test_bodies_do_not_share_velocity():
    a = PhysicsBody.create(0, 0, 1, 1)
    b = PhysicsBody.create(0, 0, 1, 1)
    a.velocity.dx = 5
    assert b.velocity.dx == 0


def test_bounds_move_independently():
    body = PhysicsBody.create(0, 0, 8, 8)
    body.bounds.move_to(30, 40)
    assert body.bounds.position() == Coordinate(30, 40)
    assert (body.bounds.w, body.bounds.h) == (8, 8)


def test_inspect_logs_body_then_bounds(capsys):
    PhysicsBody.create(1, 2, 3, 4).inspect()
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("[DEBUG]: Djinni::Physics::PhysicsBody( address:(0x")
    assert lines[1].endswith("x:(1) y:(2) w:(3) h:(4) )")


def test_inspect_respects_logger_level(capsys, monkeypatch):
    monkeypatch.setattr(default_logger, "level", LogLevel.INFO)
    PhysicsBody.create(1, 2, 3, 4).inspect()
    assert capsys.readouterr().out == ""