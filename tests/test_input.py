import pygame
import pytest

from engine.api.config import EngineConfig, parse_screen_size
from engine.input.pointer_input import PointerInput


def event(kind, **attrs):
    return pygame.event.Event(kind, **attrs)


@pytest.fixture
def inp():
    return PointerInput(EngineConfig(screen_size=(800, 600)))


def test_nothing_pending_at_first(inp):
    f = inp.drain(now=1.0)
    assert f.timestamp == 1.0
    assert f.pointer is None
    assert not f.fire_pressed and not f.action_pressed


def test_motion_sets_pointer_and_it_persists(inp):
    inp.handle_pygame_event(event(pygame.MOUSEMOTION, pos=(10, 20), rel=(0, 0), buttons=(0, 0, 0)))
    inp.handle_pygame_event(event(pygame.MOUSEMOTION, pos=(30, 40), rel=(0, 0), buttons=(0, 0, 0)))
    assert (inp.drain().pointer.x, inp.drain().pointer.y) == (30.0, 40.0)


def test_flags_are_drained_once(inp):
    inp.handle_pygame_event(event(pygame.MOUSEBUTTONDOWN, pos=(5, 6), button=1))
    inp.handle_pygame_event(event(pygame.MOUSEBUTTONDOWN, pos=(5, 6), button=1))
    inp.handle_pygame_event(event(pygame.KEYDOWN, key=pygame.K_SPACE, mod=0, unicode=" "))
    f = inp.drain()
    assert f.fire_pressed and f.action_pressed
    assert (f.pointer.x, f.pointer.y) == (5.0, 6.0)

    f = inp.drain()
    assert not f.fire_pressed and not f.action_pressed


def test_other_buttons_and_keys_ignored(inp):
    inp.handle_pygame_event(event(pygame.MOUSEBUTTONDOWN, pos=(5, 6), button=3))
    inp.handle_pygame_event(event(pygame.KEYDOWN, key=pygame.K_a, mod=0, unicode="a"))
    f = inp.drain()
    assert not f.fire_pressed and not f.action_pressed


def test_return_counts_as_action(inp):
    inp.handle_pygame_event(event(pygame.KEYDOWN, key=pygame.K_RETURN, mod=0, unicode="\r"))
    assert inp.drain().action_pressed


def test_mirror_maps_back_to_logical_coords():
    inp = PointerInput(EngineConfig(screen_size=(800, 600), mirror=True))
    inp.handle_pygame_event(event(pygame.MOUSEMOTION, pos=(10, 20), rel=(0, 0), buttons=(0, 0, 0)))
    p = inp.drain().pointer
    assert (p.x, p.y) == (789.0, 20.0)


def test_parse_screen_size():
    assert parse_screen_size("1280X720") == (1280, 720)
    for bad in ("800", "axb", "0x600", "800x600x2"):
        with pytest.raises(ValueError):
            parse_screen_size(bad)
