import pygame

from gridpath.input_handler import InputHandler


def feed(monkeypatch, events):
    monkeypatch.setattr(pygame.event, "get", lambda *args, **kwargs: list(events))


def test_left_and_right_click_pick_cells(monkeypatch):
    handler = InputHandler(cell_size=10)
    feed(
        monkeypatch,
        [
            pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(25, 13)),
            pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(9, 40)),
        ],
    )
    handler.process_events()
    assert handler.start_clicked() == (2, 1)
    assert handler.target_clicked() == (0, 4)
    assert not handler.should_quit()


def test_state_resets_each_frame(monkeypatch):
    handler = InputHandler(cell_size=10)
    feed(monkeypatch, [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r, mod=0)])
    handler.process_events()
    assert handler.reset_pressed()
    feed(monkeypatch, [])
    handler.process_events()
    assert not handler.reset_pressed()
    assert handler.start_clicked() is None


def test_quit_events(monkeypatch):
    handler = InputHandler(cell_size=10)
    for event in (
        pygame.event.Event(pygame.QUIT),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE, mod=0),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_x, mod=0),
    ):
        feed(monkeypatch, [event])
        handler.process_events()
        assert handler.should_quit()
