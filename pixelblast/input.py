"""Keyboard state tracking."""

from __future__ import annotations

from collections.abc import Iterable

import pygame


class Input:
    """Remembers which keys are held, fed from pygame events."""

    def __init__(self) -> None:
        self._key_states: dict[int, bool] = {}

    def update(self, events: Iterable[pygame.event.Event] | None = None) -> None:
        """Apply events; with none given, drain pygame's event queue.

        A quit request is recorded as the escape key being held.
        """
        if events is None:
            events = pygame.event.get()
        for event in events:
            if event.type == pygame.QUIT:
                self._key_states[pygame.K_ESCAPE] = True
            elif event.type == pygame.KEYDOWN:
                self._key_states[event.key] = True
            elif event.type == pygame.KEYUP:
                self._key_states[event.key] = False

    def is_key_down(self, key: int) -> bool:
        return self._key_states.get(key, False)