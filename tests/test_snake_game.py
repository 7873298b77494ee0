"""
Tests for snake_game.py - event forwarding and the headless run.
"""

from types import SimpleNamespace
from unittest.mock import patch

import pygame

import snake_game
from game import Game


def key_event(key):
    return SimpleNamespace(type=pygame.KEYDOWN, key=key)


class TestParseArgs:
    """Tests for command-line parsing."""

    def test_defaults(self):
        """No switches means a windowed, unseeded, quiet run."""
        args = snake_game.parse_args([])
        assert args.headless is False
        assert args.seed is None
        assert args.verbose is False

    def test_switches(self):
        """All switches are parsed."""
        args = snake_game.parse_args(["--headless", "--seed", "7", "--verbose"])
        assert args.headless is True
        assert args.seed == 7
        assert args.verbose is True

    def test_dummy_video_driver_means_headless(self, monkeypatch):
        """SDL_VIDEODRIVER=dummy turns on headless mode."""
        monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
        assert snake_game.is_headless(snake_game.parse_args([]))


class TestHandleEvents:
    """Tests for event forwarding."""

    def test_arrow_key_reaches_game(self):
        """Key presses are passed on to the game."""
        game = Game(10, 10)
        with patch("snake_game.pygame.event.get", return_value=[key_event(pygame.K_DOWN)]):
            assert snake_game.handle_events(game) is True
        assert game.snake.head_position() == (2, 3)

    def test_escape_quits(self):
        """Escape stops the loop."""
        game = Game(10, 10)
        with patch("snake_game.pygame.event.get", return_value=[key_event(pygame.K_ESCAPE)]):
            assert snake_game.handle_events(game) is False

    def test_window_close_quits(self):
        """Closing the window stops the loop."""
        game = Game(10, 10)
        quit_event = SimpleNamespace(type=pygame.QUIT)
        with patch("snake_game.pygame.event.get", return_value=[quit_event]):
            assert snake_game.handle_events(game) is False


class TestHeadlessRun:
    """Tests for running without a window."""

    def test_headless_main(self, monkeypatch, capsys):
        """A headless run plays a fixed number of frames and reports."""
        monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
        monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")

        game = snake_game.main(["--headless", "--seed", "3"])

        assert isinstance(game, Game)
        assert (game.width, game.height) == (snake_game.GRID_WIDTH, snake_game.GRID_HEIGHT)
        assert "Headless test complete" in capsys.readouterr().out
