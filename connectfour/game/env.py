"""
env.py - Gymnasium environment adapter for Connect Four

ConnectFourEnv drives a GameEngine through the standard Gymnasium
reset/step interface so the game can be played headlessly by scripts.
Both players act through step(); rewards are given from player ONE's
point of view.
"""

from typing import Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from connectfour.debug import debug
from connectfour.game.engine import GameEngine
from connectfour.game.outcome import MoveResult
from connectfour.utils import ROWS, COLS, CONNECT_N, Player, GameStatus


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Observations are the board grid (0 empty, 1 player ONE, 2 player TWO).
    A rejected action leaves the board unchanged and truncates the episode.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None, rows: int = ROWS,
                 columns: int = COLS, win_length: int = CONNECT_N):
        """
        Initialize the environment.

        Args:
            render_mode: 'ascii' to return the board from render(), 'human' to print it
            rows, columns, win_length: Engine settings
        """
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        debug.debug("Initializing ConnectFourEnv", "env")
        self.engine = GameEngine(rows=rows, columns=columns, win_length=win_length)
        self.render_mode = render_mode

        self.action_space = spaces.Discrete(columns)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(rows, columns), dtype=np.int8
        )

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = 0.0

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Reset the environment to an empty board.

        Returns:
            Initial observation and info dictionary
        """
        super().reset(seed=seed)
        self.engine.reset()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Drop a token for the player whose turn it is.

        Args:
            action: Column index

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        result = self.engine.drop_token(action)

        if not result.accepted:
            debug.warning(f"Invalid action {action!r}: {result.outcome.name}", "env")
            info = self._get_info(result)
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = result.is_game_over
        if result.status == GameStatus.PLAYER_ONE_WIN:
            reward = self.reward_win
        elif result.status == GameStatus.PLAYER_TWO_WIN:
            reward = self.reward_lose
        elif result.status == GameStatus.DRAW:
            reward = self.reward_draw

        if terminated:
            debug.info(f"Episode finished: {result.status.name}", "env")

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info(result)

    def render(self) -> Optional[str]:
        """Render the board according to render_mode."""
        if self.render_mode == "ascii":
            return self.engine.render()
        if self.render_mode == "human":
            print(self.engine.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.engine.get_state()

    def _get_info(self, result: Optional[MoveResult] = None) -> Dict:
        valid_moves = self.engine.get_valid_moves()
        info = {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.engine.current_player.value,
            'game_result': self.engine.status.name,
            'winner': (self.engine.winner or Player.EMPTY).value,
            'moves_made': len(self.engine.moves_made),
            'winning_line': list(self.engine.winning_line),
            'last_move': self.engine.last_move,
        }
        if result is not None and not result.accepted:
            info['rejection'] = result.outcome.name
        return info

    def close(self):
        pass

