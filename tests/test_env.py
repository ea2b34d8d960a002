import unittest

import numpy as np

from connectfour.game.env import ConnectFourEnv
from connectfour.utils import Player


class TestConnectFourEnv(unittest.TestCase):
    def setUp(self):
        self.env = ConnectFourEnv(render_mode="ascii")

    def tearDown(self):
        self.env.close()

    def test_given_reset_when_observing_then_empty_board_in_observation_space(self):
        observation, info = self.env.reset(seed=0)
        self.assertEqual(observation.shape, (6, 7))
        self.assertTrue(self.env.observation_space.contains(observation))
        self.assertEqual(info['valid_moves'], list(range(7)))
        self.assertEqual(info['current_player'], Player.ONE.value)
        self.assertEqual(info['game_result'], 'IN_PROGRESS')
        self.assertEqual(self.env.action_space.n, 7)

    def test_given_step_when_move_accepted_then_board_updates_and_turn_passes(self):
        self.env.reset()
        observation, reward, terminated, truncated, info = self.env.step(3)
        self.assertEqual(observation[5, 3], Player.ONE.value)
        self.assertEqual(reward, self.env.reward_step)
        self.assertFalse(terminated)
        self.assertFalse(truncated)
        self.assertEqual(info['current_player'], Player.TWO.value)
        self.assertEqual(info['last_move'], (5, 3))

    def test_given_vertical_four_when_player_one_completes_then_win_reward_and_terminated(self):
        self.env.reset()
        for action in [0, 1, 0, 1, 0, 1]:
            self.env.step(action)
        observation, reward, terminated, truncated, info = self.env.step(0)
        self.assertEqual(reward, self.env.reward_win)
        self.assertTrue(terminated)
        self.assertFalse(truncated)
        self.assertEqual(info['winner'], Player.ONE.value)
        self.assertEqual(sorted(info['winning_line']), [(2, 0), (3, 0), (4, 0), (5, 0)])

    def test_given_player_two_wins_when_stepping_then_lose_reward(self):
        self.env.reset()
        for action in [6, 0, 6, 0, 5, 0, 4]:
            self.env.step(action)
        _, reward, terminated, _, info = self.env.step(0)
        self.assertEqual(reward, self.env.reward_lose)
        self.assertTrue(terminated)
        self.assertEqual(info['game_result'], 'PLAYER_TWO_WIN')

    def test_given_full_column_when_stepping_then_invalid_move_truncates_without_change(self):
        self.env.reset()
        for _ in range(6):
            self.env.step(2)
        before = self.env.engine.get_state()
        observation, reward, terminated, truncated, info = self.env.step(2)
        self.assertEqual(reward, self.env.reward_invalid_move)
        self.assertFalse(terminated)
        self.assertTrue(truncated)
        self.assertTrue(info['invalid_move'])
        self.assertEqual(info['rejection'], 'COLUMN_FULL')
        np.testing.assert_array_equal(observation, before)

    def test_given_out_of_range_action_when_stepping_then_rejected_as_invalid_column(self):
        self.env.reset()
        _, _, _, truncated, info = self.env.step(9)
        self.assertTrue(truncated)
        self.assertEqual(info['rejection'], 'INVALID_COLUMN')

    def test_given_ascii_mode_when_rendering_then_board_string_returned(self):
        self.env.reset()
        self.env.step(1)
        text = self.env.render()
        self.assertIn("X", text)
        self.assertIsNone(ConnectFourEnv().render())

    def test_given_unknown_render_mode_when_constructing_then_value_error(self):
        with self.assertRaises(ValueError):
            ConnectFourEnv(render_mode="rgb_array")

    def test_given_small_board_when_constructing_then_spaces_follow_dimensions(self):
        env = ConnectFourEnv(rows=4, columns=5, win_length=3)
        observation, _ = env.reset()
        self.assertEqual(observation.shape, (4, 5))
        self.assertEqual(env.action_space.n, 5)


if __name__ == "__main__":
    unittest.main()
