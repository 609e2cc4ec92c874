from __future__ import annotations

import numpy as np
import pytest

from blockfall.gym_env import Action, BlockfallEnv


def test_reset_returns_grid_observation() -> None:
    env = BlockfallEnv()
    obs, info = env.reset(seed=0)
    assert obs.shape == (22, 10)
    assert obs.dtype == np.uint8
    assert env.observation_space.contains(obs)
    assert int(np.count_nonzero(obs)) == 4
    assert info["score"] == 0
    assert info["level"] == 1


def test_hard_drop_action_scores_and_locks() -> None:
    env = BlockfallEnv()
    env.reset(seed=1)
    obs, reward, terminated, truncated, info = env.step(Action.HARD_DROP)
    assert reward >= 1.0
    assert info["pieces"] == 1
    assert not terminated
    assert not truncated
    assert env.observation_space.contains(obs)


def test_repeated_hard_drops_terminate() -> None:
    env = BlockfallEnv()
    env.reset(seed=2)
    terminated = False
    for _ in range(200):
        _, _, terminated, _, _ = env.step(Action.HARD_DROP)
        if terminated:
            break
    assert terminated
    assert env.state.is_over


def test_seeded_resets_are_deterministic() -> None:
    actions = [Action.LEFT, Action.ROTATE, Action.HARD_DROP, Action.RIGHT, Action.SOFT_DROP] * 6
    runs = []
    for _ in range(2):
        env = BlockfallEnv()
        obs, _ = env.reset(seed=123)
        frames = [obs]
        for action in actions:
            obs, *_ = env.step(action)
            frames.append(obs)
        runs.append(frames)
    for a, b in zip(*runs):
        assert np.array_equal(a, b)


def test_gravity_applies_on_noop_steps() -> None:
    env = BlockfallEnv(tick_ms=720)
    env.reset(seed=4)
    start = env.state.piece.position
    env.step(Action.NOOP)
    assert env.state.piece.position == (start[0] + 1, start[1])


def test_max_steps_truncates() -> None:
    env = BlockfallEnv(max_steps=3)
    env.reset(seed=5)
    results = [env.step(Action.NOOP)[3] for _ in range(3)]
    assert results == [False, False, True]


def test_render_returns_ascii_board() -> None:
    env = BlockfallEnv(render_mode="ansi")
    env.reset(seed=6)
    text = env.render()
    assert len(text.splitlines()) == 22


def test_use_before_reset_raises() -> None:
    env = BlockfallEnv()
    with pytest.raises(RuntimeError):
        env.step(Action.NOOP)


def test_invalid_tick_rejected() -> None:
    with pytest.raises(ValueError):
        BlockfallEnv(tick_ms=0)
