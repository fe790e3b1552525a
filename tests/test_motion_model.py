import numpy as np
import pytest

from motion_model import MotionModel, YAW_RATE_EPSILON


def test_straight_line_with_zero_yaw_rate(rng, zero_noise):
    model = MotionModel(rng)
    poses = model.sample_motion_model_velocity([[0.0, 0.0, 0.0]], 1.0, 1.0, 0.0, zero_noise)
    np.testing.assert_allclose(poses, [[1.0, 0.0, 0.0]])


def test_straight_line_follows_heading(rng):
    model = MotionModel(rng)
    poses = model.sample_real_model_velocity([[1.0, 1.0, np.pi / 2]], 2.0, 1.5, 0.0)
    np.testing.assert_allclose(poses, [[1.0, 4.0, np.pi / 2]], atol=1e-12)


def test_yaw_rate_below_threshold_is_straight(rng):
    model = MotionModel(rng)
    yaw_rate = YAW_RATE_EPSILON / 10
    poses = model.sample_real_model_velocity([[0.0, 0.0, 0.0]], 1.0, 1.0, yaw_rate)
    np.testing.assert_allclose(poses, [[1.0, 0.0, 0.0]])


def test_quarter_turn_matches_arc(rng, zero_noise):
    model = MotionModel(rng)
    yaw_rate = np.pi / 2
    poses = model.sample_motion_model_velocity([[0.0, 0.0, 0.0]], 1.0, 1.0, yaw_rate, zero_noise)
    # Radius v / ω, quarter circle to the left
    radius = 1.0 / yaw_rate
    np.testing.assert_allclose(poses, [[radius, radius, yaw_rate]], atol=1e-12)


def test_curved_motion_from_rotated_pose(rng):
    model = MotionModel(rng)
    x, y, theta = 2.0, -1.0, 0.3
    v, w, dt = 3.0, -0.4, 0.5
    poses = model.sample_real_model_velocity([[x, y, theta]], dt, v, w)
    expected = [
        x + v / w * (np.sin(theta + w * dt) - np.sin(theta)),
        y + v / w * (np.cos(theta) - np.cos(theta + w * dt)),
        theta + w * dt,
    ]
    np.testing.assert_allclose(poses[0], expected)


def test_poses_are_propagated_independently(rng):
    model = MotionModel(rng)
    poses = np.array([[0.0, 0.0, 0.0], [5.0, 5.0, np.pi]])
    propagated = model.sample_real_model_velocity(poses, 1.0, 1.0, 0.0)
    np.testing.assert_allclose(propagated, [[1.0, 0.0, 0.0], [4.0, 5.0, np.pi]], atol=1e-12)
    # Input untouched
    np.testing.assert_array_equal(poses, [[0.0, 0.0, 0.0], [5.0, 5.0, np.pi]])


def test_process_noise_has_requested_spread(rng):
    model = MotionModel(rng)
    poses = np.zeros((20000, 3))
    std_pos = [0.5, 0.2, 0.05]
    propagated = model.sample_motion_model_velocity(poses, 1.0, 0.0, 0.0, std_pos)
    np.testing.assert_allclose(propagated.mean(axis=0), [0.0, 0.0, 0.0], atol=0.02)
    np.testing.assert_allclose(propagated.std(axis=0), std_pos, rtol=0.05)


def test_same_seed_same_samples():
    first = MotionModel(np.random.default_rng(7)).sample_motion_model_velocity(
        np.zeros((5, 3)), 0.1, 2.0, 0.3, [0.3, 0.3, 0.01])
    second = MotionModel(np.random.default_rng(7)).sample_motion_model_velocity(
        np.zeros((5, 3)), 0.1, 2.0, 0.3, [0.3, 0.3, 0.01])
    np.testing.assert_array_equal(first, second)


@pytest.mark.parametrize("yaw_rate", [0.0, -0.0])
def test_zero_yaw_rate_never_divides(rng, yaw_rate):
    model = MotionModel(rng)
    poses = model.sample_real_model_velocity([[0.0, 0.0, 0.0]], 1.0, 1.0, yaw_rate)
    assert np.all(np.isfinite(poses))
