#!/usr/bin/env python3
'''
Velocity motion model for a 2D vehicle:
    Robot state: [x, y, θ]
    Control: [v, ω] applied during Δt.
'''

import logging

import numpy as np

logger = logging.getLogger(__name__)

# Below this yaw rate the motion is treated as a straight line
YAW_RATE_EPSILON = 1e-5


class MotionModel():
    def __init__(self, rng=None):
        '''
        Initialize motion model with the generator used to draw process noise.
        '''
        self.rng = rng if rng is not None else np.random.default_rng()


    def sample_real_model_velocity(self, poses, delta_t, velocity, yaw_rate):
        '''
        Propagate poses through the motion model without noise.

        Input:
            poses: array of poses [x, y, θ].
                   Dimension: [N, 3].
            delta_t: elapsed time [s].
            velocity: linear velocity [m/s].
            yaw_rate: angular velocity [rad/s].
        Output:
            New [N, 3] array of poses.
        '''
        poses = np.asarray(poses, dtype=float).reshape(-1, 3)
        x = poses[:, 0]
        y = poses[:, 1]
        theta = poses[:, 2]
        # Avoid zero denominators
        if abs(yaw_rate) < YAW_RATE_EPSILON:
            x_est = x + velocity * delta_t * np.cos(theta)
            y_est = y + velocity * delta_t * np.sin(theta)
            theta_est = theta.copy()
        else:
            vw_ratio = velocity / yaw_rate
            theta_est = theta + yaw_rate * delta_t
            x_est = x + vw_ratio * (np.sin(theta_est) - np.sin(theta))
            y_est = y + vw_ratio * (np.cos(theta) - np.cos(theta_est))
        return np.column_stack((x_est, y_est, theta_est))


    def sample_motion_model_velocity(self, poses, delta_t, velocity, yaw_rate, std_pos):
        '''
        Propagate poses through the motion model and add zero-mean Gaussian
        process noise with per-axis standard deviations std_pos = [σx, σy, σθ].
        '''
        predicted = self.sample_real_model_velocity(poses, delta_t, velocity, yaw_rate)
        noise = self.rng.normal(0.0, std_pos, size=predicted.shape)
        logger.debug('Propagated %d poses: dt=%s v=%s yaw_rate=%s',
                     len(predicted), delta_t, velocity, yaw_rate)
        return predicted + noise


if __name__ == '__main__':
    pass
