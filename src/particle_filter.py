#!/usr/bin/env python3
'''
2D particle filter for localizing a vehicle on a map of known landmarks.

Each cycle the caller runs predict(), update_weights() and resample().
All randomness comes from one numpy Generator owned by the filter.
'''

import logging

import numpy as np

from filter_errors import (
    FilterConfigurationError,
    FilterDivergenceError,
    FilterNotInitializedError,
    )
from measurement_model import MeasurementModel
from motion_model import MotionModel
from particle import Particle
from resampling import RESAMPLERS, effective_sample_size

logger = logging.getLogger(__name__)

DEFAULT_NUM_PARTICLES = 100
DEFAULT_RESAMPLER = 'systematic'


def _check_std_pos(std_pos):
    std_pos = np.asarray(std_pos, dtype=float)
    if std_pos.shape != (3,):
        raise FilterConfigurationError(
            'std_pos must hold 3 values [x, y, theta], got %r' % (std_pos.tolist(),))
    if not np.all(np.isfinite(std_pos)) or np.any(std_pos < 0):
        raise FilterConfigurationError(
            'std_pos must be finite and non-negative, got %r' % (std_pos.tolist(),))
    return std_pos


class ParticleFilter():

    def __init__(self, num_particles=DEFAULT_NUM_PARTICLES, resampler=DEFAULT_RESAMPLER,
                 seed=None, rng=None):
        '''
        Input:
            num_particles: number of particles the filter tracks.
            resampler: name of the resampling scheme ('systematic' or 'multinomial').
            seed: seed for a new numpy Generator, ignored when rng is given.
            rng: numpy Generator used for every random draw.
        '''
        if isinstance(num_particles, bool) or not isinstance(num_particles, (int, np.integer))\
        or num_particles <= 0:
            raise FilterConfigurationError(
                'num_particles must be a positive integer, got %r' % (num_particles,))
        if resampler not in RESAMPLERS:
            raise FilterConfigurationError(
                'unknown resampler %r, expected one of %s' % (resampler, sorted(RESAMPLERS)))
        self.num_particles = int(num_particles)
        self.resampler = resampler
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.motion_model = MotionModel(self.rng)
        self.particles = []
        self._is_initialized = False

    def is_initialized(self):
        return self._is_initialized

    @property
    def initialized(self):
        return self._is_initialized

    def _require_initialized(self, operation):
        if not self._is_initialized:
            raise FilterNotInitializedError(
                '%s() called before initialize()' % operation)


    def initialize(self, x, y, theta, std_pos):
        '''
        Sample num_particles poses from a Gaussian centred on (x, y, θ) with
        per-axis standard deviations std_pos = [σx, σy, σθ]. All weights are
        set to 1. Calling it again discards the current population.
        '''
        std_pos = _check_std_pos(std_pos)
        xs = self.rng.normal(x, std_pos[0], self.num_particles)
        ys = self.rng.normal(y, std_pos[1], self.num_particles)
        thetas = self.rng.normal(theta, std_pos[2], self.num_particles)
        self.particles = [
            Particle(i, xs[i], ys[i], thetas[i], 1.0)
            for i in range(self.num_particles)
            ]
        if self._is_initialized:
            logger.info('Particle filter reinitialized, previous population discarded')
        self._is_initialized = True
        logger.info('Initialized %d particles around (%s, %s, %s) with std %s',
                    self.num_particles, x, y, theta, std_pos.tolist())


    def predict(self, delta_t, std_pos, velocity, yaw_rate):
        '''
        Move every particle with the velocity motion model and add process
        noise with standard deviations std_pos = [σx, σy, σθ].
        '''
        self._require_initialized('predict')
        std_pos = _check_std_pos(std_pos)
        if not np.isfinite(delta_t) or delta_t < 0:
            raise FilterConfigurationError('delta_t must be non-negative, got %r' % (delta_t,))
        if not np.isfinite(velocity) or not np.isfinite(yaw_rate):
            raise FilterConfigurationError(
                'velocity and yaw_rate must be finite, got %r, %r' % (velocity, yaw_rate))
        poses = np.array([particle.pose for particle in self.particles])
        poses = self.motion_model.sample_motion_model_velocity(
            poses,
            delta_t,
            velocity,
            yaw_rate,
            std_pos)
        for particle, (x, y, theta) in zip(self.particles, poses):
            particle.x = float(x)
            particle.y = float(y)
            particle.theta = float(theta)


    def update_weights(self, sensor_range, std_landmark, observations, map_landmarks):
        '''
        Weight every particle by the likelihood of the observations.

        Input:
            sensor_range: range [m] of the sensor.
            std_landmark: landmark measurement uncertainty [σx [m], σy [m]].
            observations: list of LandmarkObs in the vehicle frame.
            map_landmarks: Map() with the known landmarks.
        The log weights are shifted so that the most likely particle gets
        weight 1; only the ratios between weights are meaningful.
        Raises FilterDivergenceError if no particle keeps a finite likelihood.
        '''
        self._require_initialized('update_weights')
        if np.isnan(sensor_range) or sensor_range < 0:
            raise FilterConfigurationError(
                'sensor_range must be non-negative, got %r' % (sensor_range,))
        measurement_model = MeasurementModel(std_landmark)
        log_weights = np.empty(len(self.particles))
        matched = 0
        for i, particle in enumerate(self.particles):
            log_weights[i], count = measurement_model.compute_log_weight(
                particle,
                observations,
                map_landmarks,
                sensor_range)
            matched += count
        if len(observations) and matched == 0:
            logger.warning('No observation could be associated to a landmark within %s m',
                           sensor_range)

        finite = np.isfinite(log_weights)
        if not np.any(finite):
            for particle in self.particles:
                particle.weight = 0.0
            raise FilterDivergenceError(
                'no finite likelihood among %d particles after the update' % len(self.particles))
        max_log_weight = log_weights[finite].max()
        weights = np.zeros(len(self.particles))
        weights[finite] = np.exp(log_weights[finite] - max_log_weight)
        for particle, weight in zip(self.particles, weights):
            particle.weight = float(weight)
        logger.debug('Weighted %d particles: %d associations, max log weight %g',
                     len(self.particles), matched, max_log_weight)


    def resample(self):
        '''
        Replace the population by num_particles copies drawn with probability
        proportional to weight. The copies get sequential ids and weight 1.
        '''
        self._require_initialized('resample')
        indexes = RESAMPLERS[self.resampler](self.weights(), self.rng)
        new_particles = []
        for new_id, index in enumerate(indexes):
            particle = self.particles[index].copy(id=new_id)
            particle.weight = 1.0
            new_particles.append(particle)
        self.particles = new_particles
        logger.debug('Resampled %d particles from %d distinct parents',
                     len(new_particles), len(np.unique(indexes)))


    def weights(self):
        '''Snapshot of the particle weights as a numpy array.'''
        return np.array([particle.weight for particle in self.particles], dtype=float)

    def effective_sample_size(self):
        self._require_initialized('effective_sample_size')
        return effective_sample_size(self.weights())

    def best_particle(self):
        '''Particle with the highest weight (the first one on ties).'''
        self._require_initialized('best_particle')
        return self.particles[int(np.argmax(self.weights()))]

    def weighted_mean_pose(self):
        '''
        Weighted mean of the particle poses. The heading is averaged on the
        unit circle.
        '''
        self._require_initialized('weighted_mean_pose')
        weights = self.weights()
        total = weights.sum()
        if total <= 0.0:
            raise FilterDivergenceError('cannot average poses with zero total weight')
        weights = weights / total
        poses = np.array([particle.pose for particle in self.particles])
        x = float(np.dot(weights, poses[:, 0]))
        y = float(np.dot(weights, poses[:, 1]))
        theta = float(np.arctan2(np.dot(weights, np.sin(poses[:, 2])),
                                 np.dot(weights, np.cos(poses[:, 2]))))
        return x, y, theta


    @staticmethod
    def get_associations(particle):
        return ' '.join(str(landmark_id) for landmark_id in particle.associations)

    @staticmethod
    def get_sense_x(particle):
        return ' '.join(repr(float(x)) for x in particle.sense_x)

    @staticmethod
    def get_sense_y(particle):
        return ' '.join(repr(float(y)) for y in particle.sense_y)


if __name__ == "__main__":
    pass
