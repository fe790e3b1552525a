#!/usr/bin/env python3
'''
Measurement model for landmark observations given as (x, y) positions in the
vehicle frame.
'''

import logging

import numpy as np
from scipy.spatial.distance import cdist

from filter_errors import FilterConfigurationError
from landmark_map import LandmarkObs

logger = logging.getLogger(__name__)


class MeasurementModel():
    def __init__(self, std_landmark):
        '''
        Input:
            std_landmark: landmark measurement uncertainty [σx [m], σy [m]].
        '''
        std_landmark = np.asarray(std_landmark, dtype=float)
        if std_landmark.shape != (2,):
            raise FilterConfigurationError(
                'std_landmark must hold 2 values, got %r' % (std_landmark.tolist(),))
        if not np.all(np.isfinite(std_landmark)) or np.any(std_landmark <= 0):
            raise FilterConfigurationError(
                'std_landmark must be finite and positive, got %r' % (std_landmark.tolist(),))
        self.std_x, self.std_y = std_landmark
        # Log normalizer of the bivariate Gaussian with diagonal covariance
        self.log_gauss_norm = -np.log(2.0 * np.pi * self.std_x * self.std_y)


    @staticmethod
    def transform(observations, x, y, theta):
        '''
        Rotate by θ and translate by (x, y) the observations, taking them from
        the vehicle frame of the pose (x, y, θ) to the map frame.
        '''
        cos_theta = np.cos(theta)
        sin_theta = np.sin(theta)
        return [
            LandmarkObs(x + obs.x * cos_theta - obs.y * sin_theta,
                        y + obs.x * sin_theta + obs.y * cos_theta,
                        obs.id)
            for obs in observations
            ]


    @staticmethod
    def inverse_transform(observations, x, y, theta):
        '''
        Inverse of transform(): take map-frame observations back to the
        vehicle frame of the pose (x, y, θ).
        '''
        cos_theta = np.cos(theta)
        sin_theta = np.sin(theta)
        local = []
        for obs in observations:
            dx = obs.x - x
            dy = obs.y - y
            local.append(LandmarkObs(dx * cos_theta + dy * sin_theta,
                                     -dx * sin_theta + dy * cos_theta,
                                     obs.id))
        return local


    @staticmethod
    def data_association(predicted, observations):
        '''
        Nearest-neighbour association. The id of each observation is set to
        the id of the closest predicted landmark; on equal distances the first
        landmark in predicted wins.

        An observation cannot be matched when predicted is empty. Its id is
        left as None and it does not take part in the weight, so a particle
        with no landmark in range keeps a likelihood factor of 1 instead of 0.

        Output:
            Index in predicted of the match of each observation, or None.
        '''
        if len(predicted) == 0:
            for obs in observations:
                obs.id = None
            return [None] * len(observations)
        if len(observations) == 0:
            return []
        obs_xy = np.array([[obs.x, obs.y] for obs in observations])
        pred_xy = np.array([[pred.x, pred.y] for pred in predicted])
        nearest = np.argmin(cdist(obs_xy, pred_xy), axis=1)
        for obs, index in zip(observations, nearest):
            obs.id = predicted[index].id
        return [int(index) for index in nearest]


    def multivariate_gaussian_probability(self, prediction, observation):
        '''
        Density of observation under a bivariate Gaussian centred on the
        associated landmark with covariance diag(σx², σy²).
        '''
        return np.exp(self.log_multivariate_gaussian_probability(prediction, observation))


    def log_multivariate_gaussian_probability(self, prediction, observation):
        '''Log density of observation, computed without going through exp().'''
        dx = observation.x - prediction.x
        dy = observation.y - prediction.y
        exponent = (dx ** 2) / (2.0 * self.std_x ** 2) + (dy ** 2) / (2.0 * self.std_y ** 2)
        return self.log_gauss_norm - exponent


    def compute_log_weight(self, particle, observations, map_landmarks, sensor_range):
        '''
        Log importance weight of one particle: sum of the log densities of
        all associated observations, so long scans or tight σ cannot
        underflow or overflow. Overwrites the association bookkeeping of the
        particle; the weight itself is written by the filter once the whole
        population is scored.

        Input:
            particle: Particle() object to be updated.
            observations: list of LandmarkObs in the vehicle frame.
            map_landmarks: Map() with the known landmarks.
            sensor_range: range [m] of the sensor.
        Output:
            (log_weight, number of observations that were associated).
            log_weight is 0 when nothing was associated.
        '''
        transformed = self.transform(observations, particle.x, particle.y, particle.theta)
        predicted = map_landmarks.landmarks_in_range(particle.x, particle.y, sensor_range)
        matches = self.data_association(predicted, transformed)

        log_weight = 0.0
        associations = []
        sense_x = []
        sense_y = []
        for obs, index in zip(transformed, matches):
            if index is None:
                continue
            log_weight += self.log_multivariate_gaussian_probability(predicted[index], obs)
            associations.append(obs.id)
            sense_x.append(obs.x)
            sense_y.append(obs.y)

        particle.set_associations(associations, sense_x, sense_y)
        return float(log_weight), len(associations)


if __name__ == '__main__':
    pass
