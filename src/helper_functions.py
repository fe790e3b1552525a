#!/usr/bin/env python3
'''
Small geometric helpers shared by the filter and its callers.
'''

import math

import numpy as np


def dist(x1, y1, x2, y2):
    '''Euclidean distance between two 2D points.'''
    return math.hypot(x2 - x1, y2 - y1)


def normalize_angle(theta):
    '''Wrap an angle (or array of angles) into [-π, π).'''
    return (np.asarray(theta) + np.pi) % (2.0 * np.pi) - np.pi


def get_error(gt_x, gt_y, gt_theta, pf_x, pf_y, pf_theta):
    '''
    Absolute error between a ground-truth pose and an estimated pose.
    The heading error is the shortest angular distance, in [0, π].

    Output:
        numpy array [error_x, error_y, error_theta].
    '''
    error_x = abs(pf_x - gt_x)
    error_y = abs(pf_y - gt_y)
    error_theta = abs(float(normalize_angle(pf_theta - gt_theta)))
    return np.array([error_x, error_y, error_theta])
