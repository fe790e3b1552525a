#!/usr/bin/env python3
'''
Resampling schemes. Each scheme takes the (not necessarily normalized)
weights of a population and returns the indexes of the particles to copy
into the next population.
'''

import numpy as np

from filter_errors import FilterDivergenceError


def normalize_weights(weights):
    '''
    Normalize weights so that they sum to 1.
    Raises FilterDivergenceError when the weights hold no probability mass.
    '''
    weights = np.asarray(weights, dtype=float)
    if np.any(weights < 0):
        raise ValueError('weights must be non-negative')
    total = weights.sum()
    if not np.isfinite(total) or total <= 0.0:
        raise FilterDivergenceError(
            'cannot resample %d particles with total weight %r' % (len(weights), total))
    return weights / total


def systematic_resample(weights, rng):
    '''
    Low-variance resampling: a single uniform offset in [0, 1/N) and N
    equally spaced pointers into the cumulative weight distribution.
    '''
    normalized = normalize_weights(weights)
    count = len(normalized)
    cumulative = np.cumsum(normalized)
    pointers = (rng.random() + np.arange(count)) / count
    indexes = np.searchsorted(cumulative, pointers, side='right')
    # Rounding can leave the cumulative sum slightly below 1
    return np.minimum(indexes, np.flatnonzero(normalized)[-1])


def multinomial_resample(weights, rng):
    '''
    Draw N independent indexes with probability proportional to weight.
    '''
    normalized = normalize_weights(weights)
    count = len(normalized)
    return rng.choice(count, count, replace=True, p=normalized)


def effective_sample_size(weights):
    '''
    1 / Σ w², computed on normalized weights. Equals N for uniform weights
    and 1 when a single particle holds all the weight.
    '''
    normalized = normalize_weights(weights)
    return 1.0 / np.sum(normalized ** 2)


RESAMPLERS = {
    'systematic': systematic_resample,
    'multinomial': multinomial_resample,
}
