#!/usr/bin/env python3
'''
Exceptions raised by the particle filter.
'''


class ParticleFilterError(Exception):
    '''Base class for every error raised by the filter.'''


class FilterConfigurationError(ParticleFilterError, ValueError):
    '''A parameter (particle count, standard deviation, range) is invalid.'''


class FilterNotInitializedError(ParticleFilterError, RuntimeError):
    '''An operation was called before initialize().'''


class FilterDivergenceError(ParticleFilterError, RuntimeError):
    '''
    Every particle weight is zero, so the weights no longer describe a
    distribution that can be resampled. The caller decides whether to
    reinitialize the filter.
    '''
