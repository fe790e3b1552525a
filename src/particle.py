#!/usr/bin/env python3
'''
Particle with robot pose, importance weight and the landmark associations
used in the last weighting pass.
'''

import copy


class Particle:
    def __init__(self, id, x, y, theta, weight=1.0):
        self.initialize(id, x, y, theta, weight)

    def initialize(self, id, x, y, theta, weight=1.0):
        self.id = id
        self.x = float(x)
        self.y = float(y)
        self.theta = float(theta)
        self.weight = float(weight)  # Relative likelihood, not normalized
        # Diagnostics only: matched landmark ids and map-frame sense coordinates
        self.associations = []
        self.sense_x = []
        self.sense_y = []

    @property
    def pose(self):
        return (self.x, self.y, self.theta)

    def set_associations(self, associations, sense_x, sense_y):
        '''
        Replace the association bookkeeping of the particle.

        Input:
            associations: ids of the landmarks matched to each observation.
            sense_x, sense_y: map-frame coordinates of those observations.
        '''
        if not len(associations) == len(sense_x) == len(sense_y):
            raise ValueError('associations, sense_x and sense_y differ in length')
        self.associations = list(associations)
        self.sense_x = list(sense_x)
        self.sense_y = list(sense_y)

    def copy(self, id=None):
        '''
        Independent copy of the particle, optionally with a new id.
        '''
        new_particle = copy.deepcopy(self)
        if id is not None:
            new_particle.id = id
        return new_particle

    def __repr__(self):
        return 'Particle(id=%r, x=%.4f, y=%.4f, theta=%.4f, weight=%.4g)' % (
            self.id, self.x, self.y, self.theta, self.weight)


if __name__ == '__main__':
    pass
