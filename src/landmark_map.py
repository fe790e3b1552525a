#!/usr/bin/env python3
'''
Landmark observations and the map of known landmarks.
'''

import numpy as np
from scipy.spatial import cKDTree


class LandmarkObs:
    '''
    Landmark observation. The coordinates are vehicle-relative when they come
    from the sensor and map-relative after a transform; id is None until the
    observation is associated to a map landmark.
    '''

    def __init__(self, x, y, id=None):
        self.id = id
        self.x = float(x)
        self.y = float(y)

    def __eq__(self, other):
        if not isinstance(other, LandmarkObs):
            return NotImplemented
        return self.id == other.id and self.x == other.x and self.y == other.y

    def __repr__(self):
        return 'LandmarkObs(id=%r, x=%.4f, y=%.4f)' % (self.id, self.x, self.y)


class SingleLandmark:
    '''Map landmark with a fixed map-frame position.'''

    __slots__ = ('id', 'x', 'y')

    def __init__(self, id, x, y):
        self.id = id
        self.x = float(x)
        self.y = float(y)

    def __repr__(self):
        return 'SingleLandmark(id=%r, x=%.4f, y=%.4f)' % (self.id, self.x, self.y)


class Map:
    def __init__(self, landmarks):
        '''
        Input:
            landmarks: iterable of SingleLandmark, or of (id, x, y) tuples.
        '''
        self.landmark_list = [
            landmark if isinstance(landmark, SingleLandmark) else SingleLandmark(*landmark)
            for landmark in landmarks
            ]
        self._positions = np.array(
            [[landmark.x, landmark.y] for landmark in self.landmark_list],
            dtype=float).reshape(-1, 2)
        self._tree = cKDTree(self._positions) if len(self.landmark_list) else None

    def __len__(self):
        return len(self.landmark_list)

    def __iter__(self):
        return iter(self.landmark_list)

    @property
    def positions(self):
        '''Landmark positions as a read-only [N, 2] array.'''
        positions = self._positions.view()
        positions.flags.writeable = False
        return positions

    def landmarks_in_range(self, x, y, sensor_range):
        '''
        Landmarks whose Euclidean distance to (x, y) is at most sensor_range,
        returned as predicted observations in map order.
        '''
        if self._tree is None:
            return []
        indexes = sorted(self._tree.query_ball_point([x, y], r=sensor_range))
        return [
            LandmarkObs(self.landmark_list[index].x, self.landmark_list[index].y,
                        self.landmark_list[index].id)
            for index in indexes
            ]


if __name__ == '__main__':
    pass
