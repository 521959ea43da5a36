import numpy as np

from sdo_reader.components.coordinates import CoordinateSequence, ICoordinateSequenceFactory


class GeometryOps:

    @classmethod
    def signed_area(cls, ring: CoordinateSequence) -> float:
        # Shoelace formula over consecutive vertices; positive for counter-clockwise
        xy = ring.xy()
        x, y = xy[:, 0], xy[:, 1]
        return 0.5 * float(np.dot(x[:-1], y[1:]) - np.dot(x[1:], y[:-1]))

    @classmethod
    def is_clockwise(cls, ring: CoordinateSequence) -> bool:
        """
        Check ring orientation

        Args:
            ring: Closed ring coordinates

        Returns:
            True if the ring winds clockwise (negative signed area).
            Degenerate rings with zero area are not clockwise.
        """
        return cls.signed_area(ring) < 0

    @classmethod
    def rectangle_ring(
        cls,
        corners: CoordinateSequence,
        sequence_factory: ICoordinateSequenceFactory
    ) -> CoordinateSequence:
        """
        Expand two opposite corners into a closed axis-aligned ring

        The ring runs min, (max.x, min.y), max, (min.x, max.y), min. The two
        synthesised vertices keep only x and y; their other ordinates are NaN.

        Args:
            corners: Sequence holding exactly two coordinates
            sequence_factory: Factory for the new sequence

        Returns:
            Frozen five-coordinate ring
        """
        low = corners.coordinate(0)
        high = corners.coordinate(1)
        ring = sequence_factory.create(5, corners.dimension)

        vertices = [
            low,
            (high[0], low[1]),
            high,
            (low[0], high[1]),
            low,
        ]
        for index, vertex in enumerate(vertices):
            for ordinate, value in enumerate(vertex[:ring.dimension]):
                ring.set_ordinate(index, ordinate, value)

        return ring.freeze()
