import pytest

from build123_dovetail import Build123dKernel, GeometryKernel


@pytest.fixture
def kernel():
    return Build123dKernel()


class TestBuild123dKernel:
    def test_satisfies_protocol(self, kernel):
        assert isinstance(kernel, GeometryKernel)

    def test_box_at_origin(self, kernel):
        bbox = kernel.box(3, 4, 5).bounding_box()
        assert (bbox.min.X, bbox.min.Y, bbox.min.Z) == pytest.approx((0, 0, 0), abs=1e-4)
        assert (bbox.max.X, bbox.max.Y, bbox.max.Z) == pytest.approx((3, 4, 5), abs=1e-4)

    def test_extrude_square(self, kernel):
        solid = kernel.extrude([(0, 0), (2, 0), (2, 2), (0, 2)], 3)
        assert solid.volume == pytest.approx(12)
        assert solid.bounding_box().max.Z == pytest.approx(3, abs=1e-4)

    def test_transform_rotates_then_translates(self, kernel):
        solid = kernel.transform(kernel.box(1, 2, 3), rotation=(90, 0, 0), translation=(10, 0, 0))
        bbox = solid.bounding_box()
        # Y extent becomes Z and Z extent becomes -Y
        assert bbox.min.X == pytest.approx(10, abs=1e-4)
        assert bbox.min.Y == pytest.approx(-3, abs=1e-4)
        assert bbox.max.Z == pytest.approx(2, abs=1e-4)

    def test_transform_returns_copy(self, kernel):
        box = kernel.box(1, 1, 1)
        kernel.transform(box, translation=(5, 0, 0))
        assert box.bounding_box().min.X == pytest.approx(0, abs=1e-4)

    def test_mirror_about_plane(self, kernel):
        solid = kernel.mirror(kernel.box(1, 1, 2), 3)
        bbox = solid.bounding_box()
        assert bbox.min.Z == pytest.approx(4, abs=1e-4)
        assert bbox.max.Z == pytest.approx(6, abs=1e-4)

    def test_union_and_subtract(self, kernel):
        a = kernel.box(2, 2, 2)
        b = kernel.transform(kernel.box(2, 2, 2), translation=(1, 0, 0))
        assert kernel.union([a, b]).volume == pytest.approx(12)
        assert kernel.subtract(a, b).volume == pytest.approx(4)

    def test_union_of_nothing_raises(self, kernel):
        with pytest.raises(ValueError):
            kernel.union([])
