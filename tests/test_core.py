"""
Unit tests for core module.
"""
import pytest

from godiagram.core import (
    Point, BoundingBox, BoardPt, EdgeLabel,
    Rotation, Flip, BoardRegion, Color,
    GoDiagramError, MissingSizeError, OutOfBoundsRotationError,
    InvalidCoordLengthError, InvalidRectangleError, ParseError,
    InvalidEnumLiteralError, PointNotFoundError,
    coord_to_string, point_arr_from_sgf_prop, in_bounds, out_bounds,
)

SIZES = (9, 13, 19)
ROTATIONS = tuple(Rotation)


def test_point_string_key():
    """Test point string conversion and parsing."""
    pt = Point(12, 3)
    assert pt.to_string() == "12,3"
    assert str(pt) == "12,3"
    assert coord_to_string(12, 3) == "12,3"

    assert Point.from_string("12,3") == pt
    assert Point.from_string("-9,9") == Point(-9, 9)


@pytest.mark.parametrize("text", ["", "abc", "1,2,3", "1,", "1.5,2", "x,y"])
def test_point_from_string_malformed(text):
    """Malformed point strings raise ParseError."""
    with pytest.raises(ParseError):
        Point.from_string(text)


def test_point_equality_and_hash():
    """Points are structural values."""
    assert Point(3, 4) == Point(3, 4)
    assert Point(3, 4) != Point(4, 3)
    assert len({Point(1, 1), Point(1, 1), Point(2, 1)}) == 2


def test_translate():
    """Test translation returns a new point."""
    pt = Point(3, 4)
    moved = pt.translate(2, -1)
    assert moved == Point(5, 3)
    assert pt == Point(3, 4)


def test_normalize():
    """Normalization centers the board with y pointing up."""
    assert Point(0, 0).normalize(19) == Point(-9, 9)
    assert Point(9, 9).normalize(19) == Point(0, 0)
    assert Point(18, 18).normalize(19) == Point(9, -9)
    # Integral results keep canonical int keys
    assert Point(0, 0).normalize(19).to_string() == "-9,9"


def test_normalize_denormalize_inverse():
    """denormalize(normalize(p)) == p for every point and size."""
    for size in SIZES + (10,):
        for x in range(size):
            for y in range(size):
                pt = Point(x, y)
                assert pt.normalize(size).denormalize(size) == pt


@pytest.mark.parametrize("size", [0, None])
def test_missing_size(size):
    """Size-dependent transforms need a size."""
    pt = Point(1, 1)
    with pytest.raises(MissingSizeError):
        pt.normalize(size)
    with pytest.raises(MissingSizeError):
        pt.denormalize(size)
    with pytest.raises(MissingSizeError):
        pt.flip_vert(size)
    with pytest.raises(MissingSizeError):
        pt.flip_horz(size)
    with pytest.raises(MissingSizeError):
        pt.rotate(size, Rotation.CLOCKWISE_90)
    with pytest.raises(MissingSizeError):
        pt.antirotate(size, Rotation.CLOCKWISE_90)


def test_rotate_corners():
    """Clockwise rotation moves the top-left corner around the board."""
    origin = Point(0, 0)
    assert origin.rotate(19, Rotation.CLOCKWISE_90) == Point(18, 0)
    assert origin.rotate(19, Rotation.CLOCKWISE_180) == Point(18, 18)
    assert origin.rotate(19, Rotation.CLOCKWISE_270) == Point(0, 18)


def test_rotate_interior_point():
    """Test rotation of an off-center point."""
    pt = Point(1, 2)
    assert pt.rotate(19, Rotation.CLOCKWISE_90) == Point(16, 1)
    assert pt.rotate(19, Rotation.CLOCKWISE_180) == Point(17, 16)
    assert pt.rotate(19, Rotation.CLOCKWISE_270) == Point(2, 17)


def test_rotate_even_board():
    """Even sizes rotate through half-integer centers and back to ints."""
    rotated = Point(0, 0).rotate(10, Rotation.CLOCKWISE_90)
    assert rotated == Point(9, 0)
    assert rotated.to_string() == "9,0"


def test_rotate_noop_cases():
    """NO_ROTATION and negative sizes return the point itself."""
    pt = Point(3, 3)
    assert pt.rotate(19, Rotation.NO_ROTATION) is pt
    assert pt.rotate(19, None) is pt
    assert pt.rotate(-1, Rotation.CLOCKWISE_90) is pt


def test_rotate_out_of_bounds_x():
    """Rotating a point whose x is off the board fails."""
    with pytest.raises(OutOfBoundsRotationError):
        Point(19, 0).rotate(19, Rotation.CLOCKWISE_90)
    with pytest.raises(OutOfBoundsRotationError):
        Point(-1, 0).rotate(19, Rotation.CLOCKWISE_90)


def test_rotate_out_of_bounds_y():
    """Both axes are bounds-checked, not only x."""
    with pytest.raises(OutOfBoundsRotationError):
        Point(0, 19).rotate(19, Rotation.CLOCKWISE_90)
    with pytest.raises(OutOfBoundsRotationError):
        Point(3, -1).rotate(19, Rotation.CLOCKWISE_270)


def test_rotate_antirotate_inverse():
    """antirotate undoes rotate for every point, size and rotation."""
    for size in SIZES:
        for rotation in ROTATIONS:
            for x in range(size):
                for y in range(size):
                    pt = Point(x, y)
                    rotated = pt.rotate(size, rotation)
                    assert rotated.antirotate(size, rotation) == pt


def test_rotate_composition():
    """Four quarter turns are the identity."""
    pt = Point(2, 5)
    out = pt
    for _ in range(4):
        out = out.rotate(13, Rotation.CLOCKWISE_90)
    assert out == pt
    assert (pt.rotate(13, Rotation.CLOCKWISE_90).rotate(13, Rotation.CLOCKWISE_90)
            == pt.rotate(13, Rotation.CLOCKWISE_180))


def test_flips():
    """Test vertical and horizontal flips."""
    pt = Point(2, 3)
    assert pt.flip_vert(9) == Point(2, 5)
    assert pt.flip_horz(9) == Point(6, 3)
    assert Point(0, 0).flip_horz(19) == Point(18, 0)
    assert Point(0, 0).flip_vert(19) == Point(0, 18)


def test_flip_involution():
    """Flipping twice is the identity."""
    for size in SIZES:
        for x in range(size):
            for y in range(size):
                pt = Point(x, y)
                assert pt.flip_vert(size).flip_vert(size) == pt
                assert pt.flip_horz(size).flip_horz(size) == pt


def test_sgf_coord():
    """Test SGF coordinate conversion."""
    assert Point(0, 1).to_sgf_coord() == "ab"
    assert Point(12, 2).to_sgf_coord() == "mc"
    assert Point.from_sgf_coord("mc") == Point(12, 2)
    assert Point(26, 51).to_sgf_coord() == "AZ"


def test_sgf_coord_round_trip():
    """from_sgf_coord inverts to_sgf_coord over [0, 52)."""
    for x in range(52):
        for y in range(52):
            pt = Point(x, y)
            assert Point.from_sgf_coord(pt.to_sgf_coord()) == pt


def test_sgf_coord_errors():
    """Test SGF coordinate validation."""
    with pytest.raises(InvalidCoordLengthError):
        Point.from_sgf_coord("abc")
    with pytest.raises(InvalidCoordLengthError):
        Point.from_sgf_coord("a")
    with pytest.raises(ParseError):
        Point.from_sgf_coord("a!")
    with pytest.raises(ParseError):
        Point(52, 0).to_sgf_coord()
    with pytest.raises(ParseError):
        Point(-1, 0).to_sgf_coord()


def test_point_arr_single():
    """A two-letter value is a single point."""
    assert point_arr_from_sgf_prop("ab") == [Point(0, 1)]


def test_point_arr_rectangle():
    """Rectangles expand row-major, inclusive."""
    assert point_arr_from_sgf_prop("aa:bc") == [
        Point(0, 0), Point(1, 0),
        Point(0, 1), Point(1, 1),
        Point(0, 2), Point(1, 2),
    ]
    assert point_arr_from_sgf_prop("cc:cc") == [Point(2, 2)]


@pytest.mark.parametrize("text", ["a", "", "aa:bb:cc", "aabb", "cc:aa", "ac:ba", "ca:ab"])
def test_point_arr_invalid(text):
    """Malformed or inverted rectangles are rejected."""
    with pytest.raises(InvalidRectangleError):
        point_arr_from_sgf_prop(text)


def test_bounds_helpers():
    """Test in/out of bounds checks."""
    assert in_bounds(0, 19)
    assert in_bounds(18, 19)
    assert not in_bounds(19, 19)
    assert not in_bounds(-1, 19)
    assert out_bounds(19, 19)
    assert out_bounds(-1, 19)
    assert not out_bounds(5, 19)


def test_rotation_enum():
    """Test Rotation parsing and inverses."""
    assert Rotation.from_string("CLOCKWISE_90") is Rotation.CLOCKWISE_90
    assert Rotation.CLOCKWISE_90.inverse() is Rotation.CLOCKWISE_270
    assert Rotation.CLOCKWISE_270.inverse() is Rotation.CLOCKWISE_90
    assert Rotation.CLOCKWISE_180.inverse() is Rotation.CLOCKWISE_180
    assert Rotation.NO_ROTATION.inverse() is Rotation.NO_ROTATION
    assert len(Rotation) == 4

    with pytest.raises(InvalidEnumLiteralError):
        Rotation.from_string("CLOCKWISE_45")


def test_board_region_enum():
    """Test BoardRegion classification helpers."""
    assert BoardRegion.from_string("TOP_LEFT") is BoardRegion.TOP_LEFT
    assert BoardRegion.TOP_LEFT.is_corner
    assert not BoardRegion.TOP_LEFT.is_side
    assert BoardRegion.LEFT.is_side
    assert not BoardRegion.ALL.is_corner
    assert not BoardRegion.ALL.is_side

    with pytest.raises(InvalidEnumLiteralError):
        BoardRegion.from_string("MIDDLE")


def test_color_enum():
    """Test Color parsing and opposites."""
    assert Color.from_string("BLACK") is Color.BLACK
    assert Color.from_string("EMPTY") is Color.EMPTY
    assert Color.BLACK.opposite() is Color.WHITE
    assert Color.WHITE.opposite() is Color.BLACK
    assert Color.EMPTY.opposite() is Color.EMPTY

    with pytest.raises(InvalidEnumLiteralError):
        Color.from_string("black")


def test_error_hierarchy():
    """Errors share a base class and specialize builtins."""
    for err in (MissingSizeError, OutOfBoundsRotationError, InvalidCoordLengthError,
                InvalidRectangleError, ParseError, InvalidEnumLiteralError):
        assert issubclass(err, GoDiagramError)
        assert issubclass(err, ValueError)
    assert issubclass(PointNotFoundError, KeyError)
    assert issubclass(PointNotFoundError, GoDiagramError)
    assert Flip.NO_FLIP is not Flip.VERTICAL


def test_bounding_box():
    """Test BoundingBox geometry."""
    bbox = BoundingBox(Point(2, 3), Point(5, 4))
    assert bbox.width == 4
    assert bbox.height == 2
    assert bbox.contains(Point(2, 3))
    assert bbox.contains(Point(5, 4))
    assert not bbox.contains(Point(6, 4))
    assert bbox.points() == [
        Point(2, 3), Point(3, 3), Point(4, 3), Point(5, 3),
        Point(2, 4), Point(3, 4), Point(4, 4), Point(5, 4),
    ]

    expanded = bbox.expand(1)
    assert expanded == BoundingBox(Point(1, 2), Point(6, 5))

    full = BoundingBox.full_board(19)
    assert full.width == 19
    assert full.height == 19


def test_bounding_box_from_points():
    """Test BoundingBox construction from points."""
    bbox = BoundingBox.from_points([Point(4, 1), Point(2, 7), Point(3, 3)])
    assert bbox.top_left == Point(2, 1)
    assert bbox.bot_right == Point(4, 7)

    with pytest.raises(ValueError):
        BoundingBox.from_points([])


def test_bounding_box_inverted():
    """Inverted corners are rejected."""
    with pytest.raises(InvalidRectangleError):
        BoundingBox(Point(5, 5), Point(4, 6))
    with pytest.raises(InvalidRectangleError):
        BoundingBox(Point(5, 5), Point(6, 4))


def test_geometry_records():
    """BoardPt / EdgeLabel are plain values."""
    bpt = BoardPt(int_pt=Point(0, 0), coord_pt=Point(10, 10))
    assert bpt == BoardPt(Point(0, 0), Point(10, 10))
    label = EdgeLabel(label="A", coord_pt=Point(30, 10))
    assert label.label == "A"


if __name__ == "__main__":
    print("Running core module tests...")
    test_point_string_key()
    print("✓ Point string test passed")
    test_normalize_denormalize_inverse()
    print("✓ Normalize inverse test passed")
    test_rotate_antirotate_inverse()
    print("✓ Rotation inverse test passed")
    test_flip_involution()
    print("✓ Flip involution test passed")
    test_sgf_coord_round_trip()
    print("✓ SGF round trip test passed")
